"""
Tests for the unit registry.
"""

import unittest
from fractions import Fraction

from dimkit.unit import default_registry, degC, m
from dimkit.unit.dimension import LENGTH, TEMPERATURE, DimensionTag
from dimkit.unit.errors import RegistrationError, UnknownUnitError
from dimkit.unit.registry import UnitRegistry


class TestUnitRegistry(unittest.TestCase):
    """Test UnitRegistry registration and lookup."""

    def setUp(self):
        """Set up an isolated registry."""
        self.registry = UnitRegistry.with_standard_dimensions()
        self.furlong = self.registry.register("furlong", LENGTH, "201.168")

    def test_register_returns_tag(self):
        """Test that registration hands back the stored unit tag."""
        self.assertIs(self.registry["furlong"], self.furlong)
        self.assertIs(self.registry.get("furlong"), self.furlong)
        self.assertEqual(self.furlong.atomic.name, "furlong")

    def test_exact_decimal_factor(self):
        """Test that a decimal string factor is stored exactly."""
        self.assertEqual(self.furlong.scale, Fraction("201.168"))

    def test_dimension_tag_accepted(self):
        """Test registering with a DimensionTag instead of a base dimension."""
        area = DimensionTag.of(LENGTH, 2)
        acre = self.registry.register("acre", area, "4046.8564224")
        self.assertEqual(acre.dimension, area)

    def test_duplicate_symbol(self):
        """Test that a symbol can only be registered once."""
        with self.assertRaises(RegistrationError):
            self.registry.register("furlong", LENGTH, 200)

    def test_unknown_symbol(self):
        """Test lookup of an unregistered symbol."""
        with self.assertRaises(UnknownUnitError):
            self.registry["parsec"]
        with self.assertRaises(KeyError):
            self.registry["parsec"]
        self.assertIsNone(self.registry.get("parsec"))

    def test_sealed_registry(self):
        """Test that a sealed registry refuses registration."""
        self.registry.seal()
        self.assertTrue(self.registry.sealed)
        with self.assertRaises(RegistrationError):
            self.registry.register("chain", LENGTH, "20.1168")
        with self.assertRaises(RegistrationError):
            self.registry.register_dimension("Q", "charge")

    def test_reference_factor(self):
        """Test that a reference unit must have factor one."""
        with self.assertRaises(RegistrationError):
            self.registry.register("m2", LENGTH, 2, reference=True)
        ref = self.registry.register("meter", LENGTH, 1, reference=True)
        self.assertIs(self.registry.reference_unit(DimensionTag.of(LENGTH)), ref)

    def test_offset_rejected_for_linear_dimension(self):
        """Test that offsets are only accepted for temperature."""
        with self.assertRaises(RegistrationError):
            self.registry.register("shifted", LENGTH, 1, offset=5)
        kelvin = self.registry.register("kelvin", TEMPERATURE, 1, offset=0)
        self.assertTrue(kelvin.is_affine)

    def test_zero_factor(self):
        """Test that zero factors are rejected."""
        with self.assertRaises(RegistrationError):
            self.registry.register("nothing", LENGTH, 0)

    def test_container_protocol(self):
        """Test membership, length and iteration."""
        self.assertIn("furlong", self.registry)
        self.assertNotIn("m", self.registry)
        self.assertEqual(len(self.registry), 1)
        self.assertEqual(list(self.registry), ["furlong"])

    def test_logs_registration(self):
        """Test that registration is logged at debug level."""
        with self.assertLogs("dimkit.unit.registry", level="DEBUG") as logs:
            self.registry.register("league", LENGTH, 4828)
        self.assertIn("league", logs.output[0])


class TestDimensionRegistration(unittest.TestCase):
    """Test base dimension registration."""

    def setUp(self):
        """Set up an isolated registry."""
        self.registry = UnitRegistry.with_standard_dimensions()

    def test_standard_dimensions(self):
        """Test that the standard dimensions are present."""
        self.assertIs(self.registry.dimension("L"), LENGTH)
        self.assertTrue(self.registry.dimension("Θ").affine)

    def test_register_dimension(self):
        """Test registering and using a new base dimension."""
        info = self.registry.register_dimension("B", "information")
        bit = self.registry.register("bit", info, 1, reference=True)
        byte = self.registry.register("byte", info, 8)
        self.assertEqual((1 * byte).to(bit), 8)

    def test_duplicate_dimension(self):
        """Test that dimension symbols are unique."""
        with self.assertRaises(RegistrationError):
            self.registry.register_dimension("L", "lines")

    def test_unknown_dimension(self):
        """Test lookup of an unregistered dimension."""
        with self.assertRaises(UnknownUnitError):
            self.registry.dimension("X")


class TestDefaultRegistry(unittest.TestCase):
    """Test the process-wide catalog."""

    def test_catalog_registered(self):
        """Test that catalog units are present in the default registry."""
        self.assertIs(default_registry["m"], m)
        self.assertIs(default_registry["°C"], degC)
        for symbol in ("km", "inch", "kg", "h", "A", "rad", "°", "K", "°F", "°Ra", "μm"):
            self.assertIn(symbol, default_registry)

    def test_reference_units(self):
        """Test that every catalog dimension has a reference unit."""
        self.assertIs(default_registry.reference_unit(m.dimension), m)
        self.assertIsNotNone(default_registry.reference_unit(degC.dimension))


if __name__ == '__main__':
    unittest.main()
