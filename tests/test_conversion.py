"""
Tests for the conversion engine.
"""

import math
import unittest
from fractions import Fraction

import numpy as np

from dimkit.unit import (
    DimensionMismatch,
    K,
    Quantity,
    cm,
    conversion_factor,
    convert,
    deg,
    degC,
    degF,
    degRa,
    ft,
    g,
    inch,
    kg,
    km,
    m,
    rad,
    s,
    μm,
)


class TestLinearConversion(unittest.TestCase):
    """Test conversion between linear units."""

    def test_exact_rational_result(self):
        """Test that exact inputs give an exact Fraction."""
        q = convert(1 * inch, cm)
        self.assertEqual(q.value, Fraction(127, 50))
        self.assertEqual(q.unit, cm)

    def test_integral_result_stays_int(self):
        """Test that an int input with an integral result returns an int."""
        self.assertEqual((1 * km).to(m), 1000)
        self.assertIsInstance((1 * km).to(m), int)
        self.assertEqual((3 * ft).to(inch), 36)
        self.assertIsInstance((3 * ft).to(inch), int)

    def test_fractional_power_exact(self):
        """Test that fractional powers with rational roots convert exactly."""
        q = convert(3 * cm ** Fraction(1, 2), m ** Fraction(1, 2))
        self.assertEqual(q.value, Fraction(3, 10))
        self.assertEqual(conversion_factor(m ** Fraction(1, 2), cm ** Fraction(1, 2)), 10)

    def test_float_input(self):
        """Test that a float magnitude converts in floating point."""
        self.assertEqual((2.54 * cm).to(inch), 1.0)
        self.assertIsInstance((1.0 * km).to(m), float)

    def test_conversion_factor(self):
        """Test the linear factor between units."""
        self.assertEqual(conversion_factor(km, m), 1000)
        self.assertEqual(conversion_factor(inch, cm), Fraction(127, 50))
        self.assertAlmostEqual(conversion_factor(deg, rad), math.pi / 180)

    def test_round_trip_exact(self):
        """Test that exact round trips are equal."""
        q = Fraction(7, 3) * km
        self.assertEqual(q.as_unit(ft).as_unit(km), q)
        self.assertEqual(q.as_unit(ft).as_unit(km).value, Fraction(7, 3))

    def test_commutes_with_addition(self):
        """Test that converting before adding gives the same sum."""
        a, b = 1 * m, 2 * cm
        self.assertEqual(convert(a, b.unit) + b, a + b)

    def test_dimension_mismatch(self):
        """Test that conversion across dimensions raises."""
        with self.assertRaises(DimensionMismatch):
            convert(1 * m, s)
        with self.assertRaises(DimensionMismatch):
            (1 * kg).to(m)

    def test_identity(self):
        """Test that converting to the same unit returns the input."""
        q = 3 * m
        self.assertIs(convert(q, m), q)
        self.assertIs(q.as_unit(m), q)

    def test_bare_unit_source(self):
        """Test that a bare unit converts as one of that unit."""
        self.assertEqual(convert(kg, g), Quantity(1000, g))

    def test_bare_number(self):
        """Test that bare numbers only convert to dimensionless units."""
        self.assertAlmostEqual(convert(math.pi, deg).value, 180.0)
        with self.assertRaises(DimensionMismatch):
            convert(1, m)

    def test_invalid_target(self):
        """Test that the target must be a unit."""
        with self.assertRaises(TypeError):
            convert(1 * m, 1 * m)

    def test_array_magnitude(self):
        """Test conversion of an array magnitude."""
        q = convert(Quantity([1, 2, 3], km), m)
        np.testing.assert_array_equal(q.value, [1000.0, 2000.0, 3000.0])
        self.assertEqual(q.unit, m)


class TestTemperatureConversion(unittest.TestCase):
    """Test the affine temperature path."""

    def test_celsius_to_fahrenheit(self):
        """Test that 0 °C is exactly 32 °F."""
        q = convert(0 * degC, degF)
        self.assertEqual(q.value, 32)
        self.assertIsInstance(q.value, int)
        self.assertEqual(q.unit, degF)

    def test_fahrenheit_to_celsius(self):
        """Test that 212 °F is exactly 100 °C."""
        self.assertEqual((212 * degF).to(degC), 100)
        self.assertAlmostEqual((212.0 * degF).to(degC), 100.0)

    def test_crossover(self):
        """Test that -40 is the same on both scales."""
        self.assertEqual((-40 * degC).to(degF), -40)

    def test_kelvin(self):
        """Test conversions to and from kelvin."""
        self.assertEqual((0 * K).to(degC), Fraction("-273.15"))
        self.assertEqual((Fraction("273.15") * K).to(degC), 0)

    def test_rankine(self):
        """Test the Rankine scale."""
        self.assertEqual((100 * K).to(degRa), 180)
        self.assertAlmostEqual((4.2 * K).to(degRa), 7.56)

    def test_compound_units_are_linear(self):
        """Test that temperatures inside compound units convert as intervals."""
        expansion = 9 * μm / (m * degC)
        q = convert(expansion, μm / (m * degF))
        self.assertEqual(q.value, 5)
        self.assertEqual(q.unit, μm / (m * degF))

    def test_squared_temperature_is_linear(self):
        """Test that a temperature power other than one ignores offsets."""
        self.assertEqual((1 * degC ** 2).to(K ** 2), 1)


if __name__ == '__main__':
    unittest.main()
