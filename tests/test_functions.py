"""
Tests for elementary functions over quantities.
"""

import math
import unittest
from fractions import Fraction

import numpy as np

from dimkit.unit import (
    NO_UNITS,
    DimensionMismatch,
    Quantity,
    abs2,
    ceil,
    cm,
    copysign,
    cos,
    deg,
    dimension_of,
    flipsign,
    floor,
    frexp,
    hypot,
    inv,
    isfinite,
    isinf,
    isinteger,
    isnan,
    m,
    nextfloat,
    prevfloat,
    rad,
    round,
    s,
    sign,
    signbit,
    sin,
    sqrt,
    square,
    strip_unit,
    tan,
    to_float,
    to_integer,
    trunc,
    unit_of,
)


class TestAccessors(unittest.TestCase):
    """Test unit and magnitude accessors."""

    def test_unit_of(self):
        """Test unit lookup for quantities, units and numbers."""
        self.assertEqual(unit_of(3 * m), m)
        self.assertIs(unit_of(m), m)
        self.assertEqual(unit_of(3), NO_UNITS)

    def test_dimension_of(self):
        """Test dimension lookup."""
        self.assertEqual(dimension_of(3 * m / s), (m / s).dimension)
        self.assertTrue(dimension_of(2.0).is_dimensionless)

    def test_strip_unit(self):
        """Test that the magnitude is returned in its own unit."""
        self.assertEqual(strip_unit(300 * cm), 300)
        self.assertEqual(strip_unit(7), 7)

    def test_to_float(self):
        """Test float promotion that keeps the unit."""
        q = to_float(3 * m)
        self.assertIsInstance(q.value, float)
        self.assertEqual(q.unit, m)

    def test_to_integer(self):
        """Test integer conversion that keeps the unit."""
        q = to_integer(3.0 * m)
        self.assertIsInstance(q.value, int)
        self.assertEqual(q, 3 * m)
        with self.assertRaises(ValueError):
            to_integer(3.5 * m)


class TestFixedPowers(unittest.TestCase):
    """Test inv, sqrt, square and abs2."""

    def test_sqrt(self):
        """Test square roots of quantities."""
        area = m ** 2
        root = sqrt(4 * area)
        self.assertEqual(root, 2 * m)
        self.assertIs(root.unit, area.sqrt)

    def test_sqrt_fractional_power(self):
        """Test square root of a fractional power unit."""
        self.assertEqual(sqrt(4 * m ** Fraction(2, 3)), 2 * m ** Fraction(1, 3))

    def test_inv(self):
        """Test multiplicative inverse."""
        q = inv(2 * s)
        self.assertEqual(q.value, 0.5)
        self.assertIs(q.unit, s.inverse)
        self.assertEqual(inv(s), s ** -1)
        self.assertEqual(inv(4), 0.25)

    def test_square(self):
        """Test square and abs2."""
        self.assertIs(square(3 * m).unit, m.squared)
        self.assertEqual(square(3 * m), 9 * m ** 2)
        self.assertEqual(abs2(-3 * m), 9 * m ** 2)

    def test_dimensionless_collapse(self):
        """Test that powers of dimensionless quantities are plain numbers."""
        self.assertAlmostEqual(square(2 * rad), 4)
        self.assertNotIsInstance(inv(2 * rad), Quantity)


class TestTrigonometry(unittest.TestCase):
    """Test trigonometric functions."""

    def test_degrees(self):
        """Test that degrees are converted to radians."""
        self.assertEqual(sin(90 * deg), 1.0)
        self.assertAlmostEqual(tan(45 * deg), 1.0)

    def test_radians(self):
        """Test radians and plain numbers."""
        self.assertEqual(cos(math.pi * rad), -1.0)
        self.assertEqual(sin(0), 0.0)

    def test_array(self):
        """Test elementwise trigonometry."""
        values = cos(Quantity([0.0, 180.0], deg))
        np.testing.assert_allclose(values, [1.0, -1.0])

    def test_dimension_mismatch(self):
        """Test that dimensional arguments are rejected."""
        with self.assertRaises(DimensionMismatch):
            sin(1 * m)


class TestSignFamily(unittest.TestCase):
    """Test sign, signbit, copysign and flipsign."""

    def test_sign(self):
        """Test that sign strips the unit."""
        self.assertEqual(sign(-3.3 * m), -1.0)
        self.assertEqual(sign(0 * m), 0)
        self.assertEqual(sign(2 * m), 1)
        self.assertTrue(math.isnan(sign(math.nan * m)))

    def test_signbit(self):
        """Test the sign bit including negative zero."""
        self.assertFalse(signbit(0.0 * m))
        self.assertTrue(signbit(-0.0 * m))

    def test_copysign(self):
        """Test that copysign keeps the unit of the first argument."""
        self.assertEqual(copysign(3.0 * m, -4.0 * s), -3.0 * m)
        self.assertEqual(copysign(3.0 * m, 4), 3.0 * m)
        self.assertEqual(copysign(3 * m, -1), -3 * m)

    def test_flipsign(self):
        """Test that flipsign negates on a negative second argument."""
        self.assertEqual(flipsign(3.0 * m, -4), -3.0 * m)
        self.assertEqual(flipsign(-3.0 * m, -4), 3.0 * m)
        self.assertEqual(flipsign(-3.0 * m, 4), -3.0 * m)


class TestRoundingFamily(unittest.TestCase):
    """Test rounding functions."""

    def test_rounding(self):
        """Test trunc, floor, ceil and round keep the unit."""
        self.assertEqual(trunc(3.7 * m), 3.0 * m)
        self.assertEqual(trunc(-3.7 * m), -3.0 * m)
        self.assertEqual(floor(3.7 * m), 3.0 * m)
        self.assertEqual(floor(-3.7 * m), -4.0 * m)
        self.assertEqual(ceil(3.7 * m), 4.0 * m)
        self.assertEqual(ceil(-3.7 * m), -3.0 * m)
        self.assertEqual(round(3.7 * m), 4.0 * m)
        self.assertEqual(round(-3.7 * m), -4.0 * m)
        self.assertEqual(round(1.25 * m, 1), 1.2 * m)

    def test_plain_numbers(self):
        """Test that plain numbers pass through the rounding family."""
        self.assertEqual(floor(-3.7), -4)
        self.assertEqual(round(2.5), 2)
        np.testing.assert_array_equal(trunc(np.array([1.5, -1.5])), [1.0, -1.0])

    def test_frexp(self):
        """Test that the mantissa keeps the unit."""
        mantissa, exponent = frexp(1.5 * m)
        self.assertEqual(mantissa, 0.75 * m)
        self.assertEqual(exponent, 1)

    def test_nextfloat_prevfloat(self):
        """Test neighbouring floats keep the unit."""
        up, down = nextfloat(0.0 * m), prevfloat(0.0 * m)
        self.assertEqual(up.unit, m)
        self.assertEqual(down.unit, m)
        self.assertGreater(up.value, 0.0)
        self.assertLess(down.value, 0.0)


class TestPredicates(unittest.TestCase):
    """Test predicates on magnitudes."""

    def test_isinteger(self):
        """Test integer detection."""
        self.assertTrue(isinteger(1.0 * m))
        self.assertFalse(isinteger(1.4 * m))
        self.assertTrue(isinteger(Fraction(4, 2) * m))

    def test_finite(self):
        """Test finiteness checks."""
        self.assertTrue(isfinite(1.0 * m))
        self.assertFalse(isfinite(math.inf * m))
        self.assertTrue(isinf(-math.inf * m))
        self.assertTrue(isnan(math.nan * m))


class TestHypot(unittest.TestCase):
    """Test the Euclidean norm."""

    def test_mixed_units(self):
        """Test that the result takes the unit of the first argument."""
        self.assertEqual(hypot(3 * m, 400 * cm), 5.0 * m)

    def test_arrays(self):
        """Test elementwise norms."""
        q = hypot(Quantity([3.0, 5.0], m), Quantity([4.0, 12.0], m))
        np.testing.assert_allclose(q.value, [5.0, 13.0])

    def test_mismatch(self):
        """Test that hypot requires equal dimensions."""
        with self.assertRaises(DimensionMismatch):
            hypot(3 * m, 4 * s)
        with self.assertRaises(DimensionMismatch):
            hypot(3 * m, 4)
        self.assertEqual(hypot(3, 4), 5.0)


if __name__ == '__main__':
    unittest.main()
