"""Conversion engine: rescale magnitudes between units of one dimension.

Conversion never changes a dimension. It rewrites the unit tag and rescales
the magnitude along one of two paths:

    Affine path:
        Both source and target are a single affine-family unit (temperature)
        to the first power. Offsets are honoured:
        ``ref = (value - source.offset) * source.factor`` then
        ``result = ref / target.factor + target.offset``.
        This is the only place offsets are ever read.

    Linear path:
        Every other case, including temperatures combined with other units or
        raised to a power other than one. ``result = value * k`` with
        ``k = scale(source) / scale(target)``; offsets are ignored, so
        ``9 μm/(m °C)`` becomes ``5 μm/(m °F)``.

Exactness:
    When the value is an int or Fraction and every factor and offset consulted
    is a Fraction, the whole computation is rational and the result is exact
    (an int input with an integral result comes back as an int). Any float
    input makes the computation floating point. Exact factors applied to a
    float are applied as ``value * numerator / denominator``.

Example:
    >>> from dimkit.unit import inch, cm, degC, degF
    >>> convert(1 * inch, cm)
    Quantity(127/50, cm)
    >>> convert(0 * degC, degF)
    Quantity(32, °F)
"""

from __future__ import annotations

import numbers
from fractions import Fraction

from numpy import ndarray

from ..config import EXACT_TYPES
from .dimension import DIMENSIONLESS
from .errors import DimensionMismatch
from .unit_base import NO_UNITS, Factor, Unit


def is_exact(value) -> bool:
    """True for magnitudes that are exact ratios of integers."""
    return isinstance(value, EXACT_TYPES) or (
        isinstance(value, numbers.Rational) and not isinstance(value, ndarray)
    )


def _exact_result(result: Fraction, value):
    if isinstance(value, numbers.Integral) and result.denominator == 1:
        return int(result)
    return result


def _apply_factor(value, k: Factor):
    if isinstance(k, Fraction):
        if is_exact(value):
            return _exact_result(Fraction(value) * k, value)
        if isinstance(value, ndarray):
            if value.dtype == object:
                return value * k
            return value * float(k)
        return value * k.numerator / k.denominator
    return value * k


def scale_of(unit: Unit) -> Factor:
    """Combined factor from ``unit`` to the reference units of its dimension."""
    return unit.scale


def conversion_factor(source: Unit, target: Unit) -> Factor:
    """Linear factor ``k`` with ``value_in_target = value_in_source * k``.

    Raises:
        DimensionMismatch: If the units have different dimensions.
    """
    source.check_same_dimension(target, "conversion")
    a, b = source.scale, target.scale
    if isinstance(a, Fraction) and isinstance(b, Fraction):
        return a / b
    return float(a) / float(b)


def to_reference(value, unit: Unit):
    """Express ``value`` (in ``unit``) in the reference units of its dimension."""
    return _apply_factor(value, unit.scale)


def from_reference(value, unit: Unit):
    """Express ``value`` (in reference units) in ``unit``."""
    scale = unit.scale
    return _apply_factor(value, 1 / scale if isinstance(scale, Fraction) else 1.0 / scale)


def _convert_affine(value, source: Unit, target: Unit):
    src, tgt = source.atomic, target.atomic
    src_offset = src.offset if src.offset is not None else Fraction(0)
    tgt_offset = tgt.offset if tgt.offset is not None else Fraction(0)
    if is_exact(value) and src.is_exact and tgt.is_exact:
        reference = (Fraction(value) - src_offset) * src.factor
        return _exact_result(reference / tgt.factor + tgt_offset, value)
    reference = (value - float(src_offset)) * float(src.factor)
    return reference / float(tgt.factor) + float(tgt_offset)


def convert_value(value, source: Unit, target: Unit):
    """Convert a bare magnitude from ``source`` to ``target``.

    Raises:
        DimensionMismatch: If the units have different dimensions.
    """
    if source == target:
        return value
    if source.is_affine and target.is_affine:
        source.check_same_dimension(target, "conversion")
        return _convert_affine(value, source, target)
    return _apply_factor(value, conversion_factor(source, target))


def convert_linear(value, source: Unit, target: Unit):
    """Convert a magnitude treating every unit as an interval (no offsets).

    Used by addition, subtraction and comparisons, which operate on
    temperature intervals rather than absolute temperatures.
    """
    if source == target:
        return value
    return _apply_factor(value, conversion_factor(source, target))


def convert(quantity, target: Unit):
    """Convert a quantity (or a bare unit, meaning one of it) to ``target``.

    Returns the input unchanged when it already carries ``target``.

    Raises:
        DimensionMismatch: If the dimensions differ.
        TypeError: If ``target`` is not a Unit.
    """
    from .quantity import Quantity

    if not isinstance(target, Unit):
        raise TypeError(f"conversion target must be a Unit, got {type(target).__name__}")
    if isinstance(quantity, Unit):
        quantity = Quantity(1, quantity)
    if not isinstance(quantity, Quantity):
        if target.dimension != DIMENSIONLESS:
            raise DimensionMismatch(DIMENSIONLESS, target.dimension, "conversion")
        return Quantity(convert_value(quantity, NO_UNITS, target), target)
    if quantity.unit == target:
        return quantity
    return Quantity(convert_value(quantity.value, quantity.unit, target), target)
