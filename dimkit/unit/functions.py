"""Elementary functions over quantities.

Each function states its own unit contract:

    Unit preserved on the transformed magnitude:
        trunc, floor, ceil, round, abs, copysign, flipsign, nextfloat,
        prevfloat, to_float, to_integer, rem, mod, hypot; frexp keeps the
        unit on the mantissa and returns a plain exponent.
    Unit transformed by a cached fixed power:
        inv (power -1), sqrt (power 1/2), square and abs2 (power 2).
    Unit stripped:
        sin, cos, tan (dimensionless input only, evaluated in radians),
        sign, signbit, div, fld, and the predicates isinteger, isfinite,
        isinf, isnan.

All functions also accept plain numbers and numpy arrays, so generic numeric
code can call them without knowing whether its inputs carry units.

Example:
    >>> from dimkit.unit import m, deg
    >>> sqrt(4 * m ** 2)
    Quantity(2.0, m)
    >>> sin(90 * deg)
    1.0
    >>> frexp(1.5 * m)
    (Quantity(0.75, m), 1)
"""

from __future__ import annotations

import builtins
import math
import numbers
from fractions import Fraction

import numpy as np
from numpy import ndarray

from .conversion import convert, to_reference
from .dimension import DIMENSIONLESS, DimensionTag
from .errors import DimensionMismatch
from .quantity import Quantity, derived, div, fld, mod, rem
from .unit_base import NO_UNITS, Unit

__all__ = [
    "unit_of",
    "dimension_of",
    "strip_unit",
    "convert",
    "to_float",
    "to_integer",
    "inv",
    "sqrt",
    "square",
    "abs2",
    "sin",
    "cos",
    "tan",
    "sign",
    "signbit",
    "copysign",
    "flipsign",
    "trunc",
    "floor",
    "ceil",
    "round",
    "frexp",
    "nextfloat",
    "prevfloat",
    "isinteger",
    "isfinite",
    "isinf",
    "isnan",
    "hypot",
    "div",
    "fld",
    "rem",
    "mod",
]


def _magnitude(x):
    return x.value if isinstance(x, Quantity) else x


def _elementwise(scalar_fn, array_fn, value):
    if isinstance(value, ndarray):
        return array_fn(value)
    return scalar_fn(value)


# -------------------------------- Accessors --------------------------------
def unit_of(x) -> Unit:
    """Unit of a quantity; a bare unit is its own unit, plain numbers have none."""
    if isinstance(x, Quantity):
        return x.unit
    if isinstance(x, Unit):
        return x
    return NO_UNITS


def dimension_of(x) -> DimensionTag:
    return unit_of(x).dimension


def strip_unit(x):
    """Magnitude of a quantity in its own unit; plain numbers pass through."""
    return _magnitude(x)


def to_float(x):
    """Same quantity with a floating point magnitude."""
    if isinstance(x, Quantity):
        return Quantity(_elementwise(float, lambda v: v.astype(float), x.value), x.unit)
    return _elementwise(float, lambda v: v.astype(float), x)


def _exact_int(v):
    if isinstance(v, ndarray):
        if not np.all(np.mod(v, 1) == 0):
            raise ValueError(f"cannot represent {v} as integers")
        return v.astype(int)
    if not isinteger(v):
        raise ValueError(f"cannot represent {v} as an integer")
    return int(v)


def to_integer(x):
    """Same quantity with an integer magnitude.

    Raises:
        ValueError: If the magnitude is not integral.
    """
    if isinstance(x, Quantity):
        return Quantity(_exact_int(x.value), x.unit)
    return _exact_int(x)


# -------------------------------- Fixed powers --------------------------------
def inv(x):
    """Multiplicative inverse; the tag comes from the cached ``Unit.inverse``."""
    if isinstance(x, Quantity):
        return derived(1 / x.value, x.unit.inverse)
    if isinstance(x, Unit):
        return x.inverse
    return 1 / x


def sqrt(x):
    """Square root; the tag comes from the cached ``Unit.sqrt``."""
    if isinstance(x, Quantity):
        return derived(_elementwise(math.sqrt, np.sqrt, x.value), x.unit.sqrt)
    if isinstance(x, Unit):
        return x.sqrt
    return _elementwise(math.sqrt, np.sqrt, x)


def square(x):
    """``x * x`` with the tag from the cached ``Unit.squared``."""
    if isinstance(x, Quantity):
        return derived(x.value * x.value, x.unit.squared)
    if isinstance(x, Unit):
        return x.squared
    return x * x


def abs2(x):
    """Squared absolute value, carrying the squared unit."""
    if isinstance(x, Quantity):
        v = abs(x.value)
        return derived(v * v, x.unit.squared)
    v = abs(x)
    return v * v


# -------------------------------- Trigonometry --------------------------------
def _radians(x, operation: str):
    if isinstance(x, Quantity):
        if not x.dimension.is_dimensionless:
            raise DimensionMismatch(x.dimension, DIMENSIONLESS, operation)
        return to_reference(x.value, x.unit)
    return x


def sin(x):
    """Sine of an angle (any dimensionless quantity or plain number, in radians)."""
    return _elementwise(math.sin, np.sin, _radians(x, "sin"))


def cos(x):
    return _elementwise(math.cos, np.cos, _radians(x, "cos"))


def tan(x):
    return _elementwise(math.tan, np.tan, _radians(x, "tan"))


# -------------------------------- Sign family --------------------------------
def _sign(v):
    if isinstance(v, ndarray):
        return np.sign(v)
    if v != v:  # nan
        return v
    s = (v > 0) - (v < 0)
    return float(s) if isinstance(v, float) else s


def _signbit(v):
    if isinstance(v, ndarray):
        return np.signbit(v)
    return math.copysign(1.0, v) < 0


def sign(x):
    """Sign of the magnitude as a plain number (-1, 0 or 1)."""
    return _sign(_magnitude(x))


def signbit(x) -> bool:
    """True when the sign bit of the magnitude is set (including ``-0.0``)."""
    return _signbit(_magnitude(x))


def copysign(x, y):
    """Magnitude of ``x`` with the sign of ``y``; keeps the unit of ``x``.

    ``y`` may carry any unit: only its sign is read.
    """
    v, w = _magnitude(x), _magnitude(y)
    if isinstance(v, ndarray) or isinstance(w, ndarray):
        result = np.copysign(v, w)
    elif isinstance(v, float) or isinstance(w, float):
        result = math.copysign(v, w)
    else:
        result = -abs(v) if _signbit(w) else abs(v)
    return Quantity(result, x.unit) if isinstance(x, Quantity) else result


def flipsign(x, y):
    """``x`` negated when ``y`` is negative; keeps the unit of ``x``."""
    v, w = _magnitude(x), _magnitude(y)
    if isinstance(v, ndarray) or isinstance(w, ndarray):
        result = np.where(np.signbit(w), -v, v)
    else:
        result = -v if _signbit(w) else v
    return Quantity(result, x.unit) if isinstance(x, Quantity) else result


# -------------------------------- Rounding family --------------------------------
def trunc(x):
    """Round toward zero, keeping the unit."""
    if isinstance(x, Quantity):
        return x.__trunc__()
    return _elementwise(math.trunc, np.trunc, x)


def floor(x):
    if isinstance(x, Quantity):
        return x.__floor__()
    return _elementwise(math.floor, np.floor, x)


def ceil(x):
    if isinstance(x, Quantity):
        return x.__ceil__()
    return _elementwise(math.ceil, np.ceil, x)


def round(x, ndigits: int | None = None):
    """Round half to even, keeping the unit."""
    if isinstance(x, Quantity):
        return x.__round__(ndigits)
    if isinstance(x, ndarray):
        return np.round(x, ndigits or 0)
    return builtins.round(x, ndigits)


def frexp(x):
    """Split into mantissa and binary exponent; the unit stays on the mantissa."""
    v = _magnitude(x)
    if isinstance(v, ndarray):
        mantissa, exponent = np.frexp(v)
    else:
        mantissa, exponent = math.frexp(v)
    if isinstance(x, Quantity):
        return Quantity(mantissa, x.unit), exponent
    return mantissa, exponent


def nextfloat(x):
    """Next representable float above the magnitude, keeping the unit."""
    v = np.nextafter(_magnitude(x), np.inf)
    return Quantity(v, x.unit) if isinstance(x, Quantity) else v


def prevfloat(x):
    """Next representable float below the magnitude, keeping the unit."""
    v = np.nextafter(_magnitude(x), -np.inf)
    return Quantity(v, x.unit) if isinstance(x, Quantity) else v


# -------------------------------- Predicates --------------------------------
def isinteger(x):
    v = _magnitude(x)
    if isinstance(v, ndarray):
        return np.mod(v, 1) == 0
    if isinstance(v, numbers.Integral):
        return True
    if isinstance(v, Fraction):
        return v.denominator == 1
    return float(v).is_integer()


def isfinite(x):
    return _elementwise(math.isfinite, np.isfinite, _magnitude(x))


def isinf(x):
    return _elementwise(math.isinf, np.isinf, _magnitude(x))


def isnan(x):
    return _elementwise(math.isnan, np.isnan, _magnitude(x))


def hypot(x, y):
    """Euclidean norm of two same-dimension quantities, in the unit of ``x``.

    Raises:
        DimensionMismatch: If the dimensions differ.
    """
    if isinstance(x, Quantity) and isinstance(y, Quantity):
        a, b = x._align(y, "hypot")
        if isinstance(a, ndarray) or isinstance(b, ndarray):
            return Quantity(np.hypot(a, b), x.unit)
        return Quantity(math.hypot(a, b), x.unit)
    if isinstance(x, Quantity) or isinstance(y, Quantity):
        raise DimensionMismatch(dimension_of(x), dimension_of(y), "hypot")
    if isinstance(x, ndarray) or isinstance(y, ndarray):
        return np.hypot(x, y)
    return math.hypot(x, y)
