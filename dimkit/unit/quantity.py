"""Quantities: numeric magnitudes tagged with a unit.

This module provides the Quantity class, the primary user-facing value of
dimkit. A quantity pairs a plain numeric magnitude (int, float, Fraction,
numpy scalar or ndarray) with a Unit tag. The tag is static structural
information only; arithmetic that keeps the tag costs nothing beyond the
ordinary arithmetic on the magnitude.

Unlike a family of float subclasses that store everything in SI, a quantity
keeps its magnitude in its own unit, so ``1 kg`` and ``1000 g`` compare equal
yet remain distinguishable (``(1 * kg).unit != (1000 * g).unit``).

Arithmetic rules:
    - ``+``/``-``: operands must share a dimension (DimensionMismatch
      otherwise). The right operand is converted into the left operand's
      unit as an interval, so temperature sums use interval semantics.
    - ``*``/``/``/``@``: always legal; the result tag is the algebraic
      product or quotient of the operand tags.
    - Dimensionless collapse: when a derived tag has the empty dimension the
      result is a plain number expressed in reference units
      (``pi/2 rad + 90 deg == pi``). Constructing a quantity directly or
      scaling it by a plain number never collapses.
    - Comparisons: equal dimension required for ordering; ``==`` returns
      False across dimensions. Values are compared after linear conversion of
      the right side into the left unit.
    - ``//``, ``%`` and ``divmod`` follow floor semantics; ``div`` and ``rem``
      truncate. Quotients are plain numbers, remainders carry the left unit.
      With a plain number divisor both ``//`` and ``%`` keep the unit, so
      ``q == (q // n) * n + q % n``.

Classes:
    Quantity: Scalar quantity.
    QuantityArray: Quantity whose magnitude is a numpy array; adds sequence
        behaviour (len, indexing, iteration).

Example:
    >>> from dimkit.unit import m, cm, s
    >>> 3 * m + 2 * cm
    Quantity(151/50, m)
    >>> (3 * m) / (2 * s)
    Quantity(1.5, m s^-1)
    >>> (1 * m) / (1 * cm)
    100.0
"""

from __future__ import annotations

import math
import numbers
import operator
from fractions import Fraction
from typing import ClassVar

import numpy as np
from numpy import ndarray

from ..config import HASH_SIGNIFICANT_DIGITS
from .conversion import convert_linear, convert_value, from_reference, is_exact, to_reference
from .dimension import DIMENSIONLESS, DimensionTag, Exponent, as_exponent
from .errors import DimensionMismatch
from .unit_base import NO_UNITS, Unit, is_number


def derived(value, unit: Unit):
    """Wrap an operation result, collapsing dimensionless tags to plain numbers."""
    if unit.dimension.is_dimensionless:
        return to_reference(value, unit)
    return Quantity(value, unit)


def _as_comparable(a, b):
    if isinstance(a, ndarray) or isinstance(b, ndarray):
        return a, b
    if is_exact(a) != is_exact(b):
        return float(a), float(b)
    return a, b


def _raise_magnitude(value, p: Fraction):
    if p.denominator == 1:
        return value ** int(p)
    if isinstance(value, ndarray):
        return value ** float(p)
    return value ** p


def _hash_key(reference):
    # Reference values reached along different unit paths differ in the last bits
    return float(f"{float(reference):.{HASH_SIGNIFICANT_DIGITS}g}")


class Quantity:
    """A numeric magnitude tagged with a unit.

    Quantities are immutable values: every operation returns a new quantity
    (or a plain number after dimensionless collapse).

    Attributes:
        value: Magnitude expressed in ``unit``.
        unit: Unit tag of the magnitude.
        dimension: Dimension of the unit.
    """

    __slots__ = ("_value", "_unit")
    __array_priority__: ClassVar[int] = 1000

    def __new__(cls, value=0, unit: Unit = NO_UNITS):
        if cls is Quantity and isinstance(value, (ndarray, list, tuple)):
            cls = QuantityArray
        return object.__new__(cls)

    def __init__(self, value=0, unit: Unit = NO_UNITS):
        """Create a quantity.

        Args:
            value: Magnitude in ``unit``. Lists and tuples become arrays.
            unit: Unit tag; defaults to no units.

        Raises:
            TypeError: If ``unit`` is not a Unit or ``value`` is a Quantity.
        """
        if isinstance(value, Quantity):
            raise TypeError("magnitude must be a plain number; use as_unit() to convert quantities")
        if not isinstance(unit, Unit):
            raise TypeError(f"unit must be a Unit, got {type(unit).__name__}")
        if isinstance(value, (list, tuple)):
            value = np.asarray(value)
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_unit", unit)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return Quantity, (self._value, self._unit)

    @property
    def value(self):
        return self._value

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def dimension(self) -> DimensionTag:
        return self._unit.dimension

    @classmethod
    def from_reference(cls, value, unit: Unit) -> Quantity:
        """Create a quantity from a magnitude given in reference units.

        Args:
            value: Magnitude in the reference units of ``unit``'s dimension.
            unit: Unit the new quantity is expressed in.
        """
        return cls(from_reference(value, unit), unit)

    def to(self, unit: Unit):
        """Magnitude of this quantity expressed in ``unit``.

        Raises:
            DimensionMismatch: If ``unit`` has a different dimension.
        """
        return convert_value(self._value, self._unit, unit)

    def as_unit(self, unit: Unit) -> Quantity:
        """Convert to another unit while preserving the quantity type.

        Raises:
            DimensionMismatch: If ``unit`` has a different dimension.
        """
        if unit == self._unit:
            return self
        return Quantity(self.to(unit), unit)

    def to_reference(self):
        """Magnitude expressed in the reference units of the dimension."""
        return to_reference(self._value, self._unit)

    # -------------------------------- Operand alignment --------------------------------
    @staticmethod
    def _coerce(other) -> Quantity | None:
        if isinstance(other, Quantity):
            return other
        if isinstance(other, Unit):
            return Quantity(1, other)
        return None

    def _align(self, other: Quantity, operation: str):
        """Magnitudes of ``self`` and ``other``, both in ``self``'s unit."""
        self._unit.check_same_dimension(other._unit, operation)
        return self._value, convert_linear(other._value, other._unit, self._unit)

    def _plain(self, operation: str):
        """Magnitude for mixing with a bare number; only dimensionless quantities qualify."""
        if not self.dimension.is_dimensionless:
            raise DimensionMismatch(self.dimension, DIMENSIONLESS, operation)
        return to_reference(self._value, self._unit)

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other):
        """Add a quantity of the same dimension.

        Args:
            other: Quantity, bare unit, or plain number (dimensionless only).

        Returns:
            Quantity in this quantity's unit, or a plain number when
            dimensionless.

        Raises:
            DimensionMismatch: If the dimensions differ.
        """
        q = self._coerce(other)
        if q is not None:
            a, b = self._align(q, "addition")
            return derived(a + b, self._unit)
        if is_number(other):
            return self._plain("addition") + other
        return NotImplemented

    def __radd__(self, other):
        q = self._coerce(other)
        if q is not None:
            return q.__add__(self)
        if is_number(other):
            return other + self._plain("addition")
        return NotImplemented

    def __sub__(self, other):
        """Subtract a quantity of the same dimension.

        Raises:
            DimensionMismatch: If the dimensions differ.
        """
        q = self._coerce(other)
        if q is not None:
            a, b = self._align(q, "subtraction")
            return derived(a - b, self._unit)
        if is_number(other):
            return self._plain("subtraction") - other
        return NotImplemented

    def __rsub__(self, other):
        q = self._coerce(other)
        if q is not None:
            return q.__sub__(self)
        if is_number(other):
            return other - self._plain("subtraction")
        return NotImplemented

    def __pos__(self) -> Quantity:
        return Quantity(+self._value, self._unit)

    def __neg__(self) -> Quantity:
        return Quantity(-self._value, self._unit)

    def __abs__(self) -> Quantity:
        return Quantity(abs(self._value), self._unit)

    def __mul__(self, other):
        """Multiply by a quantity, a bare unit or a plain number.

        Returns:
            Quantity with the product tag, a plain number when the product is
            dimensionless, or this quantity scaled by a plain number.
        """
        if isinstance(other, Quantity):
            # x * x reuses the cached squared tag
            unit = self._unit.squared if other._unit is self._unit else self._unit * other._unit
            return derived(self._value * other._value, unit)
        if isinstance(other, Unit):
            return derived(self._value, self._unit * other)
        if is_number(other):
            return Quantity(self._value * other, self._unit)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Unit):
            return derived(self._value, other * self._unit)
        if is_number(other):
            return Quantity(other * self._value, self._unit)
        return NotImplemented

    def __truediv__(self, other):
        """Divide by a quantity, a bare unit or a plain number."""
        if isinstance(other, Quantity):
            return derived(self._value / other._value, self._unit / other._unit)
        if isinstance(other, Unit):
            return derived(self._value, self._unit / other)
        if is_number(other):
            return Quantity(self._value / other, self._unit)
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, Unit):
            return derived(1 / self._value, other / self._unit)
        if is_number(other):
            return derived(other / self._value, self._unit.inverse)
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, Quantity):
            return derived(self._value @ other._value, self._unit * other._unit)
        if isinstance(other, ndarray):
            return Quantity(self._value @ other, self._unit)
        return NotImplemented

    def __rmatmul__(self, other):
        if isinstance(other, ndarray):
            return Quantity(other @ self._value, self._unit)
        return NotImplemented

    def __pow__(self, p: Exponent):
        """Raise to an arbitrary, possibly run-time, exponent.

        This is the generic path: the result tag is recomputed on every call.
        Use ``inv``, ``sqrt`` and ``square`` for the cached fixed powers.
        The magnitude and the tag are raised to the same rational exponent.

        Raises:
            ValueError: If a float exponent is not a small-denominator fraction.
        """
        if isinstance(p, Quantity):
            p = p._plain("power")
        if not isinstance(p, numbers.Real):
            return NotImplemented
        q = as_exponent(p)
        return derived(_raise_magnitude(self._value, q), self._unit ** q)

    def __rpow__(self, other):
        if is_number(other):
            return other ** self._plain("power")
        return NotImplemented

    # -------------------------------- Integer Division Family --------------------------------
    def __floordiv__(self, other):
        if isinstance(other, (Quantity, Unit)):
            return fld(self, other)
        if is_number(other):
            return Quantity(self._value // other, self._unit)
        return NotImplemented

    def __rfloordiv__(self, other):
        if is_number(other):
            return other // self._plain("floor division")
        return NotImplemented

    def __mod__(self, other):
        if isinstance(other, (Quantity, Unit)):
            return mod(self, other)
        if is_number(other):
            return Quantity(self._value % other, self._unit)
        return NotImplemented

    def __rmod__(self, other):
        if is_number(other):
            return other % self._plain("modulo")
        return NotImplemented

    def __divmod__(self, other):
        if isinstance(other, (Quantity, Unit)):
            return fld(self, other), mod(self, other)
        if is_number(other):
            return Quantity(self._value // other, self._unit), Quantity(self._value % other, self._unit)
        return NotImplemented

    # -------------------------------- Comparison --------------------------------
    def _compare(self, other, op, operation: str):
        q = self._coerce(other)
        if q is not None:
            a, b = _as_comparable(*self._align(q, operation))
            return op(a, b)
        if is_number(other):
            return op(self._plain(operation), other)
        return NotImplemented

    def __lt__(self, other):
        """Less-than comparison between quantities of the same dimension.

        Raises:
            DimensionMismatch: If the dimensions differ.
        """
        return self._compare(other, operator.lt, "comparison")

    def __le__(self, other):
        return self._compare(other, operator.le, "comparison")

    def __gt__(self, other):
        return self._compare(other, operator.gt, "comparison")

    def __ge__(self, other):
        return self._compare(other, operator.ge, "comparison")

    def __eq__(self, other):
        """Value equality after unit conversion.

        Quantities of different dimensions are simply unequal; unlike the
        ordering operators this never raises.
        """
        q = self._coerce(other)
        if q is not None:
            if q.dimension != self.dimension:
                return False
            return self._compare(q, operator.eq, "comparison")
        if is_number(other):
            if not self.dimension.is_dimensionless:
                return False
            return self._compare(other, operator.eq, "comparison")
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        if isinstance(result, ndarray):
            return ~result
        return not result

    def __hash__(self) -> int:
        """Hash of the reference value, consistent with ``==`` across exact and float magnitudes."""
        key = _hash_key(to_reference(self._value, self._unit))
        if self.dimension.is_dimensionless:
            return hash(key)
        return hash((self.dimension, key))

    # -------------------------------- Conversion to plain numbers --------------------------------
    def __bool__(self) -> bool:
        return bool(self._value)

    def __float__(self) -> float:
        return float(self._value)

    def __int__(self) -> int:
        return int(self._value)

    def __complex__(self) -> complex:
        return complex(self._value)

    # -------------------------------- Rounding --------------------------------
    def __round__(self, ndigits: int | None = None) -> Quantity:
        if ndigits is None:
            return Quantity(round(self._value), self._unit)
        return Quantity(round(self._value, ndigits), self._unit)

    def __trunc__(self) -> Quantity:
        return Quantity(_elementwise(math.trunc, np.trunc, self._value), self._unit)

    def __floor__(self) -> Quantity:
        return Quantity(_elementwise(math.floor, np.floor, self._value), self._unit)

    def __ceil__(self) -> Quantity:
        return Quantity(_elementwise(math.ceil, np.ceil, self._value), self._unit)

    # -------------------------------- Display --------------------------------
    def __format__(self, format_spec: str) -> str:
        return f"{format(self._value, format_spec)} {self._unit}".strip()

    def __str__(self) -> str:
        return f"{self._value} {self._unit}".strip()

    def __repr__(self) -> str:
        if self._unit.is_unitless:
            return f"{type(self).__name__}({self._value})"
        return f"{type(self).__name__}({self._value}, {self._unit})"

    def __rich__(self):
        from .display import as_text

        return as_text(self)


class QuantityArray(Quantity):
    """Quantity whose magnitude is a numpy array.

    Behaves as a sequence of scalar quantities sharing one unit: ``len``,
    indexing, slicing and iteration all work on the magnitude and re-attach
    the unit.
    """

    __slots__ = ()
    __hash__ = None

    @property
    def shape(self) -> tuple[int, ...]:
        return self._value.shape

    @property
    def ndim(self) -> int:
        return self._value.ndim

    def __len__(self) -> int:
        return len(self._value)

    def __getitem__(self, key):
        return Quantity(self._value[key], self._unit)

    def __iter__(self):
        for item in self._value:
            yield Quantity(item, self._unit)

    def tolist(self) -> list[Quantity]:
        return list(self)

    def sum(self):
        return Quantity(self._value.sum(), self._unit)


def _elementwise(scalar_fn, array_fn, value):
    if isinstance(value, ndarray):
        return array_fn(value)
    return scalar_fn(value)


# -------------------------------- Integer division family --------------------------------
def _aligned(x, y, operation: str):
    if isinstance(y, Unit):
        y = Quantity(1, y)
    if isinstance(x, Unit):
        x = Quantity(1, x)
    if not isinstance(x, Quantity) or not isinstance(y, Quantity):
        raise DimensionMismatch(_dimension(x), _dimension(y), operation)
    a, b = x._align(y, operation)
    return x, a, b


def _dimension(x) -> DimensionTag:
    return x.dimension if isinstance(x, Quantity) else DIMENSIONLESS


def _trunc_quotient(a, b):
    if is_exact(a) and is_exact(b):
        return math.trunc(Fraction(a) / Fraction(b))
    if isinstance(a, ndarray) or isinstance(b, ndarray):
        return np.round((a - np.fmod(a, b)) / b)
    q = (a - math.fmod(a, b)) / b
    return float(round(q)) if math.isfinite(q) else q


def div(x, y):
    """Truncating quotient of two same-dimension quantities (a plain number).

    Raises:
        DimensionMismatch: If the dimensions differ.
    """
    _, a, b = _aligned(x, y, "div")
    return _trunc_quotient(a, b)


def fld(x, y):
    """Floored quotient of two same-dimension quantities (a plain number)."""
    _, a, b = _aligned(x, y, "fld")
    return a // b


def rem(x, y):
    """Truncating remainder, carrying the unit of ``x``; sign follows ``x``."""
    x, a, b = _aligned(x, y, "rem")
    if is_exact(a) and is_exact(b):
        r = a - b * _trunc_quotient(a, b)
    elif isinstance(a, ndarray) or isinstance(b, ndarray):
        r = np.fmod(a, b)
    else:
        r = math.fmod(a, b)
    return Quantity(r, x.unit)


def mod(x, y):
    """Floored remainder, carrying the unit of ``x``; sign follows ``y``."""
    x, a, b = _aligned(x, y, "mod")
    return Quantity(a % b, x.unit)
