"""Unit algebra foundation: atomic units and their symbolic products.

This module provides the two building blocks of every unit in dimkit. An
AtomicUnit is a single named unit of measurement (meter, foot, kelvin) tagged
with its dimension, its factor to the reference unit of that dimension and,
for affine families only, an additive offset. A Unit is an immutable product
of atomic units raised to rational powers; it is what users multiply numbers
by to make quantities.

Unit algebra is purely symbolic. Multiplying ``mm`` by ``m`` yields the two
unit product ``m mm``, never a rescaled ``m^2``: converting between scales is
the job of the conversion engine, not of the algebra. Identical atomic units
are merged (``m * m == m**2``) and zero powers are dropped after every
operation, so structurally equal units compare and hash equal.

Key Concepts:
    - Dimension: derived once per unit from its atomic units and cached.
    - Fixed powers: ``inverse``, ``squared`` and ``sqrt`` are cached
      properties, so repeated use of the same unit combination costs an
      attribute read.
    - Generic powers: ``unit ** p`` recomputes the product on every call.
    - Family check: ``check_same_dimension`` replaces per-family type checks
      and raises DimensionMismatch for incompatible units.

Classes:
    AtomicUnit: Registered unit of measurement.
    Unit: Canonical product of atomic units.

Example:
    >>> from dimkit.unit import m, s, mm
    >>> speed = m / s
    >>> str(speed)
    'm s^-1'
    >>> m * m == m ** 2
    True
    >>> str(mm * m)
    'm mm'
"""

from __future__ import annotations

import numbers
import operator
from dataclasses import dataclass, field
from fractions import Fraction
from functools import cached_property
from typing import ClassVar, Iterator

from numpy import ndarray

from .dimension import DIMENSIONLESS, DimensionTag, Exponent, as_exponent, format_exponent
from .errors import DimensionMismatch, RegistrationError

Factor = Fraction | float


def as_factor(value) -> Factor:
    """Normalize a conversion factor or offset.

    Integers, rationals and decimal strings become exact Fractions; floats
    stay floats and mark every computation that consults them as inexact.
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, str):
        return Fraction(value)
    if isinstance(value, numbers.Rational):
        return Fraction(int(value.numerator), int(value.denominator))
    if isinstance(value, numbers.Real):
        return float(value)
    raise TypeError(f"factor must be a real number or decimal string, got {value!r}")


@dataclass(frozen=True, eq=False)
class AtomicUnit:
    """A single registered unit of measurement.

    Atomic units compare by identity: two registrations are two different
    units even if their factors agree, which is what keeps ``1 kg`` and
    ``1000 g`` distinguishable.

    Attributes:
        symbol: Display symbol ("m", "°F").
        name: Human readable name.
        dimension: Dimension of one of this unit.
        factor: Multiplicative factor to the reference unit of the dimension.
        offset: Reading of this unit at the reference zero, or None for
            linear units. Only affine families carry offsets.
        is_reference: True for the coherent reference unit of its dimension.
    """

    symbol: str
    name: str
    dimension: DimensionTag
    factor: Factor = Fraction(1)
    offset: Factor | None = None
    is_reference: bool = False

    def __post_init__(self):
        object.__setattr__(self, "factor", as_factor(self.factor))
        if self.factor == 0:
            raise RegistrationError(f"unit {self.symbol!r} has a zero factor")
        if self.offset is not None:
            if not self.dimension.is_affine:
                raise RegistrationError(
                    f"unit {self.symbol!r}: offsets are only allowed for affine dimensions, "
                    f"not {self.dimension}"
                )
            object.__setattr__(self, "offset", as_factor(self.offset))

    @property
    def is_exact(self) -> bool:
        return isinstance(self.factor, Fraction) and (
            self.offset is None or isinstance(self.offset, Fraction)
        )

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        return f"AtomicUnit({self.symbol!r}, {self.dimension})"


def _iroot(n: int, d: int) -> int | None:
    """Exact integer d-th root of a non-negative integer, or None."""
    if n < 2:
        return n
    x = 1 << -(-n.bit_length() // d)
    while True:
        y = ((d - 1) * x + n // x ** (d - 1)) // d
        if y >= x:
            break
        x = y
    return x if x ** d == n else None


def _exact_power(factor: Fraction, p: Fraction) -> Fraction | None:
    base = factor ** p.numerator
    if p.denominator == 1:
        return base
    if base < 0:
        return None
    num = _iroot(base.numerator, p.denominator)
    den = _iroot(base.denominator, p.denominator)
    if num is None or den is None:
        return None
    return Fraction(num, den)


def _sort_key(item: tuple[AtomicUnit, Fraction]):
    return item[0].symbol, id(item[0])


@dataclass(frozen=True)
class Unit:
    """Immutable product of atomic units raised to rational powers.

    Bare units behave as values: ``3 * m`` makes a Quantity, ``m / s`` makes
    a new Unit and units of equal dimension can be ordered by scale
    (``max(km, m) is km``).

    Attributes:
        powers: Canonical tuple of ``(AtomicUnit, Fraction)`` pairs.
    """

    __array_priority__: ClassVar[int] = 1000

    powers: tuple[tuple[AtomicUnit, Fraction], ...] = field(default=())

    def __post_init__(self):
        merged: dict[AtomicUnit, Fraction] = {}
        for unit, p in self.powers:
            merged[unit] = merged.get(unit, Fraction(0)) + as_exponent(p)
        canonical = tuple(sorted(((u, p) for u, p in merged.items() if p != 0), key=_sort_key))
        object.__setattr__(self, "powers", canonical)

    @classmethod
    def of(cls, unit: AtomicUnit, power: Exponent = 1) -> Unit:
        return cls(((unit, as_exponent(power)),))

    # -------------------------------- Derived properties --------------------------------
    @cached_property
    def dimension(self) -> DimensionTag:
        """Dimension of this unit, derived once from its atomic units."""
        result = DIMENSIONLESS
        for unit, p in self.powers:
            result = result * unit.dimension ** p
        return result

    @cached_property
    def scale(self) -> Factor:
        """Combined factor from this unit to the reference units of its dimension.

        Stays a Fraction while every factor is exact and every fractional
        power has an exact rational root (``cm^(1/2)`` scales by 1/10). A float
        factor or an irrational root makes it a float.
        """
        scale: Factor = Fraction(1)
        for unit, p in self.powers:
            term = None
            if isinstance(scale, Fraction) and isinstance(unit.factor, Fraction):
                term = _exact_power(unit.factor, p)
            if term is not None:
                scale *= term
            else:
                scale = float(scale) * float(unit.factor) ** float(p)
        return scale

    @property
    def is_exact(self) -> bool:
        return isinstance(self.scale, Fraction)

    @property
    def is_unitless(self) -> bool:
        return not self.powers

    @property
    def atomic(self) -> AtomicUnit | None:
        """The single atomic unit of a first-power tag, else None."""
        if len(self.powers) == 1 and self.powers[0][1] == 1:
            return self.powers[0][0]
        return None

    @property
    def is_affine(self) -> bool:
        """True for a pure affine tag: one affine-family unit to the first power."""
        unit = self.atomic
        return unit is not None and unit.dimension.is_affine

    # Fixed-power transforms. Each is derived once per tag and then read back
    # as a plain attribute; only ``__pow__`` recomputes on every call.
    @cached_property
    def inverse(self) -> Unit:
        return Unit(tuple((u, -p) for u, p in self.powers))

    @cached_property
    def squared(self) -> Unit:
        return Unit(tuple((u, p * 2) for u, p in self.powers))

    @cached_property
    def sqrt(self) -> Unit:
        return Unit(tuple((u, p / 2) for u, p in self.powers))

    def check_same_dimension(self, other: Unit, operation: str = "") -> None:
        """Check that two units measure the same physical quantity.

        Raises:
            DimensionMismatch: If the dimensions differ.
        """
        if self.dimension != other.dimension:
            raise DimensionMismatch(self.dimension, other.dimension, operation)

    def __iter__(self) -> Iterator[tuple[AtomicUnit, Fraction]]:
        return iter(self.powers)

    # -------------------------------- Algebra --------------------------------
    def __mul__(self, other):
        if isinstance(other, Unit):
            return Unit(self.powers + other.powers)
        if is_number(other):
            from .quantity import Quantity

            return Quantity(other, self)
        return NotImplemented

    def __rmul__(self, other):
        if is_number(other):
            from .quantity import Quantity

            return Quantity(other, self)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Unit):
            return Unit(self.powers + other.inverse.powers)
        if is_number(other):
            from .quantity import Quantity

            return Quantity(1, self) / other
        return NotImplemented

    def __rtruediv__(self, other):
        if is_number(other):
            from .quantity import Quantity

            return Quantity(other, self.inverse)
        return NotImplemented

    def __pow__(self, p: Exponent) -> Unit:
        q = as_exponent(p)
        return Unit(tuple((u, e * q) for u, e in self.powers))

    # -------------------------------- Ordering by scale --------------------------------
    def _compare(self, other, op) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        self.check_same_dimension(other, "comparison")
        a, b = self.scale, other.scale
        if not (isinstance(a, Fraction) and isinstance(b, Fraction)):
            a, b = float(a), float(b)
        return op(a, b)

    def __lt__(self, other) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other) -> bool:
        return self._compare(other, operator.ge)

    def __str__(self) -> str:
        # Numerator units first: "μm m^-1 °F^-1"
        ordered = [item for item in self.powers if item[1] > 0] + [item for item in self.powers if item[1] < 0]
        return " ".join(f"{u.symbol}{format_exponent(p)}" for u, p in ordered)

    def __repr__(self) -> str:
        return f"Unit({self})"


UnitTag = Unit  # Type alias: a Unit is the tag carried by every Quantity

NO_UNITS = Unit()


def is_number(value) -> bool:
    return isinstance(value, (numbers.Number, ndarray)) and not isinstance(value, Unit)


def multiply(u1: Unit, u2: Unit) -> Unit:
    return u1 * u2


def invert(u: Unit) -> Unit:
    return u.inverse


def power(u: Unit, p: Exponent) -> Unit:
    return u ** p


def simplify(u: Unit) -> Unit:
    """Merge exponents of identical atomic units and drop zero powers."""
    return Unit(u.powers)


def dimension_of(u: Unit) -> DimensionTag:
    return u.dimension
