"""Dimension algebra: products of base dimensions raised to rational powers.

A dimension is the physical quality of a measurement (length, mass, time, ...)
independent of the unit used to express it. This module represents a
dimension as a canonical, immutable product of base dimensions, each raised to
a rational power, so that ``L^1 T^-1`` built in any order compares and hashes
the same.

Key Concepts:
    - BaseDimension: atomic physical dimension identified by a stable symbol.
    - DimensionTag: canonical product of base dimensions with nonzero
      Fraction exponents, sorted by base symbol.
    - Affine family: a base dimension (temperature) whose units may carry an
      additive offset. The flag lives on the base dimension and is only
      consulted by the conversion engine.

All operations are total: multiplication adds exponents, inversion negates
them, powers scale them, and zero exponents are dropped.

Example:
    >>> speed = DimensionTag.of(LENGTH) / DimensionTag.of(TIME)
    >>> str(speed)
    'L T^-1'
    >>> speed * DimensionTag.of(TIME) == DimensionTag.of(LENGTH)
    True
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Iterable, Iterator

from ..config import EXPONENT_RTOL, MAX_EXPONENT_DENOMINATOR

Exponent = int | Fraction


def as_exponent(p) -> Fraction:
    """Normalize an exponent to a Fraction.

    Integers and rationals convert exactly. Floats are rationalised with a
    bounded denominator so ``0.5`` becomes ``1/2``; a float that no such
    fraction reproduces is rejected rather than silently rounded.

    Raises:
        TypeError: If ``p`` is not a real number.
        ValueError: If a float exponent is not a small-denominator fraction.
    """
    if isinstance(p, Fraction):
        return p
    if isinstance(p, numbers.Rational):
        return Fraction(int(p.numerator), int(p.denominator))
    if isinstance(p, numbers.Real):
        q = Fraction(float(p)).limit_denominator(MAX_EXPONENT_DENOMINATOR)
        if not math.isclose(float(q), float(p), rel_tol=EXPONENT_RTOL):
            raise ValueError(
                f"exponent {p!r} is not a fraction with denominator <= {MAX_EXPONENT_DENOMINATOR}"
            )
        return q
    raise TypeError(f"exponent must be a real number, got {type(p).__name__}")


def format_exponent(p: Fraction) -> str:
    if p == 1:
        return ""
    if p.denominator == 1:
        return f"^{p.numerator}"
    return f"^({p.numerator}/{p.denominator})"


@dataclass(frozen=True)
class BaseDimension:
    """Atomic physical dimension.

    Attributes:
        symbol: Stable short symbol used for ordering and display ("L").
        name: Human readable name ("length").
        affine: True for families whose units may carry offsets (temperature).
    """

    symbol: str
    name: str
    affine: bool = False

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class DimensionTag:
    """Canonical product of base dimensions raised to rational powers.

    The ``powers`` tuple is normalized on construction: exponents of the same
    base are summed, zero exponents are dropped and entries are sorted by base
    symbol. Equality and hashing therefore ignore construction order.
    """

    powers: tuple[tuple[BaseDimension, Fraction], ...] = field(default=())

    def __post_init__(self):
        merged: dict[BaseDimension, Fraction] = {}
        for base, p in self.powers:
            merged[base] = merged.get(base, Fraction(0)) + as_exponent(p)
        canonical = tuple(
            sorted(
                ((base, p) for base, p in merged.items() if p != 0),
                key=lambda item: item[0].symbol,
            )
        )
        object.__setattr__(self, "powers", canonical)

    @classmethod
    def of(cls, base: BaseDimension, power: Exponent = 1) -> DimensionTag:
        """Build the tag for a single base dimension."""
        return cls(((base, as_exponent(power)),))

    @property
    def is_dimensionless(self) -> bool:
        return not self.powers

    @property
    def is_affine(self) -> bool:
        """True for a pure affine dimension such as temperature to the first power."""
        return len(self.powers) == 1 and self.powers[0][0].affine and self.powers[0][1] == 1

    def __iter__(self) -> Iterator[tuple[BaseDimension, Fraction]]:
        return iter(self.powers)

    def __mul__(self, other: DimensionTag) -> DimensionTag:
        if not isinstance(other, DimensionTag):
            return NotImplemented
        return DimensionTag(self.powers + other.powers)

    def __truediv__(self, other: DimensionTag) -> DimensionTag:
        if not isinstance(other, DimensionTag):
            return NotImplemented
        return self * other.inverse()

    def __pow__(self, p: Exponent) -> DimensionTag:
        q = as_exponent(p)
        return DimensionTag(tuple((base, e * q) for base, e in self.powers))

    def inverse(self) -> DimensionTag:
        return DimensionTag(tuple((base, -e) for base, e in self.powers))

    def __str__(self) -> str:
        if not self.powers:
            return "1"
        return " ".join(f"{base.symbol}{format_exponent(p)}" for base, p in self.powers)

    def __repr__(self) -> str:
        return f"DimensionTag({self})"


def multiply(a: DimensionTag, b: DimensionTag) -> DimensionTag:
    return a * b


def invert(a: DimensionTag) -> DimensionTag:
    return a.inverse()


def power(a: DimensionTag, p: Exponent) -> DimensionTag:
    return a ** p


def equals(a: DimensionTag, b: DimensionTag) -> bool:
    return a == b


def product(tags: Iterable[DimensionTag]) -> DimensionTag:
    result = DIMENSIONLESS
    for tag in tags:
        result = result * tag
    return result


# Standard base dimensions (SI base quantities)
LENGTH = BaseDimension("L", "length")
MASS = BaseDimension("M", "mass")
TIME = BaseDimension("T", "time")
CURRENT = BaseDimension("I", "current")
TEMPERATURE = BaseDimension("Θ", "temperature", affine=True)
AMOUNT = BaseDimension("N", "amount")
LUMINOSITY = BaseDimension("J", "luminosity")

DIMENSIONLESS = DimensionTag()
