"""Electric current unit definitions."""

from __future__ import annotations

from fractions import Fraction

from .dimension import CURRENT
from .registry import register

A = register("A", CURRENT, 1, name="ampere", reference=True)
mA = register("mA", CURRENT, Fraction(1, 1000), name="milliampere")

Current = A.dimension
