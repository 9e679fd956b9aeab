"""Mass unit definitions.

Units:
    kg: Kilogram, reference unit of mass.
    g: Gram (1/1000 kg).
"""

from __future__ import annotations

from fractions import Fraction

from .dimension import MASS
from .registry import register

kg = register("kg", MASS, 1, name="kilogram", reference=True)
g = register("g", MASS, Fraction(1, 1000), name="gram")

Mass = kg.dimension
