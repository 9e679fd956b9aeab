"""Angular unit definitions.

Angles are dimensionless: the radian is the reference and the degree is
registered with the inexact factor π/180. Because they are dimensionless, a
sum or product of angles collapses to a plain number in radians, and the
trigonometric functions accept any dimensionless quantity.

Units:
    rad: Radian, reference angle unit.
    deg: Degree (π/180 rad), displayed as "°".

Example:
    >>> from math import pi
    >>> pi / 2 * rad + 90 * deg
    3.141592653589793
"""

from __future__ import annotations

from math import pi

from .dimension import DIMENSIONLESS
from .registry import register

rad = register("rad", DIMENSIONLESS, 1, name="radian", reference=True)
deg = register("°", DIMENSIONLESS, pi / 180, name="degree")
