"""Distance and length unit definitions.

This module registers the length units of the default catalog. The meter is
the reference unit of the length dimension; every other length unit is
registered with an exact rational factor to the meter, so conversions between
them stay exact for exact magnitudes (``1 inch == 254/100 cm``).

Units:
    m: Meter, reference unit of length.
    km: Kilometer (1000 m).
    cm: Centimeter (1/100 m).
    mm: Millimeter (1/1000 m).
    μm: Micrometer (1/10^6 m), also exported as ``um``.
    inch: Inch (0.0254 m exactly).
    ft: Foot (0.3048 m exactly).

Example:
    >>> flight_range = 25 * km
    >>> flight_range.to(m)
    25000
    >>> (1 * inch).as_unit(cm)
    Quantity(127/50, cm)
"""

from __future__ import annotations

from fractions import Fraction

from .dimension import LENGTH
from .registry import register

m = register("m", LENGTH, 1, name="meter", reference=True)
km = register("km", LENGTH, 1000, name="kilometer")
cm = register("cm", LENGTH, Fraction(1, 100), name="centimeter")
mm = register("mm", LENGTH, Fraction(1, 1000), name="millimeter")
μm = register("μm", LENGTH, Fraction(1, 10**6), name="micrometer")
um = μm
inch = register("inch", LENGTH, "0.0254", name="inch")
ft = register("ft", LENGTH, "0.3048", name="foot")

Length = m.dimension  # Dimension shared by every length unit
