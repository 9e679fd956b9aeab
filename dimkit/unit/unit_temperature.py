"""Temperature unit definitions (the affine family).

Temperature scales differ by both a factor and an offset. Each unit is
registered with its factor to the kelvin and its offset, the reading of the
scale at absolute zero, so that ``kelvin = (reading - offset) * factor``.
All factors and offsets are exact.

Offsets apply only when converting a pure temperature (a single temperature
unit to the first power). Inside compound units such as ``μm/(m °C)``, and
in sums and differences, temperatures are treated as intervals.

Units:
    K: Kelvin, reference unit of temperature.
    degC: Degree Celsius (offset -273.15), displayed as "°C".
    degF: Degree Fahrenheit (factor 5/9, offset -459.67), displayed as "°F".
    degRa: Degree Rankine (factor 5/9, offset 0), displayed as "°Ra".

Example:
    >>> (0 * degC).as_unit(degF)
    Quantity(32, °F)
"""

from __future__ import annotations

from fractions import Fraction

from .dimension import TEMPERATURE
from .registry import register

K = register("K", TEMPERATURE, 1, offset=0, name="kelvin", reference=True)
degC = register("°C", TEMPERATURE, 1, offset="-273.15", name="degree Celsius")
degF = register("°F", TEMPERATURE, Fraction(5, 9), offset="-459.67", name="degree Fahrenheit")
degRa = register("°Ra", TEMPERATURE, Fraction(5, 9), offset=0, name="degree Rankine")

Temperature = K.dimension
