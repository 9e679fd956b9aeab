"""Time unit definitions.

This module registers seconds, minutes and hours. The second is the reference
unit of the time dimension; minutes and hours carry exact integer factors, so
mixed-unit time arithmetic stays exact for exact magnitudes.

Units:
    s: Second, reference unit of time.
    minute: Minute (60 s), displayed as "min".
    h: Hour (3600 s).

Example:
    >>> duration = 1 * h + 3 * minute + 5 * s
    >>> duration.to(s)
    3785
"""

from __future__ import annotations

from .dimension import TIME
from .registry import register

s = register("s", TIME, 1, name="second", reference=True)
minute = register("min", TIME, 60, name="minute")
h = register("h", TIME, 3600, name="hour")

Time = s.dimension  # Dimension shared by every time unit
