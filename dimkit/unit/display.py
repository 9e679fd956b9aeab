"""Rich console rendering of quantities and units.

Quantities implement ``__rich__`` through ``as_text``, so they can be printed
directly with a rich Console or placed in rich tables, with the magnitude and
the unit styled separately.

Example:
    >>> from rich.console import Console
    >>> from dimkit.unit import m, s
    >>> Console().print(9.81 * m / s ** 2)
"""

from __future__ import annotations

from rich.text import Text

from .quantity import Quantity
from .unit_base import Unit

MAGNITUDE_STYLE = "bold"
UNIT_STYLE = "cyan"


def as_text(x) -> Text:
    """Render a quantity, unit or plain number as rich Text."""
    if isinstance(x, Quantity):
        text = Text(str(x.value), style=MAGNITUDE_STYLE)
        if not x.unit.is_unitless:
            text.append(" ")
            text.append(str(x.unit), style=UNIT_STYLE)
        return text
    if isinstance(x, Unit):
        return Text(str(x), style=UNIT_STYLE)
    return Text(str(x))
