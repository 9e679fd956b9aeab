"""Ranges, linear spaces and arrays of quantities.

These containers consume quantities as ordinary orderable, arithmetic
elements. They follow the same exactness rules as scalar arithmetic: a range
whose endpoints and step are exact has an exact length and exact elements,
while any floating point input makes the whole range floating point.

Key Features:
    - qrange: closed arithmetic progression ``start, start+step, ...`` that
      includes ``stop`` when it is reached, like an inclusive colon range.
    - QuantityRange: lazy range object supporting len, indexing, slicing
      (which returns another range), iteration, equality and scaling.
    - linspace: evenly spaced float quantities stored in a numpy array.
    - asarray: pack a sequence of quantities into one array-valued quantity.

Mixing a bare number with a unitful endpoint of nonzero dimension raises
InvalidConversion; endpoints of different dimensions raise DimensionMismatch.

Example:
    >>> from dimkit.unit import m
    >>> r = qrange(1 * m, 2 * m, 0.2 * m)
    >>> len(r)
    6
    >>> list(qrange(5 * m, 1 * m, -1 * m))[2]
    Quantity(3, m)
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Iterable, Iterator

import numpy as np

from ..config import RANGE_LENGTH_RTOL
from .conversion import convert_linear, convert_value, from_reference, is_exact
from .errors import InvalidConversion
from .quantity import Quantity
from .unit_base import Unit, is_number


def _as_quantity(x, unit: Unit | None, what: str) -> Quantity:
    if isinstance(x, Quantity):
        return x
    if isinstance(x, Unit):
        return Quantity(1, x)
    if is_number(x) and unit is not None and unit.dimension.is_dimensionless:
        return Quantity(from_reference(x, unit), unit)
    raise InvalidConversion(
        f"{what} {x!r} has no unit and cannot be mixed with {unit or 'unitful'} quantities"
    )


def _range_length(start, stop, step) -> int:
    if is_exact(start) and is_exact(stop) and is_exact(step):
        n = math.floor(Fraction(stop - start) / Fraction(step))
        return max(0, n + 1)
    r = (stop - start) / step
    if not math.isfinite(r):
        raise ValueError(f"range length is not finite: ({stop} - {start}) / {step}")
    nearest = round(r)
    n = nearest if abs(r - nearest) <= RANGE_LENGTH_RTOL * max(1.0, abs(r)) else math.floor(r)
    return max(0, n + 1)


class QuantityRange:
    """Arithmetic progression of quantities sharing one unit.

    Stored as magnitudes ``start`` and ``step`` plus a length, the way a
    built-in ``range`` is, so indexing and slicing never materialize the
    elements.

    Attributes:
        unit: Unit of every element.
    """

    __slots__ = ("_start", "_step", "_length", "_unit")

    def __init__(self, start, step, length: int, unit: Unit):
        if step == 0:
            raise ValueError("range step cannot be zero")
        self._start = start
        self._step = step
        self._length = max(0, int(length))
        self._unit = unit

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def start(self) -> Quantity:
        return Quantity(self._start, self._unit)

    @property
    def step(self) -> Quantity:
        return Quantity(self._step, self._unit)

    @property
    def stop(self) -> Quantity:
        """Last element of a non-empty range.

        Raises:
            IndexError: If the range is empty.
        """
        return self[-1]

    @property
    def is_exact(self) -> bool:
        return is_exact(self._start) and is_exact(self._step)

    def _at(self, i: int):
        return self._start + i * self._step

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, key):
        if isinstance(key, slice):
            indices = range(self._length)[key]
            start = self._at(indices.start) if len(indices) else self._start
            return QuantityRange(start, self._step * indices.step, len(indices), self._unit)
        i = range(self._length)[key]
        return Quantity(self._at(i), self._unit)

    def __iter__(self) -> Iterator[Quantity]:
        for i in range(self._length):
            yield Quantity(self._at(i), self._unit)

    def __eq__(self, other) -> bool:
        if not isinstance(other, QuantityRange):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None

    def __mul__(self, k):
        if not is_number(k):
            return NotImplemented
        return QuantityRange(self._start * k, self._step * k, self._length, self._unit)

    __rmul__ = __mul__

    def __truediv__(self, k):
        if not is_number(k):
            return NotImplemented
        return QuantityRange(self._start / k, self._step / k, self._length, self._unit)

    def to_array(self) -> Quantity:
        """Materialize the range as one array-valued quantity."""
        return Quantity(np.asarray([self._at(i) for i in range(self._length)]), self._unit)

    def __repr__(self) -> str:
        return f"QuantityRange(start={self._start}, step={self._step}, length={self._length}, unit={self._unit})"


def qrange(start, stop, step=None) -> QuantityRange:
    """Closed range from ``start`` towards ``stop`` in increments of ``step``.

    ``stop`` is included when it falls on the progression. ``step`` defaults
    to one of the start unit. ``stop`` and ``step`` are converted into the
    unit of ``start``.

    Raises:
        InvalidConversion: If a bare number is mixed with a unitful endpoint.
        DimensionMismatch: If endpoints and step have different dimensions.
        ValueError: If the step is zero.
    """
    anchor = next((x for x in (start, stop, step) if isinstance(x, Quantity)), None)
    unit = anchor.unit if anchor is not None else None
    start = _as_quantity(start, unit, "start")
    unit = start.unit
    stop = _as_quantity(stop, unit, "stop")
    step = Quantity(1, unit) if step is None else _as_quantity(step, unit, "step")

    unit.check_same_dimension(stop.unit, "range")
    unit.check_same_dimension(step.unit, "range")
    a = start.value
    b = convert_linear(stop.value, stop.unit, unit)
    s = convert_linear(step.value, step.unit, unit)
    if not (is_exact(a) and is_exact(b) and is_exact(s)):
        a, b, s = float(a), float(b), float(s)
    if s == 0:
        raise ValueError("range step cannot be zero")
    return QuantityRange(a, s, _range_length(a, b, s), unit)


def linspace(start, stop, num: int = 50) -> Quantity:
    """``num`` evenly spaced float quantities from ``start`` to ``stop`` inclusive.

    Raises:
        InvalidConversion: If exactly one endpoint carries a unit.
        DimensionMismatch: If the endpoints have different dimensions.
    """
    if not isinstance(start, Quantity) and not isinstance(stop, Quantity):
        return np.linspace(start, stop, num)
    if not isinstance(start, Quantity) or not isinstance(stop, Quantity):
        raise InvalidConversion(
            f"linspace endpoints must both carry units, got {start!r} and {stop!r}"
        )
    a = float(start.value)
    b = float(convert_value(stop.value, stop.unit, start.unit))
    return Quantity(np.linspace(a, b, num), start.unit)


def asarray(items: Iterable, unit: Unit | None = None) -> Quantity:
    """Pack quantities into one array-valued quantity.

    Args:
        items: Quantities of one dimension. Bare numbers are accepted only
            when the target unit is dimensionless.
        unit: Target unit; defaults to the unit of the first item.

    Raises:
        InvalidConversion: If bare numbers are mixed with unitful items.
        DimensionMismatch: If items have different dimensions.
        ValueError: If ``items`` is empty and no unit is given.
    """
    items = list(items)
    if unit is None:
        if not items:
            raise ValueError("cannot infer the unit of an empty sequence")
        first = items[0]
        if not isinstance(first, (Quantity, Unit)):
            raise InvalidConversion(f"first item {first!r} has no unit; pass unit= explicitly")
        unit = first.unit if isinstance(first, Quantity) else first
    values = []
    for item in items:
        q = _as_quantity(item, unit, "item")
        values.append(convert_value(q.value, q.unit, unit))
    return Quantity(np.asarray(values), unit)
