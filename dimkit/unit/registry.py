"""Catalog of registered dimensions and atomic units.

The registry is the registration collaborator of the unit engine: it creates
AtomicUnit definitions from ``(symbol, dimension, factor, offset)`` and hands
back the Unit tag users compute with. It is append-only. A symbol can be
registered once; re-registration raises RegistrationError, and a sealed
registry refuses all further registration.

The arithmetic path never consults the registry. Units resolve to their
AtomicUnit objects when they are registered, and every derived tag carries
those objects directly.

A process-wide ``default_registry`` is populated by the catalog modules
(``unit_distance``, ``unit_time``, ...) when ``dimkit.unit`` is imported.
Independent registries can be created for isolated catalogs.

Example:
    >>> from dimkit.unit import registry, dimension
    >>> reg = registry.UnitRegistry.with_standard_dimensions()
    >>> furlong = reg.register("furlong", dimension.LENGTH, "201.168")
    >>> reg["furlong"] is furlong
    True
"""

from __future__ import annotations

import logging
from typing import Iterator

from .dimension import (
    AMOUNT,
    CURRENT,
    LENGTH,
    LUMINOSITY,
    MASS,
    TEMPERATURE,
    TIME,
    BaseDimension,
    DimensionTag,
)
from .errors import RegistrationError, UnknownUnitError
from .unit_base import AtomicUnit, Factor, Unit, as_factor

logger = logging.getLogger(__name__)

STANDARD_DIMENSIONS = (LENGTH, MASS, TIME, CURRENT, TEMPERATURE, AMOUNT, LUMINOSITY)


class UnitRegistry:
    """Append-only catalog of base dimensions and atomic units."""

    def __init__(self):
        self._dimensions: dict[str, BaseDimension] = {}
        self._units: dict[str, Unit] = {}
        self._sealed = False

    @classmethod
    def with_standard_dimensions(cls) -> UnitRegistry:
        registry = cls()
        for base in STANDARD_DIMENSIONS:
            registry.add_dimension(base)
        return registry

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        """Refuse any further registration."""
        self._sealed = True
        logger.debug("registry sealed with %d units", len(self._units))

    def _check_open(self, symbol: str) -> None:
        if self._sealed:
            raise RegistrationError(f"cannot register {symbol!r}: registry is sealed")

    # -------------------------------- Dimensions --------------------------------
    def add_dimension(self, base: BaseDimension) -> BaseDimension:
        self._check_open(base.symbol)
        existing = self._dimensions.get(base.symbol)
        if existing is not None and existing != base:
            raise RegistrationError(f"dimension symbol {base.symbol!r} already registered as {existing.name}")
        self._dimensions[base.symbol] = base
        logger.debug("registered dimension %s (%s)", base.symbol, base.name)
        return base

    def register_dimension(self, symbol: str, name: str, affine: bool = False) -> BaseDimension:
        """Create and register a new base dimension.

        Raises:
            RegistrationError: If the symbol is taken or the registry is sealed.
        """
        if symbol in self._dimensions:
            raise RegistrationError(f"dimension symbol {symbol!r} already registered")
        return self.add_dimension(BaseDimension(symbol, name, affine))

    def dimension(self, symbol: str) -> BaseDimension:
        try:
            return self._dimensions[symbol]
        except KeyError:
            raise UnknownUnitError(f"unknown dimension {symbol!r}") from None

    # -------------------------------- Units --------------------------------
    def register(
        self,
        symbol: str,
        dimension: DimensionTag | BaseDimension,
        factor: Factor | int | str = 1,
        offset: Factor | int | str | None = None,
        *,
        name: str | None = None,
        reference: bool = False,
    ) -> Unit:
        """Register an atomic unit and return its Unit tag.

        Args:
            symbol: Unique symbol of the unit.
            dimension: Dimension of the unit, as a tag or a base dimension.
            factor: Factor to the reference unit of the dimension. Ints,
                Fractions and decimal strings are exact; floats are not.
            offset: Reading of the unit at the reference zero. Only valid for
                affine dimensions (temperature).
            name: Human readable name, defaults to the symbol.
            reference: Marks the coherent reference unit of the dimension.

        Raises:
            RegistrationError: On duplicate symbols, sealed registries, zero
                factors or offsets on linear dimensions.
        """
        self._check_open(symbol)
        if symbol in self._units:
            raise RegistrationError(f"unit symbol {symbol!r} already registered")
        if isinstance(dimension, BaseDimension):
            dimension = DimensionTag.of(dimension)
        if reference and as_factor(factor) != 1:
            raise RegistrationError(f"reference unit {symbol!r} must have factor 1, got {factor!r}")
        atomic = AtomicUnit(
            symbol=symbol,
            name=name or symbol,
            dimension=dimension,
            factor=factor,
            offset=offset,
            is_reference=reference,
        )
        unit = Unit.of(atomic)
        self._units[symbol] = unit
        logger.debug("registered unit %s [%s] factor=%s offset=%s", symbol, dimension, atomic.factor, atomic.offset)
        return unit

    def get(self, symbol: str, default: Unit | None = None) -> Unit | None:
        return self._units.get(symbol, default)

    def reference_unit(self, dimension: DimensionTag) -> Unit | None:
        """Registered reference unit of a dimension, if any."""
        for unit in self._units.values():
            atomic = unit.atomic
            if atomic.is_reference and atomic.dimension == dimension:
                return unit
        return None

    def __getitem__(self, symbol: str) -> Unit:
        try:
            return self._units[symbol]
        except KeyError:
            raise UnknownUnitError(f"unknown unit {symbol!r}") from None

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._units

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        state = "sealed" if self._sealed else "open"
        return f"UnitRegistry({len(self._units)} units, {len(self._dimensions)} dimensions, {state})"


default_registry = UnitRegistry.with_standard_dimensions()

register = default_registry.register
register_dimension = default_registry.register_dimension
