"""Exception hierarchy for the unit engine.

All failures are raised synchronously at the offending call; nothing is
retried and no partial result is produced.

Classes:
    UnitError: Base class for every error raised by dimkit.
    DimensionMismatch: Operands of an operation requiring equal dimensions
        have different dimensions.
    InvalidConversion: A bare number was mixed with a unitful value of
        nonzero dimension where a conversion is required.
    RegistrationError: Invalid or duplicate unit/dimension registration.
    UnknownUnitError: Lookup of a symbol the registry does not know.
"""

from __future__ import annotations


class UnitError(Exception):
    """Base class for all unit engine errors."""


class DimensionMismatch(UnitError, TypeError):
    """Raised when an operation needs equal dimensions and gets different ones.

    Subclasses TypeError so that code written against plain unit families
    (which reject mixed families with TypeError) keeps working.

    Attributes:
        left: Dimension of the left operand.
        right: Dimension of the right operand.
    """

    def __init__(self, left, right, operation: str = ""):
        self.left = left
        self.right = right
        self.operation = operation
        where = f" in {operation}" if operation else ""
        super().__init__(f"dimension mismatch{where}: {left} vs {right}")


class InvalidConversion(UnitError, ValueError):
    """Raised when a unitless number cannot stand in for a unitful value."""


class RegistrationError(UnitError, ValueError):
    """Raised for duplicate symbols, sealed registries and bad definitions."""


class UnknownUnitError(RegistrationError, KeyError):
    """Raised when looking up a symbol that was never registered."""

    def __str__(self) -> str:
        return Exception.__str__(self)
