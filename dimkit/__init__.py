"""Dimensional analysis for Python numbers and numpy arrays.

dimkit attaches physical units to magnitudes, rejects dimensionally
inconsistent arithmetic and converts between units of one dimension, exactly
when the inputs are exact.

Package Layout:
    dimkit.config: Numeric type definitions and tunables.
    dimkit.unit: The unit engine and the default unit catalog.

Example:
    >>> from dimkit.unit import km, h, m, s
    >>> cruise = 54 * km / h
    >>> cruise.to(m / s)
    15
"""
