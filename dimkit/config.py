"""Global configuration and type definitions for the dimkit unit engine.

This module provides centralized configuration constants and fundamental type
definitions used throughout the dimensional-analysis engine. It establishes
which numeric types are accepted as quantity magnitudes, which of them count
as exact, and the numeric tolerances used where floating point input forces
an approximate answer.

Type Definitions:
    BASE_TYPE: Union type defining acceptable numeric magnitudes. Supports
               Python native types (int, float), exact rationals (Fraction)
               and NumPy arrays for vectorized quantity arithmetic.
    EXACT_TYPES: Tuple of types whose values are exact ratios of integers.
                 Conversions stay rational as long as every input is one of
                 these.

Tunables:
    MAX_EXPONENT_DENOMINATOR: Largest denominator kept when a float exponent
        is rationalised for unit algebra (``m ** 0.5`` becomes ``m^(1/2)``).
    EXPONENT_RTOL: Relative tolerance within which the rationalised exponent
        must reproduce the float it came from; ``m ** 0.1234567`` is rejected.
    HASH_SIGNIFICANT_DIGITS: Significant digits of the reference value that
        quantity hashes are computed from, so that ``1 inch`` and ``2.54 cm``
        hash alike despite round-off along different unit paths.
    RANGE_LENGTH_RTOL: Relative tolerance used when counting the elements of
        a floating point range, so that ``0.1:0.1:0.3`` has three elements
        despite round-off in ``(0.3 - 0.1) / 0.1``.

Example:
    >>> from dimkit.config import BASE_TYPE
    >>> from fractions import Fraction
    >>> import numpy as np
    >>> scalar_int: BASE_TYPE = 42
    >>> exact: BASE_TYPE = Fraction(2, 5)
    >>> array_data: BASE_TYPE = np.array([1.0, 2.0, 3.0])
"""

from fractions import Fraction

from numpy import ndarray

BASE_TYPE = int | float | Fraction | ndarray
EXACT_TYPES = (int, Fraction)

MAX_EXPONENT_DENOMINATOR = 1000
EXPONENT_RTOL = 1e-12
HASH_SIGNIFICANT_DIGITS = 12
RANGE_LENGTH_RTOL = 1e-10
