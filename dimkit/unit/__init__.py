"""Dimensional analysis engine: units, quantities and conversions.

This package attaches physical units to ordinary numbers and checks, at every
operation, that the arithmetic is dimensionally consistent. A quantity keeps
its magnitude in its own unit; conversions are explicit and exact whenever
the magnitude and every consulted factor are exact.

Architecture:
    The engine is organized into layered modules:

    - dimension: Dimension algebra over base dimensions with rational powers
    - unit_base: Atomic units and their canonical products (Unit tags)
    - registry: Append-only catalog creating atomic units from definitions
    - conversion: Exact and floating point rescaling, affine temperature path
    - quantity: Quantity values and arithmetic/promotion rules
    - functions: Elementary functions with explicit unit contracts
    - ranges: Closed ranges, linspace and arrays of quantities
    - display: Rich console rendering
    - unit_angle, unit_distance, unit_mass, unit_time, unit_current,
      unit_temperature: The default unit catalog

Key Features:
    - Dimension Safety: ``m + s`` raises DimensionMismatch
    - Exact Conversion: ``1 inch`` converts to exactly ``127/50 cm``
    - Affine Temperatures: ``0 °C`` converts to exactly ``32 °F``, while
      temperatures inside compound units convert as intervals
    - Dimensionless Collapse: ``(1 m) / (1 cm)`` is the plain number ``100.0``
    - NumPy Support: quantities can wrap arrays for vectorized arithmetic

Example:
    >>> from dimkit.unit import m, cm, s, degC, degF
    >>>
    >>> speed = (3 * m) / (2 * s)
    >>> print(speed)  # "1.5 m s^-1"
    >>>
    >>> total = 3 * m + 2 * cm  # Quantity(151/50, m)
    >>> total.to(cm)  # 302
    >>>
    >>> (0 * degC).as_unit(degF)  # Quantity(32, °F)
    >>>
    >>> # Cross-dimension sums are rejected
    >>> # 1 * m + 1 * s  # ❌ DimensionMismatch

Available Units:
    Length: m, km, cm, mm, μm (um), inch, ft
    Mass: kg, g
    Time: s, minute, h
    Current: A, mA
    Angle (dimensionless): rad, deg
    Temperature: K, degC, degF, degRa
"""

# Import the engine
from .conversion import conversion_factor, convert
from .dimension import (
    AMOUNT,
    CURRENT,
    DIMENSIONLESS,
    LENGTH,
    LUMINOSITY,
    MASS,
    TEMPERATURE,
    TIME,
    BaseDimension,
    DimensionTag,
)
from .display import as_text
from .errors import (
    DimensionMismatch,
    InvalidConversion,
    RegistrationError,
    UnitError,
    UnknownUnitError,
)
from .functions import (
    abs2,
    ceil,
    copysign,
    cos,
    dimension_of,
    div,
    fld,
    flipsign,
    floor,
    frexp,
    hypot,
    inv,
    isfinite,
    isinf,
    isinteger,
    isnan,
    mod,
    nextfloat,
    prevfloat,
    rem,
    round,
    sign,
    signbit,
    sin,
    sqrt,
    square,
    strip_unit,
    tan,
    to_float,
    to_integer,
    trunc,
    unit_of,
)
from .quantity import Quantity, QuantityArray
from .ranges import QuantityRange, asarray, linspace, qrange
from .registry import UnitRegistry, default_registry, register, register_dimension
from .unit_base import NO_UNITS, AtomicUnit, Unit, UnitTag

# Import the unit catalog
from .unit_angle import deg, rad
from .unit_current import A, Current, mA
from .unit_distance import Length, cm, ft, inch, km, m, mm, um, μm
from .unit_mass import Mass, g, kg
from .unit_temperature import K, Temperature, degC, degF, degRa
from .unit_time import Time, h, minute, s

# Define public API
__all__ = [
    # Dimensions
    "BaseDimension",
    "DimensionTag",
    "DIMENSIONLESS",
    "LENGTH",
    "MASS",
    "TIME",
    "CURRENT",
    "TEMPERATURE",
    "AMOUNT",
    "LUMINOSITY",
    # Units and registry
    "AtomicUnit",
    "Unit",
    "UnitTag",
    "NO_UNITS",
    "UnitRegistry",
    "default_registry",
    "register",
    "register_dimension",
    # Quantities
    "Quantity",
    "QuantityArray",
    "QuantityRange",
    "qrange",
    "linspace",
    "asarray",
    # Conversion
    "convert",
    "conversion_factor",
    # Errors
    "UnitError",
    "DimensionMismatch",
    "InvalidConversion",
    "RegistrationError",
    "UnknownUnitError",
    # Functions
    "unit_of",
    "dimension_of",
    "strip_unit",
    "to_float",
    "to_integer",
    "inv",
    "sqrt",
    "square",
    "abs2",
    "sin",
    "cos",
    "tan",
    "sign",
    "signbit",
    "copysign",
    "flipsign",
    "trunc",
    "floor",
    "ceil",
    "round",
    "frexp",
    "nextfloat",
    "prevfloat",
    "isinteger",
    "isfinite",
    "isinf",
    "isnan",
    "hypot",
    "div",
    "fld",
    "rem",
    "mod",
    # Display
    "as_text",
    # Angular units
    "rad",
    "deg",
    # Length units
    "m",
    "km",
    "cm",
    "mm",
    "μm",
    "um",
    "inch",
    "ft",
    "Length",
    # Mass units
    "kg",
    "g",
    "Mass",
    # Time units
    "s",
    "minute",
    "h",
    "Time",
    # Current units
    "A",
    "mA",
    "Current",
    # Temperature units
    "K",
    "degC",
    "degF",
    "degRa",
    "Temperature",
]
