"""
Fixed-point numeric type: scaled integer (rep * 2^exponent).

This package is independent of external systems: pure value type,
representation selection, conversion and type-promotion rules.
"""

from src.fixed_point.domain import (
    FixedPoint,
    fixed_point_type,
    make_fixed,
    make_ufixed,
    trunc_multiply,
    trunc_square,
    type_for_format,
)
from src.fixed_point.math import (
    DEFAULT_PLATFORM,
    FixedPointFormat,
    IntegerKind,
    Operation,
    PlatformConfig,
    RepresentationError,
    promote,
    select_representation,
)

__all__ = [
    "DEFAULT_PLATFORM",
    "FixedPoint",
    "FixedPointFormat",
    "IntegerKind",
    "Operation",
    "PlatformConfig",
    "RepresentationError",
    "fixed_point_type",
    "make_fixed",
    "make_ufixed",
    "promote",
    "select_representation",
    "trunc_multiply",
    "trunc_square",
    "type_for_format",
]
