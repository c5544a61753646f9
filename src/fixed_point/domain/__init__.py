"""
Fixed-point value type and construction API.

Contains the FixedPoint scaled value, the per-format type factory,
make_fixed / make_ufixed and truncating arithmetic helpers.
"""

from src.fixed_point.domain.construction import make_fixed, make_ufixed
from src.fixed_point.domain.fixed_point import (
    FixedPoint,
    common_platform,
    fixed_point_type,
    type_for_format,
)
from src.fixed_point.domain.truncating import (
    trunc_multiply,
    trunc_multiply_format,
    trunc_square,
)

__all__ = [
    # Scaled value
    "FixedPoint",
    "common_platform",
    "fixed_point_type",
    "type_for_format",
    # Construction API
    "make_fixed",
    "make_ufixed",
    # Truncating arithmetic
    "trunc_multiply",
    "trunc_multiply_format",
    "trunc_square",
]
