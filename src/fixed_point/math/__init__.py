"""
Fixed-point math primitives

Выбор представления, дескриптор формата, conversion engine и
promotion rules. Чистые функции без состояния.
"""

# Representation Selector
from src.fixed_point.math.integer_kinds import (
    DEFAULT_PLATFORM,
    NATIVE_INT_BITS_DEFAULT,
    TIER_WIDTHS,
    WIDEST_BITS_DEFAULT,
    IntegerKind,
    PlatformConfig,
    RepresentationError,
    kind_for_width,
    native_int_kind,
    native_uint_kind,
    select_representation,
    supported_kinds,
)

# Format descriptor
from src.fixed_point.math.formats import FixedPointFormat

# Conversion Engine
from src.fixed_point.math.conversion import (
    align,
    divide_toward_zero,
    is_valid_float,
    rep_from_float,
    rep_from_int,
    rep_from_rep,
    shift,
    to_float,
    to_fraction,
    to_int,
    validate_finite,
)

# Promotion Rules
from src.fixed_point.math.promotion import (
    Operation,
    comparison_exponent,
    integer_operand_format,
    is_floating_operand,
    is_integer_operand,
    promote,
    promote_additive,
    promote_division,
    promote_multiplicative,
)

__all__ = [
    # Representation Selector — Constants
    "DEFAULT_PLATFORM",
    "NATIVE_INT_BITS_DEFAULT",
    "TIER_WIDTHS",
    "WIDEST_BITS_DEFAULT",
    # Representation Selector — Types
    "IntegerKind",
    "PlatformConfig",
    # Representation Selector — Exceptions
    "RepresentationError",
    # Representation Selector — Functions
    "kind_for_width",
    "native_int_kind",
    "native_uint_kind",
    "select_representation",
    "supported_kinds",
    # Format descriptor
    "FixedPointFormat",
    # Conversion Engine
    "align",
    "divide_toward_zero",
    "is_valid_float",
    "rep_from_float",
    "rep_from_int",
    "rep_from_rep",
    "shift",
    "to_float",
    "to_fraction",
    "to_int",
    "validate_finite",
    # Promotion Rules
    "Operation",
    "comparison_exponent",
    "integer_operand_format",
    "is_floating_operand",
    "is_integer_operand",
    "promote",
    "promote_additive",
    "promote_division",
    "promote_multiplicative",
]
