"""
Promotion Rules — тип результата бинарных операторов

Чистые функции над FixedPointFormat: по форматам двух операндов
определяют формат результата.

ПРАВИЛА:
    ADD / SUBTRACT:
        exponent = min(lhs, rhs)            (более мелкий exponent)
        signed   = lhs.signed OR rhs.signed
        width    = tier(max(lhs.width, rhs.width, native_int_bits))
    MULTIPLY:
        exponent = lhs + rhs
        signed   = lhs.signed OR rhs.signed
        width    = tier(lhs.width + rhs.width)
    DIVIDE:
        exponent = lhs - rhs
        signed   = lhs.signed OR rhs.signed
        width    = tier(max(lhs.width, rhs.width, native_int_bits))
    COMPARE:
        выравнивание к min(lhs, rhs), новый тип не создаётся

    fixed ⊕ float → вся операция выполняется во float
    fixed ⊕ int   → int трактуется как fixed с exponent 0 и kind `int`

Операнды уже `int` ширины или шире не получают carry-бита: сумма
переполняется по модулю 2^width. Операнды уже узкие получают запас
за счёт integral promotion до `int`.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ширина всегда округляется вверх до ближайшего tier
2. RepresentationError только если ни один tier не подходит
3. Функции чистые, результат зависит только от форматов и платформы
"""

from enum import Enum
from functools import lru_cache

from src.fixed_point.math.formats import FixedPointFormat
from src.fixed_point.math.integer_kinds import (
    DEFAULT_PLATFORM,
    PlatformConfig,
    RepresentationError,
    kind_for_width,
    native_int_kind,
    supported_kinds,
)

# =============================================================================
# ENUMS
# =============================================================================


class Operation(str, Enum):
    """Арифметические операторы с правилами promotion"""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


# =============================================================================
# FIXED ⊕ FIXED
# =============================================================================


@lru_cache(maxsize=None)
def promote_additive(
    lhs: FixedPointFormat,
    rhs: FixedPointFormat,
    platform: PlatformConfig = DEFAULT_PLATFORM,
) -> FixedPointFormat:
    """
    Формат результата сложения/вычитания.

    Args:
        lhs: Формат левого операнда
        rhs: Формат правого операнда
        platform: Конфигурация платформы

    Returns:
        Формат результата

    Examples:
        uint8@-3 + int8@-4   → int32@-4
        uint8@-3 + int32@0   → int32@-3
        uint32@-30 + uint32@-30 → uint32@-30 (переполнение оборачивается)
    """
    signed = lhs.signed or rhs.signed
    width = max(lhs.width, rhs.width, platform.native_int_bits)
    kind = kind_for_width(width, signed, platform)
    return FixedPointFormat(kind=kind, exponent=min(lhs.exponent, rhs.exponent))


@lru_cache(maxsize=None)
def promote_multiplicative(
    lhs: FixedPointFormat,
    rhs: FixedPointFormat,
    platform: PlatformConfig = DEFAULT_PLATFORM,
) -> FixedPointFormat:
    """
    Формат результата умножения.

    Ширина произведения = сумма ширин операндов, поэтому сами биты
    произведения никогда не теряются.

    Raises:
        RepresentationError: Если lhs.width + rhs.width превышает самый широкий tier
    """
    signed = lhs.signed or rhs.signed
    kind = kind_for_width(lhs.width + rhs.width, signed, platform)
    return FixedPointFormat(kind=kind, exponent=lhs.exponent + rhs.exponent)


@lru_cache(maxsize=None)
def promote_division(
    lhs: FixedPointFormat,
    rhs: FixedPointFormat,
    platform: PlatformConfig = DEFAULT_PLATFORM,
) -> FixedPointFormat:
    """
    Формат результата деления.

    |quotient| <= |dividend| в единицах rep, поэтому ширины делимого
    (с integral promotion) достаточно. Деление усекает к нулю.
    """
    signed = lhs.signed or rhs.signed
    width = max(lhs.width, rhs.width, platform.native_int_bits)
    kind = kind_for_width(width, signed, platform)
    return FixedPointFormat(kind=kind, exponent=lhs.exponent - rhs.exponent)


_PROMOTERS = {
    Operation.ADD: promote_additive,
    Operation.SUBTRACT: promote_additive,
    Operation.MULTIPLY: promote_multiplicative,
    Operation.DIVIDE: promote_division,
}


def promote(
    op: Operation,
    lhs: FixedPointFormat,
    rhs: FixedPointFormat,
    platform: PlatformConfig = DEFAULT_PLATFORM,
) -> FixedPointFormat:
    """
    Формат результата оператора op.

    Args:
        op: Оператор
        lhs: Формат левого операнда
        rhs: Формат правого операнда
        platform: Конфигурация платформы

    Returns:
        Формат результата

    Raises:
        RepresentationError: Если ни один tier не вмещает результат
    """
    return _PROMOTERS[Operation(op)](lhs, rhs, platform)


def comparison_exponent(lhs: FixedPointFormat, rhs: FixedPointFormat) -> int:
    """Общий (более мелкий) exponent, к которому выравниваются операнды сравнения"""
    return min(lhs.exponent, rhs.exponent)


# =============================================================================
# СМЕШАННЫЕ ОПЕРАНДЫ
# =============================================================================


def integer_operand_format(
    value: int,
    platform: PlatformConfig = DEFAULT_PLATFORM,
) -> FixedPointFormat:
    """
    Формат целого операнда: exponent 0, kind `int` платформы.

    Значения, не помещающиеся в `int`, получают следующий знаковый tier
    (как тип целочисленного литерала).

    Raises:
        RepresentationError: Если значение не помещается ни в один знаковый tier
    """
    native = native_int_kind(platform)
    for kind in supported_kinds(platform):
        if kind.signed and kind.width >= native.width and kind.contains(value):
            return FixedPointFormat(kind=kind, exponent=0)

    raise RepresentationError(
        f"Integer operand {value} does not fit any signed tier "
        f"(widest available: {platform.widest_bits})"
    )


def is_floating_operand(value: object) -> bool:
    """Операнд, превращающий всю операцию во float-операцию"""
    return isinstance(value, float)


def is_integer_operand(value: object) -> bool:
    """Целый операнд (bool исключён)"""
    return isinstance(value, int) and not isinstance(value, bool)
