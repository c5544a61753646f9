"""
Integer Kinds — выбор минимального целочисленного представления

Модуль описывает фиксированные tiers встроенных целых (8/16/32/64 бит,
signed/unsigned) и выбирает самый узкий tier, вмещающий запрошенное
количество цифр (бит) fixed-point значения.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Выбирается самый узкий tier с width >= total_digits
2. Если ни один tier не подходит → RepresentationError (ошибка построения типа,
   никогда не ошибка арифметики)
3. wrap() всегда возвращает значение в диапазоне tier (two's-complement)
4. Все функции чистые и детерминированные
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

# =============================================================================
# TIERS
# =============================================================================

# Поддерживаемые ширины встроенных целых (бит)
TIER_WIDTHS: Final[tuple[int, ...]] = (8, 16, 32, 64)

# Ширина `int` на типичной платформе (sizeof(int) == 4)
NATIVE_INT_BITS_DEFAULT: Final[int] = 32

# Самый широкий доступный tier
WIDEST_BITS_DEFAULT: Final[int] = 64


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RepresentationError(Exception):
    """
    Ни один поддерживаемый tier не вмещает запрошенное количество цифр.

    Возникает только при построении типа/формата (make_fixed, promotion),
    никогда при арифметике над уже построенными значениями.
    """

    pass


# =============================================================================
# INTEGER KIND
# =============================================================================


class IntegerKind(str, Enum):
    """Встроенный целочисленный тип, хранящий rep fixed-point значения"""

    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"

    @property
    def width(self) -> int:
        """Ширина в битах (включая знаковый бит)"""
        return _KIND_LAYOUT[self][0]

    @property
    def signed(self) -> bool:
        return _KIND_LAYOUT[self][1]

    @property
    def digits(self) -> int:
        """Количество бит магнитуды (без знакового бита)"""
        return self.width - 1 if self.signed else self.width

    @property
    def min_rep(self) -> int:
        return -(1 << (self.width - 1)) if self.signed else 0

    @property
    def max_rep(self) -> int:
        return (1 << self.digits) - 1

    def wrap(self, value: int) -> int:
        """
        Приведение произвольного целого к диапазону kind по модулю 2^width.

        Переполнение не является ошибкой: старшие биты отбрасываются,
        как при обычной two's-complement арифметике фиксированной ширины.

        Args:
            value: Любое целое (Python int неограничен)

        Returns:
            Значение в [min_rep, max_rep], сравнимое с value по модулю 2^width

        Examples:
            >>> IntegerKind.UINT8.wrap(256)
            0
            >>> IntegerKind.INT8.wrap(128)
            -128
            >>> IntegerKind.INT8.wrap(-129)
            127
        """
        mask = (1 << self.width) - 1
        wrapped = value & mask
        if self.signed and wrapped > self.max_rep:
            wrapped -= 1 << self.width
        return wrapped

    def contains(self, value: int) -> bool:
        """Проверка, что value помещается в kind без wraparound"""
        return self.min_rep <= value <= self.max_rep


# (width, signed) для каждого kind
_KIND_LAYOUT: Final[dict[IntegerKind, tuple[int, bool]]] = {
    IntegerKind.INT8: (8, True),
    IntegerKind.UINT8: (8, False),
    IntegerKind.INT16: (16, True),
    IntegerKind.UINT16: (16, False),
    IntegerKind.INT32: (32, True),
    IntegerKind.UINT32: (32, False),
    IntegerKind.INT64: (64, True),
    IntegerKind.UINT64: (64, False),
}


# =============================================================================
# PLATFORM CONFIG
# =============================================================================


@dataclass(frozen=True)
class PlatformConfig:
    """Конфигурация платформы.

    - native_int_bits: ширина `int` (integral promotion, тип целых литералов)
    - widest_bits: самый широкий доступный tier (64-бит tier может отсутствовать)
    """

    native_int_bits: int = NATIVE_INT_BITS_DEFAULT
    widest_bits: int = WIDEST_BITS_DEFAULT

    def __post_init__(self) -> None:
        if self.native_int_bits not in TIER_WIDTHS:
            raise ValueError(
                f"native_int_bits must be one of {TIER_WIDTHS}, got {self.native_int_bits}"
            )
        if self.widest_bits not in TIER_WIDTHS:
            raise ValueError(
                f"widest_bits must be one of {TIER_WIDTHS}, got {self.widest_bits}"
            )
        if self.native_int_bits > self.widest_bits:
            raise ValueError(
                f"native_int_bits ({self.native_int_bits}) cannot exceed "
                f"widest_bits ({self.widest_bits})"
            )


# Платформа по умолчанию: 32-бит int, 64-бит tier доступен
DEFAULT_PLATFORM: Final[PlatformConfig] = PlatformConfig()


# =============================================================================
# REPRESENTATION SELECTOR
# =============================================================================


def supported_kinds(platform: PlatformConfig = DEFAULT_PLATFORM) -> list[IntegerKind]:
    """Список kinds, доступных на платформе (от узких к широким)"""
    return [kind for kind in IntegerKind if kind.width <= platform.widest_bits]


def kind_for_width(
    bits: int,
    signed: bool,
    platform: PlatformConfig = DEFAULT_PLATFORM,
) -> IntegerKind:
    """
    Самый узкий kind заданной знаковости с width >= bits.

    Args:
        bits: Требуемая ширина в битах (включая знаковый бит, если signed)
        signed: Знаковость kind
        platform: Конфигурация платформы

    Returns:
        Подходящий IntegerKind

    Raises:
        ValueError: Если bits < 1
        RepresentationError: Если bits превышает самый широкий tier

    Examples:
        >>> kind_for_width(9, signed=False)
        <IntegerKind.UINT16: 'uint16'>
        >>> kind_for_width(32, signed=True)
        <IntegerKind.INT32: 'int32'>
    """
    if bits < 1:
        raise ValueError(f"bits must be positive, got {bits}")

    for kind in supported_kinds(platform):
        if kind.signed == signed and kind.width >= bits:
            return kind

    raise RepresentationError(
        f"No {'signed' if signed else 'unsigned'} integer tier holds {bits} bits "
        f"(widest available: {platform.widest_bits})"
    )


def select_representation(
    integer_digits: int,
    fractional_digits: int,
    is_signed: bool,
    platform: PlatformConfig = DEFAULT_PLATFORM,
) -> IntegerKind:
    """
    Выбор минимального kind для заданного количества цифр.

    total_digits = integer_digits + fractional_digits (+1 знаковый бит если signed)

    Args:
        integer_digits: Количество целых бит (>= 0)
        fractional_digits: Количество дробных бит (>= 0)
        is_signed: Резервировать ли знаковый бит
        platform: Конфигурация платформы

    Returns:
        Самый узкий IntegerKind с width >= total_digits

    Raises:
        ValueError: Если количество цифр отрицательное
        RepresentationError: Если ни один tier не подходит

    Examples:
        >>> select_representation(4, 4, is_signed=False)
        <IntegerKind.UINT8: 'uint8'>
        >>> select_representation(7, 0, is_signed=True)
        <IntegerKind.INT8: 'int8'>
        >>> select_representation(2, 29, is_signed=True)
        <IntegerKind.INT32: 'int32'>
    """
    if integer_digits < 0:
        raise ValueError(f"integer_digits must be non-negative, got {integer_digits}")
    if fractional_digits < 0:
        raise ValueError(f"fractional_digits must be non-negative, got {fractional_digits}")

    total_digits = integer_digits + fractional_digits + (1 if is_signed else 0)

    # 0 цифр (make_ufixed(0, 0)) всё равно требует хранилища
    return kind_for_width(max(total_digits, 1), is_signed, platform)


def native_int_kind(platform: PlatformConfig = DEFAULT_PLATFORM) -> IntegerKind:
    """Kind, соответствующий `int` платформы"""
    return kind_for_width(platform.native_int_bits, True, platform)


def native_uint_kind(platform: PlatformConfig = DEFAULT_PLATFORM) -> IntegerKind:
    """Kind, соответствующий `unsigned int` платформы"""
    return kind_for_width(platform.native_int_bits, False, platform)
