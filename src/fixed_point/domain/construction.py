"""
Construction API — make_fixed / make_ufixed

Построение fixed-point типа по количеству целых и дробных цифр:
минимальный kind выбирается автоматически.

    make_fixed(I, F)  → знаковый тип, |v| < 2^I, разрешение 2^-F
    make_ufixed(I, F) → беззнаковый тип, 0 <= v < 2^I, разрешение 2^-F
"""

import logging

from src.fixed_point.domain.fixed_point import FixedPoint, fixed_point_type
from src.fixed_point.math.integer_kinds import (
    DEFAULT_PLATFORM,
    PlatformConfig,
    select_representation,
)

logger = logging.getLogger(__name__)


def _make(
    integer_digits: int,
    fractional_digits: int,
    is_signed: bool,
    platform: PlatformConfig,
) -> type[FixedPoint]:
    kind = select_representation(integer_digits, fractional_digits, is_signed, platform)
    logger.debug(
        "Resolved %s(%d, %d) to %s",
        "make_fixed" if is_signed else "make_ufixed",
        integer_digits,
        fractional_digits,
        kind.value,
    )
    return fixed_point_type(kind, -fractional_digits, platform)


def make_fixed(
    integer_digits: int,
    fractional_digits: int = 0,
    platform: PlatformConfig = DEFAULT_PLATFORM,
) -> type[FixedPoint]:
    """
    Знаковый fixed-point тип с заданной раскладкой бит.

    Args:
        integer_digits: Количество целых бит (без знакового)
        fractional_digits: Количество дробных бит
        platform: Конфигурация платформы

    Returns:
        FixedPoint тип с kind = самый узкий знаковый tier
        шириной >= integer_digits + fractional_digits + 1
        и exponent = -fractional_digits

    Raises:
        ValueError: Если количество цифр отрицательное
        RepresentationError: Если ни один tier не подходит

    Examples:
        >>> make_fixed(7, 0) is fixed_point_type(IntegerKind.INT8, 0)
        True
        >>> make_fixed(2, 29)(3.141592653) == 3.1415926516056061
        True
    """
    return _make(integer_digits, fractional_digits, True, platform)


def make_ufixed(
    integer_digits: int,
    fractional_digits: int = 0,
    platform: PlatformConfig = DEFAULT_PLATFORM,
) -> type[FixedPoint]:
    """
    Беззнаковый fixed-point тип с заданной раскладкой бит.

    Args:
        integer_digits: Количество целых бит
        fractional_digits: Количество дробных бит
        platform: Конфигурация платформы

    Returns:
        FixedPoint тип с kind = самый узкий беззнаковый tier
        шириной >= integer_digits + fractional_digits
        и exponent = -fractional_digits

    Raises:
        ValueError: Если количество цифр отрицательное
        RepresentationError: Если ни один tier не подходит

    Examples:
        >>> make_ufixed(4, 4)(15.9375) == 15.9375
        True
    """
    return _make(integer_digits, fractional_digits, False, platform)
