"""
Truncating arithmetic — умножение без роста ширины

trunc_multiply сохраняет ширину более широкого операнда и смещает
точку так, чтобы целая часть произведения поместилась целиком;
младшие (дробные) биты произведения отбрасываются.

    integer_digits(result) = integer_digits(lhs) + integer_digits(rhs)
    exponent(result)       = integer_digits(result) - digits(kind)

Пример ("bounded integers"):
    make_ufixed(2, 6)(3) → trunc_square → make_ufixed(4, 4)(9)
                         → trunc_square → make_ufixed(8, 0)(81)
"""

from src.fixed_point.domain.fixed_point import (
    FixedPoint,
    common_platform,
    type_for_format,
)
from src.fixed_point.math.conversion import shift
from src.fixed_point.math.formats import FixedPointFormat
from src.fixed_point.math.integer_kinds import (
    DEFAULT_PLATFORM,
    PlatformConfig,
    kind_for_width,
)


def trunc_multiply_format(
    lhs: FixedPointFormat,
    rhs: FixedPointFormat,
    platform: PlatformConfig = DEFAULT_PLATFORM,
) -> FixedPointFormat:
    """
    Формат результата усечённого умножения.

    Args:
        lhs: Формат левого операнда
        rhs: Формат правого операнда
        platform: Конфигурация платформы

    Returns:
        Формат той же ширины, что и более широкий операнд (signed = OR),
        с целой частью integer_digits(lhs) + integer_digits(rhs)
    """
    signed = lhs.signed or rhs.signed
    kind = kind_for_width(max(lhs.width, rhs.width), signed, platform)
    integer_digits = lhs.integer_digits + rhs.integer_digits
    return FixedPointFormat(kind=kind, exponent=integer_digits - kind.digits)


def trunc_multiply(lhs: FixedPoint, rhs: FixedPoint) -> FixedPoint:
    """
    Умножение с сохранением ширины операндов.

    Точное произведение имеет exponent lhs + rhs; оно сдвигается
    арифметически вправо до exponent результата (усечение младших бит).

    Args:
        lhs: Левый операнд
        rhs: Правый операнд

    Returns:
        Значение формата trunc_multiply_format(lhs, rhs)

    Raises:
        TypeError: Если операнд не FixedPoint или платформы операндов различаются
    """
    if not isinstance(lhs, FixedPoint) or not isinstance(rhs, FixedPoint):
        raise TypeError(
            f"trunc_multiply expects FixedPoint operands, got "
            f"{type(lhs).__name__} and {type(rhs).__name__}"
        )

    platform = common_platform(lhs, rhs)
    result_format = trunc_multiply_format(lhs.format, rhs.format, platform)
    product = lhs.rep * rhs.rep
    product_exponent = lhs.exponent + rhs.exponent

    return type_for_format(result_format, platform).from_rep(
        shift(product, product_exponent - result_format.exponent)
    )


def trunc_square(value: FixedPoint) -> FixedPoint:
    """Квадрат через trunc_multiply"""
    return trunc_multiply(value, value)
