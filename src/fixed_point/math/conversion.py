"""
Conversion Engine — преобразования native ↔ rep и между форматами

Модуль заполняет rep fixed-point значения:
- из целого (сдвиг на -exponent)
- из float (усечение к нулю, без округления к ближайшему)
- из rep другого формата (пересчёт масштаба сдвигом)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда приводится к диапазону kind через wrap (mod 2^width)
2. Переполнение никогда не является ошибкой и не насыщается
3. Float усекается к нулю: значение мельче разрешения формата → 0
4. NaN/Inf отвергаются (ValueError) до любых вычислений
5. Выравнивание к более мелкому exponent точное (только левый сдвиг)
"""

import math
from fractions import Fraction

from src.fixed_point.math.formats import FixedPointFormat

# =============================================================================
# ВАЛИДАЦИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение конечно
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что float конечен.

    Raises:
        ValueError: Если value — NaN или Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a finite float (not NaN/Inf), got {value}")


# =============================================================================
# СДВИГИ И ДЕЛЕНИЕ
# =============================================================================


def shift(value: int, places: int) -> int:
    """
    Сдвиг целого на places бит.

    places > 0 → левый сдвиг (умножение на 2^places)
    places < 0 → арифметический правый сдвиг (two's-complement, floor)

    Examples:
        >>> shift(3, 2)
        12
        >>> shift(13, -2)
        3
        >>> shift(-13, -2)
        -4
    """
    if places >= 0:
        return value << places
    return value >> -places


def divide_toward_zero(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Python `//` округляет к минус бесконечности, поэтому знак
    восстанавливается отдельно.

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> divide_toward_zero(15, 2)
        7
        >>> divide_toward_zero(-15, 2)
        -7
    """
    if denominator == 0:
        raise ZeroDivisionError("fixed-point division by zero")

    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


# =============================================================================
# NATIVE → REP
# =============================================================================


def rep_from_int(value: int, fmt: FixedPointFormat) -> int:
    """
    Rep для целого значения.

    exponent <= 0: rep = value << -exponent (магнитуда растёт)
    exponent > 0:  rep = value >> exponent (младшие биты отбрасываются)

    Args:
        value: Целое значение
        fmt: Целевой формат

    Returns:
        Rep, приведённый к диапазону kind

    Examples:
        >>> from src.fixed_point.math.integer_kinds import IntegerKind
        >>> fmt = FixedPointFormat(kind=IntegerKind.UINT8, exponent=-4)
        >>> rep_from_int(15, fmt)
        240
    """
    return fmt.kind.wrap(shift(value, -fmt.exponent))


def rep_from_float(value: float, fmt: FixedPointFormat) -> int:
    """
    Rep для float значения с усечением к нулю.

    rep = trunc(value * 2^-exponent)

    Args:
        value: Конечный float
        fmt: Целевой формат

    Returns:
        Rep, приведённый к диапазону kind

    Raises:
        ValueError: Если value — NaN или Inf

    Examples:
        >>> from src.fixed_point.math.integer_kinds import IntegerKind
        >>> fmt = FixedPointFormat(kind=IntegerKind.UINT8, exponent=-4)
        >>> rep_from_float(15.9375, fmt)
        255
        >>> rep_from_float(0.006, fmt)
        0
    """
    validate_finite(value, "value")

    # Масштабирование в Fraction: float-умножение переполняется раньше wrap
    scaled = Fraction(value) * Fraction(2) ** -fmt.exponent
    return fmt.kind.wrap(math.trunc(scaled))


def rep_from_rep(rep: int, src_exponent: int, fmt: FixedPointFormat) -> int:
    """
    Пересчёт rep из одного exponent в другой.

    src_exponent > dst: левый сдвиг (точно, возможен wraparound)
    src_exponent < dst: арифметический правый сдвиг (младшие биты теряются)

    Args:
        rep: Исходный rep
        src_exponent: Exponent исходного значения
        fmt: Целевой формат

    Returns:
        Rep в целевом формате
    """
    return fmt.kind.wrap(shift(rep, src_exponent - fmt.exponent))


def align(rep: int, src_exponent: int, dst_exponent: int) -> int:
    """
    Точное выравнивание rep к более мелкому (или равному) exponent.

    Используется перед сложением/вычитанием/сравнением: операнд с бОльшим
    exponent сдвигается влево, точность не теряется.

    Raises:
        ValueError: Если dst_exponent > src_exponent (огрубление)
    """
    if dst_exponent > src_exponent:
        raise ValueError(
            f"cannot align exponent {src_exponent} to coarser exponent {dst_exponent}"
        )
    return rep << (src_exponent - dst_exponent)


# =============================================================================
# REP → NATIVE
# =============================================================================


def to_float(rep: int, exponent: int) -> float:
    """Семантическое значение rep * 2^exponent как float"""
    return math.ldexp(rep, exponent)


def to_fraction(rep: int, exponent: int) -> Fraction:
    """Точное семантическое значение rep * 2^exponent"""
    return rep * Fraction(2) ** exponent


def to_int(rep: int, exponent: int) -> int:
    """Семантическое значение, усечённое к нулю"""
    if exponent >= 0:
        return rep << exponent
    return divide_toward_zero(rep, 1 << -exponent)
