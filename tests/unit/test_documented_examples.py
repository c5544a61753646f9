"""
Документированные примеры fixed-point типа

Каждый пример из документации — отдельный тест. Примеры проверяют
построение типов и promotion (в исходном виде — проверки времени
компиляции) и поведение во время выполнения.

Проверяет:
1. Точное представление литералов
2. Усечение литералов мельче разрешения
3. Promotion при сложении (fixed, int, float)
4. Переполнение с wraparound
5. Деление с усечением
6. Нулевое значение по умолчанию
7. Bounded integers (trunc_square)
"""

import pytest

from src.fixed_point import (
    IntegerKind,
    PlatformConfig,
    fixed_point_type,
    make_fixed,
    make_ufixed,
    promote,
    trunc_square,
)
from src.fixed_point.math.promotion import Operation

# =============================================================================
# LITERALS
# =============================================================================


class TestLiterals:
    """Построение из литералов"""

    def test_make_ufixed_exact_literal(self) -> None:
        value = make_ufixed(4, 4)(15.9375)
        assert value == 15.9375

    def test_make_fixed_pi(self) -> None:
        value = make_fixed(2, 29)(3.141592653)
        assert value == 3.1415926516056061

    def test_conversion_truncates(self) -> None:
        assert make_ufixed(4, 4)(0.006) == make_ufixed(4, 4)(0)

    @pytest.mark.parametrize("k", [0, 1, 17, 128, 255])
    def test_exact_literal_roundtrip(self, k: int) -> None:
        """k / 2^f восстанавливается без ошибки"""
        literal = k / 16
        assert float(make_ufixed(4, 4)(literal)) == literal


# =============================================================================
# OPERATOR OVERLOADS
# =============================================================================


class TestOperatorOverloads:
    """Promotion операторов"""

    def test_fixed_plus_fixed_value(self) -> None:
        lhs = fixed_point_type(IntegerKind.UINT8, -3)(8)
        rhs = fixed_point_type(IntegerKind.UINT8, -4)(3)
        assert lhs + rhs == fixed_point_type(IntegerKind.UINT32, -3)(11)

    def test_fixed_plus_signed_fixed_is_signed_int(self) -> None:
        lhs = fixed_point_type(IntegerKind.UINT8, -3)(8)
        rhs = fixed_point_type(IntegerKind.INT8, -4)(3)
        result = lhs + rhs
        assert type(result).kind is IntegerKind.INT32
        assert result == fixed_point_type(IntegerKind.INT32, -3)(11)

    def test_fixed_plus_int(self) -> None:
        result = make_ufixed(5, 3)(8) + 3
        assert result == fixed_point_type(IntegerKind.INT32, -3)(11)
        assert type(result) is fixed_point_type(IntegerKind.INT32, -3)

    def test_fixed_plus_float(self) -> None:
        result = make_ufixed(5, 3)(8) + 3.0
        assert result == 11.0
        assert type(result) is float


# =============================================================================
# OVERFLOW / UNDERFLOW
# =============================================================================


class TestOverflow:
    """Переполнение оборачивается"""

    def test_overflow_32_bit_int(self) -> None:
        result = make_ufixed(2, 30)(3) + make_ufixed(2, 30)(1)
        assert result == 0

    def test_overflow_64_bit_int(self) -> None:
        """На платформе с 64-бит int тот же пример требует 2.62"""
        platform = PlatformConfig(native_int_bits=64)
        T = make_ufixed(2, 62, platform)
        assert promote(Operation.ADD, T.format, T.format, platform) == T.format
        result = T(3) + T(1)
        assert type(result) is T
        assert result == 0

    def test_underflow_division_truncates(self) -> None:
        assert make_fixed(7, 0)(15) / make_fixed(7, 0)(2) == 7.0


# =============================================================================
# EXAMPLES
# =============================================================================


class TestExamples:
    """Примеры использования"""

    def test_zero(self) -> None:
        zero = fixed_point_type()()
        assert zero == fixed_point_type()(0)

    def test_bounded_integers(self) -> None:
        three = make_ufixed(2, 6)(3)
        n = trunc_square(trunc_square(three))
        assert n == 81
        assert type(n) is make_ufixed(8, 0)

        eighty_one = make_ufixed(7, 1)(81)
        assert eighty_one == 81
