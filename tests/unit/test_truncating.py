"""
Тесты для truncating arithmetic (trunc_multiply / trunc_square)

Проверяет:
1. Формат результата (ширина сохраняется, целая часть суммируется)
2. Усечение младших бит произведения
3. Пример "bounded integers"
"""

import pytest

from src.fixed_point.domain.construction import make_fixed, make_ufixed
from src.fixed_point.domain.fixed_point import fixed_point_type
from src.fixed_point.domain.truncating import (
    trunc_multiply,
    trunc_multiply_format,
    trunc_square,
)
from src.fixed_point.math.integer_kinds import IntegerKind, PlatformConfig


class TestTruncMultiplyFormat:
    """Тесты для trunc_multiply_format"""

    def test_width_preserved(self) -> None:
        result = trunc_multiply_format(make_ufixed(2, 6).format, make_ufixed(2, 6).format)
        assert result.kind is IntegerKind.UINT8
        assert result.integer_digits == 4
        assert result.exponent == -4

    def test_wider_operand_decides(self) -> None:
        result = trunc_multiply_format(make_ufixed(4, 12).format, make_ufixed(4, 4).format)
        assert result.kind is IntegerKind.UINT16
        assert result.integer_digits == 8

    def test_mixed_sign_is_signed(self) -> None:
        result = trunc_multiply_format(make_fixed(3, 4).format, make_ufixed(4, 4).format)
        assert result.kind is IntegerKind.INT8
        assert result.integer_digits == 7


class TestTruncMultiply:
    """Тесты для trunc_multiply / trunc_square"""

    def test_bounded_integers(self) -> None:
        """3 → 9 → 81, тип сужается до make_ufixed(8, 0)"""
        three = make_ufixed(2, 6)(3)

        nine = trunc_square(three)
        assert type(nine) is make_ufixed(4, 4)
        assert nine == 9

        eighty_one = trunc_square(nine)
        assert type(eighty_one) is make_ufixed(8, 0)
        assert eighty_one == 81

    def test_low_bits_truncated(self) -> None:
        """(-1.5)^2 = 2.25 → разрешение 2^-1 → 2.0"""
        result = trunc_square(make_fixed(3, 4)(-1.5))
        assert type(result) is fixed_point_type(IntegerKind.INT8, -1)
        assert result == 2

    def test_product_of_different_formats(self) -> None:
        result = trunc_multiply(make_ufixed(4, 4)(2.5), make_ufixed(2, 6)(1.5))
        assert result == 3.75

    def test_non_fixed_operand_rejected(self) -> None:
        with pytest.raises(TypeError, match="expects FixedPoint operands"):
            trunc_multiply(make_ufixed(4, 4)(1), 2)  # type: ignore[arg-type]

    def test_result_keeps_platform(self) -> None:
        platform = PlatformConfig(native_int_bits=64)
        nine = trunc_square(make_ufixed(2, 6, platform)(3))
        assert type(nine) is make_ufixed(4, 4, platform)
        assert nine == 9

    def test_mixed_platforms_rejected(self) -> None:
        platform = PlatformConfig(widest_bits=32)
        with pytest.raises(TypeError, match="platforms differ"):
            trunc_multiply(make_ufixed(4, 4, platform)(1), make_ufixed(4, 4)(1))
