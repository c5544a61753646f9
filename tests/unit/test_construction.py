"""
Тесты для Construction API (make_fixed / make_ufixed)

Проверяет:
1. Выбор kind и exponent по количеству цифр
2. Диапазон и разрешение построенного типа
3. Отказ при недопустимых параметрах
4. Зависимость от платформы
"""

import pytest

from src.fixed_point.domain.construction import make_fixed, make_ufixed
from src.fixed_point.domain.fixed_point import fixed_point_type
from src.fixed_point.math.integer_kinds import (
    IntegerKind,
    PlatformConfig,
    RepresentationError,
)


class TestMakeFixed:
    """Тесты для make_fixed"""

    @pytest.mark.parametrize(
        "integer_digits,fractional_digits,kind",
        [
            (7, 0, IntegerKind.INT8),
            (3, 4, IntegerKind.INT8),
            (2, 29, IntegerKind.INT32),
            (15, 16, IntegerKind.INT32),
            (31, 32, IntegerKind.INT64),
        ],
    )
    def test_kind_and_exponent(
        self, integer_digits: int, fractional_digits: int, kind: IntegerKind
    ) -> None:
        T = make_fixed(integer_digits, fractional_digits)
        assert T is fixed_point_type(kind, -fractional_digits)

    def test_default_fractional_digits(self) -> None:
        assert make_fixed(7) is make_fixed(7, 0)

    def test_range(self) -> None:
        """|v| < 2^integer_digits с разрешением 2^-fractional_digits"""
        T = make_fixed(3, 4)
        assert T.highest() == 8 - 0.0625
        assert T.lowest() == -8
        assert T.resolution() == 0.0625

    def test_rounded_up_type_has_extra_integer_digits(self) -> None:
        """Ширина округляется до tier: лишние биты уходят в целую часть"""
        T = make_fixed(4, 4)
        assert T.kind is IntegerKind.INT16
        assert T.integer_digits == 11

    def test_too_many_digits_raises(self) -> None:
        with pytest.raises(RepresentationError):
            make_fixed(32, 32)

    def test_negative_digits_raises(self) -> None:
        with pytest.raises(ValueError):
            make_fixed(-1, 4)


class TestMakeUfixed:
    """Тесты для make_ufixed"""

    @pytest.mark.parametrize(
        "integer_digits,fractional_digits,kind",
        [
            (4, 4, IntegerKind.UINT8),
            (5, 3, IntegerKind.UINT8),
            (8, 0, IntegerKind.UINT8),
            (4, 12, IntegerKind.UINT16),
            (2, 30, IntegerKind.UINT32),
            (2, 62, IntegerKind.UINT64),
        ],
    )
    def test_kind_and_exponent(
        self, integer_digits: int, fractional_digits: int, kind: IntegerKind
    ) -> None:
        T = make_ufixed(integer_digits, fractional_digits)
        assert T is fixed_point_type(kind, -fractional_digits)

    def test_range(self) -> None:
        T = make_ufixed(4, 4)
        assert T.lowest() == 0
        assert T.highest() == 15.9375

    def test_same_layout_same_type(self) -> None:
        """Раскладки с одинаковым kind и exponent дают один тип"""
        assert make_ufixed(3, 3) is make_ufixed(5, 3)

    def test_too_many_digits_raises(self) -> None:
        with pytest.raises(RepresentationError):
            make_ufixed(2, 63)

    def test_without_64_bit_tier(self) -> None:
        """Без 64-бит tier 2.62 не строится"""
        with pytest.raises(RepresentationError):
            make_ufixed(2, 62, PlatformConfig(widest_bits=32))

    def test_resolution_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        import logging

        caplog.set_level(logging.DEBUG, logger="src.fixed_point.domain.construction")
        make_ufixed(4, 4)
        assert "Resolved make_ufixed(4, 4) to uint8" in caplog.text
