"""
FixedPointFormat — дескриптор {kind, exponent} fixed-point типа

Immutable Pydantic модель. Семантика значения с этим форматом:

    value = rep * 2^exponent

где rep — целое в диапазоне kind. Все правила promotion работают
с этим дескриптором, а не с самими значениями.
"""

from fractions import Fraction

from pydantic import BaseModel, Field

from src.fixed_point.math.integer_kinds import IntegerKind


class FixedPointFormat(BaseModel):
    """
    Формат fixed-point значения: kind хранилища + степень двойки.

    Immutable модель (frozen=True), хешируемая: используется как ключ
    кэша типов.
    """

    kind: IntegerKind = Field(..., description="Целочисленный тип rep")
    exponent: int = Field(
        ...,
        strict=True,
        description="Степень двойки масштаба (может быть отрицательной); только int",
    )

    model_config = {"frozen": True}

    @property
    def width(self) -> int:
        return self.kind.width

    @property
    def signed(self) -> bool:
        return self.kind.signed

    @property
    def digits(self) -> int:
        """Бит магнитуды (без знакового бита)"""
        return self.kind.digits

    @property
    def integer_digits(self) -> int:
        """
        Количество целых бит.

        Может быть отрицательным (все биты дробные и ещё правее точки)
        или больше digits (exponent > 0).
        """
        return self.kind.digits + self.exponent

    @property
    def fractional_digits(self) -> int:
        return -self.exponent

    @property
    def resolution(self) -> Fraction:
        """Шаг квантования: 2^exponent"""
        return Fraction(2) ** self.exponent

    @property
    def min_value(self) -> Fraction:
        return self.kind.min_rep * self.resolution

    @property
    def max_value(self) -> Fraction:
        return self.kind.max_rep * self.resolution

    def with_exponent(self, exponent: int) -> "FixedPointFormat":
        """Тот же kind с другим exponent"""
        return FixedPointFormat(kind=self.kind, exponent=exponent)

    def __str__(self) -> str:
        return f"{self.kind.value}, {self.exponent}"
