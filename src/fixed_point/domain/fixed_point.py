"""
FixedPoint — Scaled Value: rep * 2^exponent

Immutable значение фиксированной точки. Каждый формат {kind, exponent}
материализуется в отдельный подкласс FixedPoint (кэшируется), так что
тип результата оператора проверяется как `type(a + b) is T`.

Операторы:
- fixed ⊕ fixed, fixed ⊕ int → формат из promotion rules, выравнивание
  exponent, целочисленная операция над rep, wrap до ширины результата
- fixed ⊕ float → float(fixed) ⊕ float, результат — float
- сравнения → точное сравнение семантических значений после выравнивания
  к более мелкому exponent (с float — сравнение во float)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. rep всегда в диапазоне kind (wrap при каждом построении)
2. Значения никогда не мутируют; "изменение" = новый экземпляр
3. Один формат ↔ один класс (идентичность типов)
4. Переполнение оборачивается по модулю 2^width, исключений не бывает
"""

import logging
import operator
from fractions import Fraction
from typing import Callable, ClassVar, Final

from src.fixed_point.math.conversion import (
    align,
    divide_toward_zero,
    rep_from_float,
    rep_from_int,
    rep_from_rep,
    to_float,
    to_fraction,
    to_int,
)
from src.fixed_point.math.formats import FixedPointFormat
from src.fixed_point.math.integer_kinds import (
    DEFAULT_PLATFORM,
    IntegerKind,
    PlatformConfig,
    RepresentationError,
    native_int_kind,
    supported_kinds,
)
from src.fixed_point.math.promotion import (
    Operation,
    comparison_exponent,
    integer_operand_format,
    is_floating_operand,
    is_integer_operand,
    promote,
)

logger = logging.getLogger(__name__)


# Float-операторы для смешанных операций fixed ⊕ float
_FLOAT_OPERATORS: Final[dict[Operation, Callable[[float, float], float]]] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: operator.truediv,
}


# =============================================================================
# FIXED POINT
# =============================================================================


class FixedPoint:
    """
    Значение фиксированной точки.

    Базовый класс абстрактный: конкретные типы строятся через
    fixed_point_type(kind, exponent), make_fixed(...) или make_ufixed(...).

    Атрибуты класса (конкретного типа):
        format: FixedPointFormat типа
        platform: PlatformConfig, по правилам которой выбираются типы результатов
        kind: IntegerKind хранилища
        exponent: степень двойки масштаба
        integer_digits / fractional_digits: раскладка бит

    Examples:
        >>> Q4_4 = make_ufixed(4, 4)
        >>> Q4_4(15.9375) == 15.9375
        True
        >>> Q4_4(0.006) == Q4_4(0)
        True
    """

    __slots__ = ("_rep",)

    format: ClassVar[FixedPointFormat | None] = None
    platform: ClassVar[PlatformConfig] = DEFAULT_PLATFORM
    kind: ClassVar[IntegerKind]
    exponent: ClassVar[int]
    integer_digits: ClassVar[int]
    fractional_digits: ClassVar[int]

    def __init__(self, value: "FixedPoint | int | float" = 0):
        fmt = self._require_format()
        object.__setattr__(self, "_rep", _rep_from_value(value, fmt))

    @classmethod
    def _require_format(cls) -> FixedPointFormat:
        if cls.format is None:
            raise TypeError(
                "FixedPoint is abstract: build a concrete type with "
                "fixed_point_type(), make_fixed() or make_ufixed()"
            )
        return cls.format

    # -------------------------------------------------------------------------
    # Построение
    # -------------------------------------------------------------------------

    @classmethod
    def from_rep(cls, rep: int) -> "FixedPoint":
        """
        Значение с заданным rep (без масштабирования).

        Args:
            rep: Сырое целое; приводится к диапазону kind через wrap

        Returns:
            Экземпляр cls с семантическим значением rep * 2^exponent
        """
        fmt = cls._require_format()
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_rep", fmt.kind.wrap(rep))
        return instance

    @classmethod
    def lowest(cls) -> "FixedPoint":
        """Наименьшее представимое значение"""
        return cls.from_rep(cls._require_format().kind.min_rep)

    @classmethod
    def highest(cls) -> "FixedPoint":
        """Наибольшее представимое значение"""
        return cls.from_rep(cls._require_format().kind.max_rep)

    @classmethod
    def resolution(cls) -> "FixedPoint":
        """Шаг квантования (rep == 1)"""
        return cls.from_rep(1)

    # -------------------------------------------------------------------------
    # Immutability
    # -------------------------------------------------------------------------

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> "FixedPoint":
        return self

    def __deepcopy__(self, memo: dict) -> "FixedPoint":
        return self

    def __reduce__(self) -> tuple:
        return (_restore, (self.kind.value, self.exponent, self._rep, self.platform))

    # -------------------------------------------------------------------------
    # Доступ и явные конверсии
    # -------------------------------------------------------------------------

    @property
    def rep(self) -> int:
        return self._rep

    def as_fraction(self) -> Fraction:
        """Точное семантическое значение"""
        return to_fraction(self._rep, self.exponent)

    def __float__(self) -> float:
        return to_float(self._rep, self.exponent)

    def __int__(self) -> int:
        # Усечение к нулю, как int(float)
        return to_int(self._rep, self.exponent)

    def __bool__(self) -> bool:
        return self._rep != 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"

    def __str__(self) -> str:
        return str(float(self))

    def __hash__(self) -> int:
        # Согласован с int/float/Fraction: равные значения → равный hash
        return hash(self.as_fraction())

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def _compare(self, other: object, compare: Callable[[object, object], bool]):
        if is_floating_operand(other):
            return compare(float(self), other)

        if isinstance(other, FixedPoint):
            other_rep, other_exponent = other.rep, other.exponent
        elif is_integer_operand(other):
            other_rep, other_exponent = other, 0
        else:
            return NotImplemented

        exponent = min(self.exponent, other_exponent)
        lhs = align(self._rep, self.exponent, exponent)
        rhs = align(other_rep, other_exponent, exponent)
        return compare(lhs, rhs)

    def __eq__(self, other: object):
        return self._compare(other, operator.eq)

    def __ne__(self, other: object):
        return self._compare(other, operator.ne)

    def __lt__(self, other: object):
        return self._compare(other, operator.lt)

    def __le__(self, other: object):
        return self._compare(other, operator.le)

    def __gt__(self, other: object):
        return self._compare(other, operator.gt)

    def __ge__(self, other: object):
        return self._compare(other, operator.ge)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _arithmetic(self, other: object, op: Operation, reflected: bool = False):
        if is_floating_operand(other):
            float_op = _FLOAT_OPERATORS[op]
            if reflected:
                return float_op(other, float(self))
            return float_op(float(self), other)

        if isinstance(other, FixedPoint):
            operand = other
        elif is_integer_operand(other):
            operand = type_for_format(
                integer_operand_format(other, self.platform), self.platform
            )(other)
        else:
            return NotImplemented

        if reflected:
            return _fixed_arithmetic(op, operand, self)
        return _fixed_arithmetic(op, self, operand)

    def __add__(self, other: object):
        return self._arithmetic(other, Operation.ADD)

    def __radd__(self, other: object):
        return self._arithmetic(other, Operation.ADD, reflected=True)

    def __sub__(self, other: object):
        return self._arithmetic(other, Operation.SUBTRACT)

    def __rsub__(self, other: object):
        return self._arithmetic(other, Operation.SUBTRACT, reflected=True)

    def __mul__(self, other: object):
        return self._arithmetic(other, Operation.MULTIPLY)

    def __rmul__(self, other: object):
        return self._arithmetic(other, Operation.MULTIPLY, reflected=True)

    def __truediv__(self, other: object):
        return self._arithmetic(other, Operation.DIVIDE)

    def __rtruediv__(self, other: object):
        return self._arithmetic(other, Operation.DIVIDE, reflected=True)

    def __neg__(self) -> "FixedPoint":
        return type(self).from_rep(-self._rep)

    def __pos__(self) -> "FixedPoint":
        return self

    def __abs__(self) -> "FixedPoint":
        return type(self).from_rep(abs(self._rep))


# =============================================================================
# ВНУТРЕННИЕ ХЕЛПЕРЫ
# =============================================================================


def _rep_from_value(value: object, fmt: FixedPointFormat) -> int:
    """Rep для значения произвольного поддерживаемого типа"""
    if isinstance(value, FixedPoint):
        return rep_from_rep(value.rep, value.exponent, fmt)
    if is_integer_operand(value):
        return rep_from_int(value, fmt)
    if is_floating_operand(value):
        return rep_from_float(value, fmt)
    raise TypeError(
        f"Cannot convert {type(value).__name__} to FixedPoint[{fmt}]"
    )


def common_platform(lhs: FixedPoint, rhs: FixedPoint) -> PlatformConfig:
    """
    Платформа бинарной операции над двумя fixed-point операндами.

    Raises:
        TypeError: Если операнды построены для разных платформ
    """
    if lhs.platform != rhs.platform:
        raise TypeError(
            f"Cannot combine {type(lhs).__name__} ({lhs.platform}) with "
            f"{type(rhs).__name__} ({rhs.platform}): platforms differ"
        )
    return lhs.platform


def _fixed_arithmetic(op: Operation, lhs: FixedPoint, rhs: FixedPoint) -> FixedPoint:
    """
    Арифметика над двумя fixed-point операндами.

    1. Формат результата по promotion rules платформы операндов
    2. Для +/- оба rep выравниваются к exponent результата (точный левый сдвиг)
    3. Целочисленная операция над rep
    4. Wrap до ширины результата
    """
    platform = common_platform(lhs, rhs)
    result_format = promote(op, lhs.format, rhs.format, platform)
    result_type = type_for_format(result_format, platform)

    if op is Operation.MULTIPLY:
        raw = lhs.rep * rhs.rep
    elif op is Operation.DIVIDE:
        raw = divide_toward_zero(lhs.rep, rhs.rep)
    else:
        exponent = comparison_exponent(lhs.format, rhs.format)
        lhs_aligned = align(lhs.rep, lhs.exponent, exponent)
        rhs_aligned = align(rhs.rep, rhs.exponent, exponent)
        if op is Operation.ADD:
            raw = lhs_aligned + rhs_aligned
        else:
            raw = lhs_aligned - rhs_aligned

    return result_type.from_rep(raw)


def _restore(
    kind: str,
    exponent: int,
    rep: int,
    platform: PlatformConfig = DEFAULT_PLATFORM,
) -> FixedPoint:
    """Восстановление значения при unpickle"""
    return fixed_point_type(IntegerKind(kind), exponent, platform).from_rep(rep)


# =============================================================================
# ФАБРИКА ТИПОВ
# =============================================================================

# Один {формат, платформа} ↔ один класс
_TYPE_CACHE: dict[tuple[FixedPointFormat, PlatformConfig], type[FixedPoint]] = {}


def type_for_format(
    fmt: FixedPointFormat,
    platform: PlatformConfig = DEFAULT_PLATFORM,
) -> type[FixedPoint]:
    """
    Конкретный FixedPoint тип для формата.

    Повторный вызов с равным форматом и платформой возвращает тот же класс.
    Платформа хранится в типе: по ней операторы выбирают типы результатов.

    Args:
        fmt: Формат {kind, exponent}
        platform: Конфигурация платформы

    Returns:
        Подкласс FixedPoint, привязанный к fmt и platform

    Raises:
        RepresentationError: Если kind недоступен на платформе
    """
    key = (fmt, platform)
    cached = _TYPE_CACHE.get(key)
    if cached is not None:
        return cached

    if fmt.kind not in supported_kinds(platform):
        raise RepresentationError(
            f"{fmt.kind.value} is not available on a platform with "
            f"widest_bits={platform.widest_bits}"
        )

    name = f"FixedPoint[{fmt}]"
    new_type = type(
        name,
        (FixedPoint,),
        {
            "__slots__": (),
            "__module__": __name__,
            "__qualname__": name,
            "format": fmt,
            "platform": platform,
            "kind": fmt.kind,
            "exponent": fmt.exponent,
            "integer_digits": fmt.integer_digits,
            "fractional_digits": fmt.fractional_digits,
        },
    )

    # setdefault: при гонке двух потоков выигрывает первый зарегистрированный
    registered = _TYPE_CACHE.setdefault(key, new_type)
    if registered is new_type:
        logger.debug("Materialized fixed-point type %s for %s", name, platform)
    return registered


def fixed_point_type(
    kind: IntegerKind | str | None = None,
    exponent: int = 0,
    platform: PlatformConfig = DEFAULT_PLATFORM,
) -> type[FixedPoint]:
    """
    Конкретный FixedPoint тип по kind и exponent.

    Args:
        kind: Kind хранилища (None → `int` платформы)
        exponent: Степень двойки масштаба
        platform: Конфигурация платформы

    Returns:
        Подкласс FixedPoint

    Raises:
        RepresentationError: Если kind недоступен на платформе

    Examples:
        >>> T = fixed_point_type(IntegerKind.UINT8, -3)
        >>> T(8).rep
        64
        >>> fixed_point_type() is fixed_point_type(IntegerKind.INT32, 0)
        True
    """
    resolved_kind = native_int_kind(platform) if kind is None else IntegerKind(kind)
    return type_for_format(
        FixedPointFormat(kind=resolved_kind, exponent=exponent), platform
    )
