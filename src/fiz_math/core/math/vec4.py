"""
Vec4 — обобщённый четырёхкомпонентный вектор

Компоненты x, y, z, w одного скалярного типа T. T — любой скаляр с
базовой арифметикой: int, float, Decimal, Fraction, numpy-скаляры,
а также типы расстояний (Vec4[MM] — полноценный сценарий).

Семантика:
- Арифметика (+, -, *, /) покомпонентная, только между Vec4 одного T
- Скалярные варианты: add_scalar, sub_scalar, mul_scalar, div_scalar
- == точное покомпонентное равенство (без толерантности)
- <, >, <=, >= — частичный порядок "всё или ничего": LESS только если
  все четыре компоненты строго меньше; иначе векторы могут быть
  несравнимы (partial_cmp → None)
- any_less / any_greater — экзистенциальные предикаты (хотя бы одна
  компонента), отличаются от оператора порядка

Float-операции (length, round, is_nan, almost_equal) требуют float-like
скаляр; для целочисленных T вызывается ScalarCapabilityError.

Ошибки арифметики скаляра (деление на ноль и т.п.) пробрасываются
покомпонентно без дополнительной обработки.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Iterator, Optional, TypeVar

from fiz_math.core.math import numerical_safeguards, scalar
from fiz_math.core.math.scalar import ScalarTypeMismatch

T = TypeVar("T")


class Ordering(int, Enum):
    """Результат partial_cmp."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True, eq=False)
class Vec4(Generic[T]):
    """
    Четырёхкомпонентный вектор-значение.

    Examples:
        >>> Vec4(1, 2, 3, 3) + Vec4(4, 5, 6, 6)
        Vec4(x=5, y=7, z=9, w=9)
        >>> str(Vec4(1, 5, 2, 3))
        'Vec4(1, 5, 2, 3)'
    """

    x: T
    y: T
    z: T
    w: T

    def __post_init__(self) -> None:
        scalar.same_scalar_type(self.x, self.y, self.z, self.w)

    # ------------------------------------------------------------------
    # Identity elements
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls, scalar_type: type = float, inner_type: Optional[type] = None) -> "Vec4[Any]":
        """
        Вектор из аддитивных единиц scalar_type.

        Examples:
            >>> Vec4.zero(int)
            Vec4(x=0, y=0, z=0, w=0)

        Для типов расстояний inner_type задаёт тип значения внутри
        единицы: Vec4.zero(MM, int) состоит из MM(0).
        """
        z = scalar.zero_of(scalar_type, inner_type)
        return cls(z, z, z, z)

    @classmethod
    def one(cls, scalar_type: type = float, inner_type: Optional[type] = None) -> "Vec4[Any]":
        """Вектор из мультипликативных единиц scalar_type."""
        o = scalar.one_of(scalar_type, inner_type)
        return cls(o, o, o, o)

    def is_zero(self) -> bool:
        return all(scalar.is_zero(c) for c in self)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def to_tuple(self) -> tuple:
        return (self.x, self.y, self.z, self.w)

    def _check_operand(self, other: "Vec4[Any]") -> None:
        if scalar.scalar_key(self.x) != scalar.scalar_key(other.x):
            raise ScalarTypeMismatch(
                f"cannot combine Vec4[{scalar.scalar_type_name(self.x)}] "
                f"with Vec4[{scalar.scalar_type_name(other.x)}]"
            )

    # ------------------------------------------------------------------
    # Component-wise arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> "Vec4[T]":
        if not isinstance(other, Vec4):
            return NotImplemented
        self._check_operand(other)
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: object) -> "Vec4[T]":
        if not isinstance(other, Vec4):
            return NotImplemented
        self._check_operand(other)
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other: object) -> "Vec4[T]":
        if not isinstance(other, Vec4):
            return NotImplemented
        self._check_operand(other)
        return Vec4(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)

    def __truediv__(self, other: object) -> "Vec4[T]":
        if not isinstance(other, Vec4):
            return NotImplemented
        self._check_operand(other)
        return Vec4(
            scalar.div(self.x, other.x),
            scalar.div(self.y, other.y),
            scalar.div(self.z, other.z),
            scalar.div(self.w, other.w),
        )

    def __neg__(self) -> "Vec4[T]":
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    # ------------------------------------------------------------------
    # Scalar broadcast
    # ------------------------------------------------------------------

    def add_scalar(self, s: T) -> "Vec4[T]":
        return Vec4(self.x + s, self.y + s, self.z + s, self.w + s)

    def sub_scalar(self, s: T) -> "Vec4[T]":
        return Vec4(self.x - s, self.y - s, self.z - s, self.w - s)

    def mul_scalar(self, s: T) -> "Vec4[T]":
        return Vec4(self.x * s, self.y * s, self.z * s, self.w * s)

    def div_scalar(self, s: T) -> "Vec4[T]":
        return Vec4(
            scalar.div(self.x, s),
            scalar.div(self.y, s),
            scalar.div(self.z, s),
            scalar.div(self.w, s),
        )

    # ------------------------------------------------------------------
    # Products and magnitude
    # ------------------------------------------------------------------

    def dot(self, b: "Vec4[T]") -> T:
        """
        Скалярное произведение: сумма покомпонентных произведений.

        Examples:
            >>> Vec4(1, 2, 3, 4).dot(Vec4(5, 6, 7, 8))
            70
        """
        self._check_operand(b)
        return self.x * b.x + self.y * b.y + self.z * b.z + self.w * b.w

    def length_sq(self) -> T:
        """
        Квадрат длины. Для сравнения расстояний предпочтительнее length(),
        так как не требует sqrt.
        """
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def length(self) -> T:
        """Длина вектора (только float-like скаляры)."""
        return scalar.sqrt(self.length_sq())

    def round(self) -> "Vec4[T]":
        """
        Округление каждой компоненты до целого, половины — от нуля.

        Examples:
            >>> Vec4(0.3, 1.3, 2.0, 2.7).round()
            Vec4(x=0.0, y=1.0, z=2.0, w=3.0)
        """
        return Vec4(
            scalar.round_half_away(self.x),
            scalar.round_half_away(self.y),
            scalar.round_half_away(self.z),
            scalar.round_half_away(self.w),
        )

    # ------------------------------------------------------------------
    # Tolerance / NaN
    # ------------------------------------------------------------------

    def almost_equal(
        self,
        other: "Vec4[T]",
        abs_tol: float = numerical_safeguards.EPS_ALMOST_EQUAL_ABS,
    ) -> bool:
        """
        Равенство с абсолютной толерантностью по каждой компоненте.

        Args:
            other: Вектор того же скалярного типа
            abs_tol: Абсолютная толерантность

        Returns:
            True если все четыре пары компонент отличаются не больше abs_tol
        """
        self._check_operand(other)
        return all(scalar.almost_equal(a, b, abs_tol) for a, b in zip(self, other))

    def is_nan(self) -> bool:
        """True если все четыре компоненты NaN."""
        return all(scalar.is_nan(c) for c in self)

    # ------------------------------------------------------------------
    # Clamp
    # ------------------------------------------------------------------

    def clamp(self, min_value: T, max_value: T) -> "Vec4[T]":
        """
        Ограничение каждой компоненты диапазоном [min_value, max_value].

        Examples:
            >>> Vec4(-2, 4, -6, 8).clamp(-1, 2)
            Vec4(x=-1, y=2, z=-1, w=2)
        """
        return Vec4(
            scalar.clamp(self.x, min_value, max_value),
            scalar.clamp(self.y, min_value, max_value),
            scalar.clamp(self.z, min_value, max_value),
            scalar.clamp(self.w, min_value, max_value),
        )

    # ------------------------------------------------------------------
    # Equality and ordering
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec4):
            return NotImplemented
        return (
            self.x == other.x
            and self.y == other.y
            and self.z == other.z
            and self.w == other.w
        )

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def partial_cmp(self, other: "Vec4[T]") -> Optional[Ordering]:
        """
        Частичное сравнение "всё или ничего".

        Returns:
            Ordering.LESS если все компоненты self строго меньше,
            Ordering.GREATER если все строго больше,
            Ordering.EQUAL если векторы равны,
            иначе None (векторы несравнимы)
        """
        self._check_operand(other)
        if self.x < other.x and self.y < other.y and self.z < other.z and self.w < other.w:
            return Ordering.LESS
        if self.x > other.x and self.y > other.y and self.z > other.z and self.w > other.w:
            return Ordering.GREATER
        if self == other:
            return Ordering.EQUAL
        return None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Vec4):
            return NotImplemented
        return self.partial_cmp(other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Vec4):
            return NotImplemented
        return self.partial_cmp(other) in (Ordering.LESS, Ordering.EQUAL)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Vec4):
            return NotImplemented
        return self.partial_cmp(other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Vec4):
            return NotImplemented
        return self.partial_cmp(other) in (Ordering.GREATER, Ordering.EQUAL)

    def any_less(self, other: "Vec4[T]") -> bool:
        """True если хотя бы одна компонента self меньше соответствующей в other."""
        self._check_operand(other)
        return self.x < other.x or self.y < other.y or self.z < other.z or self.w < other.w

    def any_greater(self, other: "Vec4[T]") -> bool:
        """True если хотя бы одна компонента self больше соответствующей в other."""
        self._check_operand(other)
        return self.x > other.x or self.y > other.y or self.z > other.z or self.w > other.w

    def __str__(self) -> str:
        return f"Vec4({self.x}, {self.y}, {self.z}, {self.w})"
