"""
Distance Units — типы расстояний и граф конверсий

Единицы: M (метры, базовая SI единица), MM, CM, KM.

Каждое значение хранит ровно один скаляр и всегда интерпретируется в
единице своего типа. Переход между единицами — только явным вызовом
to_m() / to_mm() / to_cm() / to_km().

Граф конверсий полный: каждый тип реализует все четыре протокола
ToM, ToMM, ToCM, ToKM, включая тождественную конверсию в себя.
Коэффициенты точные и приводятся к типу скаляра значения (from_int),
поэтому один и тот же код работает для float, int, Decimal.

ЗАПРЕЩЕНО смешивать единицы в арифметике: MM(1) + CM(1) → UnitError.
"""

import numbers
from typing import Any, ClassVar, Final, Generic, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict

from fiz_math.core.math import numerical_safeguards, scalar

T = TypeVar("T")


# =============================================================================
# КОЭФФИЦИЕНТЫ КОНВЕРСИИ
# =============================================================================

MM_PER_M: Final[int] = 1000
CM_PER_M: Final[int] = 100
M_PER_KM: Final[int] = 1000
MM_PER_CM: Final[int] = 10

# Производные коэффициенты (точные целые)
MM_PER_KM: Final[int] = MM_PER_M * M_PER_KM
CM_PER_KM: Final[int] = CM_PER_M * M_PER_KM


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnitError(TypeError):
    """Операция смешивает значения разных единиц."""


# =============================================================================
# CONVERSION PROTOCOLS
# =============================================================================


@runtime_checkable
class ToM(Protocol[T]):
    """
    Каноничный протокол для входных параметров в метрах.

    Любая единица расстояния реализует ToM, поэтому функция, принимающая
    ToM, примет и MM, и KM:

        def walk(dist: ToM[float]) -> float:
            return dist.to_m().value
    """

    def to_m(self) -> "M[T]": ...


@runtime_checkable
class ToMM(Protocol[T]):
    """Протокол для входных параметров в миллиметрах."""

    def to_mm(self) -> "MM[T]": ...


@runtime_checkable
class ToCM(Protocol[T]):
    """Протокол для входных параметров в сантиметрах."""

    def to_cm(self) -> "CM[T]": ...


@runtime_checkable
class ToKM(Protocol[T]):
    """Протокол для входных параметров в километрах."""

    def to_km(self) -> "KM[T]": ...


def _scaled_up(value: T, factor: int) -> T:
    return value * scalar.from_int(value, factor)


def _scaled_down(value: T, factor: int) -> T:
    return scalar.div(value, scalar.from_int(value, factor))


# =============================================================================
# BASE MODEL
# =============================================================================


class Distance(BaseModel, Generic[T]):
    """
    Базовая модель значения расстояния.

    Immutable модель (frozen=True): арифметика и конверсии всегда
    создают новый экземпляр.

    Поддерживает всё, что нужно скаляру внутри Vec4:
    - арифметику с той же единицей (+, -, *, /, унарный -)
    - масштабирование числом (MM(2) * 3, MM(6) / 3)
    - сравнения с той же единицей
    - zero()/one()/is_zero()
    - float-операции (sqrt, round, is_nan, almost_equal) и clamp
    """

    value: T

    symbol: ClassVar[str] = ""

    model_config = ConfigDict(frozen=True)

    def __init__(self, value: T) -> None:
        super().__init__(value=value)

    # ------------------------------------------------------------------
    # Identity elements
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls, scalar_type: type = float) -> "Distance[Any]":
        return cls(scalar.zero_of(scalar_type))

    @classmethod
    def one(cls, scalar_type: type = float) -> "Distance[Any]":
        return cls(scalar.one_of(scalar_type))

    def is_zero(self) -> bool:
        return scalar.is_zero(self.value)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _rewrap(self, value: Any) -> "Distance[Any]":
        return type(self)(value)

    def _check_same_unit(self, other: "Distance[Any]", op: str) -> None:
        if other.symbol != self.symbol:
            raise UnitError(f"cannot apply '{op}' to {self.symbol} and {other.symbol}")

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> "Distance[Any]":
        if isinstance(other, Distance):
            self._check_same_unit(other, "+")
            return self._rewrap(self.value + other.value)
        return NotImplemented

    def __sub__(self, other: object) -> "Distance[Any]":
        if isinstance(other, Distance):
            self._check_same_unit(other, "-")
            return self._rewrap(self.value - other.value)
        return NotImplemented

    def __mul__(self, other: object) -> "Distance[Any]":
        if isinstance(other, Distance):
            self._check_same_unit(other, "*")
            return self._rewrap(self.value * other.value)
        if isinstance(other, numbers.Number):
            return self._rewrap(self.value * other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Distance[Any]":
        if isinstance(other, numbers.Number):
            return self._rewrap(other * self.value)
        return NotImplemented

    def __truediv__(self, other: object) -> "Distance[Any]":
        if isinstance(other, Distance):
            self._check_same_unit(other, "/")
            return self._rewrap(scalar.div(self.value, other.value))
        if isinstance(other, numbers.Number):
            return self._rewrap(scalar.div(self.value, other))
        return NotImplemented

    def __neg__(self) -> "Distance[Any]":
        return self._rewrap(-self.value)

    def __abs__(self) -> "Distance[Any]":
        return self._rewrap(abs(self.value))

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Distance):
            return self.symbol == other.symbol and self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.symbol, self.value))

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Distance):
            self._check_same_unit(other, "<")
            return self.value < other.value
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, Distance):
            self._check_same_unit(other, "<=")
            return self.value <= other.value
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, Distance):
            self._check_same_unit(other, ">")
            return self.value > other.value
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, Distance):
            self._check_same_unit(other, ">=")
            return self.value >= other.value
        return NotImplemented

    # ------------------------------------------------------------------
    # Float-like operations
    # ------------------------------------------------------------------

    def sqrt(self) -> "Distance[Any]":
        return self._rewrap(scalar.sqrt(self.value))

    def round(self) -> "Distance[Any]":
        """Округление значения half away from zero, единица сохраняется."""
        return self._rewrap(scalar.round_half_away(self.value))

    def is_nan(self) -> bool:
        return scalar.is_nan(self.value)

    def almost_equal(
        self,
        other: "Distance[Any]",
        abs_tol: float = numerical_safeguards.EPS_ALMOST_EQUAL_ABS,
    ) -> bool:
        """
        Толерантное сравнение с расстоянием той же единицы.

        Args:
            other: Расстояние в той же единице
            abs_tol: Абсолютная толерантность в единицах self

        Raises:
            UnitError: Если единицы различаются
        """
        self._check_same_unit(other, "almost_equal")
        return scalar.almost_equal(self.value, other.value, abs_tol)

    def clamp(self, min_value: "Distance[Any]", max_value: "Distance[Any]") -> "Distance[Any]":
        self._check_same_unit(min_value, "clamp")
        self._check_same_unit(max_value, "clamp")
        return self._rewrap(
            numerical_safeguards.clamp(self.value, min_value.value, max_value.value)
        )

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        name = type(self).__name__.split("[", 1)[0]
        return f"{name}({self.value!r})"

    def __str__(self) -> str:
        return f"{self.value} {self.symbol}"


# =============================================================================
# UNITS
# =============================================================================


class M(Distance[T], Generic[T]):
    """
    Метры — базовая SI единица расстояния.

    Examples:
        >>> M(1.0).to_mm()
        MM(1000.0)
        >>> M(1000.0).to_km()
        KM(1.0)
    """

    symbol: ClassVar[str] = "m"

    def to_m(self) -> "M[T]":
        return self

    def to_mm(self) -> "MM[T]":
        return MM(_scaled_up(self.value, MM_PER_M))

    def to_cm(self) -> "CM[T]":
        return CM(_scaled_up(self.value, CM_PER_M))

    def to_km(self) -> "KM[T]":
        return KM(_scaled_down(self.value, M_PER_KM))


class MM(Distance[T], Generic[T]):
    """Миллиметры."""

    symbol: ClassVar[str] = "mm"

    def to_m(self) -> "M[T]":
        return M(_scaled_down(self.value, MM_PER_M))

    def to_mm(self) -> "MM[T]":
        return self

    def to_cm(self) -> "CM[T]":
        return CM(_scaled_down(self.value, MM_PER_CM))

    def to_km(self) -> "KM[T]":
        return KM(_scaled_down(self.value, MM_PER_KM))


class CM(Distance[T], Generic[T]):
    """Сантиметры."""

    symbol: ClassVar[str] = "cm"

    def to_m(self) -> "M[T]":
        return M(_scaled_down(self.value, CM_PER_M))

    def to_mm(self) -> "MM[T]":
        return MM(_scaled_up(self.value, MM_PER_CM))

    def to_cm(self) -> "CM[T]":
        return self

    def to_km(self) -> "KM[T]":
        return KM(_scaled_down(self.value, CM_PER_KM))


class KM(Distance[T], Generic[T]):
    """Километры."""

    symbol: ClassVar[str] = "km"

    def to_m(self) -> "M[T]":
        return M(_scaled_up(self.value, M_PER_KM))

    def to_mm(self) -> "MM[T]":
        return MM(_scaled_up(self.value, MM_PER_KM))

    def to_cm(self) -> "CM[T]":
        return CM(_scaled_up(self.value, CM_PER_KM))

    def to_km(self) -> "KM[T]":
        return self
