"""
Scalar — числовые capability-границы для обобщённых типов

Два уровня возможностей скаляра:
- RingScalar: +, -, *, /, сравнения, конструирование из int.
  Используется везде (Vec4, типы расстояний).
- FloatScalar: sqrt, NaN, толерантное сравнение, округление.
  Нужен только length/round/is_nan/almost_equal.

Целочисленные скаляры (numbers.Integral) не обязаны реализовывать
float-операции: вызов такой операции даёт ScalarCapabilityError.

Ошибки самой арифметики скаляра (ZeroDivisionError, переполнение
numpy-типов) пробрасываются как есть, без clamp/saturation.
"""

import math
import numbers
from typing import Any, Optional, Protocol, Tuple, TypeVar, runtime_checkable

from fiz_math.core.math import numerical_safeguards

# =============================================================================
# EXCEPTIONS
# =============================================================================


class ScalarTypeMismatch(TypeError):
    """Компоненты или операнды имеют разные скалярные типы."""


class ScalarCapabilityError(TypeError):
    """Скаляр не поддерживает требуемую операцию (например, sqrt для int)."""


# =============================================================================
# CAPABILITY PROTOCOLS
# =============================================================================


@runtime_checkable
class RingScalar(Protocol):
    """Базовая арифметика: +, -, *, / и сравнение."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> Any: ...


@runtime_checkable
class FloatScalar(Protocol):
    """
    Скаляр с собственными float-операциями.

    Структурно подходят Decimal и типы расстояний; встроенный float
    распознаётся отдельно в is_float_like.
    """

    def sqrt(self) -> Any: ...

    def is_nan(self) -> bool: ...


T = TypeVar("T", bound=RingScalar)


# =============================================================================
# IDENTITY ELEMENTS
# =============================================================================


def zero_of(scalar_type: type[T], inner_type: Optional[type] = None) -> T:
    """
    Аддитивная единица (ноль) для скалярного типа.

    Типы с classmethod zero() (типы расстояний) используют его,
    остальные конструируются из литерала 0.

    Args:
        scalar_type: Скалярный тип (int, float, MM, ...)
        inner_type: Тип значения внутри единицы (MM[int] → int);
            только для типов с собственным zero()

    Raises:
        ScalarTypeMismatch: Если inner_type задан для простого скаляра
    """
    return _identity(scalar_type, inner_type, "zero", 0)


def one_of(scalar_type: type[T], inner_type: Optional[type] = None) -> T:
    """Мультипликативная единица для скалярного типа."""
    return _identity(scalar_type, inner_type, "one", 1)


def _identity(scalar_type: type, inner_type: Optional[type], name: str, literal: int) -> Any:
    factory = getattr(scalar_type, name, None)
    if callable(factory):
        return factory() if inner_type is None else factory(inner_type)
    if inner_type is not None:
        raise ScalarTypeMismatch(
            f"{scalar_type.__name__} has no inner scalar type, got {inner_type.__name__}"
        )
    return scalar_type(literal)


def is_zero(value: Any) -> bool:
    """True если value равен аддитивной единице своего типа."""
    check = getattr(value, "is_zero", None)
    if callable(check):
        return bool(check())
    return value == 0


# =============================================================================
# CASTS
# =============================================================================


def from_int(like: T, literal: int) -> T:
    """
    Приведение целого литерала к скалярному типу значения like.

    Используется для точных коэффициентов конверсии (1000, 100, ...):
    для float получаем 1000.0, для int — 1000, для Decimal — Decimal(1000).

    Args:
        like: Значение, тип которого берётся за основу
        literal: Целый литерал

    Returns:
        literal в типе like
    """
    return type(like)(literal)


def scalar_key(value: Any) -> Tuple[type, ...]:
    """
    Полный скалярный тип значения.

    Для обёрток над скаляром (типы расстояний хранят его в .value)
    учитывается и внутренний тип: MM(1) и MM(1.0) — разные скаляры.
    """
    if isinstance(value, numbers.Number):
        return (type(value),)
    inner = getattr(value, "value", None)
    if inner is None:
        return (type(value),)
    return (type(value), type(inner))


def scalar_type_name(value: Any) -> str:
    """Имя скалярного типа для сообщений: int, MM[float]."""
    key = scalar_key(value)
    name = key[0].__name__.split("[", 1)[0]
    if len(key) == 1:
        return name
    return f"{name}[{key[1].__name__}]"


def same_scalar_type(*values: Any) -> type:
    """
    Общий скалярный тип набора значений.

    Raises:
        ScalarTypeMismatch: Если типы значений (включая внутренний
            тип единицы) различаются
    """
    expected = scalar_key(values[0])
    for value in values[1:]:
        if scalar_key(value) != expected:
            raise ScalarTypeMismatch(
                f"expected a single scalar type, got {scalar_type_name(values[0])} "
                f"and {scalar_type_name(value)}"
            )
    return expected[0]


# =============================================================================
# ARITHMETIC
# =============================================================================


def div(a: T, b: T) -> T:
    """
    Деление с семантикой скалярного типа.

    Целочисленные скаляры делятся с усечением к нулю (7 / 2 → 3,
    -7 / 2 → -3), остальные — обычным `/`. Деление на ноль не
    перехватывается.
    """
    if isinstance(a, numbers.Integral) and isinstance(b, numbers.Integral):
        quotient = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            quotient = -quotient
        return type(a)(quotient)
    return a / b


# =============================================================================
# FLOAT-LIKE OPERATIONS
# =============================================================================


def is_float_like(value: Any) -> bool:
    """
    Поддерживает ли скаляр float-операции.

    Returns:
        False для целочисленных и рациональных типов, True для float,
        numpy floating, Decimal и типов с собственными sqrt/is_nan
    """
    if isinstance(value, numbers.Integral):
        return False
    if isinstance(value, float):
        return True
    if isinstance(value, FloatScalar):
        return True
    return isinstance(value, numbers.Real) and not isinstance(value, numbers.Rational)


def require_float_like(value: Any, operation: str) -> None:
    """
    Raises:
        ScalarCapabilityError: Если скаляр не поддерживает float-операции
    """
    if not is_float_like(value):
        raise ScalarCapabilityError(
            f"{operation} requires a floating-point scalar, got {type(value).__name__}"
        )


def sqrt(value: T) -> T:
    """Квадратный корень в типе value."""
    require_float_like(value, "sqrt")
    own = getattr(value, "sqrt", None)
    if callable(own):
        return own()
    return type(value)(math.sqrt(value))


def round_half_away(value: T) -> T:
    """Округление half away from zero в типе value."""
    require_float_like(value, "round")
    if isinstance(value, FloatScalar) and hasattr(value, "round"):
        return value.round()
    return numerical_safeguards.round_half_away(value)


def is_nan(value: Any) -> bool:
    require_float_like(value, "is_nan")
    if isinstance(value, FloatScalar):
        return bool(value.is_nan())
    return numerical_safeguards.is_nan(value)


def almost_equal(a: T, b: T, abs_tol: float) -> bool:
    """Толерантное сравнение; типы с собственным almost_equal используют его."""
    require_float_like(a, "almost_equal")
    own = getattr(a, "almost_equal", None)
    if callable(own):
        return bool(own(b, abs_tol))
    return numerical_safeguards.almost_equal(a, b, abs_tol)


def clamp(value: T, min_value: T, max_value: T) -> T:
    """Clamp через собственный метод скаляра либо numerical_safeguards.clamp."""
    own = getattr(value, "clamp", None)
    if callable(own):
        return own(min_value, max_value)
    return numerical_safeguards.clamp(value, min_value, max_value)
