"""
Numerical Safeguards — float-утилиты и clamp для скаляров

Модуль предоставляет скалярные примитивы, которые используют Vec4 и
типы расстояний:
- Сравнение float с абсолютной толерантностью (almost_equal)
- Детекция NaN (is_nan, is_valid_float)
- Округление half away from zero (round_half_away)
- Ограничение значения диапазоном (clamp)

ИНВАРИАНТЫ:
1. Функции не мутируют аргументы и не имеют побочных эффектов
2. Тип результата совпадает с типом входного скаляра (float → float,
   Decimal → Decimal), если явно не сказано иное
3. Невалидные параметры (отрицательная толерантность, min > max)
   вызывают ValueError
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Final, TypeVar

T = TypeVar("T")

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность по умолчанию для almost_equal
EPS_ALMOST_EQUAL_ABS: Final[float] = 1e-9


# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
# =============================================================================


def is_nan(value) -> bool:
    """
    Проверка, является ли скаляр NaN.

    Поддерживает float, numpy-скаляры и Decimal (у Decimal свой is_nan).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение NaN
    """
    if isinstance(value, Decimal):
        return value.is_nan()
    return math.isnan(value)


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def almost_equal(a, b, abs_tol: float = EPS_ALMOST_EQUAL_ABS) -> bool:
    """
    Сравнение двух скаляров с абсолютной толерантностью.

    Алгоритм:
        abs(a - b) <= abs_tol

    NaN никогда не равен ничему (включая другой NaN).

    Args:
        a: Первое значение
        b: Второе значение
        abs_tol: Абсолютная толерантность (default: EPS_ALMOST_EQUAL_ABS)

    Returns:
        True если значения отличаются не больше чем на abs_tol

    Raises:
        ValueError: Если abs_tol отрицательный

    Examples:
        >>> almost_equal(1.0, 1.05, 0.1)
        True
        >>> almost_equal(1.0, 1.2, 0.1)
        False
    """
    if abs_tol < 0:
        raise ValueError(f"abs_tol must be non-negative, got {abs_tol}")

    if is_nan(a) or is_nan(b):
        return False

    if a == b:
        # Покрывает совпадающие бесконечности
        return True

    return abs(a - b) <= abs_tol


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away(value: T) -> T:
    """
    Округление до ближайшего целого, половины — от нуля.

    В отличие от встроенного round() (banker's rounding), 2.5 → 3.0 и
    -2.5 → -3.0. Тип результата совпадает с типом value.

    Args:
        value: Значение для округления (float, numpy float или Decimal)

    Returns:
        Округлённое значение того же типа; NaN/Inf возвращаются как есть

    Examples:
        >>> round_half_away(2.5)
        3.0
        >>> round_half_away(-2.5)
        -3.0
        >>> round_half_away(1.3)
        1.0
    """
    if not is_valid_float(value):
        return value

    if isinstance(value, Decimal):
        # ROUND_HALF_UP в decimal означает "от нуля"
        return value.to_integral_value(rounding=ROUND_HALF_UP)

    magnitude = abs(value)
    whole = math.floor(magnitude)
    # Сравниваем дробную часть, а не floor(x + 0.5): x + 0.5 теряет точность
    if magnitude - whole >= 0.5:
        whole += 1

    return type(value)(math.copysign(whole, value))


# =============================================================================
# CLAMP
# =============================================================================


def clamp(value: T, min_value: T, max_value: T) -> T:
    """
    Ограничение значения в диапазоне [min_value, max_value].

    Работает для любых упорядоченных скаляров (int, float, Decimal,
    типы расстояний одной единицы).

    Args:
        value: Исходное значение
        min_value: Нижняя граница (включительно)
        max_value: Верхняя граница (включительно)

    Returns:
        min_value если value < min_value, max_value если value > max_value,
        иначе value

    Raises:
        ValueError: Если min_value > max_value

    Examples:
        >>> clamp(5, 0, 10)
        5
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15, 0, 10)
        10
    """
    if max_value < min_value:
        raise ValueError(f"min_value ({min_value}) must be <= max_value ({max_value})")

    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value
