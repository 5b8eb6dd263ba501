"""
Тесты для Vec4

Проверяет:
1. Алгебраические тождества (zero, one, двойное отрицание)
2. Покомпонентную и скалярную арифметику
3. Частичный порядок "всё или ничего" и any_less / any_greater
4. Float-операции и их недоступность для целых скаляров
5. Vec4 над типами расстояний (Vec4[MM])
"""

import dataclasses
import math
from decimal import Decimal
from fractions import Fraction

import pytest

from fiz_math.core.domain.units import CM, MM
from fiz_math.core.math.scalar import ScalarCapabilityError, ScalarTypeMismatch
from fiz_math.core.math.vec4 import Ordering, Vec4

SAMPLE_VECTORS = [
    Vec4(1, 2, 3, 4),
    Vec4(-7, 0, 12, 5),
    Vec4(1.5, -2.25, 3.0, 0.0),
    Vec4(Decimal("1.1"), Decimal("-2"), Decimal("0"), Decimal("9.75")),
    Vec4(MM(1.0), MM(5.0), MM(2.0), MM(1.2)),
]


def _scalar_type(v: Vec4) -> type:
    return type(v.x)


# =============================================================================
# IDENTITIES
# =============================================================================


class TestIdentities:
    """Алгебраические тождества для разных скалярных типов"""

    @pytest.mark.parametrize("v", SAMPLE_VECTORS)
    def test_additive_identity(self, v: Vec4) -> None:
        """v + 0 == v и 0 + v == v"""
        zero = Vec4.zero(_scalar_type(v))
        assert v + zero == v
        assert zero + v == v

    @pytest.mark.parametrize("v", SAMPLE_VECTORS)
    def test_multiplicative_identity(self, v: Vec4) -> None:
        """v * 1 == v"""
        assert v * Vec4.one(_scalar_type(v)) == v

    @pytest.mark.parametrize("v", SAMPLE_VECTORS)
    def test_negation_involution(self, v: Vec4) -> None:
        """-(-v) == v"""
        assert -(-v) == v

    def test_zero_default_is_float(self) -> None:
        zero = Vec4.zero()
        assert zero == Vec4(0.0, 0.0, 0.0, 0.0)
        assert isinstance(zero.x, float)

    def test_one_of_distances(self) -> None:
        assert Vec4.one(MM) == Vec4(MM(1.0), MM(1.0), MM(1.0), MM(1.0))

    def test_integer_distance_zero(self) -> None:
        """Vec4.zero(MM, int) состоит из MM(0), а не MM(0.0)"""
        zero = Vec4.zero(MM, int)
        assert all(isinstance(c.value, int) for c in zero)
        v = Vec4(MM(1), MM(2), MM(3), MM(4))
        assert v + zero == v
        assert v * Vec4.one(MM, int) == v

    def test_is_zero(self) -> None:
        """is_zero для целых, float и расстояний"""
        assert Vec4(0, 0, 0, 0).is_zero()
        assert not Vec4(1, 0, 0, 0).is_zero()
        assert Vec4(0.0, 0.0, 0.0, 0.0).is_zero()
        assert not Vec4(1.0, 0.0, 0.0, 0.0).is_zero()
        assert Vec4.zero(MM).is_zero()
        assert not Vec4(MM(0.0), MM(0.0), MM(0.0), MM(0.1)).is_zero()


# =============================================================================
# ARITHMETIC
# =============================================================================


class TestArithmetic:
    """Покомпонентная арифметика"""

    def test_add(self) -> None:
        assert Vec4(1, 2, 3, 3) + Vec4(4, 5, 6, 6) == Vec4(5, 7, 9, 9)

    def test_sub(self) -> None:
        assert Vec4(1, 2, 3, 3) - Vec4(4, 5, 6, 6) == Vec4(-3, -3, -3, -3)

    def test_mul(self) -> None:
        assert Vec4(1, 2, 3, 3) * Vec4(4, 5, 6, 6) == Vec4(4, 10, 18, 18)

    def test_div_integers_truncate(self) -> None:
        """Целочисленное деление усекает (5 / 2 → 2)"""
        assert Vec4(4, 5, 9, 9) / Vec4(1, 2, 3, 3) == Vec4(4, 2, 3, 3)

    def test_div_floats(self) -> None:
        assert Vec4(1.0, 3.0, 5.0, -7.0) / Vec4(2.0, 2.0, 2.0, 2.0) == Vec4(0.5, 1.5, 2.5, -3.5)

    def test_div_fractions_exact(self) -> None:
        half = Fraction(1, 2)
        result = Vec4(Fraction(1), Fraction(1), Fraction(1), Fraction(1)) / Vec4(
            Fraction(2), Fraction(2), Fraction(2), Fraction(2)
        )
        assert result == Vec4(half, half, half, half)

    def test_neg(self) -> None:
        assert -Vec4(1, 2, 3, 4) == Vec4(-1, -2, -3, -4)

    def test_division_by_zero_propagates(self) -> None:
        """Ошибка скаляра пробрасывается без обработки"""
        with pytest.raises(ZeroDivisionError):
            Vec4(1, 1, 1, 1) / Vec4(0, 1, 1, 1)
        with pytest.raises(ZeroDivisionError):
            Vec4(1.0, 1.0, 1.0, 1.0).div_scalar(0.0)

    def test_operands_must_share_scalar_type(self) -> None:
        """Смешивание Vec4[int] и Vec4[float] запрещено"""
        with pytest.raises(ScalarTypeMismatch, match="Vec4\\[int\\]"):
            Vec4(1, 2, 3, 4) + Vec4(1.0, 2.0, 3.0, 4.0)

    def test_no_operator_broadcasting(self) -> None:
        """Операторы не принимают скаляр — для этого есть *_scalar"""
        with pytest.raises(TypeError):
            Vec4(1, 2, 3, 4) + 1
        with pytest.raises(TypeError):
            Vec4(1, 2, 3, 4) * 2

    def test_operands_not_mutated(self) -> None:
        a = Vec4(1, 2, 3, 4)
        b = Vec4(5, 6, 7, 8)
        _ = a + b
        assert a == Vec4(1, 2, 3, 4)
        assert b == Vec4(5, 6, 7, 8)


class TestScalarBroadcast:
    """Скалярные варианты операций"""

    def test_add_scalar(self) -> None:
        assert Vec4(1, 2, 3, 4).add_scalar(1) == Vec4(2, 3, 4, 5)

    def test_sub_scalar(self) -> None:
        assert Vec4(2, 3, 4, 5).sub_scalar(1) == Vec4(1, 2, 3, 4)

    def test_mul_scalar(self) -> None:
        assert Vec4(1, 2, 3, 4).mul_scalar(2) == Vec4(2, 4, 6, 8)

    def test_div_scalar(self) -> None:
        assert Vec4(2, 4, 6, 8).div_scalar(2) == Vec4(1, 2, 3, 4)

    def test_distance_scalar(self) -> None:
        v = Vec4(MM(1.0), MM(2.0), MM(3.0), MM(4.0))
        assert v.add_scalar(MM(1.0)) == Vec4(MM(2.0), MM(3.0), MM(4.0), MM(5.0))


# =============================================================================
# PRODUCTS AND MAGNITUDE
# =============================================================================


class TestProducts:
    """dot, length_sq, length"""

    def test_dot_multiplies_every_component_pair(self) -> None:
        """
        dot — сумма произведений всех четырёх пар компонент.

        Открытый вопрос совместимости: исторический вариант складывал
        y, z, w вместо умножения (x*b.x + y+b.y + z+b.z + w+b.w), что дало
        бы 35. Здесь зафиксирован математически корректный результат.
        """
        a = Vec4(1, 2, 3, 4)
        b = Vec4(5, 6, 7, 8)
        additive_cross_terms = a.x * b.x + a.y + b.y + a.z + b.z + a.w + b.w

        assert a.dot(b) == 70
        assert additive_cross_terms == 35
        assert a.dot(b) != additive_cross_terms

    def test_dot_equals_length_sq_with_self(self) -> None:
        v = Vec4(1.5, -2.0, 0.5, 3.0)
        assert v.dot(v) == v.length_sq()

    def test_length_sq(self) -> None:
        assert Vec4(1, 2, 3, 4).length_sq() == 30

    def test_length(self) -> None:
        assert Vec4(1.0, 1.0, 1.0, 1.0).length() == 2.0
        assert Vec4(3.0, 4.0, 0.0, 0.0).length() == 5.0

    def test_length_of_distances(self) -> None:
        """Длина Vec4[MM] — расстояние в той же единице"""
        v = Vec4(MM(3.0), MM(4.0), MM(0.0), MM(0.0))
        assert v.length_sq() == MM(25.0)
        assert v.length() == MM(5.0)

    def test_length_requires_float_scalar(self) -> None:
        with pytest.raises(ScalarCapabilityError):
            Vec4(3, 4, 0, 0).length()


# =============================================================================
# FLOAT-ONLY OPERATIONS
# =============================================================================


class TestFloatOperations:
    """round, almost_equal, is_nan"""

    def test_round(self) -> None:
        assert Vec4(0.3, 1.3, 2.0, 2.7).round() == Vec4(0.0, 1.0, 2.0, 3.0)

    def test_round_halves_away_from_zero(self) -> None:
        assert Vec4(-0.5, 0.5, -1.5, 2.5).round() == Vec4(-1.0, 1.0, -2.0, 3.0)

    def test_round_distances(self) -> None:
        v = Vec4(MM(0.4), MM(0.5), MM(-0.5), MM(1.6))
        assert v.round() == Vec4(MM(0.0), MM(1.0), MM(-1.0), MM(2.0))

    def test_round_requires_float_scalar(self) -> None:
        with pytest.raises(ScalarCapabilityError, match="round"):
            Vec4(1, 2, 3, 4).round()

    def test_almost_equal(self) -> None:
        a = Vec4(1.0, 1.0, 1.0, 1.0)
        b = Vec4(0.95, 0.95, 0.95, 0.95)
        assert a.almost_equal(b, 0.1)
        assert not a.almost_equal(b, 0.01)

    def test_almost_equal_distances(self) -> None:
        x = Vec4(MM(1.0), MM(5.0), MM(2.0), MM(1.2))
        y = Vec4(MM(1.0), MM(5.1), MM(1.9), MM(1.1))
        assert x.almost_equal(y, 0.11)
        assert not x.almost_equal(y, 0.01)

    def test_is_nan_requires_all_components(self) -> None:
        """is_nan истинно только если все компоненты NaN"""
        n = float("nan")
        assert Vec4(n, n, n, n).is_nan()
        assert not Vec4(n, 0.0, 0.0, 0.0).is_nan()

    def test_is_nan_requires_float_scalar(self) -> None:
        with pytest.raises(ScalarCapabilityError):
            Vec4(0, 0, 0, 0).is_nan()


# =============================================================================
# COMPARISON
# =============================================================================


class TestEquality:
    """Точное покомпонентное равенство"""

    def test_equal_integers(self) -> None:
        assert Vec4(4, 5, 9, 9) == Vec4(4, 5, 9, 9)

    def test_no_tolerance(self) -> None:
        assert Vec4(4.0, 5.0, 5.0, 9.0) != Vec4(4.0, 5.0, 5.0, 9.000001)

    def test_literal_below_float_precision(self) -> None:
        """Литерал, неотличимый от 9.0 во float, даёт равенство"""
        assert Vec4(4.0, 5.0, 5.0, 9.0) == Vec4(4.0, 5.0, 5.0, 9.00000000000000000000001)

    def test_nan_components_not_equal(self) -> None:
        n = float("nan")
        assert Vec4(n, n, n, n) != Vec4(n, n, n, n)

    def test_hashable(self) -> None:
        assert hash(Vec4(1, 2, 3, 4)) == hash(Vec4(1, 2, 3, 4))
        assert len({Vec4(1, 2, 3, 4), Vec4(1, 2, 3, 4), Vec4(4, 3, 2, 1)}) == 2

    def test_not_equal_to_tuple(self) -> None:
        assert Vec4(1, 2, 3, 4) != (1, 2, 3, 4)


class TestPartialOrdering:
    """Частичный порядок "всё или ничего" """

    def test_all_less(self) -> None:
        a = Vec4(1, 2, 3, 4)
        b = Vec4(2, 3, 4, 5)
        assert a < b
        assert a <= b
        assert a.partial_cmp(b) is Ordering.LESS

    def test_all_greater(self) -> None:
        a = Vec4(2, 3, 4, 5)
        b = Vec4(1, 2, 3, 4)
        assert a > b
        assert a >= b
        assert a.partial_cmp(b) is Ordering.GREATER

    def test_floats_all_less(self) -> None:
        assert Vec4(1.0, 2.0, 3.0, 4.0) < Vec4(1.1, 2.1, 3.1, 4.1)

    def test_equal(self) -> None:
        a = Vec4(1, 2, 3, 4)
        assert a.partial_cmp(Vec4(1, 2, 3, 4)) is Ordering.EQUAL
        assert a <= Vec4(1, 2, 3, 4)
        assert a >= Vec4(1, 2, 3, 4)
        assert not a < Vec4(1, 2, 3, 4)
        assert not a > Vec4(1, 2, 3, 4)

    @pytest.mark.parametrize(
        "other",
        [
            Vec4(2, 2, 4, 5),  # одна компонента равна
            Vec4(0, 3, 4, 5),  # одна компонента меньше
            Vec4(2, 3, 4, 4),  # последняя компонента равна
        ],
    )
    def test_mixed_components_are_unordered(self, other: Vec4) -> None:
        """Частично меньший вектор несравним"""
        a = Vec4(1, 2, 3, 4)
        assert a.partial_cmp(other) is None
        assert not a < other
        assert not a > other
        assert not a <= other
        assert not a >= other
        assert a != other

    def test_ordering_of_distances(self) -> None:
        a = Vec4(MM(1.0), MM(2.0), MM(3.0), MM(4.0))
        b = Vec4(MM(2.0), MM(3.0), MM(4.0), MM(5.0))
        assert a < b
        assert b > a

    def test_mixed_scalar_types_rejected(self) -> None:
        """Сравнение требует того же скалярного типа, что и арифметика"""
        a = Vec4(1, 2, 3, 4)
        b = Vec4(2.0, 3.0, 4.0, 5.0)
        with pytest.raises(ScalarTypeMismatch, match=r"Vec4\[int\] with Vec4\[float\]"):
            a.partial_cmp(b)
        with pytest.raises(ScalarTypeMismatch):
            a < b

    def test_mixed_distance_scalars_rejected(self) -> None:
        a = Vec4(MM(1), MM(2), MM(3), MM(4))
        b = Vec4(MM(2.0), MM(3.0), MM(4.0), MM(5.0))
        with pytest.raises(ScalarTypeMismatch, match=r"Vec4\[MM\[int\]\] with Vec4\[MM\[float\]\]"):
            a.partial_cmp(b)


class TestAnyComparisons:
    """any_less / any_greater — экзистенциальные предикаты"""

    def test_any_less(self) -> None:
        assert Vec4(0, 0, 0, 1).any_less(Vec4(0, 0, 0, 2))
        assert not Vec4(0, 0, 0, 2).any_less(Vec4(0, 0, 0, 1))

    def test_any_greater(self) -> None:
        assert Vec4(0, 0, 0, 2).any_greater(Vec4(0, 0, 0, 1))
        assert not Vec4(0, 0, 0, 1).any_greater(Vec4(0, 0, 0, 2))

    def test_any_less_differs_from_ordering(self) -> None:
        """any_less истинно там, где оператор < ложен"""
        a = Vec4(0, 0, 0, 1)
        b = Vec4(0, 0, 0, 2)
        assert a.any_less(b)
        assert not a < b

    def test_both_can_hold(self) -> None:
        a = Vec4(0, 5, 0, 0)
        b = Vec4(1, 0, 0, 0)
        assert a.any_less(b)
        assert a.any_greater(b)

    def test_equal_vectors(self) -> None:
        v = Vec4(1.0, 2.0, 3.0, 4.0)
        assert not v.any_less(v)
        assert not v.any_greater(v)

    def test_mixed_scalar_types_rejected(self) -> None:
        with pytest.raises(ScalarTypeMismatch):
            Vec4(0, 0, 0, 1).any_less(Vec4(0.0, 0.0, 0.0, 2.0))
        with pytest.raises(ScalarTypeMismatch):
            Vec4(0, 0, 0, 1).any_greater(Vec4(0.0, 0.0, 0.0, 2.0))


# =============================================================================
# CLAMP
# =============================================================================


class TestClamp:
    """Покомпонентный clamp"""

    def test_clamp_integers(self) -> None:
        assert Vec4(-2, 4, -6, 8).clamp(-1, 2) == Vec4(-1, 2, -1, 2)

    def test_clamp_floats_in_range_unchanged(self) -> None:
        v = Vec4(0.1, 0.2, 0.3, 0.4)
        assert v.clamp(0.0, 1.0) == v

    def test_clamp_distances(self) -> None:
        v = Vec4(MM(-2.0), MM(4.0), MM(-6.0), MM(8.0))
        assert v.clamp(MM(-1.0), MM(2.0)) == Vec4(MM(-1.0), MM(2.0), MM(-1.0), MM(2.0))

    def test_inverted_bounds_raise(self) -> None:
        with pytest.raises(ValueError):
            Vec4(1, 2, 3, 4).clamp(2, -1)


# =============================================================================
# VALUE SEMANTICS
# =============================================================================


class TestValueSemantics:
    """Immutability, конструирование и представление"""

    def test_frozen(self) -> None:
        v = Vec4(1, 2, 3, 4)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 10  # type: ignore[misc]

    def test_mixed_component_types_rejected(self) -> None:
        """Все четыре компоненты одного скалярного типа"""
        with pytest.raises(ScalarTypeMismatch):
            Vec4(1, 2.0, 3, 4)

    def test_mixed_distance_scalars_rejected(self) -> None:
        """Одна единица, но разные внутренние скаляры: MM[int] и MM[float]"""
        with pytest.raises(ScalarTypeMismatch, match=r"MM\[int\] and MM\[float\]"):
            Vec4(MM(1), MM(2.5), MM(3), MM(4))

    def test_mixed_units_rejected(self) -> None:
        with pytest.raises(ScalarTypeMismatch):
            Vec4(MM(1.0), CM(1.0), MM(1.0), MM(1.0))

    def test_uniform_integer_distances_divide_uniformly(self) -> None:
        """Все компоненты MM[int] делятся с усечением"""
        v = Vec4(MM(5), MM(5), MM(1), MM(1)) / Vec4(MM(2), MM(2), MM(2), MM(2))
        assert v == Vec4(MM(2), MM(2), MM(0), MM(0))

    def test_iteration_order(self) -> None:
        assert list(Vec4(1, 2, 3, 4)) == [1, 2, 3, 4]
        assert Vec4(1, 2, 3, 4).to_tuple() == (1, 2, 3, 4)

    def test_str(self) -> None:
        assert str(Vec4(1, 5, 2, 3)) == "Vec4(1, 5, 2, 3)"
        assert str(Vec4(MM(1.0), MM(2.0), MM(3.0), MM(4.0))) == (
            "Vec4(1.0 mm, 2.0 mm, 3.0 mm, 4.0 mm)"
        )

    def test_repr(self) -> None:
        assert repr(Vec4(1, 2, 3, 4)) == "Vec4(x=1, y=2, z=3, w=4)"

    def test_infinite_components_allowed(self) -> None:
        """Конструктор не валидирует значения"""
        v = Vec4(math.inf, -math.inf, 0.0, 1.0)
        assert v.x == math.inf
