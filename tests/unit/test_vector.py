"""
Тесты для модели Vector

Проверяет:
1. Создание и валидацию конечности
2. Длину (overflow-safe)
3. Нормализацию с масштабированием по доминирующей компоненте
4. Immutability (frozen=True) и равенство
5. Конверсии (coerce, NumPy, JSON)
"""

import math

import numpy as np
import pytest
from pydantic import ValidationError

from rcgal import InvalidInput, NotFiniteInput, Overflow, Point, Vector
from rcgal.core.math.numerical_safeguards import FLOAT_MAX, FLOAT_MIN_NORMAL

INV_SQRT_2 = 1.0 / math.sqrt(2.0)
NON_FINITE = (math.inf, -math.inf, math.nan)


# =============================================================================
# СОЗДАНИЕ
# =============================================================================


class TestVectorCreation:
    """Тесты для создания Vector"""

    def test_vector_has_xy(self) -> None:
        """Компоненты хранятся без изменений"""
        v = Vector.new(1.1, 2.2)
        assert v.x == 1.1
        assert v.y == 2.2
        v = Vector.new(3.3, 4.4)
        assert v.x == 3.3
        assert v.y == 4.4

    def test_extreme_finite_values_accepted(self) -> None:
        """Zero, subnormal и FLOAT_MAX допустимы"""
        v = Vector.new(5e-324, -FLOAT_MAX)
        assert v.x == 5e-324
        assert v.y == -FLOAT_MAX

    def test_non_finite_components_rejected(self) -> None:
        """±Inf или NaN в любой компоненте → NotFiniteInput"""
        for bad in NON_FINITE:
            with pytest.raises(NotFiniteInput):
                Vector.new(bad, 0.0)
            with pytest.raises(NotFiniteInput):
                Vector.new(0.0, bad)
            with pytest.raises(NotFiniteInput):
                Vector(x=bad, y=bad)

    def test_model_validate_rejects_non_finite(self) -> None:
        """Валидация из dict применяет тот же инвариант"""
        with pytest.raises(NotFiniteInput):
            Vector.model_validate({"x": 1.0, "y": math.inf})

    def test_zero(self) -> None:
        """Нулевой вектор"""
        assert Vector.zero() == Vector.new(0.0, 0.0)

    def test_immutable(self) -> None:
        """Vector immutable (frozen=True)"""
        v = Vector.new(1.0, 2.0)
        with pytest.raises(ValidationError):
            v.x = 3.0  # type: ignore

    def test_equality_and_hash(self) -> None:
        """Равенство по значению, хешируемость"""
        assert Vector.new(1.0, 2.0) == Vector.new(1.0, 2.0)
        assert hash(Vector.new(1.0, 2.0)) == hash(Vector.new(1.0, 2.0))
        assert Vector.new(1.0, 2.0) != Vector.new(2.0, 1.0)

    def test_vector_is_not_point(self) -> None:
        """Vector и Point с одинаковыми координатами не равны"""
        assert Vector.new(1.0, 2.0) != Point.new(1.0, 2.0)


# =============================================================================
# ДЛИНА
# =============================================================================


class TestVectorLength:
    """Тесты для Vector.length"""

    def test_length(self) -> None:
        """Пифагорова тройка"""
        assert Vector.new(3.0, 4.0).length() == 5.0
        assert Vector.new(-3.0, -4.0).length() == 5.0

    def test_zero_length(self) -> None:
        """Длина нулевого вектора"""
        assert Vector.zero().length() == 0.0

    def test_large_length(self) -> None:
        """Большие компоненты без промежуточного переполнения"""
        assert Vector.new(3e300, 4e300).length() == pytest.approx(5e300, rel=1e-15)

    def test_small_length(self) -> None:
        """Малые компоненты без underflow"""
        assert Vector.new(3e-300, 4e-300).length() == pytest.approx(5e-300, rel=1e-15)

    def test_length_overflow(self) -> None:
        """Длина больше FLOAT_MAX → Overflow"""
        with pytest.raises(Overflow):
            Vector.new(FLOAT_MAX, FLOAT_MAX).length()


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


class TestVectorNormalize:
    """Тесты для Vector.normalize"""

    def test_normalize_diagonal(self) -> None:
        """(1, 1) → (1/√2, 1/√2)"""
        u = Vector.new(1.0, 1.0).normalize()
        assert u.x == pytest.approx(INV_SQRT_2, rel=1e-15)
        assert u.y == pytest.approx(INV_SQRT_2, rel=1e-15)

    def test_normalize_pythagorean(self) -> None:
        """(3, 4) → (0.6, 0.8)"""
        u = Vector.new(3.0, 4.0).normalize()
        assert u.x == pytest.approx(0.6, rel=1e-15)
        assert u.y == pytest.approx(0.8, rel=1e-15)

    def test_normalize_preserves_signs(self) -> None:
        """Знаки компонент сохраняются"""
        u = Vector.new(-3.0, 4.0).normalize()
        assert u.x == pytest.approx(-0.6, rel=1e-15)
        assert u.y == pytest.approx(0.8, rel=1e-15)

    def test_normalize_zero_vector_fails(self) -> None:
        """Нулевой вектор → InvalidInput"""
        with pytest.raises(InvalidInput):
            Vector.zero().normalize()

    def test_normalize_huge_vector(self) -> None:
        """(FLOAT_MAX, FLOAT_MAX) → (1/√2, 1/√2) без переполнения"""
        u = Vector.new(FLOAT_MAX, FLOAT_MAX).normalize()
        assert u.x == pytest.approx(INV_SQRT_2, rel=1e-15)
        assert u.y == pytest.approx(INV_SQRT_2, rel=1e-15)

        u = Vector.new(-FLOAT_MAX, FLOAT_MAX).normalize()
        assert u.x == pytest.approx(-INV_SQRT_2, rel=1e-15)
        assert u.y == pytest.approx(INV_SQRT_2, rel=1e-15)

    def test_normalize_tiny_vector(self) -> None:
        """Квадраты компонент ушли бы в ноль, нормализация — нет"""
        u = Vector.new(1e-300, 1e-300).normalize()
        assert u.x == pytest.approx(INV_SQRT_2, rel=1e-15)
        assert u.y == pytest.approx(INV_SQRT_2, rel=1e-15)

    def test_normalize_smallest_normal(self) -> None:
        """Компонента FLOAT_MIN_NORMAL → единичный вектор вдоль оси"""
        u = Vector.new(FLOAT_MIN_NORMAL, 0.0).normalize()
        assert u.as_tuple() == (1.0, 0.0)

        u = Vector.new(0.0, -FLOAT_MIN_NORMAL).normalize()
        assert u.as_tuple() == (0.0, -1.0)

    def test_normalize_subnormal_fails(self) -> None:
        """Доминирующая компонента чуть меньше FLOAT_MIN_NORMAL → InvalidInput"""
        below_normal = math.nextafter(FLOAT_MIN_NORMAL, 0.0)
        with pytest.raises(InvalidInput):
            Vector.new(below_normal, 0.0).normalize()
        with pytest.raises(InvalidInput):
            Vector.new(5e-324, -5e-324).normalize()

    def test_normalize_small_secondary_component(self) -> None:
        """Вторая компонента может быть subnormal, если доминирующая normal"""
        u = Vector.new(1.0, 5e-324).normalize()
        assert u.x == 1.0
        assert u.is_unit()

    def test_normalize_raw_non_finite_fails(self) -> None:
        """Невалидированный вектор с Inf/NaN → InvalidInput"""
        with pytest.raises(InvalidInput):
            Vector.model_construct(x=math.inf, y=1.0).normalize()
        with pytest.raises(InvalidInput):
            Vector.model_construct(x=1.0, y=math.nan).normalize()

    def test_normalized_is_unit(self) -> None:
        """Результат нормализации всегда единичный"""
        for x, y in [(1.0, 0.0), (12.34, -56.78), (1e-300, 7e-301), (FLOAT_MAX, 1.0), (-2.0, 1e10)]:
            assert Vector.new(x, y).normalize().is_unit()


class TestVectorIsUnit:
    """Тесты для Vector.is_unit"""

    def test_unit_vectors(self) -> None:
        """Векторы длины 1"""
        assert Vector.new(1.0, 0.0).is_unit()
        assert Vector.new(0.0, -1.0).is_unit()
        assert Vector.new(0.6, 0.8).is_unit()

    def test_non_unit_vectors(self) -> None:
        """Векторы длины != 1, включая непредставимую длину"""
        assert not Vector.new(1.0, 1.0).is_unit()
        assert not Vector.zero().is_unit()
        assert not Vector.new(FLOAT_MAX, FLOAT_MAX).is_unit()

    def test_custom_tolerance(self) -> None:
        """Пользовательская толерантность"""
        v = Vector.new(1.001, 0.0)
        assert not v.is_unit()
        assert v.is_unit(tolerance=1e-2)


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


class TestVectorConversions:
    """Тесты для coerce, NumPy и JSON конверсий"""

    def test_coerce_from_supported_values(self) -> None:
        """tuple, list, dict, ndarray и Vector"""
        expected = Vector.new(1.0, -2.0)
        assert Vector.coerce((1.0, -2.0)) == expected
        assert Vector.coerce([1.0, -2.0]) == expected
        assert Vector.coerce({"x": 1.0, "y": -2.0}) == expected
        assert Vector.coerce(np.array([1.0, -2.0])) == expected
        assert Vector.coerce(expected) == expected

    def test_coerce_wrong_length(self) -> None:
        """Не пара → InvalidInput"""
        with pytest.raises(InvalidInput):
            Vector.coerce((1.0, 2.0, 3.0))
        with pytest.raises(InvalidInput):
            Vector.coerce({"x": 1.0})

    def test_coerce_unsupported_type(self) -> None:
        """Неконвертируемый тип → TypeError"""
        with pytest.raises(TypeError):
            Vector.coerce("12")
        with pytest.raises(TypeError):
            Vector.coerce(Point.new(1.0, 2.0))

    def test_coerce_revalidates_raw_vector(self) -> None:
        """Невалидированный Vector проверяется повторно"""
        raw = Vector.model_construct(x=math.inf, y=0.0)
        with pytest.raises(NotFiniteInput):
            Vector.coerce(raw)

    def test_array_round_trip_bit_identical(self) -> None:
        """Vector → ndarray → Vector без потерь"""
        for x, y in [(0.1, -0.0), (5e-324, FLOAT_MAX), (-FLOAT_MAX, 1.0 / 3.0)]:
            v = Vector.new(x, y)
            array = v.to_array()
            assert array.dtype == np.float64
            assert array.shape == (2,)
            restored = Vector.from_array(array)
            assert restored.x.hex() == v.x.hex()
            assert restored.y.hex() == v.y.hex()

    def test_from_array_validates(self) -> None:
        """Форма и конечность проверяются"""
        with pytest.raises(InvalidInput):
            Vector.from_array(np.zeros(3))
        with pytest.raises(NotFiniteInput):
            Vector.from_array(np.array([np.nan, 0.0]))

    def test_json_round_trip(self) -> None:
        """Сериализация/десериализация JSON"""
        v = Vector.new(1.5, -2.25)
        assert Vector.model_validate_json(v.model_dump_json()) == v
