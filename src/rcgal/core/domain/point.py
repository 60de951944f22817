"""
Point — 2D точка с гарантией конечности

Immutable Pydantic модель точки и арифметика Point/Vector.

Арифметика:
    Point - Point  -> Vector  (смещение, "сырой" оператор)
    Point + Vector -> Point   (перенос, "сырой" оператор)
    Point.checked_sub / Point.checked_add — то же самое, но с Overflow

"Сырые" операторы не валидируют результат. Для конечных операндов результат
конечен всегда, кроме переполнения самой операции (например,
FLOAT_MAX - (-FLOAT_MAX)). Такой результат нарушает инвариант и будет
отклонён (NotFiniteInput) при повторной валидации: coerce, new, Line.new.
"""

import logging
from typing import Any

from numpy.typing import ArrayLike
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from rcgal.core.domain.vector import Vector
from rcgal.core.errors import Overflow
from rcgal.core.math.array_interop import ArrayF, array_to_pair, pair_to_array, value_to_pair
from rcgal.core.math.numerical_safeguards import (
    checked_magnitude,
    is_valid_float,
    safe_hypot,
    validate_finite,
)

logger = logging.getLogger(__name__)


# =============================================================================
# POINT MODEL
# =============================================================================


class Point(BaseModel):
    """
    Модель 2D точки.

    Immutable модель (frozen=True). Обе координаты конечны; zero, subnormal
    и любые normal значения допустимы и хранятся без изменений.
    """

    x: float = Field(..., description="Координата x (конечная)")
    y: float = Field(..., description="Координата y (конечная)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("x", "y")
    @classmethod
    def validate_finite_coordinate(cls, v: float, info: ValidationInfo) -> float:
        """Координата должна быть конечной (NotFiniteInput иначе)."""
        return validate_finite(v, info.field_name)

    @classmethod
    def new(cls, x: float, y: float) -> "Point":
        """
        Создание точки из координат.

        Raises:
            NotFiniteInput: Если x или y равны ±Inf или NaN
        """
        return cls(x=x, y=y)

    @classmethod
    def origin(cls) -> "Point":
        """Начало координат (0, 0)."""
        return cls(x=0.0, y=0.0)

    @classmethod
    def coerce(cls, value: Any) -> "Point":
        """
        Конверсия значения в провалидированный Point.

        Принимает Point (валидируется повторно), пару (tuple/list),
        Mapping с ключами x/y или numpy.ndarray формы (2,).

        Raises:
            NotFiniteInput: Если координата не конечна
            InvalidInput: Если значение не содержит ровно пару координат
            TypeError: Если тип значения не конвертируется
        """
        if isinstance(value, cls):
            return cls.new(value.x, value.y)
        x, y = value_to_pair(value)
        return cls.new(x, y)

    @classmethod
    def from_array(cls, values: ArrayLike) -> "Point":
        """
        Point из массива формы (2,).

        Raises:
            InvalidInput: Если форма массива не (2,)
            NotFiniteInput: Если элемент не конечен
        """
        x, y = array_to_pair(values)
        return cls.new(x, y)

    def to_array(self) -> ArrayF:
        """Новый массив float64 [x, y] (без потерь)."""
        return pair_to_array(self.x, self.y)

    def as_tuple(self) -> tuple[float, float]:
        return self.x, self.y

    def is_finite(self) -> bool:
        """Выполняется ли инвариант конечности (см. "сырые" операторы)."""
        return is_valid_float(self.x) and is_valid_float(self.y)

    # -------------------------------------------------------------------------
    # Расстояние
    # -------------------------------------------------------------------------

    def distance(self, other: "Point") -> float:
        """
        Евклидово расстояние до другой точки.

        Вычисляется через hypot(dx, dy), а не sqrt(dx*dx + dy*dy):
        квадраты переполняются уже при |dx| ~ 1e154.
        Симметрично: a.distance(b) == b.distance(a).

        Args:
            other: Вторая точка

        Returns:
            Расстояние (zero, subnormal или normal)

        Raises:
            Overflow: Если расстояние не представимо конечным float

        Examples:
            >>> Point.new(0.0, 0.0).distance(Point.new(3.0, 4.0))
            5.0
        """
        dx = self.x - other.x
        dy = self.y - other.y
        return checked_magnitude(safe_hypot(dx, dy), "distance")

    # -------------------------------------------------------------------------
    # Арифметика Point/Vector
    # -------------------------------------------------------------------------

    def __sub__(self, other: object) -> Vector:
        """Смещение other -> self. Результат НЕ валидируется."""
        if not isinstance(other, Point):
            return NotImplemented
        return Vector.model_construct(x=self.x - other.x, y=self.y - other.y)

    def __add__(self, other: object) -> "Point":
        """Перенос точки на вектор. Результат НЕ валидируется."""
        if not isinstance(other, Vector):
            return NotImplemented
        return Point.model_construct(x=self.x + other.x, y=self.y + other.y)

    def checked_sub(self, other: "Point") -> Vector:
        """
        Смещение other -> self с проверкой результата.

        Raises:
            Overflow: Если разность координат не представима конечным float
        """
        displacement = self - other
        if not displacement.is_finite():
            logger.debug("displacement %r - %r overflowed", self, other)
            raise Overflow(f"displacement between {self} and {other} is not finite")
        return displacement

    def checked_add(self, vector: Vector) -> "Point":
        """
        Перенос точки на вектор с проверкой результата.

        Raises:
            Overflow: Если сумма координат не представима конечным float
        """
        translated = self + vector
        if not translated.is_finite():
            logger.debug("translation %r + %r overflowed", self, vector)
            raise Overflow(f"translation of {self} by {vector} is not finite")
        return translated
