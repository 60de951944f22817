"""
Line — 2D прямая: опорная точка и единичное направление

Immutable Pydantic модель. Направление нормализуется при любой валидации
(Line.new, конструктор, model_validate, model_validate_json), поэтому
direction всегда единичный вектор.

Порядок проверок (первая ошибка побеждает):
1. location -> Point      (NotFiniteInput / InvalidInput)
2. direction -> Vector    (NotFiniteInput / InvalidInput)
3. direction.normalize()  (InvalidInput)
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from rcgal.core.domain.point import Point
from rcgal.core.domain.vector import Vector


class Line(BaseModel):
    """Модель 2D прямой."""

    location: Point = Field(..., description="Опорная точка, через которую проходит прямая")
    # INVARIANT: единичный вектор
    direction: Vector = Field(..., description="Направление (всегда единичный вектор)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("location", mode="before")
    @classmethod
    def coerce_location(cls, v: Any) -> Point:
        return Point.coerce(v)

    @field_validator("direction", mode="before")
    @classmethod
    def normalize_direction(cls, v: Any) -> Vector:
        return Vector.coerce(v).normalize()

    @classmethod
    def new(cls, location: Any, direction: Any) -> "Line":
        """
        Создание прямой из опорной точки и направления.

        Args:
            location: Point или значение, конвертируемое в Point (см. Point.coerce)
            direction: Vector или значение, конвертируемое в Vector (не обязательно единичный)

        Returns:
            Line с нормализованным направлением

        Raises:
            NotFiniteInput: Если координаты location/direction не конечны
            InvalidInput: Если доминирующая компонента direction не normal float
        """
        return cls(location=location, direction=direction)
