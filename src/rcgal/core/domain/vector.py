"""
Vector — 2D вектор (смещение) с гарантией конечности

Immutable Pydantic модель. Обе компоненты конечны: инвариант проверяется
при любой валидации (new, конструктор, model_validate, coerce, from_array).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. x и y конечны для любого провалидированного экземпляра
2. length() не переполняется в промежуточных вычислениях
3. normalize() сначала масштабирует по доминирующей компоненте,
   затем делит на длину — ни overflow, ни underflow в промежуточных значениях
"""

import logging
from typing import Any

from numpy.typing import ArrayLike
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from rcgal.core.errors import InvalidInput
from rcgal.core.math.array_interop import ArrayF, array_to_pair, pair_to_array, value_to_pair
from rcgal.core.math.numerical_safeguards import (
    UNIT_LENGTH_TOLERANCE,
    checked_magnitude,
    is_close,
    is_normal_float,
    is_valid_float,
    max_abs,
    safe_hypot,
    validate_finite,
)

logger = logging.getLogger(__name__)


# =============================================================================
# VECTOR MODEL
# =============================================================================


class Vector(BaseModel):
    """
    Модель 2D вектора.

    Immutable модель (frozen=True). Экземпляры, полученные через "сырые"
    операторы Point (см. point.py), не валидируются и могут нарушать
    инвариант конечности — такие значения нужно провалидировать повторно
    (Vector.coerce) перед дальнейшим использованием.
    """

    x: float = Field(..., description="Компонента x (конечная)")
    y: float = Field(..., description="Компонента y (конечная)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("x", "y")
    @classmethod
    def validate_finite_component(cls, v: float, info: ValidationInfo) -> float:
        """Компонента должна быть конечной (NotFiniteInput иначе)."""
        return validate_finite(v, info.field_name)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, x: float, y: float) -> "Vector":
        """
        Создание вектора из компонент.

        Raises:
            NotFiniteInput: Если x или y равны ±Inf или NaN
        """
        return cls(x=x, y=y)

    @classmethod
    def zero(cls) -> "Vector":
        """Нулевой вектор (0, 0)."""
        return cls(x=0.0, y=0.0)

    @classmethod
    def coerce(cls, value: Any) -> "Vector":
        """
        Конверсия значения в провалидированный Vector.

        Принимает Vector (валидируется повторно), пару (tuple/list),
        Mapping с ключами x/y или numpy.ndarray формы (2,).

        Raises:
            NotFiniteInput: Если компонента не конечна
            InvalidInput: Если значение не содержит ровно пару компонент
            TypeError: Если тип значения не конвертируется
        """
        if isinstance(value, cls):
            return cls.new(value.x, value.y)
        x, y = value_to_pair(value)
        return cls.new(x, y)

    @classmethod
    def from_array(cls, values: ArrayLike) -> "Vector":
        """
        Vector из массива формы (2,).

        Raises:
            InvalidInput: Если форма массива не (2,)
            NotFiniteInput: Если элемент не конечен
        """
        x, y = array_to_pair(values)
        return cls.new(x, y)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_array(self) -> ArrayF:
        """Новый массив float64 [x, y] (без потерь)."""
        return pair_to_array(self.x, self.y)

    def as_tuple(self) -> tuple[float, float]:
        return self.x, self.y

    def is_finite(self) -> bool:
        """
        Выполняется ли инвариант конечности.

        Всегда True для провалидированных экземпляров; имеет смысл только
        для результатов "сырых" операторов.
        """
        return is_valid_float(self.x) and is_valid_float(self.y)

    # -------------------------------------------------------------------------
    # Длина и нормализация
    # -------------------------------------------------------------------------

    def length(self) -> float:
        """
        Евклидова длина вектора (overflow-safe).

        Returns:
            Длина (zero, subnormal или normal)

        Raises:
            Overflow: Если длина не представима конечным float
        """
        return checked_magnitude(safe_hypot(self.x, self.y), "length")

    def normalize(self) -> "Vector":
        """
        Единичный вектор того же направления.

        Алгоритм:
            m = max(|x|, |y|)
            m должно быть normal float (не zero, не subnormal, не Inf/NaN)
            (sx, sy) = (x / m, y / m)         # доминирующая компонента = ±1
            l = hypot(sx, sy)                 # 1 <= l <= sqrt(2)
            return (sx / l, sy / l)

        Масштабирование по m гарантирует, что hypot получает значения
        в [-1, 1], поэтому ни огромные, ни крошечные векторы не
        переполняются и не теряются в underflow.

        Returns:
            Vector длины 1 (в пределах UNIT_LENGTH_TOLERANCE)

        Raises:
            InvalidInput: Если доминирующая компонента не normal float

        Examples:
            >>> Vector.new(3.0, 4.0).normalize().as_tuple()
            (0.6, 0.8)
        """
        dominant = max_abs(self.x, self.y)

        if not is_normal_float(dominant):
            logger.debug("cannot normalize %r: dominant component %r is not normal", self, dominant)
            raise InvalidInput(
                f"cannot normalize vector ({self.x}, {self.y}): "
                f"dominant component {dominant} is not a normal float"
            )

        scaled_x = self.x / dominant
        scaled_y = self.y / dominant

        # scaled длина в [1, sqrt(2)]
        scaled_length = safe_hypot(scaled_x, scaled_y)

        return Vector.new(scaled_x / scaled_length, scaled_y / scaled_length)

    def is_unit(self, tolerance: float = UNIT_LENGTH_TOLERANCE) -> bool:
        """
        Проверка единичной длины.

        Args:
            tolerance: Абсолютная толерантность для |length - 1|

        Returns:
            True если |length - 1| <= tolerance
        """
        return is_close(safe_hypot(self.x, self.y), 1.0, rel_tol=0.0, abs_tol=tolerance)
