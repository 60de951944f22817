"""
Array Interop — Граница с NumPy и конверсия "пар"

NumPy используется только как внешний контейнер координат:
- Конверсия в массив всегда успешна и без потерь (float64, shape (2,))
- Конверсия из массива проверяет форму; конечность проверяет
  валидирующий конструктор Point/Vector

Функции здесь НЕ проверяют конечность: они только извлекают пару значений.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from rcgal.core.errors import InvalidInput

logger = logging.getLogger(__name__)

ArrayF = NDArray[np.float64]


def pair_to_array(x: float, y: float) -> ArrayF:
    """Новый массив float64 формы (2,) из пары координат."""
    return np.array([x, y], dtype=np.float64)


def array_to_pair(values: ArrayLike) -> tuple[float, float]:
    """
    Извлечение пары координат из массива.

    Args:
        values: Любой array-like формы (2,)

    Returns:
        (x, y) как Python float (биты float64 сохраняются)

    Raises:
        InvalidInput: Если форма массива не (2,)
    """
    array = np.asarray(values, dtype=np.float64)

    if array.shape != (2,):
        logger.debug("rejected array of shape %s", array.shape)
        raise InvalidInput(f"expected array of shape (2,), got {array.shape}")

    return float(array[0]), float(array[1])


def value_to_pair(value: Any) -> tuple[float, float]:
    """
    Извлечение пары координат из "конвертируемого" значения.

    Поддерживаются:
    - numpy.ndarray формы (2,)
    - Mapping с ключами "x" и "y"
    - Sequence из двух элементов (tuple, list)

    Raises:
        InvalidInput: Если структура подходит, но не содержит ровно пару
        TypeError: Если тип значения не конвертируется в пару
    """
    if isinstance(value, np.ndarray):
        return array_to_pair(value)

    if isinstance(value, Mapping):
        if "x" not in value or "y" not in value:
            raise InvalidInput(f"mapping must contain 'x' and 'y', got keys {sorted(value)}")
        return value["x"], value["y"]

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if len(value) != 2:
            raise InvalidInput(f"expected a pair of coordinates, got {len(value)} values")
        return value[0], value[1]

    raise TypeError(f"cannot convert {type(value).__name__} to a coordinate pair")
