"""
rcgal — 2D геометрические примитивы с гарантией конечности

Point, Vector и Line валидируются при создании; каждая операция либо
возвращает корректное значение, либо бросает ровно одну из ошибок
NotFiniteInput / InvalidInput / Overflow.
"""

import logging

from rcgal.core.domain import Line, Point, Vector
from rcgal.core.errors import (
    ErrorKind,
    InvalidInput,
    NotFiniteInput,
    Overflow,
    RcgalError,
    UnreachableStateError,
)

# Обработчики настраивает приложение
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Value types
    "Line",
    "Point",
    "Vector",
    # Errors
    "ErrorKind",
    "InvalidInput",
    "NotFiniteInput",
    "Overflow",
    "RcgalError",
    "UnreachableStateError",
]
