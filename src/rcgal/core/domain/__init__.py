"""
Domain models and value objects.

Contains the geometric value types: Point, Vector, Line.
"""

from rcgal.core.domain.line import Line
from rcgal.core.domain.point import Point
from rcgal.core.domain.vector import Vector

__all__ = [
    "Line",
    "Point",
    "Vector",
]
