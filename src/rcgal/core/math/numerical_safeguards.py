"""
Numerical Safeguards — Safe Float Primitives

Модуль содержит численные примитивы, на которых строятся инварианты
Point/Vector/Line:
- Классификация float (zero / subnormal / normal / infinite / NaN)
- Проверка конечности входов с явной ошибкой вместо санитизации
- Overflow-safe гипотенуза
- Классификация результата distance/length (значение / Overflow / дефект)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не заменяются "правдоподобным" значением: либо ошибка, либо
   корректный результат
2. Гипотенуза никогда не вычисляется как sqrt(dx*dx + dy*dy)
3. NaN из конечных входов означает дефект реализации (UnreachableStateError),
   а не пользовательская ошибка
4. Все операции детерминированы и воспроизводимы
"""

import logging
import math
import sys
from enum import Enum
from typing import Final

from rcgal.core.errors import NotFiniteInput, Overflow, UnreachableStateError

logger = logging.getLogger(__name__)

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Наибольший конечный binary64
FLOAT_MAX: Final[float] = sys.float_info.max

# Наименьший положительный normal binary64 (2**-1022)
# Ненулевые значения меньше по модулю являются subnormal
FLOAT_MIN_NORMAL: Final[float] = sys.float_info.min

# Абсолютная толерантность для проверки единичной длины
UNIT_LENGTH_TOLERANCE: Final[float] = 1e-12

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# КЛАССИФИКАЦИЯ FLOAT
# =============================================================================


class FloatClass(str, Enum):
    """Класс IEEE-754 значения"""

    ZERO = "zero"
    SUBNORMAL = "subnormal"
    NORMAL = "normal"
    INFINITE = "infinite"
    NAN = "nan"


def classify_float(value: float) -> FloatClass:
    """
    Классификация float по IEEE-754.

    Args:
        value: Проверяемое значение

    Returns:
        FloatClass значения

    Examples:
        >>> classify_float(0.0)
        <FloatClass.ZERO: 'zero'>
        >>> classify_float(5e-324)
        <FloatClass.SUBNORMAL: 'subnormal'>
        >>> classify_float(float('-inf'))
        <FloatClass.INFINITE: 'infinite'>
    """
    if math.isnan(value):
        return FloatClass.NAN
    if math.isinf(value):
        return FloatClass.INFINITE
    if value == 0.0:
        return FloatClass.ZERO
    if abs(value) < FLOAT_MIN_NORMAL:
        return FloatClass.SUBNORMAL
    return FloatClass.NORMAL


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Zero и subnormal считаются валидными.
    """
    return math.isfinite(value)


def is_normal_float(value: float) -> bool:
    """
    Проверка, является ли float normal числом.

    Returns:
        False для zero, subnormal, ±Inf и NaN
    """
    return classify_float(value) is FloatClass.NORMAL


# =============================================================================
# ВАЛИДАЦИЯ ВХОДОВ
# =============================================================================


def validate_finite(value: float, name: str) -> float:
    """
    Валидация, что значение конечно.

    Args:
        value: Проверяемое значение
        name: Имя координаты (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        NotFiniteInput: Если value равно ±Inf или NaN
    """
    if not is_valid_float(value):
        logger.debug("rejected non-finite %s=%r", name, value)
        raise NotFiniteInput(f"{name} must be finite (not NaN/Inf), got {value}")
    return value


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ГИПОТЕНУЗА И КЛАССИФИКАЦИЯ РЕЗУЛЬТАТА
# =============================================================================


def max_abs(a: float, b: float) -> float:
    """
    Наибольший модуль из двух значений с распространением NaN.

    Встроенный max() зависит от порядка аргументов при NaN
    (max(1.0, nan) == 1.0), здесь NaN в любом аргументе даёт NaN.

    Examples:
        >>> max_abs(-3.0, 2.0)
        3.0
        >>> max_abs(1.0, float('nan'))
        nan
    """
    abs_a = abs(a)
    abs_b = abs(b)
    if math.isnan(abs_a) or abs_a >= abs_b:
        return abs_a
    return abs_b


def safe_hypot(a: float, b: float) -> float:
    """
    Overflow-safe sqrt(a**2 + b**2).

    math.hypot масштабирует аргументы перед возведением в квадрат, поэтому
    промежуточные значения не переполняются и не теряются в underflow.
    Непредставимый результат возвращается как +Inf.

    Examples:
        >>> safe_hypot(3.0, 4.0)
        5.0
    """
    try:
        return math.hypot(a, b)
    except OverflowError:
        return math.inf


def checked_magnitude(value: float, name: str) -> float:
    """
    Классификация вычисленной длины/расстояния.

    Args:
        value: Результат safe_hypot для конечных аргументов
        name: Имя операции (для сообщения об ошибке)

    Returns:
        value, если оно zero, subnormal или normal

    Raises:
        Overflow: Если результат бесконечен
        UnreachableStateError: Если результат NaN (невозможно при конечных входах)
    """
    float_class = classify_float(value)

    if float_class is FloatClass.INFINITE:
        logger.debug("%s overflowed to %r", name, value)
        raise Overflow(f"{name} is not representable as a finite float")

    if float_class is FloatClass.NAN:
        raise UnreachableStateError(f"{name} is NaN for finite operands")

    return value
