"""
Errors — Закрытая таксономия ошибок rcgal

Все валидирующие операции библиотеки завершаются либо значением,
удовлетворяющим инвариантам, либо ровно одной из трёх ошибок:

- NotFiniteInput: координата/компонента равна ±Inf или NaN
- InvalidInput: значение конечно, но не удовлетворяет более сильному условию
  (например, доминирующая компонента вектора не normal float)
- Overflow: результат математически определён, но не представим конечным float

RcgalError наследуется от Exception, а не от ValueError: pydantic оборачивает
ValueError в ValidationError, а ошибки rcgal должны доходить до вызывающего
кода без обёртки.
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид нарушенного контракта"""

    NOT_FINITE_INPUT = "not_finite_input"
    INVALID_INPUT = "invalid_input"
    OVERFLOW = "overflow"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RcgalError(Exception):
    """
    Базовая ошибка rcgal.

    Конкретный подкласс однозначно определяет нарушенный контракт,
    дополнительный контекст не требуется.
    """

    kind: ErrorKind

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class NotFiniteInput(RcgalError):
    """Одна из входных координат/компонент равна ±Inf или NaN."""

    kind = ErrorKind.NOT_FINITE_INPUT


class InvalidInput(RcgalError):
    """Входное значение конечно, но не удовлетворяет требованиям операции."""

    kind = ErrorKind.INVALID_INPUT


class Overflow(RcgalError):
    """Результат не может быть представлен конечным float."""

    kind = ErrorKind.OVERFLOW


class UnreachableStateError(AssertionError):
    """
    Нарушение внутреннего инварианта (дефект реализации).

    Например, NaN как результат distance/length при конечных аргументах.
    Не является частью публичного канала ошибок и не наследуется от RcgalError.
    """
    pass
