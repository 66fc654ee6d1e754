"""
Arithmetic — минимальный набор арифметических операций значения

Структурный протокол: тип удовлетворяет ему, если реализует пять
операций ниже. Наследование не требуется.
"""

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Arithmetic(Protocol[T]):
    """Значение с операциями add/subtract/multiply/divide/negate."""

    def add(self, addend: T) -> T: ...

    def subtract(self, subtrahend: T) -> T: ...

    def multiply(self, multiplicand: T) -> T: ...

    def divide(self, divisor: T) -> T: ...

    def negate(self) -> T: ...
