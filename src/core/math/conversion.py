"""
Conversion — приведение чисел и bool к Complex
"""

from numbers import Real

from src.core.math.complex_number import ONE, ZERO, Complex


def to_complex(value: object) -> Complex:
    """
    Конверсия значения в Complex.

    Правила:
        bool -> ONE / ZERO
        Complex -> без изменений
        complex -> Complex(value.real, value.imag)
        real число -> Complex(float(value))

    Args:
        value: Исходное значение

    Returns:
        Complex

    Raises:
        TypeError: Если значение не число и не bool

    Examples:
        >>> to_complex(True) is ONE
        True
        >>> to_complex(2)
        Complex(real=2.0, imaginary=0.0)
    """
    # bool проверяется первым: bool является подклассом int
    if isinstance(value, bool):
        return ONE if value else ZERO
    if isinstance(value, Complex):
        return value
    if isinstance(value, complex):
        return Complex(value.real, value.imag)
    if isinstance(value, Real):
        return Complex(float(value))
    raise TypeError(f"cannot convert {type(value).__name__} to Complex")
