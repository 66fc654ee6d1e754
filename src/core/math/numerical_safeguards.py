"""
Numerical Safeguards — IEEE-754 примитивы для комплексной арифметики

Модуль собирает float-операции, на которых построены Complex и gamma:
- Битовое представление double (равенство и hash по bit pattern)
- Предикаты NaN/Inf
- IEEE-754 семантика деления, exp, log, sqrt, pow, sin, cos
- Epsilon-сравнения float
- Валидация аргументов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль не бросает исключение: результат ±inf или NaN
2. NaN/Inf не санитизируются, а пропагируют по правилам IEEE-754
3. Все NaN имеют один канонический bit pattern (0x7ff8000000000000)
4. Все операции детерминированы и воспроизводимы

Встроенные функции math бросают ValueError/OverflowError там, где
IEEE-754 даёт NaN или inf. Функции ieee_* возвращают значение, которое
дала бы аппаратная double-арифметика.
"""

import math
import struct
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для приближённых сравнений (is_close)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для приближённых сравнений (is_close)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Канонический bit pattern quiet NaN
CANONICAL_NAN_BITS: Final[int] = 0x7FF8000000000000


# =============================================================================
# БИТОВОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================


def double_to_long_bits(value: float) -> int:
    """
    Битовое представление double как знаковое 64-битное целое.

    Любой NaN сворачивается в CANONICAL_NAN_BITS, поэтому два NaN имеют
    одинаковый bit pattern, а +0.0 и -0.0 различаются.

    Examples:
        >>> double_to_long_bits(1.0)
        4607182418800017408
        >>> double_to_long_bits(-0.0) == double_to_long_bits(0.0)
        False
        >>> double_to_long_bits(float("nan")) == CANONICAL_NAN_BITS
        True
    """
    if math.isnan(value):
        return CANONICAL_NAN_BITS
    return struct.unpack(">q", struct.pack(">d", value))[0]


def bits_equal(a: float, b: float) -> bool:
    """Равенство двух float по bit pattern (не математическое)."""
    return double_to_long_bits(a) == double_to_long_bits(b)


# =============================================================================
# ПРЕДИКАТЫ NaN/Inf
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


def is_nan(value: float) -> bool:
    return math.isnan(value)


def is_infinite(value: float) -> bool:
    return math.isinf(value)


def signum(value: float) -> float:
    """
    Знак числа в стиле IEEE: -1.0, 1.0, либо сам аргумент.

    Для ±0.0 возвращается ноль того же знака, для NaN возвращается NaN.

    Examples:
        >>> signum(-3.5)
        -1.0
        >>> signum(0.0)
        0.0
        >>> signum(-0.0)
        -0.0
    """
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return value


# =============================================================================
# IEEE-754 СЕМАНТИКА
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754 вместо ZeroDivisionError.

    Правила для нулевого делителя:
        x / ±0.0 = ±inf (знак = знак x * знак нуля), x != 0
        0 / 0 = NaN
        NaN / 0 = NaN

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        Частное

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if math.isnan(numerator) or numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def ieee_exp(value: float) -> float:
    """e**value; переполнение даёт +inf вместо OverflowError."""
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def ieee_log(value: float) -> float:
    """
    Натуральный логарифм: log(±0) = -inf, log(x < 0) = NaN.

    Examples:
        >>> ieee_log(0.0)
        -inf
        >>> ieee_log(-1.0)
        nan
    """
    try:
        return math.log(value)
    except ValueError:
        if value == 0:
            return -math.inf
        return math.nan


def ieee_sqrt(value: float) -> float:
    """Квадратный корень: sqrt(x < 0) = NaN."""
    try:
        return math.sqrt(value)
    except ValueError:
        return math.nan


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value == math.floor(value) and math.fmod(value, 2.0) != 0


def ieee_pow(base: float, exponent: float) -> float:
    """
    base**exponent с семантикой IEEE-754.

    Правила:
        pow(±0, y < 0) = +inf (или -inf для -0 и нечётного целого y)
        pow(x < 0, нецелое y) = NaN
        переполнение = ±inf (знак по чётности y)

    Examples:
        >>> ieee_pow(0.0, -1.0)
        inf
        >>> ieee_pow(-0.0, -1.0)
        -inf
        >>> ieee_pow(-8.0, 1.0 / 3.0)
        nan
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def ieee_sin(value: float) -> float:
    """sin; sin(±inf) = NaN."""
    try:
        return math.sin(value)
    except ValueError:
        return math.nan


def ieee_cos(value: float) -> float:
    """cos; cos(±inf) = NaN."""
    try:
        return math.cos(value)
    except ValueError:
        return math.nan


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


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

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_at_least(value: float, name: str, minimum: float) -> None:
    """
    Валидация нижней границы аргумента.

    NaN границу не нарушает (NaN < minimum ложно) и пропускается дальше,
    где пропагирует как обычное значение.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        minimum: Минимальное допустимое значение

    Raises:
        ValueError: Если value < minimum
    """
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
