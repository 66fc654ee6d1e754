"""
Primes — простые числа методом пробного деления

- is_prime: проверка простоты (делители вида 6k ± 1 до sqrt(n))
- next_prime: наименьшее простое, строго большее n
- prime_factorise: разложение на простые множители с кратностью
"""

import logging
import math

from src.core.math.numerical_safeguards import validate_at_least

logger = logging.getLogger(__name__)


def _validate_integer(number: object, name: str = "number") -> int:
    # bool является подклассом int, но числом здесь не считается
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"{name} must be an int, got {type(number).__name__}")
    return number


def is_prime(number: int) -> bool:
    """
    Проверка простоты.

    Args:
        number: Проверяемое целое

    Returns:
        False для number < 2, иначе True если number простое

    Examples:
        >>> is_prime(97)
        True
        >>> is_prime(1)
        False
        >>> is_prime(91)
        False
    """
    number = _validate_integer(number)

    if number < 2:
        return False
    if number < 4:
        return True
    if number % 2 == 0 or number % 3 == 0:
        return False

    limit = math.isqrt(number)
    candidate = 5
    while candidate <= limit:
        if number % candidate == 0 or number % (candidate + 2) == 0:
            return False
        candidate += 6
    return True


def next_prime(number: int) -> int:
    """
    Наименьшее простое, строго большее number.

    Examples:
        >>> next_prime(13)
        17
        >>> next_prime(-5)
        2
    """
    number = _validate_integer(number)

    if number < 2:
        return 2

    candidate = number + 1
    if candidate % 2 == 0 and candidate != 2:
        candidate += 1
    while not is_prime(candidate):
        candidate += 2
    return candidate


def prime_factorise(number: int) -> list[int]:
    """
    Разложение на простые множители.

    Args:
        number: Целое >= 2

    Returns:
        Множители по возрастанию, с учётом кратности

    Raises:
        ValueError: Если number < 2

    Examples:
        >>> prime_factorise(360)
        [2, 2, 2, 3, 3, 5]
        >>> prime_factorise(97)
        [97]
    """
    number = _validate_integer(number)
    validate_at_least(number, "number", 2)

    factors = []
    remaining = number

    while remaining % 2 == 0:
        factors.append(2)
        remaining //= 2

    divisor = 3
    while divisor * divisor <= remaining:
        while remaining % divisor == 0:
            factors.append(divisor)
            remaining //= divisor
        divisor += 2

    if remaining > 1:
        factors.append(remaining)

    logger.debug("prime_factorise(%d) = %s", number, factors)
    return factors
