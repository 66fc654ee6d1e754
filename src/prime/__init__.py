"""Prime numbers — простые числа пробным делением."""

from .primes import is_prime, next_prime, prime_factorise

__all__ = [
    "is_prime",
    "next_prime",
    "prime_factorise",
]
