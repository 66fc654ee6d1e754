"""
Gamma — гамма-функция для действительных и комплексных аргументов

Модуль вычисляет Gamma через аппроксимацию Ланцоша:
- Для Re(x) >= 0.5 — ряд Ланцоша с таблицей из LanczosParameters
- Для Re(x) < 0.5 — формула отражения Эйлера

ФОРМУЛЫ:
    Gamma(x) = pi / (sin(pi*x) * Gamma(1 - x))            (Re x < 0.5)
    t = x + g - 0.5
    a = p[0] + sum_{k=1}^{n-1} p[k] / (x + k - 1)
    Gamma(x) = t^(x - 0.5) * sqrt(2*pi) * e^(-t) * a      (Re x >= 0.5)

Рекурсия отражения завершается за один шаг: Re(1 - x) > 0.5.
В полюсах (0, -1, -2, ...) результат ±inf или NaN, исключения не бросаются.
"""

import logging
import math
from functools import singledispatch
from numbers import Real
from typing import Final

from src.core.math.complex_number import ONE, PI, Complex
from src.core.math.numerical_safeguards import (
    ieee_divide,
    ieee_exp,
    ieee_pow,
    ieee_sin,
)
from src.special.lanczos import DEFAULT_LANCZOS, LanczosParameters

logger = logging.getLogger(__name__)

# Постоянная Эйлера — Маскерони
EULER_MASCHERONI: Final[float] = 0.577215664901532860606512090082

REFLECTION_THRESHOLD: Final[float] = 0.5

SQRT_TWO_PI: Final[float] = math.sqrt(2.0 * math.pi)


@singledispatch
def gamma(x, parameters: LanczosParameters = DEFAULT_LANCZOS):
    """
    Гамма-функция.

    Args:
        x: Аргумент — real число или Complex
        parameters: Параметры ряда Ланцоша (default: DEFAULT_LANCZOS)

    Returns:
        float для real аргумента, Complex для Complex аргумента

    Raises:
        TypeError: Для аргумента другого типа

    Examples:
        >>> round(gamma(5.0), 9)
        24.0
        >>> abs(gamma(0.5) - math.sqrt(math.pi)) < 1e-12
        True
    """
    raise TypeError(f"gamma is not defined for {type(x).__name__}")


@gamma.register(Real)
def _gamma_real(x: Real, parameters: LanczosParameters = DEFAULT_LANCZOS) -> float:
    x = float(x)

    if x < REFLECTION_THRESHOLD:
        logger.debug("gamma(%r): reflection via gamma(%r)", x, 1.0 - x)
        return ieee_divide(
            ieee_divide(math.pi, ieee_sin(math.pi * x)),
            _gamma_real(1.0 - x, parameters),
        )

    coefficients = parameters.coefficients
    a = coefficients[0]
    t = x + parameters.g - 0.5

    for k in range(1, parameters.n):
        a += ieee_divide(coefficients[k], x + k - 1.0)

    return ieee_pow(t, x - 0.5) * SQRT_TWO_PI * ieee_exp(-t) * a


@gamma.register(Complex)
def _gamma_complex(
    z: Complex, parameters: LanczosParameters = DEFAULT_LANCZOS
) -> Complex:
    if z.real < REFLECTION_THRESHOLD:
        logger.debug("gamma(%s): reflection via gamma(1 - z)", z)
        return PI.divide(z.multiply(math.pi).sin()).divide(
            _gamma_complex(ONE.subtract(z), parameters)
        )

    coefficients = parameters.coefficients
    a = Complex(coefficients[0])
    t = z.add(parameters.g).subtract(0.5)

    for k in range(1, parameters.n):
        a = a.add(Complex(coefficients[k]).divide(z.add(k - 1)))

    return (
        t.exponentiate(z.subtract(0.5))
        .multiply(SQRT_TWO_PI)
        .multiply(t.negate().exponentiate())
        .multiply(a)
    )
