"""
LanczosParameters — параметры аппроксимации Ланцоша

Immutable Pydantic модель: смещение g, число членов ряда n и таблица
коэффициентов p[0..n-1]. DEFAULT_LANCZOS (g = 4.7421875, n = 15)
используется функцией gamma по умолчанию.
"""

import math
from typing import Final

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# ТАБЛИЦА КОЭФФИЦИЕНТОВ (g = 4.7421875, n = 15)
# =============================================================================

LANCZOS_G: Final[float] = 4.7421875

LANCZOS_N: Final[int] = 15

LANCZOS_COEFFICIENTS: Final[tuple[float, ...]] = (
    0.99999999999999709182,
    57.156235665862923517,
    -59.597960355475491248,
    14.136097974741747174,
    -0.49191381609762019978,
    0.33994649984811888699e-4,
    0.46523628927048575665e-4,
    -0.98374475304879564677e-4,
    0.15808870322491248884e-3,
    -0.21026444172410488319e-3,
    0.21743961811521264320e-3,
    -0.16431810653676389022e-3,
    0.84418223983852743293e-4,
    -0.26190838401581408670e-4,
    0.36899182659531622704e-5,
)


# =============================================================================
# MODEL
# =============================================================================


class LanczosParameters(BaseModel):
    """
    Параметры ряда Ланцоша.

    Gamma(x) = t^(x-0.5) * sqrt(2*pi) * e^(-t) * a,
        t = x + g - 0.5
        a = p[0] + sum_{k=1}^{n-1} p[k] / (x + k - 1)
    """

    g: float = Field(LANCZOS_G, gt=0, description="Смещение g")
    n: int = Field(LANCZOS_N, ge=1, description="Число членов ряда")
    coefficients: tuple[float, ...] = Field(
        LANCZOS_COEFFICIENTS, description="Коэффициенты p[0..n-1]"
    )

    model_config = {"frozen": True, "validate_default": True}

    @field_validator("g")
    @classmethod
    def validate_g(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("g must be finite")
        return v

    @field_validator("coefficients")
    @classmethod
    def validate_coefficients(cls, v: tuple[float, ...], info) -> tuple[float, ...]:
        """Проверка, что таблица конечна и её длина совпадает с n"""
        if not all(math.isfinite(p) for p in v):
            raise ValueError("coefficients must be finite")
        if "n" in info.data and len(v) != info.data["n"]:
            raise ValueError(
                f"coefficients must have exactly n={info.data['n']} entries, got {len(v)}"
            )
        return v


DEFAULT_LANCZOS: Final[LanczosParameters] = LanczosParameters()
