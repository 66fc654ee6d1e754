"""Special functions — гамма-функция на базе Complex.

- Аппроксимация Ланцоша (g = 4.7421875, n = 15)
- Формула отражения для Re(x) < 0.5
"""

from .gamma import EULER_MASCHERONI, gamma
from .lanczos import DEFAULT_LANCZOS, LanczosParameters

__all__ = [
    "DEFAULT_LANCZOS",
    "EULER_MASCHERONI",
    "LanczosParameters",
    "gamma",
]
