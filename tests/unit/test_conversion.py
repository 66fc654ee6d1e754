"""
Тесты для to_complex
"""

from fractions import Fraction

import pytest

from src.core.math.complex_number import ONE, ZERO, Complex
from src.core.math.conversion import to_complex


class TestToComplex:
    """Тесты конверсии чисел и bool в Complex."""

    def test_true_is_one(self):
        assert to_complex(True) is ONE

    def test_false_is_zero(self):
        assert to_complex(False) is ZERO

    @pytest.mark.parametrize(
        "value, expected",
        [
            (3, Complex(3.0, 0.0)),
            (-2.5, Complex(-2.5, 0.0)),
            (Fraction(1, 4), Complex(0.25, 0.0)),
        ],
    )
    def test_real_numbers(self, value, expected):
        assert to_complex(value) == expected

    def test_builtin_complex(self):
        assert to_complex(1 + 2j) == Complex(1, 2)

    def test_complex_passthrough(self):
        z = Complex(1, 2)
        assert to_complex(z) is z

    @pytest.mark.parametrize("value", ["3", None, [1, 2]])
    def test_unsupported_type_raises(self, value):
        with pytest.raises(TypeError, match="cannot convert"):
            to_complex(value)
