"""
Тесты для Complex — экспонента, логарифм, корни, тригонометрия

Проверяемые инварианты:
1. Главная ветвь логарифма и степени
2. Корни n-й степени: количество, различие, обратимость
3. Тригонометрия и гиперболические функции совпадают с cmath
4. cube_root не реализован
"""

import cmath
import math

import pytest

from src.core.math.complex_number import I, ONE, ZERO, Complex

SAMPLE_POINTS = [Complex(0.5, 0.25), Complex(1, 2), Complex(-0.7, 0.3)]


def assert_matches(actual: Complex, expected: complex) -> None:
    assert actual.real == pytest.approx(expected.real, rel=1e-9, abs=1e-12)
    assert actual.imaginary == pytest.approx(expected.imag, rel=1e-9, abs=1e-12)


# =============================================================================
# ТЕСТЫ: Экспонента и степень
# =============================================================================


class TestExponentiate:
    """Тесты exponentiate() и exponentiate(exponent)."""

    def test_exp_of_zero(self):
        assert ZERO.exponentiate() == ONE

    def test_euler_identity(self):
        """e^{i*pi} = -1."""
        assert Complex(0, math.pi).exponentiate().is_close(Complex(-1, 0))

    def test_exp_overflow_propagates(self):
        assert Complex(1000, 0).exponentiate().real == math.inf

    @pytest.mark.parametrize("z", SAMPLE_POINTS)
    def test_exp_matches_cmath(self, z):
        assert_matches(z.exponentiate(), cmath.exp(complex(z)))

    def test_real_power(self):
        assert Complex(2, 0).exponentiate(10).is_close(Complex(1024, 0))

    def test_complex_power(self):
        """i^i = e^{-pi/2}."""
        result = I.exponentiate(I)
        assert result.real == pytest.approx(math.exp(-math.pi / 2))
        assert result.imaginary == pytest.approx(0.0, abs=1e-15)

    def test_power_on_branch_cut_is_approximate(self):
        """(-1)^2 через главный логарифм даёт 1 только приближённо."""
        result = Complex(-1, 0).exponentiate(2)
        assert result.is_close(ONE)
        assert result != ONE

    def test_power_of_zero(self):
        assert ZERO.exponentiate(2) == ZERO


# =============================================================================
# ТЕСТЫ: Логарифм
# =============================================================================


class TestLogarithm:
    """Тесты logarithm() и logarithm(base)."""

    def test_natural_logarithm_of_e(self):
        assert Complex(math.e, 0).logarithm().is_close(ONE)

    def test_branch_cut_on_negative_axis(self):
        assert Complex(-1, 0).logarithm() == Complex(0.0, math.pi)

    def test_logarithm_of_zero(self):
        assert ZERO.logarithm() == Complex(-math.inf, 0.0)

    @pytest.mark.parametrize("z", SAMPLE_POINTS)
    def test_matches_cmath(self, z):
        assert_matches(z.logarithm(), cmath.log(complex(z)))

    def test_real_base(self):
        assert Complex(8, 0).logarithm(2).is_close(Complex(3, 0))

    def test_complex_base(self):
        """log_i(-1) = (i*pi) / (i*pi/2) = 2."""
        assert Complex(-1, 0).logarithm(I).is_close(Complex(2, 0))


# =============================================================================
# ТЕСТЫ: Корни
# =============================================================================


class TestNthRoot:
    """Тесты nth_root."""

    def test_cube_roots_of_eight(self):
        roots = Complex(8, 0).nth_root(3)
        assert len(roots) == 3
        assert roots[0].is_close(Complex(2, 0))
        for k, root in enumerate(roots):
            assert root.is_close(Complex.polar(2, 2 * math.pi * k / 3))

    @pytest.mark.parametrize("z", [Complex(3, 4), Complex(-2, 1), Complex(0.5, -0.25)])
    @pytest.mark.parametrize("degree", [1, 2, 3, 5])
    def test_roots_raised_to_degree(self, z, degree):
        for root in z.nth_root(degree):
            assert root.exponentiate(degree).is_close(z, rel_tol=1e-9, abs_tol=1e-9)

    def test_roots_are_distinct(self):
        roots = Complex(1, 1).nth_root(6)
        for i, left in enumerate(roots):
            for right in roots[i + 1:]:
                assert not left.is_close(right)

    @pytest.mark.parametrize("degree", [0, -2])
    def test_degree_below_one_raises(self, degree):
        with pytest.raises(ValueError, match="degree"):
            Complex(1, 1).nth_root(degree)

    def test_non_integer_degree_raises(self):
        with pytest.raises(TypeError):
            Complex(1, 1).nth_root(2.5)


class TestSquareRoot:
    """Тесты square_root и cube_root."""

    @pytest.mark.parametrize(
        "z, expected",
        [
            (Complex(3, 4), Complex(2, 1)),
            (Complex(-3, 4), Complex(1, 2)),
            (Complex(0, -2), Complex(1, -1)),
            (Complex(4, 0), Complex(2, 0)),
        ],
    )
    def test_principal_root(self, z, expected):
        assert z.square_root().is_close(expected)

    @pytest.mark.parametrize("z", SAMPLE_POINTS)
    def test_square_of_root(self, z):
        root = z.square_root()
        assert root.multiply(root).is_close(z)

    @pytest.mark.parametrize("z", [ZERO, Complex(8, 0), Complex(1, -1)])
    def test_cube_root_unsupported(self, z):
        with pytest.raises(NotImplementedError):
            z.cube_root()


# =============================================================================
# ТЕСТЫ: Тригонометрия и гиперболические функции
# =============================================================================

CMATH_EQUIVALENTS = [
    ("sin", cmath.sin),
    ("cos", cmath.cos),
    ("tan", cmath.tan),
    ("cot", lambda w: 1 / cmath.tan(w)),
    ("sec", lambda w: 1 / cmath.cos(w)),
    ("csc", lambda w: 1 / cmath.sin(w)),
    ("sinh", cmath.sinh),
    ("cosh", cmath.cosh),
    ("tanh", cmath.tanh),
    ("coth", lambda w: 1 / cmath.tanh(w)),
    ("sech", lambda w: 1 / cmath.cosh(w)),
    ("csch", lambda w: 1 / cmath.sinh(w)),
    ("arcsin", cmath.asin),
]


class TestTrigonometric:
    """Функции через экспоненту совпадают с cmath вне разрезов."""

    @pytest.mark.parametrize("z", SAMPLE_POINTS)
    @pytest.mark.parametrize("name, reference", CMATH_EQUIVALENTS)
    def test_matches_cmath(self, z, name, reference):
        assert_matches(getattr(z, name)(), reference(complex(z)))

    def test_sin_on_real_axis(self):
        result = Complex(1, 0).sin()
        assert result.real == pytest.approx(math.sin(1))
        assert result.imaginary == pytest.approx(0.0, abs=1e-15)

    def test_cos_of_zero(self):
        assert ZERO.cos().is_close(ONE)

    def test_arcsin_of_half(self):
        assert Complex(0.5, 0).arcsin().is_close(Complex(math.pi / 6, 0))

    def test_pythagorean_identity(self):
        z = Complex(0.3, -1.1)
        total = z.sin().multiply(z.sin()).add(z.cos().multiply(z.cos()))
        assert total.is_close(ONE)

    def test_hyperbolic_identity(self):
        z = Complex(0.3, -1.1)
        difference = z.cosh().multiply(z.cosh()).subtract(z.sinh().multiply(z.sinh()))
        assert difference.is_close(ONE)
