"""
Complex — неизменяемое комплексное число двойной точности

Модуль реализует значение (real, imaginary) с:
- Арифметикой (complex и real операнды, операторы Python)
- Полярной формой, модулем, аргументом, сопряжением, проекцией
- Экспонентой, логарифмом и степенью (главная ветвь)
- Извлечением корней n-й степени и квадратного корня
- Тригонометрическими и гиперболическими функциями через экспоненту

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение не изменяется после создания; каждая операция возвращает новое
2. Равенство и hash — по bit pattern компонент (+0.0 != -0.0, NaN == NaN)
3. NaN/Inf пропагируют по правилам IEEE-754, исключений не бросается
4. Логарифм и степень берутся на главной ветви, разрез по (-inf, 0]

ФОРМУЛЫ:
    exp(z) = e^re * (cos im, sin im)
    log(z) = (ln|z|, atan2(im, re))
    z^w = exp(log(z) * w)
    sin z = (e^{iz} - e^{-iz}) / 2 / i
    sinh z = (e^z - e^{-z}) / 2
"""

import math
import operator
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import Final

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    bits_equal,
    double_to_long_bits,
    ieee_cos,
    ieee_divide,
    ieee_exp,
    ieee_log,
    ieee_pow,
    ieee_sin,
    ieee_sqrt,
    is_close,
    is_infinite,
    is_nan,
    is_valid_float,
    signum,
    validate_at_least,
)


def _real_operand(value: object) -> float:
    if isinstance(value, Real):
        return float(value)
    raise TypeError(f"operand must be Complex or a real number, got {type(value).__name__}")


def _is_operand(value: object) -> bool:
    return isinstance(value, (Complex, Real))


# Границы десятичной записи; вне [1e-3, 1e7) используется d.dddEn
PLAIN_NOTATION_MIN: Final[float] = 1e-3

PLAIN_NOTATION_MAX: Final[float] = 1e7


def _format_double(value: float) -> str:
    """
    Текстовая запись конечного double.

    Кратчайшие цифры берутся из repr. В диапазоне [1e-3, 1e7) запись
    десятичная с хотя бы одной цифрой после точки, вне его — мантисса
    d.ddd, "E" и порядок без "+" и ведущих нулей.

    Examples:
        >>> _format_double(1e7)
        '1.0E7'
        >>> _format_double(123456789.0)
        '1.23456789E8'
        >>> _format_double(0.001)
        '0.001'
    """
    if value == 0:
        return "-0.0" if math.copysign(1.0, value) < 0 else "0.0"

    sign = "-" if value < 0 else ""
    magnitude = abs(value)

    if PLAIN_NOTATION_MIN <= magnitude < PLAIN_NOTATION_MAX:
        return f"{sign}{magnitude!r}"

    _, digits, exponent = Decimal(repr(magnitude)).normalize().as_tuple()
    fraction = "".join(str(d) for d in digits[1:]) or "0"
    return f"{sign}{digits[0]}.{fraction}E{exponent + len(digits) - 1}"


# =============================================================================
# COMPLEX
# =============================================================================


@dataclass(frozen=True, eq=False)
class Complex:
    """
    Комплексное число: действительная и мнимая части типа float.

    Конструкторы:
        Complex(real) — мнимая часть 0.0
        Complex(real, imaginary)
        Complex.polar(rho, theta)

    Методы add/subtract/multiply/divide принимают Complex или real число.
    Операторы + - * / ** и унарный минус делегируют им.

    Examples:
        >>> Complex(1, 2).add(Complex(3, -1))
        Complex(real=4.0, imaginary=1.0)
        >>> str(Complex(1, -1))
        '1.0-1.0i'
        >>> Complex(3, 4).absolute()
        5.0
    """

    real: float
    imaginary: float = 0.0

    def __post_init__(self) -> None:
        for name in ("real", "imaginary"):
            value = getattr(self, name)
            if not isinstance(value, Real):
                raise TypeError(
                    f"{name} must be a real number, got {type(value).__name__}"
                )
            object.__setattr__(self, name, float(value))

    @classmethod
    def polar(cls, rho: float, theta: float) -> "Complex":
        """
        Комплексное число из полярного представления.

        Args:
            rho: Модуль (>= 0)
            theta: Аргумент в радианах

        Returns:
            (rho * cos theta, rho * sin theta)

        Raises:
            ValueError: Если rho < 0
        """
        validate_at_least(rho, "rho", 0.0)
        return cls(rho * ieee_cos(theta), rho * ieee_sin(theta))

    # =========================================================================
    # РАВЕНСТВО, HASH, ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Complex):
            return NotImplemented
        return bits_equal(self.real, other.real) and bits_equal(
            self.imaginary, other.imaginary
        )

    def __hash__(self) -> int:
        return hash(
            (double_to_long_bits(self.real), double_to_long_bits(self.imaginary))
        )

    def __str__(self) -> str:
        """
        Текстовое представление.

        Returns:
            "not a number" если есть NaN, "infinity" если есть inf,
            иначе "<re>", "<im>i", "<re>+<im>i" или "<re><im>i"
        """
        if self.is_nan():
            return "not a number"
        if self.is_infinite():
            return "infinity"
        if self.imaginary == 0:
            return _format_double(self.real)
        if self.real == 0:
            return f"{_format_double(self.imaginary)}i"
        if self.imaginary >= 0:
            return f"{_format_double(self.real)}+{_format_double(self.imaginary)}i"
        return f"{_format_double(self.real)}{_format_double(self.imaginary)}i"

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    def is_close(
        self,
        other: "Complex",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Покомпонентное приближённое сравнение (в отличие от ==)."""
        return is_close(self.real, other.real, rel_tol, abs_tol) and is_close(
            self.imaginary, other.imaginary, rel_tol, abs_tol
        )

    # =========================================================================
    # ПРЕДИКАТЫ
    # =========================================================================

    def is_zero(self) -> bool:
        return self.real == 0 and self.imaginary == 0

    def is_infinite(self) -> bool:
        return is_infinite(self.real) or is_infinite(self.imaginary)

    def is_nan(self) -> bool:
        return is_nan(self.real) or is_nan(self.imaginary)

    def is_finite(self) -> bool:
        return is_valid_float(self.real) and is_valid_float(self.imaginary)

    # =========================================================================
    # МОДУЛЬ, АРГУМЕНТ, НОРМА
    # =========================================================================

    def absolute(self) -> float:
        """Модуль |z| через hypot (без промежуточного переполнения)."""
        return math.hypot(self.real, self.imaginary)

    def argument(self) -> float:
        """Главное значение аргумента в (-pi, pi]."""
        return math.atan2(self.imaginary, self.real)

    def norm(self) -> float:
        """
        Полевая норма в исторической формулировке: re^2 * im^2.

        Это произведение, а не сумма квадратов; для re^2 + im^2
        используется squared_absolute().
        Произведение сохранено намеренно: на него опираются вызывающие,
        не заменять на сумму квадратов.
        """
        return (self.real * self.real) * (self.imaginary * self.imaginary)

    def squared_absolute(self) -> float:
        """re^2 + im^2."""
        return self.real * self.real + self.imaginary * self.imaginary

    # =========================================================================
    # УНАРНЫЕ ОПЕРАЦИИ
    # =========================================================================

    def conjugate(self) -> "Complex":
        return Complex(self.real, -self.imaginary)

    def projection(self) -> "Complex":
        """Проекция на сферу Римана: любая бесконечность -> (+inf, 0)."""
        if self.is_infinite():
            return Complex(math.inf, 0.0)
        return self

    def negate(self) -> "Complex":
        return Complex(-self.real, -self.imaginary)

    def reciprocal(self) -> "Complex":
        """1/z = (re, -im) / (re^2 + im^2); для нуля компоненты NaN."""
        denominator = self.squared_absolute()
        return Complex(
            ieee_divide(self.real, denominator),
            ieee_divide(-self.imaginary, denominator),
        )

    def signum(self) -> "Complex":
        """
        Направление на единичной окружности: z / |z|.

        Для нуля возвращается ZERO.
        """
        if self.is_zero():
            return ZERO
        modulus = self.absolute()
        return Complex(
            ieee_divide(self.real, modulus), ieee_divide(self.imaginary, modulus)
        )

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, addend: "Complex | float") -> "Complex":
        if isinstance(addend, Complex):
            return Complex(self.real + addend.real, self.imaginary + addend.imaginary)
        return Complex(self.real + _real_operand(addend), self.imaginary)

    def subtract(self, subtrahend: "Complex | float") -> "Complex":
        if isinstance(subtrahend, Complex):
            return Complex(
                self.real - subtrahend.real, self.imaginary - subtrahend.imaginary
            )
        return Complex(self.real - _real_operand(subtrahend), self.imaginary)

    def multiply(self, multiplicand: "Complex | float") -> "Complex":
        if isinstance(multiplicand, Complex):
            return Complex(
                self.real * multiplicand.real - self.imaginary * multiplicand.imaginary,
                self.real * multiplicand.imaginary + multiplicand.real * self.imaginary,
            )
        factor = _real_operand(multiplicand)
        return Complex(self.real * factor, self.imaginary * factor)

    def divide(self, divisor: "Complex | float") -> "Complex":
        """
        Деление на Complex или real число.

        Для complex делителя:
            ((re*re' + im*im'), (im*re' - re*im')) / (re'^2 + im'^2)

        Нулевой делитель не бросает исключение: компоненты становятся
        ±inf или NaN по правилам IEEE-754.
        """
        if isinstance(divisor, Complex):
            denominator = divisor.squared_absolute()
            return Complex(
                self.real * divisor.real + self.imaginary * divisor.imaginary,
                self.imaginary * divisor.real - self.real * divisor.imaginary,
            ).divide(denominator)
        value = _real_operand(divisor)
        return Complex(ieee_divide(self.real, value), ieee_divide(self.imaginary, value))

    def __add__(self, other: object) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: object) -> "Complex":
        if not isinstance(other, Real):
            return NotImplemented
        return Complex(other).subtract(self)

    def __mul__(self, other: object) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: object) -> "Complex":
        if not isinstance(other, Real):
            return NotImplemented
        return Complex(other).divide(self)

    def __pow__(self, other: object) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.exponentiate(other)

    def __rpow__(self, other: object) -> "Complex":
        if not isinstance(other, Real):
            return NotImplemented
        return Complex(other).exponentiate(self)

    def __neg__(self) -> "Complex":
        return self.negate()

    def __pos__(self) -> "Complex":
        return self

    def __abs__(self) -> float:
        return self.absolute()

    # =========================================================================
    # ЭКСПОНЕНТА, СТЕПЕНЬ, ЛОГАРИФМ
    # =========================================================================

    def exponentiate(self, exponent: "Complex | float | None" = None) -> "Complex":
        """
        Экспонента или степень.

        Без аргумента: e^z = e^re * (cos im, sin im).
        С аргументом: z^w = exp(log(z) * w) — главная ветвь, поэтому
        результат для отрицательной действительной оси приближённый,
        например (-1)^2 даёт 1 только с точностью до округления.

        Args:
            exponent: Показатель степени (Complex или real), опционально

        Returns:
            e^z или z^exponent
        """
        if exponent is None:
            scale = ieee_exp(self.real)
            return Complex(
                scale * ieee_cos(self.imaginary), scale * ieee_sin(self.imaginary)
            )
        return self.logarithm().multiply(exponent).exponentiate()

    def logarithm(self, base: "Complex | float | None" = None) -> "Complex":
        """
        Главное значение логарифма.

        Без аргумента: ln z = (ln|z|, atan2(im, re)), разрез по (-inf, 0].
        С аргументом: ln z / ln base (Complex или real основание).
        """
        natural = Complex(ieee_log(self.absolute()), self.argument())
        if base is None:
            return natural
        if isinstance(base, Complex):
            return natural.divide(base.logarithm())
        return natural.divide(ieee_log(_real_operand(base)))

    # =========================================================================
    # КОРНИ
    # =========================================================================

    def nth_root(self, degree: int) -> list["Complex"]:
        """
        Все корни степени degree.

        theta_0 = arg(z) / degree, далее угол растёт на 2*pi/degree:
            root_k = |z|^(1/degree) * (cos theta_k, sin theta_k)

        Args:
            degree: Степень корня (целое >= 1)

        Returns:
            Список из degree корней, первый — главный

        Raises:
            ValueError: Если degree < 1
            TypeError: Если degree не целое
        """
        degree = operator.index(degree)
        validate_at_least(degree, "degree", 1)

        rho = ieee_pow(self.absolute(), 1.0 / degree)
        theta = self.argument() / degree
        step = 2.0 * math.pi / degree

        roots = []
        for _ in range(degree):
            roots.append(Complex(rho * ieee_cos(theta), rho * ieee_sin(theta)))
            theta += step
        return roots

    def square_root(self) -> "Complex":
        """
        Главный квадратный корень по формулам половинного угла.

            re' = sqrt(2)/2 * sqrt(|z| + re)
            im' = sqrt(2)/2 * sign(im) * sqrt(|z| - re)

        sign(0) = 0, поэтому на отрицательной действительной оси
        мнимая часть результата нулевая.
        """
        multiplier = math.sqrt(2) / 2
        modulus = self.absolute()
        real_part = ieee_sqrt(modulus + self.real)
        imaginary_part = signum(self.imaginary) * ieee_sqrt(modulus - self.real)
        return Complex(multiplier * real_part, multiplier * imaginary_part)

    def cube_root(self) -> "Complex":
        raise NotImplementedError("cube_root is not implemented")

    # =========================================================================
    # ТРИГОНОМЕТРИЯ
    # =========================================================================

    def _circular_exponentials(self) -> tuple["Complex", "Complex"]:
        iz = self.multiply(I)
        return iz.exponentiate(), iz.negate().exponentiate()

    def sin(self) -> "Complex":
        positive, negative = self._circular_exponentials()
        return positive.subtract(negative).divide(2.0).divide(I)

    def cos(self) -> "Complex":
        positive, negative = self._circular_exponentials()
        return positive.add(negative).divide(2.0)

    def tan(self) -> "Complex":
        positive, negative = self._circular_exponentials()
        return positive.subtract(negative).divide(I).divide(positive.add(negative))

    def cot(self) -> "Complex":
        positive, negative = self._circular_exponentials()
        return I.multiply(positive.add(negative)).divide(positive.subtract(negative))

    def sec(self) -> "Complex":
        positive, negative = self._circular_exponentials()
        return TWO.divide(positive.add(negative))

    def csc(self) -> "Complex":
        positive, negative = self._circular_exponentials()
        return TWO.multiply(I).divide(positive.subtract(negative))

    def arcsin(self) -> "Complex":
        """arcsin z = -i * ln(i*z + sqrt(1 - z^2))."""
        root = ONE.subtract(self.exponentiate(2)).square_root()
        return I.negate().multiply(I.multiply(self).add(root).logarithm())

    # =========================================================================
    # ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
    # =========================================================================

    def _hyperbolic_exponentials(self) -> tuple["Complex", "Complex"]:
        return self.exponentiate(), self.negate().exponentiate()

    def sinh(self) -> "Complex":
        positive, negative = self._hyperbolic_exponentials()
        return positive.subtract(negative).divide(2.0)

    def cosh(self) -> "Complex":
        positive, negative = self._hyperbolic_exponentials()
        return positive.add(negative).divide(2.0)

    def tanh(self) -> "Complex":
        positive, negative = self._hyperbolic_exponentials()
        return positive.subtract(negative).divide(positive.add(negative))

    def coth(self) -> "Complex":
        positive, negative = self._hyperbolic_exponentials()
        return positive.add(negative).divide(positive.subtract(negative))

    def sech(self) -> "Complex":
        positive, negative = self._hyperbolic_exponentials()
        return TWO.divide(positive.add(negative))

    def csch(self) -> "Complex":
        positive, negative = self._hyperbolic_exponentials()
        return TWO.divide(positive.subtract(negative))


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Нейтральный элемент сложения
ZERO: Final[Complex] = Complex(0.0, 0.0)

# Нейтральный элемент умножения
ONE: Final[Complex] = Complex(1.0, 0.0)

# Мнимая единица
I: Final[Complex] = Complex(0.0, 1.0)

TWO: Final[Complex] = Complex(2.0, 0.0)

E: Final[Complex] = Complex(math.e, 0.0)

PI: Final[Complex] = Complex(math.pi, 0.0)

# Обе компоненты +inf; projection() сводит любую бесконечность к (+inf, 0)
INFINITY: Final[Complex] = Complex(math.inf, math.inf)
