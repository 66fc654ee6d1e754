"""
Core math modules

Комплексные числа и численные примитивы с семантикой IEEE-754.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    CANONICAL_NAN_BITS,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Bit patterns
    bits_equal,
    double_to_long_bits,
    # NaN/Inf predicates
    is_infinite,
    is_nan,
    is_valid_float,
    signum,
    # IEEE-754 semantics
    ieee_cos,
    ieee_divide,
    ieee_exp,
    ieee_log,
    ieee_pow,
    ieee_sin,
    ieee_sqrt,
    # Epsilon comparisons
    is_close,
    # Validation
    validate_at_least,
)

# Arithmetic capability
from src.core.math.arithmetic import Arithmetic

# Complex
from src.core.math.complex_number import (
    E,
    I,
    INFINITY,
    ONE,
    PI,
    TWO,
    ZERO,
    Complex,
)

# Conversion
from src.core.math.conversion import to_complex

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "CANONICAL_NAN_BITS",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Bit patterns
    "bits_equal",
    "double_to_long_bits",
    # Numerical Safeguards — NaN/Inf predicates
    "is_infinite",
    "is_nan",
    "is_valid_float",
    "signum",
    # Numerical Safeguards — IEEE-754 semantics
    "ieee_cos",
    "ieee_divide",
    "ieee_exp",
    "ieee_log",
    "ieee_pow",
    "ieee_sin",
    "ieee_sqrt",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    # Numerical Safeguards — Validation
    "validate_at_least",
    # Arithmetic
    "Arithmetic",
    # Complex — Types
    "Complex",
    # Complex — Constants
    "E",
    "I",
    "INFINITY",
    "ONE",
    "PI",
    "TWO",
    "ZERO",
    # Conversion
    "to_complex",
]
