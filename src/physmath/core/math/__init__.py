"""
Core math modules для physmath

Численные примитивы и тип комплексного числа.
"""

# Numerical Safeguards
from physmath.core.math.numerical_safeguards import (
    # Epsilon constants
    DEG_PER_RAD,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    RAD_PER_DEG,
    # Angles
    degrees_to_radians,
    radians_to_degrees,
    # Comparisons
    is_close,
    is_valid_float,
    # Rounding
    round_half_away,
    # Validation
    validate_finite,
    validate_positive,
)

# Complex numbers
from physmath.core.math.complex_number import Complex, ComplexDivisionByZero

__all__ = [
    # Numerical Safeguards — Constants
    "DEG_PER_RAD",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "RAD_PER_DEG",
    # Numerical Safeguards — Angles
    "degrees_to_radians",
    "radians_to_degrees",
    # Numerical Safeguards — Comparisons
    "is_close",
    "is_valid_float",
    # Numerical Safeguards — Rounding
    "round_half_away",
    # Numerical Safeguards — Validation
    "validate_finite",
    "validate_positive",
    # Complex — Exceptions
    "ComplexDivisionByZero",
    # Complex — Types
    "Complex",
]
