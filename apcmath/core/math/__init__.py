"""
Core math modules для APCmath

Цифровые примитивы (школьные алгоритмы над строками цифр) и десятичный
движок с явным усечением до scale.
"""

# Digit primitives
from apcmath.core.math.digits import (
    add_magnitudes,
    compare_magnitudes,
    divmod_magnitudes,
    halve_magnitude,
    is_odd_magnitude,
    is_zero_magnitude,
    isqrt_magnitude,
    multiply_by_digit,
    multiply_magnitudes,
    shift_left,
    strip_leading_zeros,
    subtract_magnitudes,
)

# Decimal Engine
from apcmath.core.math.engine import (
    DecimalLike,
    add,
    comp,
    div,
    mod,
    mul,
    pow,
    pow_mod,
    sqrt,
    sub,
    validate_scale,
)

__all__ = [
    # Digit primitives
    "add_magnitudes",
    "compare_magnitudes",
    "divmod_magnitudes",
    "halve_magnitude",
    "is_odd_magnitude",
    "is_zero_magnitude",
    "isqrt_magnitude",
    "multiply_by_digit",
    "multiply_magnitudes",
    "shift_left",
    "strip_leading_zeros",
    "subtract_magnitudes",
    # Engine — Types
    "DecimalLike",
    # Engine — Operations
    "add",
    "sub",
    "mul",
    "div",
    "mod",
    "comp",
    "pow",
    "pow_mod",
    "sqrt",
    "validate_scale",
]
