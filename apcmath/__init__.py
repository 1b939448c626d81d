"""
APCmath — Arbitrary Precision Calculations

Десятичная арифметика произвольной точности с явным усечением до scale:
add, sub, mul, div, mod, comp, pow, pow_mod, sqrt.

    >>> from apcmath import APC
    >>> APC.div("10", "3", 4)
    '3.3333'
"""

from apcmath.core.domain import Decimal
from apcmath.core.errors import (
    DecimalArithmeticError,
    DivisionByZero,
    InvalidExponent,
    InvalidOperand,
    ParseError,
)
from apcmath.facade import APC, ScaleConfig, ScaleRegistry

__version__ = "1.0.0"

__all__ = [
    "APC",
    "Decimal",
    "ScaleConfig",
    "ScaleRegistry",
    # Exceptions
    "DecimalArithmeticError",
    "ParseError",
    "DivisionByZero",
    "InvalidExponent",
    "InvalidOperand",
]
