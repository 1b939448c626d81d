"""
Domain models and value objects.

Contains the immutable arbitrary-precision Decimal value type.
"""

from apcmath.core.domain.decimal_number import (
    CANONICAL_DECIMAL_PATTERN,
    Decimal,
    parse_decimal,
)

__all__ = [
    "CANONICAL_DECIMAL_PATTERN",
    "Decimal",
    "parse_decimal",
]
