"""
Core value type and digit-level arithmetic.

This package is self-contained: it never reads process-wide configuration
and never converts native Python numbers. Both concerns live in apcmath.facade.
"""
