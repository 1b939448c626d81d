"""
Test suite for APCmath

Contains:
- tests/unit/          : Unit tests for digit primitives, Decimal model,
                         engine operations and facade
"""
