"""
Тесты для Decimal Engine: add / sub / mul / div / mod / comp

Проверяемые инварианты:
1. Усечение без округления (1.999 при scale=2 → 1.99)
2. Результат содержит ровно scale цифр после точки
3. Нулевой результат без знака
4. Знак остатка mod совпадает со знаком делимого
5. Деление и mod на ноль → DivisionByZero
6. Коммутативность add/mul, стабильность префикса при росте scale
"""

import pytest

from apcmath.core.domain import Decimal
from apcmath.core.errors import DivisionByZero, ParseError
from apcmath.core.math.engine import add, comp, div, mod, mul, sub, validate_scale

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def operand_pairs():
    """Пары операндов с разными знаками и scale."""
    return [
        ("1.5", "2.25"),
        ("-1.5", "2.25"),
        ("1.5", "-2.25"),
        ("-0.001", "-999.999"),
        ("123456789012345678901234567890", "0.000000000000000000001"),
        ("0", "-7.7"),
        ("3.14159", "2.71828"),
    ]


# =============================================================================
# ТЕСТЫ: validate_scale
# =============================================================================


class TestValidateScale:
    """Тесты validate_scale."""

    def test_valid(self):
        assert validate_scale(0) == 0
        assert validate_scale(20) == 20

    @pytest.mark.parametrize("scale", [-1, 1.5, "2", None, True])
    def test_invalid(self, scale):
        with pytest.raises(ValueError, match="scale must be"):
            validate_scale(scale)

    def test_operations_reject_negative_scale(self):
        with pytest.raises(ValueError, match="scale must be non-negative"):
            add("1", "2", -1)


# =============================================================================
# ТЕСТЫ: add
# =============================================================================


class TestAdd:
    """Тесты add: точная сумма с усечением."""

    def test_truncated_not_rounded(self):
        """1.5 + 2.25 = 3.75 → 3.7 при scale=1."""
        assert str(add("1.5", "2.25", 1)) == "3.7"

    def test_truncation_never_rounds_up(self):
        assert str(add("1.999", "0.000", 2)) == "1.99"

    def test_zero_padding(self):
        assert str(add("1", "2", 2)) == "3.00"

    def test_carry_into_integer_part(self):
        assert str(add("9.99", "0.01", 2)) == "10.00"

    def test_mixed_signs(self):
        assert str(add("-5.5", "2.25", 2)) == "-3.25"
        assert str(add("5.5", "-2.25", 2)) == "3.25"

    def test_negative_result_truncated_toward_zero(self):
        """-3.75 → -3.7 (к нулю, не floor)."""
        assert str(add("-1.5", "-2.25", 1)) == "-3.7"

    def test_cancellation_gives_unsigned_zero(self):
        result = add("-2.5", "2.5", 3)
        assert str(result) == "0.000"
        assert result.negative is False

    def test_tiny_negative_truncated_to_unsigned_zero(self):
        assert str(add("-0.001", "0", 2)) == "0.00"

    def test_large_operands(self):
        a = "9" * 40
        assert str(add(a, "1", 0)) == "1" + "0" * 40

    def test_accepts_decimal_instances(self):
        result = add(Decimal.parse("0.1"), Decimal.parse("0.2"), 1)
        assert str(result) == "0.3"

    def test_rejects_non_canonical(self):
        with pytest.raises(ParseError):
            add("1e3", "1", 0)

    def test_commutativity(self, operand_pairs):
        for a, b in operand_pairs:
            for scale in (0, 1, 5, 25):
                assert add(a, b, scale) == add(b, a, scale)
                assert comp(add(a, b, scale), add(b, a, scale), scale) == 0


# =============================================================================
# ТЕСТЫ: sub
# =============================================================================


class TestSub:
    """Тесты sub."""

    def test_basic(self):
        assert str(sub("5", "3", 0)) == "2"

    def test_negative_result(self):
        assert str(sub("1", "1.5", 1)) == "-0.5"

    def test_exact_zero_is_positive(self):
        result = sub("2.50", "2.5", 2)
        assert str(result) == "0.00"
        assert result.negative is False

    def test_subtracting_negative(self):
        assert str(sub("1.25", "-1.25", 2)) == "2.50"

    def test_truncation(self):
        """10 - 0.001 = 9.999 → 9.99."""
        assert str(sub("10", "0.001", 2)) == "9.99"

    def test_borrow_across_point(self):
        assert str(sub("1000", "0.5", 1)) == "999.5"


# =============================================================================
# ТЕСТЫ: mul
# =============================================================================


class TestMul:
    """Тесты mul."""

    def test_integers(self):
        assert str(mul("3", "4", 0)) == "12"

    def test_point_at_sum_of_scales(self):
        """1.25 * 0.5 = 0.625."""
        assert str(mul("1.25", "0.5", 3)) == "0.625"

    def test_truncation(self):
        assert str(mul("1.25", "-0.5", 2)) == "-0.62"

    def test_sign_rules(self):
        assert str(mul("-2", "-3", 0)) == "6"
        assert str(mul("-2", "3", 0)) == "-6"

    def test_zero_product_unsigned(self):
        result = mul("-0.001", "0.001", 3)
        assert str(result) == "0.000"
        assert result.negative is False

    def test_padding(self):
        assert str(mul("2", "3", 4)) == "6.0000"

    def test_large(self):
        """(10^20 + 1) * (10^20 - 1) = 10^40 - 1."""
        a = "1" + "0" * 19 + "1"
        b = "9" * 20
        assert str(mul(a, b, 0)) == "9" * 40

    def test_commutativity(self, operand_pairs):
        for a, b in operand_pairs:
            for scale in (0, 3, 30):
                assert mul(a, b, scale) == mul(b, a, scale)


# =============================================================================
# ТЕСТЫ: div
# =============================================================================


class TestDiv:
    """Тесты div."""

    def test_repeating_fraction(self):
        assert str(div("10", "3", 4)) == "3.3333"

    def test_truncation_not_rounding(self):
        """2/3 = 0.666... → 0.66."""
        assert str(div("2", "3", 2)) == "0.66"

    def test_negative_quotient(self):
        assert str(div("-1", "8", 2)) == "-0.12"
        assert str(div("1", "-8", 3)) == "-0.125"

    def test_both_negative(self):
        assert str(div("-7", "-2", 1)) == "3.5"

    def test_scale_zero(self):
        assert str(div("7", "2", 0)) == "3"
        assert str(div("-7", "2", 0)) == "-3"

    def test_fractional_operands(self):
        """0.5 / 0.25 = 2; 1.2 / 0.04 = 30."""
        assert str(div("0.5", "0.25", 2)) == "2.00"
        assert str(div("1.2", "0.04", 0)) == "30"

    def test_small_quotient_truncates_to_unsigned_zero(self):
        result = div("-1", "3000", 2)
        assert str(result) == "0.00"
        assert result.negative is False

    def test_long_precision(self):
        assert str(div("1", "7", 18)) == "0.142857142857142857"

    @pytest.mark.parametrize("zero", ["0", "-0", "0.000"])
    @pytest.mark.parametrize("dividend", ["1", "-5.5", "0"])
    @pytest.mark.parametrize("scale", [0, 2])
    def test_division_by_zero(self, dividend, zero, scale):
        with pytest.raises(DivisionByZero):
            div(dividend, zero, scale)

    def test_division_by_zero_is_zero_division_error(self):
        """DivisionByZero ловится как ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            div("1", "0", 0)

    def test_prefix_stability(self):
        """Рост scale не меняет уже зафиксированные цифры."""
        previous = str(div("22", "7", 0))
        for scale in range(1, 15):
            current = str(div("22", "7", scale))
            assert current.startswith(previous)
            previous = current


# =============================================================================
# ТЕСТЫ: mod
# =============================================================================


class TestMod:
    """Тесты mod: целые части, знак по делимому."""

    def test_basic(self):
        assert str(mod("10", "3")) == "1"

    def test_sign_follows_dividend(self):
        assert str(mod("-7", "3")) == "-1"
        assert str(mod("7", "-3")) == "1"
        assert str(mod("-7", "-3")) == "-1"

    def test_fractional_parts_discarded(self):
        """7.9 mod -3.2 → 7 mod 3 = 1."""
        assert str(mod("7.9", "-3.2")) == "1"
        assert str(mod("10.99", "3.99")) == "1"

    def test_exact_multiple_is_unsigned_zero(self):
        result = mod("-9", "3")
        assert str(result) == "0"
        assert result.negative is False

    def test_dividend_smaller_than_modulus(self):
        assert str(mod("2", "5")) == "2"

    def test_large(self):
        """10^30 mod 7: 10^6 ≡ 1 (mod 7), 10^30 = (10^6)^5 → 1."""
        assert str(mod("1" + "0" * 30, "7")) == "1"

    @pytest.mark.parametrize("modulus", ["0", "-0", "0.5", "-0.99"])
    def test_zero_integer_modulus(self, modulus):
        """Целая часть модуля равна нулю → DivisionByZero."""
        with pytest.raises(DivisionByZero):
            mod("10", modulus)


# =============================================================================
# ТЕСТЫ: comp
# =============================================================================


class TestComp:
    """Тесты comp."""

    def test_equal_after_truncation(self):
        assert comp("1.0001", "1.0002", 3) == 0

    def test_differs_at_higher_scale(self):
        assert comp("1.0001", "1.0002", 4) == -1
        assert comp("1.0002", "1.0001", 4) == 1

    def test_sign_first(self):
        assert comp("-1", "0", 0) == -1
        assert comp("0", "-1", 0) == 1
        assert comp("-100", "1", 0) == -1

    def test_integer_magnitude_by_length(self):
        assert comp("100", "99", 0) == 1
        assert comp("-100", "-99", 0) == -1

    def test_fraction_digit_by_digit(self):
        assert comp("1.25", "1.3", 2) == -1
        assert comp("-1.25", "-1.3", 2) == 1

    def test_trailing_zeros_irrelevant(self):
        assert comp("1.5", "1.500", 5) == 0

    def test_negative_values_truncated_to_zero(self):
        """-0.001 и 0.001 при scale=2 оба равны 0."""
        assert comp("-0.001", "0.001", 2) == 0

    def test_scale_zero_ignores_fraction(self):
        assert comp("5.9", "5.1", 0) == 0
