"""
Decimal Engine — арифметика произвольной точности с явным scale

Модуль реализует девять операций над неизменяемыми Decimal:
- add / sub / mul: точный результат, усечённый до scale
- div: деление уголком, частное усечено до scale
- mod: остаток от деления целых частей (знак по делимому)
- comp: сравнение после усечения обоих операндов до scale
- pow: возведение в целую степень (отрицательная → усечённая обратная величина)
- pow_mod: модульное возведение в степень для целых частей
- sqrt: квадратный корень, усечённый до scale

Все вычисления ведутся над коэффициентами:
    value = coefficient * 10^(-scale)
после выравнивания scale операндов дописыванием нулей.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакого округления: любое уменьшение scale — усечение к нулю
2. Результат (кроме comp) содержит ровно scale цифр после точки
3. Нулевой результат всегда без знака
4. Остаток mod имеет знак делимого (truncated division, не Euclidean)
5. Функции чистые: не читают глобальное состояние и не изменяют операнды

ПРИМЕРЫ:
    add("1.5", "2.25", 1)   → 3.7
    div("10", "3", 4)       → 3.3333
    mod("10", "3")          → 1
    pow("2", "10", 0)       → 1024
    comp("1.0001", "1.0002", 3) → 0
    sqrt("2", 5)            → 1.41421
"""

from apcmath.core.domain.decimal_number import Decimal, parse_decimal
from apcmath.core.errors import DivisionByZero, InvalidExponent, InvalidOperand
from apcmath.core.math.digits import (
    ONE,
    ZERO,
    add_magnitudes,
    compare_magnitudes,
    divmod_magnitudes,
    halve_magnitude,
    is_odd_magnitude,
    is_zero_magnitude,
    isqrt_magnitude,
    multiply_magnitudes,
    shift_left,
    subtract_magnitudes,
)

DecimalLike = Decimal | str


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def validate_scale(scale: int) -> int:
    """
    Валидация scale.

    Raises:
        ValueError: Если scale не целое или отрицательное
    """
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise ValueError(f"scale must be an integer, got {scale!r}")
    if scale < 0:
        raise ValueError(f"scale must be non-negative, got {scale}")
    return scale


def _aligned_coefficients(a: Decimal, b: Decimal) -> tuple[str, str, int]:
    """Коэффициенты a и b, приведённые к общему scale = max(a.scale, b.scale)."""
    scale = max(a.scale, b.scale)
    return (
        shift_left(a.coefficient, scale - a.scale),
        shift_left(b.coefficient, scale - b.scale),
        scale,
    )


def _signed_sum(a_neg: bool, a_mag: str, b_neg: bool, b_mag: str) -> tuple[bool, str]:
    """Знаковое сложение двух магнитуд: (negative, magnitude)."""
    if a_neg == b_neg:
        return a_neg, add_magnitudes(a_mag, b_mag)

    cmp = compare_magnitudes(a_mag, b_mag)
    if cmp == 0:
        return False, ZERO
    if cmp > 0:
        return a_neg, subtract_magnitudes(a_mag, b_mag)
    return b_neg, subtract_magnitudes(b_mag, a_mag)


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add(a: DecimalLike, b: DecimalLike, scale: int) -> Decimal:
    """
    Сумма a + b, усечённая до scale цифр после точки.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое
        scale: Количество цифр после точки в результате

    Returns:
        Decimal ровно со scale цифрами после точки

    Examples:
        >>> str(add("1.5", "2.25", 1))
        '3.7'
        >>> str(add("1.999", "0.000", 2))
        '1.99'
        >>> str(add("1", "2", 2))
        '3.00'
    """
    validate_scale(scale)
    a = parse_decimal(a)
    b = parse_decimal(b)

    a_mag, b_mag, common_scale = _aligned_coefficients(a, b)
    negative, magnitude = _signed_sum(a.negative, a_mag, b.negative, b_mag)

    return Decimal.from_coefficient(negative, magnitude, common_scale).truncate(scale)


def sub(a: DecimalLike, b: DecimalLike, scale: int) -> Decimal:
    """
    Разность a - b, усечённая до scale цифр после точки.

    Точный ноль всегда без знака.

    Examples:
        >>> str(sub("1", "1.5", 1))
        '-0.5'
        >>> str(sub("2.50", "2.5", 2))
        '0.00'
    """
    validate_scale(scale)
    a = parse_decimal(a)
    b = parse_decimal(b)

    a_mag, b_mag, common_scale = _aligned_coefficients(a, b)
    negative, magnitude = _signed_sum(a.negative, a_mag, not b.negative, b_mag)

    return Decimal.from_coefficient(negative, magnitude, common_scale).truncate(scale)


# =============================================================================
# УМНОЖЕНИЕ И ДЕЛЕНИЕ
# =============================================================================


def mul(a: DecimalLike, b: DecimalLike, scale: int) -> Decimal:
    """
    Произведение a * b, усечённое до scale.

    Коэффициенты перемножаются столбиком, точка ставится на позицию
    a.scale + b.scale, затем результат усекается.

    Examples:
        >>> str(mul("1.25", "-0.5", 2))
        '-0.62'
        >>> str(mul("3", "4", 0))
        '12'
    """
    validate_scale(scale)
    a = parse_decimal(a)
    b = parse_decimal(b)

    magnitude = multiply_magnitudes(a.coefficient, b.coefficient)
    exact = Decimal.from_coefficient(a.negative != b.negative, magnitude, a.scale + b.scale)
    return exact.truncate(scale)


def div(dividend: DecimalLike, divisor: DecimalLike, scale: int) -> Decimal:
    """
    Частное dividend / divisor, усечённое до scale.

    Частное вычисляется точно на целевом scale:
        q = floor(|ca| * 10^(divisor.scale + scale) / (|cb| * 10^dividend.scale))
    поэтому усечение не зависит от погрешности промежуточных цифр.

    Raises:
        DivisionByZero: Если divisor == 0

    Examples:
        >>> str(div("10", "3", 4))
        '3.3333'
        >>> str(div("-1", "8", 2))
        '-0.12'
    """
    validate_scale(scale)
    dividend = parse_decimal(dividend)
    divisor = parse_decimal(divisor)

    if divisor.is_zero:
        raise DivisionByZero(f"Division by zero: {dividend} / {divisor}")

    numerator = shift_left(dividend.coefficient, divisor.scale + scale)
    denominator = shift_left(divisor.coefficient, dividend.scale)
    quotient, _ = divmod_magnitudes(numerator, denominator)

    return Decimal.from_coefficient(dividend.negative != divisor.negative, quotient, scale)


def mod(dividend: DecimalLike, modulus: DecimalLike) -> Decimal:
    """
    Остаток от деления целых частей операндов.

    Дробные цифры обоих операндов отбрасываются до операции.
    Знак остатка совпадает со знаком делимого (truncated division).

    Raises:
        DivisionByZero: Если целая часть modulus равна нулю

    Examples:
        >>> str(mod("10", "3"))
        '1'
        >>> str(mod("-7", "3"))
        '-1'
        >>> str(mod("7.9", "-3.2"))
        '1'
    """
    dividend = parse_decimal(dividend)
    modulus = parse_decimal(modulus)

    modulus_mag = modulus.integer_digits
    if is_zero_magnitude(modulus_mag):
        raise DivisionByZero(f"Modulo by zero: {dividend} % {modulus}")

    _, remainder = divmod_magnitudes(dividend.integer_digits, modulus_mag)
    return Decimal.from_coefficient(dividend.negative, remainder, 0)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def comp(a: DecimalLike, b: DecimalLike, scale: int) -> int:
    """
    Сравнение a и b после усечения обоих до scale цифр после точки.

    Порядок: знак, затем магнитуда целой части (количество цифр,
    затем значение), затем дробные цифры по одной.

    Returns:
        0 если равны, 1 если a > b, -1 если a < b

    Examples:
        >>> comp("1.0001", "1.0002", 3)
        0
        >>> comp("-1", "0", 0)
        -1
    """
    validate_scale(scale)
    a = parse_decimal(a).truncate(scale)
    b = parse_decimal(b).truncate(scale)

    if a.negative != b.negative:
        return -1 if a.negative else 1

    cmp = compare_magnitudes(a.integer_digits, b.integer_digits)
    if cmp == 0:
        # Одинаковый scale → лексикографическое сравнение дробных цифр
        if a.fraction_digits != b.fraction_digits:
            cmp = 1 if a.fraction_digits > b.fraction_digits else -1

    return -cmp if a.negative else cmp


# =============================================================================
# ВОЗВЕДЕНИЕ В СТЕПЕНЬ
# =============================================================================


def _power_exact(base: Decimal, exponent_mag: str) -> Decimal:
    """
    Точное base^exponent (exponent >= 0) возведением в квадрат.

    Промежуточные результаты не усекаются: scale растёт как base.scale * exponent.
    """
    result = Decimal.parse(ONE)
    square = base
    remaining = exponent_mag

    while not is_zero_magnitude(remaining):
        if is_odd_magnitude(remaining):
            result = mul(result, square, result.scale + square.scale)
        remaining = halve_magnitude(remaining)
        if not is_zero_magnitude(remaining):
            square = mul(square, square, square.scale * 2)

    return result


def pow(base: DecimalLike, exponent: DecimalLike, scale: int) -> Decimal:
    """
    Возведение base в целую степень exponent, результат усечён до scale.

    Дробные цифры exponent игнорируются. Для отрицательной степени
    результат — усечённая обратная величина точной положительной степени
    (по правилу div).

    Raises:
        DivisionByZero: Если base == 0 и exponent < 0

    Examples:
        >>> str(pow("2", "10", 0))
        '1024'
        >>> str(pow("2", "-2", 3))
        '0.250'
        >>> str(pow("1.5", "3", 2))
        '3.37'
    """
    validate_scale(scale)
    base = parse_decimal(base)
    exponent = parse_decimal(exponent)

    exponent_mag = exponent.integer_digits
    power = _power_exact(base, exponent_mag)

    # Отрицательная степень: целая часть -0.5 равна нулю, значит степень 0
    if exponent.negative and not is_zero_magnitude(exponent_mag):
        if base.is_zero:
            raise DivisionByZero(f"Zero base with negative exponent: {base} ^ {exponent}")
        return div(Decimal.parse(ONE), power, scale)

    return power.truncate(scale)


def pow_mod(
    base: DecimalLike,
    exponent: DecimalLike,
    modulus: DecimalLike,
    scale: int,
) -> Decimal:
    """
    Модульное возведение в степень: base^exponent mod modulus.

    Работает только с целыми частями операндов. Квадрирование и умножение
    сопровождаются редукцией по модулю, поэтому промежуточные значения
    не превосходят modulus^2. Знак результата совпадает со знаком
    base^exponent (truncated remainder). scale влияет только на количество
    нулевых цифр после точки в результате.

    Raises:
        InvalidExponent: Если exponent < 0 (проверяется первым)
        DivisionByZero: Если modulus == 0

    Examples:
        >>> str(pow_mod("4", "13", "497", 0))
        '445'
        >>> str(pow_mod("-2", "3", "5", 0))
        '-3'
        >>> str(pow_mod("4", "3", "5", 2))
        '4.00'
    """
    validate_scale(scale)
    base = parse_decimal(base)
    exponent = parse_decimal(exponent)
    modulus = parse_decimal(modulus)

    exponent_mag = exponent.integer_digits
    modulus_mag = modulus.integer_digits
    base_mag = base.integer_digits

    if exponent.negative and not is_zero_magnitude(exponent_mag):
        raise InvalidExponent(f"Negative exponent in pow_mod: {exponent}")
    if is_zero_magnitude(modulus_mag):
        raise DivisionByZero(f"Modulo by zero in pow_mod: {modulus}")

    _, result = divmod_magnitudes(ONE, modulus_mag)
    _, square = divmod_magnitudes(base_mag, modulus_mag)
    remaining = exponent_mag

    while not is_zero_magnitude(remaining):
        if is_odd_magnitude(remaining):
            _, result = divmod_magnitudes(multiply_magnitudes(result, square), modulus_mag)
        remaining = halve_magnitude(remaining)
        if not is_zero_magnitude(remaining):
            _, square = divmod_magnitudes(multiply_magnitudes(square, square), modulus_mag)

    negative = base.negative and not is_zero_magnitude(base_mag) and is_odd_magnitude(exponent_mag)
    return Decimal.from_coefficient(negative, result, 0).truncate(scale)


# =============================================================================
# КВАДРАТНЫЙ КОРЕНЬ
# =============================================================================


def sqrt(value: DecimalLike, scale: int) -> Decimal:
    """
    Квадратный корень, усечённый до scale цифр после точки.

    Вычисляется floor(sqrt(value) * 10^scale) = isqrt(c * 10^(2*scale - value.scale)).
    Если value.scale > 2*scale, лишние цифры коэффициента отбрасываются:
    floor(sqrt(floor(x))) == floor(sqrt(x)) для x >= 0.

    Raises:
        InvalidOperand: Если value < 0

    Examples:
        >>> str(sqrt("2", 5))
        '1.41421'
        >>> str(sqrt("0.04", 1))
        '0.2'
    """
    validate_scale(scale)
    value = parse_decimal(value)

    if value.negative:
        raise InvalidOperand(f"Square root of negative number: {value}")

    coefficient = value.coefficient
    shift = 2 * scale - value.scale
    if shift >= 0:
        radicand = shift_left(coefficient, shift)
    else:
        radicand = coefficient[:shift] or ZERO

    return Decimal.from_coefficient(False, isqrt_magnitude(radicand), scale)
