"""
Digit Primitives — школьные алгоритмы над последовательностями цифр

Модуль реализует беззнаковую арифметику над "магнитудами":
строками десятичных цифр, старшая цифра первой, без ведущих нулей
(ноль представлен строкой "0").

Алгоритмы:
- Сложение с переносом, вычитание с заёмом: O(n)
- Умножение столбиком: O(n·m)
- Деление уголком с таблицей кратных делителя: O(n·m)
- Квадратный корень по парам цифр

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции принимают и возвращают магнитуды без ведущих нулей
2. Входные строки не изменяются (строки неизменяемы)
3. Деление на "0" → DivisionByZero
"""

from typing import Final

from apcmath.core.domain.decimal_number import ZERO, strip_leading_zeros
from apcmath.core.errors import DivisionByZero

ONE: Final[str] = "1"

_DIGITS: Final[str] = "0123456789"


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def is_zero_magnitude(digits: str) -> bool:
    """True если магнитуда равна нулю."""
    return digits == ZERO


def compare_magnitudes(a: str, b: str) -> int:
    """
    Сравнение двух магнитуд.

    Сначала по количеству цифр, затем лексикографически
    (для строк одинаковой длины лексикографический порядок совпадает с числовым).

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b

    Examples:
        >>> compare_magnitudes("99", "100")
        -1
        >>> compare_magnitudes("120", "120")
        0
        >>> compare_magnitudes("121", "120")
        1
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    if a == b:
        return 0
    return 1 if a > b else -1


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(a: str, b: str) -> str:
    """
    Сложение столбиком с переносом.

    Examples:
        >>> add_magnitudes("999", "1")
        '1000'
        >>> add_magnitudes("0", "0")
        '0'
    """
    result = []
    carry = 0
    i = len(a) - 1
    j = len(b) - 1

    while i >= 0 or j >= 0 or carry:
        total = carry
        if i >= 0:
            total += ord(a[i]) - 48
            i -= 1
        if j >= 0:
            total += ord(b[j]) - 48
            j -= 1
        carry, digit = divmod(total, 10)
        result.append(_DIGITS[digit])

    return strip_leading_zeros("".join(reversed(result)))


def subtract_magnitudes(a: str, b: str) -> str:
    """
    Вычитание столбиком с заёмом: a - b.

    Args:
        a: Уменьшаемое (должно быть >= b)
        b: Вычитаемое

    Raises:
        ValueError: Если a < b

    Examples:
        >>> subtract_magnitudes("1000", "1")
        '999'
        >>> subtract_magnitudes("42", "42")
        '0'
    """
    if compare_magnitudes(a, b) < 0:
        raise ValueError(f"subtrahend {b} exceeds minuend {a}")

    result = []
    borrow = 0
    j = len(b) - 1

    for i in range(len(a) - 1, -1, -1):
        diff = ord(a[i]) - 48 - borrow
        if j >= 0:
            diff -= ord(b[j]) - 48
            j -= 1
        if diff < 0:
            diff += 10
            borrow = 1
        else:
            borrow = 0
        result.append(_DIGITS[diff])

    return strip_leading_zeros("".join(reversed(result)))


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def shift_left(digits: str, places: int) -> str:
    """
    Умножение на 10^places (дописывание нулей справа).

    Examples:
        >>> shift_left("12", 3)
        '12000'
        >>> shift_left("0", 3)
        '0'
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    if is_zero_magnitude(digits) or places == 0:
        return digits
    return digits + ZERO * places


def multiply_by_digit(a: str, digit: int) -> str:
    """
    Умножение магнитуды на одну цифру 0..9.

    Examples:
        >>> multiply_by_digit("125", 8)
        '1000'
    """
    if not 0 <= digit <= 9:
        raise ValueError(f"digit must be in [0, 9], got {digit}")
    if digit == 0 or is_zero_magnitude(a):
        return ZERO
    if digit == 1:
        return a

    result = []
    carry = 0
    for i in range(len(a) - 1, -1, -1):
        carry, d = divmod((ord(a[i]) - 48) * digit + carry, 10)
        result.append(_DIGITS[d])
    if carry:
        result.append(_DIGITS[carry])

    return "".join(reversed(result))


def multiply_magnitudes(a: str, b: str) -> str:
    """
    Умножение столбиком: O(len(a) * len(b)).

    Частичные произведения накапливаются в массиве разрядов
    (младший разряд первым), переносы нормализуются в конце.

    Examples:
        >>> multiply_magnitudes("12", "34")
        '408'
        >>> multiply_magnitudes("999", "0")
        '0'
    """
    if is_zero_magnitude(a) or is_zero_magnitude(b):
        return ZERO

    a_rev = [ord(c) - 48 for c in reversed(a)]
    b_rev = [ord(c) - 48 for c in reversed(b)]
    acc = [0] * (len(a_rev) + len(b_rev))

    for i, da in enumerate(a_rev):
        if da == 0:
            continue
        for j, db in enumerate(b_rev):
            acc[i + j] += da * db

    carry = 0
    for k in range(len(acc)):
        carry, acc[k] = divmod(acc[k] + carry, 10)

    return strip_leading_zeros("".join(_DIGITS[d] for d in reversed(acc)))


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divmod_magnitudes(a: str, b: str) -> tuple[str, str]:
    """
    Деление уголком: (a // b, a % b).

    Для каждого разряда делимого остаток сдвигается на разряд,
    очередная цифра частного подбирается по таблице кратных делителя
    b*0 .. b*9 (не более 9 сравнений на разряд).

    Raises:
        DivisionByZero: Если b == "0"

    Examples:
        >>> divmod_magnitudes("100", "7")
        ('14', '2')
        >>> divmod_magnitudes("5", "7")
        ('0', '5')
    """
    if is_zero_magnitude(b):
        raise DivisionByZero("Division by zero")

    if compare_magnitudes(a, b) < 0:
        return ZERO, a

    multiples = [multiply_by_digit(b, d) for d in range(10)]
    quotient = []
    remainder = ZERO

    for ch in a:
        remainder = strip_leading_zeros(remainder + ch)
        q_digit = 0
        for d in range(9, 0, -1):
            if compare_magnitudes(multiples[d], remainder) <= 0:
                q_digit = d
                break
        if q_digit:
            remainder = subtract_magnitudes(remainder, multiples[q_digit])
        quotient.append(_DIGITS[q_digit])

    return strip_leading_zeros("".join(quotient)), remainder


def is_odd_magnitude(a: str) -> bool:
    """True если последняя цифра нечётная."""
    return (ord(a[-1]) - 48) % 2 == 1


def halve_magnitude(a: str) -> str:
    """
    Целочисленное деление на 2 (для разбора показателя степени по битам).

    Examples:
        >>> halve_magnitude("1025")
        '512'
    """
    result = []
    carry = 0
    for ch in a:
        current = carry * 10 + ord(ch) - 48
        result.append(_DIGITS[current // 2])
        carry = current % 2
    return strip_leading_zeros("".join(result))


# =============================================================================
# КВАДРАТНЫЙ КОРЕНЬ
# =============================================================================


def isqrt_magnitude(a: str) -> str:
    """
    Целая часть квадратного корня: floor(sqrt(a)).

    Извлечение по парам цифр: для каждой пары остаток c = r*100 + pair,
    очередная цифра x — наибольшая с (20*p + x) * x <= c, где p — уже
    найденная часть корня.

    Examples:
        >>> isqrt_magnitude("2000000")
        '1414'
        >>> isqrt_magnitude("81")
        '9'
    """
    if is_zero_magnitude(a):
        return ZERO

    padded = a if len(a) % 2 == 0 else ZERO + a
    root = ZERO
    remainder = ZERO

    for k in range(0, len(padded), 2):
        current = strip_leading_zeros(remainder + padded[k : k + 2])
        # 20*p = (2*p) * 10
        base = shift_left(multiply_by_digit(root, 2), 1)

        x = 0
        product = ZERO
        for d in range(9, 0, -1):
            candidate = multiply_by_digit(add_magnitudes(base, _DIGITS[d]), d)
            if compare_magnitudes(candidate, current) <= 0:
                x = d
                product = candidate
                break

        remainder = subtract_magnitudes(current, product)
        root = strip_leading_zeros(root + _DIGITS[x])

    return root
