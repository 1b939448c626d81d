"""
Number Normalizer — приведение входных чисел к канонической строке

Преобразует int, float, str (включая научную нотацию), decimal.Decimal
и engine Decimal в каноническую строку -?\\d+(\\.\\d+)?, которую принимает движок.

Преобразование точное: научная нотация раскрывается сдвигом точки,
float раскрывается из кратчайшего repr (то, что видит пользователь).

ИНВАРИАНТЫ:
1. Результат всегда соответствует CANONICAL_DECIMAL_PATTERN
2. Ноль никогда не получает знак '-'
3. NaN/Inf и bool отклоняются с ParseError
"""

import decimal
import math
import re
from typing import Final, Union

from apcmath.core.domain import Decimal
from apcmath.core.errors import ParseError

NumberLike = Union[int, float, str, decimal.Decimal, Decimal]

# Максимальный |exponent| научной нотации (ограничивает длину раскрытой строки)
MAX_EXPONENT: Final[int] = 100_000

# int → str по частям: каждая часть короче лимита sys.get_int_max_str_digits()
_INT_CHUNK_DIGITS: Final[int] = 1000
_INT_CHUNK_BASE: Final[int] = 10**_INT_CHUNK_DIGITS

# Знак, цифры с необязательной дробью ("5.", ".5"), необязательная экспонента
_NUMBER_RE: Final[re.Pattern[str]] = re.compile(
    r"^(?P<sign>[+-])?"
    r"(?:(?P<int>\d+)(?:\.(?P<frac>\d*))?|\.(?P<frac_only>\d+))"
    r"(?:[eE](?P<exp>[+-]?\d+))?$",
    re.ASCII,
)


# =============================================================================
# NORMALIZATION
# =============================================================================


def _int_to_digits(value: int) -> str:
    """
    Десятичная запись int любой длины.

    str() отказывает для чисел длиннее sys.get_int_max_str_digits() цифр,
    поэтому число раскладывается на части по _INT_CHUNK_DIGITS цифр.

    Examples:
        >>> _int_to_digits(-1205)
        '-1205'
    """
    magnitude = abs(value)
    chunks = []
    while magnitude >= _INT_CHUNK_BASE:
        magnitude, low = divmod(magnitude, _INT_CHUNK_BASE)
        chunks.append(str(low).rjust(_INT_CHUNK_DIGITS, "0"))
    chunks.append(str(magnitude))

    digits = "".join(reversed(chunks))
    return f"-{digits}" if value < 0 else digits


def expand_scientific(text: str) -> str:
    """
    Раскрытие строки числа (в том числе в научной нотации) в каноническую форму.

    Args:
        text: Строка вида [+-]digits[.digits][e[+-]digits]

    Returns:
        Каноническая десятичная строка

    Raises:
        ParseError: Если строка не является числом

    Examples:
        >>> expand_scientific("1.5e3")
        '1500'
        >>> expand_scientific("-2.5E-4")
        '-0.00025'
        >>> expand_scientific("+.5")
        '0.5'
    """
    match = _NUMBER_RE.fullmatch(text)
    if match is None:
        raise ParseError(f"Not a number: {text!r}")

    if match.group("frac_only") is not None:
        integer_part = ""
        fraction_part = match.group("frac_only")
    else:
        integer_part = match.group("int")
        fraction_part = match.group("frac") or ""

    exponent_text = match.group("exp") or "0"
    exponent_digits = exponent_text.lstrip("+-").lstrip("0") or "0"
    # int() принимает не более sys.get_int_max_str_digits() цифр
    if len(exponent_digits) > len(str(MAX_EXPONENT)):
        raise ParseError(f"Exponent out of range (|e| <= {MAX_EXPONENT}): {text!r}")

    exponent = int(exponent_digits)
    if exponent_text.startswith("-"):
        exponent = -exponent
    if abs(exponent) > MAX_EXPONENT:
        raise ParseError(f"Exponent out of range (|e| <= {MAX_EXPONENT}): {text!r}")

    # Сдвиг точки: digits * 10^(exponent - len(fraction_part))
    digits = integer_part + fraction_part
    point = len(integer_part) + exponent

    if point <= 0:
        integer_digits = "0"
        fraction_digits = "0" * (-point) + digits
    elif point >= len(digits):
        integer_digits = digits + "0" * (point - len(digits))
        fraction_digits = ""
    else:
        integer_digits = digits[:point]
        fraction_digits = digits[point:]

    integer_digits = integer_digits.lstrip("0") or "0"
    fraction_digits = fraction_digits.rstrip("0")

    negative = match.group("sign") == "-"
    is_zero = integer_digits == "0" and not fraction_digits

    result = integer_digits
    if fraction_digits:
        result = f"{result}.{fraction_digits}"
    if negative and not is_zero:
        result = f"-{result}"
    return result


def normalize_number(value: NumberLike) -> str:
    """
    Приведение числа к канонической десятичной строке.

    Args:
        value: int, float, str, decimal.Decimal или Decimal

    Returns:
        Каноническая строка для Decimal.parse

    Raises:
        ParseError: Для bool, NaN/Inf, нечисловых строк и прочих типов

    Examples:
        >>> normalize_number(42)
        '42'
        >>> normalize_number(1e-7)
        '0.0000001'
        >>> normalize_number(" 1.20E+2 ")
        '120'
    """
    # bool — подкласс int, но числом здесь не считается
    if isinstance(value, bool):
        raise ParseError(f"Boolean is not a number: {value!r}")

    if isinstance(value, Decimal):
        return str(value)

    if isinstance(value, int):
        return _int_to_digits(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            raise ParseError(f"Number must be finite, got {value!r}")
        return expand_scientific(repr(value))

    if isinstance(value, decimal.Decimal):
        if not value.is_finite():
            raise ParseError(f"Number must be finite, got {value!r}")
        return expand_scientific(str(value))

    if isinstance(value, str):
        return expand_scientific(value.strip())

    raise ParseError(f"Unsupported number type: {type(value).__name__}")
