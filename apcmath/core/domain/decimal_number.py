"""
Decimal — неизменяемое десятичное число произвольной точности

Immutable Pydantic модель знакового десятичного числа, хранящего
цифры целой и дробной части как последовательности символов '0'-'9'.

Представление:
- negative: знак (ноль всегда без знака)
- integer_digits: цифры целой части, старшая первой, без ведущих нулей
- fraction_digits: цифры после точки; хвостовые нули сохраняются,
  scale = len(fraction_digits) отслеживается явно

Эквивалентное представление "коэффициент + scale":
    value = coefficient * 10^(-scale), coefficient = integer_digits + fraction_digits

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. integer_digits непуст и не содержит ведущих нулей (кроме самого "0")
2. Все цифры только '0'-'9'
3. Нулевое значение никогда не бывает отрицательным
4. Операции не изменяют операнды, а создают новые экземпляры (frozen=True)
"""

import re
from typing import Final

from pydantic import BaseModel, Field, model_validator

from apcmath.core.errors import ParseError

# Каноническая строковая форма (без экспоненты и без ведущего '+')
CANONICAL_DECIMAL_PATTERN: Final[str] = r"-?\d+(\.\d+)?"

_CANONICAL_RE: Final[re.Pattern[str]] = re.compile(rf"^{CANONICAL_DECIMAL_PATTERN}$", re.ASCII)

ZERO: Final[str] = "0"


def strip_leading_zeros(digits: str) -> str:
    """
    Удаление ведущих нулей (пустая строка → "0").

    Examples:
        >>> strip_leading_zeros("000120")
        '120'
        >>> strip_leading_zeros("")
        '0'
    """
    return digits.lstrip("0") or ZERO


# =============================================================================
# DECIMAL MODEL
# =============================================================================


class Decimal(BaseModel):
    """
    Знаковое десятичное число произвольной точности.

    Immutable модель (frozen=True): результат любой операции — новый экземпляр.

    Структурное равенство (==) сравнивает знак и цифры как они хранятся,
    поэтому Decimal("1.50") != Decimal("1.5"). Для числового сравнения
    используется engine.comp.
    """

    negative: bool = Field(False, description="Знак (True для отрицательных)")
    integer_digits: str = Field(
        ZERO,
        pattern=r"^(0|[1-9][0-9]*)$",
        description="Цифры целой части без ведущих нулей",
    )
    fraction_digits: str = Field(
        "",
        pattern=r"^[0-9]*$",
        description="Цифры дробной части (scale = длина)",
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_unsigned_zero(self) -> "Decimal":
        """Ноль не может быть отрицательным."""
        if self.negative and self.is_zero:
            raise ValueError("zero value cannot be negative")
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Decimal":
        """
        Разбор канонической десятичной строки.

        Допускаются ведущие нули в целой части ("007.50" → 7.50),
        "-0" и "-0.00" дают ноль без знака.

        Args:
            text: Строка вида -?\\d+(\\.\\d+)?

        Returns:
            Decimal со scale, равным количеству цифр после точки

        Raises:
            ParseError: Если строка не в канонической форме

        Examples:
            >>> str(Decimal.parse("-007.50"))
            '-7.50'
            >>> str(Decimal.parse("-0.0"))
            '0.0'
        """
        if not isinstance(text, str) or _CANONICAL_RE.fullmatch(text) is None:
            raise ParseError(f"Not a canonical decimal string: {text!r}")

        negative = text.startswith("-")
        body = text[1:] if negative else text
        integer_part, _, fraction_part = body.partition(".")

        integer_digits = strip_leading_zeros(integer_part)
        is_zero = integer_digits == ZERO and fraction_part.strip("0") == ""

        return cls(
            negative=negative and not is_zero,
            integer_digits=integer_digits,
            fraction_digits=fraction_part,
        )

    @classmethod
    def from_coefficient(cls, negative: bool, coefficient: str, scale: int) -> "Decimal":
        """
        Построение из коэффициента и scale: value = coefficient * 10^(-scale).

        Args:
            negative: Знак (игнорируется для нуля)
            coefficient: Магнитуда (строка цифр, ведущие нули допустимы)
            scale: Количество цифр после точки

        Examples:
            >>> str(Decimal.from_coefficient(True, "12345", 3))
            '-12.345'
            >>> str(Decimal.from_coefficient(False, "5", 3))
            '0.005'
        """
        if scale < 0:
            raise ValueError(f"scale must be non-negative, got {scale}")

        digits = strip_leading_zeros(coefficient)
        if scale:
            digits = digits.rjust(scale + 1, "0")
            integer_part = digits[:-scale]
            fraction_part = digits[-scale:]
        else:
            integer_part = digits
            fraction_part = ""

        integer_digits = strip_leading_zeros(integer_part)
        is_zero = integer_digits == ZERO and fraction_part.strip("0") == ""

        return cls(
            negative=negative and not is_zero,
            integer_digits=integer_digits,
            fraction_digits=fraction_part,
        )

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def scale(self) -> int:
        """Количество цифр после точки."""
        return len(self.fraction_digits)

    @property
    def is_zero(self) -> bool:
        return self.integer_digits == ZERO and self.fraction_digits.strip("0") == ""

    @property
    def coefficient(self) -> str:
        """Магнитуда целого коэффициента (без ведущих нулей)."""
        return strip_leading_zeros(self.integer_digits + self.fraction_digits)

    # -------------------------------------------------------------------------
    # Преобразования
    # -------------------------------------------------------------------------

    def truncate(self, scale: int) -> "Decimal":
        """
        Приведение к ровно scale цифрам после точки.

        Лишние цифры отбрасываются (усечение к нулю, без округления),
        недостающие дополняются нулями.

        Examples:
            >>> str(Decimal.parse("1.999").truncate(2))
            '1.99'
            >>> str(Decimal.parse("-0.009").truncate(2))
            '0.00'
            >>> str(Decimal.parse("3.7").truncate(3))
            '3.700'
        """
        if scale < 0:
            raise ValueError(f"scale must be non-negative, got {scale}")
        if scale == self.scale:
            return self

        fraction_digits = self.fraction_digits[:scale].ljust(scale, "0")
        is_zero = self.integer_digits == ZERO and fraction_digits.strip("0") == ""

        return Decimal(
            negative=self.negative and not is_zero,
            integer_digits=self.integer_digits,
            fraction_digits=fraction_digits,
        )

    def integer_part(self) -> "Decimal":
        """Целая часть (дробь отбрасывается, знак сохраняется)."""
        return self.truncate(0)

    def negate(self) -> "Decimal":
        """Смена знака (ноль остаётся без знака)."""
        if self.is_zero:
            return self
        return self.model_copy(update={"negative": not self.negative})

    def absolute(self) -> "Decimal":
        if not self.negative:
            return self
        return self.model_copy(update={"negative": False})

    def __str__(self) -> str:
        sign = "-" if self.negative else ""
        if self.fraction_digits:
            return f"{sign}{self.integer_digits}.{self.fraction_digits}"
        return f"{sign}{self.integer_digits}"

    def __repr__(self) -> str:
        return f"Decimal('{self}')"


def parse_decimal(value: "str | Decimal") -> Decimal:
    """
    Приведение к Decimal: экземпляр возвращается как есть, строка разбирается.

    Raises:
        ParseError: Если строка не в канонической форме
    """
    if isinstance(value, Decimal):
        return value
    return Decimal.parse(value)
