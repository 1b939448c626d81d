"""
Engine Errors — исключения десятичного движка

Все ошибки движка наследуются от DecimalArithmeticError и дополнительно от
соответствующего встроенного исключения (ValueError / ZeroDivisionError),
чтобы вызывающий код мог ловить их обычным способом.

ИНВАРИАНТЫ:
1. Ошибка поднимается синхронно, до формирования результата
2. Операция либо возвращает валидный результат, либо не имеет побочных эффектов
"""


class DecimalArithmeticError(Exception):
    """Базовое исключение десятичного движка."""

    pass


class ParseError(DecimalArithmeticError, ValueError):
    """
    Строка не является каноническим десятичным числом.

    Каноническая форма: -?\\d+(\\.\\d+)?
    """

    pass


class DivisionByZero(DecimalArithmeticError, ZeroDivisionError):
    """
    Деление на ноль.

    Поднимается div, mod, pow с отрицательной степенью нуля и pow_mod
    с нулевым модулем.
    """

    pass


class InvalidExponent(DecimalArithmeticError, ValueError):
    """Отрицательная степень в pow_mod."""

    pass


class InvalidOperand(DecimalArithmeticError, ValueError):
    """Недопустимый операнд (например, отрицательное число в sqrt)."""

    pass
