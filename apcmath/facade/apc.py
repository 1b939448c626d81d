"""APC (Arbitrary Precision Calculations) — статический фасад над движком.

Методы принимают числа как int, float, str (в обычной или научной нотации),
decimal.Decimal или Decimal и возвращают десятичные строки.

Фасад добавляет к движку две вещи:
- нормализацию входных чисел в каноническую строку (normalizer)
- scale по умолчанию из ScaleRegistry, если scale не передан

Методы:
    APC.scale(n)                         — установить scale по умолчанию
    APC.add(left, right, scale=None)     — сумма
    APC.sub(left, right, scale=None)     — разность
    APC.mul(left, right, scale=None)     — произведение
    APC.div(dividend, divisor, scale=None)
    APC.mod(dividend, modulus)           — остаток от деления целых частей
    APC.comp(left, right, scale=None)    — сравнение (-1 / 0 / 1)
    APC.pow(base, exponent, scale=None)
    APC.pow_mod(base, exponent, modulus, scale=None)
    APC.sqrt(value, scale=None)
"""

import logging
from typing import Callable, Optional, TypeVar

from apcmath.core.domain import Decimal
from apcmath.core.errors import DecimalArithmeticError
from apcmath.core.math import engine
from apcmath.facade.normalizer import NumberLike, normalize_number
from apcmath.facade.scale_registry import DEFAULT_REGISTRY

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _to_decimal(value: NumberLike) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal.parse(normalize_number(value))


def _run(operation: str, func: Callable[..., T], *operands: NumberLike) -> T:
    """Нормализация операндов и вызов операции движка.

    Ошибки движка пробрасываются без изменений.
    """
    try:
        return func(*(_to_decimal(v) for v in operands))
    except DecimalArithmeticError as e:
        logger.debug("APC.%s failed for %r: %s", operation, operands, e)
        raise


class APC:
    """Фасад произвольной точности: статические методы, результат — строка.

    scale по умолчанию хранится в DEFAULT_REGISTRY и применяется,
    когда scale=None.
    """

    @staticmethod
    def scale(scale: int) -> bool:
        """Установка scale по умолчанию для всех методов.

        Raises:
            ValueError: Если scale не неотрицательное целое
        """
        DEFAULT_REGISTRY.set(scale)
        return True

    @staticmethod
    def add(left: NumberLike, right: NumberLike, scale: Optional[int] = None) -> str:
        """Сумма двух чисел, усечённая до scale."""
        s = DEFAULT_REGISTRY.resolve(scale)
        return str(_run("add", lambda a, b: engine.add(a, b, s), left, right))

    @staticmethod
    def sub(left: NumberLike, right: NumberLike, scale: Optional[int] = None) -> str:
        """Разность left - right, усечённая до scale."""
        s = DEFAULT_REGISTRY.resolve(scale)
        return str(_run("sub", lambda a, b: engine.sub(a, b, s), left, right))

    @staticmethod
    def mul(left: NumberLike, right: NumberLike, scale: Optional[int] = None) -> str:
        """Произведение, усечённое до scale."""
        s = DEFAULT_REGISTRY.resolve(scale)
        return str(_run("mul", lambda a, b: engine.mul(a, b, s), left, right))

    @staticmethod
    def div(dividend: NumberLike, divisor: NumberLike, scale: Optional[int] = None) -> str:
        """Частное, усечённое до scale.

        Raises:
            DivisionByZero: Если divisor == 0
        """
        s = DEFAULT_REGISTRY.resolve(scale)
        return str(_run("div", lambda a, b: engine.div(a, b, s), dividend, divisor))

    @staticmethod
    def mod(dividend: NumberLike, modulus: NumberLike) -> str:
        """Остаток от деления целых частей (знак по делимому).

        Raises:
            DivisionByZero: Если целая часть modulus равна нулю
        """
        return str(_run("mod", engine.mod, dividend, modulus))

    @staticmethod
    def comp(left: NumberLike, right: NumberLike, scale: Optional[int] = None) -> int:
        """Сравнение после усечения до scale: 0, 1 (left > right) или -1."""
        s = DEFAULT_REGISTRY.resolve(scale)
        return _run("comp", lambda a, b: engine.comp(a, b, s), left, right)

    @staticmethod
    def pow(base: NumberLike, exponent: NumberLike, scale: Optional[int] = None) -> str:
        """Возведение в целую степень (дробь показателя игнорируется).

        Raises:
            DivisionByZero: Если base == 0 и exponent < 0
        """
        s = DEFAULT_REGISTRY.resolve(scale)
        return str(_run("pow", lambda b, e: engine.pow(b, e, s), base, exponent))

    @staticmethod
    def pow_mod(
        base: NumberLike,
        exponent: NumberLike,
        modulus: NumberLike,
        scale: Optional[int] = None,
    ) -> str:
        """Модульное возведение в степень для целых частей.

        Raises:
            InvalidExponent: Если exponent < 0
            DivisionByZero: Если modulus == 0
        """
        s = DEFAULT_REGISTRY.resolve(scale)
        return str(
            _run("pow_mod", lambda b, e, m: engine.pow_mod(b, e, m, s), base, exponent, modulus)
        )

    @staticmethod
    def sqrt(value: NumberLike, scale: Optional[int] = None) -> str:
        """Квадратный корень, усечённый до scale.

        Raises:
            InvalidOperand: Если value < 0
        """
        s = DEFAULT_REGISTRY.resolve(scale)
        return str(_run("sqrt", lambda v: engine.sqrt(v, s), value))
