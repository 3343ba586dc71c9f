"""
Monomial: Модель одночлена c·x^e

Immutable Pydantic модель. Коэффициент и показатель степени: любые
вещественные числа (отрицательные, дробные, иррациональные, ноль).

Моном с c == 0 допустим: это "нулевой член", который удаляется при
приведении полинома к каноническому виду.
"""

import math
from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# EXCEPTIONS
# =============================================================================

MONOMIAL_POWER_MISMATCH_MESSAGE: Final[str] = "Cannot add monomials with different powers of x."


class MonomialPowerMismatch(ValueError):
    """
    Нарушение предусловия add_monomial_of_same_power: показатели различаются.

    Ошибка программиста, а не пользовательского ввода. Вызывающий код
    обязан проверить равенство показателей сам; приведение полинома к
    каноническому виду вызывает сложение только для равных показателей.
    """

    def __init__(self, left_power: float, right_power: float):
        super().__init__(MONOMIAL_POWER_MISMATCH_MESSAGE)
        self.left_power = left_power
        self.right_power = right_power


# =============================================================================
# POWER
# =============================================================================


def _is_odd_integer(e: float) -> bool:
    return e.is_integer() and int(e) % 2 == 1


def _ieee_pow(x: float, e: float) -> float:
    """
    x^e с результатами IEEE 754 pow вместо исключений math.pow.

    - 0 в отрицательной степени: +inf (-inf для -0.0 и нечётного целого e)
    - отрицательное основание с нецелым показателем: NaN
    - переполнение: +inf (-inf для x < 0 и нечётного целого e)
    """
    try:
        return math.pow(x, e)
    except ValueError:
        if x == 0:
            negative = math.copysign(1.0, x) < 0 and _is_odd_integer(e)
            return -math.inf if negative else math.inf
        return math.nan
    except OverflowError:
        return -math.inf if x < 0 and _is_odd_integer(e) else math.inf


# =============================================================================
# MONOMIAL MODEL
# =============================================================================


class Monomial(BaseModel):
    """
    Модель одночлена c·x^e.

    Immutable модель (frozen=True): все операции возвращают новый экземпляр.
    Равенство (==) точное, по полям, без толерантности.
    Значение по умолчанию Monomial(): константа 0 (c=0, e=0).
    """

    c: float = Field(0.0, description="Коэффициент")
    e: float = Field(0.0, description="Показатель степени x")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def new(cls, c: float, e: float) -> "Monomial":
        """Создание монома c·x^e без какой-либо валидации значений."""
        return cls(c=c, e=e)

    def value(self, x: float) -> float:
        """
        Значение монома в точке x: c · x^e.

        Возведение в степень по правилам IEEE 754 pow: исключения не
        поднимаются. Отрицательное основание с дробным показателем даёт
        NaN, 0 в отрицательной степени даёт ±inf, переполнение даёт ±inf.
        NaN в аргументе распространяется как есть.

        Args:
            x: Точка

        Returns:
            c · x^e

        Examples:
            >>> Monomial(c=2, e=2).value(3.0)
            18.0
            >>> Monomial(c=0.5, e=-1).value(0.25)
            2.0
            >>> Monomial(c=1, e=-1).value(0.0)
            inf
        """
        return self.c * _ieee_pow(x, self.e)

    def add_monomial_of_same_power(self, other: "Monomial") -> "Monomial":
        """
        Сложение с мономом той же степени.

        Args:
            other: Моном с точно таким же показателем

        Returns:
            Monomial(c=self.c + other.c, e=self.e)

        Raises:
            MonomialPowerMismatch: если self.e != other.e
        """
        if self.e != other.e:
            raise MonomialPowerMismatch(self.e, other.e)
        return Monomial(c=self.c + other.c, e=self.e)

    def multiply_monomial(self, other: "Monomial") -> "Monomial":
        """Произведение мономов: коэффициенты перемножаются, показатели складываются."""
        return Monomial(c=self.c * other.c, e=self.e + other.e)

    def derivative(self) -> "Monomial":
        """
        Производная по правилу степени: (c·x^e)' = c·e·x^(e-1).

        Константа даёт Monomial(c=0, e=-1), а не пустой результат:
        нулевой член удаляется уже на уровне полинома.
        """
        return Monomial(c=self.c * self.e, e=self.e - 1)

    def nth_derivative(self, n: int) -> "Monomial":
        """
        n-я производная: derivative() применяется последовательно n раз.

        Закрытая формула не используется: ошибка округления накапливается
        так же, как при пошаговом дифференцировании.

        Raises:
            ValueError: если n < 0
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")

        result = self
        for _ in range(n):
            result = result.derivative()
        return result
