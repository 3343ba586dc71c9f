"""
Polynomial: Модель полинома от одной переменной

Immutable Pydantic модель: сумма мономов Σ cᵢ·x^eᵢ.

Инварианты при создании НЕ проверяются: полином может содержать
повторяющиеся показатели, нулевые коэффициенты и любой порядок мономов.
Каноническая форма гарантируется только результатом simplify() и всех
операций, которые его используют (add, multiply, derivative).

Сравнение:
- == структурное, поэлементное, зависит от порядка мономов
- is_equal_within_tolerance_to: после приведения к канонической форме,
  с толерантностью EPS_POLY_COMPARE
"""

import logging
from typing import Iterable

from pydantic import BaseModel, Field

from src.core.domain.monomial import Monomial
from src.core.math.canonicalization import (
    combine_like_terms,
    drop_zero_coefficients,
    simplify_terms,
    sort_by_exponent_desc,
)
from src.core.math.interval_analysis import (
    CONCAVITY_SAMPLE_COUNT,
    Concavity,
    Trend,
    classify_concavity,
    classify_trend,
    order_interval,
    sample_points,
)
from src.core.math.numerical_safeguards import (
    EPS_POLY_COMPARE,
    is_equal_within_tolerance_to,
)

logger = logging.getLogger(__name__)


# =============================================================================
# POLYNOMIAL MODEL
# =============================================================================


class Polynomial(BaseModel):
    """
    Модель полинома.

    Immutable модель (frozen=True). Все преобразующие методы возвращают
    новый Polynomial, self никогда не изменяется.
    Пустой полином (без мономов): константа 0.
    """

    monomials: tuple[Monomial, ...] = Field(
        default=(), description="Мономы в порядке задания (без инвариантов)"
    )

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls) -> "Polynomial":
        """Пустой полином (константа 0)."""
        return cls(monomials=())

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[float, float]]) -> "Polynomial":
        """
        Полином из пар (коэффициент, показатель) в заданном порядке.

        Examples:
            >>> Polynomial.from_pairs([(1, 2), (3, 1), (2, 0)]).value(2.0)
            12.0
        """
        return cls(monomials=tuple(Monomial(c=c, e=e) for c, e in pairs))

    # -------------------------------------------------------------------------
    # Каноническая форма
    # -------------------------------------------------------------------------

    def simplify_by_combining_alike_powers(self) -> "Polynomial":
        """Объединение мономов с точно равными показателями (порядок первого появления)."""
        return Polynomial(monomials=tuple(combine_like_terms(self.monomials)))

    def eliminate_zero_coefficients(self) -> "Polynomial":
        """Удаление мономов с коэффициентом ровно 0."""
        return Polynomial(monomials=tuple(drop_zero_coefficients(self.monomials)))

    def sort_by_exponent(self) -> "Polynomial":
        """Стабильная сортировка мономов по убыванию показателя."""
        return Polynomial(monomials=tuple(sort_by_exponent_desc(self.monomials)))

    def simplify(self) -> "Polynomial":
        """
        Приведение к канонической форме.

        combine → drop zeros → sort. Идемпотентно:
        p.simplify().simplify() == p.simplify()
        """
        return Polynomial(monomials=tuple(simplify_terms(self.monomials)))

    def simplified(self) -> "Polynomial":
        """Синоним simplify()."""
        return self.simplify()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def value(self, x: float) -> float:
        """
        Значение полинома в точке x.

        Сумма значений мономов слева направо. Приведение к канонической
        форме не требуется и не выполняется.
        """
        return sum((monomial.value(x) for monomial in self.monomials), 0.0)

    def add_polynomial(self, other: "Polynomial") -> "Polynomial":
        """Сумма полиномов: конкатенация мономов + simplify."""
        return Polynomial(monomials=self.monomials + other.monomials).simplify()

    def multiply_polynomial(self, other: "Polynomial") -> "Polynomial":
        """
        Произведение полиномов.

        Каждый моном self умножается на каждый моном other (|self|×|other|
        произведений), затем результат приводится к канонической форме.
        """
        products = tuple(
            left.multiply_monomial(right)
            for left in self.monomials
            for right in other.monomials
        )
        return Polynomial(monomials=products).simplify()

    def derivative(self) -> "Polynomial":
        """
        Производная: почленная производная + simplify.

        Константы дают Monomial(c=0, e=-1) и исчезают при simplify.
        """
        return Polynomial(
            monomials=tuple(monomial.derivative() for monomial in self.monomials)
        ).simplify()

    def nth_derivative(self, n: int) -> "Polynomial":
        """
        n-я производная: derivative() применяется последовательно n раз.

        Каждый промежуточный результат уже канонический.
        n = 0 возвращает полином без изменений.

        Raises:
            ValueError: если n < 0
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")

        result = self
        for _ in range(n):
            result = result.derivative()
        return result

    def __add__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add_polynomial(other)

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.multiply_polynomial(other)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def is_equal_within_tolerance_to(
        self,
        other: "Polynomial",
        tol: float = EPS_POLY_COMPARE,
    ) -> bool:
        """
        Приближённое равенство полиномов.

        Алгоритм:
        1. Оба полинома приводятся к канонической форме
        2. Количество мономов должно совпадать
        3. Мономы на одинаковых позициях: |Δc| <= tol и |Δe| <= tol

        Args:
            other: Полином для сравнения
            tol: Абсолютная толерантность (default: EPS_POLY_COMPARE)

        Returns:
            True если полиномы равны в пределах толерантности
        """
        left = self.simplify().monomials
        right = other.simplify().monomials

        if len(left) != len(right):
            return False

        return all(
            is_equal_within_tolerance_to(a.c, b.c, tol)
            and is_equal_within_tolerance_to(a.e, b.e, tol)
            for a, b in zip(left, right)
        )

    # -------------------------------------------------------------------------
    # Анализ на отрезке
    # -------------------------------------------------------------------------

    def trend_over_interval(self, start: float, end: float) -> Trend:
        """
        Тренд полинома между концами отрезка.

        Порядок аргументов не важен. Сравниваются только значения на концах.

        Returns:
            Trend.INCREASING / DECREASING / CONSTANT,
            Trend.UNDEFINED если значение на конце NaN (в т.ч. отрицательное
            основание с дробным показателем)
        """
        start, end = order_interval(start, end)
        return classify_trend(self.value(start), self.value(end))

    def concavity_over_interval(
        self,
        start: float,
        end: float,
        samples: int = CONCAVITY_SAMPLE_COUNT,
    ) -> Concavity:
        """
        Вогнутость полинома на отрезке.

        Вторая производная оценивается в samples равномерно распределённых
        точках (включая концы). Смена знака, тождественный 0 или NaN дают
        Concavity.UNDEFINED.

        Args:
            start: Граница отрезка
            end: Граница отрезка (порядок не важен)
            samples: Количество точек выборки (>= 2)

        Returns:
            Concavity
        """
        start, end = order_interval(start, end)
        second = self.nth_derivative(2)
        logger.debug("second derivative has %d terms", len(second.monomials))

        values = [second.value(x) for x in sample_points(start, end, samples)]
        return classify_concavity(values)
