"""
Canonicalization: приведение списка мономов к каноническому виду

Pipeline:
    simplify = combine_like_terms → drop_zero_coefficients → sort_by_exponent_desc

Каноническая форма:
- Не более одного монома на каждый показатель степени
- Нет мономов с коэффициентом ровно 0 (пустой список = константа 0)
- Мономы отсортированы по убыванию показателя степени

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Совпадение показателей проверяется точным равенством float (без толерантности).
   Показатели, отличающиеся на ошибку представления (0.1 + 0.2 vs 0.3),
   остаются разными мономами.
2. Слияние вызывает add_monomial_of_same_power только для равных показателей,
   поэтому MonomialPowerMismatch из pipeline не возникает.
3. Все функции чистые: входная последовательность не изменяется.
4. simplify_terms идемпотентна.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from src.core.domain.monomial import Monomial

logger = logging.getLogger(__name__)


# =============================================================================
# ШАГИ PIPELINE
# =============================================================================


def combine_like_terms(terms: Iterable[Monomial]) -> list[Monomial]:
    """
    Объединение мономов с одинаковым показателем степени.

    Один проход слева направо с аккумулятором:
    - Первый моном копируется в аккумулятор без проверок
    - Для каждого следующего ищется первый элемент аккумулятора с точно
      равным показателем; найденный заменяется суммой, иначе моном
      добавляется в конец

    Порядок результата: порядок первого появления каждого показателя.
    Коэффициенты могут сократиться до точного 0 (удаляются следующим шагом).

    Args:
        terms: Мономы в произвольном порядке

    Returns:
        Новый список мономов с уникальными показателями

    Examples:
        >>> combine_like_terms([Monomial(c=1, e=1), Monomial(c=2, e=0), Monomial(c=2, e=1)])
        [Monomial(c=3.0, e=1.0), Monomial(c=2.0, e=0.0)]
    """
    combined: list[Monomial] = []

    for term in terms:
        if not combined:
            combined.append(term)
            continue

        for index, existing in enumerate(combined):
            if existing.e == term.e:
                combined[index] = existing.add_monomial_of_same_power(term)
                break
        else:
            combined.append(term)

    return combined


def drop_zero_coefficients(terms: Iterable[Monomial]) -> list[Monomial]:
    """
    Удаление мономов с коэффициентом ровно 0.

    Коэффициенты, лишь близкие к нулю (1e-300), сохраняются.
    -0.0 == 0.0, поэтому отрицательный ноль тоже удаляется.
    """
    return [term for term in terms if term.c != 0]


def sort_by_exponent_desc(terms: Iterable[Monomial]) -> list[Monomial]:
    """Стабильная сортировка по убыванию показателя степени."""
    return sorted(terms, key=lambda term: term.e, reverse=True)


# =============================================================================
# ПОЛНЫЙ PIPELINE
# =============================================================================


def simplify_terms(terms: Iterable[Monomial]) -> list[Monomial]:
    """
    Приведение мономов к каноническому виду.

    Args:
        terms: Мономы в произвольном порядке, возможно с повторами и нулями

    Returns:
        Канонический список мономов
    """
    terms = list(terms)
    combined = combine_like_terms(terms)
    non_zero = drop_zero_coefficients(combined)
    canonical = sort_by_exponent_desc(non_zero)

    logger.debug(
        "simplify: %d terms -> %d combined -> %d non-zero",
        len(terms),
        len(combined),
        len(canonical),
    )

    return canonical
