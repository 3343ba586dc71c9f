"""
Interval Analysis: классификация поведения функции на отрезке

Модуль работает с уже вычисленными значениями функции (float), не зная
ничего о полиномах:
- Упорядочивание границ отрезка (порядок аргументов не важен)
- Классификация тренда по значениям на концах отрезка
- Равномерная выборка точек отрезка
- Классификация вогнутости по знакам второй производной в точках выборки

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. (start, end) и (end, start) дают одинаковый результат
2. UNDEFINED для тренда возникает только при NaN
3. Для вогнутости UNDEFINED означает NaN, смену знака или тождественный 0
"""

import logging
import math
from enum import Enum
from typing import Final, Sequence

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Количество точек (включая концы), в которых оценивается вторая производная
CONCAVITY_SAMPLE_COUNT: Final[int] = 101


# =============================================================================
# ENUMS
# =============================================================================


class Trend(str, Enum):
    """Поведение функции между концами отрезка"""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    CONSTANT = "constant"
    UNDEFINED = "undefined"


class Concavity(str, Enum):
    """Вогнутость функции на отрезке"""

    CONCAVE_UP = "concave up"
    CONCAVE_DOWN = "concave down"
    UNDEFINED = "undefined"


# =============================================================================
# ОТРЕЗОК
# =============================================================================


def order_interval(start: float, end: float) -> tuple[float, float]:
    """
    Упорядочивание границ отрезка.

    Returns:
        (start, end) если start <= end, иначе (end, start)
    """
    if start > end:
        logger.debug("interval [%r, %r] reversed", start, end)
        return end, start
    return start, end


def sample_points(start: float, end: float, count: int = CONCAVITY_SAMPLE_COUNT) -> list[float]:
    """
    Равномерная выборка точек отрезка, включая оба конца.

    Args:
        start: Левая граница
        end: Правая граница
        count: Количество точек (>= 2)

    Returns:
        Список из count точек; первая равна start, последняя равна end

    Raises:
        ValueError: Если count < 2

    Examples:
        >>> sample_points(0.0, 1.0, 5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if count < 2:
        raise ValueError(f"count must be >= 2, got {count}")

    step = (end - start) / (count - 1)
    points = [start + step * i for i in range(count - 1)]
    # Последняя точка берётся как есть, без накопленной ошибки step * i
    points.append(end)
    return points


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def classify_trend(start_value: float, end_value: float) -> Trend:
    """
    Тренд по значениям функции на концах отрезка.

    Args:
        start_value: f(start)
        end_value: f(end)

    Returns:
        INCREASING если f(start) < f(end)
        DECREASING если f(start) > f(end)
        CONSTANT если f(start) == f(end)
        UNDEFINED если хотя бы одно значение NaN
    """
    if start_value < end_value:
        return Trend.INCREASING
    elif start_value > end_value:
        return Trend.DECREASING
    elif start_value == end_value:
        return Trend.CONSTANT
    else:
        return Trend.UNDEFINED


def classify_concavity(second_derivative_values: Sequence[float]) -> Concavity:
    """
    Вогнутость по значениям второй производной в точках выборки.

    Алгоритм:
    - Любой NaN → UNDEFINED
    - Есть и строго положительные, и строго отрицательные значения
      (смена знака на отрезке) → UNDEFINED
    - Все значения равны 0 → UNDEFINED
    - Иначе: >= 0 → CONCAVE_UP, <= 0 → CONCAVE_DOWN

    Нули на границе допускаются: x^4 на [-1, 1] вогнута вверх.

    Args:
        second_derivative_values: f''(x_i) для точек выборки

    Returns:
        Concavity
    """
    if any(math.isnan(v) for v in second_derivative_values):
        return Concavity.UNDEFINED

    has_positive = any(v > 0 for v in second_derivative_values)
    has_negative = any(v < 0 for v in second_derivative_values)

    logger.debug(
        "concavity: %d samples, positive=%s, negative=%s",
        len(second_derivative_values),
        has_positive,
        has_negative,
    )

    if has_positive and not has_negative:
        return Concavity.CONCAVE_UP
    elif has_negative and not has_positive:
        return Concavity.CONCAVE_DOWN
    else:
        return Concavity.UNDEFINED
