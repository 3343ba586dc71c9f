"""
Numerical Safeguards: float-примитивы для полиномиальной алгебры

Модуль содержит epsilon-параметры и толерантное сравнение float, на которых
строится сравнение полиномов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Точное равенство (==) и толерантное сравнение: разные операции
2. NaN никогда не считается равным чему-либо, в том числе в пределах толерантности
3. Все операции детерминированы и воспроизводимы
"""

from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для сравнения полиномов
# Применяется и к коэффициентам, и к показателям степени
EPS_POLY_COMPARE: Final[float] = 1e-10


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_equal_within_tolerance_to(
    a: float,
    b: float,
    tol: float = EPS_POLY_COMPARE,
) -> bool:
    """
    Абсолютное сравнение двух float с толерантностью.

    Алгоритм:
        abs(a - b) <= tol

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_POLY_COMPARE)

    Returns:
        True если значения отличаются не более чем на tol

    Raises:
        ValueError: Если tol отрицательный

    Examples:
        >>> is_equal_within_tolerance_to(0.1 + 0.2, 0.3)
        True
        >>> is_equal_within_tolerance_to(1.0, 1.0 + 1e-11)
        True
        >>> is_equal_within_tolerance_to(1.0, 1.001)
        False
        >>> is_equal_within_tolerance_to(float('nan'), float('nan'))
        False
    """
    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}")

    # NaN даёт False на любом сравнении, отдельная проверка не нужна
    return abs(a - b) <= tol
