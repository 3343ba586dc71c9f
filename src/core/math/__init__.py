"""
Core math modules для полиномиальной алгебры

Численные примитивы, каноническая форма и анализ на отрезке.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_POLY_COMPARE,
    is_equal_within_tolerance_to,
)

# Canonicalization
from src.core.math.canonicalization import (
    combine_like_terms,
    drop_zero_coefficients,
    simplify_terms,
    sort_by_exponent_desc,
)

# Interval Analysis
from src.core.math.interval_analysis import (
    CONCAVITY_SAMPLE_COUNT,
    Concavity,
    Trend,
    classify_concavity,
    classify_trend,
    order_interval,
    sample_points,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_POLY_COMPARE",
    # Numerical Safeguards: Comparisons
    "is_equal_within_tolerance_to",
    # Canonicalization: Functions
    "combine_like_terms",
    "drop_zero_coefficients",
    "simplify_terms",
    "sort_by_exponent_desc",
    # Interval Analysis: Constants
    "CONCAVITY_SAMPLE_COUNT",
    # Interval Analysis: Types
    "Concavity",
    "Trend",
    # Interval Analysis: Functions
    "classify_concavity",
    "classify_trend",
    "order_interval",
    "sample_points",
]
