"""
Domain models and value objects.

Contains the immutable algebra values: Monomial and Polynomial.
"""

from src.core.domain.monomial import (
    MONOMIAL_POWER_MISMATCH_MESSAGE,
    Monomial,
    MonomialPowerMismatch,
)
from src.core.domain.polynomial import Polynomial

__all__ = [
    # Monomial model
    "MONOMIAL_POWER_MISMATCH_MESSAGE",
    "Monomial",
    "MonomialPowerMismatch",
    # Polynomial model
    "Polynomial",
]
