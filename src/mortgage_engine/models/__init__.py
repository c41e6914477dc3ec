"""Result models — engine output contracts."""

from mortgage_engine.models.results import (
    AmortizationRow,
    BonusBand,
    BonusEligibility,
    BonusRangeInfo,
    FinancialIndicators,
)

__all__ = [
    "AmortizationRow",
    "BonusBand",
    "BonusEligibility",
    "BonusRangeInfo",
    "FinancialIndicators",
]
