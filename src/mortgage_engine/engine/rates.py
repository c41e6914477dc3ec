"""Rate conversions — TNA → TEA → monthly periodic rate.

Key formulas:
  TEA     = (1 + TNA / m)^m − 1          m = capitalizations per year
  monthly = (1 + TEA)^(1/12) − 1

Public signatures take and return annual rates in percent (8.5 = 8.5%);
the monthly rate is a decimal (0.0068 = 0.68%).
"""

from __future__ import annotations

import math

from mortgage_engine.config.loan import LoanConfiguration
from mortgage_engine.errors import ConfigurationError

CAPITALIZATIONS_PER_YEAR: dict[str, int] = {
    "monthly": 12,
    "bimonthly": 6,
    "quarterly": 4,
    "semiannual": 2,
    "annual": 1,
}


def nominal_to_effective_annual(nominal_annual_pct: float, capitalization: str) -> float:
    """Convert a nominal annual rate (%) into an effective annual rate (%).

    Raises ``ConfigurationError`` for a capitalization outside
    ``CAPITALIZATIONS_PER_YEAR`` or a non-finite rate.
    """
    if not math.isfinite(nominal_annual_pct):
        raise ConfigurationError(f"nominal rate must be finite, got {nominal_annual_pct}")
    try:
        m = CAPITALIZATIONS_PER_YEAR[capitalization]
    except KeyError:
        raise ConfigurationError(f"unknown capitalization frequency: {capitalization!r}") from None
    return ((1 + nominal_annual_pct / 100 / m) ** m - 1) * 100


def effective_annual_to_monthly(effective_annual_pct: float) -> float:
    """Convert an effective annual rate (%) into a monthly decimal rate."""
    return (1 + effective_annual_pct / 100) ** (1 / 12) - 1


def monthly_to_effective_annual(monthly_rate: float) -> float:
    """Annualize a monthly decimal rate: (1 + r)^12 − 1, as a decimal."""
    return (1 + monthly_rate) ** 12 - 1


def periodic_rate(config: LoanConfiguration) -> float:
    """Monthly decimal rate of the loan described by ``config``."""
    if config.rate_type == "effective":
        return effective_annual_to_monthly(config.interest_rate_annual)
    if config.capitalization is None:
        raise ConfigurationError("a nominal rate requires a capitalization frequency")
    tea = nominal_to_effective_annual(config.interest_rate_annual, config.capitalization)
    return effective_annual_to_monthly(tea)
