"""End-to-end simulation — from a ``LoanConfiguration`` to indicators.

Pipeline:
  lender policy (optional) → monthly rate → effective principal
  (loan amount − bonus, clamped ≥ 0) → extra monthly costs
  → discount monthly rate → ``compute_indicators``

Every call is a pure function of its inputs; simulations can run in
parallel threads or processes without coordination.
"""

from __future__ import annotations

import logging
from datetime import date

from mortgage_engine.config.lender import LenderPolicy
from mortgage_engine.config.loan import LoanConfiguration
from mortgage_engine.engine.bonus import resolve_bonus
from mortgage_engine.engine.cashflow import total_extra_monthly_costs
from mortgage_engine.engine.eligibility import check_lender_policy
from mortgage_engine.engine.rates import effective_annual_to_monthly, periodic_rate
from mortgage_engine.finance.indicators import compute_indicators
from mortgage_engine.models.results import FinancialIndicators

logger = logging.getLogger(__name__)


def effective_principal(config: LoanConfiguration) -> float:
    """Loan amount net of the resolved bonus, never below zero."""
    return max(0.0, config.loan_amount - resolve_bonus(config))


def simulate(
    config: LoanConfiguration,
    policy: LenderPolicy | None = None,
    start_date: date | None = None,
) -> FinancialIndicators:
    """Run one full simulation.

    Raises
    ------
    PolicyViolationError
        ``policy`` is given and ``config`` breaks one of its rules.
    ConfigurationError
        Inputs that cannot produce a schedule.
    """
    if policy is not None:
        check_lender_policy(config, policy)

    monthly_rate = periodic_rate(config)
    principal = effective_principal(config)
    extra_costs = total_extra_monthly_costs(config, principal)
    discount_rate = effective_annual_to_monthly(config.discount_rate_annual)

    logger.debug(
        "simulating principal=%.2f %s monthly_rate=%.8f term=%d months extra=%.2f",
        principal, config.currency, monthly_rate, config.term_months, extra_costs,
    )

    return compute_indicators(
        effective_principal=principal,
        monthly_rate=monthly_rate,
        term_months=config.term_months,
        grace=config.grace,
        extra_monthly_costs=extra_costs,
        discount_monthly_rate=discount_rate,
        start_date=start_date,
    )
