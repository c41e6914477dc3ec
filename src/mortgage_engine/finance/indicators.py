"""Investment indicators — VAN, TIR, TCEA, TREA, duration, convexity.

Takes the schedule and its two cash-flow series and applies time-value of
money.  Conventions:

  - the period-0 inflow is the effective principal, passed separately
  - VAN, duration and convexity use the *discount* rate, not the loan rate
  - TIR / TCEA / TREA are monthly bisection roots annualized as (1+r)^12 − 1

Key formulas (t = 1..N, PV_t = CF_t / (1 + d)^t, d = monthly discount rate):
  VAN       = P + Σ PV_t
  Duration  = Σ t × PV_t / Σ PV_t / 12                  (years)
  ModDur    = Duration / (1 + d)
  Convexity = Σ t(t+1) × PV_t / (1 + d)^2 / Σ PV_t

A zero PV sum makes duration and convexity undefined: NaN, never 0.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Sequence

import numpy as np

from mortgage_engine.config.loan import GracePolicy
from mortgage_engine.engine.cashflow import bank_cash_flows, client_cash_flows
from mortgage_engine.engine.rates import monthly_to_effective_annual
from mortgage_engine.engine.schedule import build_amortization_schedule
from mortgage_engine.finance.solver import (
    RootResult,
    net_present_value,
    present_values,
    solve_periodic_rate,
)
from mortgage_engine.models.results import FinancialIndicators

logger = logging.getLogger(__name__)


def compute_van(principal: float, cash_flows: Sequence[float], discount_monthly_rate: float) -> float:
    """Net present value of the series plus the period-0 principal."""
    return net_present_value(principal, cash_flows, discount_monthly_rate)


def compute_tir(principal: float, cash_flows: Sequence[float]) -> tuple[float, RootResult]:
    """Annual effective IRR of the series, plus the raw monthly solve."""
    root = solve_periodic_rate(principal, cash_flows)
    return monthly_to_effective_annual(root.rate), root


def compute_tcea(principal: float, client_flows: Sequence[float]) -> tuple[float, RootResult]:
    """Borrower's total effective annual cost.

    Same solve as ``compute_tir``; the client series already carries the
    ancillary costs.
    """
    return compute_tir(principal, client_flows)


def compute_trea(principal: float, bank_flows: Sequence[float]) -> tuple[float, RootResult]:
    """Lender's effective annual yield, on installments only."""
    return compute_tir(principal, bank_flows)


def compute_duration(cash_flows: Sequence[float], discount_monthly_rate: float) -> float:
    """Macaulay duration in years.  NaN when Σ PV is zero."""
    pv = present_values(cash_flows, discount_monthly_rate)
    pv_sum = pv.sum()
    if pv_sum == 0:
        return math.nan
    periods = np.arange(1, pv.size + 1, dtype=np.float64)
    return float((periods * pv).sum() / pv_sum / 12)


def compute_modified_duration(duration: float, discount_monthly_rate: float) -> float:
    return duration / (1 + discount_monthly_rate)


def compute_convexity(cash_flows: Sequence[float], discount_monthly_rate: float) -> float:
    """Second-order rate sensitivity.  NaN when Σ PV is zero."""
    pv = present_values(cash_flows, discount_monthly_rate)
    pv_sum = pv.sum()
    if pv_sum == 0:
        return math.nan
    periods = np.arange(1, pv.size + 1, dtype=np.float64)
    weighted = periods * (periods + 1) * pv / (1 + discount_monthly_rate) ** 2
    return float(weighted.sum() / pv_sum)


# ═══════════════════════════════════════════════════════════════════════════
# Public entry point
# ═══════════════════════════════════════════════════════════════════════════

def compute_indicators(
    effective_principal: float,
    monthly_rate: float,
    term_months: int,
    grace: GracePolicy | None = None,
    extra_monthly_costs: float = 0.0,
    discount_monthly_rate: float | None = None,
    start_date: date | None = None,
) -> FinancialIndicators:
    """Build the schedule and every indicator for one loan.

    Parameters
    ----------
    effective_principal : float
        Amount financed, bonus already subtracted.
    monthly_rate : float
        Loan's monthly decimal rate.
    term_months : int
        Total months, grace included.
    grace : GracePolicy | None
        Optional grace segment.
    extra_monthly_costs : float
        Borrower's monthly costs on top of the installment (insurance, fees...).
    discount_monthly_rate : float | None
        Monthly discount rate for VAN, duration and convexity.
        None = use the loan's own rate.
    start_date : date | None
        Origin of the 30-day calendar.  Defaults to today.

    Returns
    -------
    FinancialIndicators
        Fully recomputed on every call; nothing is cached.
    """
    if discount_monthly_rate is None:
        discount_monthly_rate = monthly_rate

    table = build_amortization_schedule(
        effective_principal, monthly_rate, term_months, grace, start_date,
    )

    total_amount = sum(row.payment for row in table)
    total_interest = total_amount - effective_principal
    monthly_payment = next((row.payment for row in table if row.payment > 0), 0.0)

    client = client_cash_flows(table, extra_monthly_costs)
    bank = bank_cash_flows(table)

    van = compute_van(effective_principal, client, discount_monthly_rate)

    if effective_principal > 0:
        tir, tir_root = compute_tir(effective_principal, client)
        tcea, _ = compute_tcea(effective_principal, client)
        trea, trea_root = compute_trea(effective_principal, bank)
        tir_residual, tir_converged = tir_root.residual, tir_root.converged
        trea_residual, trea_converged = trea_root.residual, trea_root.converged
    else:
        # Nothing financed: no rate equates a zero inflow with the outflows.
        logger.debug("effective principal is zero; TIR/TCEA/TREA are undefined")
        tir = tcea = trea = math.nan
        tir_residual = trea_residual = math.nan
        tir_converged = trea_converged = False

    duration = compute_duration(client, discount_monthly_rate)
    modified_duration = compute_modified_duration(duration, discount_monthly_rate)
    convexity = compute_convexity(client, discount_monthly_rate)

    return FinancialIndicators(
        effective_principal=effective_principal,
        monthly_payment=monthly_payment,
        total_amount=total_amount,
        total_interest=total_interest,
        annual_rate=monthly_to_effective_annual(monthly_rate),
        tcea=tcea,
        trea=trea,
        van=van,
        tir=tir,
        duration=duration,
        modified_duration=modified_duration,
        convexity=convexity,
        tir_residual=tir_residual,
        tir_converged=tir_converged,
        trea_residual=trea_residual,
        trea_converged=trea_converged,
        amortization_table=table,
    )
