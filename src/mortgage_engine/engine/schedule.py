"""Amortization schedule — French method, "vencido ordinario".

The schedule is a fold over periods 1..N of a two-state machine:

  Grace       period ≤ grace_months
                total   → payment = 0, interest capitalizes (balance grows)
                partial → payment = interest, balance unchanged
  Amortizing  constant installment, amortization = payment − interest

The Grace → Amortizing transition happens once, at period grace_months + 1,
and recomputes the installment from the (possibly grown) balance over the
remaining N − grace_months periods.  The installment is then held constant.

Key formula:
  payment = B × r × (1+r)^k / ((1+r)^k − 1)     (B / k when r = 0)

Row dates are start_date + period × 30 days, not calendar months.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Union

from mortgage_engine.config.loan import GracePolicy, GraceKind
from mortgage_engine.errors import ConfigurationError
from mortgage_engine.models.results import AmortizationRow

DAYS_PER_PERIOD = 30


def annuity_payment(balance: float, monthly_rate: float, periods: int) -> float:
    """Constant installment that repays ``balance`` over ``periods`` months.

    (1+r)^k is evaluated through log1p / expm1 so that tiny positive rates
    do not collapse the denominator to zero.
    """
    if periods <= 0:
        raise ConfigurationError(f"periods must be > 0, got {periods}")
    if monthly_rate == 0:
        return balance / periods
    growth = periods * math.log1p(monthly_rate)
    return balance * monthly_rate * math.exp(growth) / math.expm1(growth)


def period_date(start_date: date, period: int) -> date:
    """Date of ``period`` under the 30-day month convention."""
    return start_date + timedelta(days=period * DAYS_PER_PERIOD)


# ═══════════════════════════════════════════════════════════════════════════
# State machine
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ScheduleTerms:
    """Inputs fixed for the whole schedule."""

    monthly_rate: float
    term_months: int
    start_date: date


@dataclass(frozen=True)
class Grace:
    """No capital is repaid until ``last_period`` (inclusive)."""

    balance: float
    kind: GraceKind
    last_period: int


@dataclass(frozen=True)
class Amortizing:
    """Constant installment ``payment`` until the term ends."""

    balance: float
    payment: float


ScheduleState = Union[Grace, Amortizing]


def initial_state(principal: float, terms: ScheduleTerms, grace: GracePolicy | None) -> ScheduleState:
    """State before period 1."""
    if grace is not None:
        return Grace(balance=principal, kind=grace.kind, last_period=grace.months)
    return Amortizing(
        balance=principal,
        payment=annuity_payment(principal, terms.monthly_rate, terms.term_months),
    )


def schedule_step(
    state: ScheduleState,
    period: int,
    terms: ScheduleTerms,
) -> tuple[ScheduleState, AmortizationRow]:
    """Advance one period.  Returns the next state and the row produced."""
    if isinstance(state, Grace) and period > state.last_period:
        remaining = terms.term_months - state.last_period
        state = Amortizing(
            balance=state.balance,
            payment=annuity_payment(state.balance, terms.monthly_rate, remaining),
        )

    balance = state.balance
    interest = balance * terms.monthly_rate

    if isinstance(state, Grace):
        amortization = 0.0
        if state.kind == "total":
            payment = 0.0
            new_balance = balance + interest
        else:
            payment = interest
            new_balance = balance
        next_state: ScheduleState = Grace(
            balance=new_balance, kind=state.kind, last_period=state.last_period,
        )
    else:
        payment = state.payment
        amortization = payment - interest
        new_balance = balance - amortization
        next_state = Amortizing(balance=new_balance, payment=payment)

    row = AmortizationRow(
        period=period,
        date=period_date(terms.start_date, period),
        initial_balance=balance,
        interest=interest,
        payment=payment,
        amortization=amortization,
        final_balance=max(0.0, new_balance),
    )
    return next_state, row


def build_amortization_schedule(
    principal: float,
    monthly_rate: float,
    term_months: int,
    grace: GracePolicy | None = None,
    start_date: date | None = None,
) -> list[AmortizationRow]:
    """Generate the full month-by-month schedule.

    Parameters
    ----------
    principal : float
        Effective amount financed (bonus already subtracted).
    monthly_rate : float
        Monthly decimal rate (0.007 = 0.7%).
    term_months : int
        Total periods, grace included.
    grace : GracePolicy | None
        Optional grace segment at the start of the schedule.
    start_date : date | None
        Origin of the 30-day calendar.  Defaults to today.

    Raises
    ------
    ConfigurationError
        Negative rate or principal, non-positive term, or a grace period
        that leaves no amortization months.
    """
    if monthly_rate < 0:
        raise ConfigurationError(f"monthly_rate must be >= 0, got {monthly_rate}")
    if term_months <= 0:
        raise ConfigurationError(f"term_months must be > 0, got {term_months}")
    if principal < 0:
        raise ConfigurationError(f"principal must be >= 0, got {principal}")
    if grace is not None and grace.months >= term_months:
        raise ConfigurationError(
            f"grace period ({grace.months} months) must be shorter than the term ({term_months} months)"
        )

    terms = ScheduleTerms(
        monthly_rate=monthly_rate,
        term_months=term_months,
        start_date=start_date or date.today(),
    )
    state = initial_state(principal, terms, grace)

    rows: list[AmortizationRow] = []
    for period in range(1, term_months + 1):
        state, row = schedule_step(state, period, terms)
        rows.append(row)
    return rows
