"""Result types — the contract between the engine and its consumers.

Nothing here is rounded: money stays in full float precision and rates are
decimals (0.0070 = 0.70%).  Presentation layers format as they see fit.
"""

from __future__ import annotations

import datetime
from typing import Literal

from pydantic import BaseModel


# ═══════════════════════════════════════════════════════════════════════════
# Amortization schedule
# ═══════════════════════════════════════════════════════════════════════════

class AmortizationRow(BaseModel):
    """One month of the French-method schedule."""

    period: int
    """1..N, contiguous."""

    date: datetime.date
    """start_date + period × 30 days."""

    initial_balance: float
    interest: float
    """initial_balance × monthly_rate."""

    payment: float
    """0 in total grace, interest in partial grace, constant installment otherwise."""

    amortization: float
    """Capital repaid this period (0 during grace)."""

    final_balance: float
    """Clamped to ≥ 0.  Grows during total grace (capitalized interest)."""


# ═══════════════════════════════════════════════════════════════════════════
# Indicators
# ═══════════════════════════════════════════════════════════════════════════

class FinancialIndicators(BaseModel):
    """Everything computed for one simulation.

    ``tir`` and ``tcea`` come from the same solve on the client series
    (installment + extra costs) and are always equal.  ``trea`` is solved on
    the bank series (installment only).  All three, and ``annual_rate``, are
    annual effective decimals.
    """

    effective_principal: float
    """Amount actually financed (after down payment and bonus)."""

    monthly_payment: float
    """First non-zero installment — the post-grace constant payment."""

    total_amount: float
    """Σ payment over the schedule."""

    total_interest: float
    """total_amount − effective_principal."""

    annual_rate: float
    """The loan's own TEA: (1 + monthly_rate)^12 − 1."""

    tcea: float
    trea: float
    van: float
    """Net present value of the client series at the discount rate."""

    tir: float

    duration: float
    """Macaulay duration in years.  NaN when the PV sum is zero."""

    modified_duration: float
    """duration / (1 + monthly discount rate), years."""

    convexity: float
    """NaN when the PV sum is zero."""

    # --- Solver diagnostics ---
    tir_residual: float
    """|f(rate)| at the returned TIR/TCEA rate (currency units)."""

    tir_converged: bool
    trea_residual: float
    trea_converged: bool

    amortization_table: list[AmortizationRow]


# ═══════════════════════════════════════════════════════════════════════════
# Housing bonus tables
# ═══════════════════════════════════════════════════════════════════════════

class BonusBand(BaseModel, frozen=True):
    """One BBP price band — inclusive bounds."""

    label: str
    min_price: float
    max_price: float
    bonus: float
    bonus_sustainable: float


class BonusRangeInfo(BaseModel):
    """Band a price falls into, as shown to the user."""

    label: str
    min_price: float
    max_price: float
    bonus: float
    bonus_sustainable: float
    is_mivivienda: bool
    """False above the program ceiling (traditional mortgage)."""


class BonusEligibility(BaseModel):
    """BBP eligibility for a price."""

    status: Literal["no_price", "too_low", "too_high", "eligible"]
    eligible: bool
    can_apply_bonus: bool
    message: str
