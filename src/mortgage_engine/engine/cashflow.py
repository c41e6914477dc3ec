"""Cash-flow series derived from an amortization schedule.

Two parallel series, one entry per schedule row (index 0 = period 1):

  client = −(payment + extra_monthly_costs)   borrower's full outflow
  bank   = −payment                           what actually reaches the lender

The period-0 inflow (the effective principal) is never stored in a series;
NPV/IRR functions receive it separately.

Extra monthly costs are the sum of the borrower's other costs, credit-life
and property insurance, and administrative fees.  They are charged every
period, grace included.
"""

from __future__ import annotations

from mortgage_engine.config.loan import LoanConfiguration
from mortgage_engine.models.results import AmortizationRow


def client_cash_flows(rows: list[AmortizationRow], extra_monthly_costs: float = 0.0) -> list[float]:
    """Borrower-side series: installment plus ancillary costs, negative."""
    return [-(row.payment + extra_monthly_costs) for row in rows]


def bank_cash_flows(rows: list[AmortizationRow]) -> list[float]:
    """Lender-side series: installment only, negative."""
    return [-row.payment for row in rows]


# ═══════════════════════════════════════════════════════════════════════════
# Ancillary cost aggregation
# ═══════════════════════════════════════════════════════════════════════════

def monthly_insurance_costs(
    insurance_life_amount: float = 0.0,
    insurance_property_amount: float = 0.0,
    administrative_fees: float = 0.0,
) -> float:
    """Insurance premiums plus administrative fees for one month."""
    return insurance_life_amount + insurance_property_amount + administrative_fees


def insurance_life_amount(config: LoanConfiguration, effective_principal: float) -> float:
    """Credit-life premium: monthly % of the financed amount."""
    return effective_principal * config.ancillary.insurance_life_rate_pct / 100


def insurance_property_amount(config: LoanConfiguration) -> float:
    """Property premium: annual % of the price, charged monthly."""
    return config.property_price * config.ancillary.insurance_property_rate_pct / 100 / 12


def total_extra_monthly_costs(config: LoanConfiguration, effective_principal: float) -> float:
    """Everything the borrower pays each month besides the installment."""
    return config.extra_monthly_costs + monthly_insurance_costs(
        insurance_life_amount(config, effective_principal),
        insurance_property_amount(config),
        config.ancillary.administrative_fees,
    )


def total_monthly_outlay(payment: float, config: LoanConfiguration, effective_principal: float) -> float:
    """Installment plus all extra monthly costs."""
    return payment + total_extra_monthly_costs(config, effective_principal)
