"""Engine — rates, schedule, cash flows, bonuses and the simulation pipeline."""

from mortgage_engine.engine.rates import (
    effective_annual_to_monthly,
    nominal_to_effective_annual,
    periodic_rate,
)
from mortgage_engine.engine.schedule import annuity_payment, build_amortization_schedule
from mortgage_engine.engine.cashflow import bank_cash_flows, client_cash_flows, total_extra_monthly_costs
from mortgage_engine.engine.bonus import (
    bbp_eligibility,
    bbp_range_info,
    calculate_bbp,
    calculate_bfh,
    resolve_bonus,
)
from mortgage_engine.engine.eligibility import check_lender_policy, policy_violations
from mortgage_engine.engine.orchestrator import effective_principal, simulate

__all__ = [
    "effective_annual_to_monthly",
    "nominal_to_effective_annual",
    "periodic_rate",
    "annuity_payment",
    "build_amortization_schedule",
    "bank_cash_flows",
    "client_cash_flows",
    "total_extra_monthly_costs",
    "bbp_eligibility",
    "bbp_range_info",
    "calculate_bbp",
    "calculate_bfh",
    "resolve_bonus",
    "check_lender_policy",
    "policy_violations",
    "effective_principal",
    "simulate",
]
