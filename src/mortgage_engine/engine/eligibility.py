"""Lender product rules — check a configuration against a ``LenderPolicy``."""

from __future__ import annotations

from mortgage_engine.config.lender import LenderPolicy
from mortgage_engine.config.loan import LoanConfiguration
from mortgage_engine.errors import PolicyViolationError


def policy_violations(config: LoanConfiguration, policy: LenderPolicy) -> list[str]:
    """Every rule of ``policy`` that ``config`` breaks.  Empty when compliant."""
    violations: list[str] = []

    if config.down_payment_pct < policy.min_down_payment_pct:
        violations.append(
            f"down payment {config.down_payment_pct:g}% is below the minimum "
            f"of {policy.min_down_payment_pct:g}%"
        )

    if not policy.min_term_years <= config.term_years <= policy.max_term_years:
        violations.append(
            f"term of {config.term_years} years is outside "
            f"{policy.min_term_years}–{policy.max_term_years} years"
        )

    if config.grace is not None:
        if not policy.grace_allowed:
            violations.append("grace periods are not allowed")
        elif policy.grace_max_months is not None and config.grace.months > policy.grace_max_months:
            violations.append(
                f"grace period of {config.grace.months} months exceeds the maximum "
                f"of {policy.grace_max_months}"
            )

    if config.rate_type not in policy.allowed_rate_types:
        violations.append(f"{config.rate_type} rates are not offered")
    elif (
        config.rate_type == "nominal"
        and config.capitalization is not None
        and config.capitalization not in policy.allowed_capitalizations
    ):
        violations.append(f"{config.capitalization} capitalization is not offered")

    return violations


def check_lender_policy(config: LoanConfiguration, policy: LenderPolicy) -> None:
    """Raise ``PolicyViolationError`` if ``config`` breaks any rule of ``policy``."""
    violations = policy_violations(config, policy)
    if violations:
        raise PolicyViolationError(policy.name, violations)
