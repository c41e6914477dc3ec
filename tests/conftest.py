"""Shared test fixtures — sample configurations matching base_case.yaml."""

from __future__ import annotations

from datetime import date

import pytest

from mortgage_engine.config import (
    AncillaryCosts,
    BonusConfig,
    GracePolicy,
    LenderPolicy,
    LoanConfiguration,
)


@pytest.fixture
def start_date() -> date:
    return date(2024, 1, 1)


@pytest.fixture
def ancillary() -> AncillaryCosts:
    return AncillaryCosts(
        insurance_life_rate_pct=0.05,
        insurance_property_rate_pct=0.30,
        administrative_fees=10.0,
    )


@pytest.fixture
def loan_config(ancillary: AncillaryCosts) -> LoanConfiguration:
    return LoanConfiguration(
        property_price=180_000,
        down_payment_pct=20,
        term_years=20,
        currency="PEN",
        rate_type="nominal",
        interest_rate_annual=9.0,
        capitalization="monthly",
        grace=GracePolicy(kind="partial", months=6),
        bonus=BonusConfig(type="BBP"),
        extra_monthly_costs=25.0,
        ancillary=ancillary,
        discount_rate_annual=8.0,
    )


@pytest.fixture
def plain_config() -> LoanConfiguration:
    """No grace, no bonus, no extra costs — 8.5% TEA over 20 years."""
    return LoanConfiguration(
        property_price=250_000,
        down_payment_pct=20,
        term_years=20,
        rate_type="effective",
        interest_rate_annual=8.5,
        discount_rate_annual=8.5,
    )


@pytest.fixture
def lender() -> LenderPolicy:
    return LenderPolicy(
        name="Banco Demo",
        allowed_rate_types=["effective", "nominal"],
        allowed_capitalizations=["monthly", "quarterly"],
        min_down_payment_pct=10,
        min_term_years=5,
        max_term_years=25,
        grace_allowed=True,
        grace_max_months=12,
    )
