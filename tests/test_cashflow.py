"""Tests for engine/cashflow.py — client/bank series and ancillary costs."""

from __future__ import annotations

from datetime import date

import pytest

from mortgage_engine.config import AncillaryCosts, GracePolicy, LoanConfiguration
from mortgage_engine.engine.cashflow import (
    bank_cash_flows,
    client_cash_flows,
    insurance_life_amount,
    insurance_property_amount,
    monthly_insurance_costs,
    total_extra_monthly_costs,
    total_monthly_outlay,
)
from mortgage_engine.engine.schedule import build_amortization_schedule


@pytest.fixture
def rows():
    return build_amortization_schedule(
        100_000, 0.007, 240, GracePolicy(kind="total", months=6), date(2024, 1, 1),
    )


class TestSeries:
    def test_lengths_match_schedule(self, rows):
        """Both series have one entry per schedule row."""
        assert len(client_cash_flows(rows, 50.0)) == len(rows)
        assert len(bank_cash_flows(rows)) == len(rows)

    def test_client_series_includes_extra_costs(self, rows):
        """Client flow = −(payment + extra costs)."""
        client = client_cash_flows(rows, 50.0)
        for cf, row in zip(client, rows):
            assert cf == -(row.payment + 50.0)

    def test_bank_series_is_payment_only(self, rows):
        """Bank flow = −payment."""
        bank = bank_cash_flows(rows)
        for cf, row in zip(bank, rows):
            assert cf == -row.payment

    def test_extra_costs_charged_during_grace(self, rows):
        """Extra costs are due even when no installment is."""
        client = client_cash_flows(rows, 50.0)
        assert client[:6] == [-50.0] * 6
        assert bank_cash_flows(rows)[:6] == [0.0] * 6

    def test_all_flows_are_outflows(self, rows):
        """Every flow is ≤ 0."""
        assert all(cf <= 0 for cf in client_cash_flows(rows, 50.0))
        assert all(cf <= 0 for cf in bank_cash_flows(rows))

    def test_no_extra_costs_series_coincide(self, rows):
        """Without extra costs, client and bank series are identical."""
        assert client_cash_flows(rows) == bank_cash_flows(rows)


class TestAncillaryCosts:
    def test_monthly_insurance_costs_sum(self):
        """Insurance and fees simply add up."""
        assert monthly_insurance_costs(10.0, 20.0, 5.0) == 35.0
        assert monthly_insurance_costs() == 0.0

    def test_life_insurance_on_financed_amount(self):
        """Life insurance is a monthly % of the financed amount."""
        cfg = LoanConfiguration(ancillary=AncillaryCosts(insurance_life_rate_pct=0.05))
        assert insurance_life_amount(cfg, 100_000) == pytest.approx(50.0)

    def test_property_insurance_on_price(self):
        """Property insurance is an annual % of the price, charged monthly."""
        cfg = LoanConfiguration(
            property_price=240_000,
            ancillary=AncillaryCosts(insurance_property_rate_pct=0.30),
        )
        # 240000 × 0.30% / 12 = 60
        assert insurance_property_amount(cfg) == pytest.approx(60.0)

    def test_total_extra_monthly_costs(self):
        """Other costs + life + property + fees."""
        cfg = LoanConfiguration(
            property_price=240_000,
            extra_monthly_costs=25.0,
            ancillary=AncillaryCosts(
                insurance_life_rate_pct=0.05,
                insurance_property_rate_pct=0.30,
                administrative_fees=10.0,
            ),
        )
        # 25 + 50 (life on 100k) + 60 (property) + 10 (fees)
        assert total_extra_monthly_costs(cfg, 100_000) == pytest.approx(145.0)
        assert total_monthly_outlay(1_000.0, cfg, 100_000) == pytest.approx(1_145.0)

    def test_defaults_add_nothing(self):
        """Default configuration carries no extra costs."""
        assert total_extra_monthly_costs(LoanConfiguration(), 150_000) == 0.0
