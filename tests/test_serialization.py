"""Serialization round-trip tests — inputs and results survive JSON encode/decode."""

from __future__ import annotations

import json
from datetime import date

from mortgage_engine.config import LoanConfiguration
from mortgage_engine.engine.orchestrator import simulate
from mortgage_engine.models.results import AmortizationRow, FinancialIndicators


def test_loan_configuration_round_trip(loan_config: LoanConfiguration):
    """Loan configuration survives JSON encode/decode."""
    restored = LoanConfiguration.model_validate_json(loan_config.model_dump_json())
    assert restored == loan_config


def test_amortization_row_round_trip():
    """Schedule rows survive JSON encode/decode, dates included."""
    original = AmortizationRow(
        period=1,
        date=date(2024, 1, 31),
        initial_balance=100_000.0,
        interest=700.0,
        payment=775.27,
        amortization=75.27,
        final_balance=99_924.73,
    )
    restored = AmortizationRow.model_validate_json(original.model_dump_json())
    assert restored == original


def test_indicators_round_trip(loan_config: LoanConfiguration, start_date: date):
    """A full simulation result survives JSON encode/decode."""
    original = simulate(loan_config, start_date=start_date)
    restored = FinancialIndicators.model_validate_json(original.model_dump_json())
    assert restored == original


def test_indicators_json_shape(loan_config: LoanConfiguration, start_date: date):
    """The JSON carries every indicator and ISO dates."""
    data = json.loads(simulate(loan_config, start_date=start_date).model_dump_json())
    for key in ("monthly_payment", "tcea", "trea", "van", "tir", "duration",
                "modified_duration", "convexity", "amortization_table"):
        assert key in data
    assert data["amortization_table"][0]["date"] == "2024-01-31"
    assert len(data["amortization_table"]) == 240
