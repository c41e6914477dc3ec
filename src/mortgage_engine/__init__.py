"""Mortgage financial-indicator engine.

Turns a loan configuration into a French-method amortization schedule and
its risk/return indicators (VAN, TIR, TCEA, TREA, duration, convexity).
"""

from mortgage_engine.config import LenderPolicy, LoanConfiguration
from mortgage_engine.engine.orchestrator import simulate
from mortgage_engine.errors import ConfigurationError, PolicyViolationError
from mortgage_engine.finance.indicators import compute_indicators
from mortgage_engine.models import AmortizationRow, FinancialIndicators

__all__ = [
    "LenderPolicy",
    "LoanConfiguration",
    "simulate",
    "ConfigurationError",
    "PolicyViolationError",
    "compute_indicators",
    "AmortizationRow",
    "FinancialIndicators",
]
