"""Finance — rate discovery and investment indicators."""

from mortgage_engine.finance.solver import RootResult, net_present_value, solve_periodic_rate
from mortgage_engine.finance.indicators import (
    compute_convexity,
    compute_duration,
    compute_indicators,
    compute_modified_duration,
    compute_tcea,
    compute_tir,
    compute_trea,
    compute_van,
)

__all__ = [
    "RootResult",
    "net_present_value",
    "solve_periodic_rate",
    "compute_convexity",
    "compute_duration",
    "compute_indicators",
    "compute_modified_duration",
    "compute_tcea",
    "compute_tir",
    "compute_trea",
    "compute_van",
]
