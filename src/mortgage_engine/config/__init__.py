"""Configuration models — loan inputs and lender rules."""

from mortgage_engine.config.loan import (
    AncillaryCosts,
    BonusConfig,
    GracePolicy,
    LoanConfiguration,
)
from mortgage_engine.config.lender import LenderPolicy
from mortgage_engine.config.loader import load_configuration

__all__ = [
    "AncillaryCosts",
    "BonusConfig",
    "GracePolicy",
    "LoanConfiguration",
    "LenderPolicy",
    "load_configuration",
]
