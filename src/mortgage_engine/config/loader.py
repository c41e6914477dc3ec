"""YAML scenario loading."""

from __future__ import annotations

from pathlib import Path

import yaml

from mortgage_engine.config.loan import LoanConfiguration


def load_configuration(path: str | Path) -> LoanConfiguration:
    """Read a YAML file and validate it into a ``LoanConfiguration``.

    Missing keys fall back to the model defaults; an empty file yields the
    default configuration.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return LoanConfiguration.model_validate(data)
