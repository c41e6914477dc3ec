"""Engine exceptions."""


class ConfigurationError(ValueError):
    """Raised when inputs cannot produce a schedule (bad rate, term, grace...)."""


class PolicyViolationError(ConfigurationError):
    """Raised when a loan configuration breaks the lender's product rules."""

    def __init__(self, lender: str, violations: list[str]):
        self.lender = lender
        self.violations = violations
        super().__init__(f"{lender}: " + "; ".join(violations))
