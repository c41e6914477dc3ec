"""Lender product rules — what a financial entity accepts."""

from pydantic import BaseModel, Field, model_validator

from mortgage_engine.config.loan import Capitalization, RateType


class LenderPolicy(BaseModel):
    """Constraints a financial entity places on the loans it grants.

    Defaults match the fallbacks used when an entity leaves a field empty.
    """

    name: str = Field(default="Generic lender", description="Human label")
    allowed_rate_types: list[RateType] = Field(
        default_factory=lambda: ["effective", "nominal"],
        description="Rate types the entity quotes.",
    )
    allowed_capitalizations: list[Capitalization] = Field(
        default_factory=lambda: ["monthly", "bimonthly", "quarterly", "semiannual", "annual"],
        description="Compounding frequencies accepted for nominal rates.",
    )
    min_down_payment_pct: float = Field(default=10.0, ge=0, le=100, description="Minimum down payment (%)")
    min_term_years: int = Field(default=5, ge=1, description="Shortest term offered (years)")
    max_term_years: int = Field(default=30, ge=1, description="Longest term offered (years)")
    grace_allowed: bool = Field(default=True, description="Whether any grace period is accepted")
    grace_max_months: int | None = Field(
        default=None, ge=1,
        description="Longest grace period accepted. None = no explicit cap.",
    )

    @model_validator(mode="after")
    def _check_term_range(self) -> "LenderPolicy":
        if self.min_term_years > self.max_term_years:
            raise ValueError(
                f"min_term_years ({self.min_term_years}) exceeds "
                f"max_term_years ({self.max_term_years})"
            )
        return self
