"""Loan configuration — everything the caller supplies for one simulation."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

Currency = Literal["PEN", "USD"]
RateType = Literal["effective", "nominal"]
Capitalization = Literal["monthly", "bimonthly", "quarterly", "semiannual", "annual"]
GraceKind = Literal["total", "partial"]
BonusType = Literal["BBP", "BFH"]
BFHModality = Literal["purchase", "construction", "improvement"]


class GracePolicy(BaseModel):
    """Initial months with no capital repayment.

    ``total``   = nothing is paid, interest capitalizes into the balance.
    ``partial`` = only interest is paid, the balance is unchanged.
    """

    kind: GraceKind = Field(default="partial", description="'total' or 'partial' grace")
    months: int = Field(default=6, ge=1, description="Length of the grace segment (months)")


class BonusConfig(BaseModel):
    """Government housing subsidy applied against the financed amount.

    BBP (Bono del Buen Pagador) is derived from the property price band;
    BFH (Bono Familiar Habitacional) is a fixed amount per modality.
    An explicit ``amount`` overrides the table lookup.
    """

    type: BonusType = Field(default="BBP", description="'BBP' (Mivivienda) or 'BFH' (Techo Propio)")
    amount: float | None = Field(
        default=None, ge=0,
        description="Explicit bonus amount. None = derive from the bonus tables.",
    )
    sustainable: bool = Field(
        default=False,
        description="BBP only: sustainable housing raises the bonus of the band.",
    )
    modality: BFHModality | None = Field(
        default=None,
        description="BFH only: purchase, construction or improvement.",
    )

    @model_validator(mode="after")
    def _bfh_needs_modality(self) -> "BonusConfig":
        if self.type == "BFH" and self.amount is None and self.modality is None:
            raise ValueError("BFH bonus requires a modality when no amount is given")
        return self


class AncillaryCosts(BaseModel):
    """Insurance and fees the borrower pays every month on top of the installment."""

    insurance_life_rate_pct: float = Field(
        default=0.0, ge=0, le=100,
        description="Credit-life insurance, monthly % of the financed amount.",
    )
    insurance_property_rate_pct: float = Field(
        default=0.0, ge=0, le=100,
        description="Property insurance, annual % of the property price (charged /12).",
    )
    administrative_fees: float = Field(
        default=0.0, ge=0,
        description="Flat administrative fees per month.",
    )


class LoanConfiguration(BaseModel):
    """One mortgage simulation request.

    Rates are annual percentages (8.5 = 8.5%).  ``capitalization`` is only
    read when ``rate_type == 'nominal'`` and is mandatory in that case.
    """

    property_price: float = Field(default=250_000.0, gt=0, description="Property price")
    down_payment_pct: float = Field(default=20.0, ge=0, le=100, description="Down payment (% of price)")
    term_years: int = Field(default=20, ge=1, le=30, description="Loan term (years)")
    currency: Currency = Field(default="PEN", description="Currency of all money amounts")

    rate_type: RateType = Field(default="effective", description="TEA ('effective') or TNA ('nominal')")
    interest_rate_annual: float = Field(default=8.5, ge=0, description="Annual interest rate (%)")
    capitalization: Capitalization | None = Field(
        default=None,
        description="Compounding frequency of a nominal rate. Required iff rate_type='nominal'.",
    )

    grace: GracePolicy | None = Field(default=None, description="Optional grace period")
    bonus: BonusConfig | None = Field(default=None, description="Optional housing bonus")

    extra_monthly_costs: float = Field(
        default=0.0, ge=0,
        description="Other monthly costs borne by the borrower (not insurance/fees).",
    )
    ancillary: AncillaryCosts = Field(default_factory=AncillaryCosts)
    discount_rate_annual: float = Field(
        default=8.0, ge=0,
        description="Annual effective discount rate (%) for VAN, duration and convexity. "
                    "Independent of the loan rate.",
    )

    @model_validator(mode="after")
    def _check_consistency(self) -> "LoanConfiguration":
        if self.rate_type == "nominal" and self.capitalization is None:
            raise ValueError("a nominal rate requires a capitalization frequency")
        if self.grace is not None and self.grace.months >= self.term_months:
            raise ValueError(
                f"grace period ({self.grace.months} months) must be shorter than "
                f"the term ({self.term_months} months)"
            )
        return self

    @property
    def term_months(self) -> int:
        return self.term_years * 12

    @property
    def loan_amount(self) -> float:
        """Price net of the down payment, before any bonus."""
        return self.property_price * (1 - self.down_payment_pct / 100)
