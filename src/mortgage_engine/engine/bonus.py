"""Housing bonuses — Nuevo Crédito Mivivienda (BBP) and Techo Propio (BFH).

BBP depends on the property price band; each band carries a standard and a
"sustainable housing" amount.  Prices above ``MAX_MIVIVIENDA`` fall outside
the program (traditional mortgage, no bonus).  Band 5 is still Mivivienda
but carries no bonus.

BFH is a fixed amount per modality.

Both are pure table lookups: no interpolation between bands.  Amounts are
in soles (PEN).
"""

from __future__ import annotations

import logging
import math

from mortgage_engine.config.loan import LoanConfiguration
from mortgage_engine.errors import ConfigurationError
from mortgage_engine.models.results import BonusBand, BonusEligibility, BonusRangeInfo

logger = logging.getLogger(__name__)

BBP_BANDS: tuple[BonusBand, ...] = (
    BonusBand(label="RANGE 1", min_price=68_800, max_price=98_100, bonus=27_400, bonus_sustainable=33_700),
    BonusBand(label="RANGE 2", min_price=98_101, max_price=146_900, bonus=22_800, bonus_sustainable=28_000),
    BonusBand(label="RANGE 3", min_price=146_901, max_price=244_600, bonus=20_900, bonus_sustainable=25_700),
    BonusBand(label="RANGE 4", min_price=244_601, max_price=362_100, bonus=7_800, bonus_sustainable=9_600),
    BonusBand(label="RANGE 5", min_price=362_101, max_price=488_800, bonus=0, bonus_sustainable=0),
)

MAX_MIVIVIENDA = 488_800
"""Price ceiling of the Mivivienda program."""

BFH_AMOUNTS: dict[str, float] = {
    "purchase": 37_557,
    "construction": 32_100,
    "improvement": 10_580,
}


def _find_band(property_price: float) -> BonusBand | None:
    """Band whose inclusive bounds contain the price.

    A price between two bands' integer bounds (e.g. 98_100.50) belongs to
    no band.
    """
    for band in BBP_BANDS:
        if band.min_price <= property_price <= band.max_price:
            return band
    return None


def calculate_bbp(property_price: float, sustainable: bool = False) -> float:
    """BBP amount for ``property_price``; 0 when the price is not eligible."""
    band = _find_band(property_price)
    if band is None:
        return 0.0
    return band.bonus_sustainable if sustainable else band.bonus


def is_mivivienda_eligible(property_price: float) -> bool:
    """True when the price is within the Mivivienda ceiling."""
    return 0 < property_price <= MAX_MIVIVIENDA


def bbp_range_info(property_price: float) -> BonusRangeInfo | None:
    """Band details for the price, or None when no band applies.

    Above the ceiling a pseudo-band "TRADITIONAL" is returned with zero
    bonus and ``is_mivivienda=False``.
    """
    if property_price <= 0:
        return None
    if property_price > MAX_MIVIVIENDA:
        return BonusRangeInfo(
            label="TRADITIONAL",
            min_price=MAX_MIVIVIENDA + 1,
            max_price=math.inf,
            bonus=0,
            bonus_sustainable=0,
            is_mivivienda=False,
        )
    band = _find_band(property_price)
    if band is None:
        return None
    return BonusRangeInfo(**band.model_dump(), is_mivivienda=True)


def bbp_eligibility(property_price: float) -> BonusEligibility:
    """Classify a price as no_price / too_low / too_high / eligible."""
    if property_price <= 0:
        return BonusEligibility(
            status="no_price", eligible=False, can_apply_bonus=False,
            message="Enter a valid price to compute the bonus.",
        )
    lowest = BBP_BANDS[0].min_price
    if property_price < lowest:
        return BonusEligibility(
            status="too_low", eligible=False, can_apply_bonus=False,
            message=f"Price {property_price:,.2f} is below the BBP minimum of {lowest:,.0f}.",
        )
    if property_price > MAX_MIVIVIENDA:
        return BonusEligibility(
            status="too_high", eligible=False, can_apply_bonus=False,
            message=f"Price {property_price:,.2f} exceeds the Mivivienda ceiling of "
                    f"{MAX_MIVIVIENDA:,.0f} (traditional mortgage).",
        )
    band = _find_band(property_price)
    if band is None:
        return BonusEligibility(
            status="too_high", eligible=False, can_apply_bonus=False,
            message=f"Price {property_price:,.2f} falls between BBP bands; not eligible.",
        )
    return BonusEligibility(
        status="eligible", eligible=True, can_apply_bonus=True,
        message=f"Eligible for BBP. {band.label}: bonus {band.bonus:,.0f}.",
    )


def calculate_bfh(modality: str) -> float:
    """BFH amount for a modality (purchase / construction / improvement)."""
    try:
        return BFH_AMOUNTS[modality]
    except KeyError:
        raise ConfigurationError(f"unknown BFH modality: {modality!r}") from None


def resolve_bonus(config: LoanConfiguration) -> float:
    """Bonus amount to subtract from the loan amount.

    An explicit ``bonus.amount`` wins over the tables.
    """
    bonus = config.bonus
    if bonus is None:
        return 0.0
    if bonus.amount is not None:
        return bonus.amount
    if bonus.type == "BFH":
        if bonus.modality is None:
            raise ConfigurationError("BFH bonus requires a modality when no amount is given")
        return calculate_bfh(bonus.modality)

    eligibility = bbp_eligibility(config.property_price)
    if not eligibility.can_apply_bonus:
        logger.warning("BBP requested but not applicable: %s", eligibility.message)
        return 0.0
    return calculate_bbp(config.property_price, bonus.sustainable)
