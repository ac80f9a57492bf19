"""Data models for the negative gearing calculation engine."""

from .lookups import (
    LoanType,
    TaxBracket,
    LmiTier,
    DEFAULT_TAX_BRACKETS,
    DEFAULT_MEDICARE_RATE,
    DEFAULT_LMI_TIERS,
    LMI_FREE_LVR_PCT,
    UPFRONT_COST_PCT,
    CITY_APPRECIATION_RATES,
    get_city_appreciation_rate,
)
from .inputs import (
    InvestmentInputs,
    TaxConfig,
    read_number,
)

__all__ = [
    "LoanType",
    "TaxBracket",
    "LmiTier",
    "DEFAULT_TAX_BRACKETS",
    "DEFAULT_MEDICARE_RATE",
    "DEFAULT_LMI_TIERS",
    "LMI_FREE_LVR_PCT",
    "UPFRONT_COST_PCT",
    "CITY_APPRECIATION_RATES",
    "get_city_appreciation_rate",
    "InvestmentInputs",
    "TaxConfig",
    "read_number",
]
