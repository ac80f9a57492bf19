"""Lookup tables for tax brackets, LMI tiers, and appreciation presets."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class LoanType(Enum):
    """Repayment structure of the investment loan."""

    PRINCIPAL_AND_INTEREST = "P&I"
    INTEREST_ONLY = "IO"

    @classmethod
    def parse(cls, value) -> "LoanType":
        """Read a loan type from a form value, defaulting to P&I."""
        if isinstance(value, cls):
            return value
        if str(value).strip().upper() in ("IO", "INTEREST_ONLY", "INTEREST ONLY"):
            return cls.INTEREST_ONLY
        return cls.PRINCIPAL_AND_INTEREST


@dataclass(frozen=True)
class TaxBracket:
    """A single progressive income tax bracket."""

    threshold: float  # Inclusive lower bound of taxable income
    rate: float  # Fraction, e.g. 0.30 for 30%


@dataclass(frozen=True)
class LmiTier:
    """Lenders mortgage insurance premium for an LVR band."""

    min_lvr_pct: float  # Exclusive lower bound (e.g. 85)
    max_lvr_pct: float  # Inclusive upper bound (e.g. 90)
    rate: float  # Premium as a fraction of the loan amount


# Stage 3 resident rates, effective 1 July 2024
DEFAULT_TAX_BRACKETS: List[TaxBracket] = [
    TaxBracket(threshold=0, rate=0.00),
    TaxBracket(threshold=18_200, rate=0.16),
    TaxBracket(threshold=45_000, rate=0.30),
    TaxBracket(threshold=135_000, rate=0.37),
    TaxBracket(threshold=190_000, rate=0.45),
]

# Flat Medicare levy, applied on top of the bracket rate
DEFAULT_MEDICARE_RATE = 0.02

# Simple approximation of published insurer schedules
DEFAULT_LMI_TIERS: List[LmiTier] = [
    LmiTier(min_lvr_pct=0, max_lvr_pct=80, rate=0.0),
    LmiTier(min_lvr_pct=80, max_lvr_pct=85, rate=0.005),
    LmiTier(min_lvr_pct=85, max_lvr_pct=90, rate=0.01),
    LmiTier(min_lvr_pct=90, max_lvr_pct=95, rate=0.02),
    LmiTier(min_lvr_pct=95, max_lvr_pct=100, rate=0.035),
]

# LVR at or below which no LMI is charged, regardless of the tier table
LMI_FREE_LVR_PCT = 80.0

# Stamp duty, legals and inspections, as a share of the purchase price
UPFRONT_COST_PCT = 0.05

# Long-run annual house price growth by capital city (%)
CITY_APPRECIATION_RATES: Dict[str, float] = {
    "sydney": 6.9,
    "melbourne": 4.6,
    "brisbane": 6.5,
    "perth": 3.1,
    "adelaide": 6.7,
    "hobart": 7.0,
    "canberra": 5.9,
    "darwin": 0.5,
}


def get_city_appreciation_rate(city: str) -> Optional[float]:
    """Get the preset appreciation rate for a city.

    Args:
        city: City key (case-insensitive), e.g. "sydney". "custom" has no preset.

    Returns:
        Annual appreciation in percent, or None when the city has no preset.
    """
    return CITY_APPRECIATION_RATES.get(city.strip().lower())
