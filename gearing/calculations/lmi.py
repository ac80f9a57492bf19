"""Lenders Mortgage Insurance (LMI) estimation.

LMI is charged when the loan-to-value ratio exceeds 80%. The premium is a
flat percentage of the loan amount, chosen by LVR band from a tier table.
"""

import logging
from typing import Optional, Sequence

from ..models.lookups import LMI_FREE_LVR_PCT, LmiTier

logger = logging.getLogger(__name__)


def select_lmi_tier(lvr_pct: float, tiers: Sequence[LmiTier]) -> Optional[LmiTier]:
    """Find the tier whose band contains ``lvr_pct``.

    The first tier with ``min_lvr_pct < lvr_pct <= max_lvr_pct`` wins. When
    no band matches, the last tier is used.

    Args:
        lvr_pct: Loan-to-value ratio in percent (e.g. 88.0).
        tiers: Tiers sorted ascending by ``min_lvr_pct``.

    Returns:
        The matching tier, or None for an empty table.
    """
    if not tiers:
        return None
    for tier in tiers:
        if tier.min_lvr_pct < lvr_pct <= tier.max_lvr_pct:
            return tier
    logger.debug("LVR %.2f%% outside all LMI tiers; using last tier", lvr_pct)
    return tiers[-1]


def estimate_lmi_cost(
    lvr_pct: float,
    loan_amount: float,
    tiers: Sequence[LmiTier],
) -> float:
    """Estimate the LMI premium.

    Args:
        lvr_pct: Base (pre-LMI) loan-to-value ratio in percent.
        loan_amount: Base loan amount.
        tiers: LMI tier table.

    Returns:
        Premium in dollars. Zero at or below 80% LVR, whatever the table says.
    """
    if lvr_pct <= LMI_FREE_LVR_PCT:
        return 0.0

    tier = select_lmi_tier(lvr_pct, tiers)
    if tier is None:
        logger.warning("No LMI tiers configured; LMI for %.2f%% LVR taken as zero", lvr_pct)
        return 0.0

    return loan_amount * tier.rate
