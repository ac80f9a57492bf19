"""Input data model for a property investment scenario.

Inputs arrive from a form where any field may be empty or malformed. The
helpers here read such values tolerantly (anything unreadable becomes zero)
so the engine always receives well-formed numbers.
"""

import logging
import math
from dataclasses import dataclass, field, fields, replace
from typing import Any, Iterable, List, Mapping

from .lookups import (
    DEFAULT_LMI_TIERS,
    DEFAULT_MEDICARE_RATE,
    DEFAULT_TAX_BRACKETS,
    LmiTier,
    LoanType,
    TaxBracket,
)

logger = logging.getLogger(__name__)


def read_number(value: Any) -> float:
    """Read a numeric form value, treating anything unreadable as zero.

    Accepts numbers and numeric strings (thousands separators and a leading
    "$" are ignored). Empty strings, None, non-numeric text and non-finite
    values all read as 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip().replace(",", "").lstrip("$")
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


@dataclass
class InvestmentInputs:
    """Complete scalar inputs for one investment scenario.

    Rates entered as percentages keep a ``_pct`` suffix (6.0 means 6%).
    """

    # === Household ===
    salary_self: float = 120_000.0
    salary_spouse: float = 0.0
    ownership_self_pct: float = 100.0  # Spouse owns the remainder

    # === Purchase ===
    purchase_price: float = 800_000.0
    deposit: float = 160_000.0
    weekly_rent: float = 600.0

    # === Investment Loan ===
    interest_rate_pct: float = 6.0
    loan_term_years: float = 30
    loan_type: LoanType = LoanType.PRINCIPAL_AND_INTEREST

    # === Annual Expenses ===
    council_rates: float = 2_000.0
    water_rates: float = 1_000.0
    landlord_insurance: float = 1_500.0
    management_fee_pct: float = 7.0  # Of annual rent
    maintenance_pct: float = 0.5  # Of purchase price
    depreciation: float = 5_000.0

    # === Transaction Costs ===
    agent_purchase_pct: float = 0.0  # Buyer's agent, of purchase price
    agent_selling_pct: float = 2.0  # Selling commission, of purchase price
    marketing_costs: float = 3_000.0

    # === Projection ===
    appreciation_pct: float = 5.0
    horizon_years: int = 10
    invest_delay_years: int = 0

    # === Existing Home Loan (PPOR) ===
    ppor_value: float = 1_000_000.0
    ppor_balance: float = 500_000.0
    ppor_rate_pct: float = 6.0
    ppor_term_years: int = 25
    ppor_appreciation_pct: float = 6.9
    ppor_extra_monthly: float = 0.0

    @property
    def ownership_self(self) -> float:
        """Self ownership share as a fraction in [0, 1]."""
        return min(100.0, max(0.0, self.ownership_self_pct)) / 100

    @property
    def ownership_spouse(self) -> float:
        """Spouse ownership share; always ``1 - ownership_self``."""
        return 1 - self.ownership_self

    def normalized(self) -> "InvestmentInputs":
        """Return a copy with projection controls clamped to usable ranges.

        Appreciation cannot fall below -100%, the horizon is at least one
        whole year, the activation delay is a whole number of years, and the
        existing home loan has non-negative amounts and a term of at least
        one year.
        """
        return replace(
            self,
            ownership_self_pct=min(100.0, max(0.0, self.ownership_self_pct)),
            appreciation_pct=max(-100.0, self.appreciation_pct),
            horizon_years=max(1, math.floor(self.horizon_years)),
            invest_delay_years=max(0, math.floor(self.invest_delay_years)),
            ppor_value=max(0.0, self.ppor_value),
            ppor_balance=max(0.0, self.ppor_balance),
            ppor_rate_pct=max(0.0, self.ppor_rate_pct),
            ppor_term_years=max(1, math.floor(self.ppor_term_years)),
            ppor_appreciation_pct=max(-100.0, self.ppor_appreciation_pct),
            ppor_extra_monthly=max(0.0, self.ppor_extra_monthly),
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "InvestmentInputs":
        """Build inputs from raw form values.

        Missing keys keep their defaults; present keys are read with
        :func:`read_number`, so malformed values become zero.

        Args:
            values: Field name to raw value (string, number, or None).

        Returns:
            InvestmentInputs populated from the mapping.
        """
        kwargs = {}
        for f in fields(cls):
            if f.name not in values:
                continue
            raw = values[f.name]
            if f.name == "loan_type":
                kwargs[f.name] = LoanType.parse(raw)
            elif f.type is int or f.type == "int":
                kwargs[f.name] = math.floor(read_number(raw))
            else:
                kwargs[f.name] = read_number(raw)
        return cls(**kwargs)


@dataclass
class TaxConfig:
    """Tax and LMI configuration, read fresh for every recompute."""

    brackets: List[TaxBracket] = field(default_factory=lambda: list(DEFAULT_TAX_BRACKETS))
    lmi_tiers: List[LmiTier] = field(default_factory=lambda: list(DEFAULT_LMI_TIERS))
    medicare_rate: float = DEFAULT_MEDICARE_RATE  # Fraction, e.g. 0.02

    @classmethod
    def from_tables(
        cls,
        bracket_rows: Iterable[Mapping[str, Any]],
        tier_rows: Iterable[Mapping[str, Any]],
        medicare_rate_pct: Any = DEFAULT_MEDICARE_RATE * 100,
    ) -> "TaxConfig":
        """Build configuration from user-edited table rows.

        Bracket rows carry ``threshold`` and ``rate_pct``; tier rows carry
        ``min_lvr_pct``, ``max_lvr_pct`` and ``rate_pct``. Percentages are
        converted to fractions and rows are sorted ascending. Rows are not
        otherwise validated: overlapping or duplicate entries are kept and
        resolved by first-match lookup.

        Args:
            bracket_rows: Tax bracket table rows.
            tier_rows: LMI tier table rows.
            medicare_rate_pct: Medicare levy in percent.

        Returns:
            TaxConfig with sorted tables.
        """
        brackets = sorted(
            (
                TaxBracket(
                    threshold=read_number(row.get("threshold")),
                    rate=read_number(row.get("rate_pct")) / 100,
                )
                for row in bracket_rows
            ),
            key=lambda b: b.threshold,
        )
        tiers = sorted(
            (
                LmiTier(
                    min_lvr_pct=read_number(row.get("min_lvr_pct")),
                    max_lvr_pct=read_number(row.get("max_lvr_pct")),
                    rate=read_number(row.get("rate_pct")) / 100,
                )
                for row in tier_rows
            ),
            key=lambda t: t.min_lvr_pct,
        )
        if not brackets:
            logger.warning("Tax bracket table is empty; income tax will be zero")
        if not tiers:
            logger.warning("LMI tier table is empty; LMI will be zero")
        return cls(
            brackets=brackets,
            lmi_tiers=tiers,
            medicare_rate=read_number(medicare_rate_pct) / 100,
        )
