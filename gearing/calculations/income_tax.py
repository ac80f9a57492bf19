"""Progressive income tax and marginal rate lookup."""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..models.lookups import TaxBracket


@dataclass
class BracketSlice:
    """Portion of income taxed within a single bracket."""

    lower: float
    upper: Optional[float]  # None for the open-ended top bracket
    rate: float
    taxable_amount: float
    tax: float


def _upper_bound(brackets: Sequence[TaxBracket], index: int) -> float:
    if index + 1 < len(brackets):
        return brackets[index + 1].threshold
    return float("inf")


def annual_tax(taxable_income: float, brackets: Sequence[TaxBracket]) -> float:
    """Calculate progressive income tax, excluding levies and offsets.

    Each bracket taxes the slice of income between its threshold and the
    next bracket's threshold (or without limit for the last bracket):

        tax = sum(max(0, min(I, upper_i) - lower_i) * rate_i)

    Args:
        taxable_income: Annual taxable income.
        brackets: Brackets sorted ascending by threshold.

    Returns:
        Tax payable. Zero for non-positive income or an empty schedule.

    Example:
        >>> annual_tax(120_000, DEFAULT_TAX_BRACKETS)
        26788.0
    """
    if taxable_income <= 0:
        return 0.0
    return sum(s.tax for s in tax_breakdown(taxable_income, brackets))


def tax_breakdown(taxable_income: float, brackets: Sequence[TaxBracket]) -> List[BracketSlice]:
    """Split taxable income into per-bracket slices.

    Args:
        taxable_income: Annual taxable income.
        brackets: Brackets sorted ascending by threshold.

    Returns:
        One BracketSlice per bracket that income reaches.
    """
    slices: List[BracketSlice] = []
    if taxable_income <= 0:
        return slices

    for i, bracket in enumerate(brackets):
        if taxable_income <= bracket.threshold:
            continue
        upper = _upper_bound(brackets, i)
        amount = max(0.0, min(taxable_income, upper) - bracket.threshold)
        slices.append(BracketSlice(
            lower=bracket.threshold,
            upper=None if upper == float("inf") else upper,
            rate=bracket.rate,
            taxable_amount=amount,
            tax=amount * bracket.rate,
        ))
    return slices


def marginal_rate(taxable_income: float, brackets: Sequence[TaxBracket]) -> float:
    """Rate of the bracket containing ``taxable_income``.

    Scans ascending and returns the first bracket that is either the last
    one or whose successor starts above the income. Levies are not included.
    """
    for i, bracket in enumerate(brackets):
        is_last = i + 1 >= len(brackets)
        if is_last or taxable_income < brackets[i + 1].threshold:
            return bracket.rate
    return 0.0


def medicare_levy(taxable_income: float, medicare_rate: float) -> float:
    """Flat Medicare levy on positive income (no low-income phase-in)."""
    if taxable_income <= 0:
        return 0.0
    return taxable_income * medicare_rate


def income_tax_with_levy(
    taxable_income: float,
    brackets: Sequence[TaxBracket],
    medicare_rate: float,
) -> float:
    """Bracket tax plus the flat Medicare levy."""
    return annual_tax(taxable_income, brackets) + medicare_levy(taxable_income, medicare_rate)


def effective_tax_rate(taxable_income: float, brackets: Sequence[TaxBracket]) -> float:
    """Average bracket tax rate; zero for non-positive income."""
    if taxable_income <= 0:
        return 0.0
    return annual_tax(taxable_income, brackets) / taxable_income
