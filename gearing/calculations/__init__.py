"""Calculation modules for the negative gearing model."""

from .guards import UNAVAILABLE, floor_zero, is_available
from .income_tax import (
    BracketSlice,
    annual_tax,
    tax_breakdown,
    marginal_rate,
    medicare_levy,
    income_tax_with_levy,
    effective_tax_rate,
)
from .amortization import (
    YearAmortization,
    LoanState,
    monthly_payment,
    interest_only_payment,
    simulate_year,
)
from .lmi import select_lmi_tier, estimate_lmi_cost
from .snapshot import (
    PersonTaxProfile,
    ExpenseBreakdown,
    YearOneSnapshot,
    calculate_expenses,
    build_tax_profiles,
    calculate_tax_savings,
    calculate_snapshot,
)

# Projection engine
from .projection import (
    YearlyProjectionRecord,
    ProjectionResult,
    run_projection,
)

# Sensitivity sweep
from .sensitivity import (
    sweepable_parameters,
    default_sensitivity_range,
    run_sensitivity,
)

__all__ = [
    "UNAVAILABLE",
    "floor_zero",
    "is_available",
    "BracketSlice",
    "annual_tax",
    "tax_breakdown",
    "marginal_rate",
    "medicare_levy",
    "income_tax_with_levy",
    "effective_tax_rate",
    "YearAmortization",
    "LoanState",
    "monthly_payment",
    "interest_only_payment",
    "simulate_year",
    "select_lmi_tier",
    "estimate_lmi_cost",
    "PersonTaxProfile",
    "ExpenseBreakdown",
    "YearOneSnapshot",
    "calculate_expenses",
    "build_tax_profiles",
    "calculate_tax_savings",
    "calculate_snapshot",
    # Projection
    "YearlyProjectionRecord",
    "ProjectionResult",
    "run_projection",
    # Sensitivity
    "sweepable_parameters",
    "default_sensitivity_range",
    "run_sensitivity",
]
