"""Multi-year net worth projection: invest in property vs pay down the home loan.

Two paths are advanced in lockstep, one year per step:

- Invest: buy the investment property (the loan may stay dormant for
  ``invest_delay_years``) while the existing home loan (PPOR) amortizes on
  its own schedule plus a constant extra monthly payment.
- No Invest: put the deposit against the PPOR at time zero and, once the
  investment would have started, redirect the investment's monthly
  before-tax out-of-pocket cost into extra PPOR repayments.

The No Invest path's extra repayment for a year depends on the Invest
path's figures for that same year, so each step computes the Invest path
first and only then advances the No Invest PPOR.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..models.inputs import InvestmentInputs, TaxConfig
from .amortization import LoanState, YearAmortization
from .guards import floor_zero
from .snapshot import (
    PersonTaxProfile,
    YearOneSnapshot,
    build_tax_profiles,
    calculate_snapshot,
    calculate_tax_savings,
)

logger = logging.getLogger(__name__)

# PPOR balances at or below this are treated as repaid
PAID_OFF_BALANCE = 1e-6


@dataclass(frozen=True)
class YearlyProjectionRecord:
    """Both paths' position at the end of one projection year."""

    year: int

    # Invest path: investment property
    loan_balance: float
    property_value: float
    equity: float  # Before selling costs
    interest_paid: float
    principal_paid: float
    rent: float
    expenses: float
    tax_savings: float
    after_tax_cashflow: float
    cumulative_after_tax_cashflow: float
    selling_costs: float  # Applied on the final year only
    investment_active: bool

    # Existing home loan under each path
    ppor_balance_invest: float
    ppor_value_invest: float
    ppor_balance_no_invest: float
    ppor_value_no_invest: float
    redirected_monthly: float  # Extra No Invest repayment from invest OOP

    # Net worth
    invest_net_worth: float
    no_invest_net_worth: float

    @property
    def net_worth_difference(self) -> float:
        return self.invest_net_worth - self.no_invest_net_worth


@dataclass
class ProjectionResult:
    """Year 0 plus one record per projection year."""

    snapshot: YearOneSnapshot
    records: List[YearlyProjectionRecord] = field(default_factory=list)

    @property
    def years(self) -> List[YearlyProjectionRecord]:
        """Simulated years, excluding the year 0 anchor."""
        return self.records[1:]

    @property
    def final(self) -> YearlyProjectionRecord:
        return self.records[-1]

    @property
    def final_invest_net_worth(self) -> float:
        return self.final.invest_net_worth

    @property
    def final_no_invest_net_worth(self) -> float:
        return self.final.no_invest_net_worth

    @property
    def net_worth_difference(self) -> float:
        """Final Invest net worth minus final No Invest net worth."""
        return self.final.net_worth_difference


@dataclass
class _InvestYear:
    """Invest path cashflows for one year, before anything is committed."""

    amortization: YearAmortization
    rent: float
    expenses: float
    taxable_result: float
    tax_savings: float
    after_tax_cashflow: float
    oop_before_tax_monthly: float


@dataclass
class _ProjectionState:
    """Mutable balances and values carried between years."""

    property_value: float
    ppor_invest: LoanState
    ppor_no_invest: LoanState
    ppor_value_invest: float
    ppor_value_no_invest: float
    invest_loan: Optional[LoanState] = None
    cumulative_after_tax: float = 0.0


def _year_zero_record(
    inputs: InvestmentInputs,
    snapshot: YearOneSnapshot,
    ppor_balance_no_invest: float,
) -> YearlyProjectionRecord:
    """Initial position of both paths, before appreciation or amortization."""
    investment_equity = floor_zero(
        inputs.purchase_price - snapshot.loan_amount - snapshot.agent_purchase_cost
    )
    ppor_equity = floor_zero(inputs.ppor_value - inputs.ppor_balance)

    return YearlyProjectionRecord(
        year=0,
        loan_balance=snapshot.loan_amount,
        property_value=inputs.purchase_price,
        equity=investment_equity,
        interest_paid=0.0,
        principal_paid=0.0,
        rent=0.0,
        expenses=0.0,
        tax_savings=0.0,
        after_tax_cashflow=0.0,
        cumulative_after_tax_cashflow=0.0,
        selling_costs=0.0,
        investment_active=False,
        ppor_balance_invest=inputs.ppor_balance,
        ppor_value_invest=inputs.ppor_value,
        ppor_balance_no_invest=ppor_balance_no_invest,
        ppor_value_no_invest=inputs.ppor_value,
        redirected_monthly=0.0,
        invest_net_worth=investment_equity + ppor_equity,
        no_invest_net_worth=floor_zero(inputs.ppor_value - ppor_balance_no_invest),
    )


def _invest_year(
    year: int,
    state: _ProjectionState,
    inputs: InvestmentInputs,
    snapshot: YearOneSnapshot,
    profiles: Tuple[PersonTaxProfile, PersonTaxProfile],
) -> _InvestYear:
    """Run the investment loan for a year and derive its cashflows."""
    active = year > inputs.invest_delay_years

    if active and state.invest_loan is None:
        state.invest_loan = LoanState.open(
            snapshot.loan_amount,
            inputs.interest_rate_pct,
            inputs.loan_term_years,
            inputs.loan_type,
        )
        logger.debug("Investment loan of %.0f activated in year %d", snapshot.loan_amount, year)

    if state.invest_loan is not None:
        amortization = state.invest_loan.run_year()
    else:
        amortization = YearAmortization(0.0, 0.0, 0.0, 0.0)

    rent = snapshot.annual_rent if active else 0.0
    expenses = snapshot.itemised_expenses if active else 0.0
    depreciation = inputs.depreciation if active else 0.0

    interest = amortization.interest_paid
    principal = amortization.principal_paid
    taxable_result = rent - expenses - interest - depreciation
    tax_savings = sum(calculate_tax_savings(taxable_result, profiles))

    oop_before_tax = (expenses + interest + principal) - rent

    return _InvestYear(
        amortization=amortization,
        rent=rent,
        expenses=expenses,
        taxable_result=taxable_result,
        tax_savings=tax_savings,
        after_tax_cashflow=(rent - expenses - interest - principal) + tax_savings,
        oop_before_tax_monthly=floor_zero(oop_before_tax / 12),
    )


def _advance_ppor(loan: LoanState, extra_monthly: float) -> None:
    if loan.balance <= PAID_OFF_BALANCE:
        return
    loan.run_year(extra_monthly=extra_monthly)


def _advance_year(
    year: int,
    state: _ProjectionState,
    inputs: InvestmentInputs,
    snapshot: YearOneSnapshot,
    profiles: Tuple[PersonTaxProfile, PersonTaxProfile],
) -> YearlyProjectionRecord:
    """Advance both paths by one year and record the result.

    Order within the year matters: the Invest path's out-of-pocket figure
    must be known before the No Invest PPOR is amortized.
    """
    invest = _invest_year(year, state, inputs, snapshot, profiles)
    loan_balance = state.invest_loan.balance if state.invest_loan is not None else 0.0

    state.property_value *= 1 + inputs.appreciation_pct / 100
    state.ppor_value_invest *= 1 + inputs.ppor_appreciation_pct / 100
    state.ppor_value_no_invest *= 1 + inputs.ppor_appreciation_pct / 100

    state.cumulative_after_tax += invest.after_tax_cashflow
    equity = floor_zero(state.property_value - loan_balance)

    _advance_ppor(state.ppor_invest, inputs.ppor_extra_monthly)

    active = year > inputs.invest_delay_years
    redirected = invest.oop_before_tax_monthly if active else 0.0
    _advance_ppor(state.ppor_no_invest, inputs.ppor_extra_monthly + redirected)

    # Selling costs come off the terminal value only
    if year == inputs.horizon_years:
        selling_costs = snapshot.total_selling_costs
        terminal_value = floor_zero(state.property_value - selling_costs)
        investment_equity = floor_zero(terminal_value - loan_balance)
    else:
        selling_costs = 0.0
        investment_equity = equity

    invest_net_worth = (
        investment_equity
        + floor_zero(state.ppor_value_invest - state.ppor_invest.balance)
        + floor_zero(state.cumulative_after_tax)
    )
    no_invest_net_worth = floor_zero(state.ppor_value_no_invest - state.ppor_no_invest.balance)

    return YearlyProjectionRecord(
        year=year,
        loan_balance=loan_balance,
        property_value=state.property_value,
        equity=equity,
        interest_paid=invest.amortization.interest_paid,
        principal_paid=invest.amortization.principal_paid,
        rent=invest.rent,
        expenses=invest.expenses,
        tax_savings=invest.tax_savings,
        after_tax_cashflow=invest.after_tax_cashflow,
        cumulative_after_tax_cashflow=state.cumulative_after_tax,
        selling_costs=selling_costs,
        investment_active=active,
        ppor_balance_invest=state.ppor_invest.balance,
        ppor_value_invest=state.ppor_value_invest,
        ppor_balance_no_invest=state.ppor_no_invest.balance,
        ppor_value_no_invest=state.ppor_value_no_invest,
        redirected_monthly=redirected,
        invest_net_worth=invest_net_worth,
        no_invest_net_worth=no_invest_net_worth,
    )


def run_projection(
    inputs: InvestmentInputs,
    config: TaxConfig,
    snapshot: Optional[YearOneSnapshot] = None,
) -> ProjectionResult:
    """Project Invest and No Invest net worth over the horizon.

    This is the main entry point for the projection engine. It:
    1. Clamps projection controls and computes the year-one snapshot
       (loan amount, expenses, selling costs) if one is not supplied.
    2. Opens both PPOR loans: the Invest path on the current balance, the
       No Invest path on the balance less the deposit.
    3. Records year 0, then steps one year at a time to the horizon.

    Args:
        inputs: Scenario inputs.
        config: Tax brackets, LMI tiers and Medicare rate.
        snapshot: Precomputed snapshot for the same inputs and config.

    Returns:
        ProjectionResult with records for years 0..horizon.
    """
    inputs = inputs.normalized()
    if snapshot is None:
        snapshot = calculate_snapshot(inputs, config)
    profiles = build_tax_profiles(inputs, config)

    ppor_balance_no_invest = floor_zero(inputs.ppor_balance - floor_zero(inputs.deposit))

    state = _ProjectionState(
        property_value=inputs.purchase_price,
        ppor_invest=LoanState.open(
            inputs.ppor_balance, inputs.ppor_rate_pct, inputs.ppor_term_years,
        ),
        ppor_no_invest=LoanState.open(
            ppor_balance_no_invest, inputs.ppor_rate_pct, inputs.ppor_term_years,
        ),
        ppor_value_invest=inputs.ppor_value,
        ppor_value_no_invest=inputs.ppor_value,
    )

    result = ProjectionResult(snapshot=snapshot)
    result.records.append(_year_zero_record(inputs, snapshot, ppor_balance_no_invest))

    for year in range(1, inputs.horizon_years + 1):
        result.records.append(_advance_year(year, state, inputs, snapshot, profiles))

    logger.debug(
        "Projection over %d years: invest=%.0f no_invest=%.0f diff=%.0f",
        inputs.horizon_years,
        result.final_invest_net_worth,
        result.final_no_invest_net_worth,
        result.net_worth_difference,
    )
    return result
