"""Single-year rental property economics with negative gearing.

Combines the loan, LMI and tax calculators into one year's view of an
investment property: rent, expenses, interest, the tax saving from a rental
loss, and what the investor pays out of pocket.
"""

import logging
import math
from dataclasses import dataclass
from typing import Tuple

from ..models.inputs import InvestmentInputs, TaxConfig
from ..models.lookups import UPFRONT_COST_PCT, LoanType
from .amortization import LoanState
from .guards import UNAVAILABLE
from .income_tax import marginal_rate
from .lmi import estimate_lmi_cost

logger = logging.getLogger(__name__)

WEEKS_PER_YEAR = 52


@dataclass
class PersonTaxProfile:
    """One owner's share of the property and their tax position."""

    label: str
    annual_salary: float
    ownership_share: float  # Fraction in [0, 1]
    marginal_rate: float  # Bracket rate plus Medicare levy


@dataclass
class ExpenseBreakdown:
    """Itemised annual holding costs (excluding interest)."""

    council_rates: float
    water_rates: float
    landlord_insurance: float
    management_fee: float
    maintenance: float

    @property
    def total(self) -> float:
        return (
            self.council_rates
            + self.water_rates
            + self.landlord_insurance
            + self.management_fee
            + self.maintenance
        )


@dataclass
class YearOneSnapshot:
    """First-year economics of the investment."""

    # Income and costs
    annual_rent: float
    expenses: ExpenseBreakdown
    annual_interest: float
    annual_principal: float
    rental_yield: float  # Fraction of purchase price

    # Loan sizing
    base_loan: float
    base_lvr_pct: float
    lmi_cost: float
    loan_amount: float  # Base loan plus capitalised LMI
    lvr_pct: float

    # Gearing and tax
    pre_depreciation_result: float
    taxable_result: float  # Negative means a deductible loss
    profiles: Tuple[PersonTaxProfile, PersonTaxProfile]
    tax_savings_by_person: Tuple[float, float]
    annual_tax_savings: float
    effective_marginal_rate: float

    # Cash burden
    oop_before_tax: float
    oop_after_tax: float

    # Transaction costs
    upfront_costs: float
    agent_purchase_cost: float
    total_selling_costs: float

    @property
    def itemised_expenses(self) -> float:
        return self.expenses.total

    @property
    def total_expenses(self) -> float:
        """Itemised expenses plus interest (the deductible outgoings)."""
        return self.expenses.total + self.annual_interest

    @property
    def monthly_oop_before_tax(self) -> float:
        return self.oop_before_tax / 12

    @property
    def monthly_oop_after_tax(self) -> float:
        return self.oop_after_tax / 12


def calculate_expenses(inputs: InvestmentInputs) -> ExpenseBreakdown:
    """Itemise annual holding costs.

    Management fees are a share of rent; maintenance is a share of the
    purchase price.
    """
    annual_rent = inputs.weekly_rent * WEEKS_PER_YEAR
    return ExpenseBreakdown(
        council_rates=inputs.council_rates,
        water_rates=inputs.water_rates,
        landlord_insurance=inputs.landlord_insurance,
        management_fee=annual_rent * inputs.management_fee_pct / 100,
        maintenance=inputs.purchase_price * inputs.maintenance_pct / 100,
    )


def build_tax_profiles(
    inputs: InvestmentInputs,
    config: TaxConfig,
) -> Tuple[PersonTaxProfile, PersonTaxProfile]:
    """Build self and spouse profiles with levy-inclusive marginal rates."""
    return (
        PersonTaxProfile(
            label="self",
            annual_salary=inputs.salary_self,
            ownership_share=inputs.ownership_self,
            marginal_rate=marginal_rate(inputs.salary_self, config.brackets) + config.medicare_rate,
        ),
        PersonTaxProfile(
            label="spouse",
            annual_salary=inputs.salary_spouse,
            ownership_share=inputs.ownership_spouse,
            marginal_rate=marginal_rate(inputs.salary_spouse, config.brackets) + config.medicare_rate,
        ),
    )


def calculate_tax_savings(
    taxable_result: float,
    profiles: Tuple[PersonTaxProfile, PersonTaxProfile],
) -> Tuple[float, float]:
    """Tax saved by each owner from their share of a rental loss.

    Only losses are subsidised: an owner's share of a positive result
    contributes nothing.

    Args:
        taxable_result: Rental result after depreciation.
        profiles: Self and spouse tax profiles.

    Returns:
        Savings for (self, spouse). Both are UNAVAILABLE when the result is.
    """
    if math.isnan(taxable_result):
        return (UNAVAILABLE, UNAVAILABLE)

    self_profile, spouse_profile = profiles
    self_loss = min(0.0, taxable_result * self_profile.ownership_share)
    spouse_loss = min(0.0, taxable_result * spouse_profile.ownership_share)
    return (
        -self_loss * self_profile.marginal_rate,
        -spouse_loss * spouse_profile.marginal_rate,
    )


def calculate_snapshot(inputs: InvestmentInputs, config: TaxConfig) -> YearOneSnapshot:
    """Calculate first-year investment economics.

    Steps:
    1. Size the loan: base loan and LVR, LMI on the base LVR, then the final
       loan with LMI capitalised and its LVR. LMI is not recomputed on the
       inflated loan.
    2. Year-one interest and principal: twelve amortizing months for P&I, or
       flat ``loan x rate`` with no principal for interest-only.
    3. Rental result before and after depreciation.
    4. Each owner's tax saving from their share of any loss.
    5. Out-of-pocket cost before and after tax.

    Args:
        inputs: Scenario inputs.
        config: Tax brackets, LMI tiers and Medicare rate.

    Returns:
        YearOneSnapshot for the scenario.
    """
    inputs = inputs.normalized()
    price = inputs.purchase_price

    annual_rent = inputs.weekly_rent * WEEKS_PER_YEAR
    expenses = calculate_expenses(inputs)

    base_loan = max(0.0, price - inputs.deposit)
    base_lvr_pct = (base_loan / price) * 100 if price > 0 else 0.0
    lmi_cost = estimate_lmi_cost(base_lvr_pct, base_loan, config.lmi_tiers)
    loan_amount = base_loan + lmi_cost
    lvr_pct = (loan_amount / price) * 100 if price > 0 else 0.0

    if inputs.loan_type == LoanType.INTEREST_ONLY:
        annual_interest = loan_amount * inputs.interest_rate_pct / 100
        annual_principal = 0.0
    else:
        year_one = LoanState.open(
            loan_amount, inputs.interest_rate_pct, inputs.loan_term_years,
        ).run_year()
        annual_interest = year_one.interest_paid
        annual_principal = year_one.principal_paid

    pre_depreciation_result = annual_rent - expenses.total - annual_interest
    taxable_result = pre_depreciation_result - inputs.depreciation

    profiles = build_tax_profiles(inputs, config)
    savings = calculate_tax_savings(taxable_result, profiles)
    annual_tax_savings = sum(savings)

    if math.isnan(taxable_result):
        effective_marginal_rate = UNAVAILABLE
    elif taxable_result < 0:
        effective_marginal_rate = annual_tax_savings / -taxable_result
    else:
        effective_marginal_rate = sum(p.marginal_rate * p.ownership_share for p in profiles)

    oop_before_tax = (expenses.total + annual_interest + annual_principal) - annual_rent
    oop_after_tax = oop_before_tax - annual_tax_savings

    logger.debug(
        "Snapshot: loan=%.0f lvr=%.2f%% lmi=%.0f taxable=%.0f savings=%.0f",
        loan_amount, lvr_pct, lmi_cost, taxable_result, annual_tax_savings,
    )

    return YearOneSnapshot(
        annual_rent=annual_rent,
        expenses=expenses,
        annual_interest=annual_interest,
        annual_principal=annual_principal,
        rental_yield=annual_rent / price if price > 0 else 0.0,
        base_loan=base_loan,
        base_lvr_pct=base_lvr_pct,
        lmi_cost=lmi_cost,
        loan_amount=loan_amount,
        lvr_pct=lvr_pct,
        pre_depreciation_result=pre_depreciation_result,
        taxable_result=taxable_result,
        profiles=profiles,
        tax_savings_by_person=savings,
        annual_tax_savings=annual_tax_savings,
        effective_marginal_rate=effective_marginal_rate,
        oop_before_tax=oop_before_tax,
        oop_after_tax=oop_after_tax,
        upfront_costs=price * UPFRONT_COST_PCT,
        agent_purchase_cost=price * inputs.agent_purchase_pct / 100,
        total_selling_costs=price * inputs.agent_selling_pct / 100 + inputs.marketing_costs,
    )
