#!/usr/bin/env python3
"""Example script to run the negative gearing model with the seed scenario."""

import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from gearing.models.inputs import InvestmentInputs, TaxConfig
from gearing.models.lookups import LoanType
from gearing.calculations.snapshot import calculate_snapshot
from gearing.calculations.projection import run_projection
from gearing.export.formatting import format_currency, format_percent


def get_seed_inputs() -> InvestmentInputs:
    """Seed scenario: $800k purchase, 20% deposit, one year horizon."""
    return InvestmentInputs(
        salary_self=120_000,
        salary_spouse=0,
        ownership_self_pct=100,
        purchase_price=800_000,
        deposit=160_000,
        weekly_rent=600,
        interest_rate_pct=6.0,
        loan_term_years=30,
        loan_type=LoanType.PRINCIPAL_AND_INTEREST,
        council_rates=8_000,
        water_rates=0,
        landlord_insurance=0,
        management_fee_pct=0,
        maintenance_pct=0,
        depreciation=5_000,
        appreciation_pct=0.0,
        horizon_years=1,
    )


def print_snapshot(inputs: InvestmentInputs, config: TaxConfig) -> None:
    """Print year-one economics."""
    snapshot = calculate_snapshot(inputs, config)

    print("\n" + "=" * 60)
    print("YEAR ONE SNAPSHOT")
    print("=" * 60 + "\n")

    print(f"{'Loan Amount':<32} {format_currency(snapshot.loan_amount):>16}")
    print(f"{'LVR':<32} {format_percent(snapshot.lvr_pct / 100):>16}")
    print(f"{'LMI':<32} {format_currency(snapshot.lmi_cost):>16}")
    print(f"{'Annual Rent':<32} {format_currency(snapshot.annual_rent):>16}")
    print(f"{'Itemised Expenses':<32} {format_currency(snapshot.itemised_expenses):>16}")
    print(f"{'Interest':<32} {format_currency(snapshot.annual_interest):>16}")
    print(f"{'Principal':<32} {format_currency(snapshot.annual_principal):>16}")
    print(f"{'Taxable Result':<32} {format_currency(snapshot.taxable_result):>16}")
    print(f"{'Tax Savings':<32} {format_currency(snapshot.annual_tax_savings):>16}")
    print(f"{'Out of Pocket (after tax)':<32} {format_currency(snapshot.oop_after_tax):>16}")


def print_projection(inputs: InvestmentInputs, config: TaxConfig) -> None:
    """Print the yearly net worth table for both paths."""
    result = run_projection(inputs, config)

    print("\n" + "=" * 60)
    print(f"PROJECTION ({inputs.horizon_years} YEARS)")
    print("=" * 60 + "\n")

    print(f"{'Year':>4} {'Invest':>16} {'No Invest':>16} {'Difference':>16}")
    print("-" * 55)
    for record in result.records:
        print(
            f"{record.year:>4} "
            f"{format_currency(record.invest_net_worth):>16} "
            f"{format_currency(record.no_invest_net_worth):>16} "
            f"{format_currency(record.net_worth_difference):>16}"
        )


def main():
    """Run the seed scenario and a ten-year projection with a two-year delay."""
    logging.basicConfig(level=logging.INFO)

    config = TaxConfig()
    inputs = get_seed_inputs()

    print_snapshot(inputs, config)
    print_projection(inputs, config)

    delayed = InvestmentInputs(
        appreciation_pct=5.0,
        horizon_years=10,
        invest_delay_years=2,
        ppor_extra_monthly=500,
    )
    print_projection(delayed, config)


if __name__ == "__main__":
    main()
