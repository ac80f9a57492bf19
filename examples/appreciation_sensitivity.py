#!/usr/bin/env python3
"""Sweep investment property appreciation and compare final net worth.

Usage:
    python examples/appreciation_sensitivity.py

Runs the ten-year projection for appreciation rates from 0% to 10% and
prints where investing overtakes paying down the home loan.
"""

import sys
from pathlib import Path

import numpy as np

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from gearing.models.inputs import InvestmentInputs, TaxConfig
from gearing.calculations.sensitivity import run_sensitivity
from gearing.export.formatting import format_currency


def main():
    """Run the appreciation sweep and print the results table."""

    print("=" * 70)
    print("NEGATIVE GEARING - APPRECIATION SENSITIVITY")
    print("=" * 70)
    print()

    inputs = InvestmentInputs(horizon_years=10, salary_spouse=90_000, ownership_self_pct=50)
    sweep = run_sensitivity(inputs, TaxConfig(), "appreciation_pct", np.arange(0.0, 10.5, 1.0))

    print(f"{'Appreciation':>12} {'Invest':>16} {'No Invest':>16} {'Difference':>16}  Winner")
    print("-" * 70)
    for row in sweep.itertuples(index=False):
        print(
            f"{row.parameter_value:>11.1f}% "
            f"{format_currency(row.invest_net_worth):>16} "
            f"{format_currency(row.no_invest_net_worth):>16} "
            f"{format_currency(row.net_worth_difference):>16}  {row.winner}"
        )

    ahead = sweep[sweep["net_worth_difference"] > 0]
    print()
    if ahead.empty:
        print("Investing does not overtake paying down the home loan in this range.")
    else:
        print(f"Investing is ahead from {ahead['parameter_value'].min():.1f}% appreciation.")


if __name__ == "__main__":
    main()
