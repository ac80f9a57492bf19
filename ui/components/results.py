"""Results display components for the Streamlit UI."""

import streamlit as st
import pandas as pd

from gearing.calculations.projection import ProjectionResult
from gearing.calculations.snapshot import YearOneSnapshot
from gearing.export.formatting import format_currency, format_currency_cents, format_percent
from gearing.export.projection_report import projection_to_dataframe


def render_snapshot_metrics(snapshot: YearOneSnapshot) -> None:
    """Render year-one economics as metric tiles.

    Args:
        snapshot: Year-one snapshot.
    """
    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric("Annual Rent", format_currency(snapshot.annual_rent))
        st.metric("Itemised Expenses", format_currency(snapshot.itemised_expenses))
        st.metric("Total Expenses (incl. interest)", format_currency(snapshot.total_expenses))
        st.metric("Rental Yield", format_percent(snapshot.rental_yield))

    with col2:
        st.metric("Loan Amount", format_currency(snapshot.loan_amount))
        st.metric("LVR", format_percent(snapshot.lvr_pct / 100))
        st.metric("LMI (capitalised)", format_currency(snapshot.lmi_cost))
        st.metric("Interest / Principal (Yr 1)",
                  f"{format_currency(snapshot.annual_interest)} / {format_currency(snapshot.annual_principal)}")

    with col3:
        st.metric("Net Before Depreciation", format_currency(snapshot.pre_depreciation_result))
        st.metric("Taxable Result", format_currency(snapshot.taxable_result))
        st.metric("Annual Tax Savings", format_currency(snapshot.annual_tax_savings))
        self_profile, spouse_profile = snapshot.profiles
        st.metric("Marginal Rate (you / spouse)",
                  f"{format_percent(self_profile.marginal_rate)} / {format_percent(spouse_profile.marginal_rate)}")

    with col4:
        st.metric("Out of Pocket (before tax)", format_currency(snapshot.oop_before_tax))
        st.metric("Out of Pocket (after tax)", format_currency(snapshot.oop_after_tax))
        st.metric("Monthly (before / after)",
                  f"{format_currency_cents(snapshot.monthly_oop_before_tax)} / "
                  f"{format_currency_cents(snapshot.monthly_oop_after_tax)}")
        st.metric("Effective Marginal Rate", format_percent(snapshot.effective_marginal_rate))

    st.caption(
        f"Estimated upfront costs (stamp duty, legals): {format_currency(snapshot.upfront_costs)}. "
        f"Selling costs at horizon: {format_currency(snapshot.total_selling_costs)}."
    )


def render_final_net_worth(result: ProjectionResult) -> None:
    """Render the final net worth comparison callout."""
    diff = result.net_worth_difference
    col1, col2, col3 = st.columns(3)
    col1.metric("Final Net Worth (Invest)", format_currency(result.final_invest_net_worth))
    col2.metric("Final Net Worth (No Invest)", format_currency(result.final_no_invest_net_worth))
    col3.metric("Difference", format_currency(diff), delta="Invest ahead" if diff > 0 else "No Invest ahead",
                delta_color="normal" if diff > 0 else "inverse")


def _currency_table(df: pd.DataFrame) -> pd.DataFrame:
    formatted = df.copy()
    for column in formatted.columns:
        if column != "Year":
            formatted[column] = formatted[column].map(format_currency)
    return formatted


def render_projection_tables(result: ProjectionResult) -> None:
    """Render Invest and No Invest yearly tables side by side."""
    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Invest")
        invest = projection_to_dataframe(result, "invest")[
            ["Year", "Net Worth", "Property Value", "Investment Loan", "PPOR Value", "PPOR Balance"]
        ]
        st.dataframe(_currency_table(invest), hide_index=True, use_container_width=True)

    with col2:
        st.subheader("No Invest")
        st.dataframe(
            _currency_table(projection_to_dataframe(result, "no_invest")),
            hide_index=True,
            use_container_width=True,
        )
