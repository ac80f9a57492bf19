"""Input components for the Streamlit UI."""

import streamlit as st
from typing import Dict, Any

from gearing.models.lookups import CITY_APPRECIATION_RATES, get_city_appreciation_rate


def _on_city_change() -> None:
    """Copy the selected city's preset into the appreciation input."""
    rate = get_city_appreciation_rate(st.session_state.get("investment_city", "custom"))
    if rate is not None:
        st.session_state["appreciation_pct"] = rate


def render_sidebar_inputs() -> Dict[str, Any]:
    """Render household, purchase and loan inputs in the sidebar.

    Returns:
        Dictionary of raw input values keyed by InvestmentInputs field name.
    """
    inputs: Dict[str, Any] = {}

    st.sidebar.header("Household")
    inputs["salary_self"] = st.sidebar.number_input(
        "Your Salary ($)", min_value=0, value=120_000, step=1_000,
    )
    inputs["salary_spouse"] = st.sidebar.number_input(
        "Spouse Salary ($)", min_value=0, value=0, step=1_000,
    )
    inputs["ownership_self_pct"] = st.sidebar.slider(
        "Your Ownership Share",
        min_value=0, max_value=100, value=100, step=5,
        format="%d%%",
        help="Spouse owns the remainder",
    )

    st.sidebar.header("Purchase")
    inputs["purchase_price"] = st.sidebar.number_input(
        "Purchase Price ($)", min_value=0, value=800_000, step=10_000,
    )
    inputs["deposit"] = st.sidebar.number_input(
        "Deposit ($)", min_value=0, value=160_000, step=5_000,
    )
    inputs["weekly_rent"] = st.sidebar.number_input(
        "Weekly Rent ($)", min_value=0, value=600, step=10,
    )

    st.sidebar.header("Investment Loan")
    inputs["interest_rate_pct"] = st.sidebar.number_input(
        "Interest Rate (%)", min_value=0.0, max_value=20.0, value=6.0, step=0.05,
    )
    inputs["loan_term_years"] = st.sidebar.number_input(
        "Loan Term (years)", min_value=1, max_value=40, value=30, step=1,
    )
    inputs["loan_type"] = st.sidebar.radio(
        "Loan Type",
        options=["P&I", "IO"],
        format_func=lambda x: {"P&I": "Principal & Interest", "IO": "Interest Only"}[x],
        horizontal=True,
    )

    return inputs


def render_expense_inputs() -> Dict[str, Any]:
    """Render annual expense and transaction cost inputs.

    Returns:
        Dictionary of raw input values.
    """
    inputs: Dict[str, Any] = {}

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Annual Expenses")
        inputs["council_rates"] = st.number_input("Council Rates ($)", min_value=0, value=2_000, step=100)
        inputs["water_rates"] = st.number_input("Water Rates ($)", min_value=0, value=1_000, step=100)
        inputs["landlord_insurance"] = st.number_input("Landlord Insurance ($)", min_value=0, value=1_500, step=100)
        inputs["management_fee_pct"] = st.number_input(
            "Management Fee (% of rent)", min_value=0.0, max_value=20.0, value=7.0, step=0.5,
        )
        inputs["maintenance_pct"] = st.number_input(
            "Maintenance (% of price)", min_value=0.0, max_value=5.0, value=0.5, step=0.1,
        )
        inputs["depreciation"] = st.number_input("Depreciation ($)", min_value=0, value=5_000, step=500)

    with col2:
        st.subheader("Transaction Costs")
        inputs["agent_purchase_pct"] = st.number_input(
            "Buyer's Agent (% of price)", min_value=0.0, max_value=5.0, value=0.0, step=0.1,
        )
        inputs["agent_selling_pct"] = st.number_input(
            "Selling Agent (% of price)", min_value=0.0, max_value=5.0, value=2.0, step=0.1,
        )
        inputs["marketing_costs"] = st.number_input("Marketing ($)", min_value=0, value=3_000, step=500)

    return inputs


def render_projection_inputs() -> Dict[str, Any]:
    """Render projection controls and existing home loan inputs.

    Returns:
        Dictionary of raw input values.
    """
    inputs: Dict[str, Any] = {}

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Projection")
        city_options = ["custom"] + list(CITY_APPRECIATION_RATES)
        st.selectbox(
            "Investment City",
            options=city_options,
            key="investment_city",
            format_func=lambda x: "Custom" if x == "custom" else f"{x.title()} ({CITY_APPRECIATION_RATES[x]:.1f}%)",
            on_change=_on_city_change,
        )
        st.session_state.setdefault("appreciation_pct", 5.0)
        inputs["appreciation_pct"] = st.number_input(
            "Appreciation (% p.a.)", min_value=-20.0, max_value=20.0, step=0.1,
            key="appreciation_pct",
        )
        inputs["horizon_years"] = st.number_input("Horizon (years)", min_value=1, max_value=40, value=10, step=1)
        inputs["invest_delay_years"] = st.number_input(
            "Investment Delay (years)", min_value=0, max_value=20, value=0, step=1,
            help="Years before the investment loan, rent and expenses begin",
        )

    with col2:
        st.subheader("Existing Home Loan (PPOR)")
        inputs["ppor_value"] = st.number_input("Home Value ($)", min_value=0, value=1_000_000, step=10_000)
        inputs["ppor_balance"] = st.number_input("Loan Balance ($)", min_value=0, value=500_000, step=10_000)
        inputs["ppor_rate_pct"] = st.number_input(
            "Home Loan Rate (%)", min_value=0.0, max_value=20.0, value=6.0, step=0.05,
        )
        inputs["ppor_term_years"] = st.number_input(
            "Remaining Term (years)", min_value=1, max_value=40, value=25, step=1,
        )
        inputs["ppor_appreciation_pct"] = st.number_input(
            "Home Appreciation (% p.a.)", min_value=-20.0, max_value=20.0, value=6.9, step=0.1,
        )
        inputs["ppor_extra_monthly"] = st.number_input(
            "Extra Monthly Repayment ($)", min_value=0, value=0, step=100,
        )

    return inputs
