"""Main Streamlit application for the negative gearing calculator."""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import streamlit as st

from gearing.models.inputs import InvestmentInputs, TaxConfig
from gearing.calculations.snapshot import calculate_snapshot
from gearing.calculations.projection import run_projection
from gearing.calculations.sensitivity import default_sensitivity_range, run_sensitivity
from gearing.export.projection_report import generate_projection_excel, projection_to_csv
from ui.components import (
    render_sidebar_inputs,
    render_expense_inputs,
    render_projection_inputs,
    render_tax_config,
    render_tax_breakdown,
    render_snapshot_metrics,
    render_final_net_worth,
    render_projection_tables,
    render_cashflow_chart,
    render_net_worth_chart,
    render_sensitivity_chart,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Page configuration
st.set_page_config(
    page_title="Negative Gearing Calculator",
    page_icon="🏠",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Sweepable inputs shown in the sensitivity tab: label, half-width of the range
SENSITIVITY_PARAMETERS = {
    "appreciation_pct": ("Appreciation (% p.a.)", 3.0),
    "interest_rate_pct": ("Interest Rate (%)", 2.0),
    "weekly_rent": ("Weekly Rent ($)", 150.0),
    "ppor_rate_pct": ("Home Loan Rate (%)", 2.0),
}


def render_sensitivity_tab(inputs: InvestmentInputs, config: TaxConfig) -> None:
    """Sweep one input and chart the final net worth difference."""
    parameter = st.selectbox(
        "Input to vary",
        options=list(SENSITIVITY_PARAMETERS),
        format_func=lambda p: SENSITIVITY_PARAMETERS[p][0],
    )
    label, width = SENSITIVITY_PARAMETERS[parameter]
    values = default_sensitivity_range(getattr(inputs, parameter), width)
    sweep = run_sensitivity(inputs, config, parameter, values)

    render_sensitivity_chart(sweep, label)
    st.dataframe(sweep, hide_index=True, use_container_width=True)


def main():
    """Collect inputs, recompute everything, and render the results."""
    st.title("Negative Gearing Calculator")
    st.caption("Australian investment property: tax, LMI, and invest vs pay-down-home-loan projection.")

    raw_inputs = render_sidebar_inputs()

    tab_inputs, tab_tax, tab_results, tab_projection, tab_sensitivity = st.tabs([
        "Expenses & Projection",
        "Tax & LMI Tables",
        "Year One",
        "Projection",
        "Sensitivity",
    ])

    with tab_inputs:
        raw_inputs.update(render_expense_inputs())
        raw_inputs.update(render_projection_inputs())

    with tab_tax:
        config = render_tax_config()

    inputs = InvestmentInputs.from_mapping(raw_inputs)
    snapshot = calculate_snapshot(inputs, config)
    result = run_projection(inputs, config, snapshot)

    with tab_tax:
        render_tax_breakdown(inputs.salary_self, config)
        if inputs.salary_spouse > 0:
            render_tax_breakdown(inputs.salary_spouse, config, label="Spouse Salary")

    with tab_results:
        render_snapshot_metrics(snapshot)

    with tab_projection:
        render_final_net_worth(result)
        render_cashflow_chart(result)
        render_net_worth_chart(result)
        render_projection_tables(result)

        col1, col2 = st.columns(2)
        col1.download_button(
            "Download CSV",
            data=projection_to_csv(result),
            file_name="projection.csv",
            mime="text/csv",
        )
        col2.download_button(
            "Download Excel",
            data=generate_projection_excel(snapshot, result),
            file_name="projection.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )

    with tab_sensitivity:
        render_sensitivity_tab(inputs, config)


if __name__ == "__main__":
    main()
