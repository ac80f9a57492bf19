"""Editable tax bracket and LMI tier tables."""

import streamlit as st
import pandas as pd

from gearing.calculations.income_tax import effective_tax_rate, income_tax_with_levy, medicare_levy
from gearing.export.formatting import format_currency, format_percent
from gearing.export.projection_report import tax_breakdown_to_dataframe
from gearing.models.inputs import TaxConfig
from gearing.models.lookups import DEFAULT_LMI_TIERS, DEFAULT_MEDICARE_RATE, DEFAULT_TAX_BRACKETS


def _default_bracket_frame() -> pd.DataFrame:
    return pd.DataFrame([
        {"threshold": b.threshold, "rate_pct": round(b.rate * 100, 2)}
        for b in DEFAULT_TAX_BRACKETS
    ])


def _default_tier_frame() -> pd.DataFrame:
    return pd.DataFrame([
        {"min_lvr_pct": t.min_lvr_pct, "max_lvr_pct": t.max_lvr_pct, "rate_pct": round(t.rate * 100, 2)}
        for t in DEFAULT_LMI_TIERS
    ])


def render_tax_config() -> TaxConfig:
    """Render the bracket and tier editors and build the tax configuration.

    Rows can be added or removed; they are sorted when read.

    Returns:
        TaxConfig built from the edited tables.
    """
    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Income Tax Brackets")
        brackets = st.data_editor(
            _default_bracket_frame(),
            num_rows="dynamic",
            key="tax_brackets",
            column_config={
                "threshold": st.column_config.NumberColumn("Threshold ($)", min_value=0, step=1000),
                "rate_pct": st.column_config.NumberColumn("Rate (%)", min_value=0.0, step=0.1),
            },
            use_container_width=True,
        )
        medicare_pct = st.number_input(
            "Medicare Levy (%)", min_value=0.0, max_value=10.0,
            value=DEFAULT_MEDICARE_RATE * 100, step=0.5,
        )

    with col2:
        st.subheader("LMI Tiers")
        tiers = st.data_editor(
            _default_tier_frame(),
            num_rows="dynamic",
            key="lmi_tiers",
            column_config={
                "min_lvr_pct": st.column_config.NumberColumn("Min LVR (%)", min_value=0.0, max_value=100.0),
                "max_lvr_pct": st.column_config.NumberColumn("Max LVR (%)", min_value=0.0, max_value=100.0),
                "rate_pct": st.column_config.NumberColumn("Premium (% of loan)", min_value=0.0, max_value=20.0),
            },
            use_container_width=True,
        )

    return TaxConfig.from_tables(
        brackets.to_dict("records"),
        tiers.to_dict("records"),
        medicare_pct,
    )


def render_tax_breakdown(salary: float, config: TaxConfig, label: str = "Your Salary") -> None:
    """Render tax by bracket for one salary under the edited configuration."""
    st.subheader(f"Tax on {label}: {format_currency(salary)}")

    col1, col2, col3 = st.columns(3)
    col1.metric("Income Tax + Medicare", format_currency(
        income_tax_with_levy(salary, config.brackets, config.medicare_rate)
    ))
    col2.metric("Medicare Levy", format_currency(medicare_levy(salary, config.medicare_rate)))
    col3.metric("Average Bracket Rate", format_percent(effective_tax_rate(salary, config.brackets)))

    breakdown = tax_breakdown_to_dataframe(salary, config.brackets)
    for column in ("Income in Bracket", "Tax"):
        breakdown[column] = breakdown[column].map(format_currency)
    st.dataframe(breakdown, hide_index=True, use_container_width=True)
