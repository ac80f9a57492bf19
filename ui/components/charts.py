"""Chart components for the Streamlit UI."""

import streamlit as st
import plotly.graph_objects as go
import pandas as pd

from gearing.calculations.projection import ProjectionResult


def render_cashflow_chart(result: ProjectionResult) -> None:
    """Render annual after-tax cashflow with a zero line.

    Args:
        result: Projection result.
    """
    years = [r.year for r in result.years]
    cashflows = [r.after_tax_cashflow for r in result.years]

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=years,
        y=cashflows,
        mode='lines+markers',
        name='After-Tax Cashflow',
        line=dict(color='#18a34a', width=2)
    ))

    fig.add_hline(y=0, line_dash="dash", line_color="#39465f")

    fig.update_layout(
        title="After-Tax Cashflow by Year",
        xaxis_title="Year",
        yaxis_title="Cashflow ($)",
        yaxis_tickformat="$,.0f",
        height=360,
        hovermode="x unified",
    )

    st.plotly_chart(fig, use_container_width=True)


def render_net_worth_chart(result: ProjectionResult) -> None:
    """Render Invest vs No Invest net worth, year 0 included.

    Args:
        result: Projection result.
    """
    years = [r.year for r in result.records]

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=years,
        y=[r.invest_net_worth for r in result.records],
        mode='lines',
        name='Invest',
        line=dict(color='#2f71ff', width=2)
    ))

    fig.add_trace(go.Scatter(
        x=years,
        y=[r.no_invest_net_worth for r in result.records],
        mode='lines',
        name='No Invest',
        line=dict(color='#9aa4b2', width=2)
    ))

    fig.update_layout(
        title="Net Worth: Invest vs No Invest",
        xaxis_title="Year",
        yaxis_title="Net Worth ($)",
        yaxis_tickformat="$,.0f",
        legend=dict(
            yanchor="top",
            y=0.99,
            xanchor="left",
            x=0.01
        ),
        height=400,
        hovermode="x unified",
    )

    st.plotly_chart(fig, use_container_width=True)


def render_sensitivity_chart(sweep: pd.DataFrame, parameter_label: str) -> None:
    """Render final net worth difference across a sensitivity sweep.

    Args:
        sweep: DataFrame from run_sensitivity.
        parameter_label: Axis label for the swept input.
    """
    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=sweep["parameter_value"],
        y=sweep["net_worth_difference"],
        marker_color=['#2f71ff' if d > 0 else '#dc3545' for d in sweep["net_worth_difference"]],
        name='Invest - No Invest',
    ))

    fig.update_layout(
        title="Final Net Worth Difference",
        xaxis_title=parameter_label,
        yaxis_title="Difference ($)",
        yaxis_tickformat="$,.0f",
        height=360,
    )

    st.plotly_chart(fig, use_container_width=True)
