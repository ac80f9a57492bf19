"""UI components for the negative gearing calculator."""

from .inputs import render_sidebar_inputs, render_expense_inputs, render_projection_inputs
from .config_tables import render_tax_config, render_tax_breakdown
from .results import render_snapshot_metrics, render_final_net_worth, render_projection_tables
from .charts import render_cashflow_chart, render_net_worth_chart, render_sensitivity_chart

__all__ = [
    "render_sidebar_inputs",
    "render_expense_inputs",
    "render_projection_inputs",
    "render_tax_config",
    "render_tax_breakdown",
    "render_snapshot_metrics",
    "render_final_net_worth",
    "render_projection_tables",
    "render_cashflow_chart",
    "render_net_worth_chart",
    "render_sensitivity_chart",
]
