"""Export module for formatted figures and projection reports."""

from .formatting import (
    UNAVAILABLE_TEXT,
    format_currency,
    format_currency_cents,
    format_percent,
)
from .projection_report import (
    projection_to_dataframe,
    snapshot_to_dataframe,
    tax_breakdown_to_dataframe,
    projection_to_csv,
    generate_projection_excel,
)

__all__ = [
    "UNAVAILABLE_TEXT",
    "format_currency",
    "format_currency_cents",
    "format_percent",
    "projection_to_dataframe",
    "snapshot_to_dataframe",
    "tax_breakdown_to_dataframe",
    "projection_to_csv",
    "generate_projection_excel",
]
