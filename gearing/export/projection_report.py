"""Projection export: DataFrames, CSV and a styled Excel workbook."""

import io
from typing import List, Sequence, Tuple

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils.dataframe import dataframe_to_rows

from ..calculations.income_tax import tax_breakdown
from ..calculations.projection import ProjectionResult
from ..models.lookups import TaxBracket
from ..calculations.snapshot import YearOneSnapshot
from .formatting import format_currency, format_percent

INVEST_COLUMNS: List[Tuple[str, str]] = [
    ("year", "Year"),
    ("invest_net_worth", "Net Worth"),
    ("property_value", "Property Value"),
    ("loan_balance", "Investment Loan"),
    ("equity", "Investment Equity"),
    ("interest_paid", "Interest"),
    ("principal_paid", "Principal"),
    ("tax_savings", "Tax Savings"),
    ("after_tax_cashflow", "After-Tax Cashflow"),
    ("cumulative_after_tax_cashflow", "Cumulative Cashflow"),
    ("ppor_value_invest", "PPOR Value"),
    ("ppor_balance_invest", "PPOR Balance"),
]

NO_INVEST_COLUMNS: List[Tuple[str, str]] = [
    ("year", "Year"),
    ("no_invest_net_worth", "Net Worth"),
    ("ppor_value_no_invest", "PPOR Value"),
    ("ppor_balance_no_invest", "PPOR Balance"),
    ("redirected_monthly", "Extra Monthly Repayment"),
]


def projection_to_dataframe(result: ProjectionResult, path: str = "invest") -> pd.DataFrame:
    """Tabulate one path of the projection, year 0 included.

    Args:
        result: Projection result.
        path: "invest" or "no_invest".

    Returns:
        DataFrame with display column names, one row per year.
    """
    if path == "invest":
        columns = INVEST_COLUMNS
    elif path == "no_invest":
        columns = NO_INVEST_COLUMNS
    else:
        raise ValueError(f"Unknown projection path: {path}")

    data = [
        {label: getattr(record, attr) for attr, label in columns}
        for record in result.records
    ]
    return pd.DataFrame(data, columns=[label for _, label in columns])


def snapshot_to_dataframe(snapshot: YearOneSnapshot) -> pd.DataFrame:
    """Year-one figures as a two-column Metric / Value table."""
    self_profile, spouse_profile = snapshot.profiles
    rows = [
        ("Annual Rent", format_currency(snapshot.annual_rent)),
        ("Itemised Expenses", format_currency(snapshot.itemised_expenses)),
        ("Total Expenses (incl. interest)", format_currency(snapshot.total_expenses)),
        ("Interest (Year 1)", format_currency(snapshot.annual_interest)),
        ("Principal (Year 1)", format_currency(snapshot.annual_principal)),
        ("Rental Yield", format_percent(snapshot.rental_yield)),
        ("Loan Amount", format_currency(snapshot.loan_amount)),
        ("LVR", format_percent(snapshot.lvr_pct / 100)),
        ("LMI", format_currency(snapshot.lmi_cost)),
        ("Net Result Before Depreciation", format_currency(snapshot.pre_depreciation_result)),
        ("Taxable Result", format_currency(snapshot.taxable_result)),
        ("Annual Tax Savings", format_currency(snapshot.annual_tax_savings)),
        ("Out of Pocket (before tax)", format_currency(snapshot.oop_before_tax)),
        ("Out of Pocket (after tax)", format_currency(snapshot.oop_after_tax)),
        ("Marginal Rate (self / spouse)",
         f"{format_percent(self_profile.marginal_rate)} / {format_percent(spouse_profile.marginal_rate)}"),
        ("Effective Marginal Rate", format_percent(snapshot.effective_marginal_rate)),
        ("Upfront Costs (est.)", format_currency(snapshot.upfront_costs)),
        ("Selling Costs", format_currency(snapshot.total_selling_costs)),
    ]
    return pd.DataFrame(rows, columns=["Metric", "Value"])


def tax_breakdown_to_dataframe(taxable_income: float, brackets: Sequence[TaxBracket]) -> pd.DataFrame:
    """Income tax by bracket for one salary, with a total row."""
    slices = tax_breakdown(taxable_income, brackets)
    rows = [
        {
            "Bracket": f"{format_currency(s.lower)} - {format_currency(s.upper)}"
            if s.upper is not None else f"{format_currency(s.lower)}+",
            "Rate": format_percent(s.rate),
            "Income in Bracket": s.taxable_amount,
            "Tax": s.tax,
        }
        for s in slices
    ]
    rows.append({
        "Bracket": "Total",
        "Rate": "",
        "Income in Bracket": sum(s.taxable_amount for s in slices),
        "Tax": sum(s.tax for s in slices),
    })
    return pd.DataFrame(rows, columns=["Bracket", "Rate", "Income in Bracket", "Tax"])


def projection_to_csv(result: ProjectionResult) -> str:
    """Both paths side by side as CSV text, joined on year."""
    invest = projection_to_dataframe(result, "invest")
    no_invest = projection_to_dataframe(result, "no_invest")
    combined = invest.merge(no_invest, on="Year", suffixes=(" (Invest)", " (No Invest)"))
    return combined.to_csv(index=False)


def _add_header_style(ws, row: int, cols: int) -> None:
    """Apply header styling to a row."""
    header_fill = PatternFill(start_color="1F4E79", end_color="1F4E79", fill_type="solid")
    header_font = Font(color="FFFFFF", bold=True)

    for col in range(1, cols + 1):
        cell = ws.cell(row=row, column=col)
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = Alignment(horizontal="center")


def _write_frame(wb: Workbook, title: str, df: pd.DataFrame, number_format: str = "") -> None:
    ws = wb.create_sheet(title)
    for row in dataframe_to_rows(df, index=False, header=True):
        ws.append(row)
    _add_header_style(ws, 1, len(df.columns))

    if number_format:
        # Column A is the year
        for row in ws.iter_rows(min_row=2, min_col=2):
            for cell in row:
                cell.number_format = number_format

    for column_cells in ws.columns:
        width = max(len(str(cell.value or "")) for cell in column_cells)
        ws.column_dimensions[column_cells[0].column_letter].width = width + 4


def generate_projection_excel(snapshot: YearOneSnapshot, result: ProjectionResult) -> bytes:
    """Build an Excel workbook with Summary, Invest and No Invest sheets.

    Args:
        snapshot: Year-one snapshot.
        result: Projection result for the same inputs.

    Returns:
        Excel file as bytes.
    """
    wb = Workbook()
    wb.remove(wb.active)

    summary = snapshot_to_dataframe(snapshot)
    final_rows = pd.DataFrame(
        [
            ("Final Net Worth (Invest)", format_currency(result.final_invest_net_worth)),
            ("Final Net Worth (No Invest)", format_currency(result.final_no_invest_net_worth)),
            ("Difference", format_currency(result.net_worth_difference)),
        ],
        columns=["Metric", "Value"],
    )
    _write_frame(wb, "Summary", pd.concat([summary, final_rows], ignore_index=True))
    _write_frame(wb, "Invest", projection_to_dataframe(result, "invest"), "$#,##0")
    _write_frame(wb, "No Invest", projection_to_dataframe(result, "no_invest"), "$#,##0")

    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()
