"""One-parameter sensitivity sweep over the projection."""

import logging
from dataclasses import fields, replace
from typing import Iterable, List

import numpy as np
import pandas as pd

from ..models.inputs import InvestmentInputs, TaxConfig
from .projection import run_projection

logger = logging.getLogger(__name__)

# Fields that are labels or enums rather than numbers
_NON_NUMERIC_FIELDS = {"loan_type"}


def sweepable_parameters() -> List[str]:
    """Names of InvestmentInputs fields that can be swept."""
    return [f.name for f in fields(InvestmentInputs) if f.name not in _NON_NUMERIC_FIELDS]


def default_sensitivity_range(
    base_value: float,
    width: float,
    steps: int = 9,
) -> np.ndarray:
    """Evenly spaced values centred on ``base_value``.

    Args:
        base_value: Current value of the parameter.
        width: Distance from the centre to either end.
        steps: Number of points (at least 2).

    Returns:
        Array running from ``base_value - width`` to ``base_value + width``.
    """
    return np.linspace(base_value - width, base_value + width, max(2, steps))


def run_sensitivity(
    inputs: InvestmentInputs,
    config: TaxConfig,
    parameter: str,
    values: Iterable[float],
) -> pd.DataFrame:
    """Re-run the projection for each value of one input.

    Args:
        inputs: Base scenario inputs.
        config: Tax configuration shared by every run.
        parameter: InvestmentInputs field to vary (e.g. "appreciation_pct").
        values: Values to try.

    Returns:
        DataFrame with one row per value: parameter_value, invest_net_worth,
        no_invest_net_worth, net_worth_difference and winner.

    Raises:
        ValueError: If ``parameter`` is not a numeric InvestmentInputs field.
    """
    if parameter not in sweepable_parameters():
        raise ValueError(f"Unknown sensitivity parameter: {parameter}")

    rows = []
    for value in values:
        result = run_projection(replace(inputs, **{parameter: float(value)}), config)
        rows.append({
            "parameter_value": float(value),
            "invest_net_worth": result.final_invest_net_worth,
            "no_invest_net_worth": result.final_no_invest_net_worth,
            "net_worth_difference": result.net_worth_difference,
            "winner": "Invest" if result.net_worth_difference > 0 else "No Invest",
        })

    logger.debug("Sensitivity on %s: %d runs", parameter, len(rows))
    return pd.DataFrame(
        rows,
        columns=[
            "parameter_value",
            "invest_net_worth",
            "no_invest_net_worth",
            "net_worth_difference",
            "winner",
        ],
    )
