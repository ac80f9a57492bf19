"""Display formatting for engine figures.

Non-finite values are the engine's "unavailable" marker and render as an
em dash rather than as a number.
"""

import math

UNAVAILABLE_TEXT = "—"


def format_currency(value: float) -> str:
    """Whole-dollar AUD amount, e.g. ``$1,234`` or ``-$1,234``."""
    if not math.isfinite(value):
        return UNAVAILABLE_TEXT
    sign = "-" if round(value) < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def format_currency_cents(value: float) -> str:
    """AUD amount to the cent, e.g. ``$1,234.56``."""
    if not math.isfinite(value):
        return UNAVAILABLE_TEXT
    sign = "-" if round(value, 2) < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_percent(fraction: float) -> str:
    """Fraction as a two-decimal percentage, e.g. ``0.0390`` -> ``3.90%``."""
    if not math.isfinite(fraction):
        return UNAVAILABLE_TEXT
    return f"{fraction * 100:.2f}%"
