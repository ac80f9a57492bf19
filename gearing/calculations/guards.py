"""Shared numeric guards: the zero floor and the "unavailable" sentinel."""

import math

# Returned by formulas whose inputs are out of contract (e.g. a zero-length term)
UNAVAILABLE = float("nan")


def floor_zero(value: float) -> float:
    """Clamp a balance, equity or net-worth figure at zero.

    The unavailable sentinel passes through unchanged so that a bad input
    surfaces as "unavailable" rather than as a plausible zero.
    """
    if math.isnan(value):
        return value
    return max(0.0, value)


def is_available(value: float) -> bool:
    """True when a computed figure is finite and can be displayed."""
    return math.isfinite(value)
