"""
Numeric helpers shared by the calculators.

Rounding and number rendering follow what a browser shows for the same
values, so results and formula strings match the web calculators.
"""

from __future__ import annotations

import math


__all__ = [
    "format_number",
    "is_positive",
    "round2",
]


def round2(value: float) -> float:
    """
    Round to 2 decimal places, halves rounding up.

    Matches ``Math.round(value * 100) / 100`` rather than Python's
    round-half-even ``round()``.

    Args:
        value: Value to round

    Returns:
        Value rounded to 2 decimal places
    """
    scaled = value * 100
    whole = math.floor(scaled)
    # scaled + 0.5 is not exact just below a half
    if scaled - whole >= 0.5:
        whole += 1
    return whole / 100


def format_number(value: float) -> str:
    """
    Render a number the way it is substituted into a formula string.

    Integral values drop the decimal point (``50.0`` -> ``"50"``), others use
    the shortest round-trip form (``2.8`` -> ``"2.8"``).

    Args:
        value: Number to render

    Returns:
        String form of the number
    """
    if math.isfinite(value) and value == math.trunc(value):
        return str(int(value))
    return repr(float(value))


def is_positive(value: float) -> bool:
    """Return True for finite values strictly greater than zero."""
    return math.isfinite(value) and value > 0
