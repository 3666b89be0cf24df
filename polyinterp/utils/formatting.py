"""Display formatting for numeric results."""

from __future__ import annotations

import math

import numpy as np

DEFAULT_SIGNIFICANT_DIGITS = 8

# Positional notation inside this magnitude window, scientific outside
_POSITIONAL_MIN = 1e-6
_POSITIONAL_MAX = 1e21


def round_significant(value: float, significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS) -> float:
    """Round ``value`` to ``significant_digits`` significant decimal digits."""
    if not math.isfinite(value) or value == 0:
        return value
    return float(f"{value:.{significant_digits - 1}e}")


def format_number(value: float, significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS) -> str:
    """
    Render a result for display.

    The value is rounded to ``significant_digits`` significant digits and
    printed as the shortest decimal that round-trips to the rounded value,
    without trailing zeros. Non-finite values print as "Infinity",
    "-Infinity" or "NaN".

    Examples
    --------
    >>> format_number(0.5)
    '0.5'
    >>> format_number(1 / 3)
    '0.33333333'
    >>> format_number(9.000000000000002)
    '9'
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    rounded = round_significant(value, significant_digits)
    if rounded == 0:
        return "0"
    if _POSITIONAL_MIN <= abs(rounded) < _POSITIONAL_MAX:
        return np.format_float_positional(rounded, unique=True, trim="-")
    return np.format_float_scientific(rounded, unique=True, trim="-", exp_digits=1)
