"""Display formatting for computed values."""

from __future__ import annotations

import math

import numpy as np


def _fixed(value: float, precision: int) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.{precision}f}"


def format_scientific(value: float, precision: int) -> str:
    """Render as ``mantissa×10^exponent`` outside the 0.001 to 1000 band.

    Values with a small exponent stay in fixed point for readability.
    """
    if value == 0.0:
        return "0"
    if not math.isfinite(value):
        # no exponent for inf or nan; render them as in fixed point
        return _fixed(value, precision)

    abs_value = abs(value)
    exponent = math.floor(math.log10(abs_value))
    with np.errstate(all="ignore"):
        mantissa = float(np.float64(value) / np.power(10.0, exponent))

    if abs(exponent) < 3 and 0.001 <= abs_value < 1000.0:
        return _fixed(value, precision)
    return f"{_fixed(mantissa, precision)}×10^{exponent}"


def format_number(value: float, precision: int, scientific: bool) -> str:
    if value == 0.0:
        return "0"
    if scientific:
        return format_scientific(value, precision)
    return _fixed(value, precision)
