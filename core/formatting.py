"""Display formatting for dollar amounts and rates."""

import math
from decimal import ROUND_HALF_UP, Decimal


def format_currency(value: float) -> str:
    """Format dollars with thousands separators and no cents.

    Half dollars round away from zero. Non-finite amounts render as N/A.
    """

    if not math.isfinite(value):
        return "N/A"
    rounded = int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))
    if rounded < 0:
        return f"-${-rounded:,}"
    return f"${rounded:,}"


def format_rate(rate: float) -> str:
    if not math.isfinite(rate):
        return "N/A"
    return f"{rate:.1f}%"
