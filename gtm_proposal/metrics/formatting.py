"""Display formatting for currency, counts and metric ranges (en-US)."""

import math
from typing import Optional

from .scenario import ScenarioMetrics

RANGE_SEPARATOR = " – "
NOT_AVAILABLE = "—"


def format_currency(value: float, max_fraction_digits: int = 0) -> str:
    """Format as US dollars, e.g. 1250 -> "$1,250"."""
    text = f"{abs(value):,.{max_fraction_digits}f}"
    if value < 0 and text.strip("0.,"):
        return f"-${text}"
    return f"${text}"


def format_number(value: float, max_fraction_digits: int = 1) -> str:
    """Format with grouping and at most `max_fraction_digits` decimals."""
    text = f"{value:,.{max_fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_range(bounds: tuple[float, float], currency: bool = False) -> str:
    """Format a [lo, hi] pair, collapsing to one value when both match."""
    if not all(math.isfinite(value) for value in bounds):
        return NOT_AVAILABLE

    fmt = format_currency if currency else format_number
    low, high = (fmt(value) for value in bounds)
    if low == high:
        return low
    return f"{low}{RANGE_SEPARATOR}{high}"


def metrics_summary(metrics: Optional[ScenarioMetrics]) -> str:
    """One-line budget and CAC summary for the active scenario."""
    if metrics is None:
        return "Select a scenario to view CAC"

    return (
        f"{format_currency(metrics.total_budget)} budget → "
        f"{format_currency(metrics.cac_range[0])}–{format_currency(metrics.cac_range[1])} CAC"
    )
