"""Small shared helpers."""

from __future__ import annotations

import math
from collections.abc import Iterable


def check_interval(value: float, low: float, high: float, name: str) -> None:
    """Raise ``ValueError`` unless ``low <= value <= high``."""
    if not low <= value <= high:
        raise ValueError(
            f"Invalid value for `{name}`. Must be in the interval [{low}, {high}]."
        )


def format_float(value: float, precision: int) -> str:
    """Format a float with ``precision`` decimals, switching to scientific notation for small values."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    threshold = 0.1 ** (precision - 1)
    if threshold >= value:
        mantissa, exponent = f"{value:.{precision}e}".split("e")
        return f"{mantissa}e{int(exponent)}"
    return f"{value:.{precision}f}"


def summary_from_keys(keys: Iterable[str]) -> dict[str, float]:
    """Build a key-sorted summary mapping each key to ``0.0``."""
    return {key: 0.0 for key in sorted(keys)}