from __future__ import annotations

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to the given number of decimals with ties going towards +infinity."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def round_to_int(value: float) -> int:
    """Round half-up and return an int."""
    return int(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """Render a metric value without a trailing '.0' on whole numbers."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
