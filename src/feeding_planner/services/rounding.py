"""Rounding helpers applied at output boundaries."""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals with halves rounded toward +infinity.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round_kcal(value: float) -> float:
    """Round an energy value to whole kcal; NaN passes through."""
    rounded = round_half_up(value)
    if not math.isfinite(rounded):
        return rounded
    return int(rounded)


def round_money(value: float) -> float:
    """Round a monetary value to cents."""
    return round_half_up(value, 2)


def round_amount(value: float) -> float:
    """Round a feeding amount to two decimals."""
    return round_half_up(value, 2)


def round_percent(value: float) -> float:
    """Round a percentage to one decimal."""
    return round_half_up(value, 1)
