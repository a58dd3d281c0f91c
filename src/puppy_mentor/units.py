from __future__ import annotations

import math

from .models import WeightUnit

KG_PER_LB = 0.453592


def round_half_up(value: float, ndigits: int = 0) -> int | float:
    """Round .5 upwards (towards +inf) instead of to the nearest even digit.

    Returns an ``int`` when ``ndigits`` is 0. Non-finite values, and values that
    overflow once scaled, pass through unrounded.
    """
    if not math.isfinite(value):
        return value
    if ndigits == 0:
        return math.floor(value + 0.5)
    scale = 10**ndigits
    scaled = value * scale
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / scale


def kg_to_lbs(kg: float) -> float:
    return kg / KG_PER_LB


def lbs_to_kg(lbs: float) -> float:
    return lbs * KG_PER_LB


def convert_weight(value: float, from_unit: WeightUnit, to_unit: WeightUnit) -> float:
    if from_unit == to_unit:
        return value
    if from_unit == "kg":
        return kg_to_lbs(value)
    return lbs_to_kg(value)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def format_weight(weight: float, unit: WeightUnit = "kg") -> str:
    return f"{weight:.1f} {unit}"


def format_age(years: int, months: int, days: int) -> str:
    """Human readable age, showing only the two most significant parts."""
    if years > 0:
        return f"{_plural(years, 'year')}, {_plural(months, 'month')}"
    if months > 0:
        return f"{_plural(months, 'month')}, {_plural(days, 'day')}"
    return _plural(days, "day")


def format_percentage(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"
