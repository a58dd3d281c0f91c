from __future__ import annotations

import math
from types import MappingProxyType

from loguru import logger

from .breeds import base_weight, growth_factor
from .models import (
    ActivityLevel,
    BodyConditionScore,
    FeedingPortion,
    GrowthRate,
    RibVisibility,
    WaistDefinition,
    WeightRange,
)
from .units import round_half_up

WEIGHT_VARIANCE = 0.15
MIN_WEIGHT_KG = 0.5

# Daily intake as a fraction of body weight.
YOUNG_PUPPY_INTAKE = 0.03
PUPPY_INTAKE = 0.025

ACTIVITY_MULTIPLIERS = MappingProxyType(
    {
        "low": 0.9,
        "medium": 1.0,
        "high": 1.1,
    }
)

BCS_DESCRIPTIONS = MappingProxyType(
    {
        1: "Emaciated",
        2: "Very thin",
        3: "Thin",
        4: "Underweight",
        5: "Ideal",
        6: "Overweight",
        7: "Heavy",
        8: "Obese",
        9: "Severely obese",
    }
)
IDEAL_BCS = 5


def ideal_weight_range(breed: str, age_in_weeks: float) -> WeightRange:
    ideal = base_weight(breed) * growth_factor(age_in_weeks)
    variance = ideal * WEIGHT_VARIANCE
    low = max(MIN_WEIGHT_KG, ideal - variance)
    # Toy breeds in their first weeks sit below the floor; keep min <= max.
    return WeightRange(min=low, max=max(low, ideal + variance), unit="kg")


def meals_per_day(age_in_weeks: float) -> int:
    if age_in_weeks < 12:
        return 4
    if age_in_weeks < 24:
        return 3
    return 2


def feeding_portion(
    weight: float,
    age_in_weeks: float,
    activity_level: ActivityLevel = "medium",
) -> FeedingPortion:
    """Per-meal food amount in grams for a puppy of ``weight`` kg."""
    intake = YOUNG_PUPPY_INTAKE if age_in_weeks < 12 else PUPPY_INTAKE
    daily_grams = weight * intake * ACTIVITY_MULTIPLIERS[activity_level] * 1000
    frequency = meals_per_day(age_in_weeks)
    return FeedingPortion(amount=round_half_up(daily_grams / frequency), unit="g", frequency=frequency)


def growth_rate(current_weight: float, previous_weight: float, days_between: float) -> GrowthRate:
    """Average change in g/day between two weighings in kg.

    Non-positive intervals give a rate of 0.
    """
    if days_between <= 0:
        logger.debug("Non-positive interval of {} days, reporting zero growth", days_between)
        return GrowthRate(rate=0, unit="g/day")

    daily_grams = (current_weight - previous_weight) / days_between * 1000
    return GrowthRate(rate=round_half_up(daily_grams, 1), unit="g/day")


def _weight_ratio(weight: float, ideal_weight: float) -> float:
    if ideal_weight == 0:
        logger.debug("Ideal weight is zero, weight ratio is unbounded")
        if weight == 0:
            return math.nan
        return math.copysign(math.inf, weight)
    return weight / ideal_weight


def body_condition_score(
    weight: float,
    ideal_weight: float,
    rib_visibility: RibVisibility,
    waist_definition: WaistDefinition,
) -> BodyConditionScore:
    """Simplified 1-9 body condition score.

    Starts from the ideal score of 5 and adjusts for how far the weight is
    from ideal, how visible the ribs are and how defined the waist is.
    """
    ratio = _weight_ratio(weight, ideal_weight)
    score = IDEAL_BCS

    if ratio < 0.9:
        score -= 2
    elif ratio < 0.95:
        score -= 1
    elif ratio > 1.1:
        score += 1
    # Unreachable: anything above 1.2 already matched > 1.1.
    elif ratio > 1.2:
        score += 2

    if rib_visibility == "visible":
        score -= 1
    elif rib_visibility == "not_visible":
        score += 1

    if waist_definition == "pronounced":
        score -= 1
    elif waist_definition == "not_visible":
        score += 1

    score = max(1, min(9, score))
    return BodyConditionScore(score=score, description=BCS_DESCRIPTIONS[score])
