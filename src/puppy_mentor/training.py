from __future__ import annotations

from types import MappingProxyType

from loguru import logger

from .models import MasteryLevel, ProgressLevel, TrainingProgress
from .units import round_half_up

# Higher mastery discounts the reported completion.
MASTERY_MULTIPLIERS = MappingProxyType(
    {
        "beginner": 1.0,
        "intermediate": 0.8,
        "advanced": 0.6,
    }
)

ADVANCED_THRESHOLD = 80
INTERMEDIATE_THRESHOLD = 50


def progress_level(percentage: float) -> ProgressLevel:
    if percentage >= ADVANCED_THRESHOLD:
        return "Advanced"
    if percentage >= INTERMEDIATE_THRESHOLD:
        return "Intermediate"
    return "Beginner"


def training_progress(
    completed_exercises: float,
    total_exercises: float,
    mastery_level: MasteryLevel = "beginner",
) -> TrainingProgress:
    if total_exercises == 0:
        logger.debug("No exercises assigned, training not started")
        return TrainingProgress(percentage=0, level="Not started")

    adjusted = completed_exercises / total_exercises * 100 * MASTERY_MULTIPLIERS[mastery_level]
    # Level is taken from the unrounded value.
    return TrainingProgress(percentage=round_half_up(adjusted), level=progress_level(adjusted))
