from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

WeightUnit = Literal["kg", "lbs"]
PortionUnit = Literal["g", "cups"]
RateUnit = Literal["g/day", "lbs/week"]
ActivityLevel = Literal["low", "medium", "high"]
MasteryLevel = Literal["beginner", "intermediate", "advanced"]
RibVisibility = Literal["visible", "slightly_visible", "not_visible"]
WaistDefinition = Literal["pronounced", "visible", "not_visible"]
ProgressLevel = Literal["Not started", "Beginner", "Intermediate", "Advanced"]


@dataclass(frozen=True)
class WeightRange:
    """Expected weight band for a breed at a given age."""

    min: float
    max: float
    unit: WeightUnit = "kg"


@dataclass(frozen=True)
class FeedingPortion:
    """Per-meal amount; ``amount`` is already divided by ``frequency``."""

    amount: int | float
    unit: PortionUnit
    frequency: int


@dataclass(frozen=True)
class GrowthRate:
    rate: float
    unit: RateUnit = "g/day"


@dataclass(frozen=True)
class BodyConditionScore:
    score: int
    description: str


@dataclass(frozen=True)
class VaccinationStatus:
    due: list[str]
    next: str | None
    next_due_date: datetime | None


@dataclass(frozen=True)
class TrainingProgress:
    percentage: int | float
    level: ProgressLevel
