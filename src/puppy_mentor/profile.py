from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from .dates import age_in_months, age_in_weeks
from .models import ActivityLevel, FeedingPortion, VaccinationStatus, WeightRange
from .vaccination import vaccination_schedule
from .weight import feeding_portion, ideal_weight_range

MAX_NAME_LENGTH = 100


@dataclass(frozen=True)
class PuppySummary:
    age_in_weeks: int
    weight_range: WeightRange
    feeding: FeedingPortion
    vaccinations: VaccinationStatus


@dataclass(frozen=True)
class PuppyProfile:
    """Validated puppy details entered by the owner."""

    name: str
    breed: str
    birth_date: date
    weight_kg: float
    activity: ActivityLevel = "medium"

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("name must not be empty")
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValueError(f"name must not exceed {MAX_NAME_LENGTH} characters")
        if not self.breed.strip():
            raise ValueError("breed must not be empty")
        if self.weight_kg <= 0:
            raise ValueError("weight_kg must be greater than 0")
        if self.birth_date > date.today():
            raise ValueError("birth_date must not be in the future")
        if self.activity not in ("low", "medium", "high"):
            raise ValueError("activity must be one of: low, medium, high")

    def age_in_weeks(self, today: date | None = None) -> int:
        return age_in_weeks(self.birth_date, today)

    def is_adult(self, today: date | None = None) -> bool:
        return age_in_months(self.birth_date, today) >= 12

    def summary(self, today: date | None = None, now: datetime | None = None) -> PuppySummary:
        weeks = self.age_in_weeks(today)
        return PuppySummary(
            age_in_weeks=weeks,
            weight_range=ideal_weight_range(self.breed, weeks),
            feeding=feeding_portion(self.weight_kg, weeks, self.activity),
            vaccinations=vaccination_schedule(weeks, now=now),
        )
