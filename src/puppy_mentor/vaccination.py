from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from loguru import logger

from .models import VaccinationStatus


@dataclass(frozen=True)
class Vaccine:
    name: str
    weeks: int


# Core puppy schedule, in the order doses are given.
VACCINATION_SCHEDULE: tuple[Vaccine, ...] = (
    Vaccine("DHPP (First)", 6),
    Vaccine("DHPP (Second)", 10),
    Vaccine("DHPP (Third)", 14),
    Vaccine("Rabies", 16),
    Vaccine("Bordetella", 16),
    Vaccine("Lyme Disease", 20),
)


def vaccination_schedule(age_in_weeks: float, now: datetime | None = None) -> VaccinationStatus:
    """Vaccines already due at ``age_in_weeks`` and the next one coming up.

    ``next_due_date`` is measured from ``now`` (current UTC time by default)
    and is ``None`` when that instant falls outside the datetime range.
    """
    due = [vaccine.name for vaccine in VACCINATION_SCHEDULE if age_in_weeks >= vaccine.weeks]
    upcoming = next((vaccine for vaccine in VACCINATION_SCHEDULE if age_in_weeks < vaccine.weeks), None)
    if upcoming is None:
        return VaccinationStatus(due=due, next=None, next_due_date=None)

    if now is None:
        now = datetime.now(timezone.utc)
    try:
        due_date = now + timedelta(weeks=upcoming.weeks - age_in_weeks)
    except OverflowError:
        logger.debug("Due date for {} at age {} weeks is out of range", upcoming.name, age_in_weeks)
        due_date = None
    return VaccinationStatus(due=due, next=upcoming.name, next_due_date=due_date)
