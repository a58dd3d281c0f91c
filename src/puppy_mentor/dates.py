from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Age:
    years: int
    months: int
    days: int
    total_days: int


def _today(today: date | None) -> date:
    return date.today() if today is None else today


def age_in_days(birth_date: date, today: date | None = None) -> int:
    return (_today(today) - birth_date).days


def age_in_weeks(birth_date: date, today: date | None = None) -> int:
    return age_in_days(birth_date, today) // 7


def age_in_months(birth_date: date, today: date | None = None) -> int:
    """Calendar month difference, ignoring the day of month."""
    today = _today(today)
    return (today.year - birth_date.year) * 12 + (today.month - birth_date.month)


def calculate_age(birth_date: date, today: date | None = None) -> Age:
    """Age broken into calendar years, months and days.

    When the day of month has not been reached yet, a month is borrowed and
    the length of the previous month is added to the days.
    """
    today = _today(today)
    years = today.year - birth_date.year
    months = today.month - birth_date.month
    days = today.day - birth_date.day

    if days < 0:
        months -= 1
        prev_year, prev_month = (today.year, today.month - 1) if today.month > 1 else (today.year - 1, 12)
        days += calendar.monthrange(prev_year, prev_month)[1]

    if months < 0:
        years -= 1
        months += 12

    return Age(years=years, months=months, days=days, total_days=(today - birth_date).days)
