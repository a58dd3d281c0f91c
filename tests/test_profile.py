from datetime import date, datetime, timedelta, timezone

import pytest

from puppy_mentor.profile import PuppyProfile


def make_profile(**overrides) -> PuppyProfile:
    fields = {
        "name": "Buddy",
        "breed": "golden_retriever",
        "birth_date": date(2024, 1, 1),
        "weight_kg": 4.0,
    }
    fields.update(overrides)
    return PuppyProfile(**fields)


def test_profile_defaults() -> None:
    profile = make_profile()
    assert profile.activity == "medium"
    assert profile.age_in_weeks(today=date(2024, 3, 1)) == 8


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"name": "  "}, "name"),
        ({"name": "x" * 101}, "name"),
        ({"breed": ""}, "breed"),
        ({"weight_kg": 0}, "weight_kg"),
        ({"weight_kg": -2.5}, "weight_kg"),
        ({"birth_date": date.today() + timedelta(days=1)}, "birth_date"),
        ({"activity": "extreme"}, "activity"),
    ],
)
def test_profile_validation(overrides: dict, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        make_profile(**overrides)


def test_is_adult() -> None:
    profile = make_profile()
    assert not profile.is_adult(today=date(2024, 12, 31))
    assert profile.is_adult(today=date(2025, 1, 1))


def test_summary() -> None:
    now = datetime(2024, 3, 1, tzinfo=timezone.utc)
    summary = make_profile().summary(today=date(2024, 3, 1), now=now)

    assert summary.age_in_weeks == 8
    assert summary.weight_range.min == pytest.approx(7.65)
    assert summary.weight_range.max == pytest.approx(10.35)
    assert summary.feeding.amount == 30
    assert summary.feeding.frequency == 4
    assert summary.vaccinations.due == ["DHPP (First)"]
    assert summary.vaccinations.next == "DHPP (Second)"
    assert summary.vaccinations.next_due_date == now + timedelta(weeks=2)
