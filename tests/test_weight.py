import pytest

from puppy_mentor.breeds import known_breeds
from puppy_mentor.weight import (
    body_condition_score,
    feeding_portion,
    growth_rate,
    ideal_weight_range,
    meals_per_day,
)


def test_ideal_weight_range_for_puppy() -> None:
    result = ideal_weight_range("golden_retriever", 12)
    assert result.min == pytest.approx(7.65)
    assert result.max == pytest.approx(10.35)
    assert result.unit == "kg"


def test_ideal_weight_range_orders_breeds_and_ages() -> None:
    large = ideal_weight_range("golden_retriever", 12)
    small = ideal_weight_range("chihuahua", 12)
    assert large.min > small.min
    assert large.max > small.max

    young = ideal_weight_range("golden_retriever", 8)
    older = ideal_weight_range("golden_retriever", 24)
    assert older.min > young.min
    assert older.max > young.max


@pytest.mark.parametrize("age_weeks", [0, 4, 8, 12, 20, 30, 60])
def test_ideal_weight_range_bounds(age_weeks: int) -> None:
    for breed in [*known_breeds(), "mystery_mix"]:
        result = ideal_weight_range(breed, age_weeks)
        assert result.min >= 0.5
        assert result.min <= result.max


def test_ideal_weight_range_floor_for_toy_breeds() -> None:
    result = ideal_weight_range("chihuahua", 4)
    assert result.min == 0.5
    assert result.max == 0.5


def test_ideal_weight_range_unknown_breed_uses_default() -> None:
    result = ideal_weight_range("unknown_breed", 60)
    assert result.min == pytest.approx(17.0)
    assert result.max == pytest.approx(23.0)


@pytest.mark.parametrize(
    ("age_weeks", "meals"),
    [(8, 4), (11.9, 4), (12, 3), (23, 3), (24, 2), (60, 2)],
)
def test_meals_per_day(age_weeks: float, meals: int) -> None:
    assert meals_per_day(age_weeks) == meals


def test_feeding_portion_amounts() -> None:
    adult = feeding_portion(10, 30)
    assert adult.amount == 125
    assert adult.unit == "g"
    assert adult.frequency == 2

    young = feeding_portion(4, 10)
    assert young.amount == 30
    assert young.frequency == 4


def test_feeding_portion_adjusts_for_activity_age_and_weight() -> None:
    assert feeding_portion(5, 12, "high").amount > feeding_portion(5, 12, "low").amount
    assert feeding_portion(5, 8).frequency > feeding_portion(5, 24).frequency
    assert feeding_portion(10, 12).amount > feeding_portion(2, 12).amount
    assert isinstance(feeding_portion(5, 12).amount, int)


def test_growth_rate() -> None:
    gain = growth_rate(5.5, 5.0, 7)
    assert gain.rate == pytest.approx(71.4)
    assert gain.unit == "g/day"

    loss = growth_rate(5.0, 5.5, 7)
    assert loss.rate == pytest.approx(-71.4)

    assert growth_rate(5.25, 5.0, 10).rate == pytest.approx(25.0)


@pytest.mark.parametrize("days", [0, -1, -30])
def test_growth_rate_non_positive_interval(days: int) -> None:
    result = growth_rate(5.5, 5.0, days)
    assert result.rate == 0
    assert result.unit == "g/day"


@pytest.mark.parametrize(
    ("weight", "ideal", "ribs", "waist", "score", "description"),
    [
        (5, 5, "slightly_visible", "visible", 5, "Ideal"),
        (4, 5, "visible", "pronounced", 1, "Emaciated"),
        (4.6, 5, "slightly_visible", "visible", 4, "Underweight"),
        (6, 5, "not_visible", "not_visible", 8, "Obese"),
        (5, 5, "visible", "visible", 4, "Underweight"),
        (5, 5, "slightly_visible", "not_visible", 6, "Overweight"),
    ],
)
def test_body_condition_score(
    weight: float, ideal: float, ribs: str, waist: str, score: int, description: str
) -> None:
    result = body_condition_score(weight, ideal, ribs, waist)
    assert result.score == score
    assert result.description == description


def test_body_condition_score_heavy_ratio_only_adds_one() -> None:
    # A ratio of 1.4 lands in the > 1.1 branch, same as 1.15.
    assert body_condition_score(7, 5, "slightly_visible", "visible").score == 6
    assert body_condition_score(5.75, 5, "slightly_visible", "visible").score == 6


def test_body_condition_score_is_clamped() -> None:
    low = body_condition_score(1, 5, "visible", "pronounced")
    high = body_condition_score(100, 5, "not_visible", "not_visible")
    assert 1 <= low.score <= 9
    assert 1 <= high.score <= 9
    assert low.score == 1


def test_body_condition_score_zero_ideal_weight() -> None:
    assert body_condition_score(5, 0, "slightly_visible", "visible").score == 6
    assert body_condition_score(0, 0, "slightly_visible", "visible").score == 5
    assert body_condition_score(-1, 0, "slightly_visible", "visible").score == 3


def test_growth_rate_too_large_to_round() -> None:
    result = growth_rate(1e305, 0, 1)
    assert result.rate == pytest.approx(1e308)
    assert result.unit == "g/day"
