import json
import sys
from dataclasses import asdict
from datetime import date, datetime
from enum import Enum
from typing import Any

import typer
from loguru import logger

from .breeds import base_weight, growth_factor
from .profile import PuppyProfile
from .training import training_progress
from .vaccination import vaccination_schedule
from .weight import body_condition_score, feeding_portion, growth_rate, ideal_weight_range

app = typer.Typer(help="Puppy care calculators")


class Activity(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class Mastery(str, Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


class Ribs(str, Enum):
    visible = "visible"
    slightly_visible = "slightly_visible"
    not_visible = "not_visible"


class Waist(str, Enum):
    pronounced = "pronounced"
    visible = "visible"
    not_visible = "not_visible"


def _json_default(value: Any) -> str:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


def _echo(payload: dict[str, Any]) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, default=_json_default))


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING",
        envvar="PUPPY_MENTOR_LOG_LEVEL",
        help="Log level for diagnostics written to stderr",
    ),
) -> None:
    """Puppy care calculators."""
    logger.remove()
    logger.add(sys.stderr, level=log_level.upper())


@app.command("weight-range")
def weight_range(
    breed: str = typer.Option(..., help="Breed slug, e.g. golden_retriever"),
    age_weeks: float = typer.Option(..., min=0, help="Age in weeks"),
) -> None:
    """Expected weight range for a breed at a given age."""
    result = ideal_weight_range(breed, age_weeks)
    _echo(
        {
            "breed": breed,
            "age_weeks": age_weeks,
            "base_weight_kg": base_weight(breed),
            "growth_factor": growth_factor(age_weeks),
            "min": round(result.min, 2),
            "max": round(result.max, 2),
            "unit": result.unit,
        }
    )


@app.command()
def feeding(
    weight_kg: float = typer.Option(..., min=0.0001, help="Puppy weight in kg"),
    age_weeks: float = typer.Option(..., min=0, help="Age in weeks"),
    activity: Activity = typer.Option(Activity.medium, case_sensitive=False, help="Activity level"),
) -> None:
    """Per-meal portion and meals per day."""
    _echo(asdict(feeding_portion(weight_kg, age_weeks, activity.value)))


@app.command()
def growth(
    current_kg: float = typer.Option(..., help="Latest weight in kg"),
    previous_kg: float = typer.Option(..., help="Earlier weight in kg"),
    days: float = typer.Option(..., help="Days between the two weighings"),
) -> None:
    """Average growth in grams per day."""
    _echo(asdict(growth_rate(current_kg, previous_kg, days)))


@app.command()
def bcs(
    weight_kg: float = typer.Option(..., help="Puppy weight in kg"),
    ideal_kg: float = typer.Option(..., help="Ideal weight in kg"),
    ribs: Ribs = typer.Option(..., case_sensitive=False, help="Rib visibility"),
    waist: Waist = typer.Option(..., case_sensitive=False, help="Waist definition"),
) -> None:
    """Body condition score on the 1-9 scale."""
    _echo(asdict(body_condition_score(weight_kg, ideal_kg, ribs.value, waist.value)))


@app.command()
def vaccines(age_weeks: float = typer.Option(..., min=0, help="Age in weeks")) -> None:
    """Vaccines due so far and the next one on the schedule."""
    _echo(asdict(vaccination_schedule(age_weeks)))


@app.command()
def training(
    completed: int = typer.Option(..., min=0, help="Completed exercises"),
    total: int = typer.Option(..., min=0, help="Assigned exercises"),
    mastery: Mastery = typer.Option(Mastery.beginner, case_sensitive=False, help="Mastery level"),
) -> None:
    """Training completion percentage and level."""
    _echo(asdict(training_progress(completed, total, mastery.value)))


@app.command()
def profile(
    name: str = typer.Option(..., help="Puppy name"),
    breed: str = typer.Option(..., help="Breed slug"),
    birth_date: datetime = typer.Option(..., formats=["%Y-%m-%d"], help="Birth date (YYYY-MM-DD)"),
    weight_kg: float = typer.Option(..., help="Current weight in kg"),
    activity: Activity = typer.Option(Activity.medium, case_sensitive=False, help="Activity level"),
) -> None:
    """Validate a puppy profile and print its care summary."""
    try:
        puppy = PuppyProfile(
            name=name,
            breed=breed,
            birth_date=birth_date.date(),
            weight_kg=weight_kg,
            activity=activity.value,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    summary = puppy.summary()
    _echo(
        {
            "name": puppy.name,
            "breed": puppy.breed,
            "adult": puppy.is_adult(),
            **asdict(summary),
        }
    )


if __name__ == "__main__":
    app()
