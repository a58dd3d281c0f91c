from __future__ import annotations

from types import MappingProxyType

from loguru import logger

DEFAULT_BASE_WEIGHT_KG = 20.0

# Typical adult weight in kg, keyed by lowercase breed slug.
BREED_BASE_WEIGHTS_KG = MappingProxyType(
    {
        "golden_retriever": 30.0,
        "labrador": 30.0,
        "german_shepherd": 35.0,
        "french_bulldog": 12.0,
        "poodle": 20.0,
        "beagle": 15.0,
        "rottweiler": 45.0,
        "yorkshire_terrier": 3.0,
        "chihuahua": 2.0,
        "bulldog": 25.0,
    }
)

# (upper bound in weeks, exclusive; fraction of adult weight)
GROWTH_STAGES: tuple[tuple[float, float], ...] = (
    (8, 0.1),
    (16, 0.3),
    (24, 0.6),
    (52, 0.9),
)
ADULT_GROWTH_FACTOR = 1.0


def base_weight(breed: str) -> float:
    """Adult base weight in kg; unknown breeds fall back to the default."""
    weight = BREED_BASE_WEIGHTS_KG.get(breed.lower())
    if weight is None:
        logger.debug("Unknown breed {!r}, using default base weight {} kg", breed, DEFAULT_BASE_WEIGHT_KG)
        return DEFAULT_BASE_WEIGHT_KG
    return weight


def growth_factor(age_in_weeks: float) -> float:
    for upper_weeks, factor in GROWTH_STAGES:
        if age_in_weeks < upper_weeks:
            return factor
    return ADULT_GROWTH_FACTOR


def known_breeds() -> list[str]:
    return list(BREED_BASE_WEIGHTS_KG)


def breed_label(breed: str) -> str:
    """Render a breed slug for display, e.g. ``german_shepherd`` -> ``German Shepherd``."""
    words = [word for word in breed.strip().replace("_", " ").split(" ") if word]
    return " ".join(word.capitalize() for word in words)
