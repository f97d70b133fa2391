"""Confidence level of a day's forecast from how well the providers agree."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

from indoprint.ensemble_models import PerSourceData

logger = logging.getLogger(__name__)

_CONDITION_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("clear", ("clear", "sunny")),
    ("cloudy", ("cloud", "overcast")),
    ("rainy", ("rain", "drizzle", "shower")),
    ("stormy", ("storm", "thunder")),
    ("snowy", ("snow", "sleet")),
    ("foggy", ("fog", "mist", "haze")),
)


def calculate_confidence(per_source: PerSourceData, final_temps: tuple[float, float]) -> str:
    """Return "high", "medium" or "low".

    High needs all three providers within 2 degrees and agreeing on the
    condition; medium needs two or three providers within 3 degrees; anything
    else, including a single provider, is low.
    """
    provider_count = per_source.provider_count()
    logger.debug("[ConfidenceCalc] Provider count: %d", provider_count)

    if provider_count <= 1:
        return "low"

    max_temps = per_source.get_max_temperatures()
    min_temps = per_source.get_min_temperatures()
    if not max_temps or not min_temps:
        return "low"

    max_variance = calculate_variance(max_temps)
    min_variance = calculate_variance(min_temps)
    avg_variance = (max_variance + min_variance) / 2.0
    agreement = check_condition_agreement(per_source.get_conditions())

    logger.debug(
        "[ConfidenceCalc] max_variance: %.2f, min_variance: %.2f, avg_variance: %.2f, "
        "condition_agreement: %s",
        max_variance,
        min_variance,
        avg_variance,
        agreement,
    )

    if provider_count == 3 and avg_variance <= 2.0 and agreement:
        return "high"
    if provider_count in (2, 3) and avg_variance <= 3.0:
        return "medium"
    return "low"


def calculate_variance(temps: Sequence[float]) -> float:
    """Largest absolute deviation from the mean; 0 for fewer than two values."""
    if len(temps) < 2:
        return 0.0
    mean = sum(temps) / len(temps)
    return max(abs(t - mean) for t in temps)


def check_condition_agreement(conditions: Sequence[str]) -> bool:
    """Whether the conditions agree: both of two, or a majority of three or more."""
    if not conditions:
        return False
    if len(conditions) == 1:
        return True
    counts = Counter(normalize_condition(c) for c in conditions)
    top = max(counts.values())
    if len(conditions) == 2:
        return top == 2
    return top >= 2


def normalize_condition(condition: str) -> str:
    """Map a condition description to a broad category, or its lower-case form."""
    lower = condition.lower()
    for category, keywords in _CONDITION_CATEGORIES:
        if any(keyword in lower for keyword in keywords):
            return category
    return lower