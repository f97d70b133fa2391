"""Statistical confidence of an ensemble from temperature spread and condition agreement."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any

_EPSILON = 1.1920929e-07

STDDEV_HIGH = 2.0
STDDEV_MEDIUM = 4.0
AGREEMENT_HIGH = 0.75
AGREEMENT_MEDIUM = 0.5


def calculate_stddev(values: Sequence[float]) -> float:
    """Population standard deviation; 0.0 for fewer than two values."""
    if len(values) < 2:
        return 0.0
    mean = sum(values) / len(values)
    variance = sum((v - mean) ** 2 for v in values) / len(values)
    return math.sqrt(variance)


def calculate_cv(values: Sequence[float]) -> float:
    """Coefficient of variation (stddev over absolute mean); 0.0 when the mean is about zero."""
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    if abs(mean) < _EPSILON:
        return 0.0
    return calculate_stddev(values) / abs(mean)


def calculate_confidence(temperatures: Sequence[float], condition_agreement: float) -> str:
    """Return "high", "medium" or "low" from the spread and the agreement ratio."""
    stddev = calculate_stddev(temperatures)
    if stddev < STDDEV_HIGH and condition_agreement >= AGREEMENT_HIGH:
        return "high"
    if (STDDEV_HIGH <= stddev <= STDDEV_MEDIUM) or (
        AGREEMENT_MEDIUM <= condition_agreement < AGREEMENT_HIGH
    ):
        return "medium"
    return "low"


def calculate_confidence_score(temperatures: Sequence[float], condition_agreement: float) -> float:
    """Score in [0, 1]: agreement times one minus the spread scaled by 10 degrees."""
    stddev_norm = min(calculate_stddev(temperatures) / 10.0, 1.0)
    score = condition_agreement * (1.0 - stddev_norm)
    return min(max(score, 0.0), 1.0)


@dataclass
class ConfidenceDetails:
    """Confidence tier together with the metrics it was derived from."""

    tier: str
    score: float
    max_temp_stddev: float
    min_temp_stddev: float
    condition_agreement: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def get_confidence_details(
    max_temps: Sequence[float],
    min_temps: Sequence[float],
    condition_agreement: float,
) -> ConfidenceDetails:
    """Tier and score over all temperatures, plus the spread of maxima and minima."""
    all_temps = [*max_temps, *min_temps]
    return ConfidenceDetails(
        tier=calculate_confidence(all_temps, condition_agreement),
        score=calculate_confidence_score(all_temps, condition_agreement),
        max_temp_stddev=calculate_stddev(max_temps),
        min_temp_stddev=calculate_stddev(min_temps),
        condition_agreement=condition_agreement,
    )