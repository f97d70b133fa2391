"""Weighted averaging of temperatures reported by several providers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

WEIGHT_OPEN_METEO = 0.4
WEIGHT_OPEN_WEATHER = 0.35
WEIGHT_WEATHER_API = 0.25


def calculate_weighted_average_generic(
    values_with_weights: Iterable[tuple[float, float]],
) -> float:
    """Weighted mean of ``(value, weight)`` pairs; 0.0 if there are none or the weights sum to 0."""
    weighted_sum = 0.0
    total_weight = 0.0
    for value, weight in values_with_weights:
        weighted_sum += value * weight
        total_weight += weight
    if total_weight > 0.0:
        return weighted_sum / total_weight
    return 0.0


def calculate_weighted_temperature(
    open_meteo: Optional[float],
    open_weather: Optional[float],
    weather_api: Optional[float],
) -> float:
    """Weighted mean of the provider temperatures that are present.

    Open-Meteo weighs 0.4, OpenWeatherMap 0.35 and WeatherAPI 0.25; missing
    providers are left out and the remaining weights renormalised.
    """
    pairs = (
        (open_meteo, WEIGHT_OPEN_METEO),
        (open_weather, WEIGHT_OPEN_WEATHER),
        (weather_api, WEIGHT_WEATHER_API),
    )
    return calculate_weighted_average_generic(
        (value, weight) for value, weight in pairs if value is not None
    )