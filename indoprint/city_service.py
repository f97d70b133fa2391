"""Lookup and validation of the supported cities."""

from __future__ import annotations

import logging

from indoprint.cities import CITIES
from indoprint.errors import CityNotFound, InvalidInput
from indoprint.models import City

logger = logging.getLogger(__name__)

MAX_CITY_NAME_LENGTH = 50


def find_city(name: str) -> City:
    """Return the city whose name matches ``name``, ignoring case and surrounding whitespace.

    Raises CityNotFound, carrying the name as given, when there is no such city.
    """
    query = name.strip().lower()
    logger.debug("[CityService] Searching for city: '%s'", query)
    for city in CITIES:
        if city.name.lower() == query:
            return city
    logger.debug("[CityService] City not found: '%s'", name)
    raise CityNotFound(name)


def validate_city_input(city: str) -> str:
    """Return the trimmed city name, or raise InvalidInput if it is empty or too long."""
    trimmed = city.strip()
    if not trimmed:
        raise InvalidInput("City name is required")
    if len(trimmed.encode("utf-8")) > MAX_CITY_NAME_LENGTH:
        raise InvalidInput("City name must not exceed 50 characters")
    return trimmed


def get_all_cities() -> tuple[City, ...]:
    """All cities in the database."""
    return CITIES


def get_city_count() -> int:
    """Number of cities in the database."""
    return len(CITIES)