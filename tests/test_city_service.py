import pytest

from indoprint.cities import CITIES
from indoprint.city_service import (
    find_city,
    get_all_cities,
    get_city_count,
    validate_city_input,
)
from indoprint.errors import CityNotFound, InvalidInput


def test_find_city_exact_match():
    city = find_city("Jakarta")
    assert city.name == "Jakarta"
    assert city.province == "DKI Jakarta"
    assert city.latitude < 0.0


@pytest.mark.parametrize(
    "query, expected",
    [
        ("jakarta", "Jakarta"),
        ("BANDUNG", "Bandung"),
        ("SuRaBaYa", "Surabaya"),
        ("  Medan", "Medan"),
        ("Makassar  ", "Makassar"),
        ("  Semarang  ", "Semarang"),
        ("  Bandung  ", "Bandung"),
    ],
)
def test_find_city_case_and_whitespace(query, expected):
    assert find_city(query).name == expected


def test_find_city_not_found_keeps_given_name():
    with pytest.raises(CityNotFound) as info:
        find_city("InvalidCity")
    assert info.value.city == "InvalidCity"


def test_find_city_empty_string():
    with pytest.raises(CityNotFound):
        find_city("")


def test_find_city_whitespace_only():
    with pytest.raises(CityNotFound):
        find_city("   ")


def test_find_city_partial_match_fails():
    with pytest.raises(CityNotFound):
        find_city("Jak")


def test_find_city_coordinates_valid():
    city = find_city("Yogyakarta")
    assert city.latitude < 0.0
    assert 100.0 < city.longitude < 120.0


def test_validate_city_input_success():
    assert validate_city_input("Jakarta") == "Jakarta"


def test_validate_city_input_trims_whitespace():
    assert validate_city_input("  Bandung  ") == "Bandung"


@pytest.mark.parametrize("value", ["", "   "])
def test_validate_city_input_empty(value):
    with pytest.raises(InvalidInput) as info:
        validate_city_input(value)
    assert info.value.message == "City name is required"


def test_validate_city_input_too_long():
    with pytest.raises(InvalidInput) as info:
        validate_city_input("A" * 51)
    assert info.value.message == "City name must not exceed 50 characters"


def test_validate_city_input_exactly_50_chars():
    assert len(validate_city_input("A" * 50)) == 50


def test_validate_city_input_preserves_case():
    assert validate_city_input("JaKaRtA") == "JaKaRtA"


def test_validate_city_with_special_characters():
    assert validate_city_input("City-123") == "City-123"


def test_get_all_cities_count_and_content():
    cities = get_all_cities()
    assert len(cities) >= 50
    assert any(c.name == "Jakarta" for c in cities)


def test_get_all_cities_ids_and_coordinates():
    for city in get_all_cities():
        assert city.id > 0
        assert abs(city.latitude) <= 90.0
        assert abs(city.longitude) <= 180.0


def test_get_city_count():
    count = get_city_count()
    assert count >= 50
    assert count == len(CITIES)
    assert count == len(get_all_cities())


def test_find_city_is_stable():
    first = find_city("Jakarta")
    second = find_city("Jakarta")
    assert first.id == second.id
    assert first == second


def test_validate_and_find_integration():
    validated = validate_city_input("  jakarta  ")
    assert find_city(validated).name == "Jakarta"


@pytest.mark.parametrize("name", ["Jakarta", "Bandung", "Surabaya", "Medan", "Makassar"])
def test_find_multiple_cities(name):
    assert find_city(name).name == name


@pytest.mark.parametrize("variation", ["SOLO", "solo", "Solo", "SoLo", "sOlO"])
def test_find_city_case_variations(variation):
    assert find_city(variation).name == "Solo"