import time
from datetime import datetime
from http import HTTPStatus

import pytest

from indoprint.errors import (
    ApiError,
    ApiTimeout,
    CityNotFound,
    ErrorResponse,
    InvalidInput,
    WeatherProviderError,
    city_not_found,
    internal_error,
    invalid_params,
    provider_error,
)


def test_city_not_found_constructor():
    error = city_not_found("Tokyo")
    assert isinstance(error, CityNotFound)
    assert error.city == "Tokyo"


def test_invalid_params_constructor():
    error = invalid_params("Invalid parameter")
    assert isinstance(error, InvalidInput)
    assert error.message == "Invalid parameter"


def test_provider_error_constructor():
    error = provider_error("Provider failed")
    assert isinstance(error, WeatherProviderError)
    assert error.message == "Provider failed"


def test_internal_error_constructor():
    error = internal_error("Database connection failed")
    assert isinstance(error, WeatherProviderError)
    assert "Internal error" in error.message
    assert "Database connection failed" in error.message


def test_city_not_found_response_status():
    status, _ = city_not_found("InvalidCity").to_response()
    assert status == HTTPStatus.NOT_FOUND


def test_city_not_found_response_body():
    _, response = city_not_found("InvalidCity").to_response()
    assert response.error == "CITY_NOT_FOUND"
    assert "InvalidCity" in response.message
    assert "not found in database" in response.message
    assert response.timestamp != ""


def test_invalid_params_response_status():
    status, _ = invalid_params("City cannot be empty").to_response()
    assert status == HTTPStatus.BAD_REQUEST


def test_invalid_params_response_body():
    _, response = invalid_params("City cannot be empty").to_response()
    assert response.error == "INVALID_INPUT"
    assert response.message == "City cannot be empty"
    assert response.timestamp != ""


def test_provider_error_response_status():
    status, _ = provider_error("All providers failed").to_response()
    assert status == HTTPStatus.SERVICE_UNAVAILABLE


def test_provider_error_response_body():
    _, response = provider_error("All providers failed").to_response()
    assert response.error == "SERVICE_UNAVAILABLE"
    assert "weather providers" in response.message
    assert response.timestamp != ""


def test_timeout_error_response():
    status, response = ApiTimeout().to_response()
    assert status == HTTPStatus.SERVICE_UNAVAILABLE
    assert response.error == "TIMEOUT"
    assert "timed out" in response.message


def test_error_response_new():
    response = ErrorResponse("TEST_ERROR", "Test message")
    assert response.error == "TEST_ERROR"
    assert response.message == "Test message"
    assert response.timestamp != ""


def test_error_response_timestamp_format():
    response = ErrorResponse("TEST", "Test")
    assert "T" in response.timestamp
    assert len(response.timestamp) > 20
    assert datetime.fromisoformat(response.timestamp).tzinfo is not None


def test_error_response_to_dict_keys():
    data = ErrorResponse("TEST", "Test").to_dict()
    assert set(data) == {"error", "message", "timestamp"}
    assert data["error"] == "TEST"


def test_display_city_not_found():
    text = str(city_not_found("TestCity"))
    assert "City not found" in text
    assert "TestCity" in text


def test_display_invalid_input():
    text = str(invalid_params("Invalid parameter"))
    assert "Invalid input" in text
    assert "Invalid parameter" in text


def test_display_provider_error():
    text = str(provider_error("Provider timeout"))
    assert "Weather provider error" in text
    assert "Provider timeout" in text


def test_display_timeout():
    assert str(ApiTimeout()) == "Request timeout"


def test_errors_are_raisable_api_errors():
    error = city_not_found("Nowhere")
    with pytest.raises(ApiError) as info:
        raise error
    assert info.value is error
    assert info.value.city == "Nowhere"
    status, response = info.value.to_response()
    assert status == HTTPStatus.NOT_FOUND
    assert response.error == "CITY_NOT_FOUND"
    assert "Nowhere" in response.message


def test_multiple_errors_have_timestamps():
    _, first = city_not_found("City1").to_response()
    time.sleep(0.01)
    _, second = city_not_found("City2").to_response()
    assert first.timestamp != ""
    assert second.timestamp != ""
    assert second.timestamp >= first.timestamp


def test_error_constructors_with_empty_strings():
    not_found = city_not_found("")
    bad_input = invalid_params("")
    provider = provider_error("")
    internal = internal_error("")
    assert isinstance(not_found, CityNotFound)
    assert not_found.city == ""
    assert isinstance(bad_input, InvalidInput)
    assert bad_input.message == ""
    assert isinstance(provider, WeatherProviderError)
    assert provider.message == ""
    assert isinstance(internal, WeatherProviderError)
    assert internal.message == "Internal error: "