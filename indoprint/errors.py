"""API error types and the JSON error body they map to."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class ErrorResponse:
    """JSON body returned to clients on failure."""

    error: str
    message: str
    timestamp: str = field(default_factory=_utc_timestamp)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class ApiError(Exception):
    """Base for errors that map to an HTTP response."""

    status: HTTPStatus = HTTPStatus.SERVICE_UNAVAILABLE
    code: str = "SERVICE_UNAVAILABLE"

    def _public_message(self) -> str:
        return "All weather providers are currently unavailable. Please try again later."

    def to_response(self) -> tuple[HTTPStatus, ErrorResponse]:
        return self.status, ErrorResponse(self.code, self._public_message())


class CityNotFound(ApiError):
    status = HTTPStatus.NOT_FOUND
    code = "CITY_NOT_FOUND"

    def __init__(self, city: str) -> None:
        super().__init__(f"City not found: {city}")
        self.city = city

    def _public_message(self) -> str:
        return f"City '{self.city}' not found in database"


class InvalidInput(ApiError):
    status = HTTPStatus.BAD_REQUEST
    code = "INVALID_INPUT"

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid input: {message}")
        self.message = message

    def _public_message(self) -> str:
        return self.message


class WeatherProviderError(ApiError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Weather provider error: {message}")
        self.message = message


class ApiTimeout(ApiError):
    code = "TIMEOUT"

    def __init__(self) -> None:
        super().__init__("Request timeout")

    def _public_message(self) -> str:
        return "Request timed out. Please try again later."


def city_not_found(city: str) -> CityNotFound:
    return CityNotFound(city)


def invalid_params(message: str) -> InvalidInput:
    return InvalidInput(message)


def provider_error(message: str) -> WeatherProviderError:
    return WeatherProviderError(message)


def internal_error(message: str) -> WeatherProviderError:
    return WeatherProviderError(f"Internal error: {message}")