"""Core data records: cities, daily forecasts and generic API payloads."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class City:
    """A city known to the service, with its geographic position."""

    id: int
    name: str
    province: str
    latitude: float
    longitude: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class DailyForecast:
    """Weather forecast for a single day."""

    date: str
    temp_max: float
    temp_min: float
    temp_avg: float
    condition: str
    humidity: int
    wind_speed: float
    icon: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class WeatherForecast:
    """Multi-day forecast for one city."""

    city: str
    province: str
    country: str
    latitude: float
    longitude: float
    last_updated: str
    forecast: list[DailyForecast] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "city": self.city,
            "province": self.province,
            "country": self.country,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "last_updated": self.last_updated,
            "forecast": [day.to_dict() for day in self.forecast],
        }


@dataclass
class ApiResponse(Generic[T]):
    """Envelope for an API result that either carries data or an error."""

    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: T) -> "ApiResponse[T]":
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, message: str) -> "ApiResponse[T]":
        return cls(success=False, error=message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "data": self.data,
            "message": self.message,
            "error": self.error,
        }


@dataclass
class ContactForm:
    """A message submitted through the contact form."""

    name: str
    email: str
    message: str
    phone: Optional[str] = None


@dataclass
class ServiceInfo:
    """Description of a service offering."""

    id: str
    name: str
    description: str
    price_range: Optional[str] = None