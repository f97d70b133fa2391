"""Data records for multi-provider ensemble forecasts."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, replace
from datetime import datetime
from typing import Any, Optional

_TEMP_LOW = -50.0
_TEMP_HIGH = 50.0
CONFIDENCE_LEVELS = ("high", "medium", "low")


def _temps_in_range(temp_max: float, temp_min: float) -> bool:
    return (
        _TEMP_LOW <= temp_max <= _TEMP_HIGH
        and _TEMP_LOW <= temp_min <= _TEMP_HIGH
        and temp_max >= temp_min
    )


@dataclass
class ProviderForecast:
    """A single provider's forecast for one day."""

    date: str
    temp_max: float
    temp_min: float
    condition: str

    def is_valid(self) -> bool:
        """Whether temperatures are plausible and a condition is present."""
        return _temps_in_range(self.temp_max, self.temp_min) and bool(self.condition)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProviderForecast":
        return cls(
            date=data["date"],
            temp_max=data["temp_max"],
            temp_min=data["temp_min"],
            condition=data["condition"],
        )


_PROVIDER_FIELDS = ("open_meteo", "open_weather", "weather_api")


@dataclass
class PerSourceData:
    """Forecasts from each of the three providers, any of which may be missing."""

    open_meteo: Optional[ProviderForecast] = None
    open_weather: Optional[ProviderForecast] = None
    weather_api: Optional[ProviderForecast] = None

    def with_open_meteo(self, forecast: ProviderForecast) -> "PerSourceData":
        return replace(self, open_meteo=forecast)

    def with_open_weather(self, forecast: ProviderForecast) -> "PerSourceData":
        return replace(self, open_weather=forecast)

    def with_weather_api(self, forecast: ProviderForecast) -> "PerSourceData":
        return replace(self, weather_api=forecast)

    def _present(self) -> list[ProviderForecast]:
        forecasts = (self.open_meteo, self.open_weather, self.weather_api)
        return [f for f in forecasts if f is not None]

    def provider_count(self) -> int:
        return len(self._present())

    def get_max_temperatures(self) -> list[float]:
        return [f.temp_max for f in self._present()]

    def get_min_temperatures(self) -> list[float]:
        return [f.temp_min for f in self._present()]

    def get_conditions(self) -> list[str]:
        return [f.condition for f in self._present()]

    def extract_temperatures(self) -> tuple[list[float], list[float]]:
        return self.get_max_temperatures(), self.get_min_temperatures()

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for name in _PROVIDER_FIELDS:
            forecast = getattr(self, name)
            result[name] = forecast.to_dict() if forecast is not None else None
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PerSourceData":
        values = {
            name: ProviderForecast.from_dict(data[name]) if data.get(name) is not None else None
            for name in _PROVIDER_FIELDS
        }
        return cls(**values)


@dataclass
class FinalForecast:
    """Combined forecast for one day, with a confidence level."""

    temp_max: float
    temp_min: float
    condition: str
    confidence: str

    def is_valid(self) -> bool:
        return (
            _temps_in_range(self.temp_max, self.temp_min)
            and bool(self.condition)
            and self.confidence in CONFIDENCE_LEVELS
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FinalForecast":
        return cls(
            temp_max=data["temp_max"],
            temp_min=data["temp_min"],
            condition=data["condition"],
            confidence=data["confidence"],
        )


@dataclass
class DayEnsemble:
    """Per-source data and the combined result for one day."""

    date: str
    per_source: PerSourceData
    final_forecast: FinalForecast

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "per_source": self.per_source.to_dict(),
            "final_forecast": self.final_forecast.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DayEnsemble":
        return cls(
            date=data["date"],
            per_source=PerSourceData.from_dict(data["per_source"]),
            final_forecast=FinalForecast.from_dict(data["final_forecast"]),
        )


def _local_timestamp() -> str:
    return datetime.now().astimezone().isoformat()


@dataclass
class EnsembleForecast:
    """A seven-day ensemble forecast for one city."""

    city: str
    province: str
    country: str
    latitude: float
    longitude: float
    source_timestamp: str = field(default_factory=_local_timestamp)
    days: list[DayEnsemble] = field(default_factory=list)

    def add_day(self, day: DayEnsemble) -> None:
        self.days.append(day)

    def is_valid(self) -> bool:
        """Seven days, each with a valid result backed by at least one provider."""
        return len(self.days) == 7 and all(
            day.final_forecast.is_valid() and day.per_source.provider_count() > 0
            for day in self.days
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "city": self.city,
            "province": self.province,
            "country": self.country,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "source_timestamp": self.source_timestamp,
            "days": [day.to_dict() for day in self.days],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EnsembleForecast":
        return cls(
            city=data["city"],
            province=data["province"],
            country=data["country"],
            latitude=data["latitude"],
            longitude=data["longitude"],
            source_timestamp=data["source_timestamp"],
            days=[DayEnsemble.from_dict(day) for day in data["days"]],
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "EnsembleForecast":
        return cls.from_dict(json.loads(text))