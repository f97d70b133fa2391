"""Request and response records for period-based forecast queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
CURRENT_WEEK = "current_week"
NEXT_WEEK = "next_week"


@dataclass
class ForecastRequestParams:
    """Raw query parameters of a forecast request."""

    city: str
    period: Optional[str] = None
    day: Optional[int] = None


@dataclass(frozen=True)
class ForecastPeriodRequest:
    """Requested forecast period.

    With no ``base_day`` this is the current week; otherwise it is one day of
    next week, 0 being Monday and 6 Sunday.
    """

    base_day: Optional[int] = None

    def __post_init__(self) -> None:
        if self.base_day is not None and not 0 <= self.base_day < 7:
            raise ValueError(f"Invalid day {self.base_day} for next_week (must be 0-6)")

    @property
    def is_next_week(self) -> bool:
        return self.base_day is not None

    @classmethod
    def from_query(cls, period: Optional[str], day: Optional[int]) -> "ForecastPeriodRequest":
        """Build a period from query values; raises ValueError when they conflict."""
        if period != NEXT_WEEK:
            return cls()
        if day is None:
            raise ValueError("next_week requires 'day' parameter")
        return cls(base_day=day)

    def display_name(self) -> str:
        if self.base_day is None:
            return "Current Week"
        return f"Next Week {WEEKDAY_NAMES[self.base_day]}"

    def to_dict(self) -> dict[str, Any]:
        if self.base_day is None:
            return {"type": CURRENT_WEEK}
        return {"type": NEXT_WEEK, "base_day": self.base_day}


@dataclass
class ForecastResponse:
    """Forecast data wrapped with the period and time it was requested."""

    period: str
    city: str
    requested_at: str
    forecast_data: Any

    def to_dict(self) -> dict[str, Any]:
        return {
            "period": self.period,
            "city": self.city,
            "requested_at": self.requested_at,
            "forecast_data": self.forecast_data,
        }