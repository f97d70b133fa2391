import pytest

from indoprint.forecast_request import (
    ForecastPeriodRequest,
    ForecastRequestParams,
    ForecastResponse,
)


def test_default_is_current_week():
    period = ForecastPeriodRequest()
    assert not period.is_next_week
    assert period.display_name() == "Current Week"


def test_from_query_none_gives_current_week():
    assert ForecastPeriodRequest.from_query(None, None) == ForecastPeriodRequest()


def test_from_query_current_week_ignores_day():
    period = ForecastPeriodRequest.from_query("current_week", 3)
    assert period.base_day is None


def test_from_query_unknown_period_gives_current_week():
    assert not ForecastPeriodRequest.from_query("someday", 2).is_next_week


@pytest.mark.parametrize("day", range(7))
def test_from_query_next_week_valid_days(day):
    period = ForecastPeriodRequest.from_query("next_week", day)
    assert period.is_next_week
    assert period.base_day == day


def test_from_query_next_week_day_out_of_range():
    with pytest.raises(ValueError, match="Invalid day 7 for next_week"):
        ForecastPeriodRequest.from_query("next_week", 7)


def test_from_query_next_week_requires_day():
    with pytest.raises(ValueError, match="next_week requires 'day' parameter"):
        ForecastPeriodRequest.from_query("next_week", None)


def test_display_name_next_week_monday():
    assert ForecastPeriodRequest(base_day=0).display_name() == "Next Week Monday"


def test_display_name_next_week_sunday():
    assert ForecastPeriodRequest(base_day=6).display_name().endswith("Sunday")


def test_to_dict_tags():
    assert ForecastPeriodRequest().to_dict() == {"type": "current_week"}
    assert ForecastPeriodRequest(base_day=2).to_dict() == {"type": "next_week", "base_day": 2}


def test_request_params_defaults():
    params = ForecastRequestParams(city="Jakarta")
    assert params.period is None
    assert params.day is None


def test_forecast_response_to_dict():
    data = {"days": []}
    response = ForecastResponse("Current Week", "Jakarta", "2025-11-26T00:00:00+00:00", data)
    result = response.to_dict()
    assert result["forecast_data"] is data
    assert result["city"] == "Jakarta"
    assert result["period"] == "Current Week"