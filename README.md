# indoprint

Building blocks for a weather forecast service that combines several
providers' forecasts for 50 Indonesian cities. Everything runs on the
standard library alone.

## What is inside

### Cities

- `indoprint.cities.CITIES` is a fixed tuple of 50 `City` records (id, name,
  province, latitude, longitude).
- `indoprint.city_service`:
  - `find_city(name)` matches a whole city name, ignoring case and
    surrounding whitespace, and raises `CityNotFound` otherwise (partial names
    do not match).
  - `validate_city_input(city)` returns the trimmed name, or raises
    `InvalidInput` with `"City name is required"` when it is empty and
    `"City name must not exceed 50 characters"` when it is longer than 50.
  - `get_all_cities()` and `get_city_count()`.

### Models

- `indoprint.models`: `City` (frozen), `DailyForecast`, `WeatherForecast`,
  the `ApiResponse` envelope (`ApiResponse.ok(data)`,
  `ApiResponse.failure(message)`), `ContactForm` and `ServiceInfo`. `City`,
  `DailyForecast`, `WeatherForecast` and `ApiResponse` have `to_dict()`.
- `indoprint.ensemble_models`:
  - `ProviderForecast`: one provider's day (date, `temp_max`, `temp_min`,
    condition). `is_valid()` requires both temperatures in −50..50,
    `temp_max >= temp_min` and a non-empty condition.
  - `PerSourceData`: optional forecasts from `open_meteo`, `open_weather` and
    `weather_api`. `with_open_meteo`, `with_open_weather` and
    `with_weather_api` return a new copy; `provider_count`,
    `get_max_temperatures`, `get_min_temperatures`, `get_conditions` and
    `extract_temperatures` read the providers that are present.
  - `FinalForecast`: combined day with a `confidence` of `"high"`, `"medium"`
    or `"low"`; `is_valid()` checks that too.
  - `DayEnsemble` and `EnsembleForecast` (`add_day`; `is_valid()` requires
    exactly seven valid days, each backed by at least one provider).
  - Each of these has `to_dict()` / `from_dict()`; `EnsembleForecast` also has
    `to_json()` / `from_json()`.

### Forecast periods

`indoprint.forecast_request.ForecastPeriodRequest.from_query(period, day)`
gives the current week for any period other than `"next_week"`. For
`"next_week"` it needs a day from 0 (Monday) to 6 (Sunday) and raises
`ValueError` when the day is missing or out of range. `display_name()` gives
`"Current Week"` or e.g. `"Next Week Friday"`; `to_dict()` gives
`{"type": "current_week"}` or `{"type": "next_week", "base_day": 4}`.
`ForecastRequestParams` and `ForecastResponse` hold request and response
fields.

### Errors

`indoprint.errors.ApiError` is an exception with subclasses `CityNotFound`,
`InvalidInput`, `WeatherProviderError` and `ApiTimeout`, plus the helpers
`city_not_found`, `invalid_params`, `provider_error` and `internal_error`.
`to_response()` returns an `http.HTTPStatus` and an `ErrorResponse`
(error code, message, UTC ISO 8601 timestamp):

| Error                  | Status | Code                  |
|------------------------|--------|-----------------------|
| `CityNotFound`         | 404    | `CITY_NOT_FOUND`      |
| `InvalidInput`         | 400    | `INVALID_INPUT`       |
| `WeatherProviderError` | 503    | `SERVICE_UNAVAILABLE` |
| `ApiTimeout`           | 503    | `TIMEOUT`             |

### Ensemble maths (`indoprint.ensemble`)

- `averaging.calculate_weighted_temperature(open_meteo, open_weather, weather_api)`:
  weights 0.4, 0.35 and 0.25, renormalised over the values that are not
  `None`; 0.0 when none are given. `calculate_weighted_average_generic` takes
  `(value, weight)` pairs.
- `voting.majority_vote_condition` returns the most common condition and its
  share of the votes (`("Unknown", 0.0)` with no votes); `vote_condition`
  returns only the winner; `majority_vote_with_consensus` adds whether at
  least two thirds agree and raises `ValueError` with no votes.
- `confidence`: `calculate_stddev` (population), `calculate_cv`,
  `calculate_confidence` (tier from spread and agreement),
  `calculate_confidence_score` (0–1) and `get_confidence_details`, which
  returns a `ConfidenceDetails`.

### Provider agreement

`indoprint.confidence_calculator.calculate_confidence(per_source, final_temps)`
rates a day's `PerSourceData`: `"high"` for three providers within 2 degrees
of their mean whose conditions agree, `"medium"` for two or three providers
within 3 degrees, `"low"` otherwise. `normalize_condition` maps descriptions
such as "Light Rain" or "Clear Sky" to broad categories before comparing.

### Caching

`indoprint.cache.ForecastCache(ttl_secs, max_entries)` is an asyncio-safe
cache with a time-to-live. When full, the oldest inserted entry is dropped.
It has `get`, `insert`, `get_or_fetch`, `clear`, `size`, `stats` (a
`CacheStats`) and `cleanup`, all coroutines. Expired entries stay until
`cleanup()` removes them.

### Concurrency

- `indoprint.worker_pool.WorkerPool(num_workers)` runs coroutine factories
  with at most `num_workers` in flight. `execute_task` returns the result or
  raises `RuntimeError` chained to the task's exception; `execute_batch`
  returns results in order, with a `RuntimeError` in place of each failure.
- `indoprint.runtime.get_worker_count()` reads `WORKER_THREADS` (default 3),
  caps it at one less than the CPU count and keeps it at least 1.
  `init_runtime`, `log_runtime_config` and `log_worker_status` log the setup.

## Examples

Look up a city and handle a miss:

```python
from indoprint.city_service import find_city, validate_city_input
from indoprint.errors import CityNotFound

city = find_city(validate_city_input("  bandung  "))
print(city.name, city.province, city.latitude, city.longitude)

try:
    find_city("Atlantis")
except CityNotFound as exc:
    status, body = exc.to_response()
    print(int(status), body.to_dict())
```

Combine three providers for one day:

```python
from indoprint.confidence_calculator import calculate_confidence
from indoprint.ensemble.averaging import calculate_weighted_temperature
from indoprint.ensemble.voting import majority_vote_condition
from indoprint.ensemble_models import PerSourceData, ProviderForecast

per_source = (
    PerSourceData()
    .with_open_meteo(ProviderForecast("2024-01-01", 30.0, 22.0, "Sunny"))
    .with_open_weather(ProviderForecast("2024-01-01", 30.5, 22.5, "Clear"))
    .with_weather_api(ProviderForecast("2024-01-01", 29.5, 21.5, "Clear Sky"))
)

temp_max = calculate_weighted_temperature(30.0, 30.5, 29.5)
condition, agreement = majority_vote_condition(["Clear", "Clear", "Rain"])
print(temp_max, condition, agreement)
print(calculate_confidence(per_source, (temp_max, 22.0)))  # "high"
```

Cache a forecast for an hour:

```python
import asyncio

from indoprint.cache import ForecastCache


async def fetch():
    return {"city": "Jakarta", "temp": 31.0}


async def demo():
    cache = ForecastCache(3600, 100)
    first = await cache.get_or_fetch("forecast:jakarta", fetch)
    again = await cache.get("forecast:jakarta")
    print(first == again, (await cache.stats()).total_entries)


asyncio.run(demo())
```

## What the package does not do

- It fetches no weather data: there are no provider clients, and nothing
  here calls a weather service over the network. The forecasts it combines
  must come from the caller.
- It has no HTTP server, routes or command-line program. `to_response()` and
  the `to_dict()` methods give status codes and JSON-ready dicts, but serving
  them is left to the application.
- The cache lives in memory only; nothing is stored on disk.

## Running the tests

Install the `test` extra and run `pytest` from the project root.