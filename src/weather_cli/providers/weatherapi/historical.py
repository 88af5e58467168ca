"""Historical weather for a single day from WeatherAPI.com."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from weather_cli.errors import ParseError
from weather_cli.providers.weatherapi.client import DATE_FORMAT, parse_timestamp
from weather_cli.providers.weatherapi.models import HistoryResponse
from weather_cli.schemas import UNKNOWN_CONDITION, WeatherRecord

if TYPE_CHECKING:
    from datetime import date


def build_params(api_key: str, location: str, on: date) -> dict[str, str]:
    """Query parameters for ``GET /v1/history.json``."""
    return {"key": api_key, "q": location, "dt": on.strftime(DATE_FORMAT)}


def to_record(payload: dict[str, Any], location: str) -> WeatherRecord:
    """
    Map a history response to a ``WeatherRecord``.

    The history payload has no single observed line, so one is assembled
    from the first day and its first hour:

    - temperature, humidity, wind speed and condition come from the day
      aggregates (``avgtemp_c``, ``avghumidity``, ``maxwind_kph``)
    - timestamp, pressure and wind direction come from the first hour

    Raises:
        pydantic.ValidationError: Payload shape mismatch.
        ParseError: No day or no hourly entries in the response.
        ParseDateTimeError: The hour timestamp is malformed.
    """
    history = HistoryResponse.model_validate(payload)
    if not history.forecast.forecastday:
        raise ParseError("history response has no forecastday entries")
    day = history.forecast.forecastday[0]
    if not day.hour:
        raise ParseError(f"history day {day.date or '?'} has no hourly entries")
    hour = day.hour[0]

    return WeatherRecord(
        location=location,
        observed_at=parse_timestamp(hour.time),
        temperature_c=day.day.avgtemp_c,
        humidity_percent=day.day.avghumidity,
        pressure_hpa=hour.pressure_mb,
        condition=day.day.condition.text or UNKNOWN_CONDITION,
        wind_speed_kph=day.day.maxwind_kph,
        wind_direction_deg=hour.wind_degree,
    )
