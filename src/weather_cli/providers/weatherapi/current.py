"""Current conditions from WeatherAPI.com."""

from __future__ import annotations

from typing import Any

from weather_cli.providers.weatherapi.client import parse_timestamp
from weather_cli.providers.weatherapi.models import CurrentResponse
from weather_cli.schemas import UNKNOWN_CONDITION, WeatherRecord


def build_params(api_key: str, location: str) -> dict[str, str]:
    """Query parameters for ``GET /v1/current.json``."""
    return {"key": api_key, "q": location, "aqi": "no"}


def to_record(payload: dict[str, Any], location: str) -> WeatherRecord:
    """
    Map a current-conditions response to a ``WeatherRecord``.

    ``location`` is the caller's query string, echoed as-is.

    Raises:
        pydantic.ValidationError: Payload shape mismatch.
        ParseDateTimeError: ``current.last_updated`` is malformed.
    """
    current = CurrentResponse.model_validate(payload).current
    return WeatherRecord(
        location=location,
        observed_at=parse_timestamp(current.last_updated),
        temperature_c=current.temp_c,
        humidity_percent=current.humidity,
        pressure_hpa=current.pressure_mb,
        condition=current.condition.text or UNKNOWN_CONDITION,
        wind_speed_kph=current.wind_kph,
        wind_direction_deg=current.wind_degree,
    )
