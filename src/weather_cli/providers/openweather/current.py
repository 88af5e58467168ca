"""Current conditions from the OpenWeather current-weather endpoint."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from weather_cli.providers.openweather.client import LANG, MS_TO_KPH, UNITS
from weather_cli.providers.openweather.models import CurrentWeather
from weather_cli.schemas import UNKNOWN_CONDITION, WeatherRecord


def build_params(api_key: str, location: str) -> dict[str, str]:
    """Query parameters for ``GET /data/2.5/weather``."""
    return {
        "q": location,
        "appid": api_key,
        "units": UNITS,
        "lang": LANG,
    }


def epoch_to_datetime(value: Any) -> datetime:
    """
    Convert a vendor epoch timestamp to an aware UTC datetime.

    Missing or unparseable values fall back to the current time; this
    provider only serves current conditions, so "now" is a fair stand-in.
    """
    try:
        return datetime.fromtimestamp(float(value), tz=UTC)
    except (TypeError, ValueError, OverflowError, OSError):
        return datetime.now(UTC)


def wind_ms_to_kph(speed_ms: float) -> float:
    """Convert wind speed from metres per second to km/h."""
    return speed_ms * MS_TO_KPH


def to_record(payload: dict[str, Any], location: str) -> WeatherRecord:
    """
    Map an OpenWeather response to a ``WeatherRecord``.

    Args:
        payload: Decoded JSON body.
        location: Caller's query, used only if the vendor echoes no name.

    Raises:
        pydantic.ValidationError: Payload does not have the expected shape.
    """
    weather = CurrentWeather.model_validate(payload)
    condition = weather.weather[0].description if weather.weather else UNKNOWN_CONDITION

    return WeatherRecord(
        location=weather.name or location,
        observed_at=epoch_to_datetime(weather.dt),
        temperature_c=weather.main.temp,
        humidity_percent=weather.main.humidity,
        pressure_hpa=weather.main.pressure,
        condition=condition or UNKNOWN_CONDITION,
        wind_speed_kph=wind_ms_to_kph(weather.wind.speed),
        wind_direction_deg=weather.wind.deg,
    )
