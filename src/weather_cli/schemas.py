"""
Domain models for weather-cli.

Pydantic models shared across the application. Providers normalize their
vendor responses into ``WeatherRecord``; everything downstream (facade,
renderers) only ever sees this shape.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

UNKNOWN_CONDITION = "unknown"


class ProviderKind(StrEnum):
    """Weather vendors this application knows how to talk to."""

    OPENWEATHER = "openweather"
    WEATHERAPI = "weatherapi"


class WeatherRecord(BaseModel):
    """A single weather reading, normalized across providers.

    Units are fixed so providers are interchangeable:
    - temperature in Celsius
    - pressure in hectopascal (hPa)
    - wind speed in kilometres per hour
    - wind direction in meteorological degrees (0-360, not validated)
    """

    model_config = ConfigDict(frozen=True)

    location: str = Field(..., min_length=1, description="Human-readable place name")
    observed_at: AwareDatetime = Field(..., description="When the reading was recorded")
    temperature_c: float
    humidity_percent: float = Field(..., description="Expected 0-100, not clamped")
    pressure_hpa: float
    condition: str = UNKNOWN_CONDITION
    wind_speed_kph: float
    wind_direction_deg: float
