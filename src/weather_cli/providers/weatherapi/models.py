"""Pydantic models for WeatherAPI.com payloads.

The current and history endpoints return structurally different documents:
current has a single ``current`` block, history wraps one or more days in
``forecast.forecastday``, each with an hourly breakdown.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from weather_cli.schemas import UNKNOWN_CONDITION


class ConditionText(BaseModel):
    text: str = UNKNOWN_CONDITION


class VendorLocation(BaseModel):
    name: str = ""
    region: str = ""
    country: str = ""


# =============================================================================
# /v1/current.json
# =============================================================================


class Current(BaseModel):
    last_updated: str
    temp_c: float
    humidity: float = 0.0
    pressure_mb: float = 0.0
    wind_kph: float = 0.0
    wind_degree: float = 0.0
    condition: ConditionText = Field(default_factory=ConditionText)


class CurrentResponse(BaseModel):
    location: VendorLocation | None = None
    current: Current


# =============================================================================
# /v1/history.json
# =============================================================================


class Day(BaseModel):
    """Day-level aggregates."""

    avgtemp_c: float
    avghumidity: float = 0.0
    maxwind_kph: float = 0.0
    condition: ConditionText = Field(default_factory=ConditionText)


class Hour(BaseModel):
    """One hourly reading within a history day."""

    time: str
    pressure_mb: float = 0.0
    wind_degree: float = 0.0


class ForecastDay(BaseModel):
    date: str = ""
    day: Day
    hour: list[Hour] = Field(default_factory=list)


class Forecast(BaseModel):
    forecastday: list[ForecastDay] = Field(default_factory=list)


class HistoryResponse(BaseModel):
    location: VendorLocation | None = None
    forecast: Forecast
