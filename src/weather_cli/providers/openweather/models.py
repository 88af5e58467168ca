"""Pydantic models for the OpenWeather current-weather payload.

Only the fields we map are modelled; everything else is ignored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from weather_cli.schemas import UNKNOWN_CONDITION


class Main(BaseModel):
    temp: float
    humidity: float = 0.0
    pressure: float = 0.0


class Wind(BaseModel):
    speed: float = 0.0  # m/s
    deg: float = 0.0


class Condition(BaseModel):
    description: str = UNKNOWN_CONDITION


class CurrentWeather(BaseModel):
    """``GET /data/2.5/weather`` response."""

    name: str = ""
    # Epoch seconds; kept loose so a bad value degrades to "now" instead of failing
    dt: Any = None
    main: Main
    wind: Wind = Field(default_factory=Wind)
    weather: list[Condition] = Field(default_factory=list)
