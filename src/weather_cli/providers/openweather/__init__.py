"""OpenWeather data source.

Current conditions only (https://openweathermap.org/current).

Public API:
  - provider: OpenWeatherProvider
  - current: build_params, to_record (payload -> WeatherRecord)
  - client: API URL, unit constants
"""

from weather_cli.providers.openweather.client import CURRENT_PATH, OPENWEATHER_API
from weather_cli.providers.openweather.provider import OpenWeatherProvider

__all__ = [
    "CURRENT_PATH",
    "OPENWEATHER_API",
    "OpenWeatherProvider",
]
