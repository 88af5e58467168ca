"""WeatherAPI.com data source.

Current conditions and single-day history (https://www.weatherapi.com/docs/).

Public API:
  - provider: WeatherApiProvider
  - current: build_params, to_record (current payload -> WeatherRecord)
  - historical: build_params, to_record (history payload -> WeatherRecord)
  - client: API URLs, parse_timestamp
"""

from weather_cli.providers.weatherapi.client import (
    CURRENT_PATH,
    HISTORY_PATH,
    WEATHERAPI_API,
    parse_timestamp,
)
from weather_cli.providers.weatherapi.provider import WeatherApiProvider

__all__ = [
    "CURRENT_PATH",
    "HISTORY_PATH",
    "WEATHERAPI_API",
    "WeatherApiProvider",
    "parse_timestamp",
]
