"""WeatherAPI.com constants and shared helpers.

API docs: https://www.weatherapi.com/docs/
  - Current: /v1/current.json
  - History: /v1/history.json (one day per request, ``dt=YYYY-MM-DD``)
"""

from __future__ import annotations

from datetime import UTC, datetime

from weather_cli.errors import ParseDateTimeError

WEATHERAPI_API = "https://api.weatherapi.com"
CURRENT_PATH = "/v1/current.json"
HISTORY_PATH = "/v1/history.json"

# Local time as printed by the vendor, e.g. "2025-12-03 14:15"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
DATE_FORMAT = "%Y-%m-%d"


def parse_timestamp(value: str) -> datetime:
    """
    Parse a vendor timestamp as UTC.

    Unlike OpenWeather there is no "now" fallback: for historical queries
    the timestamp is the answer, so a bad value is a hard error.

    Raises:
        ParseDateTimeError: ``value`` is not ``YYYY-MM-DD HH:MM``.
    """
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=UTC)
    except (TypeError, ValueError) as exc:
        raise ParseDateTimeError(f"invalid timestamp {value!r}: {exc}") from exc
