"""WeatherAPI.com provider (current or historical)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from weather_cli.errors import InvalidApiKeyError, InvalidLocationError, ParseError
from weather_cli.providers.base import WeatherProvider
from weather_cli.providers.weatherapi import current, historical
from weather_cli.providers.weatherapi.client import CURRENT_PATH, HISTORY_PATH, WEATHERAPI_API

if TYPE_CHECKING:
    from datetime import date

    import httpx

    from weather_cli.schemas import WeatherRecord


class WeatherApiProvider(WeatherProvider):
    """
    WeatherAPI.com provider.

    Without ``on`` the current-conditions endpoint is queried; with ``on``
    the history endpoint is queried for that calendar day. The two endpoints
    return different documents and are mapped separately.

    The returned ``location`` is always the caller's query string.
    """

    display_name = "WeatherApi"
    default_base_url = WEATHERAPI_API

    async def fetch(self, location: str, on: date | None = None) -> WeatherRecord:
        if not location or not location.strip():
            raise InvalidLocationError(location)
        if not self.api_key:
            raise InvalidApiKeyError(self.display_name)

        if on is None:
            payload = await self._get_json(CURRENT_PATH, current.build_params(self.api_key, location))
            mapper = current.to_record
        else:
            params = historical.build_params(self.api_key, location, on)
            payload = await self._get_json(HISTORY_PATH, params)
            mapper = historical.to_record

        try:
            return mapper(payload, location)
        except ValidationError as exc:
            raise ParseError(str(exc)) from exc

    def _describe_error(self, response: httpx.Response) -> str:
        # Error bodies look like {"error": {"code": 1006, "message": "No matching location found."}}
        try:
            body: Any = response.json()
        except ValueError:
            return super()._describe_error(response)
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return f"HTTP {response.status_code}: {error['message']}"
        return super()._describe_error(response)
