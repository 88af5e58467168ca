"""OpenWeather provider (current conditions only)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from weather_cli.errors import ApiRequestError, ParseError, RequestError
from weather_cli.providers.base import WeatherProvider
from weather_cli.providers.openweather import current
from weather_cli.providers.openweather.client import CURRENT_PATH, OPENWEATHER_API

if TYPE_CHECKING:
    from datetime import date

    import httpx

    from weather_cli.schemas import WeatherRecord


class OpenWeatherProvider(WeatherProvider):
    """
    OpenWeather current-weather provider.

    The ``on`` argument is accepted for interface compatibility and ignored:
    this provider always returns current conditions.

    Every failure after construction (transport, HTTP status, bad payload)
    is reported as ``ApiRequestError``.
    """

    display_name = "OpenWeather"
    default_base_url = OPENWEATHER_API

    async def fetch(self, location: str, on: date | None = None) -> WeatherRecord:
        if on is not None:
            self._log.debug("Ignoring date %s; OpenWeather only serves current conditions", on)

        try:
            payload = await self._get_json(CURRENT_PATH, current.build_params(self.api_key, location))
            return current.to_record(payload, location)
        except (RequestError, ParseError) as exc:
            raise ApiRequestError(exc.detail, status_code=getattr(exc, "status_code", None)) from exc
        except ValidationError as exc:
            raise ApiRequestError(f"unexpected response shape: {exc}") from exc

    def _describe_error(self, response: httpx.Response) -> str:
        # Error bodies look like {"cod": "404", "message": "city not found"}
        try:
            body: Any = response.json()
        except ValueError:
            return super()._describe_error(response)
        if isinstance(body, dict) and body.get("message"):
            return f"HTTP {response.status_code}: {body['message']}"
        return super()._describe_error(response)
