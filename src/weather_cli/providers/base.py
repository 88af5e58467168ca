"""Provider contract and shared HTTP plumbing."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

import httpx

from weather_cli.errors import InvalidApiKeyError, ParseError, RequestError
from weather_cli.services.http import create_client

if TYPE_CHECKING:
    from datetime import date

    from weather_cli.schemas import WeatherRecord


class WeatherProvider(ABC):
    """A weather vendor that can produce a ``WeatherRecord`` for a location.

    Instances are read-only after construction, so one provider can serve
    any number of concurrent ``fetch`` calls.

    Args:
        api_key: Vendor API key. Missing or empty fails immediately.
        base_url: Override the vendor endpoint (tests, proxies).
        client: Shared ``httpx.AsyncClient``. When omitted a client is
            created and closed around every request.
    """

    #: Human-readable vendor name used in errors and logs.
    display_name: ClassVar[str]
    #: Production endpoint, without trailing slash.
    default_base_url: ClassVar[str]

    def __init__(
        self,
        api_key: str | None,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not api_key:
            raise InvalidApiKeyError(self.display_name)
        self.api_key = api_key
        self.base_url = (base_url or self.default_base_url).rstrip("/")
        self._client = client
        self._log = logging.getLogger(self.__class__.__name__)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url!r})"

    @abstractmethod
    async def fetch(self, location: str, on: date | None = None) -> WeatherRecord:
        """
        Fetch weather for ``location``.

        Args:
            location: Free-text query (city, "city,country", "lat,lon").
            on: Requests historical data when the provider supports it.

        Raises:
            ProviderError: Always classified; see ``weather_cli.errors``.
        """

    def _describe_error(self, response: httpx.Response) -> str:
        """Message for a non-2xx response. Providers override to unwrap vendor errors."""
        return f"HTTP {response.status_code}: {response.text[:200]}"

    async def _get_json(self, path: str, params: dict[str, str]) -> Any:
        """GET ``base_url + path`` and decode the JSON body.

        Raises:
            RequestError: Transport failure or non-2xx status.
            ParseError: Body is not JSON.
        """
        url = f"{self.base_url}{path}"
        self._log.debug("GET %s q=%s", url, params.get("q"))
        if self._client is not None:
            return await self._send(self._client, url, params)
        async with create_client() as client:
            return await self._send(client, url, params)

    async def _send(self, client: httpx.AsyncClient, url: str, params: dict[str, str]) -> Any:
        try:
            response = await client.get(url, params=params)
        except httpx.HTTPError as exc:
            self._log.error("Request to %s failed: %s", url, exc)
            raise RequestError(str(exc) or exc.__class__.__name__) from exc

        if not response.is_success:
            message = self._describe_error(response)
            self._log.error("%s returned %s", self.display_name, message)
            raise RequestError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise ParseError(f"invalid JSON: {exc}") from exc
