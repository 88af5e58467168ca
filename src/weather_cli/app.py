"""
Application facade.

Resolves a provider by name, delegates the fetch and turns provider failures
into application errors. The CLI talks only to ``WeatherApp``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from weather_cli.errors import InvalidProviderError, ProviderError, ProviderFailedError

if TYPE_CHECKING:
    from datetime import date

    from weather_cli.registry import ProviderRegistry
    from weather_cli.schemas import WeatherRecord

logger = logging.getLogger(__name__)


class WeatherApp:
    """Weather lookups against a fixed set of registered providers."""

    def __init__(self, registry: ProviderRegistry) -> None:
        self.registry = registry

    async def run(self, provider_name: str, location: str, on: date | None = None) -> WeatherRecord:
        """
        Fetch weather for ``location`` from the provider named ``provider_name``.

        Raises:
            InvalidProviderError: No provider registered under that name.
            ProviderFailedError: The provider raised; the original error is
                kept on ``.error``.
        """
        provider = self.registry.resolve(provider_name)
        if provider is None:
            raise InvalidProviderError(provider_name)

        logger.info("Fetching weather for %r from %s (date=%s)", location, provider_name, on)
        try:
            return await provider.fetch(location, on)
        except ProviderError as exc:
            raise ProviderFailedError(provider_name, exc) from exc

    def provider_exists(self, name: str) -> bool:
        """True if ``run`` would find a provider called ``name``."""
        return self.registry.resolve(name) is not None

    def list_providers(self) -> list[str]:
        """Registered provider names, sorted."""
        return self.registry.list_names()
