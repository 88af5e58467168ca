"""
Provider registry.

Maps lowercase provider names to shared ``WeatherProvider`` instances. Built
once at startup by ``build_registry`` and only read afterwards.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from weather_cli.errors import InvalidApiKeyError, MissingApiKeyError
from weather_cli.providers import OpenWeatherProvider, WeatherApiProvider
from weather_cli.schemas import ProviderKind

if TYPE_CHECKING:
    from weather_cli.config import ApiKeyLookup, Settings
    from weather_cli.providers import WeatherProvider

logger = logging.getLogger(__name__)

PROVIDER_CLASSES: dict[ProviderKind, type[WeatherProvider]] = {
    ProviderKind.OPENWEATHER: OpenWeatherProvider,
    ProviderKind.WEATHERAPI: WeatherApiProvider,
}


class ProviderRegistry:
    """Holds registered weather providers by name.

    Names are matched exactly; callers lower-case them before registering
    and resolving.
    """

    def __init__(self) -> None:
        self._providers: dict[str, WeatherProvider] = {}

    def __len__(self) -> int:
        return len(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def register(self, name: str, provider: WeatherProvider) -> None:
        """Register ``provider`` under ``name``, replacing any previous entry."""
        if name in self._providers:
            logger.warning("Provider '%s' is already registered and will be overwritten", name)
        self._providers[name] = provider

    def resolve(self, name: str) -> WeatherProvider | None:
        """Return the provider registered as ``name``, or None."""
        return self._providers.get(name)

    def list_names(self) -> list[str]:
        """All registered names, sorted."""
        return sorted(self._providers)


def build_registry(
    settings: Settings,
    api_key_lookup: ApiKeyLookup | None = None,
) -> ProviderRegistry:
    """
    Build a registry from the ``[providers.*]`` tables in settings.

    Args:
        settings: Loaded settings.
        api_key_lookup: ``name -> key`` resolver. Defaults to the settings
            file values only; the CLI passes ``config.api_key_lookup`` to
            honour ``<NAME>_API_KEY`` environment overrides.

    Raises:
        MissingApiKeyError: A known provider is configured without a key, or
            no provider could be registered at all.
    """
    lookup = api_key_lookup or settings.file_api_key
    registry = ProviderRegistry()

    for configured_name in settings.providers:
        name = configured_name.lower()
        try:
            kind = ProviderKind(name)
        except ValueError:
            logger.warning("Provider `%s` in config is not implemented", configured_name)
            continue

        try:
            provider = PROVIDER_CLASSES[kind](lookup(configured_name))
        except InvalidApiKeyError as exc:
            raise MissingApiKeyError(str(exc)) from exc

        registry.register(name, provider)
        logger.info("%s registered as '%s'", provider.display_name, name)

    if not registry:
        raise MissingApiKeyError("No valid providers configured")

    return registry
