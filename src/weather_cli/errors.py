"""Exception hierarchy.

Two families share the ``WeatherError`` root so the CLI can catch everything
expected with one ``except`` clause:

- ``ProviderError`` and subclasses are raised by providers. They never
  escape a provider unclassified.
- ``AppError`` and subclasses are raised by configuration, the registry and
  the ``WeatherApp`` facade.
"""

from __future__ import annotations


class WeatherError(Exception):
    """Base for every expected, user-reportable failure."""


# =============================================================================
# Provider errors
# =============================================================================


class ProviderError(WeatherError):
    """Base provider error."""


class InvalidApiKeyError(ProviderError):
    """Raised when a provider is constructed without an API key."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"API key is missing or invalid for {provider}")


class InvalidLocationError(ProviderError):
    """Raised before any network call when the location is unusable."""

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"Location '{location}' is invalid or not found")


class RequestError(ProviderError):
    """Transport failure or non-2xx response from the vendor."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.detail = message
        self.status_code = status_code
        super().__init__(f"API request failed: {message}")


class ApiRequestError(RequestError):
    """Catch-all request failure for providers that do not distinguish parse errors."""


class ParseError(ProviderError):
    """Vendor response did not match the expected JSON shape."""

    def __init__(self, message: str) -> None:
        self.detail = message
        super().__init__(f"Failed to parse API response: {message}")


class ParseDateTimeError(ParseError):
    """A vendor timestamp that drives ``observed_at`` could not be parsed."""


# =============================================================================
# Application errors
# =============================================================================


class AppError(WeatherError):
    """Base application error."""


class ConfigError(AppError):
    """Settings could not be loaded or saved."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Configuration error: {message}")


class InvalidProviderError(AppError):
    """Requested provider name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid provider name: Provider '{name}' not found")


class MissingApiKeyError(AppError):
    """A configured provider has no key, or no provider is usable at all."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Missing API key: {message}")


class ProviderFailedError(AppError):
    """Wraps a ``ProviderError`` raised while fetching.

    The original exception stays available on ``error`` so callers can still
    branch on its kind.
    """

    def __init__(self, provider: str, error: ProviderError) -> None:
        self.provider = provider
        self.error = error
        super().__init__(f"Provider '{provider}' failed: {error}")
