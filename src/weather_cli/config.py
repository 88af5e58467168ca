"""
Application settings.

Values are read, highest priority first, from:
  1. keyword arguments
  2. environment variables (``DEFAULT_PROVIDER``)
  3. a ``.env`` file in the working directory
  4. the TOML settings file (``settings.toml`` unless ``--config-path`` is given)

A missing settings file is not an error. Per-provider API keys live in the
``[providers.<name>]`` tables and can be overridden with ``<NAME>_API_KEY``
environment variables (see ``api_key_lookup``).

Example settings.toml::

    default_provider = "weatherapi"

    [providers.weatherapi]
    api_key = "..."
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path

import tomli_w
from dotenv import dotenv_values
from pydantic import BaseModel, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    SettingsError,
    TomlConfigSettingsSource,
)

from weather_cli.errors import ConfigError
from weather_cli.schemas import ProviderKind

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path("settings.toml")
ENV_FILE = ".env"

#: ``name -> api key`` resolver handed to ``build_registry``.
ApiKeyLookup = Callable[[str], str | None]


class ProviderSettings(BaseModel):
    """Per-provider table in the settings file."""

    api_key: str | None = None


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        toml_file=DEFAULT_SETTINGS_PATH,
    )

    default_provider: str = ProviderKind.WEATHERAPI.value
    providers: dict[str, ProviderSettings] = {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls),
        )

    def file_api_key(self, name: str) -> str | None:
        """API key for ``name`` as written in the settings file, if any."""
        entry = self.providers.get(name)
        return entry.api_key if entry else None


def load_settings(path: Path | str = DEFAULT_SETTINGS_PATH) -> Settings:
    """
    Load settings, reading the TOML file at ``path``.

    Raises:
        ConfigError: The file exists but is not valid TOML or has bad values.
    """

    class FileSettings(Settings):
        model_config = SettingsConfigDict(toml_file=Path(path))

    try:
        settings = FileSettings()
    except (ValidationError, SettingsError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to load settings from {path}: {exc}") from exc

    logger.debug("Loaded settings from %s: default_provider=%s", path, settings.default_provider)
    return settings


def save_settings(settings: Settings, path: Path | str = DEFAULT_SETTINGS_PATH) -> Path:
    """
    Write settings to ``path`` as TOML.

    Returns:
        The path written.
    """
    target = Path(path)
    data = settings.model_dump(mode="json", exclude_none=True)
    try:
        target.write_text(tomli_w.dumps(data))
    except OSError as exc:
        raise ConfigError(f"Failed to save settings: {exc}") from exc

    logger.info("Settings saved to %s", target)
    return target


def get_settings(path: Path | str | None = None) -> Settings:
    """Load settings from ``path`` or the default ``settings.toml``."""
    return load_settings(path if path is not None else DEFAULT_SETTINGS_PATH)


def api_key_env_var(name: str) -> str:
    """Environment variable that overrides the API key for provider ``name``."""
    return f"{name.upper()}_API_KEY"


def api_key_lookup(
    settings: Settings,
    environ: Mapping[str, str] | None = None,
) -> ApiKeyLookup:
    """
    Build the API key resolver used at startup.

    ``<NAME>_API_KEY`` from the environment (or ``.env``) wins over the
    settings file value. Empty strings count as unset.

    Args:
        settings: Loaded settings (file values).
        environ: Environment to consult (defaults to ``.env`` overlaid by ``os.environ``).
    """
    if environ is None:
        environ = {**dotenv_values(ENV_FILE), **os.environ}  # type: ignore[dict-item]

    def lookup(name: str) -> str | None:
        key = environ.get(api_key_env_var(name))
        if key:
            return key
        return settings.file_api_key(name) or None

    return lookup
