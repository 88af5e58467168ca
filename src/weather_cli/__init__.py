"""weather-cli - look up current or historical weather from pluggable providers.

Architecture::

    schemas.py     Canonical WeatherRecord every provider normalizes into
    providers/     Vendor integrations (OpenWeather, WeatherAPI) behind one fetch contract
    registry.py    Name -> provider mapping, built from settings at startup
    app.py         Facade: resolve provider, fetch, classify failures
    config.py      Settings from settings.toml, .env and environment
    renderers/     Pure data -> text (console weather report)
    services/      Shared utilities (async HTTP client)

Data flow: cli -> app -> registry -> provider -> vendor API -> WeatherRecord -> renderers

Extension points - see each package's docstring for step-by-step guides:
  - New provider:   providers/__init__.py
"""

__version__ = "0.1.0"

from weather_cli.config import Settings
from weather_cli.schemas import WeatherRecord

__all__ = ["Settings", "WeatherRecord", "__version__"]
