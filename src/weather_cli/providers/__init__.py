"""Weather vendor integrations.

Each subdirectory is one vendor with a consistent structure:

    providers/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, shared helpers
    ├── models.py         # Pydantic models of the vendor payload
    ├── {endpoint}.py     # build_params + to_record, one per endpoint
    └── provider.py       # WeatherProvider subclass wiring it together

Adding a provider
-----------------
1. Create ``providers/{name}/`` with the files above.
   See ``openweather/`` for a single-endpoint example, ``weatherapi/`` for
   one that branches between current and historical endpoints.

2. Subclass ``WeatherProvider``: set ``display_name`` and
   ``default_base_url``, implement ``async fetch(location, on)`` and map the
   payload to ``WeatherRecord``. Raise only ``ProviderError`` subclasses.

3. Add the vendor to ``ProviderKind`` (``schemas.py``) and
   ``PROVIDER_CLASSES`` (``registry.py``).

4. Add tests in ``tests/test_{name}.py`` using ``httpx.MockTransport``.
"""

from weather_cli.providers.base import WeatherProvider
from weather_cli.providers.openweather import OpenWeatherProvider
from weather_cli.providers.weatherapi import WeatherApiProvider

__all__ = [
    "OpenWeatherProvider",
    "WeatherApiProvider",
    "WeatherProvider",
]
