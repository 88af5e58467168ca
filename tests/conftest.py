"""Shared fixtures: sample vendor payloads, a fake vendor endpoint and a static provider."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING, Any

import httpx
import pytest

from weather_cli.providers.base import WeatherProvider
from weather_cli.schemas import WeatherRecord
from weather_cli.services.http import create_client

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test in an empty directory with no provider env vars set."""
    monkeypatch.chdir(tmp_path)
    for var in ("DEFAULT_PROVIDER", "OPENWEATHER_API_KEY", "WEATHERAPI_API_KEY", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


# =============================================================================
# Fake vendor endpoint
# =============================================================================


class FakeVendor:
    """Records requests and answers them with a canned response."""

    def __init__(
        self,
        payload: Any = None,
        status_code: int = 200,
        error: Exception | None = None,
        text: str | None = None,
    ) -> None:
        self.payload = payload
        self.status_code = status_code
        self.error = error
        self.text = text
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    def client(self) -> httpx.AsyncClient:
        return create_client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_vendor() -> type[FakeVendor]:
    """The ``FakeVendor`` class; tests build one per scenario."""
    return FakeVendor


# =============================================================================
# Static provider
# =============================================================================


class StaticProvider(WeatherProvider):
    """Provider that returns a fixed record and remembers what it was asked."""

    display_name = "Static"
    default_base_url = "http://static.invalid"

    def __init__(self, record: WeatherRecord, api_key: str = "test-key") -> None:
        super().__init__(api_key)
        self.record = record
        self.calls: list[tuple[str, date | None]] = []

    async def fetch(self, location: str, on: date | None = None) -> WeatherRecord:
        self.calls.append((location, on))
        return self.record.model_copy(update={"location": location})


@pytest.fixture
def sample_record() -> WeatherRecord:
    return WeatherRecord(
        location="London",
        observed_at=datetime(2025, 12, 3, 14, 15, tzinfo=UTC),
        temperature_c=28.2,
        humidity_percent=40.0,
        pressure_hpa=1012.0,
        condition="Sunny",
        wind_speed_kph=18.0,
        wind_direction_deg=90.0,
    )


@pytest.fixture
def static_provider_cls() -> type[StaticProvider]:
    return StaticProvider


@pytest.fixture
def static_provider(sample_record: WeatherRecord) -> StaticProvider:
    return StaticProvider(sample_record)


# =============================================================================
# Vendor payloads
# =============================================================================


@pytest.fixture
def openweather_payload() -> dict[str, Any]:
    """Trimmed ``/data/2.5/weather`` response."""
    return {
        "coord": {"lon": -0.1257, "lat": 51.5085},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "main": {"temp": 12.5, "feels_like": 11.2, "pressure": 1019, "humidity": 71},
        "wind": {"speed": 5.0, "deg": 240},
        "dt": int(datetime(2025, 12, 3, 14, 15, tzinfo=UTC).timestamp()),
        "name": "London",
        "cod": 200,
    }


@pytest.fixture
def weatherapi_current_payload() -> dict[str, Any]:
    """Trimmed ``/v1/current.json`` response."""
    return {
        "location": {"name": "London", "region": "City of London", "country": "United Kingdom"},
        "current": {
            "last_updated": "2025-12-03 14:15",
            "temp_c": 28.2,
            "temp_f": 82.8,
            "condition": {"text": "Sunny", "icon": "//cdn.weatherapi.com/113.png", "code": 1000},
            "wind_kph": 18.0,
            "wind_degree": 200,
            "pressure_mb": 1015.0,
            "humidity": 42,
        },
    }


@pytest.fixture
def weatherapi_history_payload() -> dict[str, Any]:
    """Trimmed ``/v1/history.json`` response with one day and two hours."""
    return {
        "location": {"name": "London", "region": "City of London", "country": "United Kingdom"},
        "forecast": {
            "forecastday": [
                {
                    "date": "2025-11-01",
                    "day": {
                        "maxtemp_c": 14.0,
                        "mintemp_c": 6.0,
                        "avgtemp_c": 10.4,
                        "maxwind_kph": 22.3,
                        "avghumidity": 81,
                        "condition": {"text": "Patchy rain nearby"},
                    },
                    "hour": [
                        {
                            "time": "2025-11-01 00:00",
                            "temp_c": 7.1,
                            "pressure_mb": 1008.0,
                            "wind_kph": 9.0,
                            "wind_degree": 190,
                        },
                        {
                            "time": "2025-11-01 01:00",
                            "temp_c": 6.8,
                            "pressure_mb": 1007.0,
                            "wind_kph": 10.0,
                            "wind_degree": 200,
                        },
                    ],
                }
            ]
        },
    }
