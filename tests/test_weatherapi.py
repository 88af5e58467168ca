"""
Tests for the WeatherAPI.com provider.
"""

from __future__ import annotations

import asyncio
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING, Any

import httpx
import pytest

from weather_cli.errors import (
    InvalidApiKeyError,
    InvalidLocationError,
    ParseDateTimeError,
    ParseError,
    RequestError,
)
from weather_cli.providers.weatherapi import (
    WEATHERAPI_API,
    WeatherApiProvider,
    parse_timestamp,
)

if TYPE_CHECKING:
    from conftest import FakeVendor


def _provider(vendor: FakeVendor, **kwargs: Any) -> WeatherApiProvider:
    return WeatherApiProvider("test-key", client=vendor.client(), **kwargs)


class TestConstruction:
    """Provider construction validates the API key up front."""

    def test_empty_key_rejected(self) -> None:
        with pytest.raises(InvalidApiKeyError, match="WeatherApi"):
            WeatherApiProvider("")

    def test_missing_key_rejected(self) -> None:
        with pytest.raises(InvalidApiKeyError):
            WeatherApiProvider(None)

    def test_default_base_url(self) -> None:
        provider = WeatherApiProvider("k")
        assert provider.base_url == WEATHERAPI_API == "https://api.weatherapi.com"

    def test_base_url_override_strips_slash(self) -> None:
        provider = WeatherApiProvider("k", base_url="http://localhost:8080/")
        assert provider.base_url == "http://localhost:8080"


class TestParseTimestamp:
    """Vendor timestamps are strict: no fallback."""

    def test_parses_as_utc(self) -> None:
        assert parse_timestamp("2025-12-03 14:15") == datetime(2025, 12, 3, 14, 15, tzinfo=UTC)

    def test_bad_value_is_hard_error(self) -> None:
        with pytest.raises(ParseDateTimeError):
            parse_timestamp("03/12/2025 2:15pm")


class TestCurrent:
    """Current conditions (no date)."""

    def test_maps_sample_payload(
        self, fake_vendor: type[FakeVendor], weatherapi_current_payload: dict[str, Any]
    ) -> None:
        vendor = fake_vendor(weatherapi_current_payload)
        record = asyncio.run(_provider(vendor).fetch("london,uk"))

        assert record.location == "london,uk"
        assert record.observed_at == datetime(2025, 12, 3, 14, 15, tzinfo=UTC)
        assert record.temperature_c == 28.2
        assert record.wind_speed_kph == 18.0
        assert record.condition == "Sunny"
        assert record.humidity_percent == 42.0
        assert record.pressure_hpa == 1015.0
        assert record.wind_direction_deg == 200.0

    def test_requests_current_endpoint(
        self, fake_vendor: type[FakeVendor], weatherapi_current_payload: dict[str, Any]
    ) -> None:
        vendor = fake_vendor(weatherapi_current_payload)
        asyncio.run(_provider(vendor, base_url="http://vendor.test").fetch("Paris"))

        assert len(vendor.requests) == 1
        request = vendor.requests[0]
        assert request.url.host == "vendor.test"
        assert request.url.path == "/v1/current.json"
        assert request.url.params["key"] == "test-key"
        assert request.url.params["q"] == "Paris"
        assert request.url.params["aqi"] == "no"
        assert "dt" not in request.url.params

    def test_missing_optional_fields_use_defaults(self, fake_vendor: type[FakeVendor]) -> None:
        vendor = fake_vendor({"current": {"last_updated": "2025-12-03 14:15", "temp_c": 3.0}})
        record = asyncio.run(_provider(vendor).fetch("Oslo"))

        assert record.condition == "unknown"
        assert record.humidity_percent == 0.0
        assert record.wind_speed_kph == 0.0

    def test_bad_last_updated_raises(
        self, fake_vendor: type[FakeVendor], weatherapi_current_payload: dict[str, Any]
    ) -> None:
        weatherapi_current_payload["current"]["last_updated"] = "yesterday"
        vendor = fake_vendor(weatherapi_current_payload)

        with pytest.raises(ParseDateTimeError):
            asyncio.run(_provider(vendor).fetch("London"))


class TestHistorical:
    """History endpoint (date given)."""

    def test_requests_history_endpoint_with_date(
        self, fake_vendor: type[FakeVendor], weatherapi_history_payload: dict[str, Any]
    ) -> None:
        vendor = fake_vendor(weatherapi_history_payload)
        asyncio.run(_provider(vendor).fetch("London", date(2025, 11, 1)))

        request = vendor.requests[0]
        assert request.url.path == "/v1/history.json"
        assert request.url.params["dt"] == "2025-11-01"
        assert request.url.params["q"] == "London"

    def test_accepts_datetime(
        self, fake_vendor: type[FakeVendor], weatherapi_history_payload: dict[str, Any]
    ) -> None:
        vendor = fake_vendor(weatherapi_history_payload)
        asyncio.run(_provider(vendor).fetch("London", datetime(2025, 11, 1, 18, 30)))
        assert vendor.requests[0].url.params["dt"] == "2025-11-01"

    def test_mixes_day_aggregates_and_first_hour(
        self, fake_vendor: type[FakeVendor], weatherapi_history_payload: dict[str, Any]
    ) -> None:
        vendor = fake_vendor(weatherapi_history_payload)
        record = asyncio.run(_provider(vendor).fetch("London", date(2025, 11, 1)))

        # Day level
        assert record.temperature_c == 10.4
        assert record.humidity_percent == 81.0
        assert record.wind_speed_kph == 22.3
        assert record.condition == "Patchy rain nearby"
        # First hour
        assert record.observed_at == datetime(2025, 11, 1, 0, 0, tzinfo=UTC)
        assert record.pressure_hpa == 1008.0
        assert record.wind_direction_deg == 190.0

    def test_location_is_caller_query_not_vendor_name(
        self, fake_vendor: type[FakeVendor], weatherapi_history_payload: dict[str, Any]
    ) -> None:
        vendor = fake_vendor(weatherapi_history_payload)
        record = asyncio.run(_provider(vendor).fetch("51.5,-0.12", date(2025, 11, 1)))
        assert record.location == "51.5,-0.12"

    def test_no_forecast_days_is_parse_error(self, fake_vendor: type[FakeVendor]) -> None:
        vendor = fake_vendor({"forecast": {"forecastday": []}})
        with pytest.raises(ParseError, match="no forecastday"):
            asyncio.run(_provider(vendor).fetch("London", date(2025, 11, 1)))

    def test_no_hours_is_parse_error(
        self, fake_vendor: type[FakeVendor], weatherapi_history_payload: dict[str, Any]
    ) -> None:
        weatherapi_history_payload["forecast"]["forecastday"][0]["hour"] = []
        vendor = fake_vendor(weatherapi_history_payload)
        with pytest.raises(ParseError, match="no hourly entries"):
            asyncio.run(_provider(vendor).fetch("London", date(2025, 11, 1)))

    def test_bad_hour_timestamp_raises(
        self, fake_vendor: type[FakeVendor], weatherapi_history_payload: dict[str, Any]
    ) -> None:
        weatherapi_history_payload["forecast"]["forecastday"][0]["hour"][0]["time"] = "midnight"
        vendor = fake_vendor(weatherapi_history_payload)
        with pytest.raises(ParseDateTimeError):
            asyncio.run(_provider(vendor).fetch("London", date(2025, 11, 1)))


class TestPreconditions:
    """Checks that run before any network call."""

    def test_empty_location_never_reaches_transport(
        self, fake_vendor: type[FakeVendor], weatherapi_current_payload: dict[str, Any]
    ) -> None:
        vendor = fake_vendor(weatherapi_current_payload)
        with pytest.raises(InvalidLocationError):
            asyncio.run(_provider(vendor).fetch(""))
        assert vendor.requests == []

    def test_blank_location_rejected(self, fake_vendor: type[FakeVendor]) -> None:
        vendor = fake_vendor({})
        with pytest.raises(InvalidLocationError):
            asyncio.run(_provider(vendor).fetch("   ", date(2025, 11, 1)))
        assert vendor.requests == []


class TestFailures:
    """Transport, status and shape failures are classified."""

    def test_http_error_status_raises_request_error(self, fake_vendor: type[FakeVendor]) -> None:
        vendor = fake_vendor(
            {"error": {"code": 1006, "message": "No matching location found."}}, status_code=400
        )
        with pytest.raises(RequestError, match="No matching location found") as exc_info:
            asyncio.run(_provider(vendor).fetch("Atlantis"))
        assert exc_info.value.status_code == 400

    def test_server_error_without_json_body(self, fake_vendor: type[FakeVendor]) -> None:
        vendor = fake_vendor(status_code=503, text="upstream down")
        with pytest.raises(RequestError, match="HTTP 503") as exc_info:
            asyncio.run(_provider(vendor).fetch("London"))
        assert exc_info.value.status_code == 503

    def test_transport_error_raises_request_error(self, fake_vendor: type[FakeVendor]) -> None:
        vendor = fake_vendor(error=httpx.ConnectError("connection refused"))
        with pytest.raises(RequestError, match="connection refused") as exc_info:
            asyncio.run(_provider(vendor).fetch("London"))
        assert exc_info.value.status_code is None

    def test_shape_mismatch_is_parse_error(self, fake_vendor: type[FakeVendor]) -> None:
        vendor = fake_vendor({"current": {"temp_c": "warm"}})
        with pytest.raises(ParseError) as exc_info:
            asyncio.run(_provider(vendor).fetch("London"))
        assert not isinstance(exc_info.value, ParseDateTimeError)

    def test_non_json_body_is_parse_error(self, fake_vendor: type[FakeVendor]) -> None:
        vendor = fake_vendor(text="<html>maintenance</html>")
        with pytest.raises(ParseError, match="invalid JSON"):
            asyncio.run(_provider(vendor).fetch("London"))


class TestConcurrency:
    """One provider instance serves concurrent fetches."""

    def test_gather_shared_provider(
        self, fake_vendor: type[FakeVendor], weatherapi_current_payload: dict[str, Any]
    ) -> None:
        vendor = fake_vendor(weatherapi_current_payload)
        provider = _provider(vendor)

        async def fetch_all() -> list[str]:
            records = await asyncio.gather(*(provider.fetch(city) for city in ("A", "B", "C")))
            return [r.location for r in records]

        assert asyncio.run(fetch_all()) == ["A", "B", "C"]
        assert len(vendor.requests) == 3
