"""
Shared async HTTP client factory.

Provides a pre-configured ``httpx.AsyncClient`` with a project User-Agent
and a default timeout. Providers use this instead of a bare
``httpx.AsyncClient()`` so every outbound request looks the same.

No retries are configured: a transport error surfaces immediately, once.

Usage::

    from weather_cli.services.http import create_client

    async with create_client() as client:
        resp = await client.get("https://api.example.com/v1/data")
        resp.raise_for_status()
"""

from __future__ import annotations

import httpx

from weather_cli import __version__

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"weather-cli/{__version__}"


def create_client(
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Build an ``httpx.AsyncClient`` for talking to weather vendors.

    Args:
        timeout: Default timeout applied to every request.
        transport: Custom transport (``httpx.MockTransport`` in tests).
    """
    return httpx.AsyncClient(
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
        transport=transport,
    )
