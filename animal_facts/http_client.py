"""Shared httpx client used to reach upstream fact providers."""

import httpx

from .config import Settings, settings as default_settings


def build_async_client(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create the connection-pooling client shared by every fact lookup.

    Args:
        settings: Optional settings override (defaults to the global settings)
        transport: Optional transport, e.g. ``httpx.MockTransport`` in tests
    """

    settings = settings or default_settings
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers={
            "User-Agent": settings.user_agent,
            "Accept": "application/json",
        },
        transport=transport,
    )
