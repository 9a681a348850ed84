"""Shared HTTP client configuration."""

import httpx

from custom_http._version import __version__

DEFAULT_TIMEOUT_MS = 10000


def create_http_client(
    *,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    base_url: str | None = None,
    cookies: httpx.Cookies | dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create a configured async HTTP client.

    A new client is created for every request so that nothing set up for one
    call leaks into another.

    Args:
        timeout_ms: Request timeout in milliseconds.
        base_url: Optional base URL for all requests.
        cookies: Optional cookies sent with every request.
        transport: Optional transport override (mock transports in tests).

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout_ms / 1000,
        base_url=base_url or "",
        headers={"User-Agent": f"custom-http/{__version__}"},
        cookies=cookies,
        follow_redirects=True,
        transport=transport,
    )
