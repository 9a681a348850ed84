"""Configured HTTP client wrapper.

Example usage:
    from custom_http import OFFLINE, get_http_client

    client = get_http_client()
    response = await client.request({"url": "/users", "method": "GET"})
    if response == OFFLINE:
        ...
"""

import os
from collections.abc import Mapping
from typing import Any

import httpx

from custom_http._internal.connectivity import (
    ConnectivityProbe,
    StaticConnectivity,
    connectivity_from_name,
)
from custom_http._internal.http import create_http_client
from custom_http._internal.interceptors import (
    OFFLINE,
    ResponseInterceptor,
    make_request_interceptor,
)
from custom_http._internal.storage import (
    JsonFileStore,
    SessionProvider,
    StoreSessionProvider,
    StoreTokenProvider,
    TokenProvider,
    local_storage,
    session_storage,
)
from custom_http.config import ClientConfig
from custom_http.exceptions import HttpConfigError

RequestOptions = Mapping[str, Any]

# Keyword arguments forwarded to httpx.AsyncClient.request.
TRANSPORT_KEYS = (
    "params",
    "headers",
    "content",
    "data",
    "files",
    "json",
    "auth",
    "extensions",
)
CONFIG_KEYS = ("url", "method", "base_url", "timeout", "with_credentials", "cookies")


class HttpClientWrapper:
    """HTTP client with environment-dependent defaults and interceptors.

    Every call to `request` builds its own httpx client and interceptors, so
    concurrent calls share nothing but the static config.

    Use `HttpClientWrapper.from_env()` to build one from environment variables,
    or `get_http_client()` for the process-wide instance.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        token_provider: TokenProvider | None = None,
        session_provider: SessionProvider | None = None,
        connectivity: ConnectivityProbe | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the wrapper.

        Args:
            config: Static client config. Defaults to the unrecognized-environment config.
            token_provider: Source of the AuthorizationToken header value.
            session_provider: Source of the userId query value.
            connectivity: Probe consulted when a request fails without a response.
            transport: Optional httpx transport used by every per-call client.
            debug: Enable debug logging to stderr.
        """
        self._config = config or ClientConfig()
        self._token_provider = token_provider or StoreTokenProvider(local_storage)
        self._session_provider = session_provider or StoreSessionProvider(session_storage)
        self._connectivity = connectivity or StaticConnectivity(online=True)
        self._transport = transport
        self._debug = debug

    @classmethod
    def from_env(cls) -> "HttpClientWrapper":
        """Create a wrapper from environment variables.

        Environment variables:
            CUSTOM_HTTP_ENV: Runtime mode (falls back to NODE_ENV).
            CUSTOM_HTTP_BASE_URL: Absolute origin overriding the environment table.
            CUSTOM_HTTP_DEBUG: Set to "1" to enable debug logging.
            CUSTOM_HTTP_STORAGE_PATH: JSON file holding the persistent auth token.
                When unset, the in-memory local_storage is used.
            CUSTOM_HTTP_CONNECTIVITY: "socket" probes the network before returning
                OFFLINE; anything else (default) always reports online.
        """
        storage_path = os.environ.get("CUSTOM_HTTP_STORAGE_PATH")
        token_store = JsonFileStore(storage_path) if storage_path else local_storage

        return cls(
            ClientConfig.from_env(),
            token_provider=StoreTokenProvider(token_store),
            connectivity=connectivity_from_name(os.environ.get("CUSTOM_HTTP_CONNECTIVITY")),
            debug=os.environ.get("CUSTOM_HTTP_DEBUG", "") == "1",
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def timeout(self) -> int:
        return self._config.timeout

    @property
    def with_credentials(self) -> bool:
        return self._config.with_credentials

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            import sys

            print(f"[custom-http] {message}", file=sys.stderr)

    def build_config(self, options: RequestOptions) -> dict[str, Any]:
        """Merge caller options with the static config.

        The wrapper's base_url, timeout and with_credentials always win over
        caller values of the same name.

        Raises:
            HttpConfigError: If options has no string `url`.
        """
        url = options.get("url")
        if not isinstance(url, str):
            raise HttpConfigError("Request options must include a 'url' string")
        return {**options, **self._config.transport_fields()}

    async def request(self, options: RequestOptions) -> httpx.Response | int:
        """Send a request.

        Args:
            options: Request options with at least `url`. `method` defaults to
                GET; other httpx request arguments are passed through.

        Returns:
            The response on a 2xx status, or OFFLINE (-1) when the request
            failed without a response while the machine is offline.

        Raises:
            HttpResponseError: The server answered with a non-2xx status.
            httpx.HTTPError: Any other transport failure while online.
        """
        config = self.build_config(options)
        url = options["url"]

        intercept_request = make_request_interceptor(
            url, self._token_provider, self._session_provider
        )
        interceptor = ResponseInterceptor(url, self._connectivity, self._log_debug)

        config = intercept_request(config)

        try:
            async with create_http_client(
                timeout_ms=config["timeout"],
                base_url=config["base_url"],
                cookies=config.get("cookies"),
                transport=self._transport,
            ) as client:
                response = await client.request(
                    config.get("method", "GET"),
                    config["url"],
                    timeout=config["timeout"] / 1000,
                    **self._transport_kwargs(config),
                )
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return await interceptor.on_error(e)

        return interceptor.on_response(response)

    def _transport_kwargs(self, config: dict[str, Any]) -> dict[str, Any]:
        kwargs = {key: config[key] for key in TRANSPORT_KEYS if config.get(key) is not None}
        ignored = set(config) - set(TRANSPORT_KEYS) - set(CONFIG_KEYS)
        if ignored:
            self._log_debug(f"Ignoring unsupported options: {sorted(ignored)}")
        return kwargs


_http_client: HttpClientWrapper | None = None


def get_http_client() -> HttpClientWrapper:
    """Get the process-wide HTTP client.

    Built from environment variables on first use and reused afterwards.

    Returns:
        The shared HttpClientWrapper instance.
    """
    global _http_client
    if _http_client is None:
        _http_client = HttpClientWrapper.from_env()
    return _http_client


def reset_http_client() -> None:
    """Drop the process-wide client so the next lookup re-reads the environment."""
    global _http_client
    _http_client = None
