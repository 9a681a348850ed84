"""Request and response interceptors installed on every call."""

from collections.abc import Callable
from typing import Any

import httpx

from custom_http._internal.connectivity import ConnectivityProbe
from custom_http._internal.storage import (
    AUTHORIZATION_TOKEN_KEY,
    USER_ID_KEY,
    SessionProvider,
    TokenProvider,
)
from custom_http.exceptions import HttpResponseError

# Returned instead of raising when a request fails while the machine is offline.
OFFLINE = -1

RequestInterceptor = Callable[[dict[str, Any]], dict[str, Any]]


def make_request_interceptor(
    url: str,
    token_provider: TokenProvider,
    session_provider: SessionProvider,
) -> RequestInterceptor:
    """Build the request interceptor for one call to `url`.

    The interceptor adds the auth token header and appends the user id to the
    path. Stores are read when the interceptor runs, not when it is built.
    """

    def intercept_request(config: dict[str, Any]) -> dict[str, Any]:
        headers = dict(config.get("headers") or {})
        headers[AUTHORIZATION_TOKEN_KEY] = token_provider.get_token() or ""
        user_id = session_provider.get_user_id()
        return {
            **config,
            "headers": headers,
            "url": f"{url}?{USER_ID_KEY}={user_id}",
        }

    return intercept_request


class ResponseInterceptor:
    """Post-processes the outcome of one call to `url`."""

    def __init__(
        self,
        url: str,
        connectivity: ConnectivityProbe,
        log: Callable[[str], None],
    ) -> None:
        self.url = url
        self._connectivity = connectivity
        self._log = log

    def on_response(self, response: httpx.Response) -> httpx.Response:
        """Success branch. Responses are returned as received."""
        self._log(f"response received: {response.status_code} {self.url}")
        return response

    async def on_error(self, error: Exception) -> int:
        """Failure branch.

        Raises:
            HttpResponseError: The server answered with an error status.
            Exception: The original error, when no response arrived and the
                machine is online.

        Returns:
            OFFLINE when no response arrived and the machine is offline.
        """
        if isinstance(error, httpx.HTTPStatusError):
            response = error.response
            self._log(f"error response: {response.status_code} {self.url}")
            self._log_status(response.status_code)
            raise HttpResponseError(response) from error

        if not await self._connectivity.is_online():
            self._log(f"offline, dropping request to {self.url}")
            return OFFLINE

        raise error

    def _log_status(self, status: Any) -> None:
        if status == 403:
            self._log("error status 403")
        elif status == "500":
            # Status codes are ints, so this branch is never taken.
            self._log("error status 500")
        else:
            # 404 logs its own line and then the default one.
            if status == 404:
                self._log("error status 404")
            self._log("error status")
