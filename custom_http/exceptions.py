"""Public exceptions for custom-http."""

import httpx


class CustomHttpError(Exception):
    """Base exception for all custom-http errors."""


class HttpResponseError(CustomHttpError):
    """The server answered with an error status.

    Carries the server response in place of the transport error.
    """

    def __init__(self, response: httpx.Response) -> None:
        super().__init__(f"Server responded with status {response.status_code}")
        self.response = response
        self.status_code = response.status_code


class HttpConfigError(CustomHttpError):
    """Configuration error (invalid env vars, missing request options)."""
