"""custom-http: a configured HTTP client for browser-style backends.

Public API:
    HttpClientWrapper - Client with environment defaults and interceptors
    get_http_client - Process-wide client built from environment variables
    ClientConfig, Environment - Static client configuration
    OFFLINE - Returned by `request` when the machine is offline

Internal (system-level, not for direct use):
    _internal.interceptors - Request/response interceptors
    _internal.storage - Token and session stores
"""

from custom_http._internal.interceptors import OFFLINE
from custom_http._internal.storage import local_storage, session_storage
from custom_http._version import __version__
from custom_http.client import HttpClientWrapper, get_http_client, reset_http_client
from custom_http.config import ClientConfig, Environment, resolve_base_url
from custom_http.exceptions import CustomHttpError, HttpConfigError, HttpResponseError

__all__ = [
    "__version__",
    "OFFLINE",
    "HttpClientWrapper",
    "get_http_client",
    "reset_http_client",
    "ClientConfig",
    "Environment",
    "resolve_base_url",
    "CustomHttpError",
    "HttpConfigError",
    "HttpResponseError",
    "local_storage",
    "session_storage",
]
