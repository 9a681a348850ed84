"""Environment-dependent client configuration."""

import os
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict

# =============================================================================
# Constants
# =============================================================================

ENVIRONMENT_VAR = "CUSTOM_HTTP_ENV"
FALLBACK_ENVIRONMENT_VAR = "NODE_ENV"
BASE_URL_VAR = "CUSTOM_HTTP_BASE_URL"

DEFAULT_BASE_URL = "/"
DEFAULT_TIMEOUT_MS = 10000


class Environment(str, Enum):
    """Runtime mode the client is deployed in."""

    PRODUCTION = "production"
    DEVELOPMENT = "development"
    TEST = "test"


BASE_URLS: dict[Environment, str] = {
    Environment.PRODUCTION: "/",
    Environment.DEVELOPMENT: "http://localhost:3000",
    Environment.TEST: "http://localhost:3001",
}


def parse_environment(value: str | Environment | None) -> Environment | None:
    """Return the matching Environment, or None for unknown/missing values."""
    if value is None:
        return None
    try:
        return Environment(value)
    except ValueError:
        return None


def resolve_base_url(environment: str | Environment | None) -> str:
    """Map an environment to its base URL.

    Args:
        environment: Environment member or raw value (e.g. "development").

    Returns:
        The base URL for the environment, "/" for anything unrecognized.
    """
    parsed = parse_environment(environment)
    if parsed is None:
        return DEFAULT_BASE_URL
    return BASE_URLS.get(parsed) or DEFAULT_BASE_URL


# =============================================================================
# Client Config
# =============================================================================


class ClientConfig(BaseModel):
    """Static settings merged into every outgoing request.

    Fields:
        environment: Resolved runtime mode, None when unrecognized
        base_url: URL prefix for every request path
        timeout: Request timeout in milliseconds, always 10000
        with_credentials: Send cookies/auth along with requests, always True
    """

    model_config = ConfigDict(frozen=True)

    environment: Environment | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: Literal[10000] = DEFAULT_TIMEOUT_MS
    with_credentials: Literal[True] = True

    @classmethod
    def for_environment(
        cls,
        environment: str | Environment | None,
        *,
        base_url: str | None = None,
    ) -> "ClientConfig":
        """Build the config for an environment.

        Args:
            environment: Environment member or raw value.
            base_url: Optional explicit base URL, bypassing the environment table.
        """
        return cls(
            environment=parse_environment(environment),
            base_url=base_url or resolve_base_url(environment),
        )

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build the config from environment variables.

        Environment variables:
            CUSTOM_HTTP_ENV: Runtime mode ("production", "development", "test").
            NODE_ENV: Used when CUSTOM_HTTP_ENV is not set.
            CUSTOM_HTTP_BASE_URL: Absolute origin used instead of the environment
                table, e.g. "https://api.example.com". Needed wherever the table
                gives "/", since there is no page origin to resolve it against.
        """
        raw = os.environ.get(ENVIRONMENT_VAR) or os.environ.get(FALLBACK_ENVIRONMENT_VAR)
        return cls.for_environment(raw, base_url=os.environ.get(BASE_URL_VAR) or None)

    def transport_fields(self) -> dict[str, object]:
        """Fields that override caller options on every request."""
        return {
            "base_url": self.base_url,
            "timeout": self.timeout,
            "with_credentials": self.with_credentials,
        }
