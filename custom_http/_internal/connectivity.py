"""Connectivity probes consulted when a request fails without a response."""

import asyncio
from typing import Protocol

DEFAULT_PROBE_HOST = "1.1.1.1"
DEFAULT_PROBE_PORT = 53
DEFAULT_PROBE_TIMEOUT = 1.0


class ConnectivityProbe(Protocol):
    async def is_online(self) -> bool: ...


class StaticConnectivity:
    """Reports a fixed online state. Flip `online` to simulate going offline."""

    def __init__(self, online: bool = True) -> None:
        self.online = online

    async def is_online(self) -> bool:
        return self.online


class SocketConnectivity:
    """Reports online when a TCP connection to a well-known host succeeds.

    The connection is opened on the running event loop, so a slow or
    unreachable probe host never stalls other tasks.
    """

    def __init__(
        self,
        host: str = DEFAULT_PROBE_HOST,
        port: int = DEFAULT_PROBE_PORT,
        timeout: float = DEFAULT_PROBE_TIMEOUT,
    ) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout

    async def is_online(self) -> bool:
        try:
            _, writer = await asyncio.wait_for(
                asyncio.open_connection(self.host, self.port), timeout=self.timeout
            )
        except (OSError, asyncio.TimeoutError):
            return False
        writer.close()
        try:
            await writer.wait_closed()
        except OSError:
            pass
        return True


CONNECTIVITY_PROBES = {
    "static": StaticConnectivity,
    "socket": SocketConnectivity,
}


def connectivity_from_name(name: str | None) -> ConnectivityProbe:
    """Build a probe by name ("static" or "socket"). Unknown names fall back to static."""
    probe_cls = CONNECTIVITY_PROBES.get((name or "").strip().lower(), StaticConnectivity)
    return probe_cls()
