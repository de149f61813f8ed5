"""Transport adapters: one request/response exchange against a node endpoint."""
from typing import Any, Protocol, runtime_checkable

from ..errors import ConfigurationError
from .http import HTTPAdapter
from .websocket import WebSocketAdapter


@runtime_checkable
class TransportAdapter(Protocol):
    """Capability shared by every transport."""

    async def exchange(self, endpoint: str, request: str) -> str:
        """Send one serialized envelope and return the serialized reply."""

    async def close(self) -> None:
        """Release any connection held by the adapter."""


ADAPTERS = {
    "http": HTTPAdapter,
    "https": HTTPAdapter,
    "ws": WebSocketAdapter,
    "wss": WebSocketAdapter,
}


def create_adapter(scheme: str, **kwargs: Any) -> TransportAdapter:
    """Instantiate the adapter that serves an endpoint scheme."""
    try:
        adapter_cls = ADAPTERS[scheme]
    except KeyError:
        raise ConfigurationError(f"No transport adapter for scheme {scheme!r}") from None
    return adapter_cls(**kwargs)


__all__ = [
    "ADAPTERS",
    "HTTPAdapter",
    "TransportAdapter",
    "WebSocketAdapter",
    "create_adapter",
]
