"""Protocols for dependency injection in the sync layer."""

from collections.abc import AsyncIterator
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ApiProtocol(Protocol):
    """Protocol for OpenLP snapshot query clients."""

    hostname: str | None

    def call(self, path: str) -> Any:
        """Fetch an API path and return the decoded JSON body."""
        ...

    def service_items(self) -> list[dict[str, Any]]:
        """Fetch the collection-level descriptors (``service/items``)."""
        ...

    def live_item(self) -> dict[str, Any]:
        """Fetch the live-focus descriptor (``controller/live-items``)."""
        ...


@runtime_checkable
class ChannelProtocol(Protocol):
    """Protocol for an open push channel (a connected websocket)."""

    def __aiter__(self) -> AsyncIterator[str | bytes]:
        """Yield inbound messages until the channel closes."""
        ...

    async def close(self) -> None:
        """Close the channel."""
        ...
