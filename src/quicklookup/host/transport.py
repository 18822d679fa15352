"""Host transport contract and wire messages.

The desktop host publishes named events. Each event is one JSON object per
line on the wire::

    {"event": "update-keyboard", "payload": {"layer": 3}}
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field

# Removes a handler registered with HostTransport.listen
Unlisten = Callable[[], None]


class HostMessage(BaseModel):
    """One event published by the host."""

    event: str = Field(min_length=1)
    payload: dict[str, Any] = Field(default_factory=dict)


class LayerPayload(BaseModel):
    """Payload of an ``update-keyboard`` event."""

    layer: int = Field(ge=0)


HostEventHandler = Callable[[HostMessage], None]


@runtime_checkable
class HostTransport(Protocol):
    """
    Publish/subscribe facility of the desktop host.

    Implementations deliver messages to handlers in the order the host
    emitted them, on the event loop that called ``listen``.
    """

    async def listen(self, channel: str, handler: HostEventHandler) -> Unlisten:
        """
        Register a persistent handler for a named channel.

        Args:
            channel: Event name to listen for (e.g., "update-keyboard")
            handler: Called once per message on that channel

        Returns:
            Callable that removes the handler

        Raises:
            HostConnectionError: If the host cannot be reached
        """
        ...
