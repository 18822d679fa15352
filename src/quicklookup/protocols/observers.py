"""Observer protocol definitions for domain-specific events."""

from typing import Protocol, runtime_checkable

from .events import LayerEvent, LinkEvent


@runtime_checkable
class LayerObserver(Protocol):
    """
    Observer that receives layer change events.

    View leaves and diagnostics implement this to follow the single
    LayerIndex value written by the bridge.
    """

    def on_layer_event(self, event: LayerEvent, layer: int, previous: int) -> None:
        """
        Handle layer events.

        Args:
            event: The type of layer event
            layer: The newly active layer index
            previous: The layer index before this event

        Threading:
            Called on the event loop that runs the bridge (Textual's asyncio
            loop for the overlay). Implementations should not block.

        Error Handling:
            Exceptions raised by observers are caught and logged by the
            LayerState. They do not propagate to the bridge.
        """
        ...


@runtime_checkable
class LinkObserver(Protocol):
    """Observer that receives host connection events."""

    def on_link_event(self, event: LinkEvent, address: str, port: int) -> None:
        """
        Handle host connection events.

        Args:
            event: The type of link event
            address: Host address of the connection
            port: Host port of the connection
        """
        ...
