"""Domain events for observer pattern.

- Layer events: the active keyboard layer changed
- Link events: the connection to the desktop host changed
"""

from enum import Enum


class LayerEvent(Enum):
    """Events from the layer state."""

    LAYER_CHANGED = "layer_changed"  # Bridge wrote a layer (may equal the previous one)


class LinkEvent(Enum):
    """Events from a host transport connection."""

    CONNECTED = "connected"          # Connection to the host established
    DISCONNECTED = "disconnected"    # Host closed the connection or it was closed locally
