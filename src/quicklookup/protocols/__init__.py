"""Protocol definitions for the observer patterns used across quick-lookup.

- Events: layer changes and host link changes
- Observers: protocols for components that react to these events
"""

from .events import LayerEvent, LinkEvent
from .observers import LayerObserver, LinkObserver

__all__ = [
    # Events
    "LayerEvent",
    "LinkEvent",
    # Observers
    "LayerObserver",
    "LinkObserver",
]
