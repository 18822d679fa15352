"""Quick Lookup: layer overlay for a controller-driven virtual keyboard."""

__version__ = "0.1.0"

# Layer notification bridge
from .host import BridgeConfig, LayerBridge

# Layer state shared by the views
from .core import LayerState

__all__ = [
    "BridgeConfig",
    "LayerBridge",
    "LayerState",
]
