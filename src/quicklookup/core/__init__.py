"""Core state for quick-lookup."""

from .layer_state import LayerState

__all__ = ["LayerState"]
