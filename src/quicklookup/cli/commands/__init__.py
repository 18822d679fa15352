"""CLI commands for quick-lookup."""

from .config import config
from .host import simulate_host, watch
from .layers import layers

__all__ = ["config", "layers", "simulate_host", "watch"]
