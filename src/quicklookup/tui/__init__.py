"""Terminal overlay for quick-lookup."""

from .app import QuickLookupApp

__all__ = ["QuickLookupApp"]
