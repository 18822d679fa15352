"""Enumerations for layer and label models."""

from enum import Enum


class LayerGroup(Enum):
    """Which trigger level a character layer belongs to."""

    LEVEL_1 = "level_1"  # Letters, reached with L1/R1 alone
    LEVEL_2 = "level_2"  # Digits, symbols and mouse controls


class ClusterPosition(Enum):
    """Where a four-key cluster sits inside one controller key set."""

    UPPER_LEFT = "upper_left"
    UPPER_RIGHT = "upper_right"
    LOWER_LEFT = "lower_left"
    LOWER_RIGHT = "lower_right"

    @property
    def table_slice(self) -> slice:
        """Slice of a flat 16-label table row holding this cluster's labels."""
        return _TABLE_SLICES[self]


_TABLE_SLICES = {
    ClusterPosition.UPPER_LEFT: slice(4, 8),
    ClusterPosition.UPPER_RIGHT: slice(12, 16),
    ClusterPosition.LOWER_LEFT: slice(0, 4),
    ClusterPosition.LOWER_RIGHT: slice(8, 12),
}


class SpecialKind(Enum):
    """Clusters drawn as icons instead of text labels (mouse-control layer)."""

    ARROW_KEYS = "arrow_keys"
    MOUSE_BUTTONS = "mouse_buttons"
    CURSOR_MOVEMENT = "cursor_movement"
    SCROLL_MOVEMENT = "scroll_movement"
