"""Data models for quick-lookup."""

from .config import UPDATE_KEYBOARD_CHANNEL, AppConfig, default_config_dir, default_config_path
from .enums import ClusterPosition, LayerGroup, SpecialKind
from .labels import CardinalLabel, Label, SpecialLabel
from .layers import (
    CHARACTER_LAYERS,
    LAYERS_PER_GROUP,
    LEFT_SHORTCUTS,
    RIGHT_SHORTCUTS,
    SHORTCUTS_LAYER,
    Layer,
    Shortcut,
    TriggerState,
    describe_layer,
    get_layer,
    is_shortcuts_layer,
    layers_in_group,
)

__all__ = [
    # Config
    "AppConfig",
    "UPDATE_KEYBOARD_CHANNEL",
    "default_config_dir",
    "default_config_path",
    # Enums
    "ClusterPosition",
    "LayerGroup",
    "SpecialKind",
    # Labels
    "CardinalLabel",
    "Label",
    "SpecialLabel",
    # Layers
    "CHARACTER_LAYERS",
    "LAYERS_PER_GROUP",
    "LEFT_SHORTCUTS",
    "RIGHT_SHORTCUTS",
    "SHORTCUTS_LAYER",
    "Layer",
    "Shortcut",
    "TriggerState",
    "describe_layer",
    "get_layer",
    "is_shortcuts_layer",
    "layers_in_group",
]
