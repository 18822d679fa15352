"""Widgets rendering the keyboard layers."""

from .characters_level import CharactersLevel
from .controller_keys_set import ControllerKeysSet
from .key_cap_cluster import KeyCapCluster
from .shortcuts_indicator import ShortcutsIndicator
from .shortcuts_level import ShortcutsLevel
from .status_bar import StatusBar
from .triggers_indicator import TriggersIndicator

__all__ = [
    "CharactersLevel",
    "ControllerKeysSet",
    "KeyCapCluster",
    "ShortcutsIndicator",
    "ShortcutsLevel",
    "StatusBar",
    "TriggersIndicator",
]
