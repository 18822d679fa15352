"""Widget showing all character layers, highlighting the active one."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical

from quicklookup.models import LayerGroup, layers_in_group

from .controller_keys_set import ControllerKeysSet


class CharactersLevel(Vertical):
    """Level 1 layers on the top row, level 2 layers below."""

    DEFAULT_CSS = """
    CharactersLevel {
        width: auto;
        height: auto;
    }

    CharactersLevel > Horizontal {
        width: auto;
        height: auto;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._active_layer: int | None = None

    @property
    def active_layer(self) -> int | None:
        return self._active_layer

    def compose(self) -> ComposeResult:
        for group in (LayerGroup.LEVEL_1, LayerGroup.LEVEL_2):
            with Horizontal(classes=group.value):
                for layer in layers_in_group(group):
                    keys_set = ControllerKeysSet(layer)
                    keys_set.set_active(layer.index == self._active_layer)
                    yield keys_set

    def set_active_layer(self, layer: int) -> None:
        """
        Highlight the key set of ``layer``.

        Layers without a key set (shortcuts, unknown indices) highlight nothing.
        May be called before the key sets are composed.
        """
        self._active_layer = layer
        for keys_set in self.query(ControllerKeysSet):
            keys_set.set_active(keys_set.layer.index == layer)
