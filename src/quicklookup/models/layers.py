"""Static layer definitions for the virtual keyboard.

Character layers 0-3 form level 1 and layers 4-7 form level 2. Inside a
level, the step (0-3) is selected by the L1/R1 triggers. Holding R2 switches
to the shortcuts layer (8).

Each character layer is stored as a flat 16-label row; ``ClusterPosition``
maps four-label slices of that row onto the four clusters of a controller key
set, and every slice lists its labels in N, E, S, W order.
"""

from pydantic import BaseModel, ConfigDict, Field

from .enums import ClusterPosition, LayerGroup, SpecialKind
from .labels import CardinalLabel, Label, SpecialLabel

LAYERS_PER_GROUP = 4
SHORTCUTS_LAYER = 8
UNUSED_SHORTCUT = "_"

BACKSPACE = "⌫"
ENTER = "↵"
SPACE = "➟"
TAB = "⇥"
SHIFT_TAB = "⇤"

_LEVEL_1_ROWS: tuple[tuple[str, ...], ...] = (
    ("t", "h", "e", "r", "T", "H", "E", "R", "i", "o", "a", "n", "I", "O", "A", "N"),
    ("w", "c", "s", "u", "W", "C", "S", "U", "y", "f", "v", "m", "Y", "f", "V", "M"),
    ("l", "p", "d", BACKSPACE, "L", "P", "D", "Esc", "k", SPACE, "b", "g", "K", ENTER, "B", "G"),
    ("z", "", "", "j", "Z", "", "", "J", "q", "x", "", "", "Q", "X", "", ""),
)

_LEVEL_2_ROWS: tuple[tuple[str, ...], ...] = (
    # Mouse controls: drawn as icon clusters, see _MOUSE_CLUSTERS
    ("",) * 16,
    ("1", "2", "3", "4", "!", "@", "#", "$", "5", "6", "7", "8", "%", "^", "&", "*"),
    ("9", "0", ".", ",", "(", ")", ">", "<", "'", ";", "]", "[", '"', ":", "}", "{"),
    ("-", "/", "=", "`", "_", "?", "+", "~", TAB, "\\", "", "", SHIFT_TAB, "|", "", ""),
)

_MOUSE_CLUSTERS = {
    ClusterPosition.UPPER_LEFT: SpecialKind.ARROW_KEYS,
    ClusterPosition.UPPER_RIGHT: SpecialKind.MOUSE_BUTTONS,
    ClusterPosition.LOWER_LEFT: SpecialKind.CURSOR_MOVEMENT,
    ClusterPosition.LOWER_RIGHT: SpecialKind.SCROLL_MOVEMENT,
}

_SHORTCUT_ROW: tuple[str, ...] = (
    UNUSED_SHORTCUT,
    "Redo (Ctrl + Shift + z)",
    UNUSED_SHORTCUT,
    "Undo (Ctrl + z)",
    UNUSED_SHORTCUT,
    UNUSED_SHORTCUT,
    UNUSED_SHORTCUT,
    UNUSED_SHORTCUT,
    "Select all (Ctrl + a)",
    "Copy (Ctrl + c)",
    "Paste (Ctrl + v)",
    "Cut (Ctrl + x)",
    UNUSED_SHORTCUT,
    UNUSED_SHORTCUT,
    UNUSED_SHORTCUT,
    UNUSED_SHORTCUT,
)

# Upper clusters are named with capitals, lower clusters in lowercase
SHORTCUT_SLOTS: tuple[str, ...] = ("N", "E", "S", "W", "n", "e", "s", "w")


class TriggerState(BaseModel):
    """Which shoulder triggers are held to reach a step of a level."""

    model_config = ConfigDict(frozen=True)

    l1_down: bool
    r1_down: bool

    @classmethod
    def for_step(cls, step: int) -> "TriggerState":
        """
        Trigger combination for a step.

        Step 0 is no trigger, 1 is R1, 2 is L1, 3 is L1 + R1.
        """
        return cls(l1_down=step > 1, r1_down=step in (1, 3))


class Layer(BaseModel):
    """One character layer: four label clusters reached by a trigger combination."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    group: LayerGroup
    step: int = Field(ge=0, lt=LAYERS_PER_GROUP)
    clusters: dict[ClusterPosition, Label]

    @property
    def triggers(self) -> TriggerState:
        return TriggerState.for_step(self.step)

    @property
    def is_mouse_controls(self) -> bool:
        return any(isinstance(label, SpecialLabel) for label in self.clusters.values())

    def cluster(self, position: ClusterPosition) -> Label:
        return self.clusters[position]


class Shortcut(BaseModel):
    """A shortcut bound to one key of the shortcuts layer."""

    model_config = ConfigDict(frozen=True)

    slot: str
    description: str

    @property
    def is_unused(self) -> bool:
        return self.description == UNUSED_SHORTCUT


def _layer_from_row(index: int, group: LayerGroup, step: int, row: tuple[str, ...]) -> Layer:
    clusters: dict[ClusterPosition, Label] = {
        position: CardinalLabel.from_row(row[position.table_slice])
        for position in ClusterPosition
    }
    return Layer(index=index, group=group, step=step, clusters=clusters)


def _mouse_layer(index: int, step: int) -> Layer:
    clusters: dict[ClusterPosition, Label] = {
        position: SpecialLabel(special=kind) for position, kind in _MOUSE_CLUSTERS.items()
    }
    return Layer(index=index, group=LayerGroup.LEVEL_2, step=step, clusters=clusters)


def _build_layers() -> tuple[Layer, ...]:
    layers = [
        _layer_from_row(step, LayerGroup.LEVEL_1, step, row)
        for step, row in enumerate(_LEVEL_1_ROWS)
    ]
    for step, row in enumerate(_LEVEL_2_ROWS):
        index = LAYERS_PER_GROUP + step
        if step == 0:
            layers.append(_mouse_layer(index, step))
        else:
            layers.append(_layer_from_row(index, LayerGroup.LEVEL_2, step, row))
    return tuple(layers)


def _build_shortcuts(row: tuple[str, ...]) -> tuple[Shortcut, ...]:
    return tuple(
        Shortcut(slot=slot, description=description)
        for slot, description in zip(SHORTCUT_SLOTS, row)
    )


CHARACTER_LAYERS: tuple[Layer, ...] = _build_layers()

# Left column belongs to the left clusters, right column to the right clusters
LEFT_SHORTCUTS: tuple[Shortcut, ...] = _build_shortcuts(_SHORTCUT_ROW[:8])
RIGHT_SHORTCUTS: tuple[Shortcut, ...] = _build_shortcuts(_SHORTCUT_ROW[8:])


def get_layer(index: int) -> Layer | None:
    """Return the character layer with this index, or None for shortcuts/unknown layers."""
    if 0 <= index < len(CHARACTER_LAYERS):
        return CHARACTER_LAYERS[index]
    return None


def layers_in_group(group: LayerGroup) -> tuple[Layer, ...]:
    return tuple(layer for layer in CHARACTER_LAYERS if layer.group == group)


def is_shortcuts_layer(index: int) -> bool:
    return index == SHORTCUTS_LAYER


def describe_layer(index: int) -> str:
    """Short human-readable name for a layer index, e.g. "Level 1, step 2"."""
    if is_shortcuts_layer(index):
        return "Shortcuts"
    layer = get_layer(index)
    if layer is None:
        return "Unknown"
    if layer.is_mouse_controls:
        return "Mouse"
    return f"{layer.group.value.replace('_', ' ').capitalize()}, step {layer.step}"
