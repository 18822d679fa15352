"""Widget listing the shortcuts bound in shortcuts mode."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Static

from quicklookup.models import LEFT_SHORTCUTS, RIGHT_SHORTCUTS, CardinalLabel, ClusterPosition, Shortcut

from .key_cap_cluster import KeyCapCluster

UPPER_SLOTS = CardinalLabel.from_row(("N", "E", "S", "W"))
LOWER_SLOTS = CardinalLabel.from_row(("n", "e", "s", "w"))


def render_shortcut_column(shortcuts: tuple[Shortcut, ...], slot_first: bool) -> str:
    """
    One line per shortcut, with a blank line between the upper and lower cluster.

    The left column ends with the slot name, the right column starts with it,
    so the slot names sit next to the clusters.
    """
    lines = []
    for i, shortcut in enumerate(shortcuts):
        description = "" if shortcut.is_unused else shortcut.description
        if slot_first:
            lines.append(f"{shortcut.slot}  {description}")
        else:
            lines.append(f"{description}  {shortcut.slot}")
        if i == 3:
            lines.append("")
    return "\n".join(lines)


class ShortcutsLevel(Horizontal):
    """Shortcut descriptions around the N/E/S/W and n/e/s/w slot clusters."""

    DEFAULT_CSS = """
    ShortcutsLevel {
        width: auto;
        height: auto;
        border: round $warning;
        padding: 0 1;
        margin: 0 1;
    }

    ShortcutsLevel .shortcuts-column {
        width: auto;
        height: auto;
    }

    ShortcutsLevel .shortcuts-left {
        text-align: right;
    }

    ShortcutsLevel Vertical {
        width: auto;
        height: auto;
    }

    ShortcutsLevel Vertical Horizontal {
        width: auto;
        height: auto;
        margin-bottom: 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static(
            render_shortcut_column(LEFT_SHORTCUTS, slot_first=False),
            markup=False,
            classes="shortcuts-column shortcuts-left",
        )
        with Vertical():
            with Horizontal():
                yield KeyCapCluster(UPPER_SLOTS, ClusterPosition.UPPER_LEFT)
                yield KeyCapCluster(UPPER_SLOTS, ClusterPosition.UPPER_RIGHT)
            with Horizontal():
                yield KeyCapCluster(LOWER_SLOTS, ClusterPosition.LOWER_LEFT)
                yield KeyCapCluster(LOWER_SLOTS, ClusterPosition.LOWER_RIGHT)
        yield Static(
            render_shortcut_column(RIGHT_SHORTCUTS, slot_first=True),
            markup=False,
            classes="shortcuts-column shortcuts-right",
        )
