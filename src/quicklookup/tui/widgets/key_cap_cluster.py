"""Widget showing the four key caps of one cluster."""

from textual.widgets import Static

from quicklookup.models import ClusterPosition, Label, SpecialKind, SpecialLabel

# N, E, S, W glyphs for icon clusters
SPECIAL_GLYPHS: dict[SpecialKind, tuple[str, str, str, str]] = {
    SpecialKind.ARROW_KEYS: ("↑", "→", "↓", "←"),
    SpecialKind.MOUSE_BUTTONS: ("LMB", "RMB", "MMB", ""),
    SpecialKind.CURSOR_MOVEMENT: ("⇡", "⇢", "⇣", "⇠"),
    SpecialKind.SCROLL_MOVEMENT: ("▲", "▶", "▼", "◀"),
}


def render_cluster(label: Label) -> str:
    """
    Lay out a cluster as a rotated diamond.

    North and east sit on the top row, west and south on the bottom row.
    """
    if isinstance(label, SpecialLabel):
        north, east, south, west = SPECIAL_GLYPHS[label.special]
    else:
        north, east, south, west = label.as_tuple()
    return f"{north:^3} {east:^3}\n{west:^3} {south:^3}"


class KeyCapCluster(Static):
    """Four key-cap labels of one cluster (presentation only)."""

    DEFAULT_CSS = """
    KeyCapCluster {
        width: 9;
        height: 2;
        margin: 0 1;
        color: $text-muted;
    }

    KeyCapCluster.special {
        color: $accent;
    }
    """

    def __init__(self, label: Label, position: ClusterPosition) -> None:
        # Labels include "[" and "]", so markup stays off
        super().__init__(render_cluster(label), markup=False)
        self.label = label
        self.position = position
        if isinstance(label, SpecialLabel):
            self.add_class("special")
