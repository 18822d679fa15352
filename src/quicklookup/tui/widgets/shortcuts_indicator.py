"""Hint telling the user how to reach shortcuts mode."""

from textual.widgets import Static


class ShortcutsIndicator(Static):
    """Lit while shortcuts mode is active."""

    DEFAULT_CSS = """
    ShortcutsIndicator {
        width: auto;
        height: 1;
        margin: 1 2;
        color: $text-muted;
    }

    ShortcutsIndicator.active {
        color: $warning;
        text-style: bold;
    }
    """

    def __init__(self) -> None:
        super().__init__("Hold [b]R2[/b] to go to shortcuts mode")

    def set_active(self, active: bool) -> None:
        self.set_class(active, "active")
