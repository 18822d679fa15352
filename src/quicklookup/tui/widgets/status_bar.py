"""Status bar widget showing the active layer and where layer changes come from."""

from textual.widgets import Static

from quicklookup.models import describe_layer


class StatusBar(Static):
    """
    Status bar displaying current overlay state.

    Shows:
    - Current layer index and name
    - Source of layer changes (host link or preview mode)
    """

    DEFAULT_CSS = """
    StatusBar {
        dock: top;
        height: 1;
        background: $panel;
        color: $text;
        padding: 0 1;
    }

    StatusBar.preview {
        background: $accent;
    }

    StatusBar.disconnected {
        background: $error;
    }
    """

    def __init__(self) -> None:
        super().__init__(markup=False)
        self._layer = 0
        self._source = "Preview"
        self._preview = True
        self._connected = False
        self._update_display()

    @property
    def layer(self) -> int:
        return self._layer

    def update_layer(self, layer: int) -> None:
        self._layer = layer
        self._update_display()

    def update_source(self, source: str, preview: bool, connected: bool = False) -> None:
        """
        Update where layer changes come from.

        Args:
            source: Display name of the source (e.g., "127.0.0.1:7878")
            preview: Whether the overlay runs without a host
            connected: Whether the host link is up (ignored in preview)
        """
        self._source = source
        self._preview = preview
        self._connected = connected
        self._update_display()

    def _update_display(self) -> None:
        self.set_class(self._preview, "preview")
        self.set_class(not self._preview and not self._connected, "disconnected")

        layer_text = f"Layer {self._layer} ({describe_layer(self._layer)})"
        if self._preview:
            source_text = "Preview: keys 0-8 or [ ] switch layers"
        elif self._connected:
            source_text = f"Host {self._source}"
        else:
            source_text = f"Host {self._source} (not connected)"

        self.update(f"{layer_text} | {source_text}")
