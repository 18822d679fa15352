"""Overlay application rendering the active keyboard layer."""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer

from quicklookup.core import LayerState
from quicklookup.host import BridgeConfig, HostTransport, LayerBridge, PreviewEventSource, SocketHostTransport
from quicklookup.models import SHORTCUTS_LAYER, AppConfig
from quicklookup.protocols import LayerEvent, LinkEvent

from .widgets import CharactersLevel, ShortcutsIndicator, ShortcutsLevel, StatusBar

logger = logging.getLogger(__name__)


class QuickLookupApp(App):
    """
    Textual overlay for the controller keyboard.

    This is a PURE view layer: the LayerState is its only input, and the
    LayerBridge is the only thing writing to it. Implements LayerObserver and
    LinkObserver via structural subtyping (no explicit inheritance to avoid
    metaclass conflicts between App and Protocol).

    Without a desktop host the overlay runs in preview mode: number keys
    and [ ] feed a PreviewEventSource, which the bridge listens to in place
    of the host.
    """

    TITLE = "Quick Lookup"

    CSS = """
    Screen {
        align: center middle;
    }

    #overlay {
        width: auto;
        height: auto;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
        Binding("left_square_bracket", "preview_step(-1)", "Prev Layer", show=True),
        Binding("right_square_bracket", "preview_step(1)", "Next Layer", show=True),
        *(
            Binding(str(layer), f"preview_layer({layer})", f"Layer {layer}", show=False)
            for layer in range(SHORTCUTS_LAYER + 1)
        ),
    ]

    def __init__(
        self,
        config: AppConfig,
        transport: HostTransport | None = None,
        preview: PreviewEventSource | None = None,
    ):
        """
        Initialize the overlay.

        Args:
            config: Application configuration (host link, start layer)
            transport: Host transport; required for layer updates when a host port is configured
            preview: Event source for preview mode (created if omitted and no host is configured)
        """
        super().__init__()
        self.config = config
        self.transport = transport

        if preview is None and not config.host_available:
            preview = PreviewEventSource()
        self.preview = preview

        self.state = LayerState()
        self.bridge = LayerBridge(BridgeConfig.from_app_config(config, transport=transport, preview=preview))
        logger.info("QuickLookupApp created")

    def compose(self) -> ComposeResult:
        yield StatusBar()
        with Horizontal(id="overlay"):
            yield CharactersLevel()
            yield ShortcutsIndicator()
            yield ShortcutsLevel()
        yield Footer()

    def on_mount(self) -> None:
        status = self.query_one(StatusBar)
        if self.config.host_available:
            status.update_source(f"{self.config.host_address}:{self.config.host_port}", preview=False)
        else:
            status.update_source("Preview", preview=True)

        self.query_one(ShortcutsLevel).display = False

        self.state.register_observer(self)
        if isinstance(self.transport, SocketHostTransport):
            self.transport.register_observer(self)

        self.bridge.subscribe(self.state.set_layer)

    async def on_unmount(self) -> None:
        self.bridge.close()
        if isinstance(self.transport, SocketHostTransport):
            await self.transport.aclose()

    # =================================================================
    # Observer callbacks
    # =================================================================

    def on_layer_event(self, event: LayerEvent, layer: int, previous: int) -> None:
        """Push the new layer into the view leaves."""
        if event != LayerEvent.LAYER_CHANGED:
            return

        shortcuts = self.state.is_shortcuts
        self.query_one(CharactersLevel).set_active_layer(layer)
        self.query_one(ShortcutsIndicator).set_active(shortcuts)
        self.query_one(ShortcutsLevel).display = shortcuts
        self.query_one(StatusBar).update_layer(layer)

    def on_link_event(self, event: LinkEvent, address: str, port: int) -> None:
        connected = event == LinkEvent.CONNECTED
        self.query_one(StatusBar).update_source(f"{address}:{port}", preview=False, connected=connected)
        if not connected:
            self.notify("Lost connection to the desktop host", severity="warning")

    # =================================================================
    # Preview actions
    # =================================================================

    def action_preview_layer(self, layer: int) -> None:
        """Simulate the host switching to ``layer`` (preview mode only)."""
        if self.preview is None:
            self.notify("Layer keys only work in preview mode", severity="warning")
            return
        self.preview.emit(layer)

    def action_preview_step(self, delta: int) -> None:
        """Cycle through layers 0..8 in preview mode."""
        self.action_preview_layer((self.state.layer + delta) % (SHORTCUTS_LAYER + 1))
