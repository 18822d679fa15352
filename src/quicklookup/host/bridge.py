"""Layer notification bridge.

Forwards the active layer reported by the desktop host into the view's
state. Whatever the environment, the caller gets the same contract: one
synchronous call with a valid starting layer, then one call per host
notification, in emission order.
"""

import asyncio
import logging
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from quicklookup.exceptions import ErrorContext, HostPayloadError
from quicklookup.models import UPDATE_KEYBOARD_CHANNEL, AppConfig

from .preview import PreviewEventSource
from .transport import HostMessage, HostTransport, LayerPayload, Unlisten

logger = logging.getLogger(__name__)

LayerCallback = Callable[[int], None]


class BridgeConfig(BaseModel):
    """Environment the bridge runs in."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    host_available: bool = Field(
        default=False,
        description="Whether a desktop host transport is present",
    )
    start_layer: int = Field(
        default=0,
        ge=0,
        description="Layer the host was on when it launched the overlay",
    )
    channel: str = Field(default=UPDATE_KEYBOARD_CHANNEL, min_length=1)
    transport: HostTransport | None = Field(
        default=None,
        description="Host transport, used only when host_available is set",
    )
    preview: PreviewEventSource | None = Field(
        default=None,
        description="Fake event source fed by a harness when no host is present",
    )

    @classmethod
    def from_app_config(
        cls,
        config: AppConfig,
        transport: HostTransport | None = None,
        preview: PreviewEventSource | None = None,
    ) -> "BridgeConfig":
        return cls(
            host_available=config.host_available,
            start_layer=config.start_layer,
            channel=config.channel,
            transport=transport,
            preview=preview,
        )


class LayerBridge:
    """
    Relay from host layer notifications to a layer callback.

    Registration with the host is best effort: failures are logged and the
    overlay keeps showing the last known layer. There are no retries.
    """

    def __init__(self, config: BridgeConfig):
        self.config = config
        self._registrations: list[asyncio.Task] = []
        self._unlisteners: list[Unlisten] = []
        self._preview_callbacks: list[LayerCallback] = []

    def subscribe(self, on_layer_change: LayerCallback) -> None:
        """
        Subscribe to layer changes.

        ``on_layer_change`` is called once before this method returns, with
        0 when no host is present or with the configured start layer
        otherwise. With a host, listener registration then runs as a task on
        the current event loop.

        Args:
            on_layer_change: Called with each layer index
        """
        if not self.config.host_available:
            logger.info("No desktop host present, starting on layer 0")
            on_layer_change(0)
            if self.config.preview is not None:
                self.config.preview.subscribe(on_layer_change)
                self._preview_callbacks.append(on_layer_change)
            return

        logger.info(f"Desktop host present, starting on layer {self.config.start_layer}")
        on_layer_change(self.config.start_layer)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning("No running event loop: host layer changes will not be received")
            return

        self._registrations.append(loop.create_task(self._register(on_layer_change)))

    async def wait_registered(self) -> None:
        """Wait until every pending host registration has finished (or failed)."""
        if self._registrations:
            await asyncio.gather(*self._registrations, return_exceptions=True)

    def close(self) -> None:
        """Cancel pending registrations and remove every listener."""
        for task in self._registrations:
            if not task.done():
                task.cancel()
        self._registrations.clear()

        for unlisten in self._unlisteners:
            unlisten()
        self._unlisteners.clear()

        if self.config.preview is not None:
            for callback in self._preview_callbacks:
                self.config.preview.unsubscribe(callback)
        self._preview_callbacks.clear()

    async def _register(self, on_layer_change: LayerCallback) -> None:
        transport = self.config.transport
        channel = self.config.channel
        if transport is None:
            logger.warning("Host marked available but no transport configured")
            return

        def handler(message: HostMessage) -> None:
            self._forward(message, on_layer_change)

        with ErrorContext(f"register '{channel}' listener", logger_instance=logger, re_raise=False):
            unlisten = await transport.listen(channel, handler)
            self._unlisteners.append(unlisten)
            logger.info(f"Listening for '{channel}' events from the host")

    def _forward(self, message: HostMessage, on_layer_change: LayerCallback) -> None:
        try:
            payload = LayerPayload.model_validate(message.payload)
        except ValidationError as e:
            error = HostPayloadError(message.event, message.payload, str(e))
            logger.warning(error.technical_message)
            return

        on_layer_change(payload.layer)
