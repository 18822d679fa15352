"""In-memory layer event source for running without a desktop host."""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class PreviewEventSource:
    """
    Fake host event source.

    Used when no desktop host is present (preview/dev runs, where keys on the
    overlay simulate layer changes) and as a test double. ``emit`` calls every
    subscribed callback synchronously, in subscription order.
    """

    def __init__(self) -> None:
        self._callbacks: list[Callable[[int], None]] = []

    @property
    def listener_count(self) -> int:
        return len(self._callbacks)

    def subscribe(self, callback: Callable[[int], None]) -> None:
        self._callbacks.append(callback)

    def unsubscribe(self, callback: Callable[[int], None]) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def emit(self, layer: int) -> None:
        """Simulate the host reporting a layer change."""
        logger.debug(f"Preview emit: layer {layer} to {len(self._callbacks)} listener(s)")
        for callback in list(self._callbacks):
            callback(layer)
