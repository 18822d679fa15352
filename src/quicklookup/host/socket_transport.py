"""Host transport over a local TCP connection carrying JSON lines."""

import asyncio
import logging

from pydantic import ValidationError

from quicklookup.exceptions import HostConnectionError
from quicklookup.model_manager import ObserverManager
from quicklookup.protocols import LinkEvent, LinkObserver

from .transport import HostEventHandler, HostMessage, Unlisten

logger = logging.getLogger(__name__)

# Longest accepted host line; anything longer is skipped
READ_LIMIT = 64 * 1024


class SocketHostTransport:
    """
    Client side of the host event link.

    The overlay connects to the host once, on the first ``listen`` call, and
    reads newline-delimited ``HostMessage`` objects until the host closes the
    connection. Messages are dispatched to handlers in arrival order. There
    is no reconnect: a dropped link leaves the overlay on its last layer.
    """

    def __init__(self, address: str = "127.0.0.1", port: int = 0, connect_timeout: float = 2.0):
        self.address = address
        self.port = port
        self.connect_timeout = connect_timeout
        self._handlers: dict[str, list[HostEventHandler]] = {}
        self._reader_task: asyncio.Task | None = None
        self._writer: asyncio.StreamWriter | None = None
        self._connect_lock = asyncio.Lock()
        self._observers = ObserverManager[LinkObserver](observer_type_name="link")

    @property
    def connected(self) -> bool:
        return self._reader_task is not None and not self._reader_task.done()

    def register_observer(self, observer: LinkObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: LinkObserver) -> None:
        self._observers.unregister(observer)

    async def listen(self, channel: str, handler: HostEventHandler) -> Unlisten:
        """
        Register a handler, connecting to the host if needed.

        Raises:
            HostConnectionError: If the host cannot be reached
        """
        handlers = self._handlers.setdefault(channel, [])
        handlers.append(handler)

        try:
            # Concurrent listeners share one connection
            async with self._connect_lock:
                if not self.connected:
                    await self._connect()
        except HostConnectionError:
            handlers.remove(handler)
            raise

        def unlisten() -> None:
            if handler in self._handlers.get(channel, []):
                self._handlers[channel].remove(handler)
                logger.debug(f"Removed '{channel}' handler")

        return unlisten

    async def _connect(self) -> None:
        try:
            reader, writer = await asyncio.wait_for(
                asyncio.open_connection(self.address, self.port, limit=READ_LIMIT),
                timeout=self.connect_timeout,
            )
        except (OSError, asyncio.TimeoutError) as e:
            raise HostConnectionError(self.address, self.port, str(e) or type(e).__name__) from e

        logger.info(f"Connected to host at {self.address}:{self.port}")
        self._writer = writer
        self._reader_task = asyncio.create_task(self._read_loop(reader))
        self._observers.notify("on_link_event", LinkEvent.CONNECTED, self.address, self.port)

    async def _read_loop(self, reader: asyncio.StreamReader) -> None:
        try:
            while True:
                try:
                    line = await reader.readline()
                except ValueError as e:
                    # readline discards what it buffered; any remainder arrives as a malformed line
                    logger.warning(f"Skipping host message over the {READ_LIMIT} byte line limit: {e}")
                    continue
                if not line:
                    logger.info("Host closed the connection")
                    break
                self._dispatch(line)
        except (ConnectionError, OSError) as e:
            logger.warning(f"Host connection lost: {e}")
        finally:
            self._close_writer()
            self._observers.notify("on_link_event", LinkEvent.DISCONNECTED, self.address, self.port)

    def _dispatch(self, line: bytes) -> None:
        text = line.strip()
        if not text:
            return

        try:
            message = HostMessage.model_validate_json(text)
        except ValidationError as e:
            logger.warning(f"Skipping malformed host message {text[:80]!r}: {e}")
            return

        for handler in list(self._handlers.get(message.event, [])):
            try:
                handler(message)
            except Exception as e:
                logger.error(f"Error handling '{message.event}' message: {e}", exc_info=True)

    def _close_writer(self) -> None:
        if self._writer is not None:
            self._writer.close()
            self._writer = None

    async def wait_closed(self) -> None:
        """Wait until the host closes the connection."""
        task = self._reader_task
        if task is not None and not task.done():
            await asyncio.wait({task})

    async def aclose(self) -> None:
        """Close the connection and wait for the reader to finish."""
        task = self._reader_task
        self._close_writer()
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._reader_task = None
