"""Development stand-in for the desktop host.

Accepts overlay connections and broadcasts ``update-keyboard`` messages,
so the overlay can be exercised without the real controller host.
"""

import asyncio
import logging

from quicklookup.models import UPDATE_KEYBOARD_CHANNEL

from .transport import HostMessage

logger = logging.getLogger(__name__)


class HostSimulator:
    """
    Minimal TCP host that publishes layer changes to every connected overlay.

    Example:
        ```python
        async with HostSimulator(port=7878) as host:
            await host.wait_for_clients(1)
            await host.emit(3)
        ```
    """

    def __init__(self, address: str = "127.0.0.1", port: int = 0, channel: str = UPDATE_KEYBOARD_CHANNEL):
        self.address = address
        self.port = port
        self.channel = channel
        self._server: asyncio.Server | None = None
        self._clients: set[asyncio.StreamWriter] = set()

    @property
    def client_count(self) -> int:
        return len(self._clients)

    async def start(self) -> None:
        """Start listening. With port 0 the OS picks a free port, stored in ``self.port``."""
        self._server = await asyncio.start_server(self._on_client, self.address, self.port)
        self.port = self._server.sockets[0].getsockname()[1]
        logger.info(f"Host simulator listening on {self.address}:{self.port}")

    async def stop(self) -> None:
        for writer in list(self._clients):
            writer.close()
        self._clients.clear()

        if self._server is not None:
            self._server.close()
            await self._server.wait_closed()
            self._server = None
            logger.info("Host simulator stopped")

    async def __aenter__(self) -> "HostSimulator":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.stop()

    async def wait_for_clients(self, count: int = 1, timeout: float = 5.0) -> None:
        """
        Wait until at least ``count`` overlays are connected.

        Raises:
            TimeoutError: If they don't connect in time
        """
        async with asyncio.timeout(timeout):
            while len(self._clients) < count:
                await asyncio.sleep(0.01)

    async def emit(self, layer: int) -> None:
        """Broadcast a layer change on the simulator's channel."""
        await self.send(HostMessage(event=self.channel, payload={"layer": layer}))

    async def send(self, message: HostMessage) -> None:
        await self.send_raw(message.model_dump_json())

    async def send_raw(self, line: str) -> None:
        """Broadcast one line as-is (used to exercise malformed input)."""
        data = (line + "\n").encode("utf-8")
        for writer in list(self._clients):
            try:
                writer.write(data)
                await writer.drain()
            except ConnectionError as e:
                logger.info(f"Dropping disconnected overlay: {e}")
                self._clients.discard(writer)

    async def _on_client(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        peer = writer.get_extra_info("peername")
        logger.info(f"Overlay connected from {peer}")
        self._clients.add(writer)
        try:
            # Overlays never send; EOF means they went away
            await reader.read()
        except ConnectionError as e:
            logger.debug(f"Overlay {peer} connection reset: {e}")
        finally:
            self._clients.discard(writer)
            writer.close()
            logger.info(f"Overlay {peer} disconnected")
