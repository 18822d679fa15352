"""Pytest fixtures for tests."""

import asyncio
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from quicklookup.host import HostMessage, PreviewEventSource
from quicklookup.models import UPDATE_KEYBOARD_CHANNEL


class FakeTransport:
    """
    In-memory HostTransport.

    Records every ``listen`` call and lets a test deliver host messages
    synchronously with ``emit`` / ``send``.
    """

    def __init__(self, fail: Exception | None = None):
        self.fail = fail
        self.listen_calls: list[str] = []
        self.handlers: dict[str, list] = {}
        self.unlisten_count = 0

    async def listen(self, channel, handler):
        self.listen_calls.append(channel)
        if self.fail is not None:
            raise self.fail
        self.handlers.setdefault(channel, []).append(handler)

        def unlisten():
            self.handlers[channel].remove(handler)
            self.unlisten_count += 1

        return unlisten

    def send(self, message: HostMessage) -> None:
        for handler in list(self.handlers.get(message.event, [])):
            handler(message)

    def emit(self, layer, channel: str = UPDATE_KEYBOARD_CHANNEL) -> None:
        self.send(HostMessage(event=channel, payload={"layer": layer}))


async def wait_until(predicate, timeout: float = 2.0) -> None:
    """Poll ``predicate`` until it is true (for socket round trips)."""
    async with asyncio.timeout(timeout):
        while not predicate():
            await asyncio.sleep(0.01)


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def transport():
    """Fake host transport that accepts listeners."""
    return FakeTransport()


@pytest.fixture
def preview():
    """Fake event source used when no host is present."""
    return PreviewEventSource()


@pytest.fixture
def calls():
    """List to record layer callbacks into."""
    return []
