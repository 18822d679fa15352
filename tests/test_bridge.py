"""Tests for the layer notification bridge."""

import asyncio

import pytest
from pydantic import ValidationError

from conftest import FakeTransport
from quicklookup.exceptions import HostConnectionError
from quicklookup.host import BridgeConfig, HostMessage, LayerBridge
from quicklookup.models import AppConfig, UPDATE_KEYBOARD_CHANNEL


class TestBridgeConfig:
    """Test the bridge environment model."""

    def test_defaults_mean_no_host(self):
        config = BridgeConfig()
        assert config.host_available is False
        assert config.start_layer == 0
        assert config.channel == UPDATE_KEYBOARD_CHANNEL
        assert config.transport is None
        assert config.preview is None

    def test_negative_start_layer_rejected(self):
        with pytest.raises(ValidationError):
            BridgeConfig(host_available=True, start_layer=-1)

    def test_accepts_any_transport_with_listen(self, transport):
        config = BridgeConfig(host_available=True, transport=transport)
        assert config.transport is transport

    def test_rejects_object_without_listen(self):
        with pytest.raises(ValidationError):
            BridgeConfig(host_available=True, transport=object())

    def test_from_app_config_with_host(self, transport):
        app_config = AppConfig(host_port=7878, start_layer=2)
        config = BridgeConfig.from_app_config(app_config, transport=transport)
        assert config.host_available is True
        assert config.start_layer == 2
        assert config.transport is transport

    def test_from_app_config_without_host(self, preview):
        config = BridgeConfig.from_app_config(AppConfig(start_layer=5), preview=preview)
        assert config.host_available is False
        assert config.preview is preview


class TestBridgeWithoutHost:
    """Host absent: start on layer 0 and listen to the preview source."""

    def test_initial_call_is_zero_and_synchronous(self, calls):
        """No event loop is needed and the call happens before subscribe returns."""
        bridge = LayerBridge(BridgeConfig(host_available=False))
        bridge.subscribe(calls.append)
        assert calls == [0]

    def test_start_layer_ignored_without_host(self, calls):
        bridge = LayerBridge(BridgeConfig(host_available=False, start_layer=6))
        bridge.subscribe(calls.append)
        assert calls == [0]

    def test_preview_emit_forwards_layer(self, calls, preview):
        bridge = LayerBridge(BridgeConfig(preview=preview))
        bridge.subscribe(calls.append)
        preview.emit(3)
        assert calls == [0, 3]
        assert len(calls) == 2

    def test_preview_emits_forwarded_in_order(self, calls, preview):
        bridge = LayerBridge(BridgeConfig(preview=preview))
        bridge.subscribe(calls.append)
        for layer in (4, 8, 1):
            preview.emit(layer)
        assert calls == [0, 4, 8, 1]

    @pytest.mark.asyncio
    async def test_transport_never_touched(self, calls, transport):
        bridge = LayerBridge(BridgeConfig(host_available=False, transport=transport))
        bridge.subscribe(calls.append)
        await asyncio.sleep(0)
        await bridge.wait_registered()
        assert transport.listen_calls == []
        assert calls == [0]

    def test_close_unsubscribes_from_preview(self, calls, preview):
        bridge = LayerBridge(BridgeConfig(preview=preview))
        bridge.subscribe(calls.append)
        assert preview.listener_count == 1

        bridge.close()
        preview.emit(2)

        assert preview.listener_count == 0
        assert calls == [0]


@pytest.mark.asyncio
class TestBridgeWithHost:
    """Host present: start layer first, then host notifications."""

    async def test_start_layer_before_registration(self, calls, transport):
        bridge = LayerBridge(BridgeConfig(host_available=True, start_layer=5, transport=transport))
        bridge.subscribe(calls.append)

        # Registration runs as a task, so nothing has reached the host yet
        assert calls == [5]
        assert transport.listen_calls == []

        await bridge.wait_registered()
        assert transport.listen_calls == [UPDATE_KEYBOARD_CHANNEL]
        assert calls == [5]

    async def test_forwards_host_layers_in_order(self, calls, transport):
        bridge = LayerBridge(BridgeConfig(host_available=True, start_layer=1, transport=transport))
        bridge.subscribe(calls.append)
        await bridge.wait_registered()

        for layer in (2, 7, 3):
            transport.emit(layer)

        assert calls == [1, 2, 7, 3]

    async def test_initial_call_happens_once(self, calls, transport):
        bridge = LayerBridge(BridgeConfig(host_available=True, start_layer=4, transport=transport))
        bridge.subscribe(calls.append)
        await bridge.wait_registered()
        transport.emit(0)
        await asyncio.sleep(0)

        assert calls == [4, 0]

    async def test_repeated_layer_not_coalesced(self, calls, transport):
        bridge = LayerBridge(BridgeConfig(host_available=True, transport=transport))
        bridge.subscribe(calls.append)
        await bridge.wait_registered()

        transport.emit(2)
        transport.emit(2)

        assert calls == [0, 2, 2]

    async def test_custom_channel(self, calls, transport):
        bridge = LayerBridge(
            BridgeConfig(host_available=True, transport=transport, channel="layers")
        )
        bridge.subscribe(calls.append)
        await bridge.wait_registered()

        transport.emit(3)
        transport.emit(6, channel="layers")

        assert transport.listen_calls == ["layers"]
        assert calls == [0, 6]

    async def test_connection_failure_absorbed(self, calls):
        transport = FakeTransport(fail=HostConnectionError("127.0.0.1", 7878, "refused"))
        bridge = LayerBridge(BridgeConfig(host_available=True, start_layer=3, transport=transport))

        bridge.subscribe(calls.append)
        await bridge.wait_registered()

        assert transport.listen_calls == [UPDATE_KEYBOARD_CHANNEL]
        assert calls == [3]

    async def test_unexpected_failure_absorbed(self, calls):
        transport = FakeTransport(fail=RuntimeError("host exploded"))
        bridge = LayerBridge(BridgeConfig(host_available=True, start_layer=2, transport=transport))

        bridge.subscribe(calls.append)
        await bridge.wait_registered()

        assert calls == [2]

    async def test_missing_transport_absorbed(self, calls):
        bridge = LayerBridge(BridgeConfig(host_available=True, start_layer=7))
        bridge.subscribe(calls.append)
        await bridge.wait_registered()
        assert calls == [7]

    @pytest.mark.parametrize(
        "payload",
        [{}, {"layer": -1}, {"layer": "shift"}, {"level": 3}],
    )
    async def test_invalid_payload_dropped(self, calls, transport, payload):
        bridge = LayerBridge(BridgeConfig(host_available=True, transport=transport))
        bridge.subscribe(calls.append)
        await bridge.wait_registered()

        transport.send(HostMessage(event=UPDATE_KEYBOARD_CHANNEL, payload=payload))
        transport.emit(4)

        assert calls == [0, 4]

    async def test_close_removes_host_listener(self, calls, transport):
        bridge = LayerBridge(BridgeConfig(host_available=True, transport=transport))
        bridge.subscribe(calls.append)
        await bridge.wait_registered()

        bridge.close()
        transport.emit(5)

        assert transport.unlisten_count == 1
        assert calls == [0]

    async def test_close_cancels_pending_registration(self, calls, transport):
        bridge = LayerBridge(BridgeConfig(host_available=True, start_layer=1, transport=transport))
        bridge.subscribe(calls.append)
        bridge.close()

        await asyncio.sleep(0)
        await asyncio.sleep(0)

        assert transport.listen_calls == []
        assert calls == [1]

    async def test_two_subscribers_both_forwarded(self, transport):
        first, second = [], []
        bridge = LayerBridge(BridgeConfig(host_available=True, start_layer=2, transport=transport))
        bridge.subscribe(first.append)
        bridge.subscribe(second.append)
        await bridge.wait_registered()

        transport.emit(6)

        assert first == [2, 6]
        assert second == [2, 6]


class TestBridgeWithoutEventLoop:
    """Host present but subscribe called outside asyncio."""

    def test_start_layer_delivered_and_registration_skipped(self, calls, transport):
        bridge = LayerBridge(BridgeConfig(host_available=True, start_layer=3, transport=transport))
        bridge.subscribe(calls.append)

        assert calls == [3]
        assert transport.listen_calls == []
