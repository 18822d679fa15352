"""Tests for the generic observer manager."""

from unittest.mock import Mock

from quicklookup.model_manager import ObserverManager
from quicklookup.protocols import LayerEvent, LayerObserver


class TestObserverManager:
    """Test registration and notification."""

    def test_register_is_idempotent(self):
        manager = ObserverManager[LayerObserver](observer_type_name="layer")
        observer = Mock(spec=LayerObserver)

        manager.register(observer)
        manager.register(observer)

        assert len(manager) == 1
        assert observer in manager

    def test_register_during_notify_applies_next_time(self):
        manager = ObserverManager[LayerObserver]()
        late = Mock(spec=LayerObserver)
        first = Mock(spec=LayerObserver)
        first.on_layer_event.side_effect = lambda *a, **kw: manager.register(late)
        manager.register(first)

        manager.notify("on_layer_event", LayerEvent.LAYER_CHANGED, layer=1, previous=0)
        late.on_layer_event.assert_not_called()

        manager.notify("on_layer_event", LayerEvent.LAYER_CHANGED, layer=2, previous=1)
        late.on_layer_event.assert_called_once_with(LayerEvent.LAYER_CHANGED, layer=2, previous=1)

    def test_notify_in_registration_order(self):
        manager = ObserverManager[LayerObserver]()
        order = []
        first = Mock(spec=LayerObserver)
        first.on_layer_event.side_effect = lambda *a, **kw: order.append("first")
        second = Mock(spec=LayerObserver)
        second.on_layer_event.side_effect = lambda *a, **kw: order.append("second")
        manager.register(first)
        manager.register(second)

        manager.notify("on_layer_event", LayerEvent.LAYER_CHANGED, layer=1, previous=0)

        assert order == ["first", "second"]

    def test_missing_callback_logged_not_raised(self):
        manager = ObserverManager[object]()
        manager.register(object())
        manager.notify("on_layer_event", LayerEvent.LAYER_CHANGED)

    def test_unregister_unknown_observer(self):
        manager = ObserverManager[LayerObserver]()
        manager.unregister(Mock(spec=LayerObserver))
        assert len(manager) == 0

    def test_observer_may_unregister_while_notified(self):
        manager = ObserverManager[LayerObserver]()
        observer = Mock(spec=LayerObserver)
        observer.on_layer_event.side_effect = lambda *a, **kw: manager.unregister(observer)
        manager.register(observer)

        manager.notify("on_layer_event", LayerEvent.LAYER_CHANGED, layer=2, previous=1)

        observer.on_layer_event.assert_called_once()
        assert observer not in manager

    def test_failing_observer_logged(self, caplog):
        manager = ObserverManager[LayerObserver](observer_type_name="layer")
        failing = Mock(spec=LayerObserver)
        failing.on_layer_event.side_effect = RuntimeError("view gone")
        healthy = Mock(spec=LayerObserver)
        manager.register(failing)
        manager.register(healthy)

        manager.notify("on_layer_event", LayerEvent.LAYER_CHANGED, layer=3, previous=0)

        healthy.on_layer_event.assert_called_once()
        assert "failed in on_layer_event" in caplog.text
