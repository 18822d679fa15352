"""Holder of the active layer index."""

import logging

from quicklookup.model_manager import ObserverManager
from quicklookup.models import is_shortcuts_layer
from quicklookup.protocols import LayerEvent, LayerObserver

logger = logging.getLogger(__name__)


class LayerState:
    """
    The single LayerIndex value shared by the view.

    The bridge is the only writer (via ``set_layer``); any number of
    LayerObservers read it. Every write notifies observers, even when the
    value is unchanged, because the host may re-emit a layer on purpose.
    """

    def __init__(self, initial: int = 0):
        self._layer = initial
        self._observers = ObserverManager[LayerObserver](observer_type_name="layer")

    @property
    def layer(self) -> int:
        return self._layer

    @property
    def is_shortcuts(self) -> bool:
        """True while the shortcuts layer (R2 held) is active."""
        return is_shortcuts_layer(self._layer)

    def set_layer(self, layer: int) -> None:
        """
        Write a new layer and notify observers.

        Args:
            layer: Layer index reported by the bridge
        """
        previous = self._layer
        self._layer = layer
        logger.debug(f"Layer {previous} -> {layer}")
        self._observers.notify("on_layer_event", LayerEvent.LAYER_CHANGED, layer=layer, previous=previous)

    def register_observer(self, observer: LayerObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: LayerObserver) -> None:
        self._observers.unregister(observer)
