"""Widget showing every key cap of one layer."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical

from quicklookup.models import ClusterPosition, Layer

from .key_cap_cluster import KeyCapCluster
from .triggers_indicator import TriggersIndicator


class ControllerKeysSet(Vertical):
    """
    Triggers indicator plus the four clusters of one layer.

    Laid out like the controller: two clusters on top, two below.
    """

    DEFAULT_CSS = """
    ControllerKeysSet {
        width: auto;
        height: auto;
        border: round $surface;
        padding: 0 1;
        margin: 0 1;
    }

    ControllerKeysSet.active {
        border: round $warning;
    }

    ControllerKeysSet.active KeyCapCluster {
        color: $text;
        text-style: bold;
    }

    ControllerKeysSet.active TriggersIndicator {
        color: $warning;
    }

    ControllerKeysSet Horizontal {
        width: auto;
        height: auto;
    }
    """

    def __init__(self, layer: Layer) -> None:
        super().__init__(id=f"layer-{layer.index}")
        self.layer = layer

    def compose(self) -> ComposeResult:
        yield TriggersIndicator(self.layer.triggers)
        with Horizontal():
            yield KeyCapCluster(self.layer.cluster(ClusterPosition.UPPER_LEFT), ClusterPosition.UPPER_LEFT)
            yield KeyCapCluster(self.layer.cluster(ClusterPosition.UPPER_RIGHT), ClusterPosition.UPPER_RIGHT)
        with Horizontal():
            yield KeyCapCluster(self.layer.cluster(ClusterPosition.LOWER_LEFT), ClusterPosition.LOWER_LEFT)
            yield KeyCapCluster(self.layer.cluster(ClusterPosition.LOWER_RIGHT), ClusterPosition.LOWER_RIGHT)

    @property
    def is_active(self) -> bool:
        return self.has_class("active")

    def set_active(self, active: bool) -> None:
        self.set_class(active, "active")
