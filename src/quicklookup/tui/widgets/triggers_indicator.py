"""Widget showing which shoulder triggers select a layer."""

from textual.widgets import Static

from quicklookup.models import TriggerState


def render_triggers(triggers: TriggerState) -> str:
    """Held triggers are shown reversed."""
    l1 = "[reverse]L1[/reverse]" if triggers.l1_down else "L1"
    r1 = "[reverse]R1[/reverse]" if triggers.r1_down else "R1"
    return f"{l1} + {r1}"


class TriggersIndicator(Static):
    """L1 + R1 indicator for one controller key set."""

    DEFAULT_CSS = """
    TriggersIndicator {
        width: 100%;
        height: 1;
        content-align: center middle;
        color: $text-muted;
    }
    """

    def __init__(self, triggers: TriggerState) -> None:
        super().__init__(render_triggers(triggers))
        self.triggers = triggers
