"""Layers command implementation."""

from typing import Optional

import click

from quicklookup.models import (
    CHARACTER_LAYERS,
    LEFT_SHORTCUTS,
    RIGHT_SHORTCUTS,
    SHORTCUTS_LAYER,
    ClusterPosition,
    Layer,
    SpecialLabel,
)


def format_layer(layer: Layer) -> list[str]:
    """Describe one character layer, one cluster per line."""
    triggers = layer.triggers
    held = [name for name, down in (("L1", triggers.l1_down), ("R1", triggers.r1_down)) if down]
    lines = [
        f"Layer {layer.index} ({layer.group.value}, step {layer.step}) "
        f"- triggers: {' + '.join(held) or 'none'}"
    ]
    for position in ClusterPosition:
        label = layer.cluster(position)
        if isinstance(label, SpecialLabel):
            text = f"<{label.special.value}>"
        else:
            text = "  ".join(f"{direction}={value or '-'}" for direction, value in zip("NESW", label.as_tuple()))
        lines.append(f"    {position.value:<12} {text}")
    return lines


def format_shortcuts() -> list[str]:
    lines = [f"Layer {SHORTCUTS_LAYER} (shortcuts) - hold R2"]
    for side, shortcuts in (("left", LEFT_SHORTCUTS), ("right", RIGHT_SHORTCUTS)):
        for shortcut in shortcuts:
            if not shortcut.is_unused:
                lines.append(f"    {side:<5} {shortcut.slot}  {shortcut.description}")
    return lines


@click.command(name="layers")
@click.option(
    '--layer', '-l',
    type=click.IntRange(0, SHORTCUTS_LAYER),
    default=None,
    help='Only show this layer'
)
def layers(layer: Optional[int]):
    """Print the label tables of every layer."""
    if layer == SHORTCUTS_LAYER:
        click.echo("\n".join(format_shortcuts()))
        return

    if layer is not None:
        click.echo("\n".join(format_layer(CHARACTER_LAYERS[layer])))
        return

    for character_layer in CHARACTER_LAYERS:
        click.echo("\n".join(format_layer(character_layer)))
        click.echo()
    click.echo("\n".join(format_shortcuts()))
