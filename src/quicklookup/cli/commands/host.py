"""Host link commands: watch layer changes and run a development host."""

import asyncio
import logging
import sys

import click

from quicklookup.exceptions import QuickLookupError, format_error_for_display
from quicklookup.host import BridgeConfig, HostSimulator, LayerBridge, SocketHostTransport
from quicklookup.models import SHORTCUTS_LAYER, AppConfig, describe_layer

from .config import load_app_config


logger = logging.getLogger(__name__)


def echo_layer(layer: int) -> None:
    click.echo(f"layer {layer} ({describe_layer(layer)})")


async def watch_layers(app_config: AppConfig) -> bool:
    """
    Print every layer change until the host goes away.

    Returns:
        False if the host could not be reached
    """
    transport = SocketHostTransport(app_config.host_address, app_config.host_port)
    bridge = LayerBridge(BridgeConfig.from_app_config(app_config, transport=transport))

    bridge.subscribe(echo_layer)
    await bridge.wait_registered()

    if not transport.connected:
        return False

    try:
        await transport.wait_closed()
    finally:
        bridge.close()
        await transport.aclose()
    return True


@click.command(name="watch")
@click.pass_context
def watch(ctx):
    """
    Print layer changes reported by the desktop host.

    Uses the same bridge as the overlay, so the first line is the start
    layer and every following line is a host notification.
    """
    try:
        app_config = load_app_config(ctx)
    except QuickLookupError as e:
        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"Error: {user_message}", err=True)
        if recovery_hint:
            click.echo(recovery_hint, err=True)
        raise click.Abort()

    if not app_config.host_available:
        click.echo("Error: no host port configured. Pass --host-port or set QUICK_LOOKUP_HOST_PORT.", err=True)
        raise click.Abort()

    try:
        reachable = asyncio.run(watch_layers(app_config))
    except KeyboardInterrupt:
        logger.info("Watch interrupted by user")
        return

    if not reachable:
        click.echo(
            f"Error: could not connect to the host at {app_config.host_address}:{app_config.host_port}",
            err=True,
        )
        raise click.Abort()
    click.echo("Host closed the connection.")


def parse_layer_command(line: str) -> int | None:
    """
    Parse one line typed into the simulator.

    Returns:
        The layer to emit, or None for blank/invalid input

    Raises:
        EOFError: For "q" or "quit"
    """
    text = line.strip().lower()
    if text in ("q", "quit"):
        raise EOFError
    try:
        layer = int(text)
    except ValueError:
        return None
    return layer if layer >= 0 else None


async def run_simulator(address: str, port: int) -> None:
    async with HostSimulator(address, port) as host:
        click.echo(f"Host simulator listening on {host.address}:{host.port}")
        click.echo(f"Start the overlay with: quick-lookup --host-port {host.port}")
        click.echo(f"Type a layer number (0-{SHORTCUTS_LAYER}) and press Enter; q to quit.")

        while True:
            line = await asyncio.to_thread(sys.stdin.readline)
            if not line:
                break
            try:
                layer = parse_layer_command(line)
            except EOFError:
                break
            if layer is None:
                click.echo("Not a layer number.", err=True)
                continue
            await host.emit(layer)
            click.echo(f"Sent layer {layer} to {host.client_count} overlay(s)")


@click.command(name="simulate-host")
@click.option(
    '--port', '-p',
    type=click.IntRange(0, 65535),
    default=0,
    help='Port to listen on (default: pick a free port)'
)
@click.option(
    '--address',
    type=str,
    default="127.0.0.1",
    help='Address to listen on (default: 127.0.0.1)'
)
def simulate_host(port: int, address: str):
    """Run a development host that sends layer changes typed on stdin."""
    try:
        asyncio.run(run_simulator(address, port))
    except KeyboardInterrupt:
        logger.info("Host simulator interrupted by user")
    except OSError as e:
        logger.exception("Host simulator failed")
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()
