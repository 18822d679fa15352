"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from quicklookup import __version__

from .commands import config, layers, simulate_host, watch
from .commands.config import load_app_config

logger = logging.getLogger(__name__)


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Where log records go for a given set of flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "quick-lookup-debug.log"
    return Path.home() / ".quick-lookup" / "logs" / "quick-lookup.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    The overlay owns the terminal, so records go to a rotating file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level used together with a custom log file

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="quick-lookup")
@click.option(
    '--host-port',
    type=click.IntRange(1, 65535),
    envvar='QUICK_LOOKUP_HOST_PORT',
    default=None,
    help='Port of the desktop host; without it the overlay runs in preview mode'
)
@click.option(
    '--host-address',
    type=str,
    envvar='QUICK_LOOKUP_HOST_ADDRESS',
    default=None,
    help='Address of the desktop host (default: 127.0.0.1)'
)
@click.option(
    '--start-layer',
    type=click.IntRange(min=0),
    envvar='QUICK_LOOKUP_START_LAYER',
    default=None,
    help='Layer to show until the host reports one'
)
@click.option(
    '--config-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.quick-lookup/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./quick-lookup-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    host_port: Optional[int],
    host_address: Optional[str],
    start_layer: Optional[int],
    config_file: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Quick Lookup - on-screen layer overlay for a controller-driven virtual keyboard.

    The desktop host launches the overlay with its port and current layer.
    Without a host port the overlay starts in preview mode, where the number
    keys and [ ] switch layers.

    \b
    Examples:
      # Preview the layers without a host
      quick-lookup

      # Connect to a host on port 7878, starting on layer 2
      quick-lookup --host-port 7878 --start-layer 2

      # Run a development host in another terminal
      quick-lookup simulate-host --port 7878

      # Print layer changes without the overlay
      quick-lookup --host-port 7878 watch

      # Print the label tables
      quick-lookup layers
    """
    ctx.ensure_object(dict)
    ctx.obj["overrides"] = {
        key: value
        for key, value in (
            ("host_port", host_port),
            ("host_address", host_address),
            ("start_layer", start_layer),
        )
        if value is not None
    }
    ctx.obj["config_file"] = config_file

    log_path = setup_logging(verbose, debug, log_file, log_level)
    ctx.obj["log_path"] = log_path

    if ctx.invoked_subcommand is not None:
        return

    # Lazy import keeps Textual out of the utility commands
    from quicklookup.host import SocketHostTransport
    from quicklookup.tui import QuickLookupApp

    logger.info("Starting quick-lookup overlay")

    try:
        app_config = load_app_config(ctx)

        transport = None
        if app_config.host_available:
            transport = SocketHostTransport(app_config.host_address, app_config.host_port)

        QuickLookupApp(app_config, transport=transport).run()

    except KeyboardInterrupt:
        logger.info("Overlay interrupted by user")
        click.echo("\nShutting down...", err=True)
    except click.Abort:
        raise
    except Exception as e:
        report_error(e, log_path)
        sys.exit(1)


def report_error(error: Exception, log_path: Optional[Path]) -> None:
    """Show a clean error message without traceback."""
    from quicklookup.exceptions import format_error_for_display

    logger.exception("Error running quick-lookup")

    user_message, recovery_hint = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {user_message}", err=True)
    click.echo("=" * 70, err=True)

    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    if log_path:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)


cli.add_command(config)
cli.add_command(layers)
cli.add_command(simulate_host)
cli.add_command(watch)

if __name__ == "__main__":
    cli()
