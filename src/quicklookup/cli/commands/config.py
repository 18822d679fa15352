"""Config command implementations.

Commands:
    - config show     # Display the effective configuration
    - config path     # Print where the config file lives
    - config reset    # Write the defaults back to the config file
"""

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from quicklookup.exceptions import QuickLookupError, format_error_for_display, handle_errors, wrap_pydantic_error
from quicklookup.models import AppConfig, default_config_path

logger = logging.getLogger(__name__)


def load_app_config(ctx: click.Context) -> AppConfig:
    """
    Load the config file and apply command-line overrides.

    Raises:
        ConfigFileInvalidError: If the config file is not valid JSON
        ConfigValidationError: If a config value or override is out of range
    """
    obj = ctx.find_root().obj or {}
    app_config = AppConfig.load_or_default(obj.get("config_file"))
    overrides = obj.get("overrides") or {}
    if overrides:
        try:
            app_config = AppConfig.model_validate({**app_config.model_dump(), **overrides})
        except ValidationError as e:
            raise wrap_pydantic_error(e, "command-line options") from e
        logger.debug(f"Config overrides from command line: {overrides}")
    return app_config


def echo_error(message: str) -> None:
    click.echo(message, err=True)


@handle_errors(operation_name="reset config", user_notification=echo_error, re_raise=False, fallback_value=False)
def write_defaults(config_path: Path) -> bool:
    AppConfig().save(config_path)
    return True


@click.group(name="config")
def config():
    """Show or reset the quick-lookup configuration."""
    pass


@config.command(name="show")
@click.pass_context
def show(ctx):
    """Display the effective configuration (file plus command-line overrides)."""
    try:
        app_config = load_app_config(ctx)
    except QuickLookupError as e:
        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"Error: {user_message}", err=True)
        if recovery_hint:
            click.echo(recovery_hint, err=True)
        raise click.Abort()

    click.echo(app_config.model_dump_json(indent=2))
    mode = f"host at {app_config.host_address}:{app_config.host_port}" if app_config.host_available else "preview"
    click.echo(f"\nMode: {mode}")


@config.command(name="path")
@click.pass_context
def path(ctx):
    """Print the path of the config file."""
    obj = ctx.find_root().obj or {}
    click.echo(str(obj.get("config_file") or default_config_path()))


@config.command(name="reset")
@click.option('--yes', '-y', is_flag=True, help='Do not ask for confirmation')
@click.pass_context
def reset(ctx, yes: bool):
    """Reset the config file to defaults."""
    obj = ctx.find_root().obj or {}
    config_path = obj.get("config_file") or default_config_path()

    if not yes and not click.confirm(f"Reset {config_path} to defaults?"):
        click.echo("Cancelled.")
        return

    if not write_defaults(config_path):
        raise click.Abort()

    logger.info(f"Config reset to defaults at {config_path}")
    click.echo(f"Config reset to defaults: {config_path}")
