"""Errors raised while loading the overlay configuration."""

from typing import Any

from .base import QuickLookupError

# Extra guidance for the settings people most often get wrong
FIELD_HINTS = {
    "host_port": "Use the port the desktop host listens on, or remove it to run in preview mode",
    "start_layer": "Run 'quick-lookup layers' to see the known layer numbers",
}


class ConfigurationError(QuickLookupError):
    """The configuration could not be loaded."""


class ConfigFileInvalidError(ConfigurationError):
    """The config file is empty, unreadable or not JSON."""

    def __init__(self, file_path: str, parse_error: str):
        super().__init__(
            user_message=f"Config file {file_path} is not valid JSON",
            technical_message=f"{file_path}: {parse_error}",
            recovery_hint="Fix the file by hand, or run 'quick-lookup config reset' to write the defaults",
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A setting has the wrong type or is out of range."""

    def __init__(self, field: str, value: Any, error_msg: str, source: str | None = None):
        """
        Args:
            field: Dotted name of the rejected setting
            value: The rejected value
            error_msg: Why it was rejected
            source: Where the value came from (a file path or "command-line options")
        """
        hint = f"Check '{field}' in {source}" if source else f"Check the '{field}' setting"
        if field in FIELD_HINTS:
            hint += f"\n{FIELD_HINTS[field]}"

        super().__init__(
            user_message=f"Invalid value for '{field}': {error_msg}",
            technical_message=f"{field}={value!r} rejected: {error_msg}",
            recovery_hint=hint,
        )
        self.field = field
        self.value = value
        self.source = source
