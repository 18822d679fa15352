"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field

from quicklookup.model_manager.persistence import read_model_or_default, write_model

UPDATE_KEYBOARD_CHANNEL = "update-keyboard"


def default_config_dir() -> Path:
    return Path.home() / ".quick-lookup"


def default_config_path() -> Path:
    return default_config_dir() / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # Host link
    host_address: str = Field(
        default="127.0.0.1",
        description="Address the desktop host listens on",
    )
    host_port: int | None = Field(
        default=None,
        ge=1,
        le=65535,
        description=(
            "TCP port of the desktop host (None = no host, run in preview mode). "
            "The host normally passes this on the command line when it launches the overlay."
        ),
    )
    channel: str = Field(
        default=UPDATE_KEYBOARD_CHANNEL,
        min_length=1,
        description="Host event channel carrying layer changes",
    )

    # Startup
    start_layer: int = Field(
        default=0,
        ge=0,
        description="Layer shown before the host reports one",
    )

    @property
    def host_available(self) -> bool:
        """Check if a desktop host link is configured."""
        return self.host_port is not None

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.quick-lookup/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = default_config_path()
        return read_model_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = default_config_path()
        write_model(self, path)
