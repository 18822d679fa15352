"""Model support: JSON files for pydantic models and the shared observer list."""

from quicklookup.model_manager.observer import ObserverManager
from quicklookup.model_manager.persistence import backup_path, read_model, read_model_or_default, write_model

__all__ = [
    "ObserverManager",
    "backup_path",
    "read_model",
    "read_model_or_default",
    "write_model",
]
