"""Reading and writing pydantic models as JSON files.

Writes go through a temporary file in the target directory and replace the
old file in one step. The previous contents are kept as ``<name>.bak``.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from quicklookup.exceptions import ConfigFileInvalidError, wrap_pydantic_error

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def backup_path(path: Path) -> Path:
    return path.with_name(path.name + ".bak")


def read_model(path: Path, model_type: type[M]) -> M:
    """
    Parse the JSON file at ``path`` into ``model_type``.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigFileInvalidError: If the file is empty, unreadable or not JSON
        ConfigValidationError: If the model rejects a value
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except OSError as e:
        raise ConfigFileInvalidError(str(path), f"unreadable: {e}") from e

    if not text.strip():
        raise ConfigFileInvalidError(str(path), "file is empty")

    try:
        model = model_type.model_validate_json(text)
    except ValidationError as e:
        logger.error(f"Rejected {path}: {e}")
        raise wrap_pydantic_error(e, str(path)) from e

    logger.debug(f"Loaded {model_type.__name__} from {path}")
    return model


def read_model_or_default(path: Path, model_type: type[M]) -> M:
    """Like ``read_model``, but a missing file gives ``model_type()``. A broken file still raises."""
    try:
        return read_model(path, model_type)
    except FileNotFoundError:
        logger.info(f"No file at {path}, using default {model_type.__name__}")
        return model_type()


def write_model(model: BaseModel, path: Path, backup: bool = True) -> None:
    """Write ``model`` to ``path``, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if backup and path.exists():
        shutil.copy2(path, backup_path(path))

    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(model.model_dump_json(indent=2))
        os.replace(temp_name, path)
    finally:
        Path(temp_name).unlink(missing_ok=True)

    logger.debug(f"Saved {type(model).__name__} to {path}")
