"""
Helpers that turn exceptions into log lines and user-facing messages.

| Pattern | Code |
|---------|------|
| Log, tell the user, return a fallback | `@handle_errors(operation_name="reset config", user_notification=echo_error, re_raise=False)` |
| Log and absorb inside a block | `with ErrorContext("register listener", re_raise=False): ...` |
| Pydantic error to config error | `raise wrap_pydantic_error(e, str(path)) from e` |
| Message and hint for the CLI | `message, hint = format_error_for_display(e)` |
"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Optional, TypeVar

from pydantic import ValidationError

from .base import QuickLookupError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def handle_errors(
    *,
    operation_name: str,
    user_notification: Optional[Callable[[str], None]] = None,
    fallback_value: Optional[T] = None,
    re_raise: bool = True,
    log_level: int = logging.ERROR
) -> Callable:
    """
    Decorator that logs a failure of ``operation_name`` and reports it.

    Our own errors are logged by their technical message and shown with
    their hint. Anything else is logged with a traceback. With
    ``re_raise=False`` the decorated function returns ``fallback_value``.
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                if isinstance(e, QuickLookupError):
                    logger.log(log_level, f"Failed to {operation_name}: {e.technical_message}")
                    message = e.with_hint()
                else:
                    logger.log(log_level, f"Unexpected error during {operation_name}: {e}", exc_info=True)
                    message = f"Error: {e}"

                if user_notification:
                    user_notification(message)
                if re_raise:
                    raise
                return fallback_value

        return wrapper
    return decorator


class ErrorContext:
    """
    Context manager that logs an exception raised inside it.

    The exception is kept on ``error``. It propagates unless
    ``re_raise=False``; cancellation and other non-``Exception`` errors always
    propagate.
    """

    def __init__(self, operation: str, logger_instance: Optional[logging.Logger] = None, re_raise: bool = True):
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[Exception] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None or not issubclass(exc_type, Exception):
            return False

        self.error = exc_val
        if isinstance(exc_val, QuickLookupError):
            self.logger.warning(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)
        return not self.re_raise


def wrap_pydantic_error(error: ValidationError, source: str) -> ConfigurationError:
    """
    Convert a pydantic ValidationError into a config error naming ``source``.

    Only the first problem is described; the count of the others is appended.
    """
    problems = error.errors()
    first = problems[0]

    if first["type"] == "json_invalid":
        return ConfigFileInvalidError(source, first.get("ctx", {}).get("error", first["msg"]))

    field = ".".join(str(part) for part in first["loc"]) or "config"
    message = first["msg"]
    if len(problems) > 1:
        message += f" (and {len(problems) - 1} more)"
    return ConfigValidationError(field, first.get("input"), message, source)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return ``(message, recovery_hint)`` for showing ``error`` on the terminal."""
    if isinstance(error, QuickLookupError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None
