"""
Custom exception hierarchy for quick-lookup.

## Exception Hierarchy

```
QuickLookupError (base)
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
└── HostError
    ├── HostConnectionError
    └── HostPayloadError
```

All custom exceptions carry a `user_message`, a `technical_message` for the
log file and an optional `recovery_hint`.

Host errors are raised by the transports and absorbed by the layer bridge:
the overlay is cosmetic, so a lost host link leaves the last known layer on
screen instead of crashing.
"""

from .base import QuickLookupError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import ErrorContext, format_error_for_display, handle_errors, wrap_pydantic_error
from .host import HostConnectionError, HostError, HostPayloadError

__all__ = [
    # Base
    "QuickLookupError",
    # Config
    "ConfigurationError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    # Host
    "HostError",
    "HostConnectionError",
    "HostPayloadError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "handle_errors",
    "wrap_pydantic_error",
]
