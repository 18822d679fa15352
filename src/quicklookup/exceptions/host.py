"""Host-related exceptions.

This module defines exceptions for the desktop host link:
- HostError: Base class for host errors
- HostConnectionError: The host could not be reached
- HostPayloadError: The host sent a message that could not be understood
"""

from .base import QuickLookupError


class HostError(QuickLookupError):
    """Communication with the desktop host failed."""

    def __init__(self, user_message: str, channel: str | None = None, **kwargs):
        """
        Initialize host error.

        Args:
            user_message: User-friendly error message
            channel: The event channel involved (if applicable)
        """
        super().__init__(user_message, **kwargs)
        self.channel = channel


class HostConnectionError(HostError):
    """The desktop host is not reachable."""

    def __init__(self, address: str, port: int, original_error: str | None = None):
        """
        Initialize host connection error.

        Args:
            address: Host address that was tried
            port: Host port that was tried
            original_error: The underlying socket error message
        """
        user_msg = f"Could not connect to the desktop host at {address}:{port}"
        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            recovery_hint=(
                "Make sure the desktop host is running and listening on that port. "
                "Run 'quick-lookup simulate-host' to start a development host."
            ),
        )
        self.address = address
        self.port = port


class HostPayloadError(HostError):
    """A host message was malformed or missing expected fields."""

    def __init__(self, channel: str, payload: object, error_msg: str):
        """
        Initialize host payload error.

        Args:
            channel: Channel the message arrived on
            payload: The offending payload
            error_msg: Why the payload was rejected
        """
        super().__init__(
            user_message=f"Ignored a malformed '{channel}' message from the host",
            technical_message=f"Bad payload on {channel}: {payload!r} ({error_msg})",
            channel=channel,
        )
        self.payload = payload
