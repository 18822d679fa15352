"""Root of the quick-lookup error hierarchy."""


class QuickLookupError(Exception):
    """
    An error the overlay can explain to the person running it.

    ``user_message`` is what the CLI prints, ``technical_message`` goes to the
    log file, and ``recovery_hint`` says what to try next when there is
    something useful to say.
    """

    def __init__(
        self,
        user_message: str,
        technical_message: str | None = None,
        recovery_hint: str | None = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def with_hint(self) -> str:
        """The user message followed by the recovery hint on its own line."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n{self.recovery_hint}"
