"""Error types for the quicklog time parser.

Detection itself never raises for text input; these are raised by the
time utilities and surfaced to callers that pass malformed clock values.
"""


class QuicklogError(Exception):
    """Base exception for quicklog errors."""

    pass


class InvalidTimeError(QuicklogError, ValueError):
    """Raised when a clock value is not a valid HH:MM time."""

    def __init__(self, message: str, value: object = None) -> None:
        """Initialize time error.

        Args:
            message: Error message.
            value: The offending value, if available.
        """
        super().__init__(message)
        self.value = value


__all__ = [
    "InvalidTimeError",
    "QuicklogError",
]
