"""Exceptions raised by the SoundTouch client."""

from __future__ import annotations


class SoundTouchError(Exception):
    """Base exception for all SoundTouch device and network errors."""


class SoundTouchRequestError(SoundTouchError):
    """Raised when a request could not be completed.

    Carries the endpoint and the underlying cause for diagnostics.
    """

    def __init__(
        self,
        message: str,
        endpoint: str | None = None,
        last_error: BaseException | None = None,
    ) -> None:
        """Initialize request error with context.

        Args:
            message: The error message
            endpoint: URL that failed
            last_error: The underlying exception that caused this error
        """
        self.endpoint = endpoint
        self.last_error = last_error
        super().__init__(message)

    def __str__(self) -> str:
        if self.endpoint:
            return f"{super().__str__()} (endpoint={self.endpoint})"
        return super().__str__()


class SoundTouchConnectionError(SoundTouchRequestError):
    """The speaker is unreachable (refused, unresolvable, or other transport failure)."""


class SoundTouchTimeoutError(SoundTouchRequestError):
    """No response arrived before the configured timeout elapsed."""


class SoundTouchApiError(SoundTouchError):
    """The speaker answered with a structured error payload."""

    def __init__(self, error_name: str, error_code: int, message: str | None = None) -> None:
        self.error_name = error_name
        self.error_code = error_code
        self.error_message = message
        super().__init__(message or f"API error: {error_name} (code {error_code})")


class SoundTouchInvalidDataError(SoundTouchError):
    """The speaker responded with a body that is not well-formed XML."""


class SoundTouchValidationError(ValueError):
    """An argument is outside the range the speaker accepts.

    Raised before any request is built, so no network I/O has happened.
    """
