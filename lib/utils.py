# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Small helpers shared by the store, the codec and the API layer.
# =============================================================================

from datetime import datetime, timezone


# =============================================================================
# Time Utilities
# =============================================================================

def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """
    Coerce a datetime to UTC.

    Naive datetimes are taken to already be in UTC; aware ones are converted.

    Example:
        ensure_utc(datetime(2024, 1, 1))  # 2024-01-01 00:00:00+00:00
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for errors raised outside the HTTP layer.

    Carries enough context for the API to log the failure and describe it
    to the client in one line.

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Optional hint on how to fix the input

    Example:
        class PostDecodeError(ApplicationError):
            def __init__(self, message: str, **kwargs):
                super().__init__(message, code="POST_DECODE_ERROR", **kwargs)
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result
