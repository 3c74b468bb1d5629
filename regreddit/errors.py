"""
Exception hierarchy for regreddit.
"""
from typing import Optional


class RegredditError(Exception):
    """Base exception for regreddit errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigError(RegredditError):
    """Raised when the configuration file is missing or malformed."""
    pass


class AuthError(RegredditError):
    """Raised when Reddit rejects the credentials or cannot be reached."""
    pass


class FetchError(RegredditError):
    """Raised when a listing page cannot be fetched."""
    pass


class DeleteError(RegredditError):
    """Raised when a single item cannot be deleted."""
    pass


class SubmitError(RegredditError):
    """Raised when a submission is refused."""
    pass


__all__ = [
    "RegredditError",
    "ConfigError",
    "AuthError",
    "FetchError",
    "DeleteError",
    "SubmitError",
]
