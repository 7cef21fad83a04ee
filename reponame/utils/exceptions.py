"""
Custom exception definitions.

This module defines the exception hierarchy for reponame-specific errors.
"""

from typing import Optional

from .string_utils import sanitize_control_chars


class ReponameError(Exception):
    """
    Base exception for all reponame errors.

    Carries a human-readable message and an optional dictionary of
    additional context that is appended to the string form.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize reponame error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class LabelSyntaxError(ReponameError):
    """
    Raised when a string is not a valid repository name.

    This is a build configuration error: callers surface it to the user
    as-is. The message embeds the sanitized input and the defect reason.
    """

    def __init__(self, raw: str, reason: str):
        """
        Initialize label syntax error.

        Args:
            raw: The rejected input, unsanitized
            reason: Human-readable defect reason
        """
        message = f"invalid repository name '{sanitize_control_chars(raw)}': {reason}"
        super().__init__(message)
        self.raw = raw
        self.reason = reason
