"""
Exceptions raised by the changelog generator.

Every error derives from ChangelogError so the command-line driver can report
any of them as a fatal error with a single handler.
"""

from typing import Optional


class ChangelogError(RuntimeError):
    """Base class for all changelog generation failures."""


class FetchError(ChangelogError):
    """
    Raised when GitHub data cannot be retrieved.

    Args:
        message: Human readable description of the failure.
        status: HTTP status code, when the API answered with a non-success status.
    """

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class CommitParseError(ChangelogError):
    """Raised when a commit message does not follow `type(scope): summary (#123)`."""

    def __init__(self, reason: str, message: str) -> None:
        first_line = message.splitlines()[0] if message else ""
        super().__init__(f"{reason}: {first_line!r}")
        self.message = message


class SpliceError(ChangelogError):
    """Raised when the generated section cannot be written into the changelog file."""
