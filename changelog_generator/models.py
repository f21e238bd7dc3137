"""
Data models for the changelog generator.

This module contains the shared data structures used across all modules.
"""

from dataclasses import dataclass

DEFAULT_HOST = "github.com"
SHORT_SHA_LENGTH = 7


@dataclass(frozen=True)
class CommitInfo:
    """Represents a single commit as returned by the GitHub commits API."""
    sha: str
    message: str


@dataclass(frozen=True)
class ReleaseInfo:
    """The latest published release of a repository."""
    tag_name: str


@dataclass(frozen=True)
class ClassifiedCommit:
    """A commit split into its Conventional Commit category, summary and PR number."""
    category: str
    summary: str
    pr_number: str
    sha: str

    @property
    def short_sha(self) -> str:
        return self.sha[:SHORT_SHA_LENGTH]
