"""
Commit filtering, parsing and categorization module.

This module handles cutting the commit history at the previous release,
parsing commit messages written in Conventional Commits format and grouping
the parsed commits by type for rendering.
"""

import logging
import re
from typing import Dict, List, Sequence

from .errors import CommitParseError
from .models import ClassifiedCommit, CommitInfo

logger = logging.getLogger("changelog-generator.parser")

RELEASE_MARKER = "chore(release)"
FALLBACK_CATEGORY = "other"

PR_TOKEN_RE = re.compile(r"^\(#(?P<number>\d+)\)$")


def is_release_commit(message: str) -> bool:
    """Return True if the commit message marks the head of a previous release."""
    return message.startswith(RELEASE_MARKER)


def filter_since_release(commits: Sequence[CommitInfo]) -> List[CommitInfo]:
    """
    Keep the commits made since the previous release.

    Args:
        commits: Commits ordered newest first, as returned by GitHub

    Returns:
        The commits preceding the first release commit, or every commit
        when no release commit is present
    """
    result: List[CommitInfo] = []
    for commit in commits:
        if is_release_commit(commit.message):
            logger.debug("Stopping at release commit %s", commit.sha)
            break
        result.append(commit)
    return result


def capitalize(text: str) -> str:
    """Upper-case the first character only, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


class CommitParser:
    """
    Parse commit messages of the form `type(scope): summary (#123)`.

    Only the first line of the message is used; the body is discarded.
    Messages without a `:` separator are filed under the "other" category.
    """

    @staticmethod
    def parse_category(message: str) -> str:
        """
        Extract the commit type, dropping any `(scope)` suffix.

        Returns:
            The type as written in the message, or FALLBACK_CATEGORY
        """
        type_token, sep, _ = message.partition(":")
        category = type_token.partition("(")[0].strip()
        if not sep or not category:
            return FALLBACK_CATEGORY
        return category

    @staticmethod
    def classify(commit: CommitInfo) -> ClassifiedCommit:
        """
        Classify a single commit.

        Raises:
            CommitParseError: If the first line does not end with a `(#digits)`
                token preceded by at least one word
        """
        message = commit.message
        lines = message.splitlines()
        first = lines[0] if lines else ""

        category = CommitParser.parse_category(first)
        _, sep, rest = first.partition(":")
        text = rest if sep else first

        tokens = text.strip().split(" ")
        if len(tokens) < 2:
            raise CommitParseError("missing summary or pull request reference", message)

        m = PR_TOKEN_RE.match(tokens[-1])
        if not m:
            raise CommitParseError("missing trailing pull request reference", message)

        return ClassifiedCommit(
            category=category,
            summary=" ".join(tokens[:-1]),
            pr_number=m.group("number"),
            sha=commit.sha,
        )


class CommitCategorizer:
    """
    Categorize commits by type using the CommitParser.

    Categories keep the order in which they are first seen in the commit list.

    Args:
        strict: Propagate CommitParseError instead of skipping the commit
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def categorize(self, commits: Sequence[CommitInfo]) -> Dict[str, List[ClassifiedCommit]]:
        """
        Group commits by their type.

        Args:
            commits: Commits to categorize, newest first

        Returns:
            Dictionary mapping commit type -> classified commits of that type
        """
        groups: Dict[str, List[ClassifiedCommit]] = {}

        for commit in commits:
            try:
                classified = CommitParser.classify(commit)
            except CommitParseError as e:
                if self.strict:
                    raise
                logger.warning("Skipping commit %s: %s", commit.sha[:7], e)
                continue
            groups.setdefault(classified.category, []).append(classified)

        return groups
