"""
GitHub data fetching module.

This module handles the GitHub API interactions for fetching commit history
and the latest published release using PyGithub.
"""

import logging
from typing import List, Optional

from github import Auth, Github, GithubException

from .errors import FetchError
from .models import DEFAULT_HOST, CommitInfo, ReleaseInfo

logger = logging.getLogger("changelog-generator.fetcher")

DEFAULT_BRANCH = "main"


class GitHubFetcher:
    """
    Fetch commits and releases from GitHub using PyGithub.

    Every failure is raised as FetchError; nothing is retried.

    Args:
        token: Personal access token (or None for unauthenticated, but rate-limited).
        host: github.com, or the host of a GitHub Enterprise server.
        timeout: Request timeout in seconds.
    """

    def __init__(self, token: Optional[str] = None, host: str = DEFAULT_HOST,
                 timeout: int = 15) -> None:
        kwargs = {"timeout": timeout, "retry": None}
        if host != DEFAULT_HOST:
            kwargs["base_url"] = f"https://{host}/api/v3"
        if token:
            kwargs["auth"] = Auth.Token(token)
        try:
            self._g = Github(**kwargs)
            logger.debug("GitHub client initialized (host=%s, authenticated=%s)", host, bool(token))
        except Exception as e:
            logger.error("Failed to initialize GitHub client: %s", e)
            raise FetchError(f"GitHub client initialization failed: {e}") from e

    def fetch_commits(self, owner: str, repo_name: str, sha: str = DEFAULT_BRANCH) -> List[CommitInfo]:
        """
        Fetch the first page of commit history for a branch or sha.

        Commits are returned in reverse chronological order (most recent first).

        Args:
            owner: Repository owner
            repo_name: Repository name
            sha: Branch name or commit sha to start listing from

        Returns:
            List of CommitInfo objects

        Raises:
            FetchError: On transport errors, non-success statuses or unexpected payloads
        """
        full_name = f"{owner}/{repo_name}"
        try:
            repo = self._g.get_repo(full_name, lazy=True)
            page = repo.get_commits(sha=sha).get_page(0)
            result = [self._to_commit_info(c) for c in page]
        except FetchError:
            raise
        except GithubException as e:
            raise self._status_error(f"Failed to fetch commits for {full_name}", e) from e
        except Exception as e:
            error_msg = f"Failed to fetch commits for {full_name}: {e}"
            logger.error(error_msg)
            raise FetchError(error_msg) from e

        logger.info("Fetched %d commits from %s@%s", len(result), full_name, sha)
        return result

    def fetch_latest_release(self, owner: str, repo_name: str) -> ReleaseInfo:
        """
        Fetch the latest published (non-draft, non-prerelease) release.

        Raises:
            FetchError: If the repository has no release or it cannot be fetched
        """
        full_name = f"{owner}/{repo_name}"
        try:
            repo = self._g.get_repo(full_name, lazy=True)
            release = repo.get_latest_release()
            tag_name = release.tag_name
        except GithubException as e:
            raise self._status_error(f"Failed to fetch latest release for {full_name}", e) from e
        except Exception as e:
            error_msg = f"Failed to fetch latest release for {full_name}: {e}"
            logger.error(error_msg)
            raise FetchError(error_msg) from e

        if not isinstance(tag_name, str) or not tag_name:
            raise FetchError(f"Unexpected release payload for {full_name}: tag_name={tag_name!r}")

        logger.info("Latest release of %s is %s", full_name, tag_name)
        return ReleaseInfo(tag_name=tag_name)

    @staticmethod
    def _to_commit_info(c) -> CommitInfo:
        try:
            sha = c.sha
            message = c.commit.message
        except (AttributeError, KeyError) as e:
            raise FetchError(f"Unexpected commit payload: {e}") from e
        if not isinstance(sha, str) or not isinstance(message, str):
            raise FetchError(f"Unexpected commit payload: sha={sha!r}, message={message!r}")
        return CommitInfo(sha=sha, message=message)

    @staticmethod
    def _status_error(prefix: str, e: GithubException) -> FetchError:
        error_msg = f"{prefix}: HTTP {e.status}"
        logger.error(error_msg)
        return FetchError(error_msg, status=e.status)
