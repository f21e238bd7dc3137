"""
Changelog Generation Module

This module contains the ChangelogGenerator class responsible for rendering
the release header and the grouped, linked commit list that make up one
changelog section.
"""

import datetime
import logging
from typing import Dict, List, Optional, Sequence

from .models import DEFAULT_HOST, ClassifiedCommit, CommitInfo, ReleaseInfo
from .parser import CommitCategorizer, capitalize, filter_since_release

logger = logging.getLogger("changelog-generator.generator")


class ChangelogGenerator:
    """
    Compose a changelog section from classified commits.

    Args:
        org: Organization or user owning the repository
        repo: Repository name
        host: Host used for pull request, commit and compare links
    """

    def __init__(self, org: str, repo: str, host: str = DEFAULT_HOST) -> None:
        self.org = org
        self.repo = repo
        self.host = host

    @property
    def repo_url(self) -> str:
        return f"https://{self.host}/{self.org}/{self.repo}"

    def render_commit(self, commit: ClassifiedCommit) -> str:
        """Render one commit as a Markdown list item linking its pull request and sha."""
        pr_link = f"[#{commit.pr_number}]({self.repo_url}/pull/{commit.pr_number})"
        sha_link = f"[{commit.short_sha}]({self.repo_url}/commit/{commit.sha})"
        return f"- {commit.summary} ({pr_link}) ({sha_link})"

    def render_body(self, groups: Dict[str, List[ClassifiedCommit]]) -> str:
        """
        Render every category as a `## Category` section.

        Args:
            groups: Mapping of category -> commits, in the order sections should appear

        Returns:
            Sections separated by a blank line
        """
        sections: List[str] = []
        for category, commits in groups.items():
            lines = [f"## {capitalize(category)}"]
            lines.extend(self.render_commit(c) for c in commits)
            sections.append("\n".join(lines))
        return "\n\n".join(sections)

    def render_header(self, previous_tag: str, target_version: str,
                      today: Optional[datetime.date] = None) -> str:
        """
        Render the release header line.

        Args:
            previous_tag: Tag name of the latest published release, e.g. `v1.0.0`
            target_version: Version being released, e.g. `v1.1.0`
            today: Release date; defaults to the current local date

        Returns:
            `## [1.1.0](<compare link>)(YYYY-MM-DD)`
        """
        today = today or datetime.date.today()
        version = target_version[1:] if target_version.startswith("v") else target_version
        compare = f"{self.repo_url}/compare/{previous_tag}..{target_version}"
        return f"## [{version}]({compare})({today.isoformat()})"


def build_changelog_insertion(commits: Sequence[CommitInfo], release: ReleaseInfo,
                              org: str, repo: str, target_version: str,
                              host: str = DEFAULT_HOST, strict: bool = False,
                              today: Optional[datetime.date] = None) -> str:
    """
    Build the Markdown inserted into the changelog for a new release.

    Args:
        commits: Commits ordered newest first
        release: Latest published release, used as the compare base
        org: Organization or user owning the repository
        repo: Repository name
        target_version: Version being released
        host: Host used for generated links
        strict: Abort on the first malformed commit message instead of skipping it
        today: Release date; defaults to the current local date

    Returns:
        The release header, a blank line and the grouped commit sections;
        only the header when no commit qualifies
    """
    recent = filter_since_release(commits)
    groups = CommitCategorizer(strict=strict).categorize(recent)

    generator = ChangelogGenerator(org, repo, host=host)
    header = generator.render_header(release.tag_name, target_version, today=today)
    if not groups:
        logger.warning("No commits to list since %s", release.tag_name)
        return header
    body = generator.render_body(groups)
    return f"{header}\n\n{body}"
