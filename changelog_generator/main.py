#!/usr/bin/env python3
"""
Main driver script for the changelog generator.

This script provides the command-line interface: it fetches the commit
history and latest release from GitHub, renders the changelog section for the
new version and splices it into the changelog file.

Usage (example):
    python -m changelog_generator.main --org acme --repo widget --version v1.1.0 --file CHANGELOG.md
"""

import argparse
import logging
import os
import re
import sys
from typing import List, Optional

from .errors import ChangelogError
from .fetcher import DEFAULT_BRANCH, GitHubFetcher
from .generator import build_changelog_insertion
from .models import DEFAULT_HOST
from .writer import DEFAULT_HEADING, splice_changelog

logger = logging.getLogger("changelog-generator")

VERSION_RE = re.compile(r"^v\d+\.\d+\.\d+$")


def _version(value: str) -> str:
    if not VERSION_RE.match(value):
        raise argparse.ArgumentTypeError(f"expected v<major>.<minor>.<patch>, got {value!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a changelog section from GitHub commit history.")
    parser.add_argument("--org", "-o", required=True, help="Org name for the given repository")
    parser.add_argument("--repo", "-r", required=True, help="Name of the repository")
    parser.add_argument("--file", "-f", default="CHANGELOG.md", help="Changelog file to update")
    parser.add_argument("--version", "-v", required=True, type=_version, help="Version being released, e.g. v1.2.3")
    parser.add_argument("--sha", "-s", default=DEFAULT_BRANCH, help="Branch or sha to list commits from")
    parser.add_argument("--token", "-t", default=os.environ.get("GITHUB_TOKEN"),
                        help="GitHub token (defaults to $GITHUB_TOKEN)")
    parser.add_argument("--host", default=DEFAULT_HOST, help="GitHub host, for GitHub Enterprise servers")
    parser.add_argument("--heading", default=DEFAULT_HEADING, help="Heading the new section is inserted after")
    parser.add_argument("--strict", action="store_true", help="Fail on malformed commit messages instead of skipping them")
    parser.add_argument("--dry-run", action="store_true", help="Print the section instead of writing the file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point for the changelog generator.

    Exits with status 1 on any unrecoverable error.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        logger.info("Generating %s changelog for %s/%s", args.version, args.org, args.repo)
        fetcher = GitHubFetcher(token=args.token, host=args.host)

        commits = fetcher.fetch_commits(args.org, args.repo, sha=args.sha)
        release = fetcher.fetch_latest_release(args.org, args.repo)

        insertion = build_changelog_insertion(
            commits, release, args.org, args.repo, args.version,
            host=args.host, strict=args.strict,
        )

        if args.dry_run:
            print(insertion)
            return

        splice_changelog(args.file, insertion, heading=args.heading)
        logger.info("Changelog %s updated for %s", args.file, args.version)

    except KeyboardInterrupt:
        logger.info("Changelog generation interrupted by user")
        sys.exit(1)
    except ChangelogError as e:
        logger.error("Changelog generation failed: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
