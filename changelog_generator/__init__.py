"""
Changelog Generator - builds changelog sections from GitHub commit history.
"""

from .models import ClassifiedCommit, CommitInfo, ReleaseInfo
from .errors import ChangelogError, CommitParseError, FetchError, SpliceError
from .fetcher import GitHubFetcher
from .generator import ChangelogGenerator, build_changelog_insertion
from .parser import CommitCategorizer, CommitParser, capitalize, filter_since_release
from .writer import splice_changelog
from .main import main

__all__ = [
    'ClassifiedCommit',
    'CommitInfo',
    'ReleaseInfo',
    'ChangelogError',
    'CommitParseError',
    'FetchError',
    'SpliceError',
    'GitHubFetcher',
    'ChangelogGenerator',
    'build_changelog_insertion',
    'CommitCategorizer',
    'CommitParser',
    'capitalize',
    'filter_since_release',
    'splice_changelog',
    'main'
]
