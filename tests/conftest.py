"""Shared pytest fixtures for the changelog generator tests."""

import datetime

import pytest

from changelog_generator.models import CommitInfo, ReleaseInfo


@pytest.fixture(name="release_date")
def release_date_fixture():
    """A fixed release date so rendered headers are stable."""
    return datetime.date(2024, 3, 5)


@pytest.fixture(name="previous_release")
def previous_release_fixture():
    """The latest published release."""
    return ReleaseInfo(tag_name="v1.0.0")


@pytest.fixture(name="history")
def history_fixture():
    """Commit history newest first, with the previous release commit in the middle."""
    return [
        CommitInfo(sha="aaaaaaa111111111111111111111111111111111", message="feat(api): add new endpoint (#12)"),
        CommitInfo(sha="bbbbbbb222222222222222222222222222222222", message="fix: handle empty body (#11)"),
        CommitInfo(sha="ccccccc333333333333333333333333333333333", message="feat: support tags (#10)\n\nLonger description: here."),
        CommitInfo(sha="ddddddd444444444444444444444444444444444", message="chore(release): v1.0.0"),
        CommitInfo(sha="eeeeeee555555555555555555555555555555555", message="fix: old bug (#9)"),
    ]
