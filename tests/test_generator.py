"""Tests for changelog rendering."""

import datetime

import pytest

from changelog_generator.errors import CommitParseError
from changelog_generator.generator import ChangelogGenerator, build_changelog_insertion
from changelog_generator.models import ClassifiedCommit, CommitInfo, ReleaseInfo

SHA = "abcdef1234567890abcdef1234567890abcdef12"


@pytest.fixture(name="generator")
def generator_fixture():
    """A generator for acme/widget on github.com"""
    return ChangelogGenerator("acme", "widget")


def test_render_commit(generator: ChangelogGenerator):
    """Test the shape of a single commit line"""
    line = generator.render_commit(ClassifiedCommit("fix", "handle null case", "42", SHA))

    assert line == (
        "- handle null case "
        "([#42](https://github.com/acme/widget/pull/42)) "
        f"([abcdef1](https://github.com/acme/widget/commit/{SHA}))"
    )


def test_render_body_groups_sections(generator: ChangelogGenerator):
    """Test that sections are headed, grouped and separated by a blank line"""
    groups = {
        "feat": [ClassifiedCommit("feat", "one", "1", SHA), ClassifiedCommit("feat", "two", "2", SHA)],
        "fix": [ClassifiedCommit("fix", "three", "3", SHA)],
    }

    body = generator.render_body(groups)
    sections = body.split("\n\n")

    assert len(sections) == 2
    assert sections[0].splitlines()[0] == "## Feat"
    assert len(sections[0].splitlines()) == 3
    assert sections[1].startswith("## Fix\n- three ")


def test_render_body_is_idempotent(generator: ChangelogGenerator):
    """Test that rendering twice gives identical output"""
    groups = {"docs": [ClassifiedCommit("docs", "explain", "5", SHA)]}

    assert generator.render_body(groups) == generator.render_body(groups)


def test_render_body_empty(generator: ChangelogGenerator):
    """Test that no commits render an empty body"""
    assert generator.render_body({}) == ""


def test_render_header(generator: ChangelogGenerator):
    """Test the release header line"""
    header = generator.render_header("v1.0.0", "v1.1.0", today=datetime.date(2024, 3, 5))

    assert header == "## [1.1.0](https://github.com/acme/widget/compare/v1.0.0..v1.1.0)(2024-03-05)"


def test_render_header_defaults_to_today(generator: ChangelogGenerator):
    """Test that the header uses the current local date"""
    header = generator.render_header("v1.0.0", "v1.1.0")

    assert header.endswith(f"({datetime.date.today().isoformat()})")


def test_custom_host():
    """Test that links use the configured host"""
    generator = ChangelogGenerator("acme", "widget", host="git.example.com")

    assert generator.repo_url == "https://git.example.com/acme/widget"


def test_build_changelog_insertion_end_to_end(release_date):
    """Test the whole pipeline on a release boundary"""
    commits = [
        CommitInfo(sha=SHA, message="fix(core): handle null case (#42)"),
        CommitInfo(sha="123456a" + "0" * 33, message="chore(release): v1.0.0"),
    ]

    result = build_changelog_insertion(
        commits, ReleaseInfo("v1.0.0"), "acme", "widget", "v1.1.0", today=release_date
    )

    assert result == (
        "## [1.1.0](https://github.com/acme/widget/compare/v1.0.0..v1.1.0)(2024-03-05)\n"
        "\n"
        "## Fix\n"
        "- handle null case ([#42](https://github.com/acme/widget/pull/42)) "
        f"([abcdef1](https://github.com/acme/widget/commit/{SHA}))"
    )


def test_build_changelog_insertion_section_order(history, previous_release, release_date):
    """Test that sections follow first-seen order and stop at the release commit"""
    result = build_changelog_insertion(
        history, previous_release, "acme", "widget", "v1.1.0", today=release_date
    )

    assert result.index("## Feat") < result.index("## Fix")
    assert "(#9)" not in result
    assert "/pull/9)" not in result
    assert result.count("- ") == 3


def test_build_changelog_insertion_strict(previous_release, release_date):
    """Test that strict mode propagates malformed commits"""
    commits = [CommitInfo(sha=SHA, message="fix: no reference")]

    with pytest.raises(CommitParseError):
        build_changelog_insertion(
            commits, previous_release, "acme", "widget", "v1.1.0", strict=True, today=release_date
        )


def test_build_changelog_insertion_without_new_commits(previous_release, release_date, caplog):
    """Test that only the header is produced when nothing was merged since the release"""
    commits = [CommitInfo(sha=SHA, message="chore(release): v1.0.0")]

    with caplog.at_level("WARNING"):
        result = build_changelog_insertion(
            commits, previous_release, "acme", "widget", "v1.1.0", today=release_date
        )

    assert result == "## [1.1.0](https://github.com/acme/widget/compare/v1.0.0..v1.1.0)(2024-03-05)"
    assert "No commits to list since v1.0.0" in caplog.text
