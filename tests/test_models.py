"""Tests for the Commit and Config models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from snapvcs.models import Commit, Config
from snapvcs.models.commit import escape_field, unescape_field, utc_now


def make_commit(**overrides) -> Commit:
    fields = {
        "id": "c0ffee",
        "message": "first",
        "author": "alice",
        "timestamp": datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return Commit(**fields)


def test_to_line_uses_tab_separated_fields():
    """The log line holds id, author, epoch millis and message in order."""
    commit = make_commit()
    assert commit.to_line() == "c0ffee\talice\t1714566600000\tfirst"


def test_message_with_separators_survives_parsing():
    """Spaces, tabs and newlines in author or message do not break the record."""
    commit = make_commit(
        author="Alice Smith",
        message="fix:\tthe thing\nsecond line with \\ backslash",
    )
    line = commit.to_line()

    assert "\n" not in line
    parsed = Commit.from_line(line)
    assert parsed.author == "Alice Smith"
    assert parsed.message == commit.message
    assert parsed.timestamp == commit.timestamp


def test_empty_author_is_allowed():
    commit = make_commit(author="")
    parsed = Commit.from_line(commit.to_line())
    assert parsed.author == ""


def test_from_line_rejects_short_lines():
    with pytest.raises(ValueError, match="expected 4 fields"):
        Commit.from_line("only\ttwo")


def test_from_line_rejects_non_integer_timestamp():
    with pytest.raises(ValueError):
        Commit.from_line("id\tauthor\tyesterday\tmessage")


def test_empty_message_is_invalid():
    with pytest.raises(ValidationError):
        make_commit(message="")


def test_commit_is_immutable():
    commit = make_commit()
    with pytest.raises(ValidationError):
        commit.message = "changed"


def test_render_matches_history_block():
    commit = make_commit()
    assert commit.render() == "commit c0ffee\nAuthor: alice\nfirst\n"


def test_unknown_escape_is_kept():
    assert unescape_field("a\\qb") == "a\\qb"
    assert unescape_field(escape_field("tab\there")) == "tab\there"


def test_utc_now_has_millisecond_precision():
    now = utc_now()
    assert now.tzinfo is not None
    assert now.microsecond % 1000 == 0


def test_config_defaults_to_no_username():
    config = Config()
    assert config.username is None
    assert config.author == ""
    assert config.to_text() == ""


def test_config_text_format():
    config = Config(username="alice")
    assert config.author == "alice"
    assert config.to_text() == "username=alice\n"
