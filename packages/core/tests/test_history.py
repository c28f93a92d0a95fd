"""Tests for empty-file attribution via the last commit."""

from gitfame_core.aggregate import Aggregator
from gitfame_core.history import parse_history_entry, resolve_empty_file
from gitfame_core.models import AttributionEvent

_ENTRY = "commit def456\nauthor Bob\ncommitter Carol\n"


class TestParseHistoryEntry:
    def test_author_identity(self):
        event = parse_history_entry(_ENTRY, "README")
        assert event == AttributionEvent(author="Bob", commit="def456", file="README", lines=0)

    def test_committer_identity(self):
        event = parse_history_entry(_ENTRY, "README", use_committer=True)
        assert event.author == "Carol"

    def test_empty_text_returns_none(self):
        assert parse_history_entry("", "README") is None

    def test_missing_commit_line_returns_none(self):
        assert parse_history_entry("author Bob\n", "README") is None

    def test_identity_matches_blame_token(self):
        # The same "author <value>" rule as blame: the full value is the identity.
        event = parse_history_entry("commit abc\nauthor Jane Doe <jane@x.com>\n", "a")
        assert event.author == "Jane Doe <jane@x.com>"

    def test_aggregates_to_zero_lines_one_commit_one_file(self):
        aggregator = Aggregator()
        aggregator.add(parse_history_entry(_ENTRY, "README"))

        record = aggregator.records()["Bob"]
        assert (record.lines, record.commit_count, record.file_count) == (0, 1, 1)


class TestResolveEmptyFile:
    def test_returns_single_event(self, mocker):
        mock_log = mocker.patch("gitfame_core.git.last_commit", return_value=_ENTRY)

        events = resolve_empty_file("/repo", "HEAD", "README")

        mock_log.assert_called_once_with("/repo", "HEAD", "README")
        assert events == [AttributionEvent(author="Bob", commit="def456", file="README", lines=0)]

    def test_lookup_failure_contributes_nothing(self, mocker):
        mocker.patch("gitfame_core.git.last_commit", return_value=None)
        assert resolve_empty_file("/repo", "HEAD", "README") == []

    def test_empty_history_contributes_nothing(self, mocker):
        mocker.patch("gitfame_core.git.last_commit", return_value="")
        assert resolve_empty_file("/repo", "HEAD", "README") == []

    def test_use_committer_passed_through(self, mocker):
        mocker.patch("gitfame_core.git.last_commit", return_value=_ENTRY)
        events = resolve_empty_file("/repo", "HEAD", "README", use_committer=True)
        assert events[0].author == "Carol"
