"""Tests for the commit detail pane."""

from datetime import datetime

from darkpig.graph.types import Commit
from darkpig.ui.commit_detail import PLACEHOLDER, CommitDetailPane, format_commit_details


def sample_commit(message="Fix lane trimming\n\nLonger description.\n", parents=("a" * 40,)):
    return Commit(
        id="b" * 40,
        parent_ids=parents,
        author="Jane Doe <jane@example.com>",
        message=message,
        timestamp=1700000000,
    )


class TestFormatCommitDetails:
    def test_sections(self):
        details = format_commit_details(sample_commit())

        assert list(details) == ["Author", "Date", "Message", "Parents", "Commit Hash"]
        assert details["Author"] == "Jane Doe <jane@example.com>"
        assert details["Commit Hash"] == "b" * 40
        assert details["Parents"] == "a" * 40

    def test_date_format(self):
        details = format_commit_details(sample_commit())
        expected = datetime.fromtimestamp(1700000000).strftime("%Y-%m-%d %H:%M:%S")
        assert details["Date"] == expected

    def test_short_message_kept_whole(self):
        details = format_commit_details(sample_commit())
        assert details["Message"] == "Fix lane trimming\n\nLonger description."

    def test_long_message_truncated(self):
        message = "\n".join(f"line {i}" for i in range(1, 8))
        details = format_commit_details(sample_commit(message=message))
        assert details["Message"] == "line 1\nline 2\nline 3\nline 4\nline 5\n..."

    def test_exactly_five_lines_not_marked(self):
        message = "\n".join(f"line {i}" for i in range(1, 6))
        details = format_commit_details(sample_commit(message=message))
        assert not details["Message"].endswith("...")

    def test_root_commit_parents(self):
        details = format_commit_details(sample_commit(parents=()))
        assert details["Parents"] == "None"

    def test_merge_parents_one_per_line(self):
        details = format_commit_details(sample_commit(parents=("a" * 40, "c" * 40)))
        assert details["Parents"].splitlines() == ["a" * 40, "c" * 40]


class TestCommitDetailPane:
    def test_placeholder_until_selection(self, qtbot):
        pane = CommitDetailPane()
        qtbot.addWidget(pane)

        assert pane.commit is None
        assert not pane._placeholder.isHidden()
        assert pane._placeholder.text() == PLACEHOLDER

    def test_shows_commit(self, qtbot):
        pane = CommitDetailPane()
        qtbot.addWidget(pane)

        pane.set_commit(sample_commit())

        assert pane._placeholder.isHidden()
        assert pane.value_text("Author") == "Jane Doe <jane@example.com>"
        assert pane.value_text("Commit Hash") == "b" * 40

    def test_clearing_restores_placeholder(self, qtbot):
        pane = CommitDetailPane()
        qtbot.addWidget(pane)

        pane.set_commit(sample_commit())
        pane.set_commit(None)

        assert not pane._placeholder.isHidden()
        assert pane._values["Author"].isHidden()
