"""Selected-commit pane: author, date, message, parents and hash."""

from datetime import datetime

from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from darkpig.constants import DETAIL_MESSAGE_LINES
from darkpig.graph.types import Commit

PLACEHOLDER = "Click on a commit to view its details"


def format_commit_details(commit: Commit) -> dict[str, str]:
    """
    Text for each section of the detail pane.

    The message is cut to its first few lines, with "..." appended when
    there is more.
    """
    timestamp = datetime.fromtimestamp(commit.timestamp).strftime("%Y-%m-%d %H:%M:%S")

    lines = commit.message.splitlines()
    message = "\n".join(lines[:DETAIL_MESSAGE_LINES])
    if len(lines) > DETAIL_MESSAGE_LINES:
        message += "\n..."

    parents = "\n".join(commit.parent_ids) if commit.parent_ids else "None"

    return {
        "Author": commit.author,
        "Date": timestamp,
        "Message": message,
        "Parents": parents,
        "Commit Hash": commit.id,
    }


class CommitDetailPane(QWidget):
    """Shows the details of the selected commit"""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.commit: Commit | None = None

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(16, 16, 16, 16)
        self._layout.setSpacing(12)

        self._heading = QLabel("Selected Commit")
        self._heading.setStyleSheet("font-size: 18px; font-weight: bold; color: #000000;")
        self._layout.addWidget(self._heading)

        # One (caption, value) label pair per section
        self._values: dict[str, QLabel] = {}
        for section in ("Author", "Date", "Message", "Parents", "Commit Hash"):
            caption = QLabel(section)
            caption.setStyleSheet("font-size: 11px; font-weight: 600; color: #333333;")
            value = QLabel()
            value.setWordWrap(True)
            if section in ("Parents", "Commit Hash"):
                value.setStyleSheet("color: #000000; font-family: monospace;")
            else:
                value.setStyleSheet("color: #000000;")
            self._layout.addWidget(caption)
            self._layout.addWidget(value)
            self._values[section] = value

        self._placeholder = QLabel(PLACEHOLDER)
        self._placeholder.setStyleSheet("color: #666666;")
        self._layout.addWidget(self._placeholder)
        self._layout.addStretch(1)

        self.set_commit(None)

    def set_commit(self, commit: Commit | None) -> None:
        """Show commit, or the placeholder when None"""
        self.commit = commit
        has_commit = commit is not None

        self._placeholder.setVisible(not has_commit)
        self._heading.setVisible(has_commit)
        for index in range(self._layout.count()):
            widget = self._layout.itemAt(index).widget()
            if widget is not None and widget not in (self._placeholder, self._heading):
                widget.setVisible(has_commit)

        if commit is None:
            return
        for section, text in format_commit_details(commit).items():
            self._values[section].setText(text)

    def value_text(self, section: str) -> str:
        return self._values[section].text()
