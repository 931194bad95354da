"""Diff pane - read-only view of a diff with a close button."""

from PySide6.QtCore import Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)


class DiffPane(QWidget):
    """Shows diff text for the selected commit"""

    closed = Signal()

    def __init__(self, title: str = "", diff_content: str = "", parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # Header
        header = QWidget()
        header.setStyleSheet("background: #252525; border-bottom: 1px solid #333333;")
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(12, 8, 12, 8)

        self._title = QLabel(title)
        self._title.setStyleSheet("color: #ffffff; font-weight: bold; font-size: 14px;")
        header_layout.addWidget(self._title, 1)

        close_btn = QPushButton("✕")
        close_btn.setFixedSize(24, 24)
        close_btn.setStyleSheet("""
            QPushButton {
                background: transparent;
                color: #888888;
                border: none;
                border-radius: 4px;
                font-size: 14px;
            }
            QPushButton:hover { background: #444444; }
        """)
        close_btn.clicked.connect(self._on_close_clicked)
        header_layout.addWidget(close_btn)
        layout.addWidget(header)

        # Diff content
        self._content = QPlainTextEdit()
        self._content.setReadOnly(True)
        self._content.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self._content.setFont(QFont("monospace", 10))
        self._content.setStyleSheet("background: #1e1e1e; color: #cccccc; border: none;")
        self._content.setPlainText(diff_content)
        layout.addWidget(self._content, 1)

    def title(self) -> str:
        return self._title.text()

    def set_title(self, title: str) -> None:
        self._title.setText(title)

    def diff_text(self) -> str:
        return self._content.toPlainText()

    def set_diff(self, diff_content: str) -> None:
        self._content.setPlainText(diff_content)

    def _on_close_clicked(self) -> None:
        self.hide()
        self.closed.emit()
