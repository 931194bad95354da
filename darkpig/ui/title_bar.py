"""Title bar - application title and a quit button."""

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QWidget


class TitleBar(QWidget):
    """Dark strip across the top of the workspace."""

    quit_requested = Signal()

    HEIGHT = 32

    def __init__(self, title: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFixedHeight(self.HEIGHT)
        self.setAutoFillBackground(True)
        self.setStyleSheet("background: #1e1e1e; color: #ffffff;")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 0, 16, 0)

        self._title = QLabel(title)
        self._title.setStyleSheet("font-size: 12px; font-weight: 500;")
        layout.addWidget(self._title, 1)

        self._quit_btn = QPushButton("Quit")
        self._quit_btn.setStyleSheet("""
            QPushButton {
                background: #ff5f57;
                color: #ffffff;
                border: none;
                border-radius: 4px;
                padding: 2px 12px;
            }
            QPushButton:hover { background: #e0443e; }
        """)
        self._quit_btn.clicked.connect(self.quit_requested)
        layout.addWidget(self._quit_btn)

    def title(self) -> str:
        return self._title.text()

    def set_title(self, title: str) -> None:
        self._title.setText(title)
