"""
Workspace - main window tying the graph, detail and diff panes together.
"""

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import QDockWidget, QMainWindow, QSplitter, QVBoxLayout, QWidget

from darkpig.config.settings import Settings
from darkpig.errors import RepositoryAccessError
from darkpig.git_backend.repository import DarkPigRepository
from darkpig.graph.types import CommitId
from darkpig.ui.commit_detail import CommitDetailPane
from darkpig.ui.diff_pane import DiffPane
from darkpig.ui.git_graph import GitGraphView
from darkpig.ui.title_bar import TitleBar

logger = logging.getLogger(__name__)


class Workspace(QMainWindow):
    """Main application window"""

    def __init__(self, repo: DarkPigRepository, settings: Settings) -> None:
        super().__init__()
        self.repo = repo
        self.settings = settings

        title = str(settings.get("ui.title", "Dark Pig Git"))
        self.setWindowTitle(title)
        self.resize(1200, 800)

        # Title bar over the detail and diff panes
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.title_bar = TitleBar(title)
        self.title_bar.quit_requested.connect(self.close)
        layout.addWidget(self.title_bar)

        splitter = QSplitter(Qt.Orientation.Vertical)
        self.detail_pane = CommitDetailPane()
        self.diff_pane = DiffPane()
        self.diff_pane.hide()
        self.diff_pane.closed.connect(self._on_diff_closed)
        splitter.addWidget(self.detail_pane)
        splitter.addWidget(self.diff_pane)
        splitter.setSizes([250, 550])
        layout.addWidget(splitter, 1)

        self.setCentralWidget(central)

        # Graph dock on the left
        self.graph_view = GitGraphView(repo, settings)
        self.graph_view.commit_selected.connect(self.show_commit)
        self.graph_view.load_failed.connect(self._show_error)

        dock = QDockWidget("History", self)
        dock.setObjectName("history_dock")
        dock.setWidget(self.graph_view)
        dock.setFeatures(QDockWidget.DockWidgetFeature.NoDockWidgetFeatures)
        dock.setFixedWidth(int(settings.get("ui.dock_width", 300)))
        self.addDockWidget(Qt.DockWidgetArea.LeftDockWidgetArea, dock)
        self.graph_dock = dock

        self._quit_shortcut = QShortcut(QKeySequence("Ctrl+Q"), self)
        self._quit_shortcut.activated.connect(self.close)

    def show_commit(self, oid: CommitId) -> None:
        """Show details and diff for the selected commit"""
        try:
            commit = self.repo.get_commit(oid)
            diff_text = self.repo.diff_commit(oid)
        except RepositoryAccessError as e:
            logger.error("Could not load commit %s: %s", oid[:7], e)
            self._show_error(str(e))
            return

        self.detail_pane.set_commit(commit)
        self.diff_pane.set_title(f"{commit.short_id}  {commit.summary}")
        self.diff_pane.set_diff(diff_text or "(no changes)")
        self.diff_pane.show()

    def _show_error(self, message: str) -> None:
        self.diff_pane.set_title("Error")
        self.diff_pane.set_diff(message)
        self.diff_pane.show()

    def _on_diff_closed(self) -> None:
        self.detail_pane.set_commit(None)
        self.graph_view.graph_scene.clearSelection()
