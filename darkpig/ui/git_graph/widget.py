"""Git graph view widget - main entry point for git graph visualization."""

import logging

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QPainter, QWheelEvent
from PySide6.QtWidgets import QGraphicsView, QWidget

from darkpig.config.settings import Settings
from darkpig.errors import RepositoryAccessError
from darkpig.git_backend.repository import DarkPigRepository
from darkpig.graph.layout import GraphLayout
from darkpig.ui.git_graph.scene import GitGraphScene

logger = logging.getLogger(__name__)


class GitGraphView(QGraphicsView):
    """Scrollable and zoomable view of the commit graph."""

    commit_selected = Signal(str)  # oid
    load_failed = Signal(str)  # error message

    MIN_ZOOM = 0.2
    MAX_ZOOM = 2.0
    ZOOM_FACTOR = 1.1

    def __init__(self, repo: DarkPigRepository, settings: Settings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.repo = repo
        self.settings = settings

        self._scene = GitGraphScene(GraphLayout.from_settings(settings))
        self._scene.commit_selected.connect(self.commit_selected.emit)
        self.setScene(self._scene)

        # Setup view
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setViewportUpdateMode(QGraphicsView.ViewportUpdateMode.FullViewportUpdate)
        self.setTransformationAnchor(QGraphicsView.ViewportAnchor.AnchorUnderMouse)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)

        # Current zoom level
        self._zoom = 1.0

        self.refresh()

    @property
    def graph_scene(self) -> GitGraphScene:
        return self._scene

    def refresh(self) -> None:
        """Reload history from the repository and redo the layout."""
        try:
            commits = self.repo.walk_commits(
                limit=self.settings.get_max_commits(),
                all_branches=bool(self.settings.get("repository.all_branches", False)),
            )
        except RepositoryAccessError as e:
            logger.error("Could not load history: %s", e)
            self.load_failed.emit(str(e))
            return

        self._scene.set_commits(commits)

    def _apply_zoom(self, new_zoom: float) -> None:
        """Apply zoom level, clamped to min/max."""
        new_zoom = max(self.MIN_ZOOM, min(self.MAX_ZOOM, new_zoom))
        if new_zoom != self._zoom:
            factor = new_zoom / self._zoom
            self._zoom = new_zoom
            self.scale(factor, factor)

    def wheelEvent(self, event: QWheelEvent) -> None:  # noqa: N802
        """Handle mouse wheel - Ctrl+wheel zooms, plain wheel scrolls."""
        if event.modifiers() & Qt.KeyboardModifier.ControlModifier:
            delta = event.angleDelta().y()
            if delta > 0:
                self._apply_zoom(self._zoom * self.ZOOM_FACTOR)
            elif delta < 0:
                self._apply_zoom(self._zoom / self.ZOOM_FACTOR)
            event.accept()
        else:
            super().wheelEvent(event)
