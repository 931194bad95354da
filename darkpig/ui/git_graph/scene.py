"""Git graph scene - runs the layout and holds the graphics items."""

import logging
from collections.abc import Sequence

from PySide6.QtCore import Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QGraphicsScene, QWidget

from darkpig.graph.history import HistoryIndex
from darkpig.graph.layout import GraphLayout
from darkpig.graph.types import Commit, CommitId, LayoutResult
from darkpig.ui.git_graph.edges import EdgeItem
from darkpig.ui.git_graph.node import CommitDot
from darkpig.ui.git_graph.types import get_lane_color

logger = logging.getLogger(__name__)


class GitGraphScene(QGraphicsScene):
    """Scene containing commit dots and the edges between them."""

    PADDING = 20
    LABEL_GAP = 24  # Between the rightmost lane and the summary column

    commit_selected = Signal(str)  # oid

    def __init__(self, graph_layout: GraphLayout, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.graph_layout = graph_layout
        # Kept across refreshes; pruned to the commits currently shown
        self.history = HistoryIndex()
        self.result = LayoutResult()
        self.oid_to_dot: dict[CommitId, CommitDot] = {}
        self.edge_items: list[EdgeItem] = []

        self.setBackgroundBrush(QColor("#FAFAFA"))

    def set_commits(self, commits: Sequence[Commit]) -> LayoutResult:
        """Lay out commits and rebuild all items."""
        self.history.prune(commit.id for commit in commits)
        self.result = self.graph_layout.run(commits, self.history)
        self._build_scene()
        logger.debug(
            "Graph scene: %d commits, %d edges, %d lanes",
            len(self.result.commits),
            len(self.result.edges),
            self.result.lane_count,
        )
        return self.result

    def _build_scene(self) -> None:
        """Build the graphics scene with dots and edges."""
        self.clear()
        self.oid_to_dot = {}
        self.edge_items = []

        # Edges first so they sit behind the dots
        for edge in self.result.edges:
            item = EdgeItem(edge.geometry, get_lane_color(edge.color))
            item.setPos(self.PADDING, self.PADDING)
            self.addItem(item)
            self.edge_items.append(item)

        label_column = self.result.lane_count * self.graph_layout.lane_width + self.LABEL_GAP
        for commit_layout in self.result.commits:
            position = commit_layout.position
            dot = CommitDot(
                commit_layout.commit,
                get_lane_color(commit_layout.color),
                self.graph_layout.node_size,
                label_offset=label_column - position.x,
            )
            dot.setPos(self.PADDING + position.x, self.PADDING + position.y)
            dot.clicked.connect(self.commit_selected.emit)
            self.addItem(dot)
            self.oid_to_dot[commit_layout.commit.id] = dot

        rect = self.itemsBoundingRect()
        self.setSceneRect(rect.adjusted(-self.PADDING, -self.PADDING, self.PADDING, self.PADDING))

    def select_commit(self, oid: CommitId) -> None:
        """Select a commit programmatically and announce it."""
        dot = self.oid_to_dot.get(oid)
        if dot is None:
            return
        self.clearSelection()
        dot.setSelected(True)
        self.commit_selected.emit(oid)
