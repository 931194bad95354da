"""
Layout pass driver.

Runs the lane allocator, color assigner and position resolver over an
ordered batch of commits, then builds the edges. Each run() is one pass and
owns fresh lane/color state; only the HistoryIndex may be carried over from
an earlier pass.
"""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from darkpig.graph.colors import ColorAssigner
from darkpig.graph.edges import EdgeBuilder
from darkpig.graph.history import HistoryIndex, PositionResolver
from darkpig.graph.lanes import LaneAllocator
from darkpig.graph.types import (
    AnomalyKind,
    Commit,
    CommitId,
    CommitLayout,
    GraphEdge,
    LayoutAnomaly,
    LayoutResult,
)

if TYPE_CHECKING:
    from darkpig.config.settings import Settings

logger = logging.getLogger(__name__)


class GraphLayout:
    """Lays out a commit batch: lanes, colors, positions and edges."""

    def __init__(
        self,
        row_height: float = 32.0,
        lane_width: float = 16.0,
        node_size: float = 10.0,
        stroke_width: float = 1.5,
        straight_tolerance: float = 0.5,
        palette_size: int = 8,
    ) -> None:
        if palette_size < 2:
            raise ValueError(f"palette needs at least 2 colors, got {palette_size}")
        self.row_height = row_height
        self.lane_width = lane_width
        self.node_size = node_size
        self.palette_size = palette_size
        self.edge_builder = EdgeBuilder(stroke_width, straight_tolerance)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "GraphLayout":
        return cls(
            row_height=float(settings.get("graph.row_height", 32)),
            lane_width=float(settings.get("graph.lane_width", 16)),
            node_size=float(settings.get("graph.node_size", 10)),
            stroke_width=float(settings.get("graph.stroke_width", 1.5)),
            straight_tolerance=float(settings.get("graph.straight_tolerance", 0.5)),
            palette_size=int(settings.get("graph.palette_size", 8)),
        )

    def run(self, commits: Sequence[Commit], history: HistoryIndex | None = None) -> LayoutResult:
        """
        Lay out commits in the given order (children before parents).

        Problems with the input never abort the pass. They are returned in
        LayoutResult.anomalies:
        - a parent missing from the batch, or already visited, is not given a
          lane (the commit behaves like a chain end);
        - a commit repeated in the batch is skipped;
        - a parent already waiting in a lane is not reserved a second time.
        """
        allocator = LaneAllocator()
        colors = ColorAssigner(self.palette_size)
        if history is None:
            history = HistoryIndex()
        resolver = PositionResolver(history, self.row_height, self.lane_width, self.node_size)

        result = LayoutResult(history=history)
        batch_ids = {commit.id for commit in commits}
        visited: set[CommitId] = set()
        malformed: list[LayoutAnomaly] = []
        row = 0

        for commit in commits:
            if commit.id in visited:
                malformed.append(
                    LayoutAnomaly(AnomalyKind.MALFORMED_DAG, commit.id, detail="commit repeated in traversal")
                )
                continue

            parents = self._reservable_parents(commit, batch_ids, visited, malformed)
            lane = allocator.assign(commit.id, parents)
            color = colors.color_for(lane)
            for retired in allocator.take_retired():
                colors.remove(retired)

            position = resolver.resolve(commit, lane, row, color)
            result.add(CommitLayout(commit=commit, row=row, lane=lane, color=color, position=position))
            result.lane_count = max(result.lane_count, lane + 1, len(allocator))

            visited.add(commit.id)
            row += 1

        result.edges = self._build_edges(result)
        result.anomalies = malformed + allocator.anomalies
        self._log_anomalies(result)
        return result

    def _reservable_parents(
        self,
        commit: Commit,
        batch_ids: set[CommitId],
        visited: set[CommitId],
        malformed: list[LayoutAnomaly],
    ) -> list[CommitId]:
        parents: list[CommitId] = []
        for parent_id in commit.parent_ids:
            if parent_id not in batch_ids:
                detail = "parent not in traversal"
            elif parent_id in visited:
                detail = "parent visited before child"
            else:
                parents.append(parent_id)
                continue
            malformed.append(LayoutAnomaly(AnomalyKind.MALFORMED_DAG, commit.id, parent_id, detail))
        return parents

    def _build_edges(self, result: LayoutResult) -> list[GraphEdge]:
        edges: list[GraphEdge] = []
        for child in result.commits:
            # dict.fromkeys keeps order and drops repeated parent ids
            for parent_id in dict.fromkeys(child.commit.parent_ids):
                parent = result.by_id(parent_id)
                if parent is None:
                    continue
                geometry = self.edge_builder.build(parent.position, child.position)
                edges.append(
                    GraphEdge(
                        child_id=child.commit.id,
                        parent_id=parent_id,
                        color=parent.color,
                        geometry=geometry,
                    )
                )
        return edges

    def _log_anomalies(self, result: LayoutResult) -> None:
        for anomaly in result.anomalies:
            logger.debug("Layout anomaly: %s", anomaly)
        malformed = result.anomalies_of(AnomalyKind.MALFORMED_DAG)
        if malformed:
            logger.warning(
                "Layout of %d commits found %d malformed parent link(s)",
                len(result.commits),
                len(malformed),
            )
