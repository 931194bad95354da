"""Types shared by the commit-graph layout engine."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from darkpig.graph.history import HistoryIndex

# Hex object id as produced by the repository reader
CommitId = str


@dataclass(frozen=True)
class Commit:
    """A commit as read from the repository. Read-only to the layout engine."""

    id: CommitId
    parent_ids: tuple[CommitId, ...] = ()
    author: str = ""
    message: str = ""
    timestamp: int = 0

    @property
    def short_id(self) -> str:
        return self.id[:7]

    @property
    def summary(self) -> str:
        """First line of the commit message."""
        return self.message.strip().split("\n")[0]

    @property
    def is_merge(self) -> bool:
        return len(self.parent_ids) > 1


@dataclass(frozen=True)
class Point:
    """A 2-D scene coordinate."""

    x: float
    y: float

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass(frozen=True)
class HistoryEntry:
    """Where and how a commit was drawn during one layout pass."""

    position: Point
    color: int
    lane: int


class EdgeKind(Enum):
    """Shape of an edge between a commit and one of its parents."""

    STRAIGHT = "straight"
    CURVE = "curve"


@dataclass(frozen=True)
class EdgeGeometry:
    """
    Geometry of a connector.

    For STRAIGHT edges the control points coincide with the endpoints, so
    the same cubic formula evaluates both kinds.
    """

    start: Point
    end: Point
    kind: EdgeKind
    control1: Point
    control2: Point
    stroke_width: float

    @property
    def is_straight(self) -> bool:
        return self.kind is EdgeKind.STRAIGHT

    def point_at(self, t: float) -> Point:
        """Evaluate the edge at parameter t in [0, 1]."""
        if self.is_straight:
            return Point(
                self.start.x + (self.end.x - self.start.x) * t,
                self.start.y + (self.end.y - self.start.y) * t,
            )
        u = 1.0 - t
        a, b, c, d = u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t
        return Point(
            a * self.start.x + b * self.control1.x + c * self.control2.x + d * self.end.x,
            a * self.start.y + b * self.control1.y + c * self.control2.y + d * self.end.y,
        )


@dataclass
class GraphEdge:
    """A drawn parent relationship: child commit to one of its parents."""

    child_id: CommitId
    parent_id: CommitId
    color: int
    geometry: EdgeGeometry


@dataclass
class CommitLayout:
    """Layout output for a single commit."""

    commit: Commit
    row: int
    lane: int
    color: int
    position: Point


class AnomalyKind(Enum):
    """Recoverable problems found while laying out a pass."""

    MALFORMED_DAG = "malformed_dag"
    DUPLICATE_PENDING_RESERVATION = "duplicate_pending_reservation"


@dataclass(frozen=True)
class LayoutAnomaly:
    """A recoverable layout problem reported back to the caller."""

    kind: AnomalyKind
    commit_id: CommitId
    related_id: CommitId | None = None
    detail: str = ""

    def __str__(self) -> str:
        related = f" -> {self.related_id[:7]}" if self.related_id else ""
        return f"{self.kind.value}: {self.commit_id[:7]}{related} {self.detail}".rstrip()


@dataclass
class LayoutResult:
    """Everything the renderer needs from one layout pass."""

    commits: list[CommitLayout] = field(default_factory=list)
    edges: list[GraphEdge] = field(default_factory=list)
    anomalies: list[LayoutAnomaly] = field(default_factory=list)
    lane_count: int = 0
    history: "HistoryIndex | None" = None

    def __post_init__(self) -> None:
        self._by_id: dict[CommitId, CommitLayout] = {c.commit.id: c for c in self.commits}

    def add(self, layout: CommitLayout) -> None:
        self.commits.append(layout)
        self._by_id[layout.commit.id] = layout

    def by_id(self, oid: CommitId) -> CommitLayout | None:
        return self._by_id.get(oid)

    @property
    def max_lane(self) -> int:
        return max((c.lane for c in self.commits), default=0)

    def anomalies_of(self, kind: AnomalyKind) -> list[LayoutAnomaly]:
        return [a for a in self.anomalies if a.kind is kind]
