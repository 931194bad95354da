"""Commit-graph layout engine"""

from darkpig.graph.colors import ColorAssigner
from darkpig.graph.edges import EdgeBuilder
from darkpig.graph.history import HistoryIndex, PositionResolver
from darkpig.graph.lanes import LaneAllocator
from darkpig.graph.layout import GraphLayout
from darkpig.graph.types import (
    AnomalyKind,
    Commit,
    CommitLayout,
    EdgeGeometry,
    EdgeKind,
    GraphEdge,
    HistoryEntry,
    LayoutAnomaly,
    LayoutResult,
    Point,
)

__all__ = [
    "AnomalyKind",
    "ColorAssigner",
    "Commit",
    "CommitLayout",
    "EdgeBuilder",
    "EdgeGeometry",
    "EdgeKind",
    "GraphEdge",
    "GraphLayout",
    "HistoryEntry",
    "HistoryIndex",
    "LaneAllocator",
    "LayoutAnomaly",
    "LayoutResult",
    "Point",
    "PositionResolver",
]
