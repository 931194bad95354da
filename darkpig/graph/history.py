"""Commit positions: where each commit lands on screen, and where it has been drawn."""

from collections.abc import Iterable, Iterator

from darkpig.graph.types import Commit, CommitId, HistoryEntry, Point


class HistoryIndex:
    """
    Per-commit record of drawn positions.

    A commit may be drawn more than once (several passes, scroll offsets),
    so entries accumulate in order instead of overwriting each other.
    """

    def __init__(self) -> None:
        self._entries: dict[CommitId, list[HistoryEntry]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, oid: object) -> bool:
        return oid in self._entries

    def __iter__(self) -> Iterator[CommitId]:
        return iter(self._entries)

    def add(self, oid: CommitId, entry: HistoryEntry) -> None:
        self._entries.setdefault(oid, []).append(entry)

    def get(self, oid: CommitId) -> list[HistoryEntry]:
        """All entries for oid, oldest first. Empty when never drawn."""
        return list(self._entries.get(oid, ()))

    def latest(self, oid: CommitId) -> HistoryEntry | None:
        entries = self._entries.get(oid)
        return entries[-1] if entries else None

    def prune(self, keep: Iterable[CommitId]) -> int:
        """Drop every commit not in keep. Returns how many were dropped."""
        keep_set = set(keep)
        dropped = [oid for oid in self._entries if oid not in keep_set]
        for oid in dropped:
            del self._entries[oid]
        return len(dropped)

    def clear(self) -> None:
        self._entries.clear()


class PositionResolver:
    """Turns (row, lane) into scene coordinates and records them."""

    def __init__(
        self,
        history: HistoryIndex,
        row_height: float,
        lane_width: float,
        node_size: float = 0.0,
        origin: Point = Point(0.0, 0.0),
    ) -> None:
        self.history = history
        self.row_height = row_height
        self.lane_width = lane_width
        self.node_size = node_size
        self.origin = origin

    def point_for(self, row: int, lane: int) -> Point:
        """Center of the node at (row, lane). Pure."""
        half = self.node_size / 2
        return Point(
            self.origin.x + lane * self.lane_width + half,
            self.origin.y + row * self.row_height + half,
        )

    def resolve(self, commit: Commit, lane: int, row: int, color: int) -> Point:
        """Compute the commit's position and append it to the history."""
        point = self.point_for(row, lane)
        self.history.add(commit.id, HistoryEntry(position=point, color=color, lane=lane))
        return point
