"""
Lane allocation for the commit graph.

The lane table is a list of slots, one per vertical track. A slot holds the
id of the commit expected next in that track (a parent that has been
referenced but not yet visited), or None when the track is free.

Commits are fed in traversal order, children before parents:

1. The commit takes the slot that was waiting for it, or a new slot
   appended on the right when nothing was waiting (start of a chain).
2. Its first parent inherits that slot, so the primary line of descent
   stays straight.
3. Every other parent (merge source) takes a free slot, highest index
   first, or a new slot on the right.
4. Free slots at the right end are trimmed. Their indices are "retired".
"""

import logging

from darkpig.graph.types import AnomalyKind, CommitId, LayoutAnomaly

logger = logging.getLogger(__name__)


class LaneAllocator:
    """Assigns lanes to commits in a single forward pass."""

    def __init__(self) -> None:
        self._lanes: list[CommitId | None] = []
        self._retired: list[int] = []
        self.anomalies: list[LayoutAnomaly] = []

    def __len__(self) -> int:
        return len(self._lanes)

    @property
    def lanes(self) -> tuple[CommitId | None, ...]:
        """Snapshot of the lane table."""
        return tuple(self._lanes)

    @property
    def pending(self) -> list[CommitId]:
        """Ids of commits that hold a slot but have not been visited yet."""
        return [oid for oid in self._lanes if oid is not None]

    def lane_of(self, oid: CommitId) -> int | None:
        """Index of the slot waiting for oid, if any."""
        try:
            return self._lanes.index(oid)
        except ValueError:
            return None

    def assign(self, commit_id: CommitId, parent_ids: list[CommitId] | tuple[CommitId, ...]) -> int:
        """Assign commit_id to a lane and reserve lanes for its parents."""
        lane = self.lane_of(commit_id)
        if lane is None:
            self._lanes.append(None)
            lane = len(self._lanes) - 1

        # Consumed: nothing will look this commit up again
        self._lanes[lane] = None

        if parent_ids:
            first_parent = parent_ids[0]
            if self._reserve_check(commit_id, first_parent):
                self._lanes[lane] = first_parent

        for parent_id in parent_ids[1:]:
            if not self._reserve_check(commit_id, parent_id):
                continue
            free = self._find_free_slot()
            if free is None:
                self._lanes.append(parent_id)
            else:
                self._lanes[free] = parent_id

        self._trim()
        return lane

    def take_retired(self) -> list[int]:
        """Return and forget the lane indices trimmed since the last call."""
        retired, self._retired = self._retired, []
        return retired

    def reset(self) -> None:
        self._lanes.clear()
        self._retired.clear()
        self.anomalies.clear()

    def _reserve_check(self, commit_id: CommitId, parent_id: CommitId) -> bool:
        """Return True if parent_id may take a slot; record a duplicate otherwise."""
        existing = self.lane_of(parent_id)
        if existing is None:
            return True

        anomaly = LayoutAnomaly(
            kind=AnomalyKind.DUPLICATE_PENDING_RESERVATION,
            commit_id=commit_id,
            related_id=parent_id,
            detail=f"parent already pending in lane {existing}",
        )
        self.anomalies.append(anomaly)
        logger.debug("Dropped reservation %s", anomaly)
        return False

    def _find_free_slot(self) -> int | None:
        # Highest index first keeps new merge lanes next to the right edge
        for index in range(len(self._lanes) - 1, -1, -1):
            if self._lanes[index] is None:
                return index
        return None

    def _trim(self) -> None:
        while self._lanes and self._lanes[-1] is None:
            self._lanes.pop()
            self._retired.append(len(self._lanes))
