"""
Query layer: read-only views over the board.

Each call reads the latest committed snapshot once and computes its result
fresh, so results are never stale caches and never mix two snapshots.
"""
from collections import Counter
from typing import Any, Dict, List, Optional, Union

from .schema import WorkItem, Member, WorkStatus
from .store import WorkboardStore


class BoardQueries:
    """Derived views for rendering the board."""

    def __init__(self, store: WorkboardStore):
        self.store = store

    def items_by_status(self, status: Union[WorkStatus, str]) -> List[WorkItem]:
        """Items in a status, newest first (later id wins a created_at tie)."""
        status = WorkStatus.parse(status)
        items = [i for i in self.store.guard.snapshot().items.values() if i.status == status]
        return sorted(items, key=lambda i: (i.created_at, i.item_id), reverse=True)

    def member_by_id(self, member_id: Optional[int]) -> Optional[Member]:
        if member_id is None:
            return None
        return self.store.guard.snapshot().members.get(member_id)

    def assigned_workload_count(self, member_id: int) -> int:
        """Number of items currently assigned to member_id."""
        return sum(
            1 for i in self.store.guard.snapshot().items.values()
            if i.assigned_to == member_id
        )

    def assigned_members_count(self) -> int:
        """Number of members that own at least one item."""
        snap = self.store.guard.snapshot()
        owners = {i.assigned_to for i in snap.items.values() if i.assigned_to is not None}
        return len(owners & set(snap.members))

    def board_stats(self) -> Dict[str, Any]:
        """Board statistics: items per status, totals, unassigned count."""
        snap = self.store.guard.snapshot()
        counts = Counter(i.status for i in snap.items.values())
        return {
            "by_status": {s.value: counts.get(s, 0) for s in WorkStatus},
            "total": len(snap.items),
            "members": len(snap.members),
            "unassigned": sum(1 for i in snap.items.values() if i.assigned_to is None),
        }
