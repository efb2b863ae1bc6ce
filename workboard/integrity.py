"""
Integrity engine: assignments and cross-entity consistency.

Invariant: an item's assigned_to is either None or the id of a member that
exists in the same snapshot.
"""
import logging
from typing import List, Optional

from .schema import WorkItem
from .store import WorkboardStore, require_member
from .validation import ValidationError

logger = logging.getLogger(__name__)


class IntegrityEngine:
    """Assigns items to members and removes members with their assignments."""

    def __init__(self, store: WorkboardStore):
        self.store = store

    def assign(self, item_id: int, member_id: Optional[int]) -> bool:
        """
        Assign an item to a member, or unassign it with member_id=None.

        Returns False if the item does not exist. Raises ValidationError if
        member_id is given but names no existing member.
        """
        with self.store.guard.transaction() as draft:
            item = draft.items.get(item_id)
            if item is None:
                logger.debug(f"Work item {item_id} not found, assignment unchanged")
                return False
            member = None
            if member_id is not None:
                try:
                    member = require_member(draft, member_id, field="member_id")
                except ValidationError:
                    logger.warning(
                        f"Rejected assignment of item {item_id} to missing member {member_id}"
                    )
                    raise
            updated = item.with_assignee(member_id, self.store.clock())
            draft.put_item(updated)

        logger.info(
            f"Work item {item_id} assigned to {member.name if member else 'Unassigned'}"
        )
        self.store.events.emit("item_assigned", item=updated, member=member)
        return True

    def remove_member(self, member_id: int) -> bool:
        """Remove a member; its items are unassigned in the same transaction."""
        return self.store.delete_member(member_id)

    def dangling_assignments(self) -> List[WorkItem]:
        """Items whose assignee is missing from the current snapshot. Should be empty."""
        snap = self.store.guard.snapshot()
        return [
            item for item in snap.items.values()
            if item.assigned_to is not None and item.assigned_to not in snap.members
        ]
