"""
Status engine: the work item state machine.

The transition graph is flat. Any status may move to any other, Completed
included, and writing the current status again still stamps updated_at.
"""
import logging
from typing import Union

from .schema import WorkStatus
from .store import WorkboardStore
from .validation import ValidationError

logger = logging.getLogger(__name__)


class StatusEngine:
    """Applies status changes to work items."""

    def __init__(self, store: WorkboardStore):
        self.store = store

    @staticmethod
    def can_transition(current: Union[WorkStatus, str], target: Union[WorkStatus, str]) -> bool:
        """Every valid status is reachable from every other."""
        try:
            WorkStatus.parse(current)
            WorkStatus.parse(target)
        except ValidationError:
            return False
        return True

    def set_status(self, item_id: int, new_status: Union[WorkStatus, str]) -> bool:
        """
        Move an item to new_status and stamp updated_at.

        Returns False without touching the board if the item does not exist.
        Raises ValidationError if new_status is not a known status.
        """
        new_status = WorkStatus.parse(new_status)
        with self.store.guard.transaction() as draft:
            item = draft.items.get(item_id)
            if item is None:
                logger.debug(f"Work item {item_id} not found, status unchanged")
                return False
            updated = item.with_status(new_status, self.store.clock())
            draft.put_item(updated)

        logger.info(
            f"Work item {item_id} status changed from {item.status.value} "
            f"to {new_status.value}"
        )
        self.store.events.emit("status_changed", item=updated, old_status=item.status)
        return True
