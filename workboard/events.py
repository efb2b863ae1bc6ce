"""
Event bus: notifies subscribers after a board mutation has been committed.

Emitted events and their keyword payloads:
    item_created    item
    item_deleted    item_id
    member_created  member
    member_removed  member_id, unassigned (list of item ids)
    status_changed  item, old_status
    item_assigned   item, member
"""
import logging
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

EVENT_TYPES = frozenset({
    "item_created",
    "item_deleted",
    "member_created",
    "member_removed",
    "status_changed",
    "item_assigned",
})


class BoardEvents:
    """Routes committed board changes to registered callbacks."""

    def __init__(self):
        self.subscribers: Dict[str, List[Callable]] = {}  # event_type -> callbacks

    def subscribe(self, event_type: str, callback: Callable) -> None:
        """Register a callback for an event type."""
        if event_type not in EVENT_TYPES:
            raise ValueError(f"Invalid event_type: {event_type}")
        self.subscribers.setdefault(event_type, []).append(callback)

    def unsubscribe(self, event_type: str, callback: Callable) -> bool:
        callbacks = self.subscribers.get(event_type, [])
        if callback in callbacks:
            callbacks.remove(callback)
            return True
        return False

    def emit(self, event_type: str, **kwargs) -> None:
        """Call every subscriber; a failing callback does not stop the others."""
        for callback in list(self.subscribers.get(event_type, [])):
            try:
                callback(**kwargs)
            except Exception:
                logger.exception(f"Error in {event_type} callback")
