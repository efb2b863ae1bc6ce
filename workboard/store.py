"""
Work item storage backend (in-memory, process lifetime).

Owns the item and member collections and hands out ids. Every mutation runs
as one ConcurrencyGuard transaction, so id allocation, insertion and the
member-removal cascade are each a single atomic step.
"""
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from .config import Config
from .events import BoardEvents
from .guard import ConcurrencyGuard, Draft
from .schema import WorkItem, Member, WorkStatus
from .validation import (
    ValidationError, require_id, require_text, optional_text, require_email,
)

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def require_member(draft: Draft, member_id: int, field: str = "assigned_to") -> Member:
    """Resolve a member inside a transaction or raise ValidationError."""
    member = draft.members.get(require_id(field, member_id))
    if member is None:
        raise ValidationError(field, f"Member {member_id} does not exist.")
    return member


class WorkboardStore:
    """Authoritative store for work items and members."""

    def __init__(
        self,
        config: Optional[Config] = None,
        clock: Optional[Callable[[], datetime]] = None,
        events: Optional[BoardEvents] = None,
        guard: Optional[ConcurrencyGuard] = None,
    ):
        self.config = config or Config()
        self.clock = clock or utc_now
        self.events = events or BoardEvents()
        self.guard = guard or ConcurrencyGuard()

    # ── Reads ────────────────────────────────────────────────────────────

    def get_item(self, item_id: int) -> Optional[WorkItem]:
        return self.guard.snapshot().items.get(item_id)

    def get_member(self, member_id: int) -> Optional[Member]:
        return self.guard.snapshot().members.get(member_id)

    def all_items(self) -> List[WorkItem]:
        """All items in creation order."""
        return list(self.guard.snapshot().items.values())

    def all_members(self) -> List[Member]:
        """All members in creation order."""
        return list(self.guard.snapshot().members.values())

    # ── Creation ─────────────────────────────────────────────────────────

    def create_item(
        self,
        title: str,
        description: Optional[str] = None,
        assigned_to: Optional[int] = None,
    ) -> WorkItem:
        """
        Create a work item in status NEW.

        Raises ValidationError for a bad title or description, or when
        assigned_to does not name an existing member. Nothing is stored and
        no id is consumed on failure.
        """
        try:
            title = require_text("title", title, self.config.title_max_length)
            description = optional_text(
                "description", description, self.config.description_max_length
            )
            with self.guard.transaction() as draft:
                if assigned_to is not None:
                    require_member(draft, assigned_to)
                item = WorkItem(
                    item_id=draft.allocate_item_id(),
                    title=title,
                    description=description,
                    status=WorkStatus.NEW,
                    assigned_to=assigned_to,
                    created_at=self.clock(),
                )
                draft.put_item(item)
        except ValidationError as e:
            logger.warning(f"Rejected new work item: {e}")
            raise

        logger.info(f"New work item created: {item.item_id} '{item.title}'")
        self.events.emit("item_created", item=item)
        return item

    def create_member(self, name: str, email: str) -> Member:
        """Add a team member. Raises ValidationError for a bad name or email."""
        try:
            name = require_text("name", name, self.config.name_max_length)
            email = require_email("email", email, self.config.email_max_length)
        except ValidationError as e:
            logger.warning(f"Rejected new member: {e}")
            raise

        with self.guard.transaction() as draft:
            member = Member(
                member_id=draft.allocate_member_id(),
                name=name,
                email=email,
                created_at=self.clock(),
            )
            draft.put_member(member)

        logger.info(f"New team member added: {member.member_id} '{member.name}'")
        self.events.emit("member_created", member=member)
        return member

    # ── Deletion ─────────────────────────────────────────────────────────

    def delete_item(self, item_id: int) -> bool:
        """Remove an item. Returns whether it existed."""
        with self.guard.transaction() as draft:
            existed = draft.pop_item(item_id)

        if not existed:
            logger.debug(f"Work item {item_id} not found, nothing to delete")
            return False
        logger.info(f"Work item {item_id} deleted")
        self.events.emit("item_deleted", item_id=item_id)
        return True

    def delete_member(self, member_id: int) -> bool:
        """
        Remove a member and unassign every item that pointed at it.

        Both steps happen in one transaction: no snapshot ever holds an item
        assigned to a member that is gone. Unassigned items get a fresh
        updated_at. Returns whether the member existed.
        """
        with self.guard.transaction() as draft:
            if not draft.pop_member(member_id):
                logger.debug(f"Member {member_id} not found, nothing to remove")
                return False
            now = self.clock()
            unassigned = []
            for item in list(draft.items.values()):
                if item.assigned_to == member_id:
                    draft.put_item(item.with_assignee(None, now))
                    unassigned.append(item.item_id)

        logger.info(
            f"Team member {member_id} removed, {len(unassigned)} item(s) unassigned"
        )
        self.events.emit("member_removed", member_id=member_id, unassigned=unassigned)
        return True
