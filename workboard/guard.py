"""
Concurrency guard for the shared board.

The board is published as an immutable BoardSnapshot. Writers serialize on a
single lock, mutate a private Draft, and publish a new snapshot with one
reference assignment. Readers grab the current snapshot without locking, so
they see either all of a mutation or none of it.
"""
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from .schema import WorkItem, Member


@dataclass(frozen=True)
class BoardSnapshot:
    """One consistent view of both collections and the id counters."""
    items: Mapping[int, WorkItem] = field(default_factory=lambda: MappingProxyType({}))
    members: Mapping[int, Member] = field(default_factory=lambda: MappingProxyType({}))
    next_item_id: int = 1
    next_member_id: int = 1


class Draft:
    """Mutable working copy of a snapshot, only ever touched under the write lock."""

    def __init__(self, base: BoardSnapshot):
        self.items: Dict[int, WorkItem] = dict(base.items)
        self.members: Dict[int, Member] = dict(base.members)
        self.next_item_id = base.next_item_id
        self.next_member_id = base.next_member_id
        self.changed = False

    def allocate_item_id(self) -> int:
        item_id = self.next_item_id
        self.next_item_id += 1
        return item_id

    def allocate_member_id(self) -> int:
        member_id = self.next_member_id
        self.next_member_id += 1
        return member_id

    def put_item(self, item: WorkItem) -> None:
        self.items[item.item_id] = item
        self.changed = True

    def put_member(self, member: Member) -> None:
        self.members[member.member_id] = member
        self.changed = True

    def pop_item(self, item_id: int) -> bool:
        if self.items.pop(item_id, None) is None:
            return False
        self.changed = True
        return True

    def pop_member(self, member_id: int) -> bool:
        if self.members.pop(member_id, None) is None:
            return False
        self.changed = True
        return True

    def freeze(self) -> BoardSnapshot:
        return BoardSnapshot(
            items=MappingProxyType(self.items),
            members=MappingProxyType(self.members),
            next_item_id=self.next_item_id,
            next_member_id=self.next_member_id,
        )


class ConcurrencyGuard:
    """Serializes writers and publishes snapshots atomically."""

    def __init__(self, initial: Optional[BoardSnapshot] = None):
        self._lock = threading.Lock()
        self._snapshot = initial if initial is not None else BoardSnapshot()

    def snapshot(self) -> BoardSnapshot:
        """Latest committed snapshot. Never blocks."""
        return self._snapshot

    @contextmanager
    def transaction(self) -> Iterator[Draft]:
        """
        Run a write under the lock.

        The draft is published only if the block exits normally and changed
        something; an exception discards it, ids allocated inside included.
        """
        with self._lock:
            draft = Draft(self._snapshot)
            yield draft
            if draft.changed:
                self._snapshot = draft.freeze()
