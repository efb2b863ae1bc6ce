"""
Work item and member schema.

Status lifecycle (flat graph, every status reachable from every other):
  New ↔ Active ↔ Blocked ↔ Completed

Records are immutable; every change produces a new record through
dataclasses.replace so a published board snapshot never changes underneath
a reader.
"""
from enum import Enum
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Dict, Any, Union

from .validation import ValidationError


class WorkStatus(Enum):
    """Valid work item statuses."""
    NEW = "new"              # Created, not yet picked up
    ACTIVE = "active"        # Being worked on
    BLOCKED = "blocked"      # Waiting on something external
    COMPLETED = "completed"  # Finished; may still be reopened

    @classmethod
    def parse(cls, value: Union["WorkStatus", str]) -> "WorkStatus":
        """Accept a member, a value ("active") or a name ("Active", "ACTIVE")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValidationError("status", f"Unknown status: {value!r}")


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _parse_dt(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


@dataclass(frozen=True)
class WorkItem:
    """A trackable unit of work with a status and an optional owner."""

    item_id: int
    title: str
    created_at: datetime
    description: Optional[str] = None
    status: WorkStatus = WorkStatus.NEW
    assigned_to: Optional[int] = None     # Member id, lookup only
    updated_at: Optional[datetime] = None  # None until the first mutation

    def with_status(self, status: WorkStatus, now: datetime) -> "WorkItem":
        return replace(self, status=status, updated_at=now)

    def with_assignee(self, member_id: Optional[int], now: datetime) -> "WorkItem":
        return replace(self, assigned_to=member_id, updated_at=now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "item_id": self.item_id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "assigned_to": self.assigned_to,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkItem":
        return cls(
            item_id=int(data["item_id"]),
            title=data["title"],
            description=data.get("description"),
            status=WorkStatus.parse(data.get("status", WorkStatus.NEW.value)),
            assigned_to=data.get("assigned_to"),
            created_at=_parse_dt(data["created_at"]),
            updated_at=_parse_dt(data.get("updated_at")),
        )


@dataclass(frozen=True)
class Member:
    """A person who may own work items."""

    member_id: int
    name: str
    email: str
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "member_id": self.member_id,
            "name": self.name,
            "email": self.email,
            "created_at": _iso(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Member":
        return cls(
            member_id=int(data["member_id"]),
            name=data["name"],
            email=data["email"],
            created_at=_parse_dt(data["created_at"]),
        )
