# Workboard: work item tracking, team assignment, and concurrency-safe state
#
# Components:
#   schema.py     - Data model (WorkItem, Member, WorkStatus)
#   validation.py - Field validation and ValidationError
#   guard.py      - Immutable snapshots behind a single writer lock
#   store.py      - In-memory collections, id allocation, cascading delete
#   status.py     - Flat status state machine
#   integrity.py  - Assignments and referential integrity
#   queries.py    - Read-only board views
#   events.py     - Post-commit change notifications
#   config.py     - YAML configuration and logging setup
#   board.py      - Workboard handle wiring it all together

from .board import Workboard
from .config import Config
from .schema import WorkItem, Member, WorkStatus
from .validation import ValidationError

__all__ = ["Workboard", "Config", "WorkItem", "Member", "WorkStatus", "ValidationError"]
