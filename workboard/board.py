"""
Workboard handle.

One Workboard per process is created by the request layer and passed to the
handlers that need it. It wires the store, the two engines, the query layer
and the event bus around a single ConcurrencyGuard.
"""
from datetime import datetime
from typing import Callable, Optional

from .config import Config
from .events import BoardEvents
from .integrity import IntegrityEngine
from .queries import BoardQueries
from .status import StatusEngine
from .store import WorkboardStore


class Workboard:
    """Explicit handle on one shared board."""

    def __init__(
        self,
        config: Optional[Config] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.config = config or Config()
        self.config.validate()
        self.events = BoardEvents()
        self.store = WorkboardStore(self.config, clock=clock, events=self.events)
        self.status = StatusEngine(self.store)
        self.integrity = IntegrityEngine(self.store)
        self.queries = BoardQueries(self.store)

    @classmethod
    def from_config_file(cls, path: Optional[str] = None, **kwargs) -> "Workboard":
        return cls(Config.load(path), **kwargs)
