"""Shared test fixtures for workboard tests."""

import itertools
from datetime import datetime, timedelta, timezone

import pytest

from workboard import Workboard

EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


class StepClock:
    """Deterministic clock: each call is one second after the previous one."""

    def __init__(self, start: datetime = EPOCH, step: timedelta = timedelta(seconds=1)):
        self._ticks = itertools.count()
        self.start = start
        self.step = step
        self.last = None

    def __call__(self) -> datetime:
        self.last = self.start + self.step * next(self._ticks)
        return self.last


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def board(clock):
    return Workboard(clock=clock)
