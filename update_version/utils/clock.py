"""Clocks used to calculate date and time based version numbers."""

from __future__ import annotations

from datetime import date, datetime
from typing import Protocol


class Clock(Protocol):
    """Anything that can tell the current local date and time."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Reads the local wall clock."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """Always returns the same moment. Useful in tests and reproducible builds."""

    def __init__(self, moment: datetime) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


def today(clock: Clock) -> date:
    return clock.now().date()
