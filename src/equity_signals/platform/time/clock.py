from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Protocol


class Clock(Protocol):
    """
    Clock: source of "today" for live analysis.

    Contract:
    - today() -> date (exchange-local calendar date)
    """

    def today(self) -> date:
        ...


class SystemClock(Clock):
    """
    SystemClock: platform Clock implementation reading the local system date.
    """

    def today(self) -> date:
        return date.today()


@dataclass(frozen=True, slots=True)
class FixedClock(Clock):
    """
    FixedClock: Clock pinned to one date, used for replays and tests.
    """

    fixed_date: date

    def today(self) -> date:
        return self.fixed_date
