from __future__ import annotations

import calendar
from datetime import date, timedelta
from enum import Enum


class Frequency(str, Enum):
    """
    Calendar cadence of a periodic entry.

    Related:
      - src/equity_signals/contexts/strategy/application/services/entries/periodic_entry.py
    """

    WEEKLY = "weekly"
    MONTHLY = "monthly"


def advance(start: date, frequency: Frequency | timedelta, periods: int) -> date:
    """
    Compute the date `periods` steps of `frequency` after `start`.

    Args:
        start: Anchor date.
        frequency: Calendar cadence or fixed positive interval.
        periods: Number of steps, `>= 0`.
    Returns:
        date: Stepped date.
    Assumptions:
        Monthly steps clamp to the last day of shorter months (Jan 31 + 1 month = Feb 28/29).
    Raises:
        ValueError: If `periods` is negative.
    Side Effects:
        None.
    """
    if periods < 0:
        raise ValueError(f"periods must be >= 0, got {periods}")
    if isinstance(frequency, timedelta):
        return start + frequency * periods
    if frequency is Frequency.WEEKLY:
        return start + timedelta(weeks=periods)

    month_index = start.month - 1 + periods
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)
