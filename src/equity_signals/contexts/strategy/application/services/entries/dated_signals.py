from __future__ import annotations

from datetime import date
from typing import Iterable

from equity_signals.contexts.signals.domain.entities import SignalDirection
from equity_signals.contexts.strategy.domain.entities import DatedSignal


def unique_by_date_and_direction(signals: Iterable[DatedSignal]) -> list[DatedSignal]:
    """
    Sort signals by date, dropping repeats of the same date and direction.

    Args:
        signals: Signals in producer order.
    Returns:
        list[DatedSignal]: Date-sorted signals; a date carries at most one bullish and one
            bearish signal.
    Assumptions:
        Producer order is kept between the two directions of one date.
    Raises:
        None.
    Side Effects:
        None.
    """
    by_key: dict[tuple[date, SignalDirection], DatedSignal] = {}
    for signal in signals:
        by_key.setdefault((signal.date, signal.direction), signal)
    return sorted(by_key.values(), key=lambda signal: signal.date)
