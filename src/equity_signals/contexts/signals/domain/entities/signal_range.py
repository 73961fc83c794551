from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class SignalRange:
    """
    Inclusive `[earliest, latest]` date window in which generators report signals.

    Related:
      - src/equity_signals/contexts/signals/application/services/signal_range_filters.py
    """

    earliest: date
    latest: date

    def __post_init__(self) -> None:
        if self.earliest > self.latest:
            raise ValueError(
                f"SignalRange requires earliest <= latest, got {self.earliest} > {self.latest}"
            )

    def contains(self, day: date) -> bool:
        return self.earliest <= day <= self.latest
