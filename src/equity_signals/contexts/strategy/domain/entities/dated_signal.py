from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from equity_signals.contexts.signals.domain.entities import SignalDirection


@dataclass(frozen=True, slots=True, order=True)
class DatedSignal:
    """
    Directional event produced by a strategy tree node.
    """

    date: date
    direction: SignalDirection = SignalDirection.BULLISH

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", SignalDirection(self.direction))
