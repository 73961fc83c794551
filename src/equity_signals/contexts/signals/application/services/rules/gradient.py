from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from equity_signals.contexts.indicators.domain.entities import IndicatorSeries
from equity_signals.contexts.signals.domain.entities import (
    GradientType,
    SignalDirection,
    SignalRange,
)


@dataclass(frozen=True, slots=True)
class GradientRule:
    """
    Emit a signal on every day the moving-average gradient matches `gradient_type`.

    The first defined value has no predecessor and never signals, which is why gradient
    generators ask for one extra trading day.

    Related:
      - src/equity_signals/contexts/signals/domain/entities/gradient_type.py
      - src/equity_signals/contexts/signals/application/services/builders.py
    """

    gradient_type: GradientType
    direction: SignalDirection

    def __post_init__(self) -> None:
        object.__setattr__(self, "gradient_type", GradientType(self.gradient_type))
        object.__setattr__(self, "direction", SignalDirection(self.direction))

    def evaluate(
        self,
        output: IndicatorSeries,
        *,
        signal_range: SignalRange,
    ) -> list[tuple[date, SignalDirection]]:
        events: list[tuple[date, SignalDirection]] = []
        previous = None
        for _, day, value in output.defined():
            if previous is not None and signal_range.contains(day):
                if GradientType.classify(previous, value) is self.gradient_type:
                    events.append((day, self.direction))
            previous = value
        return events


__all__ = ["GradientRule"]
