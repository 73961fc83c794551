"""
Crossover rules for two-line indicators (MACD, stochastic).

Related: equity_signals.contexts.indicators.domain.entities.indicator_lines
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from equity_signals.contexts.indicators.domain.entities import (
    IndicatorSeries,
    MacdLines,
    StochasticLines,
)
from equity_signals.contexts.signals.domain.entities import SignalDirection, SignalRange

_ZERO = Decimal(0)


class CrossoverLine(str, Enum):
    """
    Line the MACD crosses: its own signal line or the zero origin.
    """

    SIGNAL_LINE = "signal_line"
    ZERO_LINE = "zero_line"


@dataclass(frozen=True, slots=True)
class MacdCrossoverRule:
    """
    MACD crossing its signal line or the zero line.

    Bullish: `yesterday_macd <= yesterday_other`, `today_macd >= today_other` and the MACD
    rose. Bearish mirrors every comparison.

    Related:
      - src/equity_signals/contexts/indicators/adapters/outbound/compute_decimal/trend.py
      - src/equity_signals/contexts/signals/application/services/builders.py
    """

    direction: SignalDirection = SignalDirection.BULLISH
    line: CrossoverLine = CrossoverLine.SIGNAL_LINE

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", SignalDirection(self.direction))
        object.__setattr__(self, "line", CrossoverLine(self.line))

    def evaluate(
        self,
        output: MacdLines,
        *,
        signal_range: SignalRange,
    ) -> list[tuple[date, SignalDirection]]:
        other = output.signal_line if self.line is CrossoverLine.SIGNAL_LINE else None
        return crossover_events(
            output.macd,
            other,
            direction=self.direction,
            signal_range=signal_range,
        )


@dataclass(frozen=True, slots=True)
class StochasticCrossoverRule:
    """
    Stochastic %K crossing %D with the same comparator shape as MACD.
    """

    direction: SignalDirection = SignalDirection.BULLISH

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", SignalDirection(self.direction))

    def evaluate(
        self,
        output: StochasticLines,
        *,
        signal_range: SignalRange,
    ) -> list[tuple[date, SignalDirection]]:
        return crossover_events(
            output.percentage_k,
            output.percentage_d,
            direction=self.direction,
            signal_range=signal_range,
        )


def crossover_events(
    primary: IndicatorSeries,
    other: IndicatorSeries | None,
    *,
    direction: SignalDirection,
    signal_range: SignalRange,
) -> list[tuple[date, SignalDirection]]:
    """
    Find the days on which `primary` crosses `other` in `direction`.

    Args:
        primary: Line that moves through the other (MACD, %K).
        other: Line being crossed; `None` means the zero line.
        direction: BULLISH for upward crossings, BEARISH for downward ones.
        signal_range: Inclusive window of reportable dates.
    Returns:
        list[tuple[date, SignalDirection]]: Crossing days in ascending order.
    Assumptions:
        Both lines share the calendar of `primary`; days where either line is undefined
        today or yesterday are skipped.
    Raises:
        None.
    Side Effects:
        None.
    """
    events: list[tuple[date, SignalDirection]] = []
    for index in range(1, len(primary)):
        today = primary.dates[index]
        if not signal_range.contains(today):
            continue
        yesterday_primary = primary.value_at(index - 1)
        today_primary = primary.value_at(index)
        yesterday_other = _ZERO if other is None else other.value_at(index - 1)
        today_other = _ZERO if other is None else other.value_at(index)
        if None in (yesterday_primary, today_primary, yesterday_other, today_other):
            continue

        if direction is SignalDirection.BULLISH:
            crossed = (
                yesterday_primary <= yesterday_other
                and today_primary >= today_other
                and today_primary > yesterday_primary
            )
        else:
            crossed = (
                yesterday_primary >= yesterday_other
                and today_primary <= today_other
                and today_primary < yesterday_primary
            )
        if crossed:
            events.append((today, direction))
    return events


__all__ = [
    "CrossoverLine",
    "MacdCrossoverRule",
    "StochasticCrossoverRule",
    "crossover_events",
]
