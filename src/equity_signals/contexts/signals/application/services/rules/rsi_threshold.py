from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from equity_signals.contexts.indicators.domain.entities import IndicatorSeries
from equity_signals.contexts.signals.domain.entities import SignalDirection, SignalRange
from equity_signals.platform.errors import InvalidConfigurationError
from equity_signals.shared_kernel.primitives import to_decimal


@dataclass(frozen=True, slots=True)
class RsiThresholdRule:
    """
    RSI crossing into the oversold or overbought zone.

    Bullish: yesterday at or above `oversold` and today below it.
    Bearish: yesterday at or below `overbought` and today above it.

    Related:
      - src/equity_signals/contexts/indicators/adapters/outbound/compute_decimal/momentum.py
      - src/equity_signals/contexts/signals/application/services/builders.py
    """

    direction: SignalDirection = SignalDirection.BULLISH
    oversold: Decimal = Decimal(30)
    overbought: Decimal = Decimal(70)

    def __post_init__(self) -> None:
        """
        Normalize thresholds and validate `0 <= oversold < overbought <= 100`.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Thresholds are given as int, decimal string or Decimal.
        Raises:
            InvalidConfigurationError: If thresholds are out of order or out of range.
        Side Effects:
            Replaces threshold fields with Decimal values.
        """
        object.__setattr__(self, "direction", SignalDirection(self.direction))
        try:
            oversold = to_decimal(self.oversold, field_name="rsi.oversold")
            overbought = to_decimal(self.overbought, field_name="rsi.overbought")
        except (TypeError, ValueError) as error:
            raise InvalidConfigurationError(str(error)) from error
        if not Decimal(0) <= oversold < overbought <= Decimal(100):
            raise InvalidConfigurationError(
                "rsi thresholds require 0 <= oversold < overbought <= 100, "
                f"got oversold={oversold} overbought={overbought}"
            )
        object.__setattr__(self, "oversold", oversold)
        object.__setattr__(self, "overbought", overbought)

    def evaluate(
        self,
        output: IndicatorSeries,
        *,
        signal_range: SignalRange,
    ) -> list[tuple[date, SignalDirection]]:
        events: list[tuple[date, SignalDirection]] = []
        for index in range(1, len(output)):
            today = output.dates[index]
            if not signal_range.contains(today):
                continue
            yesterday_value = output.value_at(index - 1)
            today_value = output.value_at(index)
            if yesterday_value is None or today_value is None:
                continue
            if self.direction is SignalDirection.BULLISH:
                crossed = yesterday_value >= self.oversold and today_value < self.oversold
            else:
                crossed = yesterday_value <= self.overbought and today_value > self.overbought
            if crossed:
                events.append((today, self.direction))
        return events


__all__ = ["RsiThresholdRule"]
