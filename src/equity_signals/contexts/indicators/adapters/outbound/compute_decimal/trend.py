"""
Fixed-precision decimal implementation of trend indicators (MACD).

Related: equity_signals.contexts.indicators.adapters.outbound.compute_decimal.ma,
  equity_signals.contexts.indicators.domain.entities.indicator_lines
"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from equity_signals.contexts.indicators.application.services import validate_prices
from equity_signals.contexts.indicators.domain.entities import IndicatorSeries, MacdLines
from equity_signals.platform.errors import InvalidConfigurationError, require_positive_int
from equity_signals.shared_kernel.primitives import TradingDayPrice, new_math_context

from .ma import ema_values


class MovingAverageConvergenceDivergence:
    """
    MACD line (`EMA(fast) - EMA(slow)`) and its `EMA(signal)` signal line.

    The MACD line is defined from index `slow - 1`, the signal line from
    `slow - 1 + signal - 1`.

    Related:
      - src/equity_signals/contexts/indicators/domain/entities/indicator_lines.py
      - src/equity_signals/contexts/signals/application/services/rules/crossover.py
    """

    def __init__(self, *, fast: int = 12, slow: int = 26, signal: int = 9) -> None:
        self._fast = require_positive_int(value=fast, name="macd.fast")
        self._slow = require_positive_int(value=slow, name="macd.slow")
        self._signal = require_positive_int(value=signal, name="macd.signal")
        if self._slow <= self._fast:
            raise InvalidConfigurationError(
                f"macd.slow must be > macd.fast, got slow={slow} fast={fast}"
            )

    @property
    def minimum_number_of_prices(self) -> int:
        return self._fast + self._slow + self._signal

    def calculate(self, prices: Sequence[TradingDayPrice]) -> MacdLines:
        """
        Compute MACD and signal lines aligned to `prices`.

        Args:
            prices: Bars sorted ascending by date.
        Returns:
            MacdLines: Full-length MACD and signal-line series.
        Assumptions:
            Both EMAs share one decimal context allocated for this call.
        Raises:
            InsufficientDataError: If fewer than `fast + slow + signal` bars are given.
        Side Effects:
            None.
        """
        validate_prices(prices, minimum=self.minimum_number_of_prices)
        ctx = new_math_context()
        closes = [price.closing_price for price in prices]
        fast_ema = ema_values(closes, lookback=self._fast, ctx=ctx)
        slow_ema = ema_values(closes, lookback=self._slow, ctx=ctx)

        macd: list[Decimal | None] = []
        for fast_value, slow_value in zip(fast_ema, slow_ema):
            if fast_value is None or slow_value is None:
                macd.append(None)
            else:
                macd.append(ctx.subtract(fast_value, slow_value))
        signal_line = ema_values(macd, lookback=self._signal, ctx=ctx)

        return MacdLines(
            macd=IndicatorSeries.for_prices(prices=prices, values=macd),
            signal_line=IndicatorSeries.for_prices(prices=prices, values=signal_line),
        )


__all__ = ["MovingAverageConvergenceDivergence"]
