"""
Fixed-precision decimal implementation of moving-average indicators.

Related: equity_signals.contexts.indicators.application.ports.indicator_calculator,
  equity_signals.contexts.indicators.application.services.input_validator
"""

from __future__ import annotations

from decimal import Context, Decimal
from typing import Sequence

from equity_signals.contexts.indicators.application.services import (
    validate_prices,
    validate_series,
)
from equity_signals.contexts.indicators.domain.entities import IndicatorSeries
from equity_signals.platform.errors import require_positive_int
from equity_signals.shared_kernel.primitives import TradingDayPrice, new_math_context


class SimpleMovingAverage:
    """
    Arithmetic mean of the closing price over `lookback` consecutive bars.

    Output entry `i` is defined for `i >= lookback - 1`; earlier entries are `None`.
    `days_of_values` is the number of trailing values the caller wants materialized and
    only raises the minimum input length.

    Related:
      - src/equity_signals/contexts/signals/application/services/rules/gradient.py
      - src/equity_signals/contexts/indicators/adapters/outbound/compute_decimal/momentum.py
    """

    def __init__(self, *, lookback: int, days_of_values: int = 1) -> None:
        self._lookback = require_positive_int(value=lookback, name="sma.lookback")
        self._days_of_values = require_positive_int(
            value=days_of_values,
            name="sma.days_of_values",
        )

    @property
    def lookback(self) -> int:
        return self._lookback

    @property
    def minimum_number_of_prices(self) -> int:
        return self._lookback + self._days_of_values - 1

    def calculate(self, prices: Sequence[TradingDayPrice]) -> IndicatorSeries:
        """
        Compute the closing-price SMA aligned to `prices`.

        Args:
            prices: Bars sorted ascending by date.
        Returns:
            IndicatorSeries: Full-length series with `lookback - 1` leading `None` entries.
        Assumptions:
            Window sums are exact decimal sums, so a constant series yields exactly its price.
        Raises:
            InsufficientDataError: If fewer than `minimum_number_of_prices` bars are given.
        Side Effects:
            None.
        """
        validate_prices(prices, minimum=self.minimum_number_of_prices)
        ctx = new_math_context()
        values = sma_values(
            [price.closing_price for price in prices],
            lookback=self._lookback,
            ctx=ctx,
        )
        return IndicatorSeries.for_prices(prices=prices, values=values)

    def calculate_values(
        self,
        values: Sequence[Decimal | None],
        *,
        dates: Sequence,
    ) -> IndicatorSeries:
        """
        Smooth an arbitrary nullable series (for example stochastic %K).

        Args:
            values: Nullable values in date order.
            dates: Dates aligned to `values`.
        Returns:
            IndicatorSeries: Full-length SMA of the defined run.
        Assumptions:
            Leading nulls are skipped; the defined run must be consecutive.
        Raises:
            InsufficientDataError: If the defined run is shorter than `lookback`.
        Side Effects:
            None.
        """
        validate_series(values, minimum=self._lookback)
        ctx = new_math_context()
        return IndicatorSeries(
            dates=tuple(dates),
            values=tuple(sma_values(values, lookback=self._lookback, ctx=ctx)),
        )


class ExponentialMovingAverage:
    """
    Exponential moving average of the closing price.

    Recurrence: `ema[i] = (close[i] - ema[i-1]) * k + ema[i-1]` with `k = 2 / (lookback + 1)`,
    seeded at index `lookback - 1` with the SMA of the first `lookback` closes.

    Related:
      - src/equity_signals/contexts/indicators/adapters/outbound/compute_decimal/trend.py
      - src/equity_signals/contexts/signals/application/services/rules/gradient.py
    """

    def __init__(self, *, lookback: int, days_of_values: int = 1) -> None:
        self._lookback = require_positive_int(value=lookback, name="ema.lookback")
        self._days_of_values = require_positive_int(
            value=days_of_values,
            name="ema.days_of_values",
        )

    @property
    def lookback(self) -> int:
        return self._lookback

    @property
    def minimum_number_of_prices(self) -> int:
        return self._lookback + self._days_of_values - 1

    def calculate(self, prices: Sequence[TradingDayPrice]) -> IndicatorSeries:
        """
        Compute the closing-price EMA aligned to `prices`.

        Args:
            prices: Bars sorted ascending by date.
        Returns:
            IndicatorSeries: Full-length series with `lookback - 1` leading `None` entries.
        Assumptions:
            Smoothing constant is computed in a fresh 34-digit decimal context.
        Raises:
            InsufficientDataError: If fewer than `minimum_number_of_prices` bars are given.
        Side Effects:
            None.
        """
        validate_prices(prices, minimum=self.minimum_number_of_prices)
        ctx = new_math_context()
        values = ema_values(
            [price.closing_price for price in prices],
            lookback=self._lookback,
            ctx=ctx,
        )
        return IndicatorSeries.for_prices(prices=prices, values=values)

    def calculate_values(
        self,
        values: Sequence[Decimal | None],
        *,
        dates: Sequence,
    ) -> IndicatorSeries:
        """
        Smooth an arbitrary nullable series over its trailing run of defined values.

        Args:
            values: Nullable values in date order (for example the MACD line).
            dates: Dates aligned to `values`.
        Returns:
            IndicatorSeries: Full-length EMA seeded `lookback - 1` entries into the trailing
                consecutive run.
        Assumptions:
            Values before the last gap are not smoothed.
        Raises:
            InsufficientDataError: If the defined run is shorter than `lookback`.
        Side Effects:
            None.
        """
        validate_series(values, minimum=self._lookback)
        ctx = new_math_context()
        return IndicatorSeries(
            dates=tuple(dates),
            values=tuple(ema_values(values, lookback=self._lookback, ctx=ctx)),
        )


def sma_values(
    values: Sequence[Decimal | None],
    *,
    lookback: int,
    ctx: Context,
) -> list[Decimal | None]:
    """
    Compute a full-length SMA over a nullable series.

    Args:
        values: Nullable input values.
        lookback: Window length.
        ctx: Decimal context owned by the caller.
    Returns:
        list[Decimal | None]: SMA values; an entry is defined only when its whole window is.
    Assumptions:
        Each window is summed afresh, so no rounding drift accumulates along the series.
    Raises:
        None.
    Side Effects:
        None.
    """
    out: list[Decimal | None] = [None] * len(values)
    divisor = Decimal(lookback)
    run = 0
    for index, value in enumerate(values):
        if value is None:
            run = 0
            continue
        run += 1
        if run < lookback:
            continue
        window_sum = Decimal(0)
        for window_value in values[index - lookback + 1 : index + 1]:
            window_sum = ctx.add(window_sum, window_value)
        out[index] = ctx.divide(window_sum, divisor)
    return out


def ema_values(
    values: Sequence[Decimal | None],
    *,
    lookback: int,
    ctx: Context,
) -> list[Decimal | None]:
    """
    Compute a full-length EMA over a nullable series.

    Args:
        values: Nullable input values.
        lookback: Smoothing period.
        ctx: Decimal context owned by the caller.
    Returns:
        list[Decimal | None]: EMA values over the trailing consecutive run of defined
            inputs, starting `lookback - 1` entries into that run.
    Assumptions:
        Values before a gap cannot reach the latest output and stay undefined. Seed is the
        simple mean of the first `lookback` values of the run.
    Raises:
        None.
    Side Effects:
        None.
    """
    out: list[Decimal | None] = [None] * len(values)
    last = next(
        (index for index in range(len(values) - 1, -1, -1) if values[index] is not None),
        None,
    )
    if last is None:
        return out
    first = last
    while first > 0 and values[first - 1] is not None:
        first -= 1
    seed_index = first + lookback - 1
    if seed_index > last:
        return out

    seed_window = values[first : seed_index + 1]
    seed_sum = Decimal(0)
    for value in seed_window:
        seed_sum = ctx.add(seed_sum, value)
    previous = ctx.divide(seed_sum, Decimal(lookback))
    out[seed_index] = previous

    smoothing = ctx.divide(Decimal(2), Decimal(lookback + 1))
    for index in range(seed_index + 1, last + 1):
        previous = ctx.add(
            ctx.multiply(ctx.subtract(values[index], previous), smoothing),
            previous,
        )
        out[index] = previous
    return out


__all__ = [
    "ExponentialMovingAverage",
    "SimpleMovingAverage",
    "ema_values",
    "sma_values",
]
