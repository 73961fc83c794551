"""
Fixed-precision decimal implementation of momentum oscillators (RSI, stochastic).

Related: equity_signals.contexts.indicators.adapters.outbound.compute_decimal.ma,
  equity_signals.contexts.indicators.domain.entities.rsi_smoothing
"""

from __future__ import annotations

from decimal import Context, Decimal
from typing import Sequence

from equity_signals.contexts.indicators.application.services import validate_prices
from equity_signals.contexts.indicators.domain.entities import (
    IndicatorSeries,
    RsiSmoothing,
    StochasticLines,
)
from equity_signals.platform.errors import InvalidConfigurationError, require_positive_int
from equity_signals.shared_kernel.primitives import (
    TradingDayPrice,
    new_math_context,
    round_half_up,
)

from .ma import sma_values

_HUNDRED = Decimal(100)
_SATURATED_RSI = Decimal("100.00")
_FLAT_STOCHASTIC = Decimal(50)


class RelativeStrengthIndex:
    """
    Relative strength index over closing prices.

    Output entries `0..lookback-1` are `None`; every defined value is rounded to two
    decimals HALF_UP and lies in `[0, 100]`. A window without losses saturates at `100`.

    Related:
      - src/equity_signals/contexts/indicators/domain/entities/rsi_smoothing.py
      - src/equity_signals/contexts/signals/application/services/rules/rsi_threshold.py
    """

    def __init__(
        self,
        *,
        lookback: int = 14,
        smoothing: RsiSmoothing | str = RsiSmoothing.WILDER,
    ) -> None:
        self._lookback = require_positive_int(value=lookback, name="rsi.lookback")
        try:
            self._smoothing = RsiSmoothing(smoothing)
        except ValueError as error:
            raise InvalidConfigurationError(
                f"rsi.smoothing must be one of {[item.value for item in RsiSmoothing]}, "
                f"got {smoothing!r}"
            ) from error

    @property
    def lookback(self) -> int:
        return self._lookback

    @property
    def smoothing(self) -> RsiSmoothing:
        return self._smoothing

    @property
    def minimum_number_of_prices(self) -> int:
        return self._lookback + 1

    def calculate(self, prices: Sequence[TradingDayPrice]) -> IndicatorSeries:
        """
        Compute RSI aligned to `prices`.

        Args:
            prices: Bars sorted ascending by date.
        Returns:
            IndicatorSeries: Full-length series; first defined entry at index `lookback`.
        Assumptions:
            Smoothing mode is fixed at construction.
        Raises:
            InsufficientDataError: If fewer than `lookback + 1` bars are given.
        Side Effects:
            None.
        """
        validate_prices(prices, minimum=self.minimum_number_of_prices)
        ctx = new_math_context()
        closes = [price.closing_price for price in prices]
        if self._smoothing is RsiSmoothing.REFERENCE:
            values = _reference_rsi(closes, lookback=self._lookback, ctx=ctx)
        else:
            values = _wilder_rsi(closes, lookback=self._lookback, ctx=ctx)
        return IndicatorSeries.for_prices(prices=prices, values=values)


class StochasticOscillator:
    """
    Stochastic oscillator with %K and %D lines.

    `%K_fast = 100 * (close - lowest_low) / (highest_high - lowest_low)` over `lookback` bars;
    `%K = SMA(k_smoothing)` of `%K_fast` and `%D = SMA(d_smoothing)` of `%K`.
    A flat window yields `50`.

    Related:
      - src/equity_signals/contexts/indicators/domain/entities/indicator_lines.py
      - src/equity_signals/contexts/signals/application/services/rules/crossover.py
    """

    def __init__(
        self,
        *,
        lookback: int = 14,
        k_smoothing: int = 1,
        d_smoothing: int = 3,
    ) -> None:
        self._lookback = require_positive_int(value=lookback, name="stochastic.lookback")
        self._k_smoothing = require_positive_int(
            value=k_smoothing,
            name="stochastic.k_smoothing",
        )
        self._d_smoothing = require_positive_int(
            value=d_smoothing,
            name="stochastic.d_smoothing",
        )

    @property
    def minimum_number_of_prices(self) -> int:
        return self._lookback + self._k_smoothing + self._d_smoothing - 2

    def calculate(self, prices: Sequence[TradingDayPrice]) -> StochasticLines:
        """
        Compute %K and %D aligned to `prices`.

        Args:
            prices: Bars sorted ascending by date.
        Returns:
            StochasticLines: Full-length %K and %D series.
        Assumptions:
            Low/high bounds come from `lowest_price`/`highest_price`, so OHLC invariants
            keep every value inside `[0, 100]`.
        Raises:
            InsufficientDataError: If fewer than `minimum_number_of_prices` bars are given.
        Side Effects:
            None.
        """
        validate_prices(prices, minimum=self.minimum_number_of_prices)
        ctx = new_math_context()

        fast_k: list[Decimal | None] = [None] * len(prices)
        for index in range(self._lookback - 1, len(prices)):
            window = prices[index - self._lookback + 1 : index + 1]
            lowest = min(price.lowest_price for price in window)
            highest = max(price.highest_price for price in window)
            price_range = ctx.subtract(highest, lowest)
            if price_range == 0:
                fast_k[index] = _FLAT_STOCHASTIC
                continue
            distance = ctx.subtract(prices[index].closing_price, lowest)
            fast_k[index] = ctx.divide(ctx.multiply(_HUNDRED, distance), price_range)

        percentage_k = sma_values(fast_k, lookback=self._k_smoothing, ctx=ctx)
        percentage_d = sma_values(percentage_k, lookback=self._d_smoothing, ctx=ctx)
        return StochasticLines(
            percentage_k=IndicatorSeries.for_prices(prices=prices, values=percentage_k),
            percentage_d=IndicatorSeries.for_prices(prices=prices, values=percentage_d),
        )


def _wilder_rsi(
    closes: Sequence[Decimal],
    *,
    lookback: int,
    ctx: Context,
) -> list[Decimal | None]:
    out: list[Decimal | None] = [None] * len(closes)
    divisor = Decimal(lookback)

    gain_sum = Decimal(0)
    loss_sum = Decimal(0)
    for index in range(1, lookback + 1):
        gain, loss = _split_delta(closes[index], closes[index - 1], ctx=ctx)
        gain_sum = ctx.add(gain_sum, gain)
        loss_sum = ctx.add(loss_sum, loss)
    average_gain = ctx.divide(gain_sum, divisor)
    average_loss = ctx.divide(loss_sum, divisor)
    out[lookback] = _rsi_from_averages(average_gain, average_loss, ctx=ctx)

    weight = Decimal(lookback - 1)
    for index in range(lookback + 1, len(closes)):
        gain, loss = _split_delta(closes[index], closes[index - 1], ctx=ctx)
        average_gain = ctx.divide(ctx.add(ctx.multiply(average_gain, weight), gain), divisor)
        average_loss = ctx.divide(ctx.add(ctx.multiply(average_loss, weight), loss), divisor)
        out[index] = _rsi_from_averages(average_gain, average_loss, ctx=ctx)
    return out


def _reference_rsi(
    closes: Sequence[Decimal],
    *,
    lookback: int,
    ctx: Context,
) -> list[Decimal | None]:
    out: list[Decimal | None] = [None] * len(closes)
    divisor = Decimal(lookback)

    # first bar compares to itself, so the seed covers lookback - 1 deltas
    up = Decimal(0)
    down = Decimal(0)
    for index in range(1, lookback):
        gain, loss = _split_delta(closes[index], closes[index - 1], ctx=ctx)
        up = ctx.add(up, gain)
        down = ctx.add(down, loss)
    up = round_half_up(ctx.divide(up, divisor))
    down = round_half_up(ctx.divide(down, divisor))

    smoothing = Decimal(repr(2 / (lookback + 1)))
    for index in range(lookback, len(closes)):
        today = closes[index]
        yesterday = closes[index - 1]
        if today > yesterday:
            up = ctx.add(
                ctx.multiply(ctx.subtract(ctx.subtract(today, yesterday), up), smoothing),
                up,
            )
            down = ctx.add(ctx.multiply(ctx.minus(down), smoothing), down)
        elif today < yesterday:
            up = ctx.add(ctx.multiply(ctx.minus(up), smoothing), up)
            down = ctx.add(
                ctx.multiply(ctx.subtract(ctx.subtract(yesterday, today), down), smoothing),
                down,
            )

        if down <= 0:
            out[index] = _SATURATED_RSI
            continue
        relative_strength = round_half_up(ctx.divide(up, down))
        out[index] = ctx.subtract(
            _HUNDRED,
            round_half_up(ctx.divide(_HUNDRED, ctx.add(Decimal(1), relative_strength))),
        )
    return out


def _split_delta(today: Decimal, yesterday: Decimal, *, ctx: Context) -> tuple[Decimal, Decimal]:
    delta = ctx.subtract(today, yesterday)
    if delta > 0:
        return delta, Decimal(0)
    return Decimal(0), ctx.minus(delta)


def _rsi_from_averages(average_gain: Decimal, average_loss: Decimal, *, ctx: Context) -> Decimal:
    if average_loss == 0:
        return _SATURATED_RSI
    relative_strength = ctx.divide(average_gain, average_loss)
    rsi = ctx.subtract(_HUNDRED, ctx.divide(_HUNDRED, ctx.add(Decimal(1), relative_strength)))
    return round_half_up(rsi)


__all__ = ["RelativeStrengthIndex", "StochasticOscillator"]
