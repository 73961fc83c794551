from __future__ import annotations

from datetime import date, timedelta

from equity_signals.contexts.filters.application.ports import SignalBuckets, SignalFilter
from equity_signals.contexts.filters.domain.entities import BY_DATE, SignalOrdering, SignalSet
from equity_signals.platform.errors import InvalidConfigurationError, require_non_negative_int


class TimePeriodSignalFilterDecorator:
    """
    Keep only the decorated filter's signals dated within `[start, end]` inclusive.
    """

    def __init__(self, inner: SignalFilter, *, start: date, end: date) -> None:
        if start > end:
            raise InvalidConfigurationError(
                f"time period requires start <= end, got start={start} end={end}"
            )
        self._inner = inner
        self._start = start
        self._end = end

    def required_trading_prices(self) -> int:
        return self._inner.required_trading_prices()

    def apply(
        self,
        signals: SignalBuckets,
        *,
        latest_trading_date: date,
        ordering: SignalOrdering = BY_DATE,
    ) -> SignalSet:
        produced = self._inner.apply(
            signals,
            latest_trading_date=latest_trading_date,
            ordering=ordering,
        )
        return produced.filtered(lambda signal: self._start <= signal.date <= self._end)


class RollingTimePeriodSignalFilterDecorator:
    """
    Keep only signals within `[latest_trading_date - within, latest_trading_date]`.

    Related:
      - src/equity_signals/contexts/filters/application/services/signal_analysis.py
      - src/equity_signals/contexts/strategy/adapters/outbound/config/strategy_tree_parser.py
    """

    def __init__(self, inner: SignalFilter, *, within: timedelta | int) -> None:
        if isinstance(within, timedelta):
            if within < timedelta(0):
                raise InvalidConfigurationError(f"rolling window must be >= 0, got {within}")
            self._within = within
        else:
            self._within = timedelta(
                days=require_non_negative_int(value=within, name="rolling.within_days")
            )
        self._inner = inner

    def required_trading_prices(self) -> int:
        return self._inner.required_trading_prices()

    def apply(
        self,
        signals: SignalBuckets,
        *,
        latest_trading_date: date,
        ordering: SignalOrdering = BY_DATE,
    ) -> SignalSet:
        earliest = latest_trading_date - self._within
        produced = self._inner.apply(
            signals,
            latest_trading_date=latest_trading_date,
            ordering=ordering,
        )
        return produced.filtered(lambda signal: earliest <= signal.date <= latest_trading_date)


__all__ = [
    "RollingTimePeriodSignalFilterDecorator",
    "TimePeriodSignalFilterDecorator",
]
