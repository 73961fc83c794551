from __future__ import annotations

import logging
from datetime import timedelta
from typing import Sequence

from equity_signals.contexts.analysis.application.ports import SignalSink
from equity_signals.contexts.analysis.domain.entities import AnalysisResult
from equity_signals.contexts.indicators.domain.errors import InsufficientDataError
from equity_signals.contexts.strategy.application.services import TradingStrategy
from equity_signals.platform.errors import require_positive_int
from equity_signals.platform.time import Clock
from equity_signals.shared_kernel.primitives import TradingDayPrice, sort_by_date

log = logging.getLogger(__name__)


class LiveAnalysis:
    """
    Run a strategy once over the trailing window ending at the latest bar not after today.

    Signals dated within the last `window_days` calendar days are forwarded to the sink for
    manual action.

    Related:
      - src/equity_signals/contexts/analysis/application/services/backtest_analysis.py
      - src/equity_signals/platform/time/clock.py
      - apps/api/routes/analysis.py
    """

    def __init__(
        self,
        strategy: TradingStrategy,
        sink: SignalSink,
        *,
        window_days: int,
        clock: Clock,
    ) -> None:
        self._strategy = strategy
        self._sink = sink
        self._window_days = require_positive_int(value=window_days, name="live.window_days")
        self._clock = clock

    def run(self, prices: Sequence[TradingDayPrice]) -> AnalysisResult:
        """
        Analyse the trailing window and emit its recent signals.

        Args:
            prices: Bars of one ticker, in any order; bars after `clock.today()` are ignored.
        Returns:
            AnalysisResult: Signals dated within `[latest - window_days, latest]`.
        Assumptions:
            The window holds `required + window_days` bars ending at the latest usable bar.
        Raises:
            InsufficientDataError: If fewer usable bars than the strategy lead-in exist.
            ValueError: If two bars share a date.
        Side Effects:
            Calls `sink.on_buy` / `sink.on_sell` once per emitted signal, in date order.
        """
        today = self._clock.today()
        usable = [price for price in sort_by_date(prices) if price.date <= today]
        required = self._strategy.required_trading_prices()
        if not usable or len(usable) < required:
            raise InsufficientDataError(
                f"strategy {self._strategy.name} requires {required} trading days "
                f"up to {today}, got {len(usable)}",
                required=required,
                given=len(usable),
            )

        window = usable[-(required + self._window_days) :]
        ticker = window[-1].ticker
        latest = window[-1].date
        earliest = latest - timedelta(days=self._window_days)
        bar_by_date = {price.date: price for price in window}

        buys = tuple(
            signal
            for signal in self._strategy.entry_signals(window)
            if earliest <= signal.date <= latest
        )
        sells = tuple(
            signal
            for signal in self._strategy.exit_signals(window)
            if earliest <= signal.date <= latest
        )
        for buy in buys:
            self._sink.on_buy(ticker, buy, bar_by_date[buy.date])
        for sell in sells:
            self._sink.on_sell(ticker, sell, bar_by_date[sell.date])

        log.info(
            "live analysis finished ticker=%s strategy=%s latest=%s buys=%s sells=%s",
            ticker,
            self._strategy.name,
            latest,
            len(buys),
            len(sells),
        )
        return AnalysisResult(
            ticker=ticker,
            first_date=max(earliest, window[0].date),
            last_date=latest,
            buy_signals=buys,
            sell_signals=sells,
        )


__all__ = ["LiveAnalysis"]
