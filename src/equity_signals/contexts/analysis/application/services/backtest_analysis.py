from __future__ import annotations

import logging
from typing import Sequence

from equity_signals.contexts.analysis.application.ports import SignalSink
from equity_signals.contexts.analysis.domain.entities import AnalysisResult
from equity_signals.contexts.filters.domain.entities import BuySignal, SellSignal
from equity_signals.contexts.indicators.domain.errors import InsufficientDataError
from equity_signals.contexts.strategy.application.services import TradingStrategy
from equity_signals.shared_kernel.primitives import TradingDayPrice, sort_by_date

log = logging.getLogger(__name__)


class BacktestAnalysis:
    """
    Replay a price history day by day and forward each day's signals to a sink.

    Every simulated day sees only bars up to and including itself, so no signal is computed
    from future prices.

    Related:
      - src/equity_signals/contexts/strategy/application/services/trading_strategy.py
      - src/equity_signals/contexts/analysis/application/services/live_analysis.py
      - apps/cli/commands/analyse.py
    """

    def __init__(self, strategy: TradingStrategy, sink: SignalSink) -> None:
        self._strategy = strategy
        self._sink = sink

    def run(self, prices: Sequence[TradingDayPrice]) -> AnalysisResult:
        """
        Walk the history from the first day with a full lead-in to the last bar.

        Args:
            prices: Bars of one ticker, in any order.
        Returns:
            AnalysisResult: Buy and sell signals emitted over the walk.
        Assumptions:
            Each day is analysed over a trailing window of `required + 1` bars so that date
            driven entries can tell the first bar on or after a due date.
        Raises:
            InsufficientDataError: If the history is shorter than the strategy lead-in.
            ValueError: If two bars share a date.
        Side Effects:
            Calls `sink.on_buy` / `sink.on_sell` once per emitted signal, in date order.
        """
        ordered = sort_by_date(prices)
        required = self._strategy.required_trading_prices()
        if not ordered or len(ordered) < required:
            raise InsufficientDataError(
                f"strategy {self._strategy.name} requires {required} trading days, "
                f"got {len(ordered)}",
                required=required,
                given=len(ordered),
            )

        ticker = ordered[0].ticker
        first_index = max(required - 1, 0)
        log.info(
            "backtest started ticker=%s strategy=%s bars=%s required=%s",
            ticker,
            self._strategy.name,
            len(ordered),
            required,
        )

        buys: list[BuySignal] = []
        sells: list[SellSignal] = []
        for index in range(first_index, len(ordered)):
            today = ordered[index]
            window = ordered[max(0, index - required) : index + 1]
            for buy in self._strategy.entry_signals(window):
                if buy.date == today.date:
                    buys.append(buy)
                    self._sink.on_buy(ticker, buy, today)
            for sell in self._strategy.exit_signals(window):
                if sell.date == today.date:
                    sells.append(sell)
                    self._sink.on_sell(ticker, sell, today)

        log.info(
            "backtest finished ticker=%s strategy=%s buys=%s sells=%s",
            ticker,
            self._strategy.name,
            len(buys),
            len(sells),
        )
        return AnalysisResult(
            ticker=ticker,
            first_date=ordered[first_index].date,
            last_date=ordered[-1].date,
            buy_signals=tuple(buys),
            sell_signals=tuple(sells),
        )


__all__ = ["BacktestAnalysis"]
