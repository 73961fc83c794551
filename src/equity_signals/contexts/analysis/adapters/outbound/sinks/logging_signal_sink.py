from __future__ import annotations

import logging

from equity_signals.contexts.analysis.application.ports import SignalSink
from equity_signals.contexts.filters.domain.entities import BuySignal, SellSignal
from equity_signals.shared_kernel.primitives import TradingDayPrice

log = logging.getLogger(__name__)


class LoggingSignalSink(SignalSink):
    """
    SignalSink writing one INFO line per signal for manual action.

    Related:
      - apps/cli/commands/analyse.py
    """

    def on_buy(self, ticker: str, signal: BuySignal, price: TradingDayPrice) -> None:
        log.info("buy signal ticker=%s date=%s close=%s", ticker, signal.date, price.closing_price)

    def on_sell(self, ticker: str, signal: SellSignal, price: TradingDayPrice) -> None:
        log.info(
            "sell signal ticker=%s date=%s close=%s",
            ticker,
            signal.date,
            price.closing_price,
        )
