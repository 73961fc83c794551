from __future__ import annotations

from typing import Protocol

from equity_signals.contexts.filters.domain.entities import BuySignal, SellSignal
from equity_signals.shared_kernel.primitives import TradingDayPrice


class SignalSink(Protocol):
    """
    SignalSink: receiver of buy/sell instructions (brokerage or cash-account boundary).

    Contract:
    - on_buy/on_sell are called once per signal, in date order, with the bar of the signal day
    - implementations must not mutate the price bar

    Related:
      - src/equity_signals/contexts/analysis/adapters/outbound/sinks/recording_signal_sink.py
      - src/equity_signals/contexts/analysis/adapters/outbound/sinks/logging_signal_sink.py
    """

    def on_buy(self, ticker: str, signal: BuySignal, price: TradingDayPrice) -> None:
        ...

    def on_sell(self, ticker: str, signal: SellSignal, price: TradingDayPrice) -> None:
        ...
