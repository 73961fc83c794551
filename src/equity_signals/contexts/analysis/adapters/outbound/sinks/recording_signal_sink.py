from __future__ import annotations

from dataclasses import dataclass, field

from equity_signals.contexts.analysis.application.ports import SignalSink
from equity_signals.contexts.filters.domain.entities import BuySignal, SellSignal
from equity_signals.shared_kernel.primitives import TradingDayPrice


@dataclass(frozen=True, slots=True)
class RecordedSignal:
    """One sink call: ticker, signal and the bar of the signal day."""

    ticker: str
    signal: BuySignal | SellSignal
    price: TradingDayPrice


@dataclass(slots=True)
class RecordingSignalSink(SignalSink):
    """
    In-memory SignalSink keeping every call in arrival order.

    Used by the API route and tests; not safe to share between threads.
    """

    buys: list[RecordedSignal] = field(default_factory=list)
    sells: list[RecordedSignal] = field(default_factory=list)

    def on_buy(self, ticker: str, signal: BuySignal, price: TradingDayPrice) -> None:
        self.buys.append(RecordedSignal(ticker=ticker, signal=signal, price=price))

    def on_sell(self, ticker: str, signal: SellSignal, price: TradingDayPrice) -> None:
        self.sells.append(RecordedSignal(ticker=ticker, signal=signal, price=price))
