from __future__ import annotations

from typing import Sequence

from equity_signals.contexts.filters.domain.entities import (
    BY_DATE,
    BuySignal,
    SellSignal,
    SignalOrdering,
    SignalSet,
)
from equity_signals.contexts.signals.domain.entities import SignalDirection
from equity_signals.contexts.strategy.application.ports import Entry
from equity_signals.shared_kernel.primitives import TradingDayPrice


class TradingStrategy:
    """
    Entry tree producing buy signals and exit tree producing sell signals.

    Entries contribute their bullish signals, exits their bearish ones.

    Related:
      - src/equity_signals/contexts/strategy/application/services/strategy_factory.py
      - src/equity_signals/contexts/analysis/application/services/backtest_analysis.py
      - src/equity_signals/contexts/analysis/application/services/live_analysis.py
    """

    def __init__(self, entry: Entry, exit: Entry, *, name: str = "strategy") -> None:
        self._entry = entry
        self._exit = exit
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def required_trading_prices(self) -> int:
        return max(self._entry.required_trading_prices(), self._exit.required_trading_prices())

    def entry_signals(
        self,
        prices: Sequence[TradingDayPrice],
        *,
        ordering: SignalOrdering = BY_DATE,
    ) -> SignalSet[BuySignal]:
        return SignalSet(
            (
                BuySignal(date=signal.date)
                for signal in self._entry.analyse(prices)
                if signal.direction is SignalDirection.BULLISH
            ),
            ordering=ordering,
        )

    def exit_signals(
        self,
        prices: Sequence[TradingDayPrice],
        *,
        ordering: SignalOrdering = BY_DATE,
    ) -> SignalSet[SellSignal]:
        return SignalSet(
            (
                SellSignal(date=signal.date)
                for signal in self._exit.analyse(prices)
                if signal.direction is SignalDirection.BEARISH
            ),
            ordering=ordering,
        )


__all__ = ["TradingStrategy"]
