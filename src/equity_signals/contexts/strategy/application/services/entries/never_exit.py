from __future__ import annotations

from typing import Sequence

from equity_signals.contexts.strategy.domain.entities import DatedSignal
from equity_signals.shared_kernel.primitives import TradingDayPrice


class NeverExit:
    """Exit node that holds forever."""

    def required_trading_prices(self) -> int:
        return 0

    def analyse(self, prices: Sequence[TradingDayPrice]) -> list[DatedSignal]:
        return []
