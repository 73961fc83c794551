from __future__ import annotations

from typing import Sequence

from equity_signals.contexts.filters.application.services import SignalAnalysis
from equity_signals.contexts.signals.domain.entities import SignalDirection
from equity_signals.contexts.strategy.domain.entities import DatedSignal
from equity_signals.shared_kernel.primitives import TradingDayPrice


class AnalysisEntry:
    """
    Node running a multi-generator `SignalAnalysis` and emitting its filtered dates.
    """

    def __init__(
        self,
        analysis: SignalAnalysis,
        *,
        direction: SignalDirection | str = SignalDirection.BULLISH,
    ) -> None:
        self._analysis = analysis
        self._direction = SignalDirection(direction)

    def required_trading_prices(self) -> int:
        return self._analysis.maximum_number_of_trading_days_required

    def analyse(self, prices: Sequence[TradingDayPrice]) -> list[DatedSignal]:
        return [
            DatedSignal(date=day, direction=self._direction)
            for day in sorted(self._analysis.analyse(prices).dates())
        ]
