from __future__ import annotations

from typing import Sequence

from equity_signals.contexts.signals.application.services import IndicatorSignalGenerator
from equity_signals.contexts.strategy.domain.entities import DatedSignal
from equity_signals.shared_kernel.primitives import TradingDayPrice

from .dated_signals import unique_by_date_and_direction


class IndicatorEntry:
    """
    Leaf node delegating to one indicator signal generator.
    """

    def __init__(self, generator: IndicatorSignalGenerator) -> None:
        self._generator = generator

    @property
    def generator(self) -> IndicatorSignalGenerator:
        return self._generator

    def required_trading_prices(self) -> int:
        return self._generator.required_number_of_trading_days

    def analyse(self, prices: Sequence[TradingDayPrice]) -> list[DatedSignal]:
        return unique_by_date_and_direction(
            DatedSignal(date=signal.date, direction=signal.direction)
            for signal in self._generator.generate(prices)
        )
