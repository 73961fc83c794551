from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from equity_signals.contexts.signals.domain.entities import SignalRange
from equity_signals.shared_kernel.primitives import TradingDayPrice


@dataclass(frozen=True, slots=True)
class WholeSeriesSignalRangeFilter:
    """
    Report signals anywhere from the first to the last bar.
    """

    def signal_range(self, prices: Sequence[TradingDayPrice]) -> SignalRange:
        _require_prices(prices)
        return SignalRange(earliest=prices[0].date, latest=prices[-1].date)


def _require_prices(prices: Sequence[TradingDayPrice]) -> None:
    if not prices:
        raise ValueError("signal range requires at least one trading day price")


__all__ = ["WholeSeriesSignalRangeFilter"]
