from __future__ import annotations

from typing import Protocol

from equity_signals.shared_kernel.primitives import DateRange, Ticker, TradingDayPrice


class PriceHistory(Protocol):
    """
    PriceHistory: read-only source of daily bars for one ticker.

    Contract:
    - returns bars with date in the half-open `date_range`, sorted ascending by date
    - an unknown ticker yields an empty tuple

    Related:
      - src/equity_signals/contexts/prices/adapters/outbound/csv/csv_price_history.py
      - apps/cli/commands/analyse.py
    """

    def prices(self, ticker: Ticker, date_range: DateRange) -> tuple[TradingDayPrice, ...]:
        ...
