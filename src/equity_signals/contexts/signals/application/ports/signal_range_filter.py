from __future__ import annotations

from typing import Protocol, Sequence

from equity_signals.contexts.signals.domain.entities import SignalRange
from equity_signals.shared_kernel.primitives import TradingDayPrice


class SignalRangeFilter(Protocol):
    """
    Port deciding which dates of a price series a generator reports signals for.

    Related:
      - src/equity_signals/contexts/signals/application/services/signal_range_filters.py
      - src/equity_signals/contexts/signals/application/services/indicator_signal_generator.py
    """

    def signal_range(self, prices: Sequence[TradingDayPrice]) -> SignalRange:
        """
        Resolve the inclusive signal window for `prices`.

        Args:
            prices: Non-empty bars sorted ascending by date.
        Returns:
            SignalRange: Inclusive date window.
        Assumptions:
            Callers never pass an empty series.
        Raises:
            ValueError: If `prices` is empty.
        Side Effects:
            None.
        """
        ...
