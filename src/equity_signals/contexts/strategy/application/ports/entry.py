from __future__ import annotations

from typing import Protocol, Sequence

from equity_signals.contexts.strategy.domain.entities import DatedSignal
from equity_signals.shared_kernel.primitives import TradingDayPrice


class Entry(Protocol):
    """
    Node of a strategy entry or exit tree.

    Related:
      - src/equity_signals/contexts/strategy/application/services/entries/
      - src/equity_signals/contexts/strategy/application/services/trading_strategy.py
    """

    def required_trading_prices(self) -> int:
        """
        Number of trailing bars the node needs before it can signal.

        Args:
            None.
        Returns:
            int: Non-negative number of bars.
        Assumptions:
            Fixed at construction.
        Raises:
            None.
        Side Effects:
            None.
        """
        ...

    def analyse(self, prices: Sequence[TradingDayPrice]) -> list[DatedSignal]:
        """
        Produce the node's signals for `prices`.

        Args:
            prices: Bars sorted ascending by date.
        Returns:
            list[DatedSignal]: Signals sorted by date, one per date and direction.
        Assumptions:
            Nodes are stateless between calls.
        Raises:
            InsufficientDataError: If an indicator node lacks data.
        Side Effects:
            None.
        """
        ...
