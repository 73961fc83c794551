from __future__ import annotations

from typing import Sequence

from equity_signals.contexts.strategy.application.ports import Entry
from equity_signals.contexts.strategy.domain.entities import ConfirmedBy, DatedSignal
from equity_signals.shared_kernel.primitives import TradingDayPrice

from .dated_signals import unique_by_date_and_direction


class ConfirmationEntry:
    """
    Anchor sub-tree confirmed by a second sub-tree within a `ConfirmedBy` window.

    Each anchor signal yields the earliest confirmation signal inside its window; several
    anchors confirmed by the same signal collapse into one.

    Related:
      - src/equity_signals/contexts/strategy/domain/entities/confirmed_by.py
      - src/equity_signals/contexts/filters/application/services/indicator_signal_filters.py
    """

    def __init__(self, anchor: Entry, confirmed_by: ConfirmedBy, confirmation: Entry) -> None:
        self._anchor = anchor
        self._confirmed_by = confirmed_by
        self._confirmation = confirmation

    def required_trading_prices(self) -> int:
        return (
            self._anchor.required_trading_prices()
            + self._confirmed_by.required_trading_prices()
            + self._confirmation.required_trading_prices()
        )

    def analyse(self, prices: Sequence[TradingDayPrice]) -> list[DatedSignal]:
        """
        Confirm every anchor signal.

        Args:
            prices: Bars sorted ascending by date.
        Returns:
            list[DatedSignal]: Confirmation signals sorted by date, one per date and direction.
        Assumptions:
            The confirmation sub-tree is only evaluated when anchors exist.
        Raises:
            InsufficientDataError: If a sub-tree lacks data.
        Side Effects:
            None.
        """
        anchors = self._anchor.analyse(prices)
        if not anchors:
            return []
        confirmations = sorted(self._confirmation.analyse(prices))

        confirmed: list[DatedSignal] = []
        for anchor in anchors:
            for confirmation in confirmations:
                if self._confirmed_by.is_confirmed_by(anchor.date, confirmation.date):
                    confirmed.append(confirmation)
                    break
        return unique_by_date_and_direction(confirmed)
