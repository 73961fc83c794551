from __future__ import annotations

from datetime import date
from typing import Mapping, Protocol, Sequence

from equity_signals.contexts.filters.domain.entities import BY_DATE, SignalOrdering, SignalSet
from equity_signals.contexts.signals.domain.entities import IndicatorSignal, IndicatorSignalId

SignalBuckets = Mapping[IndicatorSignalId, Sequence[IndicatorSignal]]


class SignalFilter(Protocol):
    """
    Port combining bucketed indicator signals into buy or sell signals.

    Related:
      - src/equity_signals/contexts/filters/application/services/indicator_signal_filters.py
      - src/equity_signals/contexts/filters/application/services/time_period_decorators.py
      - src/equity_signals/contexts/filters/application/services/signal_analysis.py
    """

    def apply(
        self,
        signals: SignalBuckets,
        *,
        latest_trading_date: date,
        ordering: SignalOrdering = BY_DATE,
    ) -> SignalSet:
        """
        Combine bucketed signals into trade signals.

        Args:
            signals: Indicator signals keyed by generator identity; empty lists are valid.
            latest_trading_date: Date of the last bar of the analysed series.
            ordering: Ordering of the returned set.
        Returns:
            SignalSet: Trade signals produced by this filter.
        Assumptions:
            Each bucket is sorted ascending by date.
        Raises:
            MissingSignalBucketError: If a referenced identity has no bucket.
        Side Effects:
            None.
        """
        ...

    def required_trading_prices(self) -> int:
        """
        Bars needed on top of the generator lead-in to resolve signals ending on the last bar.

        Returns:
            int: `0` for same-date filters, the day window for confirmation filters.
        """
        ...
