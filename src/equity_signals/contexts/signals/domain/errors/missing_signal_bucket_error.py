from __future__ import annotations

from ..entities import IndicatorSignalId


class MissingSignalBucketError(LookupError):
    """
    Raised when a filter references an indicator identity absent from the signal buckets.

    An empty bucket is valid input; only a missing key raises.

    Related:
      - src/equity_signals/contexts/filters/application/services/indicator_signal_filters.py
    """

    def __init__(self, signal_id: IndicatorSignalId) -> None:
        super().__init__(f"Expecting a non-null entry for signal type {signal_id}")
        self.signal_id = signal_id
