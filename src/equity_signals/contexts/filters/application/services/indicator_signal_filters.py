"""
Filters combining indicator signal buckets into trade signals.

Related: equity_signals.contexts.filters.application.ports.signal_filter
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Callable, Sequence

from equity_signals.contexts.filters.application.ports import SignalBuckets, SignalFilter
from equity_signals.contexts.filters.domain.entities import (
    BY_DATE,
    BuySignal,
    SignalOrdering,
    SignalSet,
    TradeSignal,
)
from equity_signals.contexts.signals.domain.entities import (
    IndicatorSignal,
    IndicatorSignalId,
    SignalDirection,
)
from equity_signals.contexts.signals.domain.errors import MissingSignalBucketError
from equity_signals.platform.errors import InvalidConfigurationError, require_non_negative_int

SignalFactory = Callable[[date], TradeSignal]


class AnyIndicatorSignalFilter:
    """
    OR filter: a trade signal on every date any named indicator signalled.
    """

    def __init__(
        self,
        *signal_ids: IndicatorSignalId | str,
        signal_factory: SignalFactory = BuySignal,
    ) -> None:
        if not signal_ids:
            raise InvalidConfigurationError("AnyIndicatorSignalFilter requires at least one id")
        self._signal_ids = tuple(IndicatorSignalId.of(signal_id) for signal_id in signal_ids)
        self._signal_factory = signal_factory

    def required_trading_prices(self) -> int:
        return 0

    def apply(
        self,
        signals: SignalBuckets,
        *,
        latest_trading_date: date,
        ordering: SignalOrdering = BY_DATE,
    ) -> SignalSet:
        result: SignalSet = SignalSet(ordering=ordering)
        for signal_id in self._signal_ids:
            for signal in require_bucket(signals, signal_id):
                result.add(self._signal_factory(signal.date))
        return result


class SameDaySignalFilter:
    """
    AND filter: a trade signal only on dates every named indicator signalled.

    Related:
      - src/equity_signals/contexts/filters/application/services/signal_analysis.py
    """

    def __init__(
        self,
        *signal_ids: IndicatorSignalId | str,
        signal_factory: SignalFactory = BuySignal,
    ) -> None:
        if not signal_ids:
            raise InvalidConfigurationError(
                "SameDaySignalFilter requires at least one indicator signal id"
            )
        self._signal_ids = tuple(IndicatorSignalId.of(signal_id) for signal_id in signal_ids)
        self._signal_factory = signal_factory

    def required_trading_prices(self) -> int:
        return 0

    def apply(
        self,
        signals: SignalBuckets,
        *,
        latest_trading_date: date,
        ordering: SignalOrdering = BY_DATE,
    ) -> SignalSet:
        """
        Intersect the signal dates of every named bucket.

        Args:
            signals: Indicator signals keyed by generator identity.
            latest_trading_date: Unused; part of the filter contract.
            ordering: Ordering of the returned set.
        Returns:
            SignalSet: One trade signal per shared date.
        Assumptions:
            Direction is not considered; wrap with `DirectionSignalFilter` to select it.
        Raises:
            MissingSignalBucketError: If any named bucket is missing.
        Side Effects:
            None.
        """
        date_sets = [
            {signal.date for signal in require_bucket(signals, signal_id)}
            for signal_id in self._signal_ids
        ]
        shared = set.intersection(*date_sets)
        return SignalSet(
            (self._signal_factory(day) for day in shared),
            ordering=ordering,
        )


class ConfirmationSignalFilter:
    """
    Anchor signal confirmed by a second indicator within an inclusive day window.

    For anchor date `A` the window is `[A + delay_days, A + delay_days + range_days]`;
    the earliest confirmation inside it produces a trade signal on the confirmation date.

    Related:
      - src/equity_signals/contexts/strategy/application/services/entries/confirmation_entry.py
    """

    def __init__(
        self,
        anchor: IndicatorSignalId | str,
        confirmation: IndicatorSignalId | str,
        *,
        delay_days: int,
        range_days: int,
        signal_factory: SignalFactory = BuySignal,
    ) -> None:
        self._anchor = IndicatorSignalId.of(anchor)
        self._confirmation = IndicatorSignalId.of(confirmation)
        self._delay = timedelta(
            days=require_non_negative_int(value=delay_days, name="confirmation.delay_days")
        )
        self._range = timedelta(
            days=require_non_negative_int(value=range_days, name="confirmation.range_days")
        )
        self._signal_factory = signal_factory

    def required_trading_prices(self) -> int:
        return (self._delay + self._range).days

    def apply(
        self,
        signals: SignalBuckets,
        *,
        latest_trading_date: date,
        ordering: SignalOrdering = BY_DATE,
    ) -> SignalSet:
        """
        Confirm each anchor signal with the earliest qualifying confirmation signal.

        Args:
            signals: Indicator signals keyed by generator identity.
            latest_trading_date: Unused; part of the filter contract.
            ordering: Ordering of the returned set.
        Returns:
            SignalSet: Trade signals dated on the confirmation day.
        Assumptions:
            Several anchors confirmed by one signal collapse into one trade signal.
        Raises:
            MissingSignalBucketError: If the anchor or confirmation bucket is missing.
        Side Effects:
            None.
        """
        anchors = require_bucket(signals, self._anchor)
        confirmation_bucket = require_bucket(signals, self._confirmation)
        confirmations = sorted({signal.date for signal in confirmation_bucket})

        result: SignalSet = SignalSet(ordering=ordering)
        for anchor in anchors:
            earliest = anchor.date + self._delay
            latest = earliest + self._range
            for confirmation_date in confirmations:
                if confirmation_date > latest:
                    break
                if confirmation_date >= earliest:
                    result.add(self._signal_factory(confirmation_date))
                    break
        return result


class DirectionSignalFilter:
    """
    Select one signal direction from every bucket before delegating to `inner`.
    """

    def __init__(self, inner: SignalFilter, direction: SignalDirection | str) -> None:
        self._inner = inner
        self._direction = SignalDirection(direction)

    def required_trading_prices(self) -> int:
        return self._inner.required_trading_prices()

    def apply(
        self,
        signals: SignalBuckets,
        *,
        latest_trading_date: date,
        ordering: SignalOrdering = BY_DATE,
    ) -> SignalSet:
        selected = {
            signal_id: [signal for signal in bucket if signal.direction is self._direction]
            for signal_id, bucket in signals.items()
        }
        return self._inner.apply(
            selected,
            latest_trading_date=latest_trading_date,
            ordering=ordering,
        )


def require_bucket(
    signals: SignalBuckets,
    signal_id: IndicatorSignalId,
) -> Sequence[IndicatorSignal]:
    """
    Fetch one bucket, distinguishing a missing identity from an empty list.

    Args:
        signals: Indicator signals keyed by generator identity.
        signal_id: Identity to look up.
    Returns:
        Sequence[IndicatorSignal]: Bucket content, possibly empty.
    Assumptions:
        `None` values count as missing.
    Raises:
        MissingSignalBucketError: If the identity is absent.
    Side Effects:
        None.
    """
    bucket = signals.get(signal_id)
    if bucket is None:
        raise MissingSignalBucketError(signal_id)
    return bucket


__all__ = [
    "AnyIndicatorSignalFilter",
    "ConfirmationSignalFilter",
    "DirectionSignalFilter",
    "SameDaySignalFilter",
    "SignalFactory",
    "require_bucket",
]
