from __future__ import annotations

from datetime import date

import pytest

from equity_signals.contexts.filters.application.services import (
    AnyIndicatorSignalFilter,
    ConfirmationSignalFilter,
    DirectionSignalFilter,
    SameDaySignalFilter,
)
from equity_signals.contexts.filters.domain import BuySignal, SellSignal
from equity_signals.contexts.signals.domain import (
    IndicatorSignal,
    IndicatorSignalId,
    MissingSignalBucketError,
    SignalDirection,
)
from equity_signals.platform.errors import InvalidConfigurationError

_LATEST = date(2024, 2, 1)


def _signals(
    signal_id: str,
    *days: int,
    direction: SignalDirection = SignalDirection.BULLISH,
) -> list[IndicatorSignal]:
    return [
        IndicatorSignal(date=date(2024, 1, day), signal_id=signal_id, direction=direction)
        for day in days
    ]


def _buckets(**buckets: list[IndicatorSignal]) -> dict[IndicatorSignalId, list[IndicatorSignal]]:
    return {IndicatorSignalId(name): signals for name, signals in buckets.items()}


def test_same_day_filter_emits_only_shared_dates() -> None:
    """
    Verify AND semantics: one buy per date present in every bucket.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        RSI on days 2/5/9, MACD on 5/9/12, EMA on 1/5/9.
    Raises:
        AssertionError: If the intersection differs.
    Side Effects:
        None.
    """
    buckets = _buckets(
        rsi=_signals("rsi", 2, 5, 9),
        macd=_signals("macd", 5, 9, 12),
        ema=_signals("ema", 1, 5, 9),
    )

    result = SameDaySignalFilter("rsi", "macd", "ema").apply(buckets, latest_trading_date=_LATEST)

    assert result.dates() == (date(2024, 1, 5), date(2024, 1, 9))
    assert all(isinstance(signal, BuySignal) for signal in result)


def test_same_day_filter_with_empty_bucket_yields_nothing() -> None:
    buckets = _buckets(rsi=_signals("rsi", 2, 5), macd=[])

    result = SameDaySignalFilter("rsi", "macd").apply(buckets, latest_trading_date=_LATEST)

    assert len(result) == 0


def test_missing_bucket_raises_lookup_error() -> None:
    buckets = _buckets(rsi=_signals("rsi", 2))

    with pytest.raises(MissingSignalBucketError, match="signal type macd"):
        SameDaySignalFilter("rsi", "macd").apply(buckets, latest_trading_date=_LATEST)


def test_any_filter_unions_buckets_with_sell_factory() -> None:
    buckets = _buckets(rsi=_signals("rsi", 2, 5), macd=_signals("macd", 5, 7))

    result = AnyIndicatorSignalFilter("rsi", "macd", signal_factory=SellSignal).apply(
        buckets,
        latest_trading_date=_LATEST,
    )

    assert result.dates() == (date(2024, 1, 2), date(2024, 1, 5), date(2024, 1, 7))
    assert all(isinstance(signal, SellSignal) for signal in result)
    with pytest.raises(InvalidConfigurationError):
        AnyIndicatorSignalFilter()


@pytest.mark.parametrize(
    ("confirmation_day", "confirmed"),
    [
        (11, False),
        (12, True),
        (14, True),
        (15, False),
    ],
)
def test_confirmation_window_boundaries_are_inclusive(
    confirmation_day: int,
    confirmed: bool,
) -> None:
    """
    Verify confirmation only inside `[anchor + delay, anchor + delay + range]`.

    Args:
        confirmation_day: Day of the single confirmation signal.
        confirmed: Whether a buy is expected.
    Returns:
        None.
    Assumptions:
        Anchor on Jan 10, delay 2, range 2, so the window is Jan 12..14.
    Raises:
        AssertionError: If window boundaries change.
    Side Effects:
        None.
    """
    buckets = _buckets(ema=_signals("ema", 10), macd=_signals("macd", confirmation_day))

    result = ConfirmationSignalFilter("ema", "macd", delay_days=2, range_days=2).apply(
        buckets,
        latest_trading_date=_LATEST,
    )

    expected = (date(2024, 1, confirmation_day),) if confirmed else ()
    assert result.dates() == expected


def test_confirmation_uses_earliest_match_and_collapses_shared_confirmations() -> None:
    buckets = _buckets(
        ema=_signals("ema", 3, 4, 20),
        macd=_signals("macd", 5, 6, 30),
    )

    result = ConfirmationSignalFilter("ema", "macd", delay_days=1, range_days=3).apply(
        buckets,
        latest_trading_date=_LATEST,
    )

    assert result.dates() == (date(2024, 1, 5),)


def test_confirmation_rejects_negative_window() -> None:
    with pytest.raises(InvalidConfigurationError, match="confirmation.delay_days"):
        ConfirmationSignalFilter("ema", "macd", delay_days=-1, range_days=2)


def test_direction_filter_selects_one_direction_per_bucket() -> None:
    buckets = _buckets(
        rsi=[
            *_signals("rsi", 2, 4),
            *_signals("rsi", 3, direction=SignalDirection.BEARISH),
        ],
    )

    bullish = DirectionSignalFilter(AnyIndicatorSignalFilter("rsi"), "bullish")
    bearish = DirectionSignalFilter(AnyIndicatorSignalFilter("rsi"), SignalDirection.BEARISH)

    assert bullish.apply(buckets, latest_trading_date=_LATEST).dates() == (
        date(2024, 1, 2),
        date(2024, 1, 4),
    )
    assert bearish.apply(buckets, latest_trading_date=_LATEST).dates() == (date(2024, 1, 3),)
