from __future__ import annotations

from datetime import date, timedelta
from typing import Sequence

import pytest

from equity_signals.contexts.signals.domain import SignalDirection
from equity_signals.contexts.strategy.application import TradingStrategy
from equity_signals.contexts.strategy.application.services import (
    AndOperator,
    ConfirmationEntry,
    NeverExit,
    OperatorEntry,
    OrOperator,
    PeriodicEntry,
)
from equity_signals.contexts.strategy.domain import ConfirmedBy, DatedSignal, Frequency
from equity_signals.platform.errors import InvalidConfigurationError
from equity_signals.shared_kernel.primitives import TradingDayPrice


class _StubEntry:
    def __init__(
        self,
        *days: int,
        required: int = 1,
        direction: SignalDirection = SignalDirection.BULLISH,
    ) -> None:
        self._signals = [DatedSignal(date=date(2024, 1, day), direction=direction) for day in days]
        self._required = required
        self.calls = 0

    def required_trading_prices(self) -> int:
        return self._required

    def analyse(self, prices: Sequence[TradingDayPrice]) -> list[DatedSignal]:
        self.calls += 1
        return list(self._signals)


def _prices_on(*days: date) -> list[TradingDayPrice]:
    return [TradingDayPrice.from_close(ticker="VGS.AX", day=day, close=10) for day in days]


def _days(signals: Sequence[DatedSignal]) -> list[date]:
    return [signal.date for signal in signals]


def test_periodic_entry_signals_first_trading_day_on_or_after_due_date() -> None:
    """
    Verify periodic signals land on trading days and catch up after long gaps.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Weekly schedule from Jan 1 has due dates Jan 8, 15, 22, 29; no bar on Jan 15 or 22.
    Raises:
        AssertionError: If the schedule emits on wrong days or repeats after a gap.
    Side Effects:
        None.
    """
    entry = PeriodicEntry(first_signal=date(2024, 1, 1), frequency=Frequency.WEEKLY)
    prices = _prices_on(
        date(2024, 1, 5),
        date(2024, 1, 8),
        date(2024, 1, 9),
        date(2024, 1, 16),
        date(2024, 1, 17),
        date(2024, 1, 30),
        date(2024, 2, 2),
    )

    signals = entry.analyse(prices)

    assert _days(signals) == [date(2024, 1, 8), date(2024, 1, 16), date(2024, 1, 30)]
    assert entry.required_trading_prices() == 1


def test_periodic_entry_does_not_signal_on_first_signal_date() -> None:
    entry = PeriodicEntry(
        first_signal=date(2024, 1, 31),
        frequency="monthly",
        direction="bearish",
    )

    signals = entry.analyse(_prices_on(date(2024, 1, 31), date(2024, 2, 29), date(2024, 3, 1)))

    assert signals == [DatedSignal(date=date(2024, 2, 29), direction=SignalDirection.BEARISH)]


def test_periodic_entry_ignores_due_dates_before_first_bar() -> None:
    entry = PeriodicEntry(first_signal=date(2024, 1, 1), frequency=timedelta(days=30))

    late_window = entry.analyse(_prices_on(date(2024, 2, 24), date(2024, 2, 25), date(2024, 2, 26)))
    due_window = entry.analyse(_prices_on(date(2024, 1, 31), date(2024, 2, 1)))

    assert late_window == []
    assert _days(due_window) == [date(2024, 1, 31)]


@pytest.mark.parametrize("frequency", ["daily", timedelta(0)])
def test_periodic_entry_rejects_invalid_frequency(frequency: object) -> None:
    with pytest.raises(InvalidConfigurationError, match="periodic frequency"):
        PeriodicEntry(first_signal=date(2024, 1, 1), frequency=frequency)


def test_and_operator_keeps_shared_dates_and_needs_larger_subtree() -> None:
    entry = OperatorEntry(_StubEntry(1, 2, 3, required=20), AndOperator(), _StubEntry(2, 3, 4))

    assert _days(entry.analyse([])) == [date(2024, 1, 2), date(2024, 1, 3)]
    assert entry.required_trading_prices() == 20


def test_or_operator_unions_dates_keeping_both_directions() -> None:
    left = _StubEntry(3, 1)
    right = _StubEntry(1, 4, direction=SignalDirection.BEARISH)

    signals = OperatorEntry(left, OrOperator(), right).analyse([])

    assert _days(signals) == [
        date(2024, 1, 1),
        date(2024, 1, 1),
        date(2024, 1, 3),
        date(2024, 1, 4),
    ]
    assert [signal.direction for signal in signals] == [
        SignalDirection.BULLISH,
        SignalDirection.BEARISH,
        SignalDirection.BULLISH,
        SignalDirection.BEARISH,
    ]


def test_or_operator_keeps_bullish_entry_behind_bearish_signal_on_same_day() -> None:
    entry = OperatorEntry(
        _StubEntry(2, direction=SignalDirection.BEARISH),
        OrOperator(),
        _StubEntry(2, 2),
    )
    strategy = TradingStrategy(entry, NeverExit(), name="or")

    assert len(entry.analyse([])) == 2
    assert strategy.entry_signals([]).dates() == (date(2024, 1, 2),)


def test_confirmation_entry_picks_earliest_confirmation_per_anchor() -> None:
    """
    Verify each anchor is confirmed once and shared confirmations collapse.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Window delay 1 / range 3; anchors Jan 3, 4, 20; confirmations Jan 5, 6, 30.
    Raises:
        AssertionError: If confirmation pairing changes.
    Side Effects:
        None.
    """
    entry = ConfirmationEntry(
        _StubEntry(3, 4, 20, required=15),
        ConfirmedBy(delay_days=1, range_days=3),
        _StubEntry(5, 6, 30, required=35),
    )

    assert _days(entry.analyse([])) == [date(2024, 1, 5)]
    assert entry.required_trading_prices() == 15 + 4 + 35


def test_confirmation_entry_skips_confirmation_subtree_without_anchors() -> None:
    confirmation = _StubEntry(5)
    entry = ConfirmationEntry(_StubEntry(), ConfirmedBy(delay_days=0, range_days=1), confirmation)

    assert entry.analyse([]) == []
    assert confirmation.calls == 0


def test_trading_strategy_selects_direction_per_side() -> None:
    """
    Verify entries contribute bullish signals and exits contribute bearish signals.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Stub trees return both directions.
    Raises:
        AssertionError: If opposite-direction signals leak through.
    Side Effects:
        None.
    """
    entry = OperatorEntry(
        _StubEntry(2, required=30),
        OrOperator(),
        _StubEntry(3, direction=SignalDirection.BEARISH),
    )
    exit_ = OperatorEntry(
        _StubEntry(4),
        OrOperator(),
        _StubEntry(5, required=40, direction=SignalDirection.BEARISH),
    )
    strategy = TradingStrategy(entry, exit_, name="stub")

    assert strategy.entry_signals([]).dates() == (date(2024, 1, 2),)
    assert strategy.exit_signals([]).dates() == (date(2024, 1, 5),)
    assert strategy.required_trading_prices() == 40
    assert strategy.name == "stub"


def test_never_exit_never_signals() -> None:
    never = NeverExit()

    assert never.analyse(_prices_on(date(2024, 1, 2))) == []
    assert never.required_trading_prices() == 0
