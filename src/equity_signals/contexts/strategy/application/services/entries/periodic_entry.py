from __future__ import annotations

from datetime import date, timedelta
from typing import Sequence

from equity_signals.contexts.signals.domain.entities import SignalDirection
from equity_signals.contexts.strategy.domain.entities import DatedSignal, Frequency, advance
from equity_signals.platform.errors import InvalidConfigurationError
from equity_signals.shared_kernel.primitives import TradingDayPrice


class PeriodicEntry:
    """
    Signal on the first trading day on or after each due date `first_signal + n * frequency`.

    Due dates start at `n = 1`; several due dates passing without a trading day produce one
    signal and the schedule catches up.

    Related:
      - src/equity_signals/contexts/strategy/domain/entities/frequency.py
      - src/equity_signals/contexts/analysis/application/services/backtest_analysis.py
    """

    def __init__(
        self,
        *,
        first_signal: date,
        frequency: Frequency | timedelta,
        direction: SignalDirection | str = SignalDirection.BULLISH,
    ) -> None:
        """
        Validate the schedule.

        Args:
            first_signal: Schedule anchor; the first due date is one period later.
            frequency: Calendar cadence or positive fixed interval.
            direction: Direction of emitted signals.
        Returns:
            None.
        Assumptions:
            String frequencies are cadence names (`weekly`, `monthly`).
        Raises:
            InvalidConfigurationError: If the frequency is unknown or not positive.
        Side Effects:
            None.
        """
        if isinstance(frequency, timedelta):
            if frequency <= timedelta(0):
                raise InvalidConfigurationError(
                    f"periodic frequency must be positive, got {frequency}"
                )
            self._frequency: Frequency | timedelta = frequency
        else:
            try:
                self._frequency = Frequency(frequency)
            except ValueError as error:
                raise InvalidConfigurationError(
                    f"periodic frequency must be one of {[item.value for item in Frequency]} "
                    f"or a timedelta, got {frequency!r}"
                ) from error
        self._first_signal = first_signal
        self._direction = SignalDirection(direction)

    def required_trading_prices(self) -> int:
        return 1

    def analyse(self, prices: Sequence[TradingDayPrice]) -> list[DatedSignal]:
        """
        Signal each bar that is the first trading day on or after a due date.

        Args:
            prices: Bars sorted ascending by date.
        Returns:
            list[DatedSignal]: One signal per bar whose gap to the previous bar holds a due date.
        Assumptions:
            The first bar signals only when it falls exactly on a due date.
        Raises:
            None.
        Side Effects:
            None.
        """
        signals: list[DatedSignal] = []
        periods = 1
        due = advance(self._first_signal, self._frequency, periods)
        previous: date | None = None
        for price in prices:
            covered = previous if previous is not None else price.date - timedelta(days=1)
            while due <= covered:
                periods += 1
                due = advance(self._first_signal, self._frequency, periods)
            if due <= price.date:
                signals.append(DatedSignal(date=price.date, direction=self._direction))
            previous = price.date
        return signals
