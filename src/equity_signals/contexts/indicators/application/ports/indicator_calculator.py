from __future__ import annotations

from typing import Protocol, Sequence, TypeVar

from equity_signals.shared_kernel.primitives import TradingDayPrice

T_co = TypeVar("T_co", covariant=True)


class IndicatorCalculator(Protocol[T_co]):
    """
    Port for one configured indicator calculation over a daily price series.

    Related:
      - src/equity_signals/contexts/indicators/adapters/outbound/compute_decimal/ma.py
      - src/equity_signals/contexts/indicators/adapters/outbound/compute_decimal/momentum.py
      - src/equity_signals/contexts/signals/application/services/indicator_signal_generator.py
    """

    @property
    def minimum_number_of_prices(self) -> int:
        """
        Minimum number of bars needed before the calculation yields its requested values.

        Args:
            None.
        Returns:
            int: Positive number of trading days.
        Assumptions:
            Value is fixed at construction from the calculator parameters.
        Raises:
            None.
        Side Effects:
            None.
        """
        ...

    def calculate(self, prices: Sequence[TradingDayPrice]) -> T_co:
        """
        Compute the indicator output aligned to `prices`.

        Args:
            prices: Bars sorted ascending by date.
        Returns:
            T_co: `IndicatorSeries` or a lines object of full-length series.
        Assumptions:
            Implementations are pure and safe to call concurrently.
        Raises:
            InsufficientDataError: If `prices` is shorter than the stated minimum.
        Side Effects:
            None.
        """
        ...
