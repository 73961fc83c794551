from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterator, Sequence

import numpy as np

from equity_signals.shared_kernel.primitives import TradingDayPrice


@dataclass(frozen=True, slots=True)
class IndicatorSeries:
    """
    Full-length, right-aligned indicator output aligned to the input trading-day calendar.

    Entry `i` belongs to `dates[i]`; entries without enough history are `None`.

    Related: ..errors.insufficient_data_error,
      ...adapters.outbound.compute_decimal.ma, ...adapters.outbound.compute_decimal.momentum
    """

    dates: tuple[date, ...]
    values: tuple[Decimal | None, ...]

    def __post_init__(self) -> None:
        """
        Freeze inputs into tuples and validate the alignment invariant.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Dates are ascending; ordering is enforced upstream by `sort_by_date`.
        Raises:
            ValueError: If dates and values have different lengths.
        Side Effects:
            Normalizes `dates` and `values` into tuples.
        """
        object.__setattr__(self, "dates", tuple(self.dates))
        object.__setattr__(self, "values", tuple(self.values))
        if len(self.dates) != len(self.values):
            raise ValueError(
                "IndicatorSeries requires len(dates) == len(values), "
                f"got {len(self.dates)} and {len(self.values)}"
            )

    @classmethod
    def for_prices(
        cls,
        *,
        prices: Sequence[TradingDayPrice],
        values: Sequence[Decimal | None],
    ) -> IndicatorSeries:
        """Build a series aligned to the dates of `prices`."""
        return cls(dates=tuple(price.date for price in prices), values=tuple(values))

    def __len__(self) -> int:
        return len(self.values)

    @property
    def first_index(self) -> int | None:
        """Index of the first defined value, or `None` when nothing is defined."""
        for index, value in enumerate(self.values):
            if value is not None:
                return index
        return None

    def is_empty(self) -> bool:
        """Whether the series holds no defined value at all."""
        return self.first_index is None

    def value_at(self, index: int) -> Decimal | None:
        return self.values[index]

    def defined(self) -> Iterator[tuple[int, date, Decimal]]:
        """
        Iterate over defined entries as `(index, date, value)`.

        Args:
            None.
        Returns:
            Iterator[tuple[int, date, Decimal]]: Entries in ascending date order.
        Assumptions:
            None-valued entries are skipped.
        Raises:
            None.
        Side Effects:
            None.
        """
        for index, (day, value) in enumerate(zip(self.dates, self.values)):
            if value is not None:
                yield index, day, value

    def to_float_array(self) -> np.ndarray:
        """
        Export values as a float64 vector with NaN for undefined entries.

        Args:
            None.
        Returns:
            np.ndarray: One-dimensional float64 array of `len(self)`.
        Assumptions:
            Float export is for reporting/plotting only; signal logic stays on decimals.
        Raises:
            None.
        Side Effects:
            Allocates a new array.
        """
        exported = np.full(len(self.values), np.nan, dtype=np.float64)
        for index, value in enumerate(self.values):
            if value is not None:
                exported[index] = float(value)
        return exported
