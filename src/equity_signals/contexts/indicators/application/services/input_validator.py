from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from equity_signals.contexts.indicators.domain.errors import InsufficientDataError
from equity_signals.shared_kernel.primitives import TradingDayPrice


def validate_series(values: Sequence[Decimal | None], *, minimum: int) -> None:
    """
    Validate that a nullable series carries enough consecutive values for a calculation.

    Related:
      - src/equity_signals/contexts/indicators/adapters/outbound/compute_decimal/ma.py
      - src/equity_signals/contexts/indicators/adapters/outbound/compute_decimal/trend.py

    Args:
        values: Nullable input values in date order.
        minimum: Required number of values.
    Returns:
        None.
    Assumptions:
        Leading and trailing nulls are ignored; any gap between the first and the
        last defined value breaks the consecutive run that feeds the latest output.
    Raises:
        InsufficientDataError: If the input, its non-null count, or its trailing
            consecutive run is shorter than `minimum`.
    Side Effects:
        None.
    """
    if len(values) < minimum:
        raise InsufficientDataError(
            f"At least {minimum} data points are needed, only {len(values)} given",
            required=minimum,
            given=len(values),
        )

    first = _first_defined(values)
    if first is None:
        raise InsufficientDataError(
            f"At least {minimum} non null data points are needed, only 0 given",
            required=minimum,
            given=0,
        )
    last = _last_defined(values)

    non_null = sum(1 for value in values[first : last + 1] if value is not None)
    if non_null < minimum:
        raise InsufficientDataError(
            f"At least {minimum} non null data points are needed, only {non_null} given",
            required=minimum,
            given=non_null,
        )

    consecutive = 0
    for value in reversed(values[first : last + 1]):
        if value is None:
            break
        consecutive += 1
    if consecutive < minimum:
        raise InsufficientDataError(
            f"At least {minimum} consecutive non null data points are needed, "
            f"only {consecutive} given",
            required=minimum,
            given=consecutive,
        )


def validate_prices(prices: Sequence[TradingDayPrice], *, minimum: int) -> None:
    """
    Validate that a price series is long enough for a calculation.

    Args:
        prices: Bars sorted ascending by date.
        minimum: Required number of bars.
    Returns:
        None.
    Assumptions:
        `TradingDayPrice` values are never null, so only the length is checked.
    Raises:
        InsufficientDataError: If fewer than `minimum` bars are given.
    Side Effects:
        None.
    """
    if len(prices) < minimum:
        raise InsufficientDataError(
            f"At least {minimum} data points are needed, only {len(prices)} given",
            required=minimum,
            given=len(prices),
        )


def _first_defined(values: Sequence[Decimal | None]) -> int | None:
    for index, value in enumerate(values):
        if value is not None:
            return index
    return None


def _last_defined(values: Sequence[Decimal | None]) -> int:
    for index in range(len(values) - 1, -1, -1):
        if values[index] is not None:
            return index
    raise ValueError("series has no defined values")


__all__ = ["validate_prices", "validate_series"]
