from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from equity_signals.contexts.indicators.adapters.outbound.compute_decimal import (
    MovingAverageConvergenceDivergence,
)
from equity_signals.contexts.indicators.domain.errors import InsufficientDataError
from equity_signals.platform.errors import InvalidConfigurationError
from equity_signals.shared_kernel.primitives import TradingDayPrice

_START = date(2024, 1, 1)


def _rising_prices(count: int) -> list[TradingDayPrice]:
    return [
        TradingDayPrice.from_close(
            ticker="VGS.AX",
            day=_START + timedelta(days=index),
            close=index + 1,
        )
        for index in range(count)
    ]


def test_macd_minimum_is_sum_of_periods() -> None:
    """
    Verify MACD requires `fast + slow + signal` bars.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Default periods 12/26/9.
    Raises:
        AssertionError: If the minimum changes.
    Side Effects:
        None.
    """
    macd = MovingAverageConvergenceDivergence()

    assert macd.minimum_number_of_prices == 47
    with pytest.raises(InsufficientDataError) as error:
        macd.calculate(_rising_prices(46))
    assert (error.value.required, error.value.given) == (47, 46)


def test_macd_lines_are_aligned_and_defined_from_slow_period() -> None:
    """
    Verify MACD defined from `slow - 1`, signal line from `slow + signal - 2`.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        A linear series has a constant EMA spread: EMA(3) lags by 1, EMA(5) by 2.
    Raises:
        AssertionError: If alignment or values differ.
    Side Effects:
        None.
    """
    prices = _rising_prices(10)

    lines = MovingAverageConvergenceDivergence(fast=3, slow=5, signal=2).calculate(prices)

    assert lines.macd.dates == tuple(price.date for price in prices)
    assert lines.macd.first_index == 4
    assert lines.signal_line.first_index == 5
    tolerance = Decimal("1e-20")
    for _, _, value in lines.macd.defined():
        assert abs(value - Decimal(1)) < tolerance
    for _, _, value in lines.signal_line.defined():
        assert abs(value - Decimal(1)) < tolerance


def test_macd_requires_slow_greater_than_fast() -> None:
    with pytest.raises(InvalidConfigurationError, match="macd.slow must be > macd.fast"):
        MovingAverageConvergenceDivergence(fast=26, slow=12, signal=9)
