from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from equity_signals.contexts.indicators.adapters.outbound.compute_decimal import (
    RelativeStrengthIndex,
    StochasticOscillator,
)
from equity_signals.contexts.indicators.domain import RsiSmoothing
from equity_signals.contexts.indicators.domain.errors import InsufficientDataError
from equity_signals.platform.errors import InvalidConfigurationError
from equity_signals.shared_kernel.primitives import TradingDayPrice

_START = date(2024, 1, 1)

_REFERENCE_CLOSES_LONG = [
    "15.55", "15.70", "15.80", "15.98", "16.20", "16.15", "16.15", "16.25", "16.12", "16.40",
    "16.67", "16.22", "16.43", "16.20", "15.93", "15.80", "15.90", "16.00", "15.80", "15.76",
    "15.82", "15.40", "15.55", "15.48", "15.28", "15.35", "15.41", "15.46", "15.50", "15.63",
    "15.50", "15.51", "15.42", "15.38", "15.24", "15.26", "15.29", "15.25", "15.05",
]  # fmt: skip
_REFERENCE_RSI_LONG = [
    "88.89", "52.83", "61.83", "49.49", "38.27", "33.77", "40.48", "46.81", "37.11", "35.06",
    "40.48", "23.66", "35.48", "32.43", "25.37", "31.97", "37.50", "42.20", "46.24", "57.98",
    "45.95", "46.81", "38.65", "35.06", "25.93", "29.08", "34.64", "30.56", "18.03",
]  # fmt: skip
_REFERENCE_CLOSES_SHORT = [
    "93.15", "93.47", "90.00", "90.71", "91.14", "90.21", "90.41", "91.04", "90.87", "90.42",
    "91.92", "92.55", "91.92", "91.13", "91.12", "91.09", "90.52", "90.68", "90.52", "91.82",
    "91.32",
]  # fmt: skip
_REFERENCE_RSI_SHORT = [
    "53.05", "59.51", "50.98", "41.52", "41.52", "41.18", "33.33", "37.50", "34.64", "61.54",
    "51.46",
]  # fmt: skip


def _prices(closes: list[str]) -> list[TradingDayPrice]:
    return [
        TradingDayPrice.from_close(ticker="VGS.AX", day=_START + timedelta(days=index), close=close)
        for index, close in enumerate(closes)
    ]


def _bar(index: int, *, low: str, high: str, close: str) -> TradingDayPrice:
    return TradingDayPrice(
        ticker="VGS.AX",
        date=_START + timedelta(days=index),
        opening_price=close,
        lowest_price=low,
        highest_price=high,
        closing_price=close,
    )


@pytest.mark.parametrize(
    ("closes", "expected"),
    [
        (_REFERENCE_CLOSES_LONG, _REFERENCE_RSI_LONG),
        (_REFERENCE_CLOSES_SHORT, _REFERENCE_RSI_SHORT),
    ],
)
def test_reference_rsi_reproduces_historical_figures(
    closes: list[str],
    expected: list[str],
) -> None:
    """
    Verify reference smoothing reproduces the published two-decimal RSI(10) figures.

    Args:
        closes: Closing prices in date order.
        expected: Expected RSI text from index 10 onward.
    Returns:
        None.
    Assumptions:
        Entries 0..9 are undefined and values keep two decimal places.
    Raises:
        AssertionError: If any value differs from the reference.
    Side Effects:
        None.
    """
    series = RelativeStrengthIndex(lookback=10, smoothing=RsiSmoothing.REFERENCE).calculate(
        _prices(closes)
    )

    assert len(series) == len(closes)
    assert series.values[:10] == (None,) * 10
    assert [str(value) for value in series.values[10:]] == expected


def test_wilder_rsi_known_values() -> None:
    """
    Verify Wilder seeding and recursive averaging on a hand-computed series.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Lookback 2: deltas +1, -1 give RSI 50; a further +1 gives gain .75 / loss .25.
    Raises:
        AssertionError: If Wilder smoothing changes.
    Side Effects:
        None.
    """
    series = RelativeStrengthIndex(lookback=2).calculate(_prices(["1", "2", "1", "2"]))

    assert series.values[:2] == (None, None)
    assert str(series.values[2]) == "50.00"
    assert str(series.values[3]) == "75.00"


@pytest.mark.parametrize("smoothing", [RsiSmoothing.WILDER, RsiSmoothing.REFERENCE])
def test_rsi_saturates_at_one_hundred_without_losses(smoothing: RsiSmoothing) -> None:
    """
    Verify a strictly rising series yields exactly 100.00 in both smoothing modes.

    Args:
        smoothing: Averaging mode under test.
    Returns:
        None.
    Assumptions:
        No down moves means the loss average stays zero.
    Raises:
        AssertionError: If saturation is not reported as 100.00.
    Side Effects:
        None.
    """
    closes = [str(10 + index) for index in range(8)]

    series = RelativeStrengthIndex(lookback=3, smoothing=smoothing).calculate(_prices(closes))

    assert [str(value) for value in series.values[3:]] == ["100.00"] * 5


def test_wilder_rsi_values_stay_within_bounds() -> None:
    series = RelativeStrengthIndex(lookback=10).calculate(_prices(_REFERENCE_CLOSES_LONG))

    defined = [value for _, _, value in series.defined()]
    assert series.first_index == 10
    assert all(Decimal(0) <= value <= Decimal(100) for value in defined)


def test_rsi_requires_lookback_plus_one_bars() -> None:
    with pytest.raises(InsufficientDataError) as error:
        RelativeStrengthIndex(lookback=10).calculate(_prices(["1"] * 10))

    assert (error.value.required, error.value.given) == (11, 10)


def test_rsi_rejects_unknown_smoothing() -> None:
    with pytest.raises(InvalidConfigurationError, match="rsi.smoothing"):
        RelativeStrengthIndex(lookback=10, smoothing="hull")


def test_stochastic_k_and_d_lines() -> None:
    """
    Verify %K from the low/high window and %D as SMA of %K.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Lookback 3, %K smoothing 1, %D smoothing 2.
    Raises:
        AssertionError: If line values differ.
    Side Effects:
        None.
    """
    prices = _prices(["10", "12", "11", "12", "12"])

    lines = StochasticOscillator(lookback=3, k_smoothing=1, d_smoothing=2).calculate(prices)

    assert lines.percentage_k.values == (None, None, Decimal(50), Decimal(100), Decimal(100))
    assert lines.percentage_d.values == (None, None, None, Decimal(75), Decimal(100))


def test_stochastic_flat_window_is_fifty() -> None:
    prices = [_bar(index, low="5.00", high="5.00", close="5.00") for index in range(4)]

    lines = StochasticOscillator(lookback=3, k_smoothing=1, d_smoothing=1).calculate(prices)

    assert lines.percentage_k.values[2:] == (Decimal(50), Decimal(50))


def test_stochastic_uses_intraday_low_and_high() -> None:
    prices = [
        _bar(0, low="9", high="11", close="10"),
        _bar(1, low="10", high="14", close="12"),
        _bar(2, low="11", high="13", close="13"),
    ]

    lines = StochasticOscillator(lookback=3, k_smoothing=1, d_smoothing=1).calculate(prices)

    assert lines.percentage_k.values[2] == Decimal(80)
    oscillator = StochasticOscillator(lookback=14, k_smoothing=3, d_smoothing=3)
    assert oscillator.minimum_number_of_prices == 18
