from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from equity_signals.contexts.indicators.adapters.outbound.compute_decimal import (
    SimpleMovingAverage,
)
from equity_signals.contexts.indicators.domain import IndicatorSeries, InsufficientDataError
from equity_signals.contexts.indicators.domain.entities import StochasticLines
from equity_signals.contexts.signals.application.services import (
    GradientRule,
    IndicatorSignalGenerator,
    RsiThresholdRule,
    StochasticCrossoverRule,
    WholeSeriesSignalRangeFilter,
    sma_gradient_signals,
)
from equity_signals.contexts.signals.application.services.rules import crossover_events
from equity_signals.contexts.signals.domain import (
    GradientType,
    IndicatorSignalId,
    SignalDirection,
    SignalRange,
)
from equity_signals.platform.errors import InvalidConfigurationError
from equity_signals.shared_kernel.primitives import TradingDayPrice

_START = date(2024, 1, 1)
_GRADIENT_CLOSES = [
    "1.0", "1.1", "1.2", "1.3", "1.4", "1.5", "1.6", "1.7", "1.8", "1.9", "2.0", "2.1",
    "2.1", "1.8", "1.4", "0.9", "0.8", "1.0", "1.2",
]  # fmt: skip


def _day(index: int) -> date:
    return _START + timedelta(days=index)


def _prices(closes: list[str]) -> list[TradingDayPrice]:
    return [
        TradingDayPrice.from_close(ticker="VGS.AX", day=_day(index), close=close)
        for index, close in enumerate(closes)
    ]


def _series(values: list[str | None]) -> IndicatorSeries:
    return IndicatorSeries(
        dates=tuple(_day(index) for index in range(len(values))),
        values=tuple(None if value is None else Decimal(value) for value in values),
    )


def _whole(count: int) -> SignalRange:
    return SignalRange(earliest=_day(0), latest=_day(count - 1))


@pytest.mark.parametrize(
    ("gradient_type", "expected_indices"),
    [
        (GradientType.POSITIVE, [10, 11, 12, 13]),
        (GradientType.FLAT, [14]),
        (GradientType.NEGATIVE, [15, 16, 17, 18]),
    ],
)
def test_sma_gradient_partitions_days_by_delta(
    gradient_type: GradientType,
    expected_indices: list[int],
) -> None:
    """
    Verify SMA(10) gradient classification splits the fixture into 4 / 1 / 4 days.

    Args:
        gradient_type: Gradient under test.
        expected_indices: Bar indices expected to signal.
    Returns:
        None.
    Assumptions:
        SMA(10) is 1.45, 1.55, 1.65, 1.74, 1.79, 1.79, 1.73, 1.65, 1.58, 1.52 from index 9.
    Raises:
        AssertionError: If classification or day alignment changes.
    Side Effects:
        None.
    """
    generator = sma_gradient_signals(
        lookback=10,
        gradient_type=gradient_type,
        direction=SignalDirection.BULLISH,
    )

    signals = generator.generate(_prices(_GRADIENT_CLOSES))

    assert [signal.date for signal in signals] == [_day(index) for index in expected_indices]
    assert {signal.signal_id for signal in signals} <= {IndicatorSignalId("sma")}


def test_generator_requires_calculator_minimum_plus_extra_days() -> None:
    generator = sma_gradient_signals(lookback=10)

    assert generator.required_number_of_trading_days == 11
    with pytest.raises(InsufficientDataError):
        generator.generate(_prices(["1"] * 9))


def test_generator_rejects_empty_rules() -> None:
    with pytest.raises(InvalidConfigurationError, match="at least one rule"):
        IndicatorSignalGenerator(
            signal_id="sma",
            calculator=SimpleMovingAverage(lookback=3),
            rules=[],
        )


def test_whole_series_range_spans_first_to_last_bar() -> None:
    prices = _prices(["1", "2", "3"])

    signal_range = WholeSeriesSignalRangeFilter().signal_range(prices)

    assert signal_range == SignalRange(earliest=_day(0), latest=_day(2))
    with pytest.raises(ValueError, match="at least one trading day price"):
        WholeSeriesSignalRangeFilter().signal_range([])


def test_gradient_rule_ignores_first_defined_value() -> None:
    rule = GradientRule(gradient_type="positive", direction="bullish")

    events = rule.evaluate(_series([None, "1", "2", "2", "3"]), signal_range=_whole(5))

    assert events == [(_day(2), SignalDirection.BULLISH), (_day(4), SignalDirection.BULLISH)]


@pytest.mark.parametrize(
    ("direction", "values", "expected_days"),
    [
        (SignalDirection.BULLISH, [None, "35", "30", "29.99", "25", "31", "29"], [3, 6]),
        (SignalDirection.BEARISH, [None, "65", "70", "70.01", "75", "69", "71"], [3, 6]),
    ],
)
def test_rsi_threshold_rule_fires_on_zone_entry_only(
    direction: SignalDirection,
    values: list[str | None],
    expected_days: list[int],
) -> None:
    """
    Verify RSI rules fire only on the day the value crosses into the zone.

    Args:
        direction: BULLISH watches oversold 30, BEARISH watches overbought 70.
        values: RSI values per day.
        expected_days: Indices expected to signal.
    Returns:
        None.
    Assumptions:
        Touching the threshold exactly does not count as entering the zone.
    Raises:
        AssertionError: If comparator boundaries change.
    Side Effects:
        None.
    """
    rule = RsiThresholdRule(direction=direction)

    events = rule.evaluate(_series(values), signal_range=_whole(len(values)))

    assert [day for day, _ in events] == [_day(index) for index in expected_days]


@pytest.mark.parametrize(
    ("oversold", "overbought"),
    [(70, 30), (-1, 70), (30, 101), (50, 50)],
)
def test_rsi_threshold_rule_rejects_invalid_thresholds(oversold: int, overbought: int) -> None:
    with pytest.raises(InvalidConfigurationError, match="0 <= oversold < overbought <= 100"):
        RsiThresholdRule(oversold=oversold, overbought=overbought)


def test_crossover_events_against_other_line_and_zero_line() -> None:
    """
    Verify crossings need a touch-or-cross plus a rising (or falling) primary line.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        `other=None` compares against zero.
    Raises:
        AssertionError: If crossing detection changes.
    Side Effects:
        None.
    """
    primary = _series(["-2", "-1", "1", "0.5", "-0.5", "1"])
    other = _series(["0", "0", "0", "0", "0", "0"])
    window = _whole(6)

    bullish_vs_line = crossover_events(
        primary,
        other,
        direction=SignalDirection.BULLISH,
        signal_range=window,
    )
    bearish_vs_zero = crossover_events(
        primary,
        None,
        direction=SignalDirection.BEARISH,
        signal_range=window,
    )

    assert [day for day, _ in bullish_vs_line] == [_day(2), _day(5)]
    assert [day for day, _ in bearish_vs_zero] == [_day(4)]


def test_crossover_events_skip_undefined_days_and_out_of_range_days() -> None:
    primary = _series([None, "-1", "1", "-1", "1"])
    window = SignalRange(earliest=_day(3), latest=_day(4))

    events = crossover_events(
        primary,
        None,
        direction=SignalDirection.BULLISH,
        signal_range=window,
    )

    assert events == [(_day(4), SignalDirection.BULLISH)]


def _stochastic(k_values: list[str | None], d_values: list[str | None]) -> StochasticLines:
    return StochasticLines(percentage_k=_series(k_values), percentage_d=_series(d_values))


@pytest.mark.parametrize(
    ("direction", "expected_days"),
    [
        (SignalDirection.BULLISH, [3, 6]),
        (SignalDirection.BEARISH, [4]),
    ],
)
def test_stochastic_crossover_rule_follows_k_through_d(
    direction: SignalDirection,
    expected_days: list[int],
) -> None:
    """
    Verify %K crossing %D upward signals bullish days and downward ones bearish days.

    Args:
        direction: Crossing direction configured on the rule.
        expected_days: Indices expected to signal.
    Returns:
        None.
    Assumptions:
        Day 7 has %K flat on a falling %D, so no bullish crossing is reported there.
    Raises:
        AssertionError: If %K/%D crossing detection changes.
    Side Effects:
        None.
    """
    lines = _stochastic(
        [None, "20", "30", "50", "40", "30", "35", "35"],
        [None, "25", "35", "45", "45", "35", "35", "30"],
    )
    rule = StochasticCrossoverRule(direction=direction)

    events = rule.evaluate(lines, signal_range=_whole(8))

    assert events == [(_day(index), direction) for index in expected_days]


@pytest.mark.parametrize(
    ("k_values", "d_values", "expected"),
    [
        (["40", "40"], ["45", "40"], []),
        (["40", "45"], ["45", "45"], [(_day(1), SignalDirection.BULLISH)]),
    ],
)
def test_stochastic_crossover_rule_needs_rising_k_on_touch(
    k_values: list[str],
    d_values: list[str],
    expected: list[tuple[date, SignalDirection]],
) -> None:
    lines = _stochastic(k_values, d_values)

    events = StochasticCrossoverRule(direction="bullish").evaluate(
        lines,
        signal_range=_whole(2),
    )

    assert events == expected
