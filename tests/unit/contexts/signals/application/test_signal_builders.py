from __future__ import annotations

from datetime import date, timedelta

import pytest

from equity_signals.contexts.signals.application.services import (
    ema_gradient_signals,
    macd_signals,
    rsi_signals,
    sma_gradient_signals,
    stochastic_signals,
)
from equity_signals.contexts.signals.domain import IndicatorSignalId, SignalDirection
from equity_signals.platform.errors import InvalidConfigurationError
from equity_signals.shared_kernel.primitives import TradingDayPrice

_START = date(2024, 1, 1)


def _prices(closes: list[int]) -> list[TradingDayPrice]:
    return [
        TradingDayPrice.from_close(ticker="VGS.AX", day=_START + timedelta(days=index), close=close)
        for index, close in enumerate(closes)
    ]


@pytest.mark.parametrize(
    ("generator", "signal_id", "required"),
    [
        (sma_gradient_signals(lookback=20), "sma", 21),
        (ema_gradient_signals(lookback=20), "ema", 21),
        (rsi_signals(), "rsi", 16),
        (macd_signals(), "macd", 47),
        (stochastic_signals(), "stochastic", 17),
    ],
)
def test_builders_expose_identity_and_required_days(
    generator: object,
    signal_id: str,
    required: int,
) -> None:
    """
    Verify every builder names its bucket and adds the extra comparison day where needed.

    Args:
        generator: Built generator under test.
        signal_id: Expected default bucket identity.
        required: Expected minimum bar count.
    Returns:
        None.
    Assumptions:
        Default periods: RSI 14, MACD 12/26/9, stochastic 14/1/3.
    Raises:
        AssertionError: If identity or minimum changes.
    Side Effects:
        None.
    """
    assert generator.signal_id == IndicatorSignalId(signal_id)
    assert generator.required_number_of_trading_days == required


def test_gradient_builders_derive_direction_from_gradient() -> None:
    rising = _prices(list(range(1, 8)))
    falling = _prices(list(range(8, 1, -1)))

    positive = sma_gradient_signals(lookback=3).generate(rising)
    negative = ema_gradient_signals(lookback=3, gradient_type="negative").generate(falling)

    assert {signal.direction for signal in positive} == {SignalDirection.BULLISH}
    assert {signal.direction for signal in negative} == {SignalDirection.BEARISH}
    assert len(positive) == 4


def test_flat_gradient_requires_explicit_direction() -> None:
    with pytest.raises(InvalidConfigurationError, match="explicit direction"):
        sma_gradient_signals(lookback=3, gradient_type="flat")


def test_unknown_gradient_type_is_rejected() -> None:
    with pytest.raises(InvalidConfigurationError, match="gradient type must be one of"):
        ema_gradient_signals(lookback=3, gradient_type="sideways")


def test_macd_builder_requires_a_crossover_line() -> None:
    with pytest.raises(InvalidConfigurationError, match="at least one crossover line"):
        macd_signals(lines=())


def test_macd_builder_rejects_slow_not_above_fast() -> None:
    with pytest.raises(InvalidConfigurationError, match="macd.slow must be > macd.fast"):
        macd_signals(fast=12, slow=12)


def test_custom_signal_id_is_normalized() -> None:
    generator = rsi_signals(lookback=5, signal_id=" RSI-Fast ")

    assert generator.signal_id == IndicatorSignalId("rsi-fast")
