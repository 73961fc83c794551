"""
Factory functions for the standard indicator signal generators.

Related: equity_signals.contexts.strategy.application.services.strategy_factory
"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from equity_signals.contexts.indicators.adapters.outbound.compute_decimal import (
    ExponentialMovingAverage,
    MovingAverageConvergenceDivergence,
    RelativeStrengthIndex,
    SimpleMovingAverage,
    StochasticOscillator,
)
from equity_signals.contexts.indicators.domain.entities import RsiSmoothing
from equity_signals.contexts.signals.application.ports import SignalRangeFilter
from equity_signals.contexts.signals.domain.entities import GradientType, SignalDirection
from equity_signals.platform.errors import InvalidConfigurationError

from .indicator_signal_generator import IndicatorSignalGenerator
from .rules import (
    CrossoverLine,
    GradientRule,
    MacdCrossoverRule,
    RsiThresholdRule,
    StochasticCrossoverRule,
)


def sma_gradient_signals(
    *,
    lookback: int,
    gradient_type: GradientType | str = GradientType.POSITIVE,
    direction: SignalDirection | str | None = None,
    range_filter: SignalRangeFilter | None = None,
    signal_id: str = "sma",
) -> IndicatorSignalGenerator:
    """
    Build a generator signalling on the gradient of a simple moving average.

    Args:
        lookback: SMA window.
        gradient_type: Gradient that triggers a signal.
        direction: Signal direction; derived from the gradient when omitted.
        range_filter: Window of reportable dates.
        signal_id: Bucket identity.
    Returns:
        IndicatorSignalGenerator: Generator with one extra trading day for the first delta.
    Assumptions:
        POSITIVE maps to BULLISH and NEGATIVE to BEARISH by default.
    Raises:
        InvalidConfigurationError: If lookback is invalid or FLAT is used without direction.
    Side Effects:
        None.
    """
    return _gradient_generator(
        calculator=SimpleMovingAverage(lookback=lookback),
        gradient_type=gradient_type,
        direction=direction,
        range_filter=range_filter,
        signal_id=signal_id,
    )


def ema_gradient_signals(
    *,
    lookback: int,
    gradient_type: GradientType | str = GradientType.POSITIVE,
    direction: SignalDirection | str | None = None,
    range_filter: SignalRangeFilter | None = None,
    signal_id: str = "ema",
) -> IndicatorSignalGenerator:
    """Build a generator signalling on the gradient of an exponential moving average."""
    return _gradient_generator(
        calculator=ExponentialMovingAverage(lookback=lookback),
        gradient_type=gradient_type,
        direction=direction,
        range_filter=range_filter,
        signal_id=signal_id,
    )


def rsi_signals(
    *,
    lookback: int = 14,
    oversold: Decimal | int | str = 30,
    overbought: Decimal | int | str = 70,
    smoothing: RsiSmoothing | str = RsiSmoothing.WILDER,
    direction: SignalDirection | str = SignalDirection.BULLISH,
    range_filter: SignalRangeFilter | None = None,
    signal_id: str = "rsi",
) -> IndicatorSignalGenerator:
    """
    Build an RSI threshold-crossing generator.

    Args:
        lookback: RSI lookback.
        oversold: Bullish threshold.
        overbought: Bearish threshold.
        smoothing: Averaging mode.
        direction: BULLISH watches oversold, BEARISH watches overbought.
        range_filter: Window of reportable dates.
        signal_id: Bucket identity.
    Returns:
        IndicatorSignalGenerator: Generator with one extra day for the crossing comparison.
    Assumptions:
        Thresholds satisfy `0 <= oversold < overbought <= 100`.
    Raises:
        InvalidConfigurationError: If parameters are invalid.
    Side Effects:
        None.
    """
    return IndicatorSignalGenerator(
        signal_id=signal_id,
        calculator=RelativeStrengthIndex(lookback=lookback, smoothing=smoothing),
        rules=[RsiThresholdRule(direction=direction, oversold=oversold, overbought=overbought)],
        range_filter=range_filter,
        extra_trading_days=1,
    )


def macd_signals(
    *,
    fast: int = 12,
    slow: int = 26,
    signal: int = 9,
    lines: Sequence[CrossoverLine | str] = (CrossoverLine.SIGNAL_LINE, CrossoverLine.ZERO_LINE),
    direction: SignalDirection | str = SignalDirection.BULLISH,
    range_filter: SignalRangeFilter | None = None,
    signal_id: str = "macd",
) -> IndicatorSignalGenerator:
    """
    Build a MACD crossover generator watching the signal line, the zero line or both.

    Args:
        fast: Fast EMA period.
        slow: Slow EMA period, greater than `fast`.
        signal: Signal-line EMA period.
        lines: Lines whose crossing emits a signal.
        direction: Crossing direction.
        range_filter: Window of reportable dates.
        signal_id: Bucket identity.
    Returns:
        IndicatorSignalGenerator: Generator with one rule per watched line.
    Assumptions:
        A day crossing both lines yields one signal.
    Raises:
        InvalidConfigurationError: If periods are invalid or no line is watched.
    Side Effects:
        None.
    """
    if not lines:
        raise InvalidConfigurationError("macd signals require at least one crossover line")
    return IndicatorSignalGenerator(
        signal_id=signal_id,
        calculator=MovingAverageConvergenceDivergence(fast=fast, slow=slow, signal=signal),
        rules=[MacdCrossoverRule(direction=direction, line=line) for line in lines],
        range_filter=range_filter,
    )


def stochastic_signals(
    *,
    lookback: int = 14,
    k_smoothing: int = 1,
    d_smoothing: int = 3,
    direction: SignalDirection | str = SignalDirection.BULLISH,
    range_filter: SignalRangeFilter | None = None,
    signal_id: str = "stochastic",
) -> IndicatorSignalGenerator:
    """Build a stochastic %K/%D crossover generator."""
    return IndicatorSignalGenerator(
        signal_id=signal_id,
        calculator=StochasticOscillator(
            lookback=lookback,
            k_smoothing=k_smoothing,
            d_smoothing=d_smoothing,
        ),
        rules=[StochasticCrossoverRule(direction=direction)],
        range_filter=range_filter,
        extra_trading_days=1,
    )


def _gradient_generator(
    *,
    calculator: SimpleMovingAverage | ExponentialMovingAverage,
    gradient_type: GradientType | str,
    direction: SignalDirection | str | None,
    range_filter: SignalRangeFilter | None,
    signal_id: str,
) -> IndicatorSignalGenerator:
    try:
        resolved_type = GradientType(gradient_type)
    except ValueError as error:
        raise InvalidConfigurationError(
            f"gradient type must be one of {[item.value for item in GradientType]}, "
            f"got {gradient_type!r}"
        ) from error
    if direction is None:
        if resolved_type is GradientType.FLAT:
            raise InvalidConfigurationError("flat gradient signals require an explicit direction")
        direction = (
            SignalDirection.BULLISH
            if resolved_type is GradientType.POSITIVE
            else SignalDirection.BEARISH
        )
    return IndicatorSignalGenerator(
        signal_id=signal_id,
        calculator=calculator,
        rules=[GradientRule(gradient_type=resolved_type, direction=direction)],
        range_filter=range_filter,
        extra_trading_days=1,
    )


__all__ = [
    "ema_gradient_signals",
    "macd_signals",
    "rsi_signals",
    "sma_gradient_signals",
    "stochastic_signals",
]
