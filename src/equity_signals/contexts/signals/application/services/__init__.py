from .builders import (
    ema_gradient_signals,
    macd_signals,
    rsi_signals,
    sma_gradient_signals,
    stochastic_signals,
)
from .indicator_signal_generator import IndicatorSignalGenerator
from .rules import (
    CrossoverLine,
    GradientRule,
    MacdCrossoverRule,
    RsiThresholdRule,
    StochasticCrossoverRule,
)
from .signal_range_filters import WholeSeriesSignalRangeFilter

__all__ = [
    "CrossoverLine",
    "GradientRule",
    "IndicatorSignalGenerator",
    "MacdCrossoverRule",
    "RsiThresholdRule",
    "StochasticCrossoverRule",
    "WholeSeriesSignalRangeFilter",
    "ema_gradient_signals",
    "macd_signals",
    "rsi_signals",
    "sma_gradient_signals",
    "stochastic_signals",
]
