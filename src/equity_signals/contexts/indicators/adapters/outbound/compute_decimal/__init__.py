"""
Fixed-precision decimal indicator calculators.

Related: equity_signals.contexts.indicators.application.ports.indicator_calculator
"""

from .ma import ExponentialMovingAverage, SimpleMovingAverage, ema_values, sma_values
from .momentum import RelativeStrengthIndex, StochasticOscillator
from .trend import MovingAverageConvergenceDivergence

__all__ = [
    "ExponentialMovingAverage",
    "MovingAverageConvergenceDivergence",
    "RelativeStrengthIndex",
    "SimpleMovingAverage",
    "StochasticOscillator",
    "ema_values",
    "sma_values",
]
