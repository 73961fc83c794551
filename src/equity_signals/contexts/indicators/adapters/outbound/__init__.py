"""
Outbound adapters for indicators bounded context.
"""

from .compute_decimal import (
    ExponentialMovingAverage,
    MovingAverageConvergenceDivergence,
    RelativeStrengthIndex,
    SimpleMovingAverage,
    StochasticOscillator,
)

__all__ = [
    "ExponentialMovingAverage",
    "MovingAverageConvergenceDivergence",
    "RelativeStrengthIndex",
    "SimpleMovingAverage",
    "StochasticOscillator",
]
