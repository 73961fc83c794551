"""
Adapters package for indicators bounded context.
"""

from .outbound import (
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
