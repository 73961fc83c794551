from .crossover import CrossoverLine, MacdCrossoverRule, StochasticCrossoverRule, crossover_events
from .gradient import GradientRule
from .rsi_threshold import RsiThresholdRule

__all__ = [
    "CrossoverLine",
    "GradientRule",
    "MacdCrossoverRule",
    "RsiThresholdRule",
    "StochasticCrossoverRule",
    "crossover_events",
]
