from __future__ import annotations

from dataclasses import dataclass

from .indicator_series import IndicatorSeries


@dataclass(frozen=True, slots=True)
class MacdLines:
    """
    MACD output: the MACD line (fast EMA - slow EMA) and its EMA signal line.

    Both lines are full length over the same trading-day calendar.
    """

    macd: IndicatorSeries
    signal_line: IndicatorSeries

    def __post_init__(self) -> None:
        if self.macd.dates != self.signal_line.dates:
            raise ValueError("MacdLines requires macd and signal_line on the same dates")


@dataclass(frozen=True, slots=True)
class StochasticLines:
    """
    Stochastic oscillator output: smoothed %K and its %D signal line.
    """

    percentage_k: IndicatorSeries
    percentage_d: IndicatorSeries

    def __post_init__(self) -> None:
        if self.percentage_k.dates != self.percentage_d.dates:
            raise ValueError("StochasticLines requires %K and %D on the same dates")
