from .indicator_lines import MacdLines, StochasticLines
from .indicator_series import IndicatorSeries
from .rsi_smoothing import RsiSmoothing

__all__ = [
    "IndicatorSeries",
    "MacdLines",
    "RsiSmoothing",
    "StochasticLines",
]
