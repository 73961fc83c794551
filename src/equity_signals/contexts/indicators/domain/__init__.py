from .entities import IndicatorSeries, MacdLines, RsiSmoothing, StochasticLines
from .errors import InsufficientDataError

__all__ = [
    "IndicatorSeries",
    "InsufficientDataError",
    "MacdLines",
    "RsiSmoothing",
    "StochasticLines",
]
