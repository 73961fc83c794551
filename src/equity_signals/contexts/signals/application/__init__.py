from .ports import SignalRangeFilter, SignalRule
from .services import IndicatorSignalGenerator, WholeSeriesSignalRangeFilter

__all__ = [
    "IndicatorSignalGenerator",
    "SignalRangeFilter",
    "SignalRule",
    "WholeSeriesSignalRangeFilter",
]
