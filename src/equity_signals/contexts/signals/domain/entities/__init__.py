from .gradient_type import GradientType
from .indicator_signal import IndicatorSignal, IndicatorSignalId
from .signal_direction import SignalDirection
from .signal_range import SignalRange

__all__ = [
    "GradientType",
    "IndicatorSignal",
    "IndicatorSignalId",
    "SignalDirection",
    "SignalRange",
]
