from .entities import (
    GradientType,
    IndicatorSignal,
    IndicatorSignalId,
    SignalDirection,
    SignalRange,
)
from .errors import MissingSignalBucketError

__all__ = [
    "GradientType",
    "IndicatorSignal",
    "IndicatorSignalId",
    "MissingSignalBucketError",
    "SignalDirection",
    "SignalRange",
]
