from .ports import SignalBuckets, SignalFilter
from .services import (
    AnyIndicatorSignalFilter,
    ConfirmationSignalFilter,
    DirectionSignalFilter,
    RollingTimePeriodSignalFilterDecorator,
    SameDaySignalFilter,
    SignalAnalysis,
    TimePeriodSignalFilterDecorator,
)

__all__ = [
    "AnyIndicatorSignalFilter",
    "ConfirmationSignalFilter",
    "DirectionSignalFilter",
    "RollingTimePeriodSignalFilterDecorator",
    "SameDaySignalFilter",
    "SignalAnalysis",
    "SignalBuckets",
    "SignalFilter",
    "TimePeriodSignalFilterDecorator",
]
