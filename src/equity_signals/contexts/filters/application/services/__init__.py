from .indicator_signal_filters import (
    AnyIndicatorSignalFilter,
    ConfirmationSignalFilter,
    DirectionSignalFilter,
    SameDaySignalFilter,
    SignalFactory,
    require_bucket,
)
from .signal_analysis import SignalAnalysis
from .time_period_decorators import (
    RollingTimePeriodSignalFilterDecorator,
    TimePeriodSignalFilterDecorator,
)

__all__ = [
    "AnyIndicatorSignalFilter",
    "ConfirmationSignalFilter",
    "DirectionSignalFilter",
    "RollingTimePeriodSignalFilterDecorator",
    "SameDaySignalFilter",
    "SignalAnalysis",
    "SignalFactory",
    "TimePeriodSignalFilterDecorator",
    "require_bucket",
]
