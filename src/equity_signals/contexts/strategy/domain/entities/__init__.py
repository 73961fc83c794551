from .confirmed_by import ConfirmedBy
from .dated_signal import DatedSignal
from .frequency import Frequency, advance
from .strategy_config import (
    ConfigScalar,
    FILTER_KINDS,
    INDICATOR_TYPES,
    OPERATORS,
    ConfirmationNodeConfig,
    EntryNodeConfig,
    FilterNodeConfig,
    IndicatorNodeConfig,
    NeverNodeConfig,
    OperatorNodeConfig,
    PeriodicNodeConfig,
    SignalsNodeConfig,
    StrategyConfig,
)

__all__ = [
    "ConfigScalar",
    "FILTER_KINDS",
    "INDICATOR_TYPES",
    "OPERATORS",
    "ConfirmationNodeConfig",
    "ConfirmedBy",
    "DatedSignal",
    "EntryNodeConfig",
    "FilterNodeConfig",
    "Frequency",
    "IndicatorNodeConfig",
    "NeverNodeConfig",
    "OperatorNodeConfig",
    "PeriodicNodeConfig",
    "SignalsNodeConfig",
    "StrategyConfig",
    "advance",
]
