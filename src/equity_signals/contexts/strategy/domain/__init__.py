from .entities import (
    ConfirmationNodeConfig,
    ConfirmedBy,
    DatedSignal,
    EntryNodeConfig,
    FilterNodeConfig,
    Frequency,
    IndicatorNodeConfig,
    NeverNodeConfig,
    OperatorNodeConfig,
    PeriodicNodeConfig,
    SignalsNodeConfig,
    StrategyConfig,
)
from .errors import StrategyConfigError

__all__ = [
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
    "StrategyConfigError",
]
