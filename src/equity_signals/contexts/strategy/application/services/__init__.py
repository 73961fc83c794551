from .entries import (
    AnalysisEntry,
    AndOperator,
    ConfirmationEntry,
    IndicatorEntry,
    NeverExit,
    Operator,
    OperatorEntry,
    OrOperator,
    PeriodicEntry,
)
from .strategy_factory import StrategyFactory
from .trading_strategy import TradingStrategy

__all__ = [
    "AnalysisEntry",
    "AndOperator",
    "ConfirmationEntry",
    "IndicatorEntry",
    "NeverExit",
    "Operator",
    "OperatorEntry",
    "OrOperator",
    "PeriodicEntry",
    "StrategyFactory",
    "TradingStrategy",
]
