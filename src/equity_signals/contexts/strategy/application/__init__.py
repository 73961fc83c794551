from .ports import Entry
from .services import StrategyFactory, TradingStrategy

__all__ = ["Entry", "StrategyFactory", "TradingStrategy"]
