from .strategy_config_error import StrategyConfigError

__all__ = ["StrategyConfigError"]
