from .config import (
    AnalysisRuntimeConfig,
    StrategyRuntimeConfig,
    load_strategy_config,
    parse_entry_node,
    resolve_strategy_config_path,
)

__all__ = [
    "AnalysisRuntimeConfig",
    "StrategyRuntimeConfig",
    "load_strategy_config",
    "parse_entry_node",
    "resolve_strategy_config_path",
]
