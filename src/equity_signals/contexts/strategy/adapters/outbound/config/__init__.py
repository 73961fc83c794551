from .scalar_env_overrides import resolve_positive_int_override
from .strategy_runtime_config import (
    AnalysisRuntimeConfig,
    StrategyRuntimeConfig,
    load_strategy_config,
    parse_strategy_runtime_config,
    resolve_strategy_config_path,
)
from .strategy_tree_parser import parse_entry_node, parse_indicator_node

__all__ = [
    "AnalysisRuntimeConfig",
    "StrategyRuntimeConfig",
    "load_strategy_config",
    "parse_entry_node",
    "parse_indicator_node",
    "parse_strategy_runtime_config",
    "resolve_positive_int_override",
    "resolve_strategy_config_path",
]
