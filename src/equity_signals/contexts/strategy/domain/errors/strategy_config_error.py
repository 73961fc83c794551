from __future__ import annotations

from equity_signals.platform.errors import InvalidConfigurationError


class StrategyConfigError(InvalidConfigurationError):
    """
    Raised when a strategy tree node is malformed; carries the YAML path of the node.

    Related:
      - src/equity_signals/contexts/strategy/adapters/outbound/config/strategy_tree_parser.py
      - src/equity_signals/contexts/strategy/application/services/strategy_factory.py
    """

    def __init__(self, message: str, *, yaml_path: str) -> None:
        super().__init__(f"{yaml_path} {message}" if yaml_path else message)
        self.yaml_path = yaml_path
