from __future__ import annotations


class InvalidConfigurationError(ValueError):
    """
    Raised when a calculator, generator, filter or strategy node is built with invalid parameters.

    Construction-time failure: raised before any price data is processed.

    Related:
      - src/equity_signals/contexts/strategy/domain/errors/strategy_config_error.py
      - src/equity_signals/contexts/strategy/application/services/strategy_factory.py
    """
