from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from equity_signals.contexts.filters.application.ports import SignalFilter
from equity_signals.contexts.filters.application.services import (
    AnyIndicatorSignalFilter,
    ConfirmationSignalFilter,
    DirectionSignalFilter,
    RollingTimePeriodSignalFilterDecorator,
    SameDaySignalFilter,
    SignalAnalysis,
    TimePeriodSignalFilterDecorator,
)
from equity_signals.contexts.signals.application.ports import SignalRangeFilter
from equity_signals.contexts.signals.application.services import (
    IndicatorSignalGenerator,
    WholeSeriesSignalRangeFilter,
    ema_gradient_signals,
    macd_signals,
    rsi_signals,
    sma_gradient_signals,
    stochastic_signals,
)
from equity_signals.contexts.signals.domain.entities import SignalDirection
from equity_signals.contexts.strategy.application.ports import Entry
from equity_signals.contexts.strategy.domain.entities import (
    ConfirmationNodeConfig,
    ConfirmedBy,
    EntryNodeConfig,
    FilterNodeConfig,
    IndicatorNodeConfig,
    NeverNodeConfig,
    OperatorNodeConfig,
    PeriodicNodeConfig,
    SignalsNodeConfig,
    StrategyConfig,
)
from equity_signals.contexts.strategy.domain.errors import StrategyConfigError
from equity_signals.platform.errors import InvalidConfigurationError

from .entries import (
    AnalysisEntry,
    AndOperator,
    ConfirmationEntry,
    IndicatorEntry,
    NeverExit,
    OperatorEntry,
    OrOperator,
    PeriodicEntry,
)
from .trading_strategy import TradingStrategy

log = logging.getLogger(__name__)

_SIGNAL_BUILDERS: Mapping[str, Callable[..., IndicatorSignalGenerator]] = {
    "sma": sma_gradient_signals,
    "ema": ema_gradient_signals,
    "rsi": rsi_signals,
    "macd": macd_signals,
    "stochastic": stochastic_signals,
}


class StrategyFactory:
    """
    Assemble a `TradingStrategy` from configuration nodes before any price data is touched.

    Entry-side nodes default to bullish signals, exit-side nodes to bearish ones.

    Related:
      - src/equity_signals/contexts/strategy/domain/entities/strategy_config.py
      - src/equity_signals/contexts/strategy/adapters/outbound/config/strategy_tree_parser.py
      - apps/api/routes/analysis.py
    """

    def __init__(self, *, range_filter: SignalRangeFilter | None = None) -> None:
        self._range_filter = (
            range_filter if range_filter is not None else WholeSeriesSignalRangeFilter()
        )

    def strategy(self, config: StrategyConfig) -> TradingStrategy:
        """
        Build the strategy tree.

        Args:
            config: Validated strategy configuration.
        Returns:
            TradingStrategy: Assembled strategy.
        Assumptions:
            Config node shapes were validated by the parser; parameter values are validated
            here by the components themselves.
        Raises:
            StrategyConfigError: If a component rejects its parameters; names the node path.
        Side Effects:
            Logs the assembled strategy lead-in at INFO level.
        """
        entry = self.entry(config.entry, direction=SignalDirection.BULLISH, path="strategy.entry")
        exit_ = self.entry(config.exit, direction=SignalDirection.BEARISH, path="strategy.exit")
        strategy = TradingStrategy(entry, exit_, name=config.name)
        log.info(
            "strategy assembled name=%s required_trading_prices=%s",
            config.name,
            strategy.required_trading_prices(),
        )
        return strategy

    def entry(
        self,
        node: EntryNodeConfig,
        *,
        direction: SignalDirection,
        path: str,
    ) -> Entry:
        """
        Build one tree node recursively.

        Args:
            node: Configuration node.
            direction: Default signal direction for this side of the tree.
            path: Dotted YAML path of the node for diagnostics.
        Returns:
            Entry: Assembled node.
        Assumptions:
            Node types are closed over `EntryNodeConfig`.
        Raises:
            StrategyConfigError: If the node or one of its components is invalid.
        Side Effects:
            None.
        """
        try:
            return self._build(node, direction=direction, path=path)
        except StrategyConfigError:
            raise
        except InvalidConfigurationError as error:
            raise StrategyConfigError(str(error), yaml_path=path) from error

    def _build(self, node: EntryNodeConfig, *, direction: SignalDirection, path: str) -> Entry:
        if isinstance(node, IndicatorNodeConfig):
            return IndicatorEntry(self.generator(node, direction=direction))
        if isinstance(node, PeriodicNodeConfig):
            return PeriodicEntry(
                first_signal=node.first_signal,
                frequency=node.frequency,
                direction=node.direction or direction,
            )
        if isinstance(node, OperatorNodeConfig):
            operator = AndOperator() if node.operator == "and" else OrOperator()
            return OperatorEntry(
                self.entry(node.left, direction=direction, path=f"{path}.operator.left"),
                operator,
                self.entry(node.right, direction=direction, path=f"{path}.operator.right"),
            )
        if isinstance(node, ConfirmationNodeConfig):
            return ConfirmationEntry(
                self.entry(node.anchor, direction=direction, path=f"{path}.confirmation.anchor"),
                ConfirmedBy(delay_days=node.delay_days, range_days=node.range_days),
                self.entry(
                    node.confirmation,
                    direction=direction,
                    path=f"{path}.confirmation.confirmation",
                ),
            )
        if isinstance(node, SignalsNodeConfig):
            return self._analysis_entry(node, direction=direction, path=path)
        if isinstance(node, NeverNodeConfig):
            return NeverExit()
        raise StrategyConfigError(
            f"unsupported strategy node {type(node).__name__}",
            yaml_path=path,
        )

    def generator(
        self,
        node: IndicatorNodeConfig,
        *,
        direction: SignalDirection,
    ) -> IndicatorSignalGenerator:
        """
        Build the signal generator of one indicator node.

        Args:
            node: Indicator configuration.
            direction: Direction used when the node does not set one.
        Returns:
            IndicatorSignalGenerator: Configured generator.
        Assumptions:
            `node.params` holds keyword arguments of the matching builder.
        Raises:
            InvalidConfigurationError: If a parameter value is rejected.
        Side Effects:
            None.
        """
        builder = _SIGNAL_BUILDERS[node.indicator]
        kwargs: dict[str, Any] = dict(node.params)
        return builder(
            **kwargs,
            direction=node.direction or direction,
            range_filter=self._range_filter,
            signal_id=node.signal_id,
        )

    def _analysis_entry(
        self,
        node: SignalsNodeConfig,
        *,
        direction: SignalDirection,
        path: str,
    ) -> AnalysisEntry:
        node_direction = node.direction or direction
        generators = [
            self.generator(generator, direction=node_direction) for generator in node.generators
        ]
        known_ids = {str(generator.signal_id) for generator in generators}
        filters: list[SignalFilter] = []
        for index, filter_node in enumerate(node.filters):
            unknown = [
                signal_id for signal_id in filter_node.signal_ids if signal_id not in known_ids
            ]
            if unknown:
                raise StrategyConfigError(
                    f"references unknown generator ids {unknown}",
                    yaml_path=f"{path}.signals.filters[{index}]",
                )
            filters.append(self._signal_filter(filter_node))
        return AnalysisEntry(
            SignalAnalysis(generators=generators, filters=filters, lenient=node.lenient),
            direction=node_direction,
        )

    def _signal_filter(self, node: FilterNodeConfig) -> SignalFilter:
        signal_filter: SignalFilter
        if node.kind == "any":
            signal_filter = AnyIndicatorSignalFilter(*node.signal_ids)
        elif node.kind == "same_day":
            signal_filter = SameDaySignalFilter(*node.signal_ids)
        else:
            if len(node.signal_ids) != 2:
                raise InvalidConfigurationError(
                    "confirmation filter requires exactly [anchor, confirmation] ids, "
                    f"got {list(node.signal_ids)}"
                )
            anchor, confirmation = node.signal_ids
            signal_filter = ConfirmationSignalFilter(
                anchor,
                confirmation,
                delay_days=node.delay_days,
                range_days=node.range_days,
            )
        if node.direction is not None:
            signal_filter = DirectionSignalFilter(signal_filter, node.direction)
        if node.start is not None or node.end is not None:
            if node.start is None or node.end is None:
                raise InvalidConfigurationError("time period filter requires both start and end")
            signal_filter = TimePeriodSignalFilterDecorator(
                signal_filter,
                start=node.start,
                end=node.end,
            )
        if node.within_days is not None:
            signal_filter = RollingTimePeriodSignalFilterDecorator(
                signal_filter,
                within=node.within_days,
            )
        return signal_filter


__all__ = ["StrategyFactory"]
