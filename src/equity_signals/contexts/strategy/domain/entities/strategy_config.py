"""
Frozen configuration nodes describing a strategy entry/exit tree.

Related: equity_signals.contexts.strategy.adapters.outbound.config.strategy_tree_parser,
  equity_signals.contexts.strategy.application.services.strategy_factory
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Union

from equity_signals.contexts.signals.domain.entities import SignalDirection

from .frequency import Frequency

ConfigScalar = Union[int, str, Decimal, tuple[str, ...]]

INDICATOR_TYPES = ("sma", "ema", "rsi", "macd", "stochastic")
FILTER_KINDS = ("any", "same_day", "confirmation")
OPERATORS = ("and", "or")


@dataclass(frozen=True, slots=True)
class IndicatorNodeConfig:
    """
    Indicator generator node: calculator parameters plus signal selection.

    `params` feed the matching signal builder as keyword arguments; `direction` is `None`
    when the side of the tree decides it.
    """

    indicator: str
    signal_id: str
    params: Mapping[str, ConfigScalar] = field(default_factory=dict)
    direction: SignalDirection | None = None

    def __post_init__(self) -> None:
        """
        Normalize identifiers and freeze parameters.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Parameter names were validated by the parser for the indicator type.
        Raises:
            ValueError: If the indicator type is unknown or the id is blank.
        Side Effects:
            Lower-cases identifiers and wraps params into a read-only mapping.
        """
        indicator = self.indicator.strip().lower()
        if indicator not in INDICATOR_TYPES:
            raise ValueError(f"indicator must be one of {INDICATOR_TYPES}, got {self.indicator!r}")
        signal_id = self.signal_id.strip().lower()
        if not signal_id:
            raise ValueError("indicator signal_id must be non-empty")
        object.__setattr__(self, "indicator", indicator)
        object.__setattr__(self, "signal_id", signal_id)
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
        if self.direction is not None:
            object.__setattr__(self, "direction", SignalDirection(self.direction))


@dataclass(frozen=True, slots=True)
class PeriodicNodeConfig:
    """Periodic node: signal every `frequency` after `first_signal`."""

    first_signal: date
    frequency: Frequency | timedelta
    direction: SignalDirection | None = None


@dataclass(frozen=True, slots=True)
class OperatorNodeConfig:
    """Logical combination of two sub-trees."""

    operator: str
    left: EntryNodeConfig
    right: EntryNodeConfig

    def __post_init__(self) -> None:
        operator = self.operator.strip().lower()
        if operator not in OPERATORS:
            raise ValueError(f"operator must be one of {OPERATORS}, got {self.operator!r}")
        object.__setattr__(self, "operator", operator)


@dataclass(frozen=True, slots=True)
class ConfirmationNodeConfig:
    """Anchor sub-tree confirmed by a second sub-tree within an inclusive window."""

    anchor: EntryNodeConfig
    confirmation: EntryNodeConfig
    delay_days: int
    range_days: int


@dataclass(frozen=True, slots=True)
class FilterNodeConfig:
    """
    One signal filter of a `signals` node, optionally wrapped by direction and time decorators.
    """

    kind: str
    signal_ids: tuple[str, ...]
    delay_days: int = 0
    range_days: int = 0
    direction: SignalDirection | None = None
    within_days: int | None = None
    start: date | None = None
    end: date | None = None

    def __post_init__(self) -> None:
        kind = self.kind.strip().lower()
        if kind not in FILTER_KINDS:
            raise ValueError(f"filter kind must be one of {FILTER_KINDS}, got {self.kind!r}")
        object.__setattr__(self, "kind", kind)
        object.__setattr__(
            self,
            "signal_ids",
            tuple(signal_id.strip().lower() for signal_id in self.signal_ids),
        )


@dataclass(frozen=True, slots=True)
class SignalsNodeConfig:
    """Several generators combined through bucket filters."""

    generators: tuple[IndicatorNodeConfig, ...]
    filters: tuple[FilterNodeConfig, ...]
    lenient: bool = False
    direction: SignalDirection | None = None


@dataclass(frozen=True, slots=True)
class NeverNodeConfig:
    """Exit that never signals."""


EntryNodeConfig = Union[
    IndicatorNodeConfig,
    PeriodicNodeConfig,
    OperatorNodeConfig,
    ConfirmationNodeConfig,
    SignalsNodeConfig,
    NeverNodeConfig,
]


@dataclass(frozen=True, slots=True)
class StrategyConfig:
    """
    Named strategy: an entry tree and an exit tree.
    """

    name: str
    entry: EntryNodeConfig
    exit: EntryNodeConfig = field(default_factory=NeverNodeConfig)

    def __post_init__(self) -> None:
        name = self.name.strip()
        if not name:
            raise ValueError("strategy name must be non-empty")
        object.__setattr__(self, "name", name)
