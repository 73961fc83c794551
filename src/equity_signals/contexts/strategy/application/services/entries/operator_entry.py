from __future__ import annotations

from typing import Protocol, Sequence

from equity_signals.contexts.strategy.application.ports import Entry
from equity_signals.contexts.strategy.domain.entities import DatedSignal
from equity_signals.shared_kernel.primitives import TradingDayPrice

from .dated_signals import unique_by_date_and_direction


class Operator(Protocol):
    """Combines the signal lists of two sub-trees."""

    def conjoin(self, left: list[DatedSignal], right: list[DatedSignal]) -> list[DatedSignal]:
        ...


class AndOperator:
    """Keep dates on which both sub-trees signalled."""

    def conjoin(self, left: list[DatedSignal], right: list[DatedSignal]) -> list[DatedSignal]:
        right_dates = {signal.date for signal in right}
        return unique_by_date_and_direction(
            signal for signal in left if signal.date in right_dates
        )


class OrOperator:
    """Union of both sub-trees; opposite directions on one date are both kept."""

    def conjoin(self, left: list[DatedSignal], right: list[DatedSignal]) -> list[DatedSignal]:
        return unique_by_date_and_direction([*left, *right])


class OperatorEntry:
    """
    Logical combination of two sub-trees; needs as many bars as the larger sub-tree.
    """

    def __init__(self, left: Entry, operator: Operator, right: Entry) -> None:
        self._left = left
        self._operator = operator
        self._right = right

    def required_trading_prices(self) -> int:
        return max(self._left.required_trading_prices(), self._right.required_trading_prices())

    def analyse(self, prices: Sequence[TradingDayPrice]) -> list[DatedSignal]:
        return self._operator.conjoin(self._left.analyse(prices), self._right.analyse(prices))
