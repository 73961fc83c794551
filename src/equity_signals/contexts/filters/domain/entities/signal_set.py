from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from operator import attrgetter
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from .trade_signal import BuySignal, SellSignal

S = TypeVar("S", BuySignal, SellSignal)


@dataclass(frozen=True, slots=True)
class SignalOrdering:
    """
    Sort key of a `SignalSet`; signals sharing a key are duplicates.

    Related:
      - src/equity_signals/contexts/filters/domain/entities/signal_set.py
    """

    name: str
    key: Callable[[Any], Any]
    reverse: bool = False


BY_DATE = SignalOrdering(name="by_date", key=attrgetter("date"))
BY_DATE_DESCENDING = SignalOrdering(name="by_date_descending", key=attrgetter("date"), reverse=True)


class SignalSet(Generic[S]):
    """
    Sorted, duplicate-eliminating collection of buy or sell signals.

    Related:
      - src/equity_signals/contexts/filters/application/services/indicator_signal_filters.py
      - src/equity_signals/contexts/strategy/application/services/trading_strategy.py
    """

    __slots__ = ("_items", "_ordering")

    def __init__(self, signals: Iterable[S] = (), *, ordering: SignalOrdering = BY_DATE) -> None:
        self._ordering = ordering
        self._items: dict[Any, S] = {}
        for signal in signals:
            self.add(signal)

    @property
    def ordering(self) -> SignalOrdering:
        return self._ordering

    def add(self, signal: S) -> bool:
        """
        Insert `signal` unless one with the same ordering key is present.

        Args:
            signal: Buy or sell signal.
        Returns:
            bool: True when the set changed.
        Assumptions:
            The first signal stored for a key wins.
        Raises:
            None.
        Side Effects:
            Mutates the set.
        """
        key = self._ordering.key(signal)
        if key in self._items:
            return False
        self._items[key] = signal
        return True

    def discard(self, signal: S) -> None:
        key = self._ordering.key(signal)
        if self._items.get(key) == signal:
            del self._items[key]

    def union(self, other: Iterable[S]) -> SignalSet[S]:
        return SignalSet([*self, *other], ordering=self._ordering)

    def filtered(self, predicate: Callable[[S], bool]) -> SignalSet[S]:
        return SignalSet((signal for signal in self if predicate(signal)), ordering=self._ordering)

    def first(self) -> S | None:
        ordered = list(self)
        return ordered[0] if ordered else None

    def last(self) -> S | None:
        ordered = list(self)
        return ordered[-1] if ordered else None

    def dates(self) -> tuple[date, ...]:
        return tuple(signal.date for signal in self)

    def __iter__(self) -> Iterator[S]:
        return iter(
            sorted(
                self._items.values(),
                key=self._ordering.key,
                reverse=self._ordering.reverse,
            )
        )

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, signal: object) -> bool:
        if not isinstance(signal, (BuySignal, SellSignal)):
            return False
        return self._items.get(self._ordering.key(signal)) == signal

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SignalSet):
            return NotImplemented
        return list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SignalSet({list(self)!r}, ordering={self._ordering.name})"
