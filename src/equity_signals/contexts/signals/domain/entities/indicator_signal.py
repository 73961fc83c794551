from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .signal_direction import SignalDirection


@dataclass(frozen=True, slots=True, order=True)
class IndicatorSignalId:
    """
    IndicatorSignalId: normalized lower-case identity of a signal generator (`"rsi"`, `"macd"`).

    Related:
      - src/equity_signals/contexts/filters/application/services/indicator_signal_filters.py
      - src/equity_signals/contexts/signals/application/services/indicator_signal_generator.py
    """

    value: str

    def __post_init__(self) -> None:
        """
        Normalize the identity and reject blanks.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Identities are compared case-insensitively by normalizing to lower-case.
        Raises:
            ValueError: If the identity is blank.
        Side Effects:
            Replaces `value` with its stripped lower-case form.
        """
        normalized = self.value.strip().lower()
        if not normalized:
            raise ValueError("IndicatorSignalId requires a non-empty value")
        object.__setattr__(self, "value", normalized)

    @classmethod
    def of(cls, value: IndicatorSignalId | str) -> IndicatorSignalId:
        if isinstance(value, IndicatorSignalId):
            return value
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True, order=True)
class IndicatorSignal:
    """
    One indicator event on one trading date, ordered by `(date, signal_id, direction)`.
    """

    date: date
    signal_id: IndicatorSignalId
    direction: SignalDirection

    def __post_init__(self) -> None:
        object.__setattr__(self, "signal_id", IndicatorSignalId.of(self.signal_id))
        object.__setattr__(self, "direction", SignalDirection(self.direction))
