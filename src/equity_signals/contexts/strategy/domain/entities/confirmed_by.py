from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from equity_signals.platform.errors import require_non_negative_int


@dataclass(frozen=True, slots=True)
class ConfirmedBy:
    """
    Inclusive confirmation window relative to an anchor signal.

    A confirmation on day `C` confirms anchor day `A` when
    `A + delay_days <= C <= A + delay_days + range_days`.

    Related:
      - src/equity_signals/contexts/strategy/application/services/entries/confirmation_entry.py
    """

    delay_days: int
    range_days: int

    def __post_init__(self) -> None:
        require_non_negative_int(value=self.delay_days, name="confirmation.delay_days")
        require_non_negative_int(value=self.range_days, name="confirmation.range_days")

    def required_trading_prices(self) -> int:
        return self.delay_days + self.range_days

    def earliest(self, anchor: date) -> date:
        return anchor + timedelta(days=self.delay_days)

    def latest(self, anchor: date) -> date:
        return anchor + timedelta(days=self.delay_days + self.range_days)

    def is_confirmed_by(self, anchor: date, confirmation: date) -> bool:
        return self.earliest(anchor) <= confirmation <= self.latest(anchor)
