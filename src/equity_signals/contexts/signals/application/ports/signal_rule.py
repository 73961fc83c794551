from __future__ import annotations

from datetime import date
from typing import Protocol, TypeVar

from equity_signals.contexts.signals.domain.entities import SignalDirection, SignalRange

T_contra = TypeVar("T_contra", contravariant=True)


class SignalRule(Protocol[T_contra]):
    """
    Port for one rule turning an indicator output into dated directional events.

    Related:
      - src/equity_signals/contexts/signals/application/services/rules/crossover.py
      - src/equity_signals/contexts/signals/application/services/rules/gradient.py
      - src/equity_signals/contexts/signals/application/services/rules/rsi_threshold.py
    """

    def evaluate(
        self,
        output: T_contra,
        *,
        signal_range: SignalRange,
    ) -> list[tuple[date, SignalDirection]]:
        """
        Evaluate the rule over every day of `output` inside `signal_range`.

        Args:
            output: Calculator output (series or lines object).
            signal_range: Inclusive window of reportable dates.
        Returns:
            list[tuple[date, SignalDirection]]: Events in ascending date order.
        Assumptions:
            Days whose inputs are undefined are skipped.
        Raises:
            None.
        Side Effects:
            None.
        """
        ...
