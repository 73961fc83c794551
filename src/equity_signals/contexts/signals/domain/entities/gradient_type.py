from __future__ import annotations

from decimal import Decimal
from enum import Enum


class GradientType(str, Enum):
    """
    Day-over-day direction of a moving-average series.

    Related:
      - src/equity_signals/contexts/signals/application/services/rules/gradient.py
    """

    POSITIVE = "positive"
    FLAT = "flat"
    NEGATIVE = "negative"

    @classmethod
    def classify(cls, previous: Decimal, current: Decimal) -> GradientType:
        """
        Classify the change from `previous` to `current`.

        Args:
            previous: Yesterday's value.
            current: Today's value.
        Returns:
            GradientType: POSITIVE when rising, NEGATIVE when falling, FLAT when equal.
        Assumptions:
            Decimal comparison is exact, so equal values are never classified as drift.
        Raises:
            None.
        Side Effects:
            None.
        """
        if current > previous:
            return cls.POSITIVE
        if current < previous:
            return cls.NEGATIVE
        return cls.FLAT
