from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from equity_signals.contexts.filters.domain.entities import BuySignal
from equity_signals.platform.errors import require_positive_int
from equity_signals.shared_kernel.primitives import TradingDayPrice, sort_by_date


@dataclass(frozen=True, slots=True)
class SignalOutcomeReport:
    """
    Forward close-to-close returns of buy signals over a fixed number of trading days.

    Returns are fractions (`0.05` is +5%). Statistics are `None` when no signal has enough
    forward bars.

    Related:
      - src/equity_signals/contexts/analysis/application/services/backtest_analysis.py
      - apps/cli/commands/analyse.py
    """

    horizon_days: int
    count: int
    mean_return: float | None
    median_return: float | None
    min_return: float | None
    max_return: float | None
    hit_rate: float | None

    @classmethod
    def build(
        cls,
        prices: Sequence[TradingDayPrice],
        signals: Iterable[BuySignal],
        *,
        horizon_days: int,
    ) -> SignalOutcomeReport:
        """
        Measure each buy signal against the close `horizon_days` bars later.

        Args:
            prices: Bars of the analysed ticker, in any order.
            signals: Buy signals dated on bars of `prices`.
            horizon_days: Forward distance in trading days.
        Returns:
            SignalOutcomeReport: Count, mean/median/min/max return and hit rate.
        Assumptions:
            Signals dated off the price calendar or without `horizon_days` forward bars are
            excluded. Hit rate counts strictly positive returns.
        Raises:
            InvalidConfigurationError: If `horizon_days` is not a positive int.
        Side Effects:
            None.
        """
        horizon = require_positive_int(value=horizon_days, name="report.horizon_days")
        ordered = sort_by_date(prices)
        index_by_date = {price.date: index for index, price in enumerate(ordered)}
        closes = np.asarray([float(price.closing_price) for price in ordered], dtype=np.float64)

        last_entry = len(ordered) - horizon - 1
        entry_indices = np.asarray(
            sorted(
                index_by_date[signal.date]
                for signal in set(signals)
                if index_by_date.get(signal.date, len(ordered)) <= last_entry
            ),
            dtype=np.int64,
        )
        if entry_indices.size == 0:
            return cls(
                horizon_days=horizon,
                count=0,
                mean_return=None,
                median_return=None,
                min_return=None,
                max_return=None,
                hit_rate=None,
            )

        returns = closes[entry_indices + horizon] / closes[entry_indices] - 1.0
        return cls(
            horizon_days=horizon,
            count=int(returns.size),
            mean_return=float(np.mean(returns, dtype=np.float64)),
            median_return=float(np.median(returns)),
            min_return=float(np.min(returns)),
            max_return=float(np.max(returns)),
            hit_rate=float(np.mean(returns > 0.0, dtype=np.float64)),
        )

    def as_dict(self) -> dict[str, float | int | None]:
        return {
            "horizon_days": self.horizon_days,
            "count": self.count,
            "mean_return": self.mean_return,
            "median_return": self.median_return,
            "min_return": self.min_return,
            "max_return": self.max_return,
            "hit_rate": self.hit_rate,
        }


__all__ = ["SignalOutcomeReport"]
