from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from equity_signals.contexts.filters.domain.entities import BuySignal, SellSignal


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """
    AnalysisResult: buy and sell signals produced for one ticker by one analysis run.

    Invariants:
    - signals are sorted ascending by date
    - every signal date lies within [first_date, last_date]

    Related:
      - src/equity_signals/contexts/analysis/application/services/backtest_analysis.py
      - src/equity_signals/contexts/analysis/application/services/live_analysis.py
      - apps/api/dto/analysis.py
    """

    ticker: str
    first_date: date
    last_date: date
    buy_signals: tuple[BuySignal, ...]
    sell_signals: tuple[SellSignal, ...]

    def __post_init__(self) -> None:
        if self.first_date > self.last_date:
            raise ValueError(
                f"AnalysisResult requires first_date <= last_date, "
                f"got {self.first_date} > {self.last_date}"
            )
        object.__setattr__(self, "buy_signals", tuple(sorted(self.buy_signals)))
        object.__setattr__(self, "sell_signals", tuple(sorted(self.sell_signals)))

    def as_dict(self) -> dict[str, object]:
        """Serialize with ISO dates, ready for JSON output."""
        return {
            "ticker": self.ticker,
            "first_date": self.first_date.isoformat(),
            "last_date": self.last_date.isoformat(),
            "buy_dates": [signal.date.isoformat() for signal in self.buy_signals],
            "sell_dates": [signal.date.isoformat() for signal in self.sell_signals],
        }
