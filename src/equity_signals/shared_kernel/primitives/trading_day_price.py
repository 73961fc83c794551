from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from .decimal_math import to_decimal


@dataclass(frozen=True, slots=True)
class TradingDayPrice:
    """
    TradingDayPrice: one daily OHLC bar for a single equity.

    Prices are fixed-precision decimals; binary floats are rejected at construction.

    Invariants:
    - ticker is non-empty (strip + upper)
    - lowest_price <= min(opening_price, closing_price)
    - highest_price >= max(opening_price, closing_price)
    """

    ticker: str
    date: date
    opening_price: Decimal
    lowest_price: Decimal
    highest_price: Decimal
    closing_price: Decimal

    def __post_init__(self) -> None:
        normalized_ticker = self.ticker.strip().upper()
        if not normalized_ticker:
            raise ValueError("TradingDayPrice requires a non-empty ticker")
        object.__setattr__(self, "ticker", normalized_ticker)

        if not isinstance(self.date, date):
            raise TypeError(f"TradingDayPrice.date must be a date, got {type(self.date).__name__}")

        for field_name in ("opening_price", "lowest_price", "highest_price", "closing_price"):
            object.__setattr__(
                self,
                field_name,
                to_decimal(getattr(self, field_name), field_name=field_name),
            )

        if self.highest_price < max(self.opening_price, self.closing_price):
            raise ValueError(
                f"TradingDayPrice requires highest_price >= max(open, close) on {self.date}"
            )
        if self.lowest_price > min(self.opening_price, self.closing_price):
            raise ValueError(
                f"TradingDayPrice requires lowest_price <= min(open, close) on {self.date}"
            )

    @classmethod
    def from_close(cls, *, ticker: str, day: date, close: Decimal | int | str) -> TradingDayPrice:
        """
        Build a flat bar whose open/high/low all equal the closing price.

        Args:
            ticker: Equity ticker.
            day: Trading date.
            close: Closing price.
        Returns:
            TradingDayPrice: Bar with identical OHLC values.
        Assumptions:
            Used where only closing prices are known (closing-price indicators, fixtures).
        Raises:
            TypeError: If close is a float.
            ValueError: If close is not a finite decimal.
        Side Effects:
            None.
        """
        price = to_decimal(close, field_name="closing_price")
        return cls(
            ticker=ticker,
            date=day,
            opening_price=price,
            lowest_price=price,
            highest_price=price,
            closing_price=price,
        )

    def as_dict(self) -> dict[str, str]:
        """Serialize the bar with ISO date and exact decimal text."""
        return {
            "ticker": self.ticker,
            "date": self.date.isoformat(),
            "open": str(self.opening_price),
            "low": str(self.lowest_price),
            "high": str(self.highest_price),
            "close": str(self.closing_price),
        }


def sort_by_date(prices: Iterable[TradingDayPrice]) -> tuple[TradingDayPrice, ...]:
    """
    Order price bars ascending by date and reject duplicate dates.

    Args:
        prices: Bars in provider order.
    Returns:
        tuple[TradingDayPrice, ...]: Bars sorted earliest to latest.
    Assumptions:
        Upstream providers may return unordered bars; indicators require ascending order.
    Raises:
        ValueError: If two bars share the same date.
    Side Effects:
        None.
    """
    ordered = tuple(sorted(prices, key=lambda price: price.date))
    for previous, current in zip(ordered, ordered[1:]):
        if previous.date == current.date:
            raise ValueError(f"duplicate trading date in price series: {current.date}")
    return ordered
