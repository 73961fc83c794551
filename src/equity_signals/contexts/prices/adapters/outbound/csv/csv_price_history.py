from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Mapping

from equity_signals.contexts.prices.application.ports import PriceHistory
from equity_signals.shared_kernel.primitives import (
    DateRange,
    Ticker,
    TradingDayPrice,
    sort_by_date,
    to_decimal,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CsvColumnMap:
    """
    Column map for CSV price files.

    Defaults expect the canonical header `ticker,date,open,high,low,close`; override when a
    provider export uses other names.
    """

    ticker: str = "ticker"
    date: str = "date"
    open: str = "open"
    high: str = "high"
    low: str = "low"
    close: str = "close"

    def required(self) -> tuple[str, ...]:
        return (self.ticker, self.date, self.open, self.high, self.low, self.close)


class CsvPriceHistory(PriceHistory):
    """
    PriceHistory backed by one CSV file holding daily bars of one or many tickers.

    Key decisions:
    - decimal text is parsed exactly (no float round-trip)
    - dates are ISO `YYYY-MM-DD`
    - the file is read on every call; no cache is kept between calls

    Related:
      - src/equity_signals/contexts/prices/application/ports/price_history.py
      - apps/cli/commands/analyse.py
    """

    def __init__(self, path: str | Path, *, column_map: CsvColumnMap | None = None) -> None:
        self._path = Path(path)
        self._columns = column_map if column_map is not None else CsvColumnMap()

    def prices(self, ticker: Ticker, date_range: DateRange) -> tuple[TradingDayPrice, ...]:
        """
        Read bars of `ticker` with date in the half-open `date_range`.

        Args:
            ticker: Normalized equity ticker.
            date_range: Requested half-open calendar range.
        Returns:
            tuple[TradingDayPrice, ...]: Bars sorted ascending by date.
        Assumptions:
            Ticker comparison is case-insensitive (both sides are upper-cased).
        Raises:
            FileNotFoundError: If the CSV file does not exist.
            ValueError: If the header misses a column, a row is malformed, or a date repeats.
        Side Effects:
            Reads one UTF-8 CSV file from filesystem.
        """
        if not self._path.exists():
            raise FileNotFoundError(f"price file not found: {self._path}")

        selected: list[TradingDayPrice] = []
        with self._path.open(newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            self._check_header(reader.fieldnames)
            for line_number, row in enumerate(reader, start=2):
                if (row[self._columns.ticker] or "").strip().upper() != ticker.value:
                    continue
                price = self._parse_row(row, line_number=line_number)
                if date_range.contains(price.date):
                    selected.append(price)

        log.debug(
            "csv prices loaded path=%s ticker=%s bars=%s",
            self._path,
            ticker,
            len(selected),
        )
        return sort_by_date(selected)

    def _check_header(self, fieldnames: list[str] | None) -> None:
        present = set(fieldnames or ())
        missing = [column for column in self._columns.required() if column not in present]
        if missing:
            raise ValueError(f"{self._path} is missing columns {missing}")

    def _parse_row(self, row: Mapping[str, str], *, line_number: int) -> TradingDayPrice:
        columns = self._columns
        try:
            return TradingDayPrice(
                ticker=row[columns.ticker],
                date=date.fromisoformat((row[columns.date] or "").strip()),
                opening_price=to_decimal(row[columns.open], field_name="open"),
                lowest_price=to_decimal(row[columns.low], field_name="low"),
                highest_price=to_decimal(row[columns.high], field_name="high"),
                closing_price=to_decimal(row[columns.close], field_name="close"),
            )
        except (TypeError, ValueError) as error:
            raise ValueError(f"{self._path}:{line_number} invalid price row: {error}") from error


__all__ = ["CsvColumnMap", "CsvPriceHistory"]
