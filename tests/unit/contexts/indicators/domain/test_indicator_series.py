from __future__ import annotations

import math
from datetime import date, timedelta
from decimal import Decimal

import pytest

from equity_signals.contexts.indicators.domain import IndicatorSeries, MacdLines

_START = date(2024, 1, 1)


def _dates(count: int) -> tuple[date, ...]:
    return tuple(_START + timedelta(days=offset) for offset in range(count))


def test_indicator_series_requires_equal_lengths() -> None:
    """
    Verify the alignment invariant between dates and values.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        None.
    Raises:
        AssertionError: If misaligned series are accepted.
    Side Effects:
        None.
    """
    with pytest.raises(ValueError, match="len\\(dates\\) == len\\(values\\)"):
        IndicatorSeries(dates=_dates(3), values=(None, Decimal(1)))


def test_indicator_series_defined_entries_and_first_index() -> None:
    """
    Verify iteration over defined entries skips leading nulls.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Undefined entries are `None`.
    Raises:
        AssertionError: If defined entries or first index are wrong.
    Side Effects:
        None.
    """
    dates = _dates(4)
    series = IndicatorSeries(dates=dates, values=(None, None, Decimal("1.5"), Decimal("2")))

    assert len(series) == 4
    assert series.first_index == 2
    assert not series.is_empty()
    assert list(series.defined()) == [
        (2, dates[2], Decimal("1.5")),
        (3, dates[3], Decimal("2")),
    ]


def test_indicator_series_float_export_uses_nan_for_undefined() -> None:
    exported = IndicatorSeries(dates=_dates(2), values=(None, Decimal("1.25"))).to_float_array()

    assert math.isnan(exported[0])
    assert exported[1] == 1.25


def test_empty_series_has_no_first_index() -> None:
    series = IndicatorSeries(dates=_dates(2), values=(None, None))

    assert series.first_index is None
    assert series.is_empty()


def test_macd_lines_require_shared_calendar() -> None:
    macd = IndicatorSeries(dates=_dates(2), values=(None, Decimal(1)))
    other = IndicatorSeries(dates=_dates(3)[1:], values=(None, Decimal(1)))

    with pytest.raises(ValueError, match="same dates"):
        MacdLines(macd=macd, signal_line=other)
