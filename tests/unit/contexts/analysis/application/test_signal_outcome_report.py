from __future__ import annotations

from datetime import date, timedelta

import pytest

from equity_signals.contexts.analysis.application import SignalOutcomeReport
from equity_signals.contexts.filters.domain import BuySignal
from equity_signals.platform.errors import InvalidConfigurationError
from equity_signals.shared_kernel.primitives import TradingDayPrice

_START = date(2024, 1, 1)


def _day(index: int) -> date:
    return _START + timedelta(days=index)


def _prices(closes: list[int]) -> list[TradingDayPrice]:
    return [
        TradingDayPrice.from_close(ticker="VGS.AX", day=_day(index), close=close)
        for index, close in enumerate(closes)
    ]


def test_outcome_report_measures_forward_returns() -> None:
    """
    Verify forward close-to-close returns and their summary statistics.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Horizon 2 over closes 10, 11, 12, 9, 12; the day-3 buy lacks forward bars and the
        off-calendar buy is ignored.
    Raises:
        AssertionError: If statistics differ.
    Side Effects:
        None.
    """
    signals = [BuySignal(_day(0)), BuySignal(_day(1)), BuySignal(_day(3)), BuySignal(_day(30))]

    report = SignalOutcomeReport.build(_prices([10, 11, 12, 9, 12]), signals, horizon_days=2)

    assert report.count == 2
    assert report.max_return == pytest.approx(0.2)
    assert report.min_return == pytest.approx(9 / 11 - 1)
    assert report.mean_return == pytest.approx((0.2 + (9 / 11 - 1)) / 2)
    assert report.median_return == pytest.approx(report.mean_return)
    assert report.hit_rate == pytest.approx(0.5)
    assert report.as_dict()["horizon_days"] == 2


def test_outcome_report_without_measurable_signals() -> None:
    report = SignalOutcomeReport.build(_prices([10, 11]), [BuySignal(_day(1))], horizon_days=5)

    assert report.count == 0
    assert report.as_dict() == {
        "horizon_days": 5,
        "count": 0,
        "mean_return": None,
        "median_return": None,
        "min_return": None,
        "max_return": None,
        "hit_rate": None,
    }


def test_outcome_report_rejects_non_positive_horizon() -> None:
    with pytest.raises(InvalidConfigurationError, match="report.horizon_days"):
        SignalOutcomeReport.build(_prices([10, 11]), [], horizon_days=0)
