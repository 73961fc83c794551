"""
Pydantic API models and converters for the analysis endpoint.

Related: apps.api.routes.analysis,
  equity_signals.contexts.strategy.adapters.outbound.config.strategy_tree_parser
"""

from __future__ import annotations

import datetime
from decimal import Decimal
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from equity_signals.contexts.analysis.domain import AnalysisResult
from equity_signals.contexts.strategy.adapters import parse_entry_node
from equity_signals.contexts.strategy.domain.entities import NeverNodeConfig, StrategyConfig
from equity_signals.shared_kernel.primitives import TradingDayPrice


class PriceBarRequest(BaseModel):
    """
    One daily OHLC bar; prices accept decimal strings or JSON numbers.
    """

    model_config = ConfigDict(extra="forbid")

    date: datetime.date
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal


class AnalysisSignalsRequest(BaseModel):
    """
    Request for `POST /analysis/signals`.

    `entry` and `exit` use the same node shapes as `strategy.entry` / `strategy.exit` in
    `strategy.yaml`; `exit` defaults to `never`.
    """

    model_config = ConfigDict(extra="forbid")

    ticker: str = Field(min_length=1)
    prices: list[PriceBarRequest] = Field(min_length=1)
    entry: dict[str, Any]
    exit: dict[str, Any] | str | None = None
    mode: Literal["backtest", "live"] = "live"
    window_days: int = Field(default=5, gt=0)
    as_of: datetime.date | None = None
    name: str = "api"


class AnalysisSignalsResponse(BaseModel):
    """
    Buy and sell dates produced for one ticker.
    """

    ticker: str
    mode: Literal["backtest", "live"]
    first_date: datetime.date
    last_date: datetime.date
    buy_dates: list[datetime.date]
    sell_dates: list[datetime.date]


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"


def build_prices(*, request: AnalysisSignalsRequest) -> tuple[TradingDayPrice, ...]:
    """
    Convert request bars into domain price bars.

    Args:
        request: Validated request model.
    Returns:
        tuple[TradingDayPrice, ...]: Bars in request order.
    Assumptions:
        Sorting and duplicate detection happen in the analysis drivers.
    Raises:
        ValueError: If a bar violates OHLC invariants or a price is not finite.
    Side Effects:
        None.
    """
    return tuple(
        TradingDayPrice(
            ticker=request.ticker,
            date=bar.date,
            opening_price=bar.open,
            lowest_price=bar.low,
            highest_price=bar.high,
            closing_price=bar.close,
        )
        for bar in request.prices
    )


def build_strategy_config(*, request: AnalysisSignalsRequest) -> StrategyConfig:
    """
    Parse request entry/exit trees into a strategy configuration.

    Args:
        request: Validated request model.
    Returns:
        StrategyConfig: Strategy configuration named after `request.name`.
    Assumptions:
        Node paths in diagnostics are rooted at `body.entry` / `body.exit`.
    Raises:
        StrategyConfigError: If a tree node is invalid.
    Side Effects:
        None.
    """
    exit_ = (
        parse_entry_node(request.exit, yaml_path="body.exit")
        if request.exit is not None
        else NeverNodeConfig()
    )
    return StrategyConfig(
        name=request.name,
        entry=parse_entry_node(request.entry, yaml_path="body.entry"),
        exit=exit_,
    )


def build_analysis_signals_response(
    *,
    result: AnalysisResult,
    mode: Literal["backtest", "live"],
) -> AnalysisSignalsResponse:
    return AnalysisSignalsResponse(
        ticker=result.ticker,
        mode=mode,
        first_date=result.first_date,
        last_date=result.last_date,
        buy_dates=[signal.date for signal in result.buy_signals],
        sell_dates=[signal.date for signal in result.sell_signals],
    )


__all__ = [
    "AnalysisSignalsRequest",
    "AnalysisSignalsResponse",
    "HealthResponse",
    "PriceBarRequest",
    "build_analysis_signals_response",
    "build_prices",
    "build_strategy_config",
]
