"""
Analysis API routes.

Related: apps.api.dto.analysis,
  equity_signals.contexts.analysis.application.services.backtest_analysis,
  equity_signals.contexts.analysis.application.services.live_analysis
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from apps.api.common import AnalysisRequestError
from apps.api.dto import (
    AnalysisSignalsRequest,
    AnalysisSignalsResponse,
    HealthResponse,
    build_analysis_signals_response,
    build_prices,
    build_strategy_config,
)
from equity_signals.contexts.analysis.adapters import RecordingSignalSink
from equity_signals.contexts.analysis.application import BacktestAnalysis, LiveAnalysis
from equity_signals.contexts.analysis.domain import AnalysisResult
from equity_signals.contexts.strategy.application import StrategyFactory, TradingStrategy
from equity_signals.platform.time import Clock, FixedClock, SystemClock
from equity_signals.shared_kernel.primitives import TradingDayPrice

log = logging.getLogger(__name__)


def build_analysis_router(
    *,
    factory: StrategyFactory | None = None,
    clock: Clock | None = None,
) -> APIRouter:
    """
    Build router exposing the health probe and the one-shot signal analysis endpoint.

    Args:
        factory: Optional strategy factory; a default factory is used when omitted.
        clock: Optional clock for live analysis when the request carries no `as_of`.
    Returns:
        APIRouter: Router with `GET /health` and `POST /analysis/signals`.
    Assumptions:
        Requests are stateless; every call builds its own strategy and sink.
    Raises:
        None.
    Side Effects:
        None.
    """
    effective_factory = factory if factory is not None else StrategyFactory()
    effective_clock = clock if clock is not None else SystemClock()
    router = APIRouter(tags=["analysis"])

    @router.get("/health", response_model=HealthResponse)
    def get_health() -> HealthResponse:
        return HealthResponse()

    @router.post("/analysis/signals", response_model=AnalysisSignalsResponse)
    def post_analysis_signals(request: AnalysisSignalsRequest) -> AnalysisSignalsResponse:
        """
        Run the posted strategy over the posted bars and return buy/sell dates.

        Args:
            request: Ticker, bars, entry/exit trees and analysis mode.
        Returns:
            AnalysisSignalsResponse: Dates of emitted buy and sell signals.
        Assumptions:
            `as_of` pins the live clock; without it the router clock is used.
        Raises:
            AnalysisRequestError: `validation_error` for invalid bars or strategy trees,
                `insufficient_data` when the bars do not cover the strategy lead-in.
        Side Effects:
            None.
        """
        try:
            prices = build_prices(request=request)
            strategy = effective_factory.strategy(build_strategy_config(request=request))
            result = _run_analysis(
                request=request,
                strategy=strategy,
                prices=prices,
                clock=FixedClock(request.as_of) if request.as_of is not None else effective_clock,
            )
        except ValueError as error:
            log.info("analysis request rejected ticker=%s error=%s", request.ticker, error)
            raise AnalysisRequestError.from_domain_error(error) from error

        log.info(
            "analysis request served ticker=%s mode=%s buys=%s sells=%s",
            result.ticker,
            request.mode,
            len(result.buy_signals),
            len(result.sell_signals),
        )
        return build_analysis_signals_response(result=result, mode=request.mode)

    return router


def _run_analysis(
    *,
    request: AnalysisSignalsRequest,
    strategy: TradingStrategy,
    prices: tuple[TradingDayPrice, ...],
    clock: Clock,
) -> AnalysisResult:
    sink = RecordingSignalSink()
    if request.mode == "backtest":
        return BacktestAnalysis(strategy, sink).run(prices)
    return LiveAnalysis(strategy, sink, window_days=request.window_days, clock=clock).run(prices)


__all__ = ["build_analysis_router"]
