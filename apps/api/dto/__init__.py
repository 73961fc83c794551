from .analysis import (
    AnalysisSignalsRequest,
    AnalysisSignalsResponse,
    HealthResponse,
    PriceBarRequest,
    build_analysis_signals_response,
    build_prices,
    build_strategy_config,
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
