from .ports import SignalSink
from .services import BacktestAnalysis, BatchAnalysisRunner, LiveAnalysis, SignalOutcomeReport

__all__ = [
    "BacktestAnalysis",
    "BatchAnalysisRunner",
    "LiveAnalysis",
    "SignalOutcomeReport",
    "SignalSink",
]
