from .backtest_analysis import BacktestAnalysis
from .batch_analysis_runner import BatchAnalysisRunner
from .live_analysis import LiveAnalysis
from .signal_outcome_report import SignalOutcomeReport

__all__ = [
    "BacktestAnalysis",
    "BatchAnalysisRunner",
    "LiveAnalysis",
    "SignalOutcomeReport",
]
