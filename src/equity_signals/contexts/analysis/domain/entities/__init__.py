from .analysis_result import AnalysisResult

__all__ = ["AnalysisResult"]
