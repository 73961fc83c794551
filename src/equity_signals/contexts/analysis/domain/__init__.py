from .entities import AnalysisResult

__all__ = ["AnalysisResult"]
