from .analysis import build_analysis_router

__all__ = ["build_analysis_router"]
