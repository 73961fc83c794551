from .indicator_calculator import IndicatorCalculator

__all__ = ["IndicatorCalculator"]
