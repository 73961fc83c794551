from .ports import IndicatorCalculator
from .services import validate_prices, validate_series

__all__ = [
    "IndicatorCalculator",
    "validate_prices",
    "validate_series",
]
