from .input_validator import validate_prices, validate_series

__all__ = ["validate_prices", "validate_series"]
