from .ports import PriceHistory

__all__ = ["PriceHistory"]
