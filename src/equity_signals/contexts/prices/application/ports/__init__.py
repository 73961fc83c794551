from .price_history import PriceHistory

__all__ = ["PriceHistory"]
