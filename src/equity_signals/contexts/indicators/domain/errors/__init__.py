from .insufficient_data_error import InsufficientDataError

__all__ = ["InsufficientDataError"]
