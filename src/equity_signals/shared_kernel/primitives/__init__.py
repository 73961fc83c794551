"""
Shared Kernel primitives.

This package re-exports the minimal set of domain primitives so that other
modules can import them from one place:

    from equity_signals.shared_kernel.primitives import TradingDayPrice, sort_by_date
"""

from .date_range import DateRange
from .decimal_math import MATH_PRECISION, new_math_context, round_half_up, to_decimal
from .ticker import Ticker
from .trading_day_price import TradingDayPrice, sort_by_date

__all__ = [
    "DateRange",
    "MATH_PRECISION",
    "Ticker",
    "TradingDayPrice",
    "new_math_context",
    "round_half_up",
    "sort_by_date",
    "to_decimal",
]
