from .signal_range_filter import SignalRangeFilter
from .signal_rule import SignalRule

__all__ = ["SignalRangeFilter", "SignalRule"]
