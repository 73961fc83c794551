from .signal_set import BY_DATE, BY_DATE_DESCENDING, SignalOrdering, SignalSet
from .trade_signal import BuySignal, SellSignal, TradeSignal

__all__ = [
    "BY_DATE",
    "BY_DATE_DESCENDING",
    "BuySignal",
    "SellSignal",
    "SignalOrdering",
    "SignalSet",
    "TradeSignal",
]
