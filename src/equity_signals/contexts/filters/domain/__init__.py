from .entities import (
    BY_DATE,
    BY_DATE_DESCENDING,
    BuySignal,
    SellSignal,
    SignalOrdering,
    SignalSet,
    TradeSignal,
)

__all__ = [
    "BY_DATE",
    "BY_DATE_DESCENDING",
    "BuySignal",
    "SellSignal",
    "SignalOrdering",
    "SignalSet",
    "TradeSignal",
]
