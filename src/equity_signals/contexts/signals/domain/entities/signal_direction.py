from __future__ import annotations

from enum import Enum


class SignalDirection(str, Enum):
    """
    Direction of an indicator signal: bullish signals feed entries, bearish ones feed exits.
    """

    BULLISH = "bullish"
    BEARISH = "bearish"
