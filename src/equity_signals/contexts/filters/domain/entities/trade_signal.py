from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union


@dataclass(frozen=True, slots=True, order=True)
class BuySignal:
    """
    Instruction to open a long position on `date`.
    """

    date: date


@dataclass(frozen=True, slots=True, order=True)
class SellSignal:
    """
    Instruction to close a long position on `date`.
    """

    date: date


TradeSignal = Union[BuySignal, SellSignal]
