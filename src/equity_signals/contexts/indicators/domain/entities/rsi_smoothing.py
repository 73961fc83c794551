from __future__ import annotations

from enum import Enum


class RsiSmoothing(str, Enum):
    """
    Average gain/loss smoothing used by the relative strength index.

    - WILDER: seed with the mean of the first `lookback` deltas, then
      `avg = (avg * (n - 1) + current) / n`.
    - REFERENCE: exponential smoothing with `k = 2 / (n + 1)` and two-place
      intermediate rounding, reproducing the historical reference figures.
    """

    WILDER = "wilder"
    REFERENCE = "reference"
