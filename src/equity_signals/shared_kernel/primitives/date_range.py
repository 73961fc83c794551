from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class DateRange:
    """
    DateRange: calendar date range used for price-history requests.

    Semantics:
    - half-open interval [start, end): start is included, end is excluded.

    Invariants:
    - start < end
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise ValueError(
                f"DateRange requires start < end, got start={self.start} end={self.end}"
            )

    def days(self) -> int:
        """Number of calendar days covered by the range."""
        return (self.end - self.start).days

    def contains(self, day: date) -> bool:
        """Whether `day` falls inside [start, end)."""
        return self.start <= day < self.end
