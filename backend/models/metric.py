from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, timedelta

from core.errors import InvertedRange


@dataclass(frozen=True)
class MetricProfile:
    baseline: float
    spread: float


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvertedRange(self.start, self.end)

    def days(self) -> Iterator[date]:
        for i in range(len(self)):
            yield self.start + timedelta(days=i)

    def __len__(self) -> int:
        return (self.end - self.start).days + 1
