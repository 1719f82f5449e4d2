from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import days_between, format_date, parse_iso_date
from ..core.constants import PERIOD_SEPARATOR


@dataclass(frozen=True)
class Period:
    """Inclusive range of calendar dates.

    ``start <= end`` is expected but not enforced: reversed periods are valid
    values and simply have a negative span.
    """

    start: date
    end: date

    @classmethod
    def parse(cls, start_text: str, end_text: str) -> "Period":
        return cls(start=parse_iso_date(start_text), end=parse_iso_date(end_text))

    @property
    def span_days(self) -> int:
        return days_between(self.end, self.start)

    def strictly_contains(self, day: date) -> bool:
        # Boundary days are outside.
        return self.start < day < self.end

    def format(self) -> str:
        return f"{format_date(self.start)}{PERIOD_SEPARATOR}{format_date(self.end)}"

    def __str__(self) -> str:
        return self.format()
