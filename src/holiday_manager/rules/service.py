from __future__ import annotations

from typing import Iterable, List, Tuple

from ..common.validators import require_non_negative
from ..core.exceptions import InvalidInputError
from ..periods.model import Period
from .model import HolidayRules
from .repository import HolidayRulesRepository


def parse_blackout_periods(text: str) -> List[Tuple[str, str]]:
    """Parse ``2024-03-01:2024-03-31,2024-09-01:2024-09-01`` into date text pairs.

    A single date (no colon) stands for a one-day blackout. Blank text gives
    an empty list.
    """

    pairs: List[Tuple[str, str]] = []
    for chunk in (text or "").split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = chunk.split(":")
        if len(parts) == 1:
            pairs.append((parts[0], parts[0]))
        elif len(parts) == 2:
            pairs.append((parts[0].strip(), parts[1].strip()))
        else:
            raise InvalidInputError(f"Invalid blackout period {chunk!r} (expected FROM:TO)")
    return pairs


class RulesService:
    """Use case: load the holiday rules from configuration values."""

    def __init__(self, rules: HolidayRulesRepository):
        self._rules = rules

    def configure(
        self,
        *,
        max_consecutive_days: int,
        blackout_periods: Iterable[Tuple[str, str]] = (),
    ) -> HolidayRules:
        rules = HolidayRules(
            max_consecutive_days=require_non_negative(max_consecutive_days, "Max consecutive days"),
            blackout_periods=tuple(Period.parse(start, end) for start, end in blackout_periods),
        )
        self._rules.set(rules)
        return rules

    def current(self) -> HolidayRules:
        return self._rules.get()
