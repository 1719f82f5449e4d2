from __future__ import annotations

from typing import Optional

from ..core.exceptions import NotConfiguredError
from .model import HolidayRules
from .repository import HolidayRulesRepository


class InMemoryHolidayRulesRepository(HolidayRulesRepository):
    def __init__(self):
        self._rules: Optional[HolidayRules] = None

    def set(self, rules: HolidayRules) -> None:
        self._rules = rules

    def get(self) -> HolidayRules:
        if self._rules is None:
            raise NotConfiguredError("Holiday rules have not been configured")
        return self._rules
