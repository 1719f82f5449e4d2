from __future__ import annotations

from typing import Protocol

from .model import HolidayRules


class HolidayRulesRepository(Protocol):
    def set(self, rules: HolidayRules) -> None:
        """Replace the active rules wholesale."""

        raise NotImplementedError

    def get(self) -> HolidayRules:
        """Raises NotConfiguredError if rules were never set."""

        raise NotImplementedError
