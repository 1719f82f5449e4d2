from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ..periods.model import Period


@dataclass(frozen=True)
class HolidayRules:
    """Active validation configuration for holiday requests."""

    max_consecutive_days: int
    blackout_periods: Tuple[Period, ...] = field(default_factory=tuple)
