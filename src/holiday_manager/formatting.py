from __future__ import annotations

from .holidays.model import HolidayRequest, PendingHolidayRequest
from .rules.model import HolidayRules

NOTHING_TO_DISPLAY = "Nothing to display"
NOTHING_TO_VALIDATE = "Nothing to validate"


def format_pending(row: PendingHolidayRequest) -> str:
    return f"{row.period.format()} ({row.employee_name})"


def format_request(request: HolidayRequest) -> str:
    return f"Holiday request {request.request_id}: {request.period.format()} is {request.status.value}"


def format_rules(rules: HolidayRules) -> list[str]:
    lines = [f"Max consecutive days: {rules.max_consecutive_days}"]
    if not rules.blackout_periods:
        lines.append("Blackout periods: none")
    else:
        lines.append("Blackout periods:")
        lines.extend(f"\t{p.format()}" for p in rules.blackout_periods)
    return lines
