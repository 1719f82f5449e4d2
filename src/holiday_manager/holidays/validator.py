"""Auto-approval rules for holiday requests.

A request is approved on submission when it is not longer than the allowed
number of consecutive days and neither of its end dates falls strictly
inside a blackout period. Dates landing exactly on a blackout boundary, and
blackouts lying entirely inside the request, do not block auto-approval.
"""

from __future__ import annotations

from typing import Union

from ..periods.model import Period
from ..rules.model import HolidayRules
from .model import HolidayRequest, NewHolidayRequest


def exceeds_max_consecutive_days(period: Period, rules: HolidayRules) -> bool:
    return period.span_days > rules.max_consecutive_days


def hits_blackout(period: Period, blackout: Period) -> bool:
    return blackout.strictly_contains(period.start) or blackout.strictly_contains(period.end)


def is_auto_approvable(
    request: Union[HolidayRequest, NewHolidayRequest, Period],
    rules: HolidayRules,
) -> bool:
    period = request if isinstance(request, Period) else request.period

    if exceeds_max_consecutive_days(period, rules):
        return False
    for blackout in rules.blackout_periods:
        if hits_blackout(period, blackout):
            return False
    return True
