from __future__ import annotations

from ..core.enums import HolidayStatus
from ..core.exceptions import InvalidInputError, InvalidTransitionError

HOLIDAY_TRANSITIONS: dict[HolidayStatus, frozenset[HolidayStatus]] = {
    HolidayStatus.PENDING: frozenset({HolidayStatus.APPROVED, HolidayStatus.REJECTED}),
    HolidayStatus.APPROVED: frozenset(),
    HolidayStatus.REJECTED: frozenset(),
}


def as_status(value) -> HolidayStatus:
    try:
        return HolidayStatus(value)
    except ValueError:
        raise InvalidInputError(f"Unknown holiday status {value!r}")


def ensure_transition(request_id: int, current: HolidayStatus, target: HolidayStatus) -> None:
    if target not in HOLIDAY_TRANSITIONS[current]:
        raise InvalidTransitionError(
            f"Holiday request {request_id} cannot move from {current.value} to {target.value}"
        )
