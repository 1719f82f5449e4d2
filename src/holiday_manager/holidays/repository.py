from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import HolidayStatus
from .model import HolidayRequest, NewHolidayRequest


class HolidayRequestRepository(Protocol):
    def add(self, request: NewHolidayRequest) -> HolidayRequest:
        """Store the request under a fresh, never reused id."""

        raise NotImplementedError

    def get_by_id(self, request_id: int) -> HolidayRequest:
        raise NotImplementedError

    def get_pending(self) -> Sequence[HolidayRequest]:
        raise NotImplementedError

    def get_approved_by_employee_id(self, employee_id: int) -> Sequence[HolidayRequest]:
        raise NotImplementedError

    def set_status(self, request_id: int, status: HolidayStatus) -> None:
        """Move a pending request to approved or rejected.

        Raises NotFoundError for an unknown id and InvalidTransitionError when
        the request is no longer pending or the target is not a decision.
        """

        raise NotImplementedError
