from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from ..common.validators import require_int_id
from ..core.enums import HolidayStatus
from ..core.exceptions import NotFoundError
from .model import HolidayRequest, NewHolidayRequest
from .repository import HolidayRequestRepository
from .transitions import as_status, ensure_transition


class InMemoryHolidayRequestRepository(HolidayRequestRepository):
    def __init__(self):
        self._next_id = 1
        # dicts keep insertion order
        self._by_id: dict[int, HolidayRequest] = {}

    def add(self, request: NewHolidayRequest) -> HolidayRequest:
        stored = HolidayRequest(
            request_id=self._next_id,
            employee_id=require_int_id(request.employee_id, "Employee id"),
            period=request.period,
            status=request.status,
        )
        self._next_id += 1
        self._by_id[stored.request_id] = stored
        return stored

    def get_by_id(self, request_id: int) -> HolidayRequest:
        request = self._by_id.get(require_int_id(request_id, "Request id"))
        if not request:
            raise NotFoundError(f"Holiday request {request_id} does not exist")
        return request

    def get_pending(self) -> Sequence[HolidayRequest]:
        return [r for r in self._by_id.values() if r.status == HolidayStatus.PENDING]

    def get_approved_by_employee_id(self, employee_id: int) -> Sequence[HolidayRequest]:
        employee_id = require_int_id(employee_id, "Employee id")
        return [
            r
            for r in self._by_id.values()
            if r.employee_id == employee_id and r.status == HolidayStatus.APPROVED
        ]

    def set_status(self, request_id: int, status: HolidayStatus) -> None:
        target = as_status(status)
        current = self.get_by_id(request_id)
        ensure_transition(current.request_id, current.status, target)
        self._by_id[current.request_id] = replace(current, status=target)
