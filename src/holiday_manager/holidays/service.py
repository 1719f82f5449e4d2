from __future__ import annotations

from typing import List, Optional

from ..common.validators import require_int_id
from ..core.enums import HolidayStatus
from ..employees.repository import EmployeeRepository
from ..periods.model import Period
from ..rules.model import HolidayRules
from ..rules.repository import HolidayRulesRepository
from .model import EmployeeHolidays, HolidayRequest, NewHolidayRequest, PendingHolidayRequest
from .repository import HolidayRequestRepository
from .transitions import as_status
from .validator import is_auto_approvable


class HolidayRequestService:
    """Use case: submit holiday requests and drive them through approval."""

    def __init__(
        self,
        requests: HolidayRequestRepository,
        employees: EmployeeRepository,
        rules: HolidayRulesRepository,
    ):
        self._requests = requests
        self._employees = employees
        self._rules = rules

    def submit_request(
        self,
        *,
        employee_id: int,
        start_date: str,
        end_date: str,
        rules: Optional[HolidayRules] = None,
    ) -> HolidayRequest:
        period = Period.parse(start_date, end_date)
        employee = self._employees.get_by_id(require_int_id(employee_id, "Employee id"))
        active_rules = rules if rules is not None else self._rules.get()

        status = HolidayStatus.APPROVED if is_auto_approvable(period, active_rules) else HolidayStatus.PENDING
        return self._requests.add(
            NewHolidayRequest(employee_id=employee.employee_id, period=period, status=status)
        )

    def list_pending_with_requester(self) -> List[PendingHolidayRequest]:
        out: List[PendingHolidayRequest] = []
        for r in self._requests.get_pending():
            employee = self._employees.get_by_id(r.employee_id)
            out.append(PendingHolidayRequest(request_id=r.request_id, period=r.period, employee_name=employee.name))
        return out

    def list_employees_with_holidays(self) -> List[EmployeeHolidays]:
        return [
            EmployeeHolidays(
                employee=e,
                holidays=tuple(r.period for r in self._requests.get_approved_by_employee_id(e.employee_id)),
            )
            for e in self._employees.get_all()
        ]

    def decide(self, *, request_id: int, decision: HolidayStatus) -> HolidayRequest:
        request_id = require_int_id(request_id, "Request id")
        status = as_status(decision)
        self._requests.set_status(request_id, status)
        return self._requests.get_by_id(request_id)

    def approve(self, *, request_id: int) -> HolidayRequest:
        return self.decide(request_id=request_id, decision=HolidayStatus.APPROVED)

    def reject(self, *, request_id: int) -> HolidayRequest:
        return self.decide(request_id=request_id, decision=HolidayStatus.REJECTED)
