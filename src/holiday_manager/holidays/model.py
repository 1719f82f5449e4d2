from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.enums import HolidayStatus
from ..employees.model import Employee
from ..periods.model import Period


@dataclass(frozen=True)
class NewHolidayRequest:
    employee_id: int
    period: Period
    status: HolidayStatus


@dataclass(frozen=True)
class HolidayRequest:
    request_id: int
    employee_id: int
    period: Period
    status: HolidayStatus


@dataclass(frozen=True)
class PendingHolidayRequest:
    """Pending request joined with the requester's name, for display."""

    request_id: int
    period: Period
    employee_name: str


@dataclass(frozen=True)
class EmployeeHolidays:
    employee: Employee
    holidays: Tuple[Period, ...]
