from __future__ import annotations

from typing import Sequence

from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: register and look up employees."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def add_employee(self, *, name: str) -> Employee:
        return self._employees.add(name)

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.get_all()
