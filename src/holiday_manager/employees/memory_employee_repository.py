from __future__ import annotations

from typing import Sequence

from ..common.validators import require_int_id, require_non_empty
from ..core.exceptions import NotFoundError
from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self):
        self._next_id = 1
        self._by_id: dict[int, Employee] = {}

    def add(self, name: str) -> Employee:
        name = require_non_empty(name, "Name")
        employee = Employee(employee_id=self._next_id, name=name)
        self._next_id += 1
        self._by_id[employee.employee_id] = employee
        return employee

    def get_all(self) -> Sequence[Employee]:
        return list(self._by_id.values())

    def get_by_id(self, employee_id: int) -> Employee:
        employee = self._by_id.get(require_int_id(employee_id, "Employee id"))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return employee
