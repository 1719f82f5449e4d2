from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Services depend on this interface, never on a concrete storage backend.
    """

    def add(self, name: str) -> Employee:
        """Create an employee with a fresh id. Raises InvalidInputError on a blank name."""

        raise NotImplementedError

    def get_all(self) -> Sequence[Employee]:
        """All employees in insertion order."""

        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Employee:
        """Raises NotFoundError for an unknown id."""

        raise NotImplementedError
