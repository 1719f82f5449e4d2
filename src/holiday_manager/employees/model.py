from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Plain data object, no storage access. Never mutated after creation.
    """

    employee_id: int
    name: str
