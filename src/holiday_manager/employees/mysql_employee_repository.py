from __future__ import annotations

from typing import Sequence

from ..common.validators import require_int_id, require_non_empty
from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add(self, name: str) -> Employee:
        name = require_non_empty(name, "Name")
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO employees(name) VALUES(%s)", (name,))
            return Employee(employee_id=int(cur.lastrowid), name=name)

    def get_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT employee_id, name FROM employees ORDER BY employee_id")
            rows = fetchall(cur)
            return [Employee(employee_id=int(r["employee_id"]), name=r["name"]) for r in rows]

    def get_by_id(self, employee_id: int) -> Employee:
        employee_id = require_int_id(employee_id, "Employee id")
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id, name FROM employees WHERE employee_id=%s",
                (employee_id,),
            )
            row = fetchone(cur)
            if not row:
                raise NotFoundError(f"Employee {employee_id} does not exist")
            return Employee(employee_id=int(row["employee_id"]), name=row["name"])
