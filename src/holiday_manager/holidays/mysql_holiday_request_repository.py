from __future__ import annotations

from typing import Any, Dict, Sequence

from ..common.validators import require_int_id
from ..core.enums import HolidayStatus
from ..core.exceptions import InvalidTransitionError, NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..periods.model import Period
from .model import HolidayRequest, NewHolidayRequest
from .repository import HolidayRequestRepository
from .transitions import as_status, ensure_transition

_COLUMNS = "request_id, employee_id, date_from, date_to, status"


def _row_to_request(r: Dict[str, Any]) -> HolidayRequest:
    return HolidayRequest(
        request_id=int(r["request_id"]),
        employee_id=int(r["employee_id"]),
        period=Period(start=r["date_from"], end=r["date_to"]),
        status=HolidayStatus(r["status"]),
    )


class MySQLHolidayRequestRepository(HolidayRequestRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add(self, request: NewHolidayRequest) -> HolidayRequest:
        employee_id = require_int_id(request.employee_id, "Employee id")
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO holiday_requests(employee_id, date_from, date_to, status)
                VALUES(%s,%s,%s,%s)
                """,
                (
                    employee_id,
                    request.period.start,
                    request.period.end,
                    request.status.value,
                ),
            )
            return HolidayRequest(
                request_id=int(cur.lastrowid),
                employee_id=employee_id,
                period=request.period,
                status=request.status,
            )

    def get_by_id(self, request_id: int) -> HolidayRequest:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM holiday_requests WHERE request_id=%s",
                (require_int_id(request_id, "Request id"),),
            )
            row = fetchone(cur)
            if not row:
                raise NotFoundError(f"Holiday request {request_id} does not exist")
            return _row_to_request(row)

    def get_pending(self) -> Sequence[HolidayRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM holiday_requests WHERE status=%s ORDER BY request_id",
                (HolidayStatus.PENDING.value,),
            )
            return [_row_to_request(r) for r in fetchall(cur)]

    def get_approved_by_employee_id(self, employee_id: int) -> Sequence[HolidayRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM holiday_requests
                WHERE employee_id=%s AND status=%s
                ORDER BY request_id
                """,
                (require_int_id(employee_id, "Employee id"), HolidayStatus.APPROVED.value),
            )
            return [_row_to_request(r) for r in fetchall(cur)]

    def set_status(self, request_id: int, status: HolidayStatus) -> None:
        request_id = require_int_id(request_id, "Request id")
        status = as_status(status)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT status FROM holiday_requests WHERE request_id=%s",
                (request_id,),
            )
            row = fetchone(cur)
            if not row:
                raise NotFoundError(f"Holiday request {request_id} does not exist")
            ensure_transition(request_id, HolidayStatus(row["status"]), status)

            cur.execute(
                "UPDATE holiday_requests SET status=%s WHERE request_id=%s AND status=%s",
                (status.value, request_id, HolidayStatus.PENDING.value),
            )
            if cur.rowcount == 0:
                # Decided by another process between the SELECT and the UPDATE.
                raise InvalidTransitionError(f"Holiday request {request_id} has already been decided")
