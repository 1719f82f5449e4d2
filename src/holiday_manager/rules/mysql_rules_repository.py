from __future__ import annotations

from ..core.exceptions import NotConfiguredError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..periods.model import Period
from .model import HolidayRules
from .repository import HolidayRulesRepository

# holiday_rules holds a single row.
_RULES_ROW_ID = 1


class MySQLHolidayRulesRepository(HolidayRulesRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def set(self, rules: HolidayRules) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "REPLACE INTO holiday_rules(rules_id, max_consecutive_days) VALUES(%s,%s)",
                (_RULES_ROW_ID, int(rules.max_consecutive_days)),
            )
            cur.execute("DELETE FROM blackout_periods")
            for position, blackout in enumerate(rules.blackout_periods):
                cur.execute(
                    """
                    INSERT INTO blackout_periods(position, date_from, date_to)
                    VALUES(%s,%s,%s)
                    """,
                    (position, blackout.start, blackout.end),
                )

    def get(self) -> HolidayRules:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT max_consecutive_days FROM holiday_rules WHERE rules_id=%s",
                (_RULES_ROW_ID,),
            )
            row = fetchone(cur)
            if not row:
                raise NotConfiguredError("Holiday rules have not been configured")

            cur.execute("SELECT date_from, date_to FROM blackout_periods ORDER BY position")
            blackouts = tuple(Period(start=r["date_from"], end=r["date_to"]) for r in fetchall(cur))
            return HolidayRules(
                max_consecutive_days=int(row["max_consecutive_days"]),
                blackout_periods=blackouts,
            )
