from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from .core.enums import StorageBackend
from .core.exceptions import InvalidInputError
from .database.connection import DatabaseConnection, DBConfig
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .holidays.memory_holiday_request_repository import InMemoryHolidayRequestRepository
from .holidays.mysql_holiday_request_repository import MySQLHolidayRequestRepository
from .holidays.repository import HolidayRequestRepository
from .rules.memory_rules_repository import InMemoryHolidayRulesRepository
from .rules.mysql_rules_repository import MySQLHolidayRulesRepository
from .rules.repository import HolidayRulesRepository


class RepositoryFactory(Protocol):
    """Abstract Factory: one family of repositories per storage backend."""

    def create_employee_repository(self) -> EmployeeRepository:
        raise NotImplementedError

    def create_holiday_request_repository(self) -> HolidayRequestRepository:
        raise NotImplementedError

    def create_holiday_rules_repository(self) -> HolidayRulesRepository:
        raise NotImplementedError


class InMemoryRepositoryFactory(RepositoryFactory):
    def create_employee_repository(self) -> EmployeeRepository:
        return InMemoryEmployeeRepository()

    def create_holiday_request_repository(self) -> HolidayRequestRepository:
        return InMemoryHolidayRequestRepository()

    def create_holiday_rules_repository(self) -> HolidayRulesRepository:
        return InMemoryHolidayRulesRepository()


@dataclass
class MySQLRepositoryFactory(RepositoryFactory):
    conn: DatabaseConnection

    def create_employee_repository(self) -> EmployeeRepository:
        return MySQLEmployeeRepository(self.conn)

    def create_holiday_request_repository(self) -> HolidayRequestRepository:
        return MySQLHolidayRequestRepository(self.conn)

    def create_holiday_rules_repository(self) -> HolidayRulesRepository:
        return MySQLHolidayRulesRepository(self.conn)


def get_repository_factory(backend: str, db_config: Optional[dict] = None) -> RepositoryFactory:
    try:
        kind = StorageBackend(str(backend).lower())
    except ValueError:
        raise InvalidInputError(f"Unknown storage backend {backend!r}")

    if kind == StorageBackend.MYSQL:
        if not db_config:
            raise InvalidInputError("The mysql backend needs DB_CONFIG")
        return MySQLRepositoryFactory(conn=DatabaseConnection(DBConfig.from_dict(db_config)))
    return InMemoryRepositoryFactory()
