from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .factory import get_repository_factory
from .holidays.repository import HolidayRequestRepository
from .holidays.service import HolidayRequestService
from .rules.repository import HolidayRulesRepository
from .rules.service import RulesService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    requests_repo: HolidayRequestRepository
    rules_repo: HolidayRulesRepository

    employee_service: EmployeeService
    holiday_service: HolidayRequestService
    rules_service: RulesService


def build_container(*, backend: str = "memory", db_config: Optional[dict] = None) -> Container:
    factory = get_repository_factory(backend, db_config)

    employees_repo = factory.create_employee_repository()
    requests_repo = factory.create_holiday_request_repository()
    rules_repo = factory.create_holiday_rules_repository()

    employee_service = EmployeeService(employees_repo)
    holiday_service = HolidayRequestService(requests_repo, employees_repo, rules_repo)
    rules_service = RulesService(rules_repo)

    return Container(
        employees_repo=employees_repo,
        requests_repo=requests_repo,
        rules_repo=rules_repo,
        employee_service=employee_service,
        holiday_service=holiday_service,
        rules_service=rules_service,
    )
