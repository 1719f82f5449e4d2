from __future__ import annotations

import pytest

from holiday_manager.container import build_container
from holiday_manager.core.enums import HolidayStatus
from holiday_manager.core.exceptions import (
    InvalidDateError,
    InvalidInputError,
    InvalidTransitionError,
    NotConfiguredError,
    NotFoundError,
)
from holiday_manager.periods.model import Period
from holiday_manager.rules.model import HolidayRules


def test_end_to_end_submit_and_decide(container):
    svc = container.holiday_service
    ana = container.employee_service.add_employee(name="Ana")

    blocked = svc.submit_request(employee_id=ana.employee_id, start_date="2024-03-10", end_date="2024-03-12")
    summer = svc.submit_request(employee_id=ana.employee_id, start_date="2024-06-01", end_date="2024-06-05")

    assert blocked.status == HolidayStatus.PENDING
    assert summer.status == HolidayStatus.APPROVED

    decided = svc.decide(request_id=blocked.request_id, decision=HolidayStatus.REJECTED)
    assert decided.status == HolidayStatus.REJECTED
    assert all(r.request_id != blocked.request_id for r in container.requests_repo.get_pending())


def test_submit_never_starts_rejected(container):
    bob = container.employee_service.add_employee(name="Bob")
    request = container.holiday_service.submit_request(
        employee_id=bob.employee_id, start_date="2024-01-01", end_date="2024-12-31"
    )
    assert request.status == HolidayStatus.PENDING


def test_submit_with_bad_date_raises_and_stores_nothing(container):
    ana = container.employee_service.add_employee(name="Ana")
    with pytest.raises(InvalidDateError):
        container.holiday_service.submit_request(
            employee_id=ana.employee_id, start_date="2024-06-01", end_date="06/05/2024"
        )
    assert container.requests_repo.get_pending() == []


def test_submit_for_unknown_employee_raises_not_found(container):
    with pytest.raises(NotFoundError):
        container.holiday_service.submit_request(employee_id=42, start_date="2024-06-01", end_date="2024-06-05")


@pytest.mark.parametrize("employee_id", ["abc", "", None, False])
def test_submit_with_non_integer_employee_id_raises_invalid_input(container, employee_id):
    container.employee_service.add_employee(name="Ana")
    with pytest.raises(InvalidInputError):
        container.holiday_service.submit_request(
            employee_id=employee_id, start_date="2024-06-01", end_date="2024-06-05"
        )
    assert container.requests_repo.get_pending() == []


def test_submit_accepts_numeric_text_employee_id(container):
    ana = container.employee_service.add_employee(name="Ana")
    request = container.holiday_service.submit_request(
        employee_id=" 1 ", start_date="2024-06-01", end_date="2024-06-05"
    )
    assert request.employee_id == ana.employee_id


def test_submit_uses_explicit_rules_when_given(container):
    ana = container.employee_service.add_employee(name="Ana")
    strict = HolidayRules(max_consecutive_days=1)
    request = container.holiday_service.submit_request(
        employee_id=ana.employee_id,
        start_date="2024-06-01",
        end_date="2024-06-05",
        rules=strict,
    )
    assert request.status == HolidayStatus.PENDING


def test_submit_without_configured_rules_raises():
    container = build_container(backend="memory")
    ana = container.employee_service.add_employee(name="Ana")
    with pytest.raises(NotConfiguredError):
        container.holiday_service.submit_request(
            employee_id=ana.employee_id, start_date="2024-06-01", end_date="2024-06-05"
        )


def test_list_pending_with_requester_joins_names(container):
    ana = container.employee_service.add_employee(name="Ana")
    bob = container.employee_service.add_employee(name="Bob")
    svc = container.holiday_service
    svc.submit_request(employee_id=bob.employee_id, start_date="2024-03-05", end_date="2024-03-06")
    svc.submit_request(employee_id=ana.employee_id, start_date="2024-06-01", end_date="2024-06-02")
    svc.submit_request(employee_id=ana.employee_id, start_date="2024-03-20", end_date="2024-04-02")

    rows = svc.list_pending_with_requester()
    assert [(r.period.format(), r.employee_name) for r in rows] == [
        ("2024-03-05 ~ 2024-03-06", "Bob"),
        ("2024-03-20 ~ 2024-04-02", "Ana"),
    ]


def test_list_employees_with_holidays_shows_only_approved(container):
    ana = container.employee_service.add_employee(name="Ana")
    container.employee_service.add_employee(name="Bob")
    svc = container.holiday_service
    svc.submit_request(employee_id=ana.employee_id, start_date="2024-06-01", end_date="2024-06-05")
    pending = svc.submit_request(employee_id=ana.employee_id, start_date="2024-03-10", end_date="2024-03-12")
    svc.approve(request_id=pending.request_id)
    svc.submit_request(employee_id=ana.employee_id, start_date="2024-03-15", end_date="2024-03-16")

    rows = svc.list_employees_with_holidays()
    assert [r.employee.name for r in rows] == ["Ana", "Bob"]
    assert rows[0].holidays == (
        Period.parse("2024-06-01", "2024-06-05"),
        Period.parse("2024-03-10", "2024-03-12"),
    )
    assert rows[1].holidays == ()


def test_decide_twice_raises_invalid_transition(container):
    ana = container.employee_service.add_employee(name="Ana")
    request = container.holiday_service.submit_request(
        employee_id=ana.employee_id, start_date="2024-03-10", end_date="2024-03-12"
    )
    container.holiday_service.reject(request_id=request.request_id)
    with pytest.raises(InvalidTransitionError):
        container.holiday_service.approve(request_id=request.request_id)


def test_decide_unknown_request_raises_not_found(container):
    with pytest.raises(NotFoundError):
        container.holiday_service.decide(request_id=7, decision=HolidayStatus.APPROVED)


def test_decide_with_unknown_decision_raises_invalid_input(container):
    with pytest.raises(InvalidInputError):
        container.holiday_service.decide(request_id=1, decision="maybe")


def test_decide_with_non_integer_request_id_raises_invalid_input(container):
    with pytest.raises(InvalidInputError):
        container.holiday_service.decide(request_id="first", decision=HolidayStatus.APPROVED)
