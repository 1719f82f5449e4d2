from __future__ import annotations

import pytest

from holiday_manager.core.enums import HolidayStatus
from holiday_manager.core.exceptions import InvalidInputError, InvalidTransitionError, NotFoundError
from holiday_manager.holidays.memory_holiday_request_repository import InMemoryHolidayRequestRepository
from holiday_manager.holidays.model import NewHolidayRequest
from holiday_manager.periods.model import Period


def _new(employee_id: int, status: HolidayStatus = HolidayStatus.PENDING, start="2024-06-01", end="2024-06-05"):
    return NewHolidayRequest(employee_id=employee_id, period=Period.parse(start, end), status=status)


def test_add_assigns_unique_increasing_ids():
    repo = InMemoryHolidayRequestRepository()
    ids = [repo.add(_new(1)).request_id for _ in range(3)]
    assert ids == [1, 2, 3]


def test_ids_are_not_reused_after_decisions():
    repo = InMemoryHolidayRequestRepository()
    first = repo.add(_new(1))
    repo.set_status(first.request_id, HolidayStatus.REJECTED)
    assert repo.add(_new(1)).request_id == 2


def test_get_pending_keeps_insertion_order_and_drops_decided():
    repo = InMemoryHolidayRequestRepository()
    a = repo.add(_new(1))
    b = repo.add(_new(2))
    c = repo.add(_new(1))
    repo.add(_new(1, HolidayStatus.APPROVED))

    assert [r.request_id for r in repo.get_pending()] == [a.request_id, b.request_id, c.request_id]

    repo.set_status(b.request_id, HolidayStatus.APPROVED)
    repo.set_status(c.request_id, HolidayStatus.REJECTED)
    assert [r.request_id for r in repo.get_pending()] == [a.request_id]


def test_get_approved_by_employee_id_filters_employee_and_status():
    repo = InMemoryHolidayRequestRepository()
    mine = repo.add(_new(1, HolidayStatus.APPROVED))
    repo.add(_new(1, HolidayStatus.PENDING))
    rejected = repo.add(_new(1))
    repo.set_status(rejected.request_id, HolidayStatus.REJECTED)
    repo.add(_new(2, HolidayStatus.APPROVED))

    approved = repo.get_approved_by_employee_id(1)
    assert [r.request_id for r in approved] == [mine.request_id]
    assert all(r.employee_id == 1 and r.status == HolidayStatus.APPROVED for r in approved)


def test_set_status_unknown_id_raises_not_found():
    repo = InMemoryHolidayRequestRepository()
    with pytest.raises(NotFoundError):
        repo.set_status(99, HolidayStatus.APPROVED)


@pytest.mark.parametrize("initial", [HolidayStatus.APPROVED, HolidayStatus.REJECTED])
def test_decided_requests_are_terminal(initial):
    repo = InMemoryHolidayRequestRepository()
    request = repo.add(_new(1))
    repo.set_status(request.request_id, initial)

    for target in (HolidayStatus.APPROVED, HolidayStatus.REJECTED, HolidayStatus.PENDING):
        with pytest.raises(InvalidTransitionError):
            repo.set_status(request.request_id, target)
    assert repo.get_by_id(request.request_id).status == initial


def test_auto_approved_request_cannot_be_rejected():
    repo = InMemoryHolidayRequestRepository()
    request = repo.add(_new(1, HolidayStatus.APPROVED))
    with pytest.raises(InvalidTransitionError):
        repo.set_status(request.request_id, HolidayStatus.REJECTED)


def test_pending_cannot_move_to_pending():
    repo = InMemoryHolidayRequestRepository()
    request = repo.add(_new(1))
    with pytest.raises(InvalidTransitionError):
        repo.set_status(request.request_id, HolidayStatus.PENDING)


def test_set_status_accepts_plain_strings():
    repo = InMemoryHolidayRequestRepository()
    request = repo.add(_new(1))
    repo.set_status(request.request_id, "approved")
    assert repo.get_by_id(request.request_id).status == HolidayStatus.APPROVED


def test_set_status_unknown_status_text_raises_invalid_input():
    repo = InMemoryHolidayRequestRepository()
    request = repo.add(_new(1))
    with pytest.raises(InvalidInputError):
        repo.set_status(request.request_id, "maybe")
    assert repo.get_by_id(request.request_id).status == HolidayStatus.PENDING


@pytest.mark.parametrize("bad_id", ["x", None, True])
def test_lookups_reject_non_integer_ids(bad_id):
    repo = InMemoryHolidayRequestRepository()
    repo.add(_new(1))
    with pytest.raises(InvalidInputError):
        repo.get_by_id(bad_id)
    with pytest.raises(InvalidInputError):
        repo.get_approved_by_employee_id(bad_id)
    with pytest.raises(InvalidInputError):
        repo.set_status(bad_id, HolidayStatus.APPROVED)
