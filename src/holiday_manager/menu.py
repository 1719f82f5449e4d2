"""Interactive menu on top of the services.

Each action collects its input with click prompts, calls one service and
prints the result. Domain errors are reported and the menu is shown again.
"""

from __future__ import annotations

from typing import Callable, Dict

import click
import structlog

from .container import Container
from .core.enums import HolidayStatus
from .core.exceptions import DomainError
from .formatting import NOTHING_TO_DISPLAY, NOTHING_TO_VALIDATE, format_pending, format_request

logger = structlog.get_logger(__name__)

EXIT_CHOICE = "0"
MENU_CHOICES = (
    ("1", "Add a new employee"),
    ("2", "View a list of employees with their approved holidays"),
    ("3", "Submit a holiday request"),
    ("4", "View a list of pending holiday requests"),
    ("5", "Approve or reject a pending holiday request"),
    (EXIT_CHOICE, "Exit"),
)


def add_employee(container: Container) -> None:
    name = click.prompt("Name")
    employee = container.employee_service.add_employee(name=name)
    logger.info("employee_added", employee_id=employee.employee_id)


def view_employees(container: Container) -> None:
    rows = container.holiday_service.list_employees_with_holidays()
    if not rows:
        click.echo(NOTHING_TO_DISPLAY)
    for row in rows:
        click.echo(row.employee.name)
        for period in row.holidays:
            click.echo(f"\t{period.format()}")


def submit_holiday_request(container: Container) -> None:
    employees = container.employee_service.list_employees()
    if not employees:
        click.echo(NOTHING_TO_DISPLAY)
        return

    for e in employees:
        click.echo(f"  {e.employee_id}) {e.name}")
    employee_id = click.prompt(
        "Choose an employee",
        type=click.Choice([str(e.employee_id) for e in employees]),
        show_choices=False,
    )
    start_date = click.prompt("Start date (yyyy-mm-dd)")
    end_date = click.prompt("End date (yyyy-mm-dd)")

    request = container.holiday_service.submit_request(
        employee_id=int(employee_id),
        start_date=start_date,
        end_date=end_date,
    )
    logger.info("holiday_request_submitted", request_id=request.request_id, status=request.status.value)
    click.echo(format_request(request))


def view_holiday_requests(container: Container) -> None:
    pending = container.holiday_service.list_pending_with_requester()
    if not pending:
        click.echo(NOTHING_TO_DISPLAY)
    for row in pending:
        click.echo(format_pending(row))


def validate_holiday_requests(container: Container) -> None:
    pending = container.holiday_service.list_pending_with_requester()
    if not pending:
        click.echo(NOTHING_TO_VALIDATE)
        return

    for row in pending:
        click.echo(f"  {row.request_id}) {format_pending(row)}")
    request_id = click.prompt(
        "Choose a holiday request",
        type=click.Choice([str(r.request_id) for r in pending]),
        show_choices=False,
    )
    decision = click.prompt(
        "Choose status",
        type=click.Choice([HolidayStatus.APPROVED.value, HolidayStatus.REJECTED.value]),
    )

    request = container.holiday_service.decide(request_id=int(request_id), decision=HolidayStatus(decision))
    logger.info("holiday_request_decided", request_id=request.request_id, status=request.status.value)
    click.echo(format_request(request))


ACTIONS: Dict[str, Callable[[Container], None]] = {
    "1": add_employee,
    "2": view_employees,
    "3": submit_holiday_request,
    "4": view_holiday_requests,
    "5": validate_holiday_requests,
}


def run_menu(container: Container) -> None:
    while True:
        click.echo()
        click.echo("Choose an action")
        for key, label in MENU_CHOICES:
            click.echo(f"  {key}) {label}")
        choice = click.prompt(
            "Action",
            type=click.Choice([key for key, _ in MENU_CHOICES]),
            show_choices=False,
        )
        if choice == EXIT_CHOICE:
            return

        try:
            ACTIONS[choice](container)
        except DomainError as e:
            logger.info("action_failed", action=choice, error=str(e))
            click.echo(f"Error: {e}", err=True)
