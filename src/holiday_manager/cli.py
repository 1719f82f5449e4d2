"""Root CLI group for holiday-manager.

Without a subcommand the interactive menu runs. The subcommands expose the
same operations for scripting; they are mostly useful with the mysql
backend, since the in-memory store lives only as long as the process.
"""

from __future__ import annotations

from functools import wraps
from typing import Optional

import click

from . import __version__
from .container import Container
from .core.enums import HolidayStatus
from .core.exceptions import DomainError
from .formatting import NOTHING_TO_DISPLAY, format_pending, format_request, format_rules
from .main import create_app
from .menu import run_menu, view_employees


def domain_errors(command):
    """Turn DomainError into a click error (message on stderr, exit code 1)."""

    @wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except DomainError as e:
            raise click.ClickException(str(e))

    return wrapper


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="holiday-manager")
@click.option("--env", default=None, help="Settings environment (development, testing, production).")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(ctx: click.Context, env: Optional[str], verbose: bool, log_json: bool) -> None:
    """holiday-manager: employees, holiday requests and their approval."""
    if ctx.obj is None:
        try:
            ctx.obj = create_app(env=env, verbose=verbose or None, log_json=log_json or None)
        except DomainError as e:
            raise click.ClickException(str(e))
    if ctx.invoked_subcommand is None:
        run_menu(ctx.obj)


@cli.command("add-employee")
@click.argument("name")
@click.pass_obj
@domain_errors
def add_employee_cmd(container: Container, name: str) -> None:
    """Add a new employee."""
    employee = container.employee_service.add_employee(name=name)
    click.echo(f"{employee.employee_id}\t{employee.name}")


@cli.command("employees")
@click.pass_obj
@domain_errors
def employees_cmd(container: Container) -> None:
    """List employees with their approved holidays."""
    view_employees(container)


@cli.command("submit")
@click.argument("employee_id", type=int)
@click.argument("start_date")
@click.argument("end_date")
@click.pass_obj
@domain_errors
def submit_cmd(container: Container, employee_id: int, start_date: str, end_date: str) -> None:
    """Submit a holiday request (dates as YYYY-MM-DD)."""
    request = container.holiday_service.submit_request(
        employee_id=employee_id,
        start_date=start_date,
        end_date=end_date,
    )
    click.echo(format_request(request))


@cli.command("pending")
@click.pass_obj
@domain_errors
def pending_cmd(container: Container) -> None:
    """List pending holiday requests."""
    pending = container.holiday_service.list_pending_with_requester()
    if not pending:
        click.echo(NOTHING_TO_DISPLAY)
    for row in pending:
        click.echo(f"{row.request_id}\t{format_pending(row)}")


@cli.command("decide")
@click.argument("request_id", type=int)
@click.argument("decision", type=click.Choice([HolidayStatus.APPROVED.value, HolidayStatus.REJECTED.value]))
@click.pass_obj
@domain_errors
def decide_cmd(container: Container, request_id: int, decision: str) -> None:
    """Approve or reject a pending holiday request."""
    request = container.holiday_service.decide(request_id=request_id, decision=HolidayStatus(decision))
    click.echo(format_request(request))


@cli.command("rules")
@click.pass_obj
@domain_errors
def rules_cmd(container: Container) -> None:
    """Show the active holiday rules."""
    for line in format_rules(container.rules_service.current()):
        click.echo(line)
