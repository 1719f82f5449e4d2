"""Example: use the service layer directly (no menu, no click).

The shell is a thin layer; the holiday rules and the request lifecycle live in
the services.
"""

from holiday_manager.container import build_container


def main():
    container = build_container(backend="memory")
    container.rules_service.configure(
        max_consecutive_days=20,
        blackout_periods=[("2024-03-01", "2024-03-31")],
    )

    ana = container.employee_service.add_employee(name="Ana")
    blocked = container.holiday_service.submit_request(
        employee_id=ana.employee_id, start_date="2024-03-10", end_date="2024-03-12"
    )
    summer = container.holiday_service.submit_request(
        employee_id=ana.employee_id, start_date="2024-06-01", end_date="2024-06-05"
    )
    print(blocked.status.value, summer.status.value)

    container.holiday_service.reject(request_id=blocked.request_id)
    print(container.holiday_service.list_pending_with_requester())


if __name__ == "__main__":
    main()
