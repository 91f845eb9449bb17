from datetime import date

import pytest

from src.employee_portal.employee_portal.core.enums import EmployeeStatus, MilestoneType, Role
from src.employee_portal.employee_portal.core.exceptions import NotFoundError
from src.employee_portal.employee_portal.employees.memory_repository import InMemoryEmployeeRepository
from src.employee_portal.employee_portal.employees.model import Employee
from src.employee_portal.employee_portal.employees.service import EmployeeService, anniversary_in_year

TODAY = date(2026, 10, 18)


def _emp(employee_id, hire_date, *, role=Role.EMPLOYEE, status=EmployeeStatus.ACTIVE):
    return Employee(
        employee_id=employee_id,
        email=f"{employee_id}@example.com",
        display_name=employee_id.upper(),
        role=role,
        status=status,
        hire_date=hire_date,
    )


def test_upcoming_anniversaries_window_and_order():
    repo = InMemoryEmployeeRepository(
        [
            _emp("f", date(2024, 10, 20)),
            _emp("b", date(2023, 10, 20)),
            _emp("a", date(2021, 10, 20)),
            _emp("c", date(2024, 11, 30)),
            _emp("d", date(2022, 10, 10)),
            _emp("e", date(2020, 10, 19), status=EmployeeStatus.TERMINATED),
            _emp("g", None),
        ]
    )

    rows = EmployeeService(repo).get_upcoming_anniversaries(30, today=TODAY)

    assert [r.employee.employee_id for r in rows] == ["a", "b", "f"]
    first = rows[0]
    assert first.years_completing == 5
    assert first.days_until == 2
    assert first.is_milestone is True
    assert first.milestone_type == MilestoneType.SILVER
    assert first.tenure_label == "5 Years (Silver)"
    assert rows[2].is_milestone is False


def test_upcoming_anniversaries_role_filter():
    repo = InMemoryEmployeeRepository(
        [
            _emp("a", date(2021, 10, 20)),
            _emp("m", date(2016, 10, 25), role=Role.MANAGEMENT),
        ]
    )

    rows = EmployeeService(repo).get_upcoming_anniversaries(30, role=Role.MANAGEMENT, today=TODAY)

    assert [r.employee.employee_id for r in rows] == ["m"]
    assert rows[0].milestone_type == MilestoneType.GOLD


def test_leap_day_anniversary_falls_on_march_first():
    assert anniversary_in_year(date(2024, 2, 29), 2025) == date(2025, 3, 1)
    assert anniversary_in_year(date(2024, 2, 29), 2028) == date(2028, 2, 29)


def test_tenure_statistics():
    repo = InMemoryEmployeeRepository(
        [
            _emp("veteran", date(2016, 1, 1)),
            _emp("mid", date(2025, 4, 18)),
            _emp("new", date(2026, 6, 18)),
            _emp("gone", date(2000, 1, 1), status=EmployeeStatus.TERMINATED),
        ]
    )

    stats = EmployeeService(repo).get_tenure_statistics(today=TODAY)

    assert stats["total_employees"] == 3
    assert stats["average_tenure_years"] == 4
    assert stats["average_tenure_months"] == 2
    assert stats["longest_tenure"]["employee"]["id"] == "veteran"
    counts = {d["range"]: d["count"] for d in stats["tenure_distribution"]}
    assert counts == {
        "< 1 year": 1,
        "1-2 years": 1,
        "2-5 years": 0,
        "5-10 years": 0,
        "10-20 years": 1,
        "20+ years": 0,
    }
    assert stats["tenure_distribution"][0]["percentage"] == 33
    assert stats["milestones_this_year"] == [{"milestone": 1, "count": 1}, {"milestone": 10, "count": 1}]


def test_tenure_statistics_without_employees():
    stats = EmployeeService(InMemoryEmployeeRepository()).get_tenure_statistics(today=TODAY)

    assert stats["total_employees"] == 0
    assert stats["longest_tenure"] is None


def test_get_tenure_unknown_employee():
    with pytest.raises(NotFoundError):
        EmployeeService(InMemoryEmployeeRepository()).get_tenure("nobody", today=TODAY)
