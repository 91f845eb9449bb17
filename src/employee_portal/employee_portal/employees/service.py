from __future__ import annotations

import logging
import math
from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import today_local
from ..core.constants import DEFAULT_ANNIVERSARY_WINDOW_DAYS, MILESTONE_YEARS
from ..core.enums import Role
from ..core.exceptions import NotFoundError
from .model import Employee, TenureInfo, WorkAnniversary
from .repository import EmployeeRepository
from .tenure import calculate_tenure, get_milestone_type, get_tenure_label

logger = logging.getLogger(__name__)

TENURE_RANGES = (
    ("< 1 year", 0, 1),
    ("1-2 years", 1, 2),
    ("2-5 years", 2, 5),
    ("5-10 years", 5, 10),
    ("10-20 years", 10, 20),
    ("20+ years", 20, math.inf),
)


def anniversary_in_year(hire_date: date, year: int) -> date:
    """Anniversary of ``hire_date`` in ``year``; Feb 29 falls on Mar 1 in common years."""
    try:
        return hire_date.replace(year=year)
    except ValueError:
        return date(year, 3, 1)


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def get_tenure(self, employee_id: str, *, today: Optional[date] = None) -> Optional[TenureInfo]:
        employee = self.get_employee(employee_id)
        return calculate_tenure(employee.hire_date, today=today)

    def get_upcoming_anniversaries(
        self,
        days: int = DEFAULT_ANNIVERSARY_WINDOW_DAYS,
        *,
        role: Optional[Role] = None,
        today: Optional[date] = None,
    ) -> list[WorkAnniversary]:
        today = today or today_local()
        window_end = today + timedelta(days=days)

        anniversaries: list[WorkAnniversary] = []
        for employee in self._employees.list_all(active_only=True):
            if role and employee.role != role:
                continue
            hire = employee.hire_date
            if not hire:
                continue

            anniversary = anniversary_in_year(hire, today.year)
            years_completing = today.year - hire.year
            if anniversary < today:
                anniversary = anniversary_in_year(hire, today.year + 1)
                years_completing += 1

            if not (today <= anniversary <= window_end):
                continue

            anniversaries.append(
                WorkAnniversary(
                    employee=employee,
                    anniversary_date=anniversary,
                    years_completing=years_completing,
                    days_until=(anniversary - today).days,
                    is_milestone=years_completing in MILESTONE_YEARS,
                    milestone_type=get_milestone_type(years_completing),
                    tenure_label=get_tenure_label(years_completing),
                )
            )

        anniversaries.sort(key=lambda a: (a.days_until, not a.is_milestone, -a.years_completing))
        return anniversaries

    def get_tenure_statistics(self, *, today: Optional[date] = None) -> dict:
        today = today or today_local()
        tenures: list[tuple[Employee, TenureInfo]] = []
        for employee in self._employees.list_all(active_only=True):
            tenure = calculate_tenure(employee.hire_date, today=today)
            if tenure:
                tenures.append((employee, tenure))

        if not tenures:
            return {
                "average_tenure_years": 0,
                "average_tenure_months": 0,
                "tenure_distribution": [],
                "longest_tenure": None,
                "total_employees": 0,
                "milestones_this_year": [],
            }

        total_months = sum(t.years * 12 + t.months for _, t in tenures)
        avg_months = total_months / len(tenures)

        longest_employee, longest = max(tenures, key=lambda pair: pair[1].total_days)

        distribution = []
        for label, lo, hi in TENURE_RANGES:
            count = sum(1 for _, t in tenures if lo <= t.years < hi)
            distribution.append(
                {
                    "range": label,
                    "count": count,
                    "percentage": math.floor(count / len(tenures) * 100 + 0.5),
                }
            )

        milestone_counts: dict[int, int] = {}
        for employee, _ in tenures:
            years_this_year = today.year - employee.hire_date.year
            if years_this_year in MILESTONE_YEARS:
                milestone_counts[years_this_year] = milestone_counts.get(years_this_year, 0) + 1

        logger.debug("Tenure statistics computed for %d employees", len(tenures))
        return {
            "average_tenure_years": int(avg_months // 12),
            "average_tenure_months": math.floor(avg_months % 12 + 0.5),
            "tenure_distribution": distribution,
            "longest_tenure": {"employee": longest_employee.to_dict(), "tenure": longest.to_dict()},
            "total_employees": len(tenures),
            "milestones_this_year": [
                {"milestone": m, "count": c} for m, c in sorted(milestone_counts.items())
            ],
        }
