from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import to_date
from ..core.constants import DEFAULT_CURRENCY
from ..core.enums import EmployeeStatus, MilestoneType, Role


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


@dataclass(frozen=True)
class Employee:
    """Domain entity: portal employee profile.

    Note: Plain data object, no storage access.
    """

    employee_id: str
    email: str
    display_name: str
    role: Role = Role.EMPLOYEE
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    department: Optional[str] = None
    position: Optional[str] = None
    phone_number: Optional[str] = None
    hire_date: Optional[date] = None
    date_of_birth: Optional[date] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Employee":
        return cls(
            employee_id=str(data.get("id") or data["employeeId"]),
            email=data.get("email") or "",
            display_name=data.get("displayName") or "",
            role=Role(data.get("role") or Role.EMPLOYEE.value),
            status=EmployeeStatus(data.get("status") or EmployeeStatus.ACTIVE.value),
            department=data.get("department"),
            position=data.get("position"),
            phone_number=data.get("phoneNumber"),
            hire_date=to_date(data.get("hireDate")),
            date_of_birth=to_date(data.get("dateOfBirth")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.employee_id,
            "email": self.email,
            "displayName": self.display_name,
            "role": self.role.value,
            "status": self.status.value,
            "department": self.department,
            "position": self.position,
            "phoneNumber": self.phone_number,
            "hireDate": self.hire_date.isoformat() if self.hire_date else None,
            "dateOfBirth": self.date_of_birth.isoformat() if self.date_of_birth else None,
        }


@dataclass(frozen=True)
class Compensation:
    """Pay basis. Only used for advisory wage estimates."""

    employee_id: str
    salary: Optional[float] = None
    hourly_rate: Optional[float] = None
    currency: str = DEFAULT_CURRENCY
    allowance: Optional[float] = None
    bonus: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Compensation":
        return cls(
            employee_id=str(data.get("employeeId") or data.get("id") or ""),
            salary=_optional_float(data.get("salary")),
            hourly_rate=_optional_float(data.get("hourlyRate")),
            currency=data.get("currency") or DEFAULT_CURRENCY,
            allowance=_optional_float(data.get("allowance")),
            bonus=_optional_float(data.get("bonus")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "employeeId": self.employee_id,
            "salary": self.salary,
            "hourlyRate": self.hourly_rate,
            "currency": self.currency,
            "allowance": self.allowance,
            "bonus": self.bonus,
        }


@dataclass(frozen=True)
class TenureInfo:
    """Derived, never persisted."""

    years: int
    months: int
    days: int
    total_days: int
    label: str
    short_label: str
    milestone: Optional[MilestoneType] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "years": self.years,
            "months": self.months,
            "days": self.days,
            "totalDays": self.total_days,
            "label": self.label,
            "shortLabel": self.short_label,
            "milestone": self.milestone.value if self.milestone else None,
        }


@dataclass(frozen=True)
class WorkAnniversary:
    employee: Employee
    anniversary_date: date
    years_completing: int
    days_until: int
    is_milestone: bool
    milestone_type: Optional[MilestoneType]
    tenure_label: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "employee": self.employee.to_dict(),
            "anniversaryDate": self.anniversary_date.isoformat(),
            "yearsCompleting": self.years_completing,
            "daysUntil": self.days_until,
            "isMilestone": self.is_milestone,
            "milestoneType": self.milestone_type.value if self.milestone_type else None,
            "tenureLabel": self.tenure_label,
        }
