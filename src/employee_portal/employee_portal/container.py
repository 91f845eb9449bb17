from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.memory_repository import InMemoryAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_EXPORT_RECORD_LIMIT
from .employees.memory_repository import InMemoryEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .export.service import ExportService
from .payroll.policy import PayrollPolicy
from .payroll.service import PayrollReportService


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    employees_repo: EmployeeRepository

    policy: PayrollPolicy
    attendance_service: AttendanceService
    employee_service: EmployeeService
    payroll_report_service: PayrollReportService
    export_service: ExportService


def build_container(
    *,
    settings: Any = None,
    attendance_repo: Optional[AttendanceRepository] = None,
    employees_repo: Optional[EmployeeRepository] = None,
) -> Container:
    """Wire services over the given stores (in-memory stores by default)."""
    attendance_repo = attendance_repo or InMemoryAttendanceRepository()
    employees_repo = employees_repo or InMemoryEmployeeRepository()

    policy = PayrollPolicy.from_settings(settings)
    record_limit = int(getattr(settings, "EXPORT_RECORD_LIMIT", DEFAULT_EXPORT_RECORD_LIMIT))

    return Container(
        attendance_repo=attendance_repo,
        employees_repo=employees_repo,
        policy=policy,
        attendance_service=AttendanceService(attendance_repo),
        employee_service=EmployeeService(employees_repo),
        payroll_report_service=PayrollReportService(policy=policy),
        export_service=ExportService(employees_repo, attendance_repo, record_limit=record_limit),
    )
