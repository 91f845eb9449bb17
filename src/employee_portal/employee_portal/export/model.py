from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..employees.model import Compensation, Employee


@dataclass(frozen=True)
class EmployeeExportData:
    """Everything one employee's export needs; attendance is newest first."""

    employee: Employee
    compensation: Optional[Compensation] = None
    attendance: list[AttendanceRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "employee": self.employee.to_dict(),
            "compensation": self.compensation.to_dict() if self.compensation else None,
            "attendance": [r.to_dict() for r in self.attendance],
        }
