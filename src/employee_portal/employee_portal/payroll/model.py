from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..employees.model import Employee


@dataclass(frozen=True)
class TimecardLine:
    """Hours and wages derived for one attendance record (or a total)."""

    actual_hours: float
    unpaid_break_hours: float
    total_paid_hours: float
    regular_hours: float
    overtime_hours: float
    estimated_wages: float

    def to_dict(self) -> dict:
        return {
            "actual_hours": self.actual_hours,
            "unpaid_break_hours": self.unpaid_break_hours,
            "total_paid_hours": self.total_paid_hours,
            "regular_hours": self.regular_hours,
            "overtime_hours": self.overtime_hours,
            "estimated_wages": self.estimated_wages,
        }


@dataclass(frozen=True)
class TimecardRow:
    record: AttendanceRecord
    line: TimecardLine


@dataclass(frozen=True)
class Timecard:
    employee: Employee
    hourly_rate: Optional[float]
    rows: list[TimecardRow]
    totals: TimecardLine
