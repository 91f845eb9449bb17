from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional

from ..common.datetime_utils import parse_timestamp, to_date
from ..core.exceptions import ValidationError


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass(frozen=True)
class BreakRecord:
    """Domain entity: one rest period within a shift.

    ``end_time`` is None while the break is still open. ``duration`` (minutes)
    is authoritative when present and is never reconciled against the
    timestamps. ``is_paid`` is treated as paid unless it is explicitly False.
    """

    start_time: datetime
    end_time: Optional[datetime] = None
    duration: Optional[int] = None
    is_paid: Optional[bool] = None
    break_type: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.end_time is None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BreakRecord":
        duration = data.get("duration")
        return cls(
            start_time=parse_timestamp(data.get("startTime")),
            end_time=parse_timestamp(data.get("endTime")),
            duration=int(duration) if duration is not None else None,
            is_paid=data.get("isPaid"),
            break_type=data.get("type") or None,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"startTime": _iso(self.start_time)}
        if self.end_time is not None:
            out["endTime"] = _iso(self.end_time)
        if self.duration is not None:
            out["duration"] = self.duration
        if self.is_paid is not None:
            out["isPaid"] = self.is_paid
        if self.break_type:
            out["type"] = self.break_type
        return out


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee-day of attendance.

    ``total_hours`` is only set once both clock events exist.
    """

    employee_id: str
    work_date: date
    clock_in: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    breaks: tuple[BreakRecord, ...] = field(default_factory=tuple)
    total_hours: Optional[float] = None
    payroll_id: Optional[str] = None
    no_show_reason: Optional[str] = None
    employee_note: Optional[str] = None
    manager_note: Optional[str] = None
    is_edited_by_management: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def record_id(self) -> str:
        return record_key(self.employee_id, self.work_date.strftime("%Y-%m-%d"))

    @property
    def active_break(self) -> Optional[BreakRecord]:
        return next((b for b in self.breaks if b.is_open), None)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AttendanceRecord":
        """Build from a stored document.

        Raises ValidationError when the employee or the day cannot be read.
        """
        employee_id = data.get("employeeId")
        work_date = to_date(data.get("date"))
        if not employee_id:
            raise ValidationError("Attendance document has no employeeId")
        if work_date is None:
            raise ValidationError(f"Invalid attendance date: {data.get('date')!r}")

        total_hours = data.get("totalHours")
        return cls(
            employee_id=str(employee_id),
            work_date=work_date,
            clock_in=parse_timestamp(data.get("clockIn")),
            clock_out=parse_timestamp(data.get("clockOut")),
            breaks=tuple(BreakRecord.from_dict(b) for b in data.get("breaks") or []),
            total_hours=float(total_hours) if total_hours is not None else None,
            payroll_id=data.get("payrollId"),
            no_show_reason=data.get("noShowReason"),
            employee_note=data.get("employeeNote"),
            manager_note=data.get("managerNote"),
            is_edited_by_management=bool(data.get("isEditedByManagement", False)),
            created_at=parse_timestamp(data.get("createdAt")),
            updated_at=parse_timestamp(data.get("updatedAt")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.record_id,
            "employeeId": self.employee_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "clockIn": _iso(self.clock_in),
            "clockOut": _iso(self.clock_out),
            "breaks": [b.to_dict() for b in self.breaks],
            "totalHours": self.total_hours,
            "payrollId": self.payroll_id,
            "noShowReason": self.no_show_reason,
            "employeeNote": self.employee_note,
            "managerNote": self.manager_note,
            "isEditedByManagement": self.is_edited_by_management,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
        }


def record_key(employee_id: str, date_key: str) -> str:
    """Per-employee-per-day document key."""
    return f"{employee_id}_{date_key}"
