from __future__ import annotations

import logging
import math
from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Optional

from ..common.datetime_utils import get_date_key, get_yesterday_date_string, now_local, parse_iso_date
from ..core.constants import DEFAULT_HISTORY_LIMIT, DEFAULT_STATS_DAYS, RECENT_TREND_RECORDS
from ..core.exceptions import ValidationError
from ..payroll.time_accounting import compute_worked_hours, is_valid_hours
from .model import AttendanceRecord, BreakRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Clock-in/clock-out/break workflow.

    ``total_hours`` is computed here when the shift closes, and recomputed if a
    break is closed after clock-out.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def _resolve_day(self, date_override: Optional[str], now: Optional[datetime]) -> tuple[datetime, date]:
        now = now or now_local()
        return now, parse_iso_date(get_date_key(date_override, today=now.date()))

    def clock_in(self, employee_id: str, *, date_override: Optional[str] = None, now: Optional[datetime] = None) -> AttendanceRecord:
        now, work_date = self._resolve_day(date_override, now)

        existing = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if existing and existing.clock_in:
            raise ValidationError("Already clocked in today")

        if existing:
            record = replace(existing, clock_in=now, breaks=(), updated_at=now)
        else:
            record = AttendanceRecord(
                employee_id=employee_id,
                work_date=work_date,
                clock_in=now,
                created_at=now,
                updated_at=now,
            )
        self._attendance.save(record)
        logger.info("Clock in employee=%s date=%s", employee_id, work_date)
        return record

    def clock_out(self, employee_id: str, *, date_override: Optional[str] = None, now: Optional[datetime] = None) -> AttendanceRecord:
        now, work_date = self._resolve_day(date_override, now)

        record = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if not record:
            raise ValidationError("No clock-in record found for today")
        if not record.clock_in:
            raise ValidationError("Must clock in before clocking out")
        if record.clock_out:
            raise ValidationError("Already clocked out today")
        if record.active_break:
            raise ValidationError("End your break before clocking out")

        total_hours = compute_worked_hours(record.clock_in, now, record.breaks)
        record = replace(record, clock_out=now, total_hours=total_hours, updated_at=now)
        self._attendance.save(record)
        logger.info("Clock out employee=%s date=%s hours=%.2f", employee_id, work_date, total_hours)
        return record

    def start_break(self, employee_id: str, *, date_override: Optional[str] = None, now: Optional[datetime] = None) -> AttendanceRecord:
        now, work_date = self._resolve_day(date_override, now)

        record = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if not record or not record.clock_in:
            raise ValidationError("Must be clocked in to take a break")
        if record.active_break:
            raise ValidationError("Already on a break")

        record = replace(record, breaks=record.breaks + (BreakRecord(start_time=now),), updated_at=now)
        self._attendance.save(record)
        return record

    def end_break(self, employee_id: str, *, date_override: Optional[str] = None, now: Optional[datetime] = None) -> AttendanceRecord:
        now, work_date = self._resolve_day(date_override, now)

        record = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if not record:
            raise ValidationError("No attendance record found")

        open_index = next((i for i, b in enumerate(record.breaks) if b.is_open), None)
        if open_index is None:
            raise ValidationError("No active break found")

        current = record.breaks[open_index]
        duration = None
        if current.start_time is not None:
            # Stored starts may be UTC-aware while "now" is naive local time.
            minutes = (now.timestamp() - current.start_time.timestamp()) / 60
            duration = int(math.floor(minutes + 0.5))
        closed = replace(current, end_time=now, duration=duration)
        breaks = record.breaks[:open_index] + (closed,) + record.breaks[open_index + 1 :]

        total_hours = record.total_hours
        if record.clock_in and record.clock_out:
            recomputed = compute_worked_hours(record.clock_in, record.clock_out, breaks)
            # Keep the stored total when the recomputation is not a number.
            if is_valid_hours(recomputed):
                total_hours = recomputed

        record = replace(record, breaks=breaks, total_hours=total_hours, updated_at=now)
        self._attendance.save(record)
        return record

    def get_today(self, employee_id: str, *, date_override: Optional[str] = None, now: Optional[datetime] = None) -> Optional[AttendanceRecord]:
        """Today's record, or yesterday's when that shift is still open (overnight)."""
        _, work_date = self._resolve_day(date_override, now)
        record = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if record:
            return record

        yesterday = parse_iso_date(get_yesterday_date_string(work_date.strftime("%Y-%m-%d")))
        previous = self._attendance.get_for_employee_and_date(employee_id, yesterday)
        if previous and previous.clock_in and not previous.clock_out:
            return previous
        return None

    def get_history(self, employee_id: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> list[AttendanceRecord]:
        return list(self._attendance.list_for_employee(employee_id, limit=limit))

    def get_employee_stats(self, employee_id: str, *, days: int = DEFAULT_STATS_DAYS, today: Optional[date] = None) -> dict:
        """Attendance summary over the last ``days`` calendar days."""
        end = today or now_local().date()
        start = end - timedelta(days=days)
        records = self._attendance.list_for_employee(employee_id, start_date=start, end_date=end)

        present_days = sum(1 for r in records if r.clock_in)
        total_hours = sum(r.total_hours or 0 for r in records)
        return {
            "total_days": days,
            "present_days": present_days,
            "total_hours": total_hours,
            "average_hours": total_hours / present_days if present_days > 0 else 0,
            "attendance_rate": present_days / days * 100 if days > 0 else 0,
            "recent_trend": [
                {"date": r.work_date.strftime("%Y-%m-%d"), "hours": r.total_hours or 0}
                for r in records[:RECENT_TREND_RECORDS]
            ],
        }
