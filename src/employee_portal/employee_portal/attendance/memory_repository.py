from __future__ import annotations

import threading
from datetime import date
from typing import Iterable, Optional, Sequence

from .model import AttendanceRecord, record_key
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    """Dict-backed store keyed by ``{employee_id}_{YYYY-MM-DD}``.

    The lock serializes writes for the same employee-day.
    """

    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._lock = threading.Lock()
        self._records: dict[str, AttendanceRecord] = {r.record_id: r for r in records}

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with self._lock:
            return self._records.get(record_key(employee_id, work_date.strftime("%Y-%m-%d")))

    def save(self, record: AttendanceRecord) -> None:
        with self._lock:
            self._records[record.record_id] = record

    def list_for_employee(
        self,
        employee_id: str,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        with self._lock:
            rows = [r for r in self._records.values() if r.employee_id == employee_id]

        if start_date:
            rows = [r for r in rows if r.work_date >= start_date]
        if end_date:
            rows = [r for r in rows if r.work_date <= end_date]
        rows.sort(key=lambda r: r.work_date, reverse=True)
        if limit is not None:
            rows = rows[: int(limit)]
        return rows
