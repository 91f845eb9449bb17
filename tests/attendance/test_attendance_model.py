from datetime import date, datetime, timezone

import pytest

from src.employee_portal.employee_portal.attendance.memory_repository import InMemoryAttendanceRepository
from src.employee_portal.employee_portal.attendance.model import AttendanceRecord, BreakRecord
from src.employee_portal.employee_portal.core.exceptions import ValidationError
from src.employee_portal.employee_portal.payroll.time_accounting import format_break_type


def _document():
    return {
        "employeeId": "e1",
        "date": "2026-03-02",
        "clockIn": "2026-03-02T09:00:00Z",
        "clockOut": "2026-03-02T17:30:00Z",
        "breaks": [
            {"startTime": "2026-03-02T12:00:00Z", "endTime": "2026-03-02T12:30:00Z", "duration": 30, "type": "lunch"},
        ],
        "totalHours": 8,
        "employeeNote": "late train",
    }


def test_from_dict_reads_utc_timestamps():
    record = AttendanceRecord.from_dict(_document())

    assert record.record_id == "e1_2026-03-02"
    assert record.work_date == date(2026, 3, 2)
    assert record.clock_in == datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)
    assert record.total_hours == 8.0
    assert record.breaks[0].duration == 30
    assert record.breaks[0].break_type == "lunch"
    assert record.employee_note == "late train"


def test_missing_is_paid_stays_unset_and_counts_as_paid():
    brk = BreakRecord.from_dict({"startTime": "2026-03-02T12:00:00Z", "endTime": "2026-03-02T12:30:00Z", "duration": 30})

    assert brk.is_paid is None
    assert "isPaid" not in brk.to_dict()
    assert format_break_type(brk) == "30 min - Paid"


def test_document_survives_to_dict_and_back():
    record = AttendanceRecord.from_dict(_document())

    again = AttendanceRecord.from_dict(record.to_dict())

    assert again == record


def test_open_break_has_no_end_time():
    brk = BreakRecord.from_dict({"startTime": "2026-03-02T12:00:00Z", "isPaid": False})

    assert brk.is_open
    assert brk.is_paid is False
    assert brk.to_dict() == {"startTime": "2026-03-02T12:00:00+00:00", "isPaid": False}


def test_timestamp_date_is_accepted():
    record = AttendanceRecord.from_dict({"employeeId": "e1", "date": datetime(2026, 3, 2, 10, 0)})

    assert record.work_date == date(2026, 3, 2)


@pytest.mark.parametrize("doc", [{"employeeId": "e1", "date": "garbage"}, {"employeeId": "e1"}, {"date": "2026-03-02"}])
def test_unkeyable_document_is_rejected(doc):
    with pytest.raises(ValidationError):
        AttendanceRecord.from_dict(doc)


def test_repository_accepts_imported_records():
    repo = InMemoryAttendanceRepository([AttendanceRecord.from_dict(_document())])

    assert repo.get_for_employee_and_date("e1", date(2026, 3, 2)).clock_out is not None
