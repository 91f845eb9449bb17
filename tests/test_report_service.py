from __future__ import annotations

from datetime import date, datetime

from src.employee_portal.employee_portal.attendance.model import AttendanceRecord
from src.employee_portal.employee_portal.employees.model import Compensation, Employee
from src.employee_portal.employee_portal.payroll.service import PayrollReportService


def _day(day: int, hours: float) -> AttendanceRecord:
    return AttendanceRecord(
        employee_id="e1",
        work_date=date(2026, 2, day),
        clock_in=datetime(2026, 2, day, 8, 0),
        clock_out=datetime(2026, 2, day, 18, 0),
        total_hours=hours,
    )


EMPLOYEE = Employee(employee_id="e1", email="a@example.com", display_name="A")


def test_timecard_rows_sorted_by_date_with_totals():
    records = [_day(3, 10.0), _day(2, 10.0)]

    timecard = PayrollReportService().build_timecard(
        EMPLOYEE, Compensation(employee_id="e1", hourly_rate=15), records
    )

    assert [row.record.work_date.day for row in timecard.rows] == [2, 3]
    assert timecard.totals.actual_hours == 20.0
    assert timecard.totals.regular_hours == 16.0
    assert timecard.totals.overtime_hours == 4.0
    assert timecard.totals.estimated_wages == 330.0


def test_timecard_rate_from_salary():
    timecard = PayrollReportService().build_timecard(
        EMPLOYEE, Compensation(employee_id="e1", salary=41600), [_day(2, 8.0)]
    )

    assert timecard.hourly_rate == 20
    assert timecard.rows[0].line.estimated_wages == 160.0


def test_timecard_without_compensation_reports_zero_wages():
    timecard = PayrollReportService().build_timecard(EMPLOYEE, None, [_day(2, 9.0)])

    assert timecard.hourly_rate is None
    assert timecard.totals.overtime_hours == 1.0
    assert timecard.totals.estimated_wages == 0


def test_empty_timecard_totals_are_zero():
    timecard = PayrollReportService().build_timecard(EMPLOYEE, None, [])

    assert timecard.rows == []
    assert timecard.totals.total_paid_hours == 0.0
