import csv
import io
from datetime import date, datetime

import pandas as pd
import pytest

from src.employee_portal.employee_portal.attendance.model import AttendanceRecord, BreakRecord
from src.employee_portal.employee_portal.employees.model import Compensation, Employee
from src.employee_portal.employee_portal.export.formatters import (
    TIMECARD_HEADERS,
    format_all_employees_data_as_csv,
    format_all_employees_timecard_csv,
    format_employee_data_as_csv,
    format_employee_report_for_print,
    format_employee_timecard_csv,
    timecards_to_excel,
)
from src.employee_portal.employee_portal.export.model import EmployeeExportData
from src.employee_portal.employee_portal.payroll.service import PayrollReportService


def _rows(text):
    return list(csv.reader(io.StringIO(text)))


def _record(day, total_hours=8.0, breaks=()):
    return AttendanceRecord(
        employee_id="e1",
        work_date=date(2026, 3, day),
        clock_in=datetime(2026, 3, day, 9, 0),
        clock_out=datetime(2026, 3, day, 17, 30),
        breaks=tuple(breaks),
        total_hours=total_hours,
        payroll_id="P-1",
        manager_note="ok, approved",
    )


LUNCH = BreakRecord(
    start_time=datetime(2026, 3, 2, 12, 0),
    end_time=datetime(2026, 3, 2, 12, 30),
    duration=30,
    is_paid=False,
)

ANA = Employee(
    employee_id="e1",
    email="ana@example.com",
    display_name="Ana Diaz",
    position="Cashier",
    hire_date=date(2023, 8, 18),
)


@pytest.fixture
def payroll():
    return PayrollReportService()


@pytest.fixture
def ana_data():
    return EmployeeExportData(
        employee=ANA,
        compensation=Compensation(employee_id="e1", hourly_rate=20, salary=41600),
        attendance=[_record(3, 10.0), _record(2, 8.0, [LUNCH])],
    )


def test_timecard_csv_rows(ana_data, payroll):
    rows = _rows(format_employee_timecard_csv(ana_data, payroll))

    assert rows[0] == TIMECARD_HEADERS
    first = dict(zip(TIMECARD_HEADERS, rows[1]))
    assert first["Name"] == "Ana Diaz"
    assert first["Clock in date"] == "March 2, 2026"
    assert first["Clock in time"] == "9:00 am"
    assert first["Clock out time"] == "5:30 pm"
    assert first["Break start"] == "12:00 pm"
    assert first["Break end"] == "12:30 pm"
    assert first["Break length"] == "30 min"
    assert first["Break type"] == "30 min - Unpaid"
    assert first["Payroll ID"] == "P-1"
    assert first["Role"] == "Cashier"
    assert first["Wage rate"] == "$20.00"
    assert first["Actual hours"] == "8.00"
    assert first["Total paid hours"] == "7.50"
    assert first["Regular hours"] == "7.50"
    assert first["Unpaid breaks"] == "0.50"
    assert first["OT hours"] == "0.00"
    assert first["Estimated wages"] == "$150.00"
    assert first["Manager note"] == "ok, approved"

    second = dict(zip(TIMECARD_HEADERS, rows[2]))
    assert second["Clock in date"] == "March 3, 2026"
    assert second["Break length"] == ""
    assert second["OT hours"] == "2.00"
    assert second["Estimated wages"] == "$220.00"

    totals = dict(zip(TIMECARD_HEADERS, rows[3]))
    assert totals["Name"] == "Totals for Ana Diaz"
    assert totals["Actual hours"] == "18.00"
    assert totals["Total paid hours"] == "17.50"
    assert totals["Regular hours"] == "15.50"
    assert totals["OT hours"] == "2.00"
    assert totals["Estimated wages"] == "$370.00"
    assert len(rows) == 4


def test_timecard_csv_without_rate(payroll):
    data = EmployeeExportData(employee=ANA, compensation=None, attendance=[_record(2)])

    row = dict(zip(TIMECARD_HEADERS, _rows(format_employee_timecard_csv(data, payroll))[1]))

    assert row["Wage rate"] == "$0.00"
    assert row["Estimated wages"] == "$0.00"


def test_all_employees_timecard_has_single_header(ana_data, payroll):
    bob = EmployeeExportData(
        employee=Employee(employee_id="e2", email="bob@example.com", display_name="Bob"),
        attendance=[_record(2)],
    )

    rows = _rows(format_all_employees_timecard_csv([ana_data, bob], payroll))

    assert rows.count(TIMECARD_HEADERS) == 1
    assert [r[0] for r in rows[1:]] == ["Ana Diaz", "Ana Diaz", "Totals for Ana Diaz", "Bob", "Totals for Bob"]
    assert rows[4][10] == "employee"


def test_print_report(ana_data):
    text = format_employee_report_for_print(ana_data, generated_at=datetime(2026, 3, 4, 8, 0), today=date(2026, 10, 18))

    assert "EMPLOYEE REPORT" in text
    assert "Generated: 2026-03-04 08:00:00" in text
    assert "Name: Ana Diaz" in text
    assert "Hire Date: 8/18/2023" in text
    assert "Tenure: 3 years, 2 months" in text
    assert "Base Salary: USD 41,600.00" in text
    assert "Total Days Recorded: 2" in text
    assert "Total Hours Worked: 18.00" in text
    assert "Average Hours/Day: 9.00" in text
    assert "2026-03-03   | 09:00 AM | 05:30 PM  | 10.00  | 0" in text


def test_print_report_without_attendance():
    text = format_employee_report_for_print(EmployeeExportData(employee=ANA), today=date(2026, 10, 18))

    assert "Total Days Recorded: 0" in text
    assert "Average Hours/Day: 0.00" in text
    assert "RECENT ATTENDANCE" not in text
    assert "COMPENSATION" not in text


def test_employee_csv(ana_data):
    rows = _rows(format_employee_data_as_csv(ana_data))

    assert rows[0] == ["EMPLOYEE INFORMATION"]
    assert ["Name", "Ana Diaz"] in rows
    assert ["Department", "N/A"] in rows
    assert ["Salary", "41,600.00"] in rows


def test_all_employees_csv(ana_data):
    rows = _rows(format_all_employees_data_as_csv([ana_data], generated_at=datetime(2026, 3, 4, 8, 0)))

    header_at = rows.index(["Employee Name", "Email", "Department", "Position", "Status", "Hire Date", "Total Days", "Total Hours", "Average Hours"])
    assert rows[header_at + 1] == ["Ana Diaz", "ana@example.com", "N/A", "Cashier", "active", "8/18/2023", "2", "18.00", "9.00"]

    detail_at = rows.index(["Employee Name", "Date", "Clock In", "Clock Out", "Total Hours", "Breaks"])
    assert rows[detail_at + 1] == ["Ana Diaz", "2026-03-03", "09:00 AM", "05:30 PM", "10.00", "0"]
    assert rows[detail_at + 2][-1] == "1"


def test_timecards_to_excel(ana_data, payroll):
    content = timecards_to_excel([ana_data], payroll)

    df = pd.read_excel(io.BytesIO(content))
    assert list(df.columns) == TIMECARD_HEADERS
    assert len(df) == 3
    assert df["Total paid hours"].tolist() == [7.5, 10.0, 17.5]
