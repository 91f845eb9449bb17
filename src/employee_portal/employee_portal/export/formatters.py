"""Text, CSV and Excel renderings of employee export data.

The timecard layout has one row per attendance day (first break only) and a
totals row per employee.
"""

from __future__ import annotations

import csv
import io
from datetime import date, datetime
from typing import Iterable, Iterator, Optional, Sequence

import pandas as pd

from ..attendance.model import AttendanceRecord
from ..core.constants import PRINT_RECENT_RECORDS
from ..employees.tenure import calculate_tenure
from ..payroll.model import Timecard
from ..payroll.service import PayrollReportService
from ..payroll.time_accounting import format_break_length, format_break_type, round_half_up
from .model import EmployeeExportData

NA = "N/A"
RULE = "=" * 40
SUB_RULE = "-" * 40

TIMECARD_HEADERS = [
    "Name",
    "Clock in date",
    "Clock in time",
    "Clock out date",
    "Clock out time",
    "Break start",
    "Break end",
    "Break length",
    "Break type",
    "Payroll ID",
    "Role",
    "Wage rate",
    "Actual hours",
    "Total paid hours",
    "Regular hours",
    "Unpaid breaks",
    "OT hours",
    "Estimated wages",
    "No show reason",
    "Employee note",
    "Manager note",
]

ALL_EMPLOYEES_HEADERS = [
    "Employee Name",
    "Email",
    "Department",
    "Position",
    "Status",
    "Hire Date",
    "Total Days",
    "Total Hours",
    "Average Hours",
]

DETAIL_HEADERS = ["Employee Name", "Date", "Clock In", "Clock Out", "Total Hours", "Breaks"]


def _display(dt: datetime) -> datetime:
    return dt.astimezone() if dt.tzinfo else dt


def _long_date(dt: Optional[datetime]) -> str:
    """``"January 5, 2026"``"""
    if not dt:
        return ""
    dt = _display(dt)
    return f"{dt:%B} {dt.day}, {dt.year}"


def _short_date(d: Optional[date]) -> str:
    return f"{d.month}/{d.day}/{d.year}" if d else NA


def _clock_time(dt: Optional[datetime]) -> str:
    """``"9:05 am"`` (timecard style)."""
    if not dt:
        return ""
    dt = _display(dt)
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt.minute:02d} {'am' if dt.hour < 12 else 'pm'}"


def _short_time(dt: Optional[datetime], empty: str = NA) -> str:
    """``"09:05 AM"`` (report style)."""
    if not dt:
        return empty
    return _display(dt).strftime("%I:%M %p")


def _amount(value: Optional[float]) -> str:
    return f"{value:,.2f}"


def _hours(value: float) -> str:
    return f"{value:.2f}"


def _attendance_totals(attendance: Sequence[AttendanceRecord]) -> tuple[int, float, str]:
    total_days = len(attendance)
    total_hours = sum(r.total_hours or 0 for r in attendance)
    avg = _hours(total_hours / total_days) if total_days > 0 else "0.00"
    return total_days, total_hours, avg


def _csv_text(rows: Iterable[Sequence]) -> str:
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    for row in rows:
        writer.writerow(row)
    return out.getvalue()


def format_employee_report_for_print(
    data: EmployeeExportData,
    *,
    generated_at: Optional[datetime] = None,
    today: Optional[date] = None,
) -> str:
    employee, compensation, attendance = data.employee, data.compensation, data.attendance
    generated_at = generated_at or datetime.now()

    lines = [
        RULE,
        "EMPLOYEE REPORT",
        f"Generated: {generated_at:%Y-%m-%d %H:%M:%S}",
        RULE,
        "",
        "EMPLOYEE INFORMATION",
        SUB_RULE,
        f"Name: {employee.display_name or NA}",
        f"Email: {employee.email or NA}",
        f"Employee ID: {employee.employee_id or NA}",
        f"Department: {employee.department or NA}",
        f"Position: {employee.position or NA}",
        f"Status: {employee.status.value}",
        f"Hire Date: {_short_date(employee.hire_date)}",
    ]
    tenure = calculate_tenure(employee.hire_date, today=today)
    if tenure:
        lines.append(f"Tenure: {tenure.label}")
    if employee.phone_number:
        lines.append(f"Phone: {employee.phone_number}")
    lines.append("")

    if compensation:
        lines += ["COMPENSATION", SUB_RULE]
        if compensation.salary is not None:
            lines.append(f"Base Salary: {compensation.currency} {_amount(compensation.salary)}")
        if compensation.allowance is not None:
            lines.append(f"Allowance: {compensation.currency} {_amount(compensation.allowance)}")
        if compensation.bonus is not None:
            lines.append(f"Bonuses: {compensation.currency} {_amount(compensation.bonus)}")
        if not compensation.salary and not compensation.allowance and not compensation.bonus:
            lines.append("No compensation data available")
        lines.append("")

    total_days, total_hours, avg = _attendance_totals(attendance)
    lines += [
        "ATTENDANCE SUMMARY",
        SUB_RULE,
        f"Total Days Recorded: {total_days}",
        f"Total Hours Worked: {_hours(total_hours)}",
        f"Average Hours/Day: {avg}",
        "",
    ]

    if attendance:
        lines += [
            f"RECENT ATTENDANCE (Last {PRINT_RECENT_RECORDS} Records)",
            SUB_RULE,
            "Date         | Clock In | Clock Out | Hours  | Breaks",
            "-------------|----------|-----------|--------|--------",
        ]
        for record in attendance[:PRINT_RECENT_RECORDS]:
            hours = _hours(record.total_hours) if record.total_hours else NA
            lines.append(
                f"{record.work_date:%Y-%m-%d}".ljust(12)
                + f" | {_short_time(record.clock_in).ljust(8)}"
                + f" | {_short_time(record.clock_out).ljust(9)}"
                + f" | {hours.ljust(6)}"
                + f" | {len(record.breaks)}"
            )

    lines += ["", RULE]
    return "\n".join(lines) + "\n"


def format_employee_data_as_csv(data: EmployeeExportData) -> str:
    employee, compensation = data.employee, data.compensation
    rows: list[list] = [
        ["EMPLOYEE INFORMATION"],
        ["Field", "Value"],
        ["Name", employee.display_name or NA],
        ["Email", employee.email or NA],
        ["Employee ID", employee.employee_id or NA],
        ["Department", employee.department or NA],
        ["Position", employee.position or NA],
        ["Status", employee.status.value],
        ["Hire Date", _short_date(employee.hire_date)],
        ["Phone", employee.phone_number or NA],
        [],
    ]
    if compensation:
        rows += [["COMPENSATION"], ["Field", "Value"]]
        if compensation.salary is not None:
            rows.append(["Salary", _amount(compensation.salary)])
        if compensation.allowance is not None:
            rows.append(["Allowance", _amount(compensation.allowance)])
        if compensation.bonus is not None:
            rows.append(["Bonus", _amount(compensation.bonus)])
        rows.append([])
    return _csv_text(rows)


def format_all_employees_data_as_csv(
    data: Sequence[EmployeeExportData],
    *,
    generated_at: Optional[datetime] = None,
) -> str:
    generated_at = generated_at or datetime.now()
    rows: list[list] = [
        ["ALL EMPLOYEES REPORT"],
        [f"Generated: {generated_at:%Y-%m-%d %H:%M:%S}"],
        [],
        ALL_EMPLOYEES_HEADERS,
    ]
    for item in data:
        e = item.employee
        total_days, total_hours, avg = _attendance_totals(item.attendance)
        rows.append(
            [
                e.display_name or NA,
                e.email or NA,
                e.department or NA,
                e.position or NA,
                e.status.value,
                _short_date(e.hire_date),
                total_days,
                _hours(total_hours),
                avg,
            ]
        )

    rows += [[], [], ["DETAILED ATTENDANCE RECORDS"], DETAIL_HEADERS]
    for item in data:
        for record in item.attendance:
            rows.append(
                [
                    item.employee.display_name,
                    record.work_date.strftime("%Y-%m-%d"),
                    _short_time(record.clock_in, ""),
                    _short_time(record.clock_out, ""),
                    _hours(record.total_hours) if record.total_hours else "",
                    len(record.breaks),
                ]
            )
    return _csv_text(rows)


def _timecard_rows(timecard: Timecard) -> Iterator[list]:
    employee = timecard.employee
    name = employee.display_name or ""
    role = employee.position or employee.role.value
    wage_rate = f"${timecard.hourly_rate:.2f}" if timecard.hourly_rate else "$0.00"

    for row in timecard.rows:
        record, line = row.record, row.line
        first_break = record.breaks[0] if record.breaks else None
        yield [
            name,
            _long_date(record.clock_in),
            _clock_time(record.clock_in),
            _long_date(record.clock_out),
            _clock_time(record.clock_out),
            _clock_time(first_break.start_time) if first_break else "",
            _clock_time(first_break.end_time) if first_break else "",
            format_break_length(first_break) if first_break else "",
            format_break_type(first_break) if first_break else "",
            record.payroll_id or "",
            role,
            wage_rate,
            line.actual_hours,
            line.total_paid_hours,
            line.regular_hours,
            line.unpaid_break_hours,
            line.overtime_hours,
            f"${line.estimated_wages:.2f}",
            record.no_show_reason or "",
            record.employee_note or "",
            record.manager_note or "",
        ]

    totals = timecard.totals
    yield [f"Totals for {name}"] + [""] * 11 + [
        totals.actual_hours,
        totals.total_paid_hours,
        totals.regular_hours,
        totals.unpaid_break_hours,
        totals.overtime_hours,
        f"${totals.estimated_wages:.2f}",
        "",
        "",
        "",
    ]


def _text_cells(row: list) -> list:
    return [_hours(v) if isinstance(v, float) else v for v in row]


def format_employee_timecard_csv(data: EmployeeExportData, payroll: PayrollReportService) -> str:
    timecard = payroll.build_timecard(data.employee, data.compensation, data.attendance)
    return _csv_text([TIMECARD_HEADERS] + [_text_cells(r) for r in _timecard_rows(timecard)])


def format_all_employees_timecard_csv(data: Sequence[EmployeeExportData], payroll: PayrollReportService) -> str:
    rows: list[list] = [TIMECARD_HEADERS]
    for item in data:
        timecard = payroll.build_timecard(item.employee, item.compensation, item.attendance)
        rows.extend(_text_cells(r) for r in _timecard_rows(timecard))
    return _csv_text(rows)


def timecards_to_excel(data: Sequence[EmployeeExportData], payroll: PayrollReportService) -> bytes:
    """Timecard workbook (one sheet), hours kept numeric."""
    rows = []
    for item in data:
        timecard = payroll.build_timecard(item.employee, item.compensation, item.attendance)
        for r in _timecard_rows(timecard):
            rows.append([round_half_up(v) if isinstance(v, float) else v for v in r])

    df = pd.DataFrame(rows, columns=TIMECARD_HEADERS)

    # Written in memory, never to disk.
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Timecards")
    return output.getvalue()
