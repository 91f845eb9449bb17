"""Example: timecard math through the service layer (no Flask).

Controllers are a thin layer; the rules live in services and
``payroll.time_accounting``.
"""

from datetime import date, datetime

from src.employee_portal.employee_portal.attendance.model import AttendanceRecord, BreakRecord
from src.employee_portal.employee_portal.employees.model import Compensation, Employee
from src.employee_portal.employee_portal.payroll.service import PayrollReportService
from src.employee_portal.employee_portal.payroll.time_accounting import compute_worked_hours


def main():
    clock_in = datetime(2026, 3, 2, 9, 0)
    clock_out = datetime(2026, 3, 2, 17, 30)
    lunch = BreakRecord(
        start_time=datetime(2026, 3, 2, 12, 0),
        end_time=datetime(2026, 3, 2, 12, 30),
        duration=30,
        is_paid=False,
    )
    record = AttendanceRecord(
        employee_id="e1",
        work_date=date(2026, 3, 2),
        clock_in=clock_in,
        clock_out=clock_out,
        breaks=(lunch,),
        total_hours=compute_worked_hours(clock_in, clock_out, [lunch]),
    )

    timecard = PayrollReportService().build_timecard(
        Employee(employee_id="e1", email="ana@example.com", display_name="Ana"),
        Compensation(employee_id="e1", hourly_rate=20),
        [record],
    )
    print(timecard.totals.to_dict())


if __name__ == "__main__":
    main()
