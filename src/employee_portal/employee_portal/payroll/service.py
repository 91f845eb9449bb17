from __future__ import annotations

from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..employees.model import Compensation, Employee
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import Timecard, TimecardLine, TimecardRow
from .policy import PayrollPolicy
from .time_accounting import resolve_hourly_rate


class PayrollReportService:
    def __init__(
        self,
        *,
        policy: Optional[PayrollPolicy] = None,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._policy = policy or PayrollPolicy()
        self._calculator = calculator or StandardPayrollCalculator(self._policy)

    def build_timecard(
        self,
        employee: Employee,
        compensation: Optional[Compensation],
        attendance: Iterable[AttendanceRecord],
    ) -> Timecard:
        """Per-day timecard lines in date order plus a totals line.

        Total wages are estimated from the summed regular and OT hours, not by
        adding the per-day wage figures.
        """
        hourly_rate = resolve_hourly_rate(compensation, annual_work_hours=self._policy.annual_work_hours)
        records = sorted(attendance, key=lambda r: r.work_date)

        rows = [TimecardRow(record=r, line=self._calculator.calculate(r, hourly_rate=hourly_rate)) for r in records]

        regular = sum((row.line.regular_hours for row in rows), 0.0)
        overtime = sum((row.line.overtime_hours for row in rows), 0.0)
        totals = TimecardLine(
            actual_hours=sum((row.line.actual_hours for row in rows), 0.0),
            unpaid_break_hours=sum((row.line.unpaid_break_hours for row in rows), 0.0),
            total_paid_hours=sum((row.line.total_paid_hours for row in rows), 0.0),
            regular_hours=regular,
            overtime_hours=overtime,
            estimated_wages=self._calculator.wages(regular, overtime, hourly_rate),
        )
        return Timecard(employee=employee, hourly_rate=hourly_rate, rows=rows, totals=totals)
