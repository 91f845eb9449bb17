from __future__ import annotations

from typing import Optional

from ...attendance.model import AttendanceRecord
from ..model import TimecardLine
from ..policy import PayrollPolicy
from ..time_accounting import (
    compute_total_paid_hours,
    compute_unpaid_break_hours,
    estimate_wages,
    split_regular_overtime,
)
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: stored hours - unpaid breaks, split at the daily OT threshold."""

    def __init__(self, policy: Optional[PayrollPolicy] = None):
        self._policy = policy or PayrollPolicy()

    @property
    def policy(self) -> PayrollPolicy:
        return self._policy

    def calculate(self, record: AttendanceRecord, *, hourly_rate: Optional[float] = None) -> TimecardLine:
        actual = float(record.total_hours or 0.0)
        unpaid = compute_unpaid_break_hours(record.breaks)
        paid = compute_total_paid_hours(actual, unpaid)
        regular, overtime = split_regular_overtime(paid, self._policy.overtime_threshold)
        return TimecardLine(
            actual_hours=actual,
            unpaid_break_hours=unpaid,
            total_paid_hours=paid,
            regular_hours=regular,
            overtime_hours=overtime,
            estimated_wages=self.wages(regular, overtime, hourly_rate),
        )

    def wages(self, regular_hours: float, overtime_hours: float, hourly_rate: Optional[float]) -> float:
        return estimate_wages(regular_hours, overtime_hours, hourly_rate, self._policy.overtime_multiplier)
