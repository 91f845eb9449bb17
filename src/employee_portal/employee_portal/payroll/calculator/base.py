from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...attendance.model import AttendanceRecord
from ..model import TimecardLine


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, record: AttendanceRecord, *, hourly_rate: Optional[float] = None) -> TimecardLine:
        raise NotImplementedError

    @abstractmethod
    def wages(self, regular_hours: float, overtime_hours: float, hourly_rate: Optional[float]) -> float:
        raise NotImplementedError
