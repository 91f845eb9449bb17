from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.constants import (
    DEFAULT_ANNUAL_WORK_HOURS,
    DEFAULT_OVERTIME_MULTIPLIER,
    DEFAULT_OVERTIME_THRESHOLD_HOURS,
)


@dataclass(frozen=True)
class PayrollPolicy:
    """Overtime rules applied to every timecard line.

    One global policy, passed explicitly into each calculation.
    """

    overtime_threshold: float = DEFAULT_OVERTIME_THRESHOLD_HOURS
    overtime_multiplier: float = DEFAULT_OVERTIME_MULTIPLIER
    annual_work_hours: float = DEFAULT_ANNUAL_WORK_HOURS

    @classmethod
    def from_settings(cls, settings: Any) -> "PayrollPolicy":
        return cls(
            overtime_threshold=float(getattr(settings, "OVERTIME_THRESHOLD_HOURS", DEFAULT_OVERTIME_THRESHOLD_HOURS)),
            overtime_multiplier=float(getattr(settings, "OVERTIME_MULTIPLIER", DEFAULT_OVERTIME_MULTIPLIER)),
            annual_work_hours=float(getattr(settings, "ANNUAL_WORK_HOURS", DEFAULT_ANNUAL_WORK_HOURS)),
        )
