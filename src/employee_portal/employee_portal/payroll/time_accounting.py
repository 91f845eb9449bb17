"""Attendance time accounting.

Pure functions that turn a day's clock-in, clock-out and break events into
worked hours, unpaid-break hours, paid hours, the regular/overtime split and
estimated wages. Used both when a shift is closed (to store ``total_hours``)
and when timecards are exported.

None of these functions raise on bad data: unparsable timestamps come back as
NaN hours and a missing wage rate yields zero wages. Callers validate before
display.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

from ..attendance.model import BreakRecord
from ..common.datetime_utils import TimestampLike, parse_timestamp
from ..core.constants import (
    DEFAULT_ANNUAL_WORK_HOURS,
    DEFAULT_OVERTIME_MULTIPLIER,
    DEFAULT_OVERTIME_THRESHOLD_HOURS,
)
from ..employees.model import Compensation

SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60


def round_half_up(value: float, ndigits: int = 2) -> float:
    """Round with .5 going up, e.g. 0.125 -> 0.13 (``round`` gives 0.12)."""
    if math.isnan(value) or math.isinf(value):
        return value
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def is_valid_hours(value: Optional[float]) -> bool:
    return isinstance(value, (int, float)) and not math.isnan(value)


def _epoch_seconds(value: TimestampLike) -> float:
    ts = parse_timestamp(value)
    if ts is None:
        return math.nan
    return ts.timestamp()


def closed_break_seconds(breaks: Iterable[BreakRecord]) -> float:
    """Total span of breaks that have both a start and an end."""
    total = 0.0
    for b in breaks:
        if b.start_time is None or b.end_time is None:
            continue
        total += _epoch_seconds(b.end_time) - _epoch_seconds(b.start_time)
    return total


def compute_worked_hours(
    clock_in: TimestampLike,
    clock_out: TimestampLike,
    breaks: Iterable[BreakRecord] = (),
) -> float:
    """Shift span minus closed breaks, in hours (2 decimals).

    Open breaks deduct nothing. A clock-out before the clock-in gives a
    negative number.
    """
    span = _epoch_seconds(clock_out) - _epoch_seconds(clock_in)
    worked = span - closed_break_seconds(breaks)
    return round_half_up(worked / SECONDS_PER_HOUR)


def compute_unpaid_break_hours(breaks: Iterable[BreakRecord]) -> float:
    """Hours of breaks explicitly marked unpaid.

    Only the stored ``duration`` counts; unpaid breaks without one are skipped.
    """
    unpaid_minutes = 0
    for b in breaks:
        if b.is_paid is False and b.duration:
            unpaid_minutes += b.duration
    return round_half_up(unpaid_minutes / SECONDS_PER_MINUTE)


def compute_total_paid_hours(worked_hours: float, unpaid_break_hours: float) -> float:
    return max(0.0, worked_hours - unpaid_break_hours)


def compute_regular_hours(total_paid_hours: float, overtime_threshold: float = DEFAULT_OVERTIME_THRESHOLD_HOURS) -> float:
    return min(total_paid_hours, overtime_threshold)


def compute_overtime_hours(total_paid_hours: float, overtime_threshold: float = DEFAULT_OVERTIME_THRESHOLD_HOURS) -> float:
    return max(0.0, total_paid_hours - overtime_threshold)


def split_regular_overtime(
    total_paid_hours: float,
    overtime_threshold: float = DEFAULT_OVERTIME_THRESHOLD_HOURS,
) -> tuple[float, float]:
    return (
        compute_regular_hours(total_paid_hours, overtime_threshold),
        compute_overtime_hours(total_paid_hours, overtime_threshold),
    )


def estimate_wages(
    regular_hours: float,
    overtime_hours: float,
    hourly_rate: Optional[float] = None,
    ot_multiplier: float = DEFAULT_OVERTIME_MULTIPLIER,
) -> float:
    """Advisory wage estimate; 0 when no rate is known."""
    if not hourly_rate:
        return 0.0
    regular_wages = regular_hours * hourly_rate
    overtime_wages = overtime_hours * hourly_rate * ot_multiplier
    return round_half_up(regular_wages + overtime_wages)


def resolve_hourly_rate(
    compensation: Optional[Compensation],
    *,
    annual_work_hours: float = DEFAULT_ANNUAL_WORK_HOURS,
) -> Optional[float]:
    """Explicit hourly rate, else annual salary spread over a standard year."""
    if compensation is None:
        return None
    if compensation.hourly_rate:
        return float(compensation.hourly_rate)
    if compensation.salary and annual_work_hours:
        return compensation.salary / annual_work_hours
    return None


def _break_minutes(b: BreakRecord) -> Optional[int]:
    if b.duration is not None:
        return b.duration
    if b.end_time is not None:
        seconds = _epoch_seconds(b.end_time) - _epoch_seconds(b.start_time)
        if math.isnan(seconds):
            return None
        return int(math.floor(seconds / SECONDS_PER_MINUTE + 0.5))
    return None


def format_break_length(b: BreakRecord) -> str:
    """``"1h 30min"`` from 60 minutes up, ``"25 min"`` below, ``""`` if unknown."""
    minutes = _break_minutes(b)
    if minutes is None:
        return ""
    hours, mins = divmod(minutes, 60)
    if hours > 0:
        return f"{hours}h {mins}min"
    return f"{mins} min"


def format_break_type(b: BreakRecord) -> str:
    """Stored label, else a bucket from the duration and paid flag.

    The buckets are coarse: anything from 16 to 30 minutes reads "30 min" and
    anything longer reads "Lunch".
    """
    if b.break_type:
        return b.break_type
    if b.duration is None:
        return ""

    paid_status = "Unpaid" if b.is_paid is False else "Paid"
    if b.duration <= 15:
        return f"{b.duration} min - {paid_status}"
    if b.duration <= 30:
        return f"30 min - {paid_status}"
    return f"Lunch - {paid_status}"
