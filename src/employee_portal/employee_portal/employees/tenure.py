"""Tenure and milestone calculation from a hire date.

Read-only derived reporting. Missing, unparsable or future hire dates give
None instead of raising.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from ..common.datetime_utils import TimestampLike, days_in_previous_month, to_date, today_local
from ..core.enums import MilestoneType
from .model import TenureInfo

_TIER_LABELS = {
    5: "Silver",
    10: "Gold",
    20: "Platinum",
    25: "Diamond",
}


def get_milestone_type(years: float) -> Optional[MilestoneType]:
    if years >= 25:
        return MilestoneType.DIAMOND
    if years >= 20:
        return MilestoneType.PLATINUM
    if years >= 10:
        return MilestoneType.GOLD
    if years >= 5:
        return MilestoneType.SILVER
    if years >= 1:
        return MilestoneType.STANDARD
    return None


def get_tenure_label(years: int) -> str:
    """Anniversary caption, e.g. ``"10 Years (Gold)"``."""
    if years == 1:
        return "1 Year"
    if years in _TIER_LABELS:
        return f"{years} Years ({_TIER_LABELS[years]})"
    if years > 25:
        return f"{years} Years (Diamond)"
    return f"{years} Years"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def calculate_tenure(
    hire_date: Union[date, TimestampLike],
    *,
    today: Optional[date] = None,
) -> Optional[TenureInfo]:
    if not hire_date:
        return None
    hire = to_date(hire_date)
    if hire is None:
        return None

    today = today or today_local()
    total_days = (today - hire).days
    if total_days < 0:
        return None

    years = today.year - hire.year
    months = today.month - hire.month
    days = today.day - hire.day

    if days < 0:
        months -= 1
        days += days_in_previous_month(today)
    if months < 0:
        years -= 1
        months += 12

    if years > 0:
        label = _plural(years, "year")
        short_label = f"{years}y"
        if months > 0:
            label += f", {_plural(months, 'month')}"
            short_label += f" {months}m"
    elif months > 0:
        label = _plural(months, "month")
        short_label = f"{months}m"
        if days > 0 and months < 6:
            label += f", {_plural(days, 'day')}"
    else:
        label = _plural(days, "day")
        short_label = f"{days}d"

    return TenureInfo(
        years=years,
        months=months,
        days=days,
        total_days=total_days,
        label=label,
        short_label=short_label,
        milestone=get_milestone_type(years),
    )
