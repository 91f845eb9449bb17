from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Portal role used for report scoping."""

    EMPLOYEE = "employee"
    MANAGEMENT = "management"


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    TERMINATED = "terminated"


class MilestoneType(str, Enum):
    """Tenure tier derived from completed years of employment."""

    STANDARD = "standard"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"
    DIAMOND = "diamond"


class ExportFormat(str, Enum):
    JSON = "json"
    PRINT = "print"
    CSV = "csv"
    TIMECARD = "timecard"
    XLSX = "xlsx"
