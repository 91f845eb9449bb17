"""Export timecards from a JSON snapshot of portal documents.

Snapshot shape: ``{"employees": [...], "compensation": [...], "attendance": [...]}``
using the stored document field names (``displayName``, ``clockIn``, ...).
"""

from __future__ import annotations

import argparse
import importlib
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.employee_portal.employee_portal.attendance.memory_repository import InMemoryAttendanceRepository
from src.employee_portal.employee_portal.attendance.model import AttendanceRecord
from src.employee_portal.employee_portal.container import build_container
from src.employee_portal.employee_portal.core.exceptions import ValidationError
from src.employee_portal.employee_portal.employees.memory_repository import InMemoryEmployeeRepository
from src.employee_portal.employee_portal.employees.model import Compensation, Employee
from src.employee_portal.employee_portal.export.formatters import (
    format_all_employees_timecard_csv,
    timecards_to_excel,
)


def load_repositories(snapshot: dict) -> tuple[InMemoryEmployeeRepository, InMemoryAttendanceRepository]:
    """In-memory repositories from a snapshot. Unreadable attendance documents are skipped."""
    employees_repo = InMemoryEmployeeRepository(
        [Employee.from_dict(e) for e in snapshot.get("employees", [])],
        [Compensation.from_dict(c) for c in snapshot.get("compensation", [])],
    )

    records = []
    for doc in snapshot.get("attendance", []):
        try:
            records.append(AttendanceRecord.from_dict(doc))
        except ValidationError as exc:
            print(f"SKIP: {exc}", file=sys.stderr)
    return employees_repo, InMemoryAttendanceRepository(records)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("snapshot", type=Path)
    parser.add_argument("-o", "--output", type=Path, help="write here instead of stdout (.xlsx for Excel)")
    args = parser.parse_args()

    snapshot = json.loads(args.snapshot.read_text(encoding="utf-8"))
    employees_repo, attendance_repo = load_repositories(snapshot)

    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings, attendance_repo=attendance_repo, employees_repo=employees_repo)
    data = container.export_service.export_all_employees_data()

    if args.output and args.output.suffix == ".xlsx":
        args.output.write_bytes(timecards_to_excel(data, container.payroll_report_service))
    elif args.output:
        args.output.write_text(format_all_employees_timecard_csv(data, container.payroll_report_service), encoding="utf-8")
    else:
        sys.stdout.write(format_all_employees_timecard_csv(data, container.payroll_report_service))
        return
    print(f"OK: Exported {len(data)} employees -> {args.output}")


if __name__ == "__main__":
    main()
