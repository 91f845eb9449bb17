from __future__ import annotations

import logging
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..core.constants import DEFAULT_EXPORT_RECORD_LIMIT
from ..employees.repository import EmployeeRepository
from .model import EmployeeExportData

logger = logging.getLogger(__name__)


class ExportService:
    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        record_limit: int = DEFAULT_EXPORT_RECORD_LIMIT,
    ):
        self._employees = employees
        self._attendance = attendance
        self._record_limit = int(record_limit)

    def export_employee_data(self, employee_id: str) -> Optional[EmployeeExportData]:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            return None

        return EmployeeExportData(
            employee=employee,
            compensation=self._employees.get_compensation(employee_id),
            attendance=list(self._attendance.list_for_employee(employee_id, limit=self._record_limit)),
        )

    def export_all_employees_data(self) -> list[EmployeeExportData]:
        out = []
        for employee in self._employees.list_all():
            data = self.export_employee_data(employee.employee_id)
            if data:
                out.append(data)
        logger.info("Exported data for %d employees", len(out))
        return out
