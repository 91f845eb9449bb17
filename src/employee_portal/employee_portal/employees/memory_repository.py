from __future__ import annotations

import threading
from typing import Iterable, Optional, Sequence

from ..core.enums import EmployeeStatus
from .model import Compensation, Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, employees: Iterable[Employee] = (), compensation: Iterable[Compensation] = ()):
        self._lock = threading.Lock()
        self._employees: dict[str, Employee] = {e.employee_id: e for e in employees}
        self._compensation: dict[str, Compensation] = {c.employee_id: c for c in compensation}

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            return self._employees.get(employee_id)

    def list_all(self, *, active_only: bool = False) -> Sequence[Employee]:
        with self._lock:
            rows = list(self._employees.values())
        if active_only:
            rows = [e for e in rows if e.status == EmployeeStatus.ACTIVE]
        return sorted(rows, key=lambda e: e.display_name.lower())

    def get_compensation(self, employee_id: str) -> Optional[Compensation]:
        with self._lock:
            return self._compensation.get(employee_id)

    def add(self, employee: Employee, compensation: Optional[Compensation] = None) -> None:
        with self._lock:
            self._employees[employee.employee_id] = employee
            if compensation is not None:
                self._compensation[employee.employee_id] = compensation
