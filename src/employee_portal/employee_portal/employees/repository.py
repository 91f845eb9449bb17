from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Compensation, Employee


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self, *, active_only: bool = False) -> Sequence[Employee]:
        raise NotImplementedError

    def get_compensation(self, employee_id: str) -> Optional[Compensation]:
        raise NotImplementedError
