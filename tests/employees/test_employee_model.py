from datetime import date

from src.employee_portal.employee_portal.core.constants import DEFAULT_CURRENCY
from src.employee_portal.employee_portal.core.enums import EmployeeStatus, Role
from src.employee_portal.employee_portal.employees.model import Compensation, Employee


def test_employee_from_document():
    emp = Employee.from_dict(
        {
            "id": "e1",
            "email": "ana@example.com",
            "displayName": "Ana",
            "role": "management",
            "hireDate": "2020-03-02",
            "phoneNumber": "555-0100",
        }
    )

    assert emp.employee_id == "e1"
    assert emp.role is Role.MANAGEMENT
    assert emp.status is EmployeeStatus.ACTIVE
    assert emp.hire_date == date(2020, 3, 2)
    assert emp.date_of_birth is None
    assert Employee.from_dict(emp.to_dict()) == emp


def test_employee_id_falls_back_to_employee_id_field():
    emp = Employee.from_dict({"employeeId": "e7", "hireDate": "not a date"})

    assert emp.employee_id == "e7"
    assert emp.role is Role.EMPLOYEE
    assert emp.hire_date is None


def test_compensation_from_document():
    comp = Compensation.from_dict({"employeeId": "e1", "hourlyRate": "25", "salary": ""})

    assert comp.hourly_rate == 25.0
    assert comp.salary is None
    assert comp.currency == DEFAULT_CURRENCY
    assert Compensation.from_dict(comp.to_dict()) == comp
