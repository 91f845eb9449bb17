"""Employee Portal package.

Organized by feature modules (attendance, payroll, employees, export) with a
thin Flask controller layer over service/repository layers. The time
accounting rules live in ``payroll.time_accounting`` and are shared by the
clock-out path and the export path.
"""
