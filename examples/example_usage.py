"""Example: drive the employee service directly (no Flask).

Controllers are a thin layer; the business rules live in EmployeeService.
"""

import importlib

from config import get_settings_module

from src.employee_records.employee_records.container import build_container
from src.employee_records.employee_records.employees.model import EmployeeDraft


def main():
    settings = importlib.import_module(get_settings_module())
    service = build_container(db_config=settings.DB_CONFIG).employee_service

    added = service.add_employee(EmployeeDraft(name="Ada Lovelace", email="ada@company.com", department="R&D"))
    print(added.message)

    for employee in service.load_all().value or []:
        print(f"{employee.employee_id:>4}  {employee.status:<8}  {employee}")


if __name__ == "__main__":
    main()
