from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository

    employee_service: EmployeeService


def build_container(*, db_config: dict) -> Container:
    config = DBConfig.from_dict(db_config)
    conn = DatabaseConnection.get_instance(config)

    employees_repo = MySQLEmployeeRepository(conn)
    employee_service = EmployeeService(employees_repo)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        employee_service=employee_service,
    )
