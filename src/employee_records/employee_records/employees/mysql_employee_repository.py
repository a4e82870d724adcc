from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from ..core.exceptions import ConcurrencyConflict, RecordNotFound
from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    driver_errors,
    fetchall,
    fetchone,
    from_mysql_datetime,
    to_mysql_datetime,
)
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "Id, Name, Email, Department, CreatedDate, LastModified, IsActive"


def _to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(r["Id"]),
        name=r["Name"],
        email=r["Email"],
        department=r["Department"],
        created_date=from_mysql_datetime(r["CreatedDate"]),
        last_modified=from_mysql_datetime(r.get("LastModified")),
        is_active=bool(r.get("IsActive", True)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with driver_errors("list employees"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM Employees
                ORDER BY CreatedDate DESC, Id DESC
                """
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with driver_errors("get employee"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM Employees WHERE Id=%s", (int(employee_id),))
            r = fetchone(cur)
            if not r:
                return None
            return _to_employee(r)

    def exists_by_email(self, email: str, *, case_insensitive: bool = True) -> bool:
        if case_insensitive:
            sql = "SELECT 1 FROM Employees WHERE Email=%s COLLATE utf8mb4_0900_as_ci LIMIT 1"
        else:
            sql = "SELECT 1 FROM Employees WHERE Email=%s COLLATE utf8mb4_bin LIMIT 1"
        with driver_errors("check employee email"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, (email,))
            return fetchone(cur) is not None

    def insert(self, employee: Employee) -> Employee:
        with driver_errors("insert employee"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO Employees(Name, Email, Department, CreatedDate, LastModified, IsActive)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    employee.name,
                    employee.email,
                    employee.department,
                    to_mysql_datetime(employee.created_date),
                    to_mysql_datetime(employee.last_modified),
                    1 if employee.is_active else 0,
                ),
            )
            return replace(employee, employee_id=int(cur.lastrowid))

    def update(self, employee: Employee, *, expected_last_modified: Optional[datetime]) -> None:
        # CreatedDate is write-once: never part of the SET list.
        with driver_errors("update employee"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE Employees
                SET Name=%s, Email=%s, Department=%s, IsActive=%s, LastModified=%s
                WHERE Id=%s AND LastModified <=> %s
                """,
                (
                    employee.name,
                    employee.email,
                    employee.department,
                    1 if employee.is_active else 0,
                    to_mysql_datetime(employee.last_modified),
                    int(employee.employee_id),
                    to_mysql_datetime(expected_last_modified),
                ),
            )
            if cur.rowcount > 0:
                return

            cur.execute("SELECT 1 FROM Employees WHERE Id=%s", (int(employee.employee_id),))
            if fetchone(cur) is None:
                raise RecordNotFound(f"employee {employee.employee_id} does not exist")
            raise ConcurrencyConflict(f"employee {employee.employee_id} was modified concurrently")

    def delete(self, employee_id: int) -> None:
        with driver_errors("delete employee"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM Employees WHERE Id=%s", (int(employee_id),))
            if cur.rowcount == 0:
                raise RecordNotFound(f"employee {employee_id} does not exist")
