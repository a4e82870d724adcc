from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import pytest

from src.employee_records.employee_records.core.exceptions import (
    ConcurrencyConflict,
    ConstraintViolation,
    RecordNotFound,
    StoreError,
)
from src.employee_records.employee_records.employees.model import Employee
from src.employee_records.employee_records.employees.service import EmployeeService


class FakeEmployeeRepository:
    """In-memory store with the same constraints as the Employees table."""

    def __init__(self):
        self._rows: Dict[int, Employee] = {}
        self._next_id = 1
        self.fail_with: Optional[StoreError] = None

    def _check_failure(self):
        if self.fail_with is not None:
            raise self.fail_with

    def list_all(self):
        self._check_failure()
        return sorted(self._rows.values(), key=lambda e: (e.created_date, e.employee_id), reverse=True)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        self._check_failure()
        return self._rows.get(int(employee_id))

    def exists_by_email(self, email: str, *, case_insensitive: bool = True) -> bool:
        self._check_failure()
        if case_insensitive:
            return any(e.email.casefold() == email.casefold() for e in self._rows.values())
        return any(e.email == email for e in self._rows.values())

    def insert(self, employee: Employee) -> Employee:
        self._check_failure()
        if any(e.email.casefold() == employee.email.casefold() for e in self._rows.values()):
            raise ConstraintViolation("Duplicate entry for key 'ux_employees_email'")
        saved = replace(employee, employee_id=self._next_id)
        self._rows[self._next_id] = saved
        self._next_id += 1
        return saved

    def update(self, employee: Employee, *, expected_last_modified: Optional[datetime]) -> None:
        self._check_failure()
        current = self._rows.get(int(employee.employee_id))
        if current is None:
            raise RecordNotFound(f"employee {employee.employee_id} does not exist")
        if current.last_modified != expected_last_modified:
            raise ConcurrencyConflict(f"employee {employee.employee_id} was modified concurrently")
        self._rows[current.employee_id] = replace(employee, created_date=current.created_date)

    def delete(self, employee_id: int) -> None:
        self._check_failure()
        if self._rows.pop(int(employee_id), None) is None:
            raise RecordNotFound(f"employee {employee_id} does not exist")

    def count(self) -> int:
        return len(self._rows)


class SteppingClock:
    """Returns ``start``, then ``start + step``, ... on every call."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)):
        self._now = start
        self._step = step

    def __call__(self) -> datetime:
        now = self._now
        self._now = now + self._step
        return now


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def repo() -> FakeEmployeeRepository:
    return FakeEmployeeRepository()


@pytest.fixture
def clock(fixed_now) -> SteppingClock:
    return SteppingClock(fixed_now)


@pytest.fixture
def service(repo, clock) -> EmployeeService:
    return EmployeeService(repo, clock=clock)
