from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import utc_now
from ..core.constants import STATUS_ACTIVE, STATUS_INACTIVE


@dataclass(frozen=True)
class EmployeeDraft:
    """Unvalidated input for creating an employee (straight from a form or a script)."""

    name: str
    email: str
    department: str


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Plain data record: no DB access, no change tracking. ``employee_id`` is None
    until the repository has inserted the row.
    """

    employee_id: Optional[int]
    name: str
    email: str
    department: str
    created_date: datetime
    last_modified: Optional[datetime] = None
    is_active: bool = True

    @property
    def email_domain(self) -> str:
        if "@" not in self.email:
            return ""
        return self.email.split("@", 1)[1]

    @property
    def days_since_created(self) -> int:
        return self.days_since_created_at(utc_now())

    def days_since_created_at(self, now: datetime) -> int:
        return (now - self.created_date).days

    @property
    def status(self) -> str:
        return STATUS_ACTIVE if self.is_active else STATUS_INACTIVE

    def __str__(self) -> str:
        return f"{self.name} ({self.email}) - {self.department}"
