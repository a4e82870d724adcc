from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee (the store).

    Note (DIP): the service depends on this interface, not on a concrete database.
    Implementations raise the store errors from ``core.exceptions``:
    ConstraintViolation, RecordNotFound, ConcurrencyConflict, StoreError.
    """

    def list_all(self) -> Sequence[Employee]:
        """Most recently created first."""
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def exists_by_email(self, email: str, *, case_insensitive: bool = True) -> bool:
        raise NotImplementedError

    def insert(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def update(self, employee: Employee, *, expected_last_modified: Optional[datetime]) -> None:
        """Write name/email/department/is_active/last_modified if the stored stamp still matches."""
        raise NotImplementedError

    def delete(self, employee_id: int) -> None:
        raise NotImplementedError
