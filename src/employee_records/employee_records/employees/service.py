from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Callable, Generic, List, Optional, TypeVar

import structlog

from ..common.datetime_utils import utc_now
from ..common.validators import require_email, require_length, require_non_empty
from ..core.constants import (
    DEPARTMENT_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    MSG_ADDED,
    MSG_CONCURRENT_UPDATE,
    MSG_DATA_ACCESS,
    MSG_DELETED,
    MSG_DUPLICATE_EMAIL,
    MSG_NOT_FOUND,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
)
from ..core.exceptions import (
    ConcurrencyConflict,
    ConcurrencyError,
    ConflictError,
    ConstraintViolation,
    DataAccessError,
    DomainError,
    NotFoundError,
    RecordNotFound,
    StoreError,
    ValidationError,
)
from .model import Employee, EmployeeDraft
from .repository import EmployeeRepository

logger = structlog.get_logger(__name__)

T = TypeVar("T")

_STAMP_STEP = timedelta(microseconds=1)


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Outcome of a service call, handed to the presentation layer.

    ``error`` is one of the DomainError subclasses; ``message`` is ready to show
    to the user. ``needs_reload`` tells the caller its view is stale.
    """

    value: Optional[T] = None
    error: Optional[DomainError] = None
    message: str = ""
    needs_reload: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None, message: str = "") -> "ServiceResult[T]":
        return cls(value=value, message=message)

    @classmethod
    def failure(
        cls, error: DomainError, *, value: Optional[T] = None, needs_reload: bool = False
    ) -> "ServiceResult[T]":
        return cls(value=value, error=error, message=str(error), needs_reload=needs_reload)


class EmployeeService:
    """Use cases: list, add, toggle status and remove employees.

    The service owns validation and the read-before-write steps; the repository
    owns identity and uniqueness. Store errors are translated here and never
    reach the caller as exceptions.
    """

    def __init__(self, employees: EmployeeRepository, *, clock: Callable[[], datetime] = utc_now):
        self._employees = employees
        self._clock = clock

    @staticmethod
    def validate_draft(draft: EmployeeDraft) -> EmployeeDraft:
        name = require_non_empty(draft.name, "Name")
        require_length(name, "Name", min_len=NAME_MIN_LENGTH, max_len=NAME_MAX_LENGTH)

        email = require_non_empty(draft.email, "Email")
        require_length(email, "Email", max_len=EMAIL_MAX_LENGTH)
        require_email(email)

        department = require_non_empty(draft.department, "Department")
        require_length(department, "Department name", max_len=DEPARTMENT_MAX_LENGTH)

        return EmployeeDraft(name=name, email=email, department=department)

    def _next_stamp(self, previous: Optional[datetime]) -> datetime:
        # Strictly increasing, so the stamp doubles as the optimistic-concurrency token.
        now = self._clock()
        if previous is not None and now <= previous:
            return previous + _STAMP_STEP
        return now

    def _data_access_failure(self, operation: str, exc: Exception, **context) -> ServiceResult:
        logger.error("employee_data_access_failed", operation=operation, error=str(exc), exc_info=True, **context)
        return ServiceResult.failure(DataAccessError(MSG_DATA_ACCESS), needs_reload=True)

    def load_all(self) -> ServiceResult[List[Employee]]:
        try:
            employees = list(self._employees.list_all())
        except StoreError as e:
            result = self._data_access_failure("load_all", e)
            return replace(result, value=[])
        return ServiceResult.success(employees)

    def find_employee(self, employee_id: int) -> ServiceResult[Employee]:
        try:
            employee = self._employees.get_by_id(int(employee_id))
        except StoreError as e:
            return self._data_access_failure("find_employee", e, employee_id=employee_id)
        if employee is None:
            return ServiceResult.failure(NotFoundError(MSG_NOT_FOUND), needs_reload=True)
        return ServiceResult.success(employee)

    def add_employee(self, draft: EmployeeDraft) -> ServiceResult[Employee]:
        try:
            clean = self.validate_draft(draft)
        except ValidationError as e:
            return ServiceResult.failure(e)

        try:
            if self._employees.exists_by_email(clean.email, case_insensitive=True):
                logger.info("employee_email_taken", email=clean.email)
                return ServiceResult.failure(ConflictError(MSG_DUPLICATE_EMAIL))

            employee = self._employees.insert(
                Employee(
                    employee_id=None,
                    name=clean.name,
                    email=clean.email,
                    department=clean.department,
                    created_date=self._clock(),
                    last_modified=None,
                    is_active=True,
                )
            )
        except ConstraintViolation as e:
            # Lost the race against a concurrent insert of the same email.
            logger.info("employee_insert_rejected", email=clean.email, error=str(e))
            return ServiceResult.failure(ConflictError(MSG_DUPLICATE_EMAIL))
        except StoreError as e:
            return self._data_access_failure("add_employee", e, email=clean.email)

        logger.info("employee_added", employee_id=employee.employee_id, email=employee.email)
        return ServiceResult.success(employee, MSG_ADDED)

    def toggle_status(self, employee_id: int) -> ServiceResult[Employee]:
        try:
            current = self._employees.get_by_id(int(employee_id))
            if current is None:
                return ServiceResult.failure(NotFoundError(MSG_NOT_FOUND), needs_reload=True)

            toggled = replace(
                current,
                is_active=not current.is_active,
                last_modified=self._next_stamp(current.last_modified),
            )
            self._employees.update(toggled, expected_last_modified=current.last_modified)
        except RecordNotFound:
            return ServiceResult.failure(NotFoundError(MSG_NOT_FOUND), needs_reload=True)
        except ConcurrencyConflict:
            logger.warning("employee_update_conflict", employee_id=employee_id)
            return ServiceResult.failure(ConcurrencyError(MSG_CONCURRENT_UPDATE), needs_reload=True)
        except StoreError as e:
            return self._data_access_failure("toggle_status", e, employee_id=employee_id)

        verb = "activated" if toggled.is_active else "deactivated"
        logger.info("employee_status_changed", employee_id=toggled.employee_id, is_active=toggled.is_active)
        return ServiceResult.success(toggled, f"Employee {verb} successfully!")

    def remove_employee(self, employee_id: int) -> ServiceResult[None]:
        try:
            if self._employees.get_by_id(int(employee_id)) is None:
                return ServiceResult.failure(NotFoundError(MSG_NOT_FOUND), needs_reload=True)
            self._employees.delete(int(employee_id))
        except RecordNotFound:
            return ServiceResult.failure(NotFoundError(MSG_NOT_FOUND), needs_reload=True)
        except StoreError as e:
            return self._data_access_failure("remove_employee", e, employee_id=employee_id)

        logger.info("employee_deleted", employee_id=employee_id)
        return ServiceResult.success(None, MSG_DELETED)
