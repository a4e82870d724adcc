class StoreError(Exception):
    """Raised by repositories when the underlying database call fails."""


class ConstraintViolation(StoreError):
    """Raised when a write is rejected by a storage-level constraint (unique email, NOT NULL, CHECK)."""


class RecordNotFound(StoreError):
    """Raised when a write targets a row that no longer exists."""


class ConcurrencyConflict(StoreError):
    """Raised when a row changed between the read and the conditional write."""


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConflictError(DomainError):
    """Raised when an employee with the same email already exists."""


class NotFoundError(DomainError):
    """Raised when the targeted employee no longer exists."""


class ConcurrencyError(DomainError):
    """Raised when the employee was modified by someone else since it was read."""


class DataAccessError(DomainError):
    """Raised when the database could not be reached or returned an unexpected error."""
