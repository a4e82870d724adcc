from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as an aware UTC datetime.

    Note: EmployeeService takes this as its default clock; tests inject their own.
    """
    return datetime.now(timezone.utc)
