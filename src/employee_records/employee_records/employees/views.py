"""View-only transforms over the result of ``EmployeeService.load_all``.

Nothing here talks to the repository; the list on screen is never the source of truth.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional

from .model import Employee

SORT_KEYS: Dict[str, Callable[[Employee], object]] = {
    "name": lambda e: e.name.casefold(),
    "email": lambda e: e.email.casefold(),
    "department": lambda e: e.department.casefold(),
    "created": lambda e: e.created_date,
    "status": lambda e: e.is_active,
}


def filter_employees(employees: Iterable[Employee], query: Optional[str]) -> List[Employee]:
    q = (query or "").strip().casefold()
    if not q:
        return list(employees)
    return [
        e
        for e in employees
        if q in e.name.casefold() or q in e.email.casefold() or q in e.department.casefold()
    ]


def sort_employees(employees: Iterable[Employee], key: Optional[str], *, descending: bool = False) -> List[Employee]:
    items = list(employees)
    sort_key = SORT_KEYS.get((key or "").strip().lower())
    if sort_key is None:
        return items
    return sorted(items, key=sort_key, reverse=descending)
