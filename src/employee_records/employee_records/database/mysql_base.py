from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import ConstraintViolation, StoreError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


@contextmanager
def driver_errors(operation: str) -> Iterator[None]:
    """Translate mysql-connector errors into store errors.

    Duplicate keys, NULLs in NOT NULL columns, CHECK failures and values that
    are too long all surface as ConstraintViolation.
    """

    try:
        yield
    except mysql.connector.IntegrityError as e:
        raise ConstraintViolation(f"{operation}: {e.msg}") from e
    except mysql.connector.DataError as e:
        raise ConstraintViolation(f"{operation}: {e.msg}") from e
    except mysql.connector.DatabaseError as e:
        if e.errno == errorcode.ER_CHECK_CONSTRAINT_VIOLATED:
            raise ConstraintViolation(f"{operation}: {e.msg}") from e
        raise StoreError(f"{operation}: {e.msg}") from e
    except mysql.connector.Error as e:
        raise StoreError(f"{operation}: {e.msg}") from e


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def to_mysql_datetime(value: Optional[datetime]) -> Optional[datetime]:
    """DATETIME columns hold naive UTC values."""

    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def from_mysql_datetime(value: Any) -> Optional[datetime]:
    """Normalize DATETIME values read back from MySQL into aware UTC datetimes.

    mysql-connector can return DATETIME as:
    - datetime.datetime (naive)
    - string (e.g. '2024-01-15 00:00:00.000000') with raw cursors
    """

    if value is None:
        return None

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    if isinstance(value, (bytes, bytearray)):
        value = value.decode("ascii")

    if isinstance(value, str):
        return datetime.fromisoformat(value.strip()).replace(tzinfo=timezone.utc)

    raise TypeError(f"Unsupported MySQL DATETIME value type: {type(value)!r}")
