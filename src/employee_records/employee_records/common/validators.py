from __future__ import annotations

from typing import Optional

from email_validator import EmailNotValidError, validate_email

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_length(value: str, field_name: str, *, min_len: int = 0, max_len: int) -> str:
    if len(value) < min_len:
        raise ValidationError(f"{field_name} must be between {min_len} and {max_len} characters")
    if len(value) > max_len:
        if min_len:
            raise ValidationError(f"{field_name} must be between {min_len} and {max_len} characters")
        raise ValidationError(f"{field_name} cannot exceed {max_len} characters")
    return value


def require_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise ValidationError("Please enter a valid email address")
    return value
