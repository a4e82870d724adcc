import pytest

from src.employee_records.employee_records.common.validators import require_email, require_length, require_non_empty
from src.employee_records.employee_records.core.exceptions import ValidationError


def test_require_non_empty_strips():
    assert require_non_empty("  IT ", "Department") == "IT"


@pytest.mark.parametrize("value", [None, "", "   "])
def test_require_non_empty_rejects_blank(value):
    with pytest.raises(ValidationError, match="Department is required"):
        require_non_empty(value, "Department")


def test_require_length_messages():
    with pytest.raises(ValidationError, match="between 2 and 100"):
        require_length("J", "Name", min_len=2, max_len=100)
    with pytest.raises(ValidationError, match="cannot exceed 50"):
        require_length("D" * 51, "Department name", max_len=50)


def test_require_email():
    assert require_email("jane.smith@company.com") == "jane.smith@company.com"
    with pytest.raises(ValidationError, match="valid email"):
        require_email("jane.smith")
