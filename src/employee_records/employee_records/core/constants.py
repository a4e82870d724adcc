"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 150
DEPARTMENT_MAX_LENGTH = 50

DEFAULT_CONNECT_TIMEOUT_SECONDS = 10

STATUS_ACTIVE = "Active"
STATUS_INACTIVE = "Inactive"

MSG_ADDED = "Employee added successfully!"
MSG_DUPLICATE_EMAIL = "An employee with this email already exists."
MSG_NOT_FOUND = "Employee not found."
MSG_CONCURRENT_UPDATE = "Employee was modified by another user. Please refresh and try again."
MSG_DELETED = "Employee deleted successfully!"
MSG_DATA_ACCESS = "A database error occurred. Please try again later."
