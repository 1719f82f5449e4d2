from __future__ import annotations

from enum import Enum


class HolidayStatus(str, Enum):
    """Approval state of a holiday request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class StorageBackend(str, Enum):
    """Where repositories keep their records."""

    MEMORY = "memory"
    MYSQL = "mysql"
