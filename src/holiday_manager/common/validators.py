from __future__ import annotations

from ..core.exceptions import InvalidInputError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(f"{field_name} must not be empty")
    return value.strip()


def require_int_id(value: int, field_name: str) -> int:
    # bool is an int subclass but never a valid id
    if isinstance(value, bool):
        raise InvalidInputError(f"{field_name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{field_name} must be an integer")


def require_non_negative(value: int, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{field_name} must be an integer")
    if number < 0:
        raise InvalidInputError(f"{field_name} must be >= 0")
    return number
