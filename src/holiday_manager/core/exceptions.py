class DomainError(Exception):
    """Base exception for business rule violations."""


class NotFoundError(DomainError):
    """Raised when an id does not match any stored record."""


class InvalidDateError(DomainError):
    """Raised when date text cannot be parsed as YYYY-MM-DD."""


class InvalidInputError(DomainError):
    """Raised when input data is invalid (empty names, bad settings, ...)."""


class InvalidTransitionError(DomainError):
    """Raised when a holiday request status change is not allowed."""


class NotConfiguredError(DomainError):
    """Raised when the holiday rules are read before being set."""
