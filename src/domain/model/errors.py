"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class UnauthorizedError(DomainError):
    """Caller could not be authenticated.

    The message is kept generic so callers cannot tell which credential failed.
    """


class ValidationError(DomainError):
    """Input violates one or more field rules."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


class StorageError(DomainError):
    """The backing store failed (connection, pool exhaustion, driver error)."""
