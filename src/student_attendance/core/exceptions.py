class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class StudentNotFoundError(NotFoundError):
    """Raised when no student matches the given id or email."""

    def __init__(self, key: str):
        super().__init__(f"Student not found: {key}")
        self.key = key


class AuthorizationError(DomainError):
    """Raised when a caller's role does not allow an action."""


class PersistenceError(DomainError):
    """Raised when the storage medium cannot be read or written."""
