class DomainError(Exception):
    """Base exception for business rule violations."""


class NotFoundError(DomainError):
    """Raised when a referenced group, event, player or coach does not exist."""


class BadRequestError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
