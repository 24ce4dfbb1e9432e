class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when an action is not allowed in the current state or input is invalid."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
