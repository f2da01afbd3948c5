"""Custom exceptions for the LeadPulse application."""


class LeadPulseException(Exception):
    """Base exception for LeadPulse application."""

    pass


class ValidationError(LeadPulseException):
    """Raised when validation fails."""

    pass


class NotFoundError(LeadPulseException):
    """Raised when a resource is not found or not visible to the caller."""

    pass


class DatabaseError(LeadPulseException):
    """Raised when a database operation fails."""

    pass


class ConstraintViolationError(DatabaseError):
    """Raised when a write breaks a CHECK, foreign-key, unique or not-null rule."""

    pass


class ConfigurationError(LeadPulseException):
    """Raised when configuration is invalid."""

    pass


class AuthenticationError(LeadPulseException):
    """Raised when authentication fails."""

    pass


class AuthorizationError(LeadPulseException):
    """Raised when an authenticated caller may not perform a write."""

    pass
