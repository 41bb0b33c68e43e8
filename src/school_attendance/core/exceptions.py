class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or a required parameter is missing."""


class NotFoundError(DomainError):
    """Raised when an id or rrn does not match any stored record."""


class NotificationError(DomainError):
    """Raised by a notifier when the email provider rejects or fails a send."""
