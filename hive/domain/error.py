"""Domain layer errors.

Every request rejection the forum can produce is one of these types. The
interface layer maps each to an HTTP status.
"""


class DomainError(Exception):
    """Base domain error."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Request payload is missing fields required by the operation."""

    pass


class UnauthorizedError(DomainError):
    """No identity could be established for the request."""

    def __init__(self, message: str = "Unauthorized access"):
        super().__init__(message)


class ForbiddenError(DomainError):
    """The established identity may not perform the operation."""

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)


class QuotaExceededError(DomainError):
    """The author has reached the post ceiling of their membership tier."""

    def __init__(self, message: str = "Post limit exceeded"):
        super().__init__(message)


class DuplicateError(DomainError):
    """A unique value is already taken."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class UpstreamFailureError(DomainError):
    """Storage or payment processor failure."""

    def __init__(self, message: str, detail: str | None = None):
        self.detail = detail
        super().__init__(message)
