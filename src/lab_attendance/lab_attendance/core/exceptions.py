class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or a store row has the wrong shape."""


class NotFoundError(DomainError):
    """Raised when a range query matches no attendance events."""


class AuthenticationError(DomainError):
    """Raised when the scheduled checkout token is missing or wrong."""


class UpstreamStoreError(DomainError):
    """Raised when the attendance store request fails or answers with an error."""
