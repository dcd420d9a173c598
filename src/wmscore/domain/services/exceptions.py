"""Service-layer exceptions.

Callers catch ``ServiceError`` and read its message. The subclasses tag
the cause for callers that want to tell them apart.
"""


class ServiceError(Exception):
    """Raised when a service operation fails."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgumentError(ServiceError):
    """Raised when an argument is missing or violates a business rule."""


class EntityNotFoundError(ServiceError):
    """Raised when an update targets an identity that is not stored."""


class StoreFailureError(ServiceError):
    """Raised when the persistence layer fails."""
