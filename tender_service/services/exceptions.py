"""
Domain errors raised by the service layer.

main.py translates them into HTTP responses (403, 404, 400, 409, 500) by type.
They do not depend on FastAPI. The message is the only thing shown to the client.
"""


class DomainError(Exception):
    """Base for business errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Entity does not exist."""


class AlreadyExistsError(DomainError):
    """Uniqueness violation on create."""


class ForbiddenError(DomainError):
    """Requester is not responsible for the owning organization."""

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message)


class ConflictError(DomainError):
    """Entity changed between the caller's read and this write."""

    def __init__(self, message: str = "Version conflict") -> None:
        super().__init__(message)


class TransitionNotAllowedError(DomainError):
    def __init__(self, message: str = "Status transition not allowed") -> None:
        super().__init__(message)


class StorageFailure(DomainError):
    """Lower-level I/O error. The operation name is kept for logs, never shown."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__("Internal server error")


def storage_failure(log, operation: str, exc: Exception) -> StorageFailure:
    log.error("storage_failure", operation=operation, error=str(exc))
    return StorageFailure(operation)
