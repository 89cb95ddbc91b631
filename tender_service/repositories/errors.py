"""
Storage-level errors raised by the repositories.

Services translate these into domain errors (tender_service.services.exceptions);
nothing above the service layer should see them.
"""

from typing import Any


class RepositoryError(Exception):
    """Base for every persistence failure."""


class RecordNotFound(RepositoryError):
    def __init__(self, entity: str, key: Any) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} {key} not found")


class RecordAlreadyExists(RepositoryError):
    def __init__(self, entity: str) -> None:
        self.entity = entity
        super().__init__(f"{entity} violates a uniqueness constraint")


class RecordVersionMismatch(RepositoryError):
    def __init__(self, entity: str, key: Any, expected_version: int) -> None:
        self.entity = entity
        self.key = key
        self.expected_version = expected_version
        super().__init__(f"{entity} {key} is not at version {expected_version}")


class StorageError(RepositoryError):
    """Any lower-level database failure, tagged with the operation that hit it."""

    def __init__(self, operation: str, cause: BaseException) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation}: {cause}")
