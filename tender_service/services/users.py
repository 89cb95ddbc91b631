import uuid

from tender_service.logger import get_logger
from tender_service.models import Employee
from tender_service.repositories import UserRepository
from tender_service.repositories.errors import RecordAlreadyExists, RecordNotFound, StorageError
from tender_service.services.exceptions import AlreadyExistsError, NotFoundError, storage_failure

logger = get_logger(__name__)


class UserService:
    """Identity directory: username/id to user record. Users are never updated or deleted."""

    def __init__(self, repository: UserRepository) -> None:
        self._repo = repository

    def create_user(self, username: str, first_name: str, last_name: str) -> uuid.UUID:
        try:
            user = self._repo.insert(username=username, first_name=first_name, last_name=last_name)
        except RecordAlreadyExists as exc:
            raise AlreadyExistsError("User already exists") from exc
        except StorageError as exc:
            raise storage_failure(logger, "UserService.create_user", exc) from exc
        logger.info("user_created", user_id=str(user.id), username=username)
        return user.id

    def get_by_id(self, user_id: uuid.UUID) -> Employee:
        try:
            return self._repo.get(user_id)
        except RecordNotFound as exc:
            raise NotFoundError("User not found") from exc
        except StorageError as exc:
            raise storage_failure(logger, "UserService.get_by_id", exc) from exc

    def get_by_username(self, username: str) -> Employee:
        try:
            user = self._repo.get_by_username(username)
        except StorageError as exc:
            raise storage_failure(logger, "UserService.get_by_username", exc) from exc
        if user is None:
            raise NotFoundError("User not found")
        return user
