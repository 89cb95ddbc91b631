"""
Authorization gate.

A user may act for an organization iff an OrganizationResponsible row exists
for exactly that (organization, user) pair. Missing organization, missing user
and missing relation all look the same to the caller: ForbiddenError.
"""

import uuid

from tender_service.logger import get_logger
from tender_service.models import OrganizationResponsible
from tender_service.repositories import ResponsibilityRepository
from tender_service.repositories.errors import RecordAlreadyExists, RecordNotFound, StorageError
from tender_service.services.exceptions import AlreadyExistsError, ForbiddenError, NotFoundError, storage_failure

logger = get_logger(__name__)


class AuthorizationGate:
    def __init__(self, repository: ResponsibilityRepository) -> None:
        self._repo = repository

    def is_responsible(self, organization_id: uuid.UUID, user_id: uuid.UUID) -> bool:
        try:
            return self._repo.find(organization_id, user_id) is not None
        except StorageError as exc:
            raise storage_failure(logger, "AuthorizationGate.is_responsible", exc) from exc

    def assert_responsible(self, organization_id: uuid.UUID, user_id: uuid.UUID) -> None:
        if not self.is_responsible(organization_id, user_id):
            logger.info("access_denied", organization_id=str(organization_id), user_id=str(user_id))
            raise ForbiddenError()

    def create_responsibility(self, organization_id: uuid.UUID, user_id: uuid.UUID) -> OrganizationResponsible:
        try:
            responsibility = self._repo.insert(organization_id=organization_id, user_id=user_id)
        except RecordAlreadyExists as exc:
            raise AlreadyExistsError("Organization responsible already exists") from exc
        except StorageError as exc:
            raise storage_failure(logger, "AuthorizationGate.create_responsibility", exc) from exc
        logger.info(
            "responsibility_created",
            responsibility_id=str(responsibility.id),
            organization_id=str(organization_id),
            user_id=str(user_id),
        )
        return responsibility

    def get_responsibility(self, responsibility_id: uuid.UUID) -> OrganizationResponsible:
        try:
            return self._repo.get(responsibility_id)
        except RecordNotFound as exc:
            raise NotFoundError("Organization responsible not found") from exc
        except StorageError as exc:
            raise storage_failure(logger, "AuthorizationGate.get_responsibility", exc) from exc
