from typing import Optional
import uuid

from tender_service.logger import get_logger
from tender_service.models import Organization, OrganizationType
from tender_service.repositories import OrganizationRepository
from tender_service.repositories.errors import RecordAlreadyExists, RecordNotFound, StorageError
from tender_service.services.exceptions import AlreadyExistsError, NotFoundError, storage_failure

logger = get_logger(__name__)


class OrganizationService:
    def __init__(self, repository: OrganizationRepository) -> None:
        self._repo = repository

    def create_organization(
            self, name: str, description: Optional[str], organization_type: OrganizationType
    ) -> Organization:
        try:
            organization = self._repo.insert(name=name, description=description, type=organization_type)
        except RecordAlreadyExists as exc:
            raise AlreadyExistsError("Organization already exists") from exc
        except StorageError as exc:
            raise storage_failure(logger, "OrganizationService.create_organization", exc) from exc
        logger.info("organization_created", organization_id=str(organization.id))
        return organization

    def get_by_id(self, organization_id: uuid.UUID) -> Organization:
        try:
            return self._repo.get(organization_id)
        except RecordNotFound as exc:
            raise NotFoundError("Organization not found") from exc
        except StorageError as exc:
            raise storage_failure(logger, "OrganizationService.get_by_id", exc) from exc
