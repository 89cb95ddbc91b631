from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple
import uuid

from tender_service.logger import get_logger
from tender_service.models import Tender, TenderServiceType, TenderStatus
from tender_service.repositories.errors import RecordAlreadyExists, StorageError
from tender_service.services.exceptions import AlreadyExistsError, storage_failure
from tender_service.services.lifecycle import LifecycleService
from tender_service.services.pagination import normalize_page

logger = get_logger(__name__)

# anyone may see the status of a published tender
PUBLIC_STATUSES = {TenderStatus.PUBLISHED}


@dataclass(frozen=True)
class TenderEdit:
    name: Optional[str] = None
    description: Optional[str] = None
    service_type: Optional[TenderServiceType] = None

    def changes(self) -> List[Tuple[str, Any]]:
        # empty strings leave the column untouched
        changes = []
        if self.name:
            changes.append(("name", self.name))
        if self.description:
            changes.append(("description", self.description))
        if self.service_type is not None:
            changes.append(("service_type", self.service_type))
        return changes


class TenderService(LifecycleService):
    entity_name = "Tender"
    log = logger

    def create(
            self,
            name: str,
            description: str,
            service_type: TenderServiceType,
            organization_id: uuid.UUID,
            creator_username: str,
    ) -> Tender:
        try:
            tender = self._repo.insert(
                name=name,
                description=description,
                service_type=service_type,
                organization_id=organization_id,
                creator_username=creator_username,
                status=TenderStatus.CREATED,
                version=1,
            )
        except RecordAlreadyExists as exc:
            raise AlreadyExistsError("Tender already exists") from exc
        except StorageError as exc:
            raise storage_failure(logger, "TenderService.create", exc) from exc
        logger.info("tender_created", tender_id=str(tender.id), organization_id=str(organization_id))
        return tender

    def list_by_type(
            self,
            service_types: Optional[Sequence[TenderServiceType]] = None,
            limit: Optional[int] = None,
            offset: Optional[int] = None,
    ) -> List[Tender]:
        """
        Without service types: one page of all tenders. With service types: one
        page per type, concatenated in the order the types were given.
        """
        limit, offset = normalize_page(limit, offset)
        try:
            if not service_types:
                return self._repo.list_all(limit, offset)
            tenders = []
            for service_type in service_types:
                tenders.extend(self._repo.list_by_service_type(service_type, limit, offset))
            return tenders
        except StorageError as exc:
            raise storage_failure(logger, "TenderService.list_by_type", exc) from exc

    def list_mine(self, username: str, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Tender]:
        limit, offset = normalize_page(limit, offset)
        try:
            return self._repo.list_by_creator(username, limit, offset)
        except StorageError as exc:
            raise storage_failure(logger, "TenderService.list_mine", exc) from exc

    def get_status(self, tender_id: uuid.UUID, requester_id: uuid.UUID) -> TenderStatus:
        tender = self.get_by_id(tender_id)
        if tender.status not in PUBLIC_STATUSES:
            self._gate.assert_responsible(tender.organization_id, requester_id)
        return tender.status

    def set_status(
            self,
            tender_id: uuid.UUID,
            status: TenderStatus,
            requester_id: uuid.UUID,
            expected_version: Optional[int] = None,
    ) -> Tender:
        tender = self.get_by_id(tender_id)
        self._gate.assert_responsible(tender.organization_id, requester_id)
        self.check_transition(tender.status, status)

        updated = self._apply(tender_id, [("status", status)], expected_version, "set_status")
        logger.info("tender_status_set", tender_id=str(tender_id), status=status.value, version=updated.version)
        return updated

    def edit(self, tender_id: uuid.UUID, edit: TenderEdit, expected_version: Optional[int] = None) -> Tender:
        # callers check the gate before editing
        self.get_by_id(tender_id)
        updated = self._apply(tender_id, edit.changes(), expected_version, "edit")
        logger.info("tender_edited", tender_id=str(tender_id), version=updated.version)
        return updated
