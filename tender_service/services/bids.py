from dataclasses import dataclass
from typing import Any, List, Optional, Tuple
import uuid

from tender_service.logger import get_logger
from tender_service.models import Bid, BidAuthorType, BidStatus
from tender_service.repositories import BidRepository
from tender_service.repositories.errors import RecordAlreadyExists, StorageError
from tender_service.services.authorization import AuthorizationGate
from tender_service.services.exceptions import AlreadyExistsError, storage_failure
from tender_service.services.lifecycle import LifecycleService, Transitions
from tender_service.services.pagination import normalize_page
from tender_service.services.tenders import TenderService

logger = get_logger(__name__)


@dataclass(frozen=True)
class BidEdit:
    name: Optional[str] = None
    description: Optional[str] = None

    def changes(self) -> List[Tuple[str, Any]]:
        changes = []
        if self.name:
            changes.append(("name", self.name))
        if self.description:
            changes.append(("description", self.description))
        return changes


class BidService(LifecycleService):
    """
    Bid lifecycle. Authorization is always checked against the organization
    owning the bid's tender, resolved through the tender service.
    """

    entity_name = "Bid"
    log = logger

    def __init__(
            self,
            repository: BidRepository,
            gate: AuthorizationGate,
            tenders: TenderService,
            allowed_transitions: Transitions = None,
    ) -> None:
        super().__init__(repository, gate, allowed_transitions)
        self._tenders = tenders

    def create(
            self,
            name: str,
            description: str,
            tender_id: uuid.UUID,
            author_type: BidAuthorType,
            author_id: uuid.UUID,
    ) -> Bid:
        """Does not look the tender up; the caller resolves it first."""
        try:
            bid = self._repo.insert(
                name=name,
                description=description,
                tender_id=tender_id,
                author_type=author_type,
                author_id=author_id,
                status=BidStatus.CREATED,
                version=1,
            )
        except RecordAlreadyExists as exc:
            raise AlreadyExistsError("Bid already exists") from exc
        except StorageError as exc:
            raise storage_failure(logger, "BidService.create", exc) from exc
        logger.info("bid_created", bid_id=str(bid.id), tender_id=str(tender_id))
        return bid

    def get_by_tender_id(
            self,
            tender_id: uuid.UUID,
            requester_id: uuid.UUID,
            limit: Optional[int] = None,
            offset: Optional[int] = None,
    ) -> List[Bid]:
        # a requester only ever sees their own bids here
        limit, offset = normalize_page(limit, offset)
        try:
            return self._repo.list_by_author(requester_id, limit, offset, tender_id=tender_id)
        except StorageError as exc:
            raise storage_failure(logger, "BidService.get_by_tender_id", exc) from exc

    def list_mine(self, requester_id: uuid.UUID, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Bid]:
        limit, offset = normalize_page(limit, offset)
        try:
            return self._repo.list_by_author(requester_id, limit, offset)
        except StorageError as exc:
            raise storage_failure(logger, "BidService.list_mine", exc) from exc

    def authorize(self, bid: Bid, requester_id: uuid.UUID) -> None:
        tender = self._tenders.get_by_id(bid.tender_id)
        self._gate.assert_responsible(tender.organization_id, requester_id)

    def get_status(self, bid_id: uuid.UUID, requester_id: uuid.UUID) -> BidStatus:
        bid = self.get_by_id(bid_id)
        self.authorize(bid, requester_id)
        return bid.status

    def set_status(
            self,
            bid_id: uuid.UUID,
            status: BidStatus,
            requester_id: uuid.UUID,
            expected_version: Optional[int] = None,
    ) -> Bid:
        bid = self.get_by_id(bid_id)
        self.authorize(bid, requester_id)
        self.check_transition(bid.status, status)

        updated = self._apply(bid_id, [("status", status)], expected_version, "set_status")
        logger.info("bid_status_set", bid_id=str(bid_id), status=status.value, version=updated.version)
        return updated

    def edit(self, bid_id: uuid.UUID, edit: BidEdit, expected_version: Optional[int] = None) -> Bid:
        self.get_by_id(bid_id)
        updated = self._apply(bid_id, edit.changes(), expected_version, "edit")
        logger.info("bid_edited", bid_id=str(bid_id), version=updated.version)
        return updated
