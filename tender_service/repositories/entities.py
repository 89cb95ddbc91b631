"""Per-table repositories."""

from typing import List, Optional
import uuid

from tender_service.models import Bid, Employee, Organization, OrganizationResponsible, Tender, TenderServiceType
from tender_service.repositories.base import BaseRepository


class UserRepository(BaseRepository):
    model = Employee

    def get_by_username(self, username: str) -> Optional[Employee]:
        return self.first(Employee.username == username)


class OrganizationRepository(BaseRepository):
    model = Organization


class ResponsibilityRepository(BaseRepository):
    model = OrganizationResponsible

    def find(self, organization_id: uuid.UUID, user_id: uuid.UUID) -> Optional[OrganizationResponsible]:
        return self.first(
            OrganizationResponsible.organization_id == organization_id,
            OrganizationResponsible.user_id == user_id,
        )


class TenderRepository(BaseRepository):
    model = Tender

    def list_all(self, limit: int, offset: int) -> List[Tender]:
        return self.query(order_by=Tender.name, limit=limit, offset=offset)

    def list_by_service_type(self, service_type: TenderServiceType, limit: int, offset: int) -> List[Tender]:
        return self.query(Tender.service_type == service_type, order_by=Tender.name, limit=limit, offset=offset)

    def list_by_creator(self, username: str, limit: int, offset: int) -> List[Tender]:
        return self.query(Tender.creator_username == username, order_by=Tender.name, limit=limit, offset=offset)


class BidRepository(BaseRepository):
    model = Bid

    def list_by_author(
            self, author_id: uuid.UUID, limit: int, offset: int, tender_id: Optional[uuid.UUID] = None
    ) -> List[Bid]:
        criteria = [Bid.author_id == author_id]
        if tender_id is not None:
            criteria.append(Bid.tender_id == tender_id)
        return self.query(*criteria, order_by=Bid.name, limit=limit, offset=offset)
