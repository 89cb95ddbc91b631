"""
FastAPI dependencies: one session per request, services built on top of it.
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from tender_service.database import get_session
from tender_service.repositories import (
    BidRepository,
    OrganizationRepository,
    ResponsibilityRepository,
    TenderRepository,
    UserRepository,
)
from tender_service.services import (
    AuthorizationGate,
    BidService,
    OrganizationService,
    TenderService,
    UserService,
)

SessionDep = Annotated[Session, Depends(get_session)]


def get_user_service(session: SessionDep) -> UserService:
    return UserService(UserRepository(session))


def get_organization_service(session: SessionDep) -> OrganizationService:
    return OrganizationService(OrganizationRepository(session))


def get_gate(session: SessionDep) -> AuthorizationGate:
    return AuthorizationGate(ResponsibilityRepository(session))


def get_tender_service(session: SessionDep, gate: Annotated[AuthorizationGate, Depends(get_gate)]) -> TenderService:
    return TenderService(TenderRepository(session), gate)


def get_bid_service(
        session: SessionDep,
        gate: Annotated[AuthorizationGate, Depends(get_gate)],
        tenders: Annotated[TenderService, Depends(get_tender_service)],
) -> BidService:
    return BidService(BidRepository(session), gate, tenders)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
OrganizationServiceDep = Annotated[OrganizationService, Depends(get_organization_service)]
GateDep = Annotated[AuthorizationGate, Depends(get_gate)]
TenderServiceDep = Annotated[TenderService, Depends(get_tender_service)]
BidServiceDep = Annotated[BidService, Depends(get_bid_service)]
