"""
Service layer: identity directory, organization registry, authorization gate
and the tender/bid lifecycle engines.

Services receive repositories by injection and raise
tender_service.services.exceptions, never HTTPException.
"""

from tender_service.services.authorization import AuthorizationGate
from tender_service.services.bids import BidEdit, BidService
from tender_service.services.organizations import OrganizationService
from tender_service.services.tenders import TenderEdit, TenderService
from tender_service.services.users import UserService

__all__ = [
    "AuthorizationGate",
    "BidEdit",
    "BidService",
    "OrganizationService",
    "TenderEdit",
    "TenderService",
    "UserService",
]
