"""
Persistence boundary: one repository per table over BaseRepository.

Repositories raise tender_service.repositories.errors only; translation into
domain errors happens in the services.
"""

from tender_service.repositories.base import BaseRepository
from tender_service.repositories.entities import (
    BidRepository,
    OrganizationRepository,
    ResponsibilityRepository,
    TenderRepository,
    UserRepository,
)

__all__ = [
    "BaseRepository",
    "BidRepository",
    "OrganizationRepository",
    "ResponsibilityRepository",
    "TenderRepository",
    "UserRepository",
]
