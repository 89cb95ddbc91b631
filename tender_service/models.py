from sqlalchemy import String, Integer, ForeignKey, Enum, DateTime, UUID, Column, UniqueConstraint
from sqlalchemy.orm import declarative_base
from datetime import datetime, timezone
import uuid
from enum import Enum as PyEnum

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# store "Created", not "CREATED"
def enum_values(enum_cls):
    return [member.value for member in enum_cls]


class OrganizationType(PyEnum):
    IE = "IE"
    LLC = "LLC"
    JSC = "JSC"


class TenderStatus(PyEnum):
    CREATED = "Created"
    PUBLISHED = "Published"
    CLOSED = "Closed"


class TenderServiceType(PyEnum):
    CONSTRUCTION = "Construction"
    DELIVERY = "Delivery"
    MANUFACTURE = "Manufacture"


class BidStatus(PyEnum):
    CREATED = "Created"
    PUBLISHED = "Published"
    CLOSED = "Closed"


class BidAuthorType(PyEnum):
    ORGANIZATION = "Organization"
    USER = "User"


class Employee(Base):
    __tablename__ = 'employee'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    username = Column(String(50), unique=True, index=True, nullable=False)
    first_name = Column(String(50))
    last_name = Column(String(50))
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class Organization(Base):
    __tablename__ = 'organization'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    description = Column(String, nullable=True)
    type = Column(Enum(OrganizationType, name="organization_type", values_callable=enum_values), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


# the only source of truth for "who may act for an organization"
class OrganizationResponsible(Base):
    __tablename__ = 'organization_responsible'
    __table_args__ = (UniqueConstraint('organization_id', 'user_id', name='uq_organization_user'),)
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    organization_id = Column(UUID(as_uuid=True), ForeignKey('organization.id', ondelete='CASCADE'), nullable=False)
    user_id = Column(UUID(as_uuid=True), ForeignKey('employee.id', ondelete='CASCADE'), nullable=False)


class Tender(Base):
    __tablename__ = 'tender'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False, index=True)
    description = Column(String(500), nullable=False)
    service_type = Column(Enum(TenderServiceType, name="tender_service_type", values_callable=enum_values), nullable=False)
    status = Column(Enum(TenderStatus, name="tender_status", values_callable=enum_values), default=TenderStatus.CREATED, nullable=False)
    organization_id = Column(UUID(as_uuid=True), ForeignKey('organization.id'), nullable=False)
    version = Column(Integer, default=1, nullable=False)
    creator_username = Column(String(50), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)


class Bid(Base):
    __tablename__ = 'bid'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False, index=True)
    description = Column(String(500), nullable=False)
    status = Column(Enum(BidStatus, name="bid_status", values_callable=enum_values), default=BidStatus.CREATED, nullable=False)
    tender_id = Column(UUID(as_uuid=True), ForeignKey('tender.id'), nullable=False)
    author_type = Column(Enum(BidAuthorType, name="bid_author_type", values_callable=enum_values), nullable=False)
    author_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    version = Column(Integer, default=1, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
