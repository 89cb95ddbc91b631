from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from tender_service.models import TenderStatus, TenderServiceType, BidStatus, BidAuthorType, OrganizationType
from datetime import datetime
from typing import Optional
import uuid


# JSON on the wire is camelCase, python attributes stay snake_case
class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class UserCreate(CamelModel):
    username: str = Field(..., min_length=1, max_length=50)
    first_name: str = Field("", max_length=50)
    last_name: str = Field("", max_length=50)


class UserCreated(CamelModel):
    id: uuid.UUID


class UserResponse(CamelModel):
    id: uuid.UUID
    username: str
    first_name: Optional[str]
    last_name: Optional[str]
    created_at: datetime
    updated_at: datetime


class OrganizationCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    type: OrganizationType


class OrganizationResponse(CamelModel):
    id: uuid.UUID
    name: str
    description: Optional[str]
    type: OrganizationType
    created_at: datetime
    updated_at: datetime


class ResponsibilityCreate(CamelModel):
    organization_id: uuid.UUID
    user_id: uuid.UUID


class ResponsibilityResponse(CamelModel):
    id: uuid.UUID
    organization_id: uuid.UUID
    user_id: uuid.UUID


class TenderCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=500)
    service_type: TenderServiceType
    organization_id: uuid.UUID
    creator_username: str = Field(..., min_length=1)


class TenderResponse(CamelModel):
    id: uuid.UUID
    name: str
    description: str
    status: TenderStatus
    service_type: TenderServiceType
    version: int
    created_at: datetime


class TenderUpdate(CamelModel):
    name: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    service_type: Optional[TenderServiceType] = None


class BidCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=500)
    tender_id: uuid.UUID
    author_type: BidAuthorType
    author_id: uuid.UUID


class BidResponse(CamelModel):
    id: uuid.UUID
    name: str
    description: str
    status: BidStatus
    tender_id: uuid.UUID
    author_type: BidAuthorType
    author_id: uuid.UUID
    version: int
    created_at: datetime


class BidUpdate(CamelModel):
    name: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
