from fastapi import APIRouter
from tender_service.deps import GateDep, OrganizationServiceDep, UserServiceDep
from tender_service.schemas import (
    OrganizationCreate,
    OrganizationResponse,
    ResponsibilityCreate,
    ResponsibilityResponse,
)
import uuid

router = APIRouter()


@router.post("/org/create", response_model=OrganizationResponse)
def create_organization(organization: OrganizationCreate, organizations: OrganizationServiceDep):
    return organizations.create_organization(organization.name, organization.description, organization.type)


@router.get("/org/{organization_id}", response_model=OrganizationResponse)
def get_organization(organization_id: uuid.UUID, organizations: OrganizationServiceDep):
    return organizations.get_by_id(organization_id)


# both ends of the relation must exist
@router.post("/orgresp/create", response_model=ResponsibilityResponse)
def create_responsibility(
        responsibility: ResponsibilityCreate,
        organizations: OrganizationServiceDep,
        users: UserServiceDep,
        gate: GateDep,
):
    organizations.get_by_id(responsibility.organization_id)
    users.get_by_id(responsibility.user_id)
    return gate.create_responsibility(responsibility.organization_id, responsibility.user_id)


@router.get("/orgresp/{responsibility_id}", response_model=ResponsibilityResponse)
def get_responsibility(responsibility_id: uuid.UUID, gate: GateDep):
    return gate.get_responsibility(responsibility_id)
