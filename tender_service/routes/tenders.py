from fastapi import APIRouter, Query
from tender_service.deps import GateDep, TenderServiceDep, UserServiceDep
from tender_service.models import TenderStatus, TenderServiceType
from tender_service.schemas import TenderCreate, TenderResponse, TenderUpdate
from tender_service.services import TenderEdit
from tender_service.utils import get_user_or_raise
from typing import List, Optional
import uuid

router = APIRouter()


# only organization responsible can create
@router.post("/tenders/new", response_model=TenderResponse)
def create_tender(
        tender: TenderCreate,
        users: UserServiceDep,
        gate: GateDep,
        tenders: TenderServiceDep,
):
    user = get_user_or_raise(tender.creator_username, users)
    gate.assert_responsible(tender.organization_id, user.id)

    return tenders.create(
        name=tender.name,
        description=tender.description,
        service_type=tender.service_type,
        organization_id=tender.organization_id,
        creator_username=tender.creator_username,
    )


# every tender, optionally filtered by service type; each type is paginated on its own
@router.get("/tenders", response_model=List[TenderResponse])
def get_tenders(
        tenders: TenderServiceDep,
        service_type: List[TenderServiceType] = Query(None),
        limit: int = Query(0, ge=0),
        offset: int = Query(0, ge=0),
):
    return tenders.list_by_type(service_type, limit, offset)


@router.get("/tenders/my", response_model=List[TenderResponse])
def get_user_tenders(
        username: str,
        users: UserServiceDep,
        tenders: TenderServiceDep,
        limit: int = Query(0, ge=0),
        offset: int = Query(0, ge=0),
):
    get_user_or_raise(username, users)
    return tenders.list_mine(username, limit, offset)


# only organization responsible can view closed/created tenders
@router.get("/tenders/{tender_id}/status", response_model=TenderStatus)
def get_tender_status(
        tender_id: uuid.UUID,
        username: str,
        users: UserServiceDep,
        tenders: TenderServiceDep,
):
    user = get_user_or_raise(username, users)
    return tenders.get_status(tender_id, user.id)


# only organization responsible can change status
@router.put("/tenders/{tender_id}/status", response_model=TenderResponse)
def update_tender_status(
        tender_id: uuid.UUID,
        status: TenderStatus,
        username: str,
        users: UserServiceDep,
        tenders: TenderServiceDep,
        version: Optional[int] = Query(None, ge=1),
):
    user = get_user_or_raise(username, users)
    return tenders.set_status(tender_id, status, user.id, expected_version=version)


# only organization responsible can edit
@router.patch("/tenders/{tender_id}/edit", response_model=TenderResponse)
def edit_tender(
        tender_id: uuid.UUID,
        tender_update: TenderUpdate,
        username: str,
        users: UserServiceDep,
        gate: GateDep,
        tenders: TenderServiceDep,
        version: Optional[int] = Query(None, ge=1),
):
    user = get_user_or_raise(username, users)
    tender = tenders.get_by_id(tender_id)
    gate.assert_responsible(tender.organization_id, user.id)

    edit = TenderEdit(
        name=tender_update.name,
        description=tender_update.description,
        service_type=tender_update.service_type,
    )
    return tenders.edit(tender_id, edit, expected_version=version)
