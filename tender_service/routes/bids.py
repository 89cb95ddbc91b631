from fastapi import APIRouter, Query
from tender_service.deps import BidServiceDep, TenderServiceDep, UserServiceDep
from tender_service.models import BidStatus
from tender_service.schemas import BidCreate, BidResponse, BidUpdate
from tender_service.services import BidEdit
from tender_service.utils import get_user_by_id_or_raise, get_user_or_raise
from typing import List, Optional
import uuid

router = APIRouter()


# authorId is a user's id; the tender is resolved before anything is written
@router.post("/bids/new", response_model=BidResponse)
def create_bid(
        bid: BidCreate,
        users: UserServiceDep,
        tenders: TenderServiceDep,
        bids: BidServiceDep,
):
    get_user_by_id_or_raise(bid.author_id, users)
    tenders.get_by_id(bid.tender_id)

    return bids.create(
        name=bid.name,
        description=bid.description,
        tender_id=bid.tender_id,
        author_type=bid.author_type,
        author_id=bid.author_id,
    )


# bid has unique author
@router.get("/bids/my", response_model=List[BidResponse])
def get_user_bids(
        username: str,
        users: UserServiceDep,
        bids: BidServiceDep,
        limit: int = Query(0, ge=0),
        offset: int = Query(0, ge=0),
):
    user = get_user_or_raise(username, users)
    return bids.list_mine(user.id, limit, offset)


# the requester's own bids for this tender
@router.get("/bids/{tender_id}/list", response_model=List[BidResponse])
def get_bids_for_tender(
        tender_id: uuid.UUID,
        username: str,
        users: UserServiceDep,
        tenders: TenderServiceDep,
        bids: BidServiceDep,
        limit: int = Query(0, ge=0),
        offset: int = Query(0, ge=0),
):
    user = get_user_or_raise(username, users)
    tenders.get_by_id(tender_id)
    return bids.get_by_tender_id(tender_id, user.id, limit, offset)


# only responsible for tender's organization can view
@router.get("/bids/{bid_id}/status", response_model=BidStatus)
def get_bid_status(
        bid_id: uuid.UUID,
        username: str,
        users: UserServiceDep,
        bids: BidServiceDep,
):
    user = get_user_or_raise(username, users)
    return bids.get_status(bid_id, user.id)


# only responsible for tender's organization can change status
@router.put("/bids/{bid_id}/status", response_model=BidResponse)
def update_bid_status(
        bid_id: uuid.UUID,
        status: BidStatus,
        username: str,
        users: UserServiceDep,
        bids: BidServiceDep,
        version: Optional[int] = Query(None, ge=1),
):
    user = get_user_or_raise(username, users)
    return bids.set_status(bid_id, status, user.id, expected_version=version)


# only responsible for tender's organization can edit
@router.patch("/bids/{bid_id}/edit", response_model=BidResponse)
def edit_bid(
        bid_id: uuid.UUID,
        bid_update: BidUpdate,
        username: str,
        users: UserServiceDep,
        bids: BidServiceDep,
        version: Optional[int] = Query(None, ge=1),
):
    user = get_user_or_raise(username, users)
    bid = bids.get_by_id(bid_id)
    bids.authorize(bid, user.id)

    edit = BidEdit(name=bid_update.name, description=bid_update.description)
    return bids.edit(bid_id, edit, expected_version=version)
