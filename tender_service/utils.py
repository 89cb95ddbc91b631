from fastapi import HTTPException
from tender_service.models import Employee
from tender_service.services import UserService
from tender_service.services.exceptions import NotFoundError
import uuid


# an unknown requester is an authentication problem, not a missing resource
def get_user_or_raise(username: str, users: UserService) -> Employee:
    try:
        return users.get_by_username(username)
    except NotFoundError:
        raise HTTPException(status_code=401, detail="User not found")


def get_user_by_id_or_raise(user_id: uuid.UUID, users: UserService) -> Employee:
    try:
        return users.get_by_id(user_id)
    except NotFoundError:
        raise HTTPException(status_code=401, detail="User not found")
