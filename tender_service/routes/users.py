from fastapi import APIRouter
from tender_service.deps import UserServiceDep
from tender_service.schemas import UserCreate, UserCreated, UserResponse
import uuid

router = APIRouter()


@router.post("/user/create", response_model=UserCreated)
def create_user(user: UserCreate, users: UserServiceDep):
    user_id = users.create_user(user.username, user.first_name, user.last_name)
    return UserCreated(id=user_id)


@router.get("/user/{user_id}", response_model=UserResponse)
def get_user(user_id: uuid.UUID, users: UserServiceDep):
    return users.get_by_id(user_id)
