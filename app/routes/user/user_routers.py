from fastapi import APIRouter, Depends, HTTPException, Body, Query
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.models.user_db.user_db_crud import create_user, get_all_users, count_users, \
    update_user_name, delete_user
from app.schemas.common.page_response import PageResponse
from app.schemas.users.user_base import UserCreateRequest
from app.schemas.users.user_out import UserResponse
from app.schemas.users.user_update import UserUpdateRequest


user_router = APIRouter(prefix="/user", tags=["Users"])


@user_router.post("", response_model=UserResponse)
def save_user(request: UserCreateRequest, db: Session = Depends(get_db)):
    return create_user(db, request)


@user_router.get("", response_model=PageResponse[UserResponse])
def list_users(
    page: int = Query(1, ge=1),
    size: int = Query(10, ge=1),
    db: Session = Depends(get_db)
):
    skip = (page - 1) * size
    total = count_users(db)
    users = get_all_users(db, skip=skip, limit=size)

    has_next = (page * size) < total
    has_prev = page > 1

    return PageResponse[UserResponse](
        page=page,
        size=size,
        total=total,
        has_next=has_next,
        has_prev=has_prev,
        items=[UserResponse.model_validate(user) for user in users]
    )


@user_router.put("", response_model=UserResponse)
def update_user(request: UserUpdateRequest = Body(...), db: Session = Depends(get_db)):
    user = update_user_name(db, request)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@user_router.delete("", response_model=UserResponse)
def delete_user_route(name: str = Query(...), db: Session = Depends(get_db)):
    user = delete_user(db, name)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
