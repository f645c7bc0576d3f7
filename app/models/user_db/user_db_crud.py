import logging
from typing import List, Optional

from sqlalchemy.orm import Session
from app.models.user_db.user_db import User
from app.schemas.users.user_base import UserCreateRequest
from app.schemas.users.user_update import UserUpdateRequest

logger = logging.getLogger(__name__)


def create_user(db: Session, request: UserCreateRequest) -> User:
    db_user = User(name=request.name, age=request.age)
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    logger.info("Created user id=%s name=%r", db_user.id, db_user.name)
    return db_user


def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_name(db: Session, name: str) -> Optional[User]:
    return db.query(User).filter(User.name == name).first()


def get_all_users(db: Session, skip: int = 0, limit: int = 100) -> List[User]:
    return db.query(User).order_by(User.id).offset(skip).limit(limit).all()


def count_users(db: Session) -> int:
    return db.query(User).count()


def update_user_name(db: Session, request: UserUpdateRequest) -> Optional[User]:
    user = get_user_by_id(db, request.id)
    if not user:
        logger.warning("Rename skipped, user id=%s does not exist", request.id)
        return None

    user.name = request.name
    db.commit()
    db.refresh(user)
    logger.info("Renamed user id=%s to %r", user.id, user.name)
    return user


def delete_user(db: Session, name: str) -> Optional[User]:
    user = get_user_by_name(db, name)
    if not user:
        logger.warning("Delete skipped, no user named %r", name)
        return None
    logger.info("Deleting user id=%s name=%r", user.id, user.name)
    db.delete(user)
    db.commit()
    return user
