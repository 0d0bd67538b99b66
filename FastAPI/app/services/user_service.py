import logging

from sqlalchemy.orm import Session

from app.core.errors import Forbidden, InvalidInput, NotFound
from app.core.security import TokenClaims, hash_password
from app.database import unit_of_work
from app.models.recruiter import RECRUITER_MAIN
from app.models.user import User, ROLE_SYSADMIN, USER_ROLES
from app.repos import user_repo
from app.services.activity_log import (
    USER_DELETED,
    USER_PROFILE_UPDATED,
    USER_ROLE_CHANGED,
    log_activity,
)

logger = logging.getLogger(__name__)


def ensure_self_or_sysadmin(actor: TokenClaims, user_id: int) -> None:
    if actor.role != ROLE_SYSADMIN and actor.user_id != user_id:
        raise Forbidden()


def get_user_profile(db: Session, user_id: int) -> User:
    user = user_repo.get_by_id(db, user_id)
    if not user:
        raise NotFound("User not found")
    return user


def update_user_profile(
    db: Session,
    user_id: int,
    *,
    email: str | None = None,
    password: str | None = None,
) -> User:
    with unit_of_work(db):
        user = get_user_profile(db, user_id)
        if email is not None and email != user.email:
            other = user_repo.get_by_email(db, email)
            if other and other.id != user_id:
                raise InvalidInput("Email already in use")
        password_hash = hash_password(password) if password else None
        user_repo.update(db, user_id, email=email, password_hash=password_hash)
        log_activity(db, user_id, USER_PROFILE_UPDATED, f"User profile updated for email: {user.email}")
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: int) -> None:
    with unit_of_work(db):
        user = get_user_profile(db, user_id)
        if user.recruiter is not None and user.recruiter.company_id is not None and user.recruiter.role == RECRUITER_MAIN:
            raise InvalidInput("Main recruiters must delete their company before deleting their account")
        user_repo.delete_user(db, user_id)
        log_activity(db, user_id, USER_DELETED, f"User with ID {user_id} deleted")
    logger.info("User deleted: %s", user_id)


def get_all_users(db: Session) -> list[User]:
    return user_repo.get_all_users(db)


def change_user_role(db: Session, user_id: int, new_role: str) -> User:
    role = (new_role or "").upper()
    if role not in USER_ROLES:
        raise InvalidInput(f"Unknown role: {new_role}")
    with unit_of_work(db):
        user = user_repo.update(db, user_id, role=role)
        if not user:
            raise NotFound("User not found")
        log_activity(db, user_id, USER_ROLE_CHANGED, f"User role changed to {role} for email: {user.email}")
    db.refresh(user)
    logger.info("User %s role changed to %s", user_id, role)
    return user
