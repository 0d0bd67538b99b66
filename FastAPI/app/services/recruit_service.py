import logging

from sqlalchemy.orm import Session

from app.core.errors import Forbidden, NotFound
from app.core.security import TokenClaims
from app.database import unit_of_work
from app.models.recruit import Recruit
from app.models.user import ROLE_RECRUIT, ROLE_SYSADMIN
from app.repos import recruit_repo
from app.schemas.profile import ProfileUpdate, RecruitRegister
from app.services.activity_log import (
    RECRUIT_DELETED,
    RECRUIT_PROFILE_UPDATED,
    RECRUIT_REGISTERED,
    log_activity,
)
from app.services.identity_service import create_user_account

logger = logging.getLogger(__name__)


def register_recruit(db: Session, data: RecruitRegister) -> Recruit:
    with unit_of_work(db):
        user = create_user_account(db, data.email, data.password, ROLE_RECRUIT)
        recruit = recruit_repo.create(
            db,
            user.id,
            email=data.email,
            firstname=data.firstname,
            lastname=data.lastname,
            phone_number=data.phone_number,
        )
        log_activity(db, user.id, RECRUIT_REGISTERED, f"Recruit registered with ID: {recruit.id}")
    db.refresh(recruit)
    logger.info("Recruit registered: %s", data.email)
    return recruit


def get_recruit_profile(db: Session, recruit_id: int) -> Recruit:
    recruit = recruit_repo.get_by_id(db, recruit_id)
    if not recruit:
        raise NotFound("Recruit not found")
    return recruit


def update_recruit_profile(db: Session, recruit_id: int, data: ProfileUpdate, actor: TokenClaims) -> Recruit:
    with unit_of_work(db):
        recruit = get_recruit_profile(db, recruit_id)
        if actor.role != ROLE_SYSADMIN and recruit.user_id != actor.user_id:
            raise Forbidden()
        recruit_repo.update(
            db,
            recruit,
            firstname=data.firstname,
            lastname=data.lastname,
            phone_number=data.phone_number,
        )
        log_activity(db, recruit.user_id, RECRUIT_PROFILE_UPDATED, f"Recruit profile updated for ID: {recruit_id}")
    db.refresh(recruit)
    return recruit


def delete_recruit(db: Session, recruit_id: int, actor: TokenClaims) -> None:
    with unit_of_work(db):
        recruit = get_recruit_profile(db, recruit_id)
        if actor.role != ROLE_SYSADMIN and recruit.user_id != actor.user_id:
            raise Forbidden()
        user_id = recruit.user_id
        recruit_repo.delete(db, recruit)
        log_activity(db, user_id, RECRUIT_DELETED, f"Recruit with ID {recruit_id} deleted")
    logger.info("Recruit deleted: %s", recruit_id)
