import logging

from sqlalchemy.orm import Session

from app.core.errors import Forbidden, InvalidInput, NotFound
from app.core.security import TokenClaims
from app.database import unit_of_work
from app.models.recruiter import Recruiter, RECRUITER_MAIN
from app.models.user import ROLE_RECRUITER, ROLE_SYSADMIN
from app.repos import recruiter_repo
from app.schemas.profile import ProfileUpdate, RecruiterRegister
from app.services.activity_log import (
    RECRUITER_DELETED,
    RECRUITER_PROFILE_UPDATED,
    RECRUITER_REGISTERED,
    log_activity,
)
from app.services.identity_service import create_user_account

logger = logging.getLogger(__name__)


def register_recruiter(db: Session, data: RecruiterRegister) -> Recruiter:
    """Create the RECRUITER user and its profile together. New recruiters have no company yet."""
    with unit_of_work(db):
        user = create_user_account(db, data.email, data.password, ROLE_RECRUITER)
        recruiter = recruiter_repo.create(
            db,
            user.id,
            email=data.email,
            firstname=data.firstname,
            lastname=data.lastname,
            phone_number=data.phone_number,
        )
        log_activity(db, user.id, RECRUITER_REGISTERED, f"Recruiter registered with ID: {recruiter.id}")
    db.refresh(recruiter)
    logger.info("Recruiter registered: %s", data.email)
    return recruiter


def get_recruiter_profile(db: Session, recruiter_id: int) -> Recruiter:
    recruiter = recruiter_repo.get_by_id(db, recruiter_id)
    if not recruiter:
        raise NotFound("Recruiter not found")
    return recruiter


def _ensure_owner(actor: TokenClaims, recruiter: Recruiter) -> None:
    if actor.role != ROLE_SYSADMIN and recruiter.user_id != actor.user_id:
        raise Forbidden()


def update_recruiter_profile(db: Session, recruiter_id: int, data: ProfileUpdate, actor: TokenClaims) -> Recruiter:
    with unit_of_work(db):
        recruiter = get_recruiter_profile(db, recruiter_id)
        _ensure_owner(actor, recruiter)
        recruiter_repo.update(
            db,
            recruiter,
            firstname=data.firstname,
            lastname=data.lastname,
            phone_number=data.phone_number,
        )
        log_activity(db, recruiter.user_id, RECRUITER_PROFILE_UPDATED, f"Recruiter profile updated for ID: {recruiter_id}")
    db.refresh(recruiter)
    return recruiter


def delete_recruiter(db: Session, recruiter_id: int, actor: TokenClaims) -> None:
    with unit_of_work(db):
        recruiter = get_recruiter_profile(db, recruiter_id)
        _ensure_owner(actor, recruiter)
        # A company always keeps its main recruiter.
        if recruiter.company_id is not None and recruiter.role == RECRUITER_MAIN:
            raise InvalidInput("Main recruiters must delete their company before deleting their profile")
        user_id = recruiter.user_id
        recruiter_repo.delete(db, recruiter)
        log_activity(db, user_id, RECRUITER_DELETED, f"Recruiter with ID {recruiter_id} deleted")
    logger.info("Recruiter deleted: %s", recruiter_id)
