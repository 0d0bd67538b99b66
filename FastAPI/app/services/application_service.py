import logging

from sqlalchemy.orm import Session

from app.core.errors import Forbidden, NotFound
from app.core.security import TokenClaims
from app.database import unit_of_work
from app.models.application import Application, KNOWN_APPLICATION_STATUSES
from app.models.recruit import Recruit
from app.models.recruiter import Recruiter
from app.models.user import ROLE_RECRUIT, ROLE_RECRUITER, ROLE_SYSADMIN
from app.repos import application_repo, job_offer_repo, recruit_repo, recruiter_repo
from app.services.activity_log import (
    APPLICATION_CREATED,
    APPLICATION_DELETED,
    APPLICATION_STATUS_UPDATED,
    log_activity,
)

logger = logging.getLogger(__name__)


def create_application(db: Session, recruit: Recruit, job_offer_id: int) -> Application:
    with unit_of_work(db):
        if not job_offer_repo.get_by_id(db, job_offer_id):
            raise NotFound("Job offer not found")
        application = application_repo.create(db, recruit.id, job_offer_id)
        log_activity(
            db,
            recruit.user_id,
            APPLICATION_CREATED,
            f"Application ID {application.id} created for job offer ID {job_offer_id}",
        )
    db.refresh(application)
    logger.info("Recruit %s applied to job offer %s", recruit.id, job_offer_id)
    return application


def list_all_applications(db: Session) -> list[Application]:
    return application_repo.list_all(db)


def list_applications_by_recruit(db: Session, recruit_id: int) -> list[Application]:
    return application_repo.list_by_recruit(db, recruit_id)


def list_applications_by_job_offer(db: Session, job_offer_id: int, company_id: int | None) -> list[Application]:
    """Applications for an offer owned by ``company_id``; empty for any other company."""
    if company_id is None:
        return []
    return application_repo.list_by_job_offer_for_company(db, job_offer_id, company_id)


def get_application(db: Session, application_id: int, claims: TokenClaims) -> Application:
    application = application_repo.get_by_id(db, application_id)
    if not application:
        raise NotFound("Application not found")
    if claims.role == ROLE_SYSADMIN:
        return application
    if claims.role == ROLE_RECRUIT:
        recruit = recruit_repo.get_by_user_id(db, claims.user_id)
        if recruit and recruit.id == application.recruit_id:
            return application
    elif claims.role == ROLE_RECRUITER:
        recruiter = recruiter_repo.get_by_user_id(db, claims.user_id)
        if recruiter and recruiter.company_id is not None:
            if application_repo.get_for_company(db, application_id, recruiter.company_id):
                return application
    raise Forbidden()


def update_application_status(db: Session, application_id: int, status: str, recruiter: Recruiter) -> Application:
    """Overwrite the status. No transition rules are enforced."""
    if status not in KNOWN_APPLICATION_STATUSES:
        logger.warning("Application %s set to unrecognised status %r", application_id, status)
    with unit_of_work(db):
        application = None
        if recruiter.company_id is not None:
            application = application_repo.get_for_company(db, application_id, recruiter.company_id)
        if not application:
            raise NotFound("Application not found")
        application_repo.update_status(db, application, status)
        log_activity(
            db,
            recruiter.user_id,
            APPLICATION_STATUS_UPDATED,
            f"Application ID {application_id} status set to {status}",
        )
    db.refresh(application)
    return application


def delete_application(db: Session, application_id: int, claims: TokenClaims) -> None:
    with unit_of_work(db):
        application = application_repo.get_by_id(db, application_id)
        if not application:
            raise NotFound("Application not found")
        if claims.role != ROLE_SYSADMIN:
            recruit = recruit_repo.get_by_user_id(db, claims.user_id) if claims.role == ROLE_RECRUIT else None
            if not recruit or recruit.id != application.recruit_id:
                raise Forbidden()
        application_repo.delete(db, application)
        log_activity(db, claims.user_id, APPLICATION_DELETED, f"Application ID {application_id} deleted")
    logger.info("Application %s deleted by user %s", application_id, claims.user_id)
