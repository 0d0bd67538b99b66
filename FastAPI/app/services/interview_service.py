"""Interview scheduling with mocked video-conferencing links."""

import logging

from sqlalchemy.orm import Session

from app.config import settings
from app.core.errors import Forbidden, NotFound
from app.core.security import TokenClaims, generate_meeting_token
from app.database import unit_of_work
from app.models.application import STATUS_INTERVIEW
from app.models.interview import Interview
from app.models.recruiter import Recruiter
from app.models.user import ROLE_RECRUIT, ROLE_RECRUITER, ROLE_SYSADMIN
from app.repos import application_repo, interview_repo, recruit_repo, recruiter_repo
from app.schemas.interview import InterviewCreate, InterviewUpdate
from app.services.activity_log import (
    INTERVIEW_DELETED,
    INTERVIEW_SCHEDULED,
    INTERVIEW_UPDATED,
    log_activity,
)

logger = logging.getLogger(__name__)


def build_meeting_links() -> tuple[str, str]:
    """Return (join_url, start_url) for a new mock meeting. Each uses its own token."""
    base = settings.meeting_base_url.rstrip("/")
    return f"{base}/j/{generate_meeting_token()}", f"{base}/s/{generate_meeting_token()}"


def _company_id(recruiter: Recruiter) -> int:
    if recruiter is None or recruiter.company_id is None:
        raise NotFound("Application not found")
    return recruiter.company_id


def create_interview(db: Session, recruiter: Recruiter, data: InterviewCreate) -> Interview:
    """Persist the interview and move its application to ``interview`` in one transaction."""
    company_id = _company_id(recruiter)
    join_url = start_url = None
    if data.online:
        join_url, start_url = build_meeting_links()
    with unit_of_work(db):
        application = application_repo.get_for_company(db, data.application_id, company_id)
        if not application:
            raise NotFound("Application not found")
        interview = interview_repo.create(
            db,
            application_id=application.id,
            recruit_id=application.recruit_id,
            job_offer_id=application.job_offer_id,
            scheduled_at=data.scheduled_at,
            online=data.online,
            join_meeting_url=join_url,
            start_meeting_url=start_url,
            notes=data.notes,
        )
        application_repo.update_status(db, application, STATUS_INTERVIEW)
        log_activity(
            db,
            recruiter.user_id,
            INTERVIEW_SCHEDULED,
            f"Interview ID {interview.id} scheduled for application ID {application.id}",
        )
    db.refresh(interview)
    logger.info("Interview %s scheduled for application %s (online=%s)", interview.id, application.id, data.online)
    return interview


def list_all_interviews(db: Session) -> list[Interview]:
    return interview_repo.list_all(db)


def list_interviews_by_recruit(db: Session, recruit_id: int) -> list[Interview]:
    # Render with RecruitInterviewResponse; these rows still carry the host link.
    return interview_repo.list_by_recruit(db, recruit_id)


def list_interviews_by_job_offer(db: Session, job_offer_id: int, company_id: int | None) -> list[Interview]:
    if company_id is None:
        return []
    return interview_repo.list_by_job_offer_for_company(db, job_offer_id, company_id)


def get_interview(db: Session, interview_id: int, claims: TokenClaims) -> tuple[Interview, bool]:
    """Return the interview and whether the caller may see the host link."""
    interview = interview_repo.get_by_id(db, interview_id)
    if not interview:
        raise NotFound("Interview not found")
    if claims.role == ROLE_SYSADMIN:
        return interview, True
    if claims.role == ROLE_RECRUITER:
        recruiter = recruiter_repo.get_by_user_id(db, claims.user_id)
        if recruiter and recruiter.company_id is not None:
            if interview_repo.get_for_company(db, interview_id, recruiter.company_id):
                return interview, True
    elif claims.role == ROLE_RECRUIT:
        recruit = recruit_repo.get_by_user_id(db, claims.user_id)
        if recruit and recruit.id == interview.recruit_id:
            return interview, False
    raise Forbidden()


def update_interview(db: Session, interview_id: int, recruiter: Recruiter, data: InterviewUpdate) -> Interview:
    company_id = _company_id(recruiter)
    with unit_of_work(db):
        interview = interview_repo.get_for_company(db, interview_id, company_id)
        if not interview:
            raise NotFound("Interview not found")
        fields = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
        if data.online is True and not interview.online:
            fields["join_meeting_url"], fields["start_meeting_url"] = build_meeting_links()
        elif data.online is False:
            fields["join_meeting_url"] = None
            fields["start_meeting_url"] = None
        interview_repo.update(db, interview, **fields)
        log_activity(db, recruiter.user_id, INTERVIEW_UPDATED, f"Interview ID {interview_id} updated")
    db.refresh(interview)
    return interview


def delete_interview(db: Session, interview_id: int, recruiter: Recruiter) -> None:
    company_id = _company_id(recruiter)
    with unit_of_work(db):
        interview = interview_repo.get_for_company(db, interview_id, company_id)
        if not interview:
            raise NotFound("Interview not found")
        interview_repo.delete(db, interview)
        log_activity(db, recruiter.user_id, INTERVIEW_DELETED, f"Interview ID {interview_id} deleted")
    logger.info("Interview %s deleted by recruiter %s", interview_id, recruiter.id)
