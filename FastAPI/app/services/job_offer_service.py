"""Job offer lifecycle: company-scoped writes gated on the ``main`` recruiter."""

import logging

from sqlalchemy.orm import Session

from app.config import settings
from app.core.errors import Forbidden, InvalidInput, MissingFilter, NotFound
from app.database import unit_of_work
from app.models.job_offer import JobOffer
from app.models.recruiter import Recruiter, RECRUITER_MAIN
from app.repos import application_repo, job_offer_repo
from app.schemas.job_offer import JobOfferCreate, JobOfferUpdate
from app.services.activity_log import (
    APPLICATION_REJECTED,
    JOB_OFFER_CREATED,
    JOB_OFFER_DELETED,
    JOB_OFFER_UPDATED,
    log_activity,
)

logger = logging.getLogger(__name__)

EXPERIENCE_LEVELS = ["< 1 year", "1-2 years", "3-4 years", "5+ years"]


def resolve_experience(experience_id: int) -> str:
    """Map an experience index to its label."""
    if experience_id is None or not 0 <= experience_id < len(EXPERIENCE_LEVELS):
        raise InvalidInput(f"experience_id must be between 0 and {len(EXPERIENCE_LEVELS) - 1}")
    return EXPERIENCE_LEVELS[experience_id]


def _require_main(recruiter: Recruiter, action: str) -> int:
    if recruiter is None or recruiter.role != RECRUITER_MAIN or recruiter.company_id is None:
        raise Forbidden(f"Only main recruiters can {action} job offers.")
    return recruiter.company_id


def create_job_offer(db: Session, recruiter: Recruiter, data: JobOfferCreate) -> JobOffer:
    company_id = _require_main(recruiter, "create")
    experience = resolve_experience(data.experience_id)
    with unit_of_work(db):
        offer = job_offer_repo.create(
            db,
            company_id,
            title=data.title,
            description=data.description,
            location=data.location,
            salary=data.salary,
            experience=experience,
        )
        log_activity(db, recruiter.user_id, JOB_OFFER_CREATED, f"Job offer created: {offer.title}")
    db.refresh(offer)
    logger.info("Job offer %s created for company %s", offer.id, company_id)
    return offer


def get_job_offer(db: Session, job_offer_id: int, recruiter: Recruiter) -> JobOffer:
    offer = None
    if recruiter is not None and recruiter.company_id is not None:
        offer = job_offer_repo.get_for_company(db, job_offer_id, recruiter.company_id)
    if not offer:
        raise NotFound("Job offer not found")
    return offer


def update_job_offer(db: Session, job_offer_id: int, recruiter: Recruiter, data: JobOfferUpdate) -> JobOffer:
    company_id = _require_main(recruiter, "update")
    values = data.model_dump(exclude_unset=True, exclude={"experience_id"})
    values = {k: v for k, v in values.items() if v is not None}
    if data.experience_id is not None:
        values["experience"] = resolve_experience(data.experience_id)
    with unit_of_work(db):
        updated = job_offer_repo.update_for_company(db, job_offer_id, company_id, values)
        if not updated:
            raise NotFound("Job offer not found")
        log_activity(db, recruiter.user_id, JOB_OFFER_UPDATED, f"Job offer updated: {values.get('title', '')}")
    logger.info("Job offer %s updated by recruiter %s", job_offer_id, recruiter.id)
    return get_job_offer(db, job_offer_id, recruiter)


def delete_job_offer(db: Session, job_offer_id: int, recruiter: Recruiter) -> dict:
    """Reject the offer's pending applications and delete it, all or nothing."""
    company_id = _require_main(recruiter, "delete")
    with unit_of_work(db):
        if not job_offer_repo.get_for_company(db, job_offer_id, company_id):
            raise NotFound("Job offer not found")
        pending = application_repo.list_pending_for_job_offer(db, job_offer_id)
        rejected = application_repo.reject_pending_for_job_offer(db, job_offer_id)
        deleted = job_offer_repo.delete_for_company(db, job_offer_id, company_id)
        for application in pending:
            log_activity(
                db,
                application.recruit.user_id,
                APPLICATION_REJECTED,
                f"Application ID {application.id} for job offer ID {job_offer_id} rejected due to job offer deletion",
            )
        log_activity(db, recruiter.user_id, JOB_OFFER_DELETED, f"Job offer deleted with ID: {job_offer_id}")
    logger.info("Job offer %s deleted; %d pending applications rejected", job_offer_id, rejected)
    return {"deleted": deleted, "rejected_applications": rejected}


def resolve_page(page: int, page_size: int | None) -> tuple[int, int]:
    """Page number and page size actually applied: page >= 1, size within the configured bounds."""
    page_size = page_size or settings.job_offer_page_size
    return max(1, page), min(max(1, page_size), settings.job_offer_max_page_size)


def list_job_offers(
    db: Session,
    *,
    title: str | None = None,
    location: str | None = None,
    company: str | None = None,
    experience: str | None = None,
    page: int = 1,
    page_size: int | None = None,
) -> tuple[list[JobOffer], int]:
    """Public browsing. At least one filter is required so the table is never dumped."""
    if not any(f and f.strip() for f in (title, location, company, experience)):
        raise MissingFilter()
    page, page_size = resolve_page(page, page_size)
    return job_offer_repo.search(
        db,
        title=title,
        location=location,
        company=company,
        experience=experience,
        limit=page_size,
        offset=(page - 1) * page_size,
    )


def list_company_job_offers(db: Session, recruiter: Recruiter) -> list[JobOffer]:
    if recruiter is None or recruiter.company_id is None:
        return []
    return job_offer_repo.list_by_company(db, recruiter.company_id)
