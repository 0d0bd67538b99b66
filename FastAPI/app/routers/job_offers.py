import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_recruiter
from app.models.recruiter import Recruiter
from app.schemas.job_offer import (
    JobOfferCreate,
    JobOfferDeleteResult,
    JobOfferPage,
    JobOfferResponse,
    JobOfferUpdate,
)
from app.services.job_offer_service import (
    create_job_offer,
    delete_job_offer,
    get_job_offer,
    list_company_job_offers,
    list_job_offers,
    resolve_page,
    update_job_offer,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/jobOffers", tags=["job offers"])


@router.get("", response_model=JobOfferPage)
def browse_job_offers(
    title: str | None = None,
    location: str | None = None,
    company: str | None = None,
    experience: str | None = None,
    page: int = 1,
    page_size: int | None = None,
    db: Session = Depends(get_db),
):
    """Public search. At least one of title, location, company or experience is required."""
    page, page_size = resolve_page(page, page_size)
    items, total = list_job_offers(
        db,
        title=title,
        location=location,
        company=company,
        experience=experience,
        page=page,
        page_size=page_size,
    )
    logger.debug("GET /api/jobOffers title=%s location=%s company=%s total=%d", title, location, company, total)
    return JobOfferPage(
        items=[JobOfferResponse.model_validate(o) for o in items],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/company", response_model=list[JobOfferResponse])
def company_job_offers(
    db: Session = Depends(get_db),
    recruiter: Recruiter = Depends(get_current_recruiter),
):
    """Every offer of the caller's company."""
    return list_company_job_offers(db, recruiter)


@router.post("/newJobOffer", response_model=JobOfferResponse)
def new_job_offer(
    data: JobOfferCreate,
    db: Session = Depends(get_db),
    recruiter: Recruiter = Depends(get_current_recruiter),
):
    return create_job_offer(db, recruiter, data)


@router.get("/{job_offer_id}", response_model=JobOfferResponse)
def get_one(
    job_offer_id: int,
    db: Session = Depends(get_db),
    recruiter: Recruiter = Depends(get_current_recruiter),
):
    return get_job_offer(db, job_offer_id, recruiter)


@router.put("/{job_offer_id}", response_model=JobOfferResponse)
def update_one(
    job_offer_id: int,
    data: JobOfferUpdate,
    db: Session = Depends(get_db),
    recruiter: Recruiter = Depends(get_current_recruiter),
):
    return update_job_offer(db, job_offer_id, recruiter, data)


@router.delete("/{job_offer_id}", response_model=JobOfferDeleteResult)
def delete_one(
    job_offer_id: int,
    db: Session = Depends(get_db),
    recruiter: Recruiter = Depends(get_current_recruiter),
):
    """Delete the offer; its pending applications are rejected first."""
    return delete_job_offer(db, job_offer_id, recruiter)
