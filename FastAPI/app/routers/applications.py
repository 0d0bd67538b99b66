import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.security import TokenClaims
from app.database import get_db
from app.dependencies import (
    get_current_claims,
    get_current_recruit,
    get_current_recruiter,
    get_current_sysadmin,
)
from app.models.recruit import Recruit
from app.models.recruiter import Recruiter
from app.models.user import ROLE_SYSADMIN
from app.repos.recruit_repo import get_by_user_id as get_recruit_by_user_id
from app.schemas.application import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationStatusUpdate,
    ApplicationWithOfferResponse,
)
from app.services.application_service import (
    create_application,
    delete_application,
    get_application,
    list_all_applications,
    list_applications_by_job_offer,
    list_applications_by_recruit,
    update_application_status,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/applications", tags=["applications"])


@router.post("", response_model=ApplicationResponse)
def apply(
    body: ApplicationCreate,
    db: Session = Depends(get_db),
    recruit: Recruit = Depends(get_current_recruit),
):
    return create_application(db, recruit, body.job_offer_id)


@router.get("", response_model=list[ApplicationResponse])
def list_all(
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_sysadmin),
):
    return list_all_applications(db)


@router.get("/recruit/{user_id}", response_model=list[ApplicationWithOfferResponse])
def list_for_recruit(
    user_id: int,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """Applications of the recruit owning ``user_id``. Own applications only, unless sysadmin."""
    if claims.user_id != user_id and claims.role != ROLE_SYSADMIN:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized access")
    recruit = get_recruit_by_user_id(db, user_id)
    if not recruit:
        return []
    return list_applications_by_recruit(db, recruit.id)


@router.get("/jobOffer/{job_offer_id}", response_model=list[ApplicationResponse])
def list_for_job_offer(
    job_offer_id: int,
    db: Session = Depends(get_db),
    recruiter: Recruiter = Depends(get_current_recruiter),
):
    return list_applications_by_job_offer(db, job_offer_id, recruiter.company_id)


@router.get("/{application_id}", response_model=ApplicationResponse)
def get_one(
    application_id: int,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    return get_application(db, application_id, claims)


@router.put("/{application_id}", response_model=ApplicationResponse)
def update_status(
    application_id: int,
    body: ApplicationStatusUpdate,
    db: Session = Depends(get_db),
    recruiter: Recruiter = Depends(get_current_recruiter),
):
    application = update_application_status(db, application_id, body.status, recruiter)
    logger.info("Application %s status set to %s by recruiter %s", application_id, body.status, recruiter.id)
    return application


@router.delete("/{application_id}")
def delete_one(
    application_id: int,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    delete_application(db, application_id, claims)
    return {"deleted": True}
