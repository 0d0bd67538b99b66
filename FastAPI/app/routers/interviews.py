import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.security import TokenClaims
from app.database import get_db
from app.dependencies import get_current_claims, get_current_recruiter, get_current_sysadmin
from app.models.recruiter import Recruiter
from app.models.user import ROLE_RECRUIT, ROLE_SYSADMIN
from app.repos.recruit_repo import get_by_user_id as get_recruit_by_user_id
from app.schemas.interview import (
    InterviewCreate,
    InterviewResponse,
    InterviewUpdate,
    RecruitInterviewResponse,
)
from app.services.interview_service import (
    create_interview,
    delete_interview,
    get_interview,
    list_all_interviews,
    list_interviews_by_job_offer,
    list_interviews_by_recruit,
    update_interview,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/interviews", tags=["interviews"])


@router.post("", response_model=InterviewResponse)
def schedule(
    body: InterviewCreate,
    db: Session = Depends(get_db),
    recruiter: Recruiter = Depends(get_current_recruiter),
):
    """Schedule an interview; the application moves to ``interview``."""
    return create_interview(db, recruiter, body)


@router.get("", response_model=list[InterviewResponse])
def list_all(
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_sysadmin),
):
    return list_all_interviews(db)


@router.get("/recruit/{recruit_id}", response_model=list[RecruitInterviewResponse])
def list_for_recruit(
    recruit_id: int,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """Recruit-facing list; the host start link is never included."""
    if claims.role != ROLE_SYSADMIN:
        recruit = get_recruit_by_user_id(db, claims.user_id) if claims.role == ROLE_RECRUIT else None
        if not recruit or recruit.id != recruit_id:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized access")
    return list_interviews_by_recruit(db, recruit_id)


@router.get("/job-offer/{job_offer_id}", response_model=list[InterviewResponse])
def list_for_job_offer(
    job_offer_id: int,
    db: Session = Depends(get_db),
    recruiter: Recruiter = Depends(get_current_recruiter),
):
    return list_interviews_by_job_offer(db, job_offer_id, recruiter.company_id)


@router.get("/{interview_id}")
def get_one(
    interview_id: int,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    interview, full_view = get_interview(db, interview_id, claims)
    if full_view:
        return InterviewResponse.model_validate(interview)
    return RecruitInterviewResponse.model_validate(interview)


@router.put("/{interview_id}", response_model=InterviewResponse)
def update_one(
    interview_id: int,
    body: InterviewUpdate,
    db: Session = Depends(get_db),
    recruiter: Recruiter = Depends(get_current_recruiter),
):
    return update_interview(db, interview_id, recruiter, body)


@router.delete("/{interview_id}")
def delete_one(
    interview_id: int,
    db: Session = Depends(get_db),
    recruiter: Recruiter = Depends(get_current_recruiter),
):
    delete_interview(db, interview_id, recruiter)
    return {"deleted": True}
