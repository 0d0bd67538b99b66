import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.errors import DomainError
from app.core.security import TokenClaims
from app.database import get_db
from app.dependencies import get_current_claims
from app.schemas.profile import ProfileUpdate, RecruiterRegister, RecruiterResponse
from app.services.recruiter_service import (
    delete_recruiter,
    get_recruiter_profile,
    register_recruiter,
    update_recruiter_profile,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/recruiter", tags=["recruiters"])


@router.post("/addRecruiter", response_model=RecruiterResponse)
def add_recruiter(data: RecruiterRegister, db: Session = Depends(get_db)):
    """Register a recruiter account. Join or create a company afterwards."""
    try:
        return register_recruiter(db, data)
    except DomainError:
        raise
    except Exception as e:
        logger.exception("Error registering recruiter email=%s: %s", data.email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error") from e


@router.get("/{recruiter_id}/profile", response_model=RecruiterResponse)
def get_profile(
    recruiter_id: int,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    return get_recruiter_profile(db, recruiter_id)


@router.put("/{recruiter_id}/profile", response_model=RecruiterResponse)
def update_profile(
    recruiter_id: int,
    data: ProfileUpdate,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    return update_recruiter_profile(db, recruiter_id, data, claims)


@router.delete("/{recruiter_id}")
def remove_recruiter(
    recruiter_id: int,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    delete_recruiter(db, recruiter_id, claims)
    return {"message": "Recruiter deleted successfully"}
