import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.errors import DomainError
from app.core.security import TokenClaims
from app.database import get_db
from app.dependencies import get_current_claims
from app.schemas.profile import ProfileUpdate, RecruitRegister, RecruitResponse
from app.services.recruit_service import (
    delete_recruit,
    get_recruit_profile,
    register_recruit,
    update_recruit_profile,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/recruits", tags=["recruits"])


@router.post("/addRecruit", response_model=RecruitResponse)
def add_recruit(data: RecruitRegister, db: Session = Depends(get_db)):
    try:
        return register_recruit(db, data)
    except DomainError:
        raise
    except Exception as e:
        logger.exception("Error registering recruit email=%s: %s", data.email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error") from e


@router.get("/{recruit_id}/profile", response_model=RecruitResponse)
def get_profile(
    recruit_id: int,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    return get_recruit_profile(db, recruit_id)


@router.put("/{recruit_id}/profile", response_model=RecruitResponse)
def update_profile(
    recruit_id: int,
    data: ProfileUpdate,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    return update_recruit_profile(db, recruit_id, data, claims)


@router.delete("/{recruit_id}")
def remove_recruit(
    recruit_id: int,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    delete_recruit(db, recruit_id, claims)
    return {"message": "Recruit deleted successfully"}
