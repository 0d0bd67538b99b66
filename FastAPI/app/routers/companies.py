import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.security import TokenClaims
from app.database import get_db
from app.dependencies import get_current_claims, get_current_recruiter, get_optional_recruiter
from app.models.recruiter import Recruiter
from app.schemas.company import CompanyCreate, CompanyMemberAdd, CompanyResponse, CompanyUpdate
from app.schemas.profile import RecruiterResponse
from app.services.company_service import (
    add_company_member,
    create_company,
    delete_company,
    get_all_companies,
    get_company,
    update_company,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/companies", tags=["companies"])


@router.post("/addCompany", response_model=CompanyResponse)
def add_company(
    data: CompanyCreate,
    db: Session = Depends(get_db),
    recruiter: Recruiter = Depends(get_current_recruiter),
):
    """Create a company; the calling recruiter becomes its main recruiter."""
    return create_company(db, recruiter, data)


@router.get("", response_model=list[CompanyResponse])
def list_companies(
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """All companies. Sysadmin only."""
    return get_all_companies(db, claims)


@router.get("/{company_id}", response_model=CompanyResponse)
def get_one(
    company_id: int,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
    recruiter: Recruiter | None = Depends(get_optional_recruiter),
):
    return get_company(db, company_id, claims, recruiter)


@router.put("/updateCompany/{company_id}", response_model=CompanyResponse)
def update_one(
    company_id: int,
    data: CompanyUpdate,
    db: Session = Depends(get_db),
    recruiter: Recruiter = Depends(get_current_recruiter),
):
    return update_company(db, company_id, data, recruiter)


@router.delete("/{company_id}")
def delete_one(
    company_id: int,
    db: Session = Depends(get_db),
    recruiter: Recruiter = Depends(get_current_recruiter),
):
    return delete_company(db, company_id, recruiter)


@router.post("/{company_id}/members", response_model=RecruiterResponse)
def add_member(
    company_id: int,
    body: CompanyMemberAdd,
    db: Session = Depends(get_db),
    recruiter: Recruiter = Depends(get_current_recruiter),
):
    """Attach an unaffiliated recruiter to the company as a member. Main recruiter only."""
    return add_company_member(db, company_id, recruiter, body.recruiter_id)
