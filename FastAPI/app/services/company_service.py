import logging

from sqlalchemy.orm import Session

from app.core.errors import Forbidden, InvalidInput, NotFound
from app.core.security import TokenClaims
from app.database import unit_of_work
from app.models.company import Company
from app.models.recruiter import Recruiter, RECRUITER_MAIN, RECRUITER_MEMBER
from app.models.user import ROLE_SYSADMIN
from app.repos import company_repo, job_offer_repo, recruiter_repo
from app.schemas.company import CompanyCreate, CompanyUpdate
from app.services.activity_log import (
    COMPANY_CREATED,
    COMPANY_DELETED,
    COMPANY_MEMBER_ADDED,
    COMPANY_UPDATED,
    log_activity,
)

logger = logging.getLogger(__name__)


def _ensure_member_of(recruiter: Recruiter, company_id: int) -> None:
    if recruiter is None or recruiter.company_id != company_id:
        raise Forbidden()


def _ensure_main_of(recruiter: Recruiter, company_id: int) -> None:
    _ensure_member_of(recruiter, company_id)
    if recruiter.role != RECRUITER_MAIN:
        raise Forbidden("Only main recruiters can manage the company.")


def create_company(db: Session, recruiter: Recruiter, data: CompanyCreate) -> Company:
    """Create a company; its creator becomes the company's main recruiter."""
    if recruiter.company_id is not None:
        raise InvalidInput("Recruiter already belongs to a company")
    with unit_of_work(db):
        company = company_repo.create(db, **data.model_dump())
        recruiter_repo.assign_company(db, recruiter, company.id, RECRUITER_MAIN)
        log_activity(db, recruiter.user_id, COMPANY_CREATED, f"Company created: {company.name}")
    db.refresh(company)
    logger.info("Company %s created by recruiter %s", company.id, recruiter.id)
    return company


def get_company(db: Session, company_id: int, claims: TokenClaims, recruiter: Recruiter | None = None) -> Company:
    if claims.role != ROLE_SYSADMIN:
        _ensure_member_of(recruiter, company_id)
    company = company_repo.get_by_id(db, company_id)
    if not company:
        raise NotFound("Company not found")
    return company


def update_company(db: Session, company_id: int, data: CompanyUpdate, recruiter: Recruiter) -> Company:
    _ensure_member_of(recruiter, company_id)
    with unit_of_work(db):
        company = company_repo.get_by_id(db, company_id)
        if not company:
            raise NotFound("Company not found")
        company_repo.update(db, company, **data.model_dump(exclude_unset=True))
        log_activity(db, recruiter.user_id, COMPANY_UPDATED, f"Company updated with ID: {company_id}")
    db.refresh(company)
    return company


def delete_company(db: Session, company_id: int, recruiter: Recruiter) -> dict:
    _ensure_main_of(recruiter, company_id)
    with unit_of_work(db):
        company = company_repo.get_by_id(db, company_id)
        if not company:
            raise NotFound("Company not found")
        # Offers must go through job offer deletion so pending applications get rejected.
        if job_offer_repo.count_by_company(db, company_id):
            raise InvalidInput("Delete the company's job offers first")
        recruiter_repo.detach_company(db, company_id)
        company_repo.delete(db, company)
        log_activity(db, recruiter.user_id, COMPANY_DELETED, f"Company with ID {company_id} deleted")
    logger.info("Company %s deleted by recruiter %s", company_id, recruiter.id)
    return {"message": f"Company with ID {company_id} deleted successfully"}


def add_company_member(db: Session, company_id: int, main_recruiter: Recruiter, recruiter_id: int) -> Recruiter:
    _ensure_main_of(main_recruiter, company_id)
    with unit_of_work(db):
        member = recruiter_repo.get_by_id(db, recruiter_id)
        if not member:
            raise NotFound("Recruiter not found")
        if member.company_id is not None:
            raise InvalidInput("Recruiter already belongs to a company")
        recruiter_repo.assign_company(db, member, company_id, RECRUITER_MEMBER)
        log_activity(
            db,
            main_recruiter.user_id,
            COMPANY_MEMBER_ADDED,
            f"Recruiter {recruiter_id} added to company {company_id}",
        )
    db.refresh(member)
    return member


def get_all_companies(db: Session, claims: TokenClaims) -> list[Company]:
    if claims.role != ROLE_SYSADMIN:
        raise Forbidden()
    return company_repo.get_all(db)
