from sqlalchemy.orm import Session

from app.models.company import Company
from app.models.job_offer import JobOffer


def create(db: Session, company_id: int, **fields) -> JobOffer:
    offer = JobOffer(company_id=company_id, **fields)
    db.add(offer)
    db.flush()
    return offer


def get_by_id(db: Session, job_offer_id: int) -> JobOffer | None:
    return db.query(JobOffer).filter(JobOffer.id == job_offer_id).first()


def get_for_company(db: Session, job_offer_id: int, company_id: int) -> JobOffer | None:
    return (
        db.query(JobOffer)
        .filter(JobOffer.id == job_offer_id, JobOffer.company_id == company_id)
        .first()
    )


def list_by_company(db: Session, company_id: int) -> list[JobOffer]:
    return (
        db.query(JobOffer)
        .filter(JobOffer.company_id == company_id)
        .order_by(JobOffer.created_at.desc(), JobOffer.id.desc())
        .all()
    )


def count_by_company(db: Session, company_id: int) -> int:
    return db.query(JobOffer).filter(JobOffer.company_id == company_id).count()


def update_for_company(db: Session, job_offer_id: int, company_id: int, values: dict) -> int:
    """Update an offer only if it belongs to the company. Returns rows affected."""
    if not values:
        return 1 if get_for_company(db, job_offer_id, company_id) else 0
    return (
        db.query(JobOffer)
        .filter(JobOffer.id == job_offer_id, JobOffer.company_id == company_id)
        .update(values, synchronize_session=False)
    )


def delete_for_company(db: Session, job_offer_id: int, company_id: int) -> int:
    return (
        db.query(JobOffer)
        .filter(JobOffer.id == job_offer_id, JobOffer.company_id == company_id)
        .delete(synchronize_session=False)
    )


def search(
    db: Session,
    *,
    title: str | None = None,
    location: str | None = None,
    company: str | None = None,
    experience: str | None = None,
    limit: int = 20,
    offset: int = 0,
) -> tuple[list[JobOffer], int]:
    """Filter offers by the conjunction of the given terms. Returns (items, total)."""
    q = db.query(JobOffer)
    if title:
        q = q.filter(JobOffer.title.ilike(f"%{title.strip()}%"))
    if location:
        q = q.filter(JobOffer.location.ilike(f"%{location.strip()}%"))
    if experience:
        q = q.filter(JobOffer.experience == experience)
    if company:
        q = q.join(Company, JobOffer.company_id == Company.id).filter(Company.name.ilike(f"%{company.strip()}%"))
    total = q.count()
    items = q.order_by(JobOffer.created_at.desc(), JobOffer.id.desc()).offset(offset).limit(limit).all()
    return items, total
