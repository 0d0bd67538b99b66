from sqlalchemy.orm import Session

from app.models.interview import Interview
from app.models.job_offer import JobOffer


def create(db: Session, **fields) -> Interview:
    interview = Interview(**fields)
    db.add(interview)
    db.flush()
    return interview


def get_by_id(db: Session, interview_id: int) -> Interview | None:
    return db.query(Interview).filter(Interview.id == interview_id).first()


def get_for_company(db: Session, interview_id: int, company_id: int) -> Interview | None:
    return (
        db.query(Interview)
        .join(JobOffer, Interview.job_offer_id == JobOffer.id)
        .filter(Interview.id == interview_id, JobOffer.company_id == company_id)
        .first()
    )


def list_all(db: Session) -> list[Interview]:
    return db.query(Interview).order_by(Interview.id).all()


def list_by_recruit(db: Session, recruit_id: int) -> list[Interview]:
    return (
        db.query(Interview)
        .filter(Interview.recruit_id == recruit_id)
        .order_by(Interview.scheduled_at, Interview.id)
        .all()
    )


def list_by_job_offer_for_company(db: Session, job_offer_id: int, company_id: int) -> list[Interview]:
    return (
        db.query(Interview)
        .join(JobOffer, Interview.job_offer_id == JobOffer.id)
        .filter(Interview.job_offer_id == job_offer_id, JobOffer.company_id == company_id)
        .order_by(Interview.scheduled_at, Interview.id)
        .all()
    )


def update(db: Session, interview: Interview, **fields) -> Interview:
    for name, value in fields.items():
        setattr(interview, name, value)
    db.flush()
    return interview


def delete(db: Session, interview: Interview) -> None:
    db.delete(interview)
    db.flush()
