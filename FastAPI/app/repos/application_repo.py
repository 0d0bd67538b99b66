from sqlalchemy.orm import Session, joinedload

from app.models.application import Application, STATUS_PENDING, STATUS_REJECTED
from app.models.job_offer import JobOffer


def create(db: Session, recruit_id: int, job_offer_id: int) -> Application:
    application = Application(
        recruit_id=recruit_id,
        job_offer_id=job_offer_id,
        status=STATUS_PENDING,
    )
    db.add(application)
    db.flush()
    return application


def get_by_id(db: Session, application_id: int) -> Application | None:
    return db.query(Application).filter(Application.id == application_id).first()


def get_for_company(db: Session, application_id: int, company_id: int) -> Application | None:
    """Application whose job offer belongs to the company."""
    return (
        db.query(Application)
        .join(JobOffer, Application.job_offer_id == JobOffer.id)
        .filter(Application.id == application_id, JobOffer.company_id == company_id)
        .first()
    )


def list_all(db: Session) -> list[Application]:
    return db.query(Application).order_by(Application.id).all()


def list_by_recruit(db: Session, recruit_id: int) -> list[Application]:
    return (
        db.query(Application)
        .options(joinedload(Application.job_offer).joinedload(JobOffer.company))
        .filter(Application.recruit_id == recruit_id)
        .order_by(Application.created_at.desc(), Application.id.desc())
        .all()
    )


def list_by_job_offer_for_company(db: Session, job_offer_id: int, company_id: int) -> list[Application]:
    return (
        db.query(Application)
        .join(JobOffer, Application.job_offer_id == JobOffer.id)
        .filter(Application.job_offer_id == job_offer_id, JobOffer.company_id == company_id)
        .order_by(Application.id)
        .all()
    )


def list_pending_for_job_offer(db: Session, job_offer_id: int) -> list[Application]:
    return (
        db.query(Application)
        .options(joinedload(Application.recruit))
        .filter(Application.job_offer_id == job_offer_id, Application.status == STATUS_PENDING)
        .order_by(Application.id)
        .all()
    )


def reject_pending_for_job_offer(db: Session, job_offer_id: int) -> int:
    return (
        db.query(Application)
        .filter(Application.job_offer_id == job_offer_id, Application.status == STATUS_PENDING)
        .update({Application.status: STATUS_REJECTED}, synchronize_session=False)
    )


def update_status(db: Session, application: Application, status: str) -> Application:
    application.status = status
    db.flush()
    return application


def delete(db: Session, application: Application) -> None:
    db.delete(application)
    db.flush()
