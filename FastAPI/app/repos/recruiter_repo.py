from sqlalchemy.orm import Session

from app.models.recruiter import Recruiter, RECRUITER_MEMBER


def create(
    db: Session,
    user_id: int,
    *,
    email: str,
    firstname: str | None = None,
    lastname: str | None = None,
    phone_number: str | None = None,
) -> Recruiter:
    recruiter = Recruiter(
        user_id=user_id,
        email=email,
        firstname=firstname,
        lastname=lastname,
        phone_number=phone_number,
        role=RECRUITER_MEMBER,
    )
    db.add(recruiter)
    db.flush()
    return recruiter


def get_by_id(db: Session, recruiter_id: int) -> Recruiter | None:
    return db.query(Recruiter).filter(Recruiter.id == recruiter_id).first()


def get_by_user_id(db: Session, user_id: int) -> Recruiter | None:
    return db.query(Recruiter).filter(Recruiter.user_id == user_id).first()


def update(db: Session, recruiter: Recruiter, **fields) -> Recruiter:
    """Set the given profile fields; ``None`` values are skipped."""
    for name, value in fields.items():
        if value is not None:
            setattr(recruiter, name, value)
    db.flush()
    return recruiter


def assign_company(db: Session, recruiter: Recruiter, company_id: int | None, role: str) -> Recruiter:
    recruiter.company_id = company_id
    recruiter.role = role
    db.flush()
    return recruiter


def detach_company(db: Session, company_id: int) -> int:
    """Unlink every recruiter from a company. Returns the number of recruiters affected."""
    return (
        db.query(Recruiter)
        .filter(Recruiter.company_id == company_id)
        .update({Recruiter.company_id: None, Recruiter.role: RECRUITER_MEMBER}, synchronize_session=False)
    )


def delete(db: Session, recruiter: Recruiter) -> None:
    db.delete(recruiter)
    db.flush()
