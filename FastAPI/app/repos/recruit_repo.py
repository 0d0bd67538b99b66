from sqlalchemy.orm import Session

from app.models.recruit import Recruit


def create(
    db: Session,
    user_id: int,
    *,
    email: str,
    firstname: str | None = None,
    lastname: str | None = None,
    phone_number: str | None = None,
) -> Recruit:
    recruit = Recruit(
        user_id=user_id,
        email=email,
        firstname=firstname,
        lastname=lastname,
        phone_number=phone_number,
    )
    db.add(recruit)
    db.flush()
    return recruit


def get_by_id(db: Session, recruit_id: int) -> Recruit | None:
    return db.query(Recruit).filter(Recruit.id == recruit_id).first()


def get_by_user_id(db: Session, user_id: int) -> Recruit | None:
    return db.query(Recruit).filter(Recruit.user_id == user_id).first()


def update(db: Session, recruit: Recruit, **fields) -> Recruit:
    for name, value in fields.items():
        if value is not None:
            setattr(recruit, name, value)
    db.flush()
    return recruit


def delete(db: Session, recruit: Recruit) -> None:
    db.delete(recruit)
    db.flush()
