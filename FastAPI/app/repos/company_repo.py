from sqlalchemy.orm import Session

from app.models.company import Company


def create(db: Session, **fields) -> Company:
    company = Company(**fields)
    db.add(company)
    db.flush()
    return company


def get_by_id(db: Session, company_id: int) -> Company | None:
    return db.query(Company).filter(Company.id == company_id).first()


def get_all(db: Session) -> list[Company]:
    return db.query(Company).order_by(Company.name, Company.id).all()


def update(db: Session, company: Company, **fields) -> Company:
    for name, value in fields.items():
        if value is not None:
            setattr(company, name, value)
    db.flush()
    return company


def delete(db: Session, company: Company) -> None:
    db.delete(company)
    db.flush()
