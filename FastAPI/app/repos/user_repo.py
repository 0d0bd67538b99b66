from sqlalchemy.orm import Session

from app.models.user import User
from app.core.security import hash_password


def get_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def get_by_id(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def create(db: Session, email: str, password: str, role: str) -> User:
    user = User(
        email=email,
        password_hash=hash_password(password),
        role=role,
    )
    db.add(user)
    db.flush()
    return user


def update(
    db: Session,
    user_id: int,
    *,
    email: str | None = None,
    password_hash: str | None = None,
    role: str | None = None,
) -> User | None:
    user = get_by_id(db, user_id)
    if not user:
        return None
    if email is not None:
        user.email = email
    if password_hash is not None:
        user.password_hash = password_hash
    if role is not None:
        user.role = role
    db.flush()
    return user


def get_all_users(db: Session) -> list[User]:
    """List all users, newest first."""
    return db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()


def delete_user(db: Session, user_id: int) -> bool:
    """Delete a user row. Returns True if deleted."""
    user = get_by_id(db, user_id)
    if not user:
        return False
    db.delete(user)
    db.flush()
    return True
