import logging

from sqlalchemy.orm import Session

from app.core.errors import InvalidCredentials, InvalidInput, InvalidToken, NotFound, Unauthenticated
from app.core.security import (
    TokenClaims,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from app.database import unit_of_work
from app.models.user import User, USER_ROLES
from app.repos import user_repo
from app.services.activity_log import (
    PASSWORD_RESET,
    USER_LOGGED_IN,
    USER_LOGGED_OUT,
    USER_REGISTERED,
    log_activity,
)

logger = logging.getLogger(__name__)


def create_user_account(db: Session, email: str, password: str, role: str) -> User:
    """Insert a user inside the caller's unit of work. Rejects taken emails."""
    if role not in USER_ROLES:
        raise InvalidInput(f"Unknown role: {role}")
    if user_repo.get_by_email(db, email):
        raise InvalidInput("Email already registered")
    return user_repo.create(db, email, password, role)


def register_user(db: Session, email: str, password: str, role: str) -> User:
    with unit_of_work(db):
        user = create_user_account(db, email, password, role)
        log_activity(db, user.id, USER_REGISTERED, f"User registered with email: {user.email}")
    db.refresh(user)
    logger.info("User registered: %s (%s)", user.email, user.role)
    return user


def authenticate(db: Session, email: str, password: str) -> tuple[str, User]:
    """Check credentials and issue a one-hour session token."""
    user = user_repo.get_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        logger.info("Login failed for %s", email)
        raise InvalidCredentials()
    token = create_access_token(user.id, user.role)
    with unit_of_work(db):
        log_activity(db, user.id, USER_LOGGED_IN, f"User logged in with email: {user.email}")
    logger.info("User logged in: %s", user.email)
    return token, user


def verify_session_token(token: str | None) -> TokenClaims:
    if not token:
        raise Unauthenticated()
    claims = decode_access_token(token)
    if claims is None:
        raise InvalidToken()
    return claims


def logout(db: Session, user_id: int) -> None:
    # Tokens are not revoked server side; they lapse at expiry.
    with unit_of_work(db):
        log_activity(db, user_id, USER_LOGGED_OUT, f"User with ID {user_id} logged out")
    logger.info("User logged out: %s", user_id)


def reset_password(db: Session, email: str, new_password: str) -> User:
    with unit_of_work(db):
        user = user_repo.get_by_email(db, email)
        if not user:
            raise NotFound("User not found")
        user_repo.update(db, user.id, password_hash=hash_password(new_password))
        log_activity(db, user.id, PASSWORD_RESET, f"Password reset for email: {user.email}")
    logger.info("Password reset for %s", email)
    return user
