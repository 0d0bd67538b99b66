import logging

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.config import settings
from app.core.errors import DomainError, Forbidden
from app.core.security import TokenClaims
from app.database import get_db
from app.models.user import ROLE_RECRUIT, ROLE_RECRUITER, ROLE_SYSADMIN
from app.repos.recruit_repo import get_by_user_id as get_recruit_by_user_id
from app.repos.recruiter_repo import get_by_user_id as get_recruiter_by_user_id
from app.services.identity_service import verify_session_token

logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False)


def get_current_claims(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> TokenClaims:
    """Session claims from the ``token`` cookie, or a bearer header for API clients."""
    token = request.cookies.get(settings.session_cookie_name)
    if not token and credentials:
        token = credentials.credentials
    try:
        return verify_session_token(token)
    except DomainError as e:
        logger.info("Auth failed on %s: %s", request.url.path, e.message)
        raise


def _require_role(claims: TokenClaims, role: str) -> TokenClaims:
    if claims.role != role:
        raise Forbidden()
    return claims


def get_current_sysadmin(claims: TokenClaims = Depends(get_current_claims)) -> TokenClaims:
    return _require_role(claims, ROLE_SYSADMIN)


def get_recruiter_claims(claims: TokenClaims = Depends(get_current_claims)) -> TokenClaims:
    return _require_role(claims, ROLE_RECRUITER)


def get_recruit_claims(claims: TokenClaims = Depends(get_current_claims)) -> TokenClaims:
    return _require_role(claims, ROLE_RECRUIT)


def get_current_recruiter(
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_recruiter_claims),
):
    """Recruiter profile of the logged-in RECRUITER user."""
    recruiter = get_recruiter_by_user_id(db, claims.user_id)
    if not recruiter:
        raise Forbidden("Recruiter profile required")
    return recruiter


def get_current_recruit(
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_recruit_claims),
):
    recruit = get_recruit_by_user_id(db, claims.user_id)
    if not recruit:
        raise Forbidden("Recruit profile required")
    return recruit


def get_optional_recruiter(
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """Recruiter profile when the caller is a recruiter, else None."""
    if claims.role != ROLE_RECRUITER:
        return None
    return get_recruiter_by_user_id(db, claims.user_id)
