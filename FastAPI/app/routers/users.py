import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.config import settings
from app.core.errors import DomainError
from app.core.security import TokenClaims
from app.database import get_db
from app.dependencies import get_current_claims, get_current_sysadmin
from app.models.user import ROLE_SYSADMIN
from app.schemas.auth import (
    LoginResponse,
    PasswordReset,
    RoleChange,
    UserLogin,
    UserProfileUpdate,
    UserRegister,
    UserResponse,
)
from app.services.identity_service import authenticate, logout, register_user, reset_password
from app.services.user_service import (
    change_user_role,
    delete_user,
    ensure_self_or_sysadmin,
    get_all_users,
    get_user_profile,
    update_user_profile,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        max_age=settings.access_token_expire_minutes * 60,
    )


@router.post("/register", response_model=UserResponse)
def register(data: UserRegister, db: Session = Depends(get_db)):
    try:
        return register_user(db, data.email, data.password, data.role)
    except DomainError:
        raise
    except Exception as e:
        logger.exception("Register failed for email=%s: %s", data.email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Registration failed") from e


@router.post("/login", response_model=LoginResponse)
def login(data: UserLogin, response: Response, db: Session = Depends(get_db)):
    try:
        token, user = authenticate(db, data.email, data.password)
    except DomainError:
        raise
    except Exception as e:
        logger.exception("Login failed for email=%s: %s", data.email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Login failed") from e
    _set_session_cookie(response, token)
    return LoginResponse(user=UserResponse.model_validate(user))


@router.post("/logout")
def logout_user(
    response: Response,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    response.delete_cookie(settings.session_cookie_name)
    logout(db, claims.user_id)
    return {"message": "User logged out successfully"}


@router.get("/me", response_model=UserResponse)
def get_me(
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    return get_user_profile(db, claims.user_id)


@router.get("/profile/{user_id}", response_model=UserResponse)
def get_profile(
    user_id: int,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    ensure_self_or_sysadmin(claims, user_id)
    return get_user_profile(db, user_id)


@router.put("/profile/{user_id}", response_model=UserResponse)
def update_profile(
    user_id: int,
    data: UserProfileUpdate,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    ensure_self_or_sysadmin(claims, user_id)
    try:
        return update_user_profile(db, user_id, email=data.email, password=data.password)
    except DomainError:
        raise
    except Exception as e:
        logger.exception("Profile update failed for user=%s: %s", user_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update profile") from e


@router.delete("/{user_id}")
def delete_account(
    user_id: int,
    response: Response,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    ensure_self_or_sysadmin(claims, user_id)
    delete_user(db, user_id)
    if user_id == claims.user_id:
        response.delete_cookie(settings.session_cookie_name)
    return {"message": "User deleted successfully"}


@router.get("", response_model=list[UserResponse])
def list_users(
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_sysadmin),
):
    """List every user. Sysadmin only."""
    return get_all_users(db)


@router.patch("/{user_id}/role", response_model=UserResponse)
def change_role(
    user_id: int,
    body: RoleChange,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_sysadmin),
):
    if user_id == claims.user_id and body.new_role.upper() != ROLE_SYSADMIN:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot remove your own sysadmin role")
    return change_user_role(db, user_id, body.new_role)


@router.post("/reset-password")
def reset_user_password(
    body: PasswordReset,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """Set a new password for the caller's own account, or any account for a sysadmin."""
    if claims.role != ROLE_SYSADMIN:
        me = get_user_profile(db, claims.user_id)
        if me.email != body.email:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized access")
    reset_password(db, body.email, body.new_password)
    return {"message": "Password reset successful"}
