from datetime import datetime

from pydantic import BaseModel, EmailStr, field_validator

from app.models.user import ROLE_RECRUIT, ROLE_RECRUITER


def _check_password(v: str) -> str:
    if len(v) < 8:
        raise ValueError("Password must be at least 8 characters")
    return v


class UserRegister(BaseModel):
    email: EmailStr
    password: str
    role: str = ROLE_RECRUIT

    @field_validator("password")
    @classmethod
    def password_min_length(cls, v: str) -> str:
        return _check_password(v)

    @field_validator("role")
    @classmethod
    def public_role(cls, v: str) -> str:
        role = v.upper()
        if role not in (ROLE_RECRUIT, ROLE_RECRUITER):
            raise ValueError("role must be RECRUIT or RECRUITER")
        return role


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    id: int
    email: str
    role: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class LoginResponse(BaseModel):
    user: UserResponse


class UserProfileUpdate(BaseModel):
    email: EmailStr | None = None
    password: str | None = None

    @field_validator("password")
    @classmethod
    def password_min_length(cls, v: str | None) -> str | None:
        if v is not None:
            _check_password(v)
        return v


class RoleChange(BaseModel):
    new_role: str


class PasswordReset(BaseModel):
    email: EmailStr
    new_password: str

    @field_validator("new_password")
    @classmethod
    def password_min_length(cls, v: str) -> str:
        return _check_password(v)
