from datetime import datetime

from pydantic import BaseModel, EmailStr, field_validator


class _ProfileRegister(BaseModel):
    email: EmailStr
    password: str
    firstname: str | None = None
    lastname: str | None = None
    phone_number: str | None = None

    @field_validator("password")
    @classmethod
    def password_min_length(cls, v: str) -> str:
        if len(v) < 8:
            raise ValueError("Password must be at least 8 characters")
        return v


class RecruiterRegister(_ProfileRegister):
    pass


class RecruitRegister(_ProfileRegister):
    pass


class ProfileUpdate(BaseModel):
    """Editable personal fields. Company and sub-role are not editable here."""

    firstname: str | None = None
    lastname: str | None = None
    phone_number: str | None = None


class RecruiterResponse(BaseModel):
    id: int
    user_id: int
    company_id: int | None = None
    role: str
    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None
    phone_number: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class RecruitResponse(BaseModel):
    id: int
    user_id: int
    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None
    phone_number: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
