from datetime import datetime

from pydantic import BaseModel, Field


class CompanyCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    phone_number: str | None = None
    email_address: str | None = None
    address: str | None = None
    industry: str | None = None
    website: str | None = None


class CompanyUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    phone_number: str | None = None
    email_address: str | None = None
    address: str | None = None
    industry: str | None = None
    website: str | None = None


class CompanyMemberAdd(BaseModel):
    recruiter_id: int


class CompanyResponse(BaseModel):
    id: int
    name: str
    phone_number: str | None = None
    email_address: str | None = None
    address: str | None = None
    industry: str | None = None
    website: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
