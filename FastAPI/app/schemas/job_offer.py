from datetime import datetime

from pydantic import BaseModel, Field


class JobOfferCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    location: str | None = None
    salary: float | None = Field(default=None, ge=0)
    experience_id: int = Field(ge=0)


class JobOfferUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    location: str | None = None
    salary: float | None = Field(default=None, ge=0)
    experience_id: int | None = Field(default=None, ge=0)


class JobOfferResponse(BaseModel):
    id: int
    company_id: int
    title: str
    description: str | None = None
    location: str | None = None
    salary: float | None = None
    experience: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class JobOfferPage(BaseModel):
    items: list[JobOfferResponse]
    total: int
    page: int
    page_size: int


class JobOfferDeleteResult(BaseModel):
    deleted: int
    rejected_applications: int
