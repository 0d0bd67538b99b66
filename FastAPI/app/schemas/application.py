from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.job_offer import JobOfferResponse


class ApplicationCreate(BaseModel):
    job_offer_id: int


class ApplicationStatusUpdate(BaseModel):
    # Free text; see application_service.update_application_status.
    status: str = Field(min_length=1, max_length=50)


class ApplicationResponse(BaseModel):
    id: int
    recruit_id: int
    job_offer_id: int | None = None
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class ApplicationWithOfferResponse(ApplicationResponse):
    job_offer: JobOfferResponse | None = None
