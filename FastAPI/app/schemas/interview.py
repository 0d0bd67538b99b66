from datetime import datetime

from pydantic import BaseModel, Field


class InterviewCreate(BaseModel):
    application_id: int
    scheduled_at: datetime | None = None
    online: bool = False
    notes: str | None = None


class InterviewUpdate(BaseModel):
    scheduled_at: datetime | None = None
    status: str | None = Field(default=None, min_length=1, max_length=50)
    online: bool | None = None
    notes: str | None = None


class RecruitInterviewResponse(BaseModel):
    """Interview as shown to the recruit: no host link."""

    id: int
    application_id: int
    recruit_id: int
    job_offer_id: int | None = None
    scheduled_at: datetime | None = None
    status: str
    online: bool
    join_meeting_url: str | None = None
    notes: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class InterviewResponse(RecruitInterviewResponse):
    start_meeting_url: str | None = None
