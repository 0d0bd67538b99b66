from sqlalchemy import Column, Integer, String, Text, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database import Base


class JobOffer(Base):
    """An open position; it is open for as long as the row exists."""

    __tablename__ = "job_offers"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False, index=True)
    description = Column(Text)
    location = Column(String, index=True)
    salary = Column(Float)
    experience = Column(String)  # label from job_offer_service.EXPERIENCE_LEVELS
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    company = relationship("Company", back_populates="job_offers")
    applications = relationship("Application", back_populates="job_offer", passive_deletes=True)
