from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database import Base

STATUS_PENDING = "pending"
STATUS_INTERVIEW = "interview"
STATUS_REJECTED = "rejected"
STATUS_ACCEPTED = "accepted"
KNOWN_APPLICATION_STATUSES = (STATUS_PENDING, STATUS_INTERVIEW, STATUS_REJECTED, STATUS_ACCEPTED)


class Application(Base):
    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    recruit_id = Column(Integer, ForeignKey("recruits.id", ondelete="CASCADE"), nullable=False, index=True)
    # Kept after the offer is deleted; the application is rejected first.
    job_offer_id = Column(Integer, ForeignKey("job_offers.id", ondelete="SET NULL"), nullable=True, index=True)
    status = Column(String, nullable=False, default=STATUS_PENDING)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    recruit = relationship("Recruit", back_populates="applications")
    job_offer = relationship("JobOffer", back_populates="applications")
    interviews = relationship("Interview", back_populates="application", cascade="all, delete-orphan", passive_deletes=True)
