from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database import Base

RECRUITER_MAIN = "main"
RECRUITER_MEMBER = "member"


class Recruiter(Base):
    """Recruiter profile. Only the ``main`` recruiter of a company manages its job offers."""

    __tablename__ = "recruiters"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="SET NULL"), nullable=True, index=True)
    role = Column(String, nullable=False, default=RECRUITER_MEMBER)
    firstname = Column(String)
    lastname = Column(String)
    email = Column(String)
    phone_number = Column(String)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    user = relationship("User", back_populates="recruiter")
    company = relationship("Company", back_populates="recruiters")
