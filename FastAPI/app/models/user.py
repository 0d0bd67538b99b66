from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database import Base

ROLE_SYSADMIN = "SYSADMIN"
ROLE_RECRUITER = "RECRUITER"
ROLE_RECRUIT = "RECRUIT"
USER_ROLES = (ROLE_SYSADMIN, ROLE_RECRUITER, ROLE_RECRUIT)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default=ROLE_RECRUIT)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    recruiter = relationship("Recruiter", back_populates="user", uselist=False, cascade="all, delete-orphan", passive_deletes=True)
    recruit = relationship("Recruit", back_populates="user", uselist=False, cascade="all, delete-orphan", passive_deletes=True)
