"""Append-only activity trail written by every mutating operation."""

import logging

from sqlalchemy.orm import Session

from app.repos import activity_log_repo

logger = logging.getLogger(__name__)

USER_REGISTERED = "USER_REGISTERED"
USER_LOGGED_IN = "USER_LOGGED_IN"
USER_LOGGED_OUT = "USER_LOGGED_OUT"
USER_PROFILE_UPDATED = "USER_PROFILE_UPDATED"
USER_ROLE_CHANGED = "USER_ROLE_CHANGED"
USER_DELETED = "USER_DELETED"
PASSWORD_RESET = "PASSWORD_RESET"

RECRUITER_REGISTERED = "RECRUITER_REGISTERED"
RECRUITER_PROFILE_UPDATED = "RECRUITER_PROFILE_UPDATED"
RECRUITER_DELETED = "RECRUITER_DELETED"
RECRUIT_REGISTERED = "RECRUIT_REGISTERED"
RECRUIT_PROFILE_UPDATED = "RECRUIT_PROFILE_UPDATED"
RECRUIT_DELETED = "RECRUIT_DELETED"

COMPANY_CREATED = "COMPANY_CREATED"
COMPANY_UPDATED = "COMPANY_UPDATED"
COMPANY_DELETED = "COMPANY_DELETED"
COMPANY_MEMBER_ADDED = "COMPANY_MEMBER_ADDED"

JOB_OFFER_CREATED = "JOB_OFFER_CREATED"
JOB_OFFER_UPDATED = "JOB_OFFER_UPDATED"
JOB_OFFER_DELETED = "JOB_OFFER_DELETED"

APPLICATION_CREATED = "APPLICATION_CREATED"
APPLICATION_STATUS_UPDATED = "APPLICATION_STATUS_UPDATED"
APPLICATION_REJECTED = "APPLICATION_REJECTED"
APPLICATION_DELETED = "APPLICATION_DELETED"

INTERVIEW_SCHEDULED = "INTERVIEW_SCHEDULED"
INTERVIEW_UPDATED = "INTERVIEW_UPDATED"
INTERVIEW_DELETED = "INTERVIEW_DELETED"


def log_activity(db: Session, user_id: int, action: str, description: str) -> None:
    """Append one entry in the caller's transaction."""
    activity_log_repo.create(db, user_id, action, description)
    logger.debug("Activity user=%s action=%s: %s", user_id, action, description)
