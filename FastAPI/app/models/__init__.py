from app.models.user import User
from app.models.company import Company
from app.models.recruiter import Recruiter
from app.models.recruit import Recruit
from app.models.job_offer import JobOffer
from app.models.application import Application
from app.models.interview import Interview
from app.models.activity_log import ActivityLog

__all__ = [
    "User",
    "Company",
    "Recruiter",
    "Recruit",
    "JobOffer",
    "Application",
    "Interview",
    "ActivityLog",
]
