from sqlalchemy.orm import Session

from app.models.activity_log import ActivityLog


def create(db: Session, user_id: int, action: str, description: str) -> ActivityLog:
    entry = ActivityLog(user_id=user_id, action=action, description=description)
    db.add(entry)
    db.flush()
    return entry
