"""
Promote a user to sysadmin by email.
Usage: python -m app.scripts.promote_sysadmin user@example.com
"""
import sys

from app.database import SessionLocal, ensure_tables_exist
from app.models.user import ROLE_SYSADMIN
from app.services.user_service import change_user_role
from app.repos.user_repo import get_by_email


def main():
    if len(sys.argv) < 2:
        print("Usage: python -m app.scripts.promote_sysadmin <email>")
        sys.exit(1)
    email = sys.argv[1].strip()
    ensure_tables_exist()
    db = SessionLocal()
    try:
        user = get_by_email(db, email)
        if not user:
            print(f"User not found: {email}")
            sys.exit(1)
        change_user_role(db, user.id, ROLE_SYSADMIN)
        print(f"Promoted {email} to {ROLE_SYSADMIN}.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
