import pytest

from app.core.errors import Forbidden, InvalidCredentials, InvalidInput, InvalidToken, NotFound, Unauthenticated
from app.core.security import TokenClaims, verify_password
from app.models.activity_log import ActivityLog
from app.models.user import User
from app.services import identity_service, user_service


def test_register_and_authenticate(db_session):
    user = identity_service.register_user(db_session, "ann@example.com", "password123", "RECRUIT")
    assert user.id is not None
    assert user.password_hash != "password123"

    token, logged_in = identity_service.authenticate(db_session, "ann@example.com", "password123")
    assert logged_in.id == user.id
    claims = identity_service.verify_session_token(token)
    assert claims == TokenClaims(user_id=user.id, role="RECRUIT")

    actions = [a.action for a in db_session.query(ActivityLog).order_by(ActivityLog.id)]
    assert actions == ["USER_REGISTERED", "USER_LOGGED_IN"]


def test_register_duplicate_email(db_session):
    identity_service.register_user(db_session, "dup@example.com", "password123", "RECRUIT")
    with pytest.raises(InvalidInput):
        identity_service.register_user(db_session, "dup@example.com", "password456", "RECRUITER")
    assert db_session.query(User).count() == 1


def test_register_unknown_role(db_session):
    with pytest.raises(InvalidInput):
        identity_service.register_user(db_session, "x@example.com", "password123", "OWNER")


def test_authenticate_failures_do_not_log(db_session):
    identity_service.register_user(db_session, "bob@example.com", "password123", "RECRUIT")
    with pytest.raises(InvalidCredentials):
        identity_service.authenticate(db_session, "bob@example.com", "wrongpass")
    with pytest.raises(InvalidCredentials):
        identity_service.authenticate(db_session, "nobody@example.com", "password123")
    assert db_session.query(ActivityLog).filter(ActivityLog.action == "USER_LOGGED_IN").count() == 0


def test_verify_session_token_errors():
    with pytest.raises(Unauthenticated):
        identity_service.verify_session_token(None)
    with pytest.raises(InvalidToken):
        identity_service.verify_session_token("nope")


def test_reset_password(db_session):
    identity_service.register_user(db_session, "cat@example.com", "password123", "RECRUIT")
    user = identity_service.reset_password(db_session, "cat@example.com", "brand-new-pass")
    assert verify_password("brand-new-pass", user.password_hash)
    with pytest.raises(NotFound):
        identity_service.reset_password(db_session, "ghost@example.com", "brand-new-pass")


def test_ensure_self_or_sysadmin():
    user_service.ensure_self_or_sysadmin(TokenClaims(user_id=1, role="RECRUIT"), 1)
    user_service.ensure_self_or_sysadmin(TokenClaims(user_id=2, role="SYSADMIN"), 1)
    with pytest.raises(Forbidden):
        user_service.ensure_self_or_sysadmin(TokenClaims(user_id=2, role="RECRUITER"), 1)


def test_update_profile_rejects_taken_email(db_session):
    first = identity_service.register_user(db_session, "one@example.com", "password123", "RECRUIT")
    identity_service.register_user(db_session, "two@example.com", "password123", "RECRUIT")
    with pytest.raises(InvalidInput):
        user_service.update_user_profile(db_session, first.id, email="two@example.com")

    updated = user_service.update_user_profile(db_session, first.id, email="uno@example.com", password="password999")
    assert updated.email == "uno@example.com"
    assert verify_password("password999", updated.password_hash)


def test_change_role_and_delete(db_session):
    user = identity_service.register_user(db_session, "dee@example.com", "password123", "RECRUIT")
    promoted = user_service.change_user_role(db_session, user.id, "sysadmin")
    assert promoted.role == "SYSADMIN"
    with pytest.raises(InvalidInput):
        user_service.change_user_role(db_session, user.id, "overlord")
    with pytest.raises(NotFound):
        user_service.change_user_role(db_session, 999, "RECRUIT")

    user_service.delete_user(db_session, user.id)
    assert user_service.get_all_users(db_session) == []
    with pytest.raises(NotFound):
        user_service.get_user_profile(db_session, user.id)
    # audit entries outlive the user
    assert db_session.query(ActivityLog).filter(ActivityLog.user_id == user.id).count() >= 3
