import pytest

import app.scripts.promote_sysadmin as promote


class _DB:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class _User:
    id = 9
    email = "boss@example.com"


def test_promote_sysadmin_requires_email(monkeypatch):
    monkeypatch.setattr(promote.sys, "argv", ["prog"])
    with pytest.raises(SystemExit):
        promote.main()


def test_promote_sysadmin_user_not_found(monkeypatch):
    db = _DB()
    monkeypatch.setattr(promote, "ensure_tables_exist", lambda: None)
    monkeypatch.setattr(promote, "SessionLocal", lambda: db)
    monkeypatch.setattr(promote, "get_by_email", lambda db, email: None)
    monkeypatch.setattr(promote.sys, "argv", ["prog", "missing@example.com"])
    with pytest.raises(SystemExit):
        promote.main()
    assert db.closed is True


def test_promote_sysadmin_success(monkeypatch):
    db = _DB()
    calls = []
    monkeypatch.setattr(promote, "ensure_tables_exist", lambda: None)
    monkeypatch.setattr(promote, "SessionLocal", lambda: db)
    monkeypatch.setattr(promote, "get_by_email", lambda db, email: _User())
    monkeypatch.setattr(promote, "change_user_role", lambda db, uid, role: calls.append((uid, role)))
    monkeypatch.setattr(promote.sys, "argv", ["prog", " boss@example.com "])
    promote.main()
    assert calls == [(9, "SYSADMIN")]
    assert db.closed is True
