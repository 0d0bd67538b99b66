import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from dataclasses import dataclass

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.core.security import TokenClaims
from app.database import Base, get_db
from app.dependencies import (
    get_current_claims,
    get_current_recruit,
    get_current_recruiter,
    get_current_sysadmin,
    get_optional_recruiter,
    get_recruit_claims,
    get_recruiter_claims,
)
from app.main import app


@dataclass
class StubRecruiter:
    id: int = 10
    user_id: int = 1
    company_id: int | None = 100
    role: str = "main"
    firstname: str | None = "Rita"
    lastname: str | None = "Recruiter"
    email: str | None = "rita@example.com"
    phone_number: str | None = None
    created_at: object | None = None


@dataclass
class StubRecruit:
    id: int = 20
    user_id: int = 2
    firstname: str | None = "Xavier"
    lastname: str | None = "Recruit"
    email: str | None = "xavier@example.com"
    phone_number: str | None = None
    created_at: object | None = None


@pytest.fixture
def recruiter_claims() -> TokenClaims:
    return TokenClaims(user_id=1, role="RECRUITER")


@pytest.fixture
def recruit_claims() -> TokenClaims:
    return TokenClaims(user_id=2, role="RECRUIT")


@pytest.fixture
def sysadmin_claims() -> TokenClaims:
    return TokenClaims(user_id=3, role="SYSADMIN")


@pytest.fixture
def stub_recruiter() -> StubRecruiter:
    return StubRecruiter()


@pytest.fixture
def stub_recruit() -> StubRecruit:
    return StubRecruit()


def _db_override():
    yield object()


@pytest.fixture
def anon_client():
    app.dependency_overrides[get_db] = _db_override
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def recruiter_client(recruiter_claims, stub_recruiter):
    app.dependency_overrides[get_db] = _db_override
    app.dependency_overrides[get_current_claims] = lambda: recruiter_claims
    app.dependency_overrides[get_recruiter_claims] = lambda: recruiter_claims
    app.dependency_overrides[get_current_recruiter] = lambda: stub_recruiter
    app.dependency_overrides[get_optional_recruiter] = lambda: stub_recruiter
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def recruit_client(recruit_claims, stub_recruit):
    app.dependency_overrides[get_db] = _db_override
    app.dependency_overrides[get_current_claims] = lambda: recruit_claims
    app.dependency_overrides[get_recruit_claims] = lambda: recruit_claims
    app.dependency_overrides[get_current_recruit] = lambda: stub_recruit
    app.dependency_overrides[get_optional_recruiter] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sysadmin_client(sysadmin_claims):
    app.dependency_overrides[get_db] = _db_override
    app.dependency_overrides[get_current_claims] = lambda: sysadmin_claims
    app.dependency_overrides[get_current_sysadmin] = lambda: sysadmin_claims
    app.dependency_overrides[get_optional_recruiter] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def db_session():
    """Real session on a private in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def seeded(db_session):
    """Two companies with a main recruiter each, one recruit and one offer per company."""
    from types import SimpleNamespace

    from app.models.recruiter import RECRUITER_MAIN
    from app.repos import company_repo, job_offer_repo, recruit_repo, recruiter_repo, user_repo

    db = db_session
    acme = company_repo.create(db, name="Acme")
    globex = company_repo.create(db, name="Globex")

    acme_user = user_repo.create(db, "main@acme.com", "password123", "RECRUITER")
    acme_main = recruiter_repo.create(db, acme_user.id, email=acme_user.email)
    recruiter_repo.assign_company(db, acme_main, acme.id, RECRUITER_MAIN)

    globex_user = user_repo.create(db, "main@globex.com", "password123", "RECRUITER")
    globex_main = recruiter_repo.create(db, globex_user.id, email=globex_user.email)
    recruiter_repo.assign_company(db, globex_main, globex.id, RECRUITER_MAIN)

    member_user = user_repo.create(db, "member@acme.com", "password123", "RECRUITER")
    acme_member = recruiter_repo.create(db, member_user.id, email=member_user.email)
    recruiter_repo.assign_company(db, acme_member, acme.id, "member")

    recruit_user = user_repo.create(db, "jane@example.com", "password123", "RECRUIT")
    recruit = recruit_repo.create(db, recruit_user.id, email=recruit_user.email, firstname="Jane")

    acme_offer = job_offer_repo.create(
        db, acme.id, title="Backend Engineer", location="Berlin", salary=70000, experience="1-2 years"
    )
    globex_offer = job_offer_repo.create(
        db, globex.id, title="Data Analyst", location="Paris", salary=50000, experience="< 1 year"
    )
    db.commit()

    return SimpleNamespace(
        db=db,
        acme=acme,
        globex=globex,
        acme_main=acme_main,
        acme_member=acme_member,
        globex_main=globex_main,
        recruit=recruit,
        recruit_user=recruit_user,
        acme_offer=acme_offer,
        globex_offer=globex_offer,
    )
