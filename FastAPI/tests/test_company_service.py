import pytest

from app.core.errors import Forbidden, InvalidInput, NotFound
from app.core.security import TokenClaims
from app.models.company import Company
from app.models.recruiter import Recruiter
from app.repos import recruiter_repo, user_repo
from app.schemas.company import CompanyCreate, CompanyUpdate
from app.services import company_service as svc


def _free_recruiter(db, email="free@example.com"):
    user = user_repo.create(db, email, "password123", "RECRUITER")
    recruiter = recruiter_repo.create(db, user.id, email=email)
    db.commit()
    return recruiter


def test_creator_becomes_main(db_session):
    recruiter = _free_recruiter(db_session)
    company = svc.create_company(db_session, recruiter, CompanyCreate(name="Initech", industry="Software"))
    db_session.refresh(recruiter)
    assert recruiter.company_id == company.id
    assert recruiter.role == "main"


def test_recruiter_with_company_cannot_create_another(seeded):
    with pytest.raises(InvalidInput):
        svc.create_company(seeded.db, seeded.acme_main, CompanyCreate(name="Second"))


def test_get_all_companies_is_sysadmin_only(seeded):
    with pytest.raises(Forbidden):
        svc.get_all_companies(seeded.db, TokenClaims(user_id=seeded.acme_main.user_id, role="RECRUITER"))
    names = [c.name for c in svc.get_all_companies(seeded.db, TokenClaims(user_id=1, role="SYSADMIN"))]
    assert names == ["Acme", "Globex"]


def test_get_company_requires_membership(seeded):
    claims = TokenClaims(user_id=seeded.acme_member.user_id, role="RECRUITER")
    assert svc.get_company(seeded.db, seeded.acme.id, claims, seeded.acme_member).name == "Acme"
    with pytest.raises(Forbidden):
        svc.get_company(seeded.db, seeded.globex.id, claims, seeded.acme_member)
    with pytest.raises(Forbidden):
        svc.get_company(seeded.db, seeded.acme.id, TokenClaims(user_id=seeded.recruit.user_id, role="RECRUIT"))
    with pytest.raises(NotFound):
        svc.get_company(seeded.db, 999, TokenClaims(user_id=1, role="SYSADMIN"))


def test_update_company_by_member(seeded):
    company = svc.update_company(seeded.db, seeded.acme.id, CompanyUpdate(website="https://acme.test"), seeded.acme_member)
    assert company.website == "https://acme.test"
    assert company.name == "Acme"
    with pytest.raises(Forbidden):
        svc.update_company(seeded.db, seeded.globex.id, CompanyUpdate(name="Mine"), seeded.acme_member)


def test_delete_company_refused_while_offers_exist(seeded):
    with pytest.raises(InvalidInput):
        svc.delete_company(seeded.db, seeded.acme.id, seeded.acme_main)
    with pytest.raises(Forbidden):
        svc.delete_company(seeded.db, seeded.acme.id, seeded.acme_member)


def test_delete_company_detaches_recruiters(db_session):
    recruiter = _free_recruiter(db_session)
    company = svc.create_company(db_session, recruiter, CompanyCreate(name="Shortlived"))
    result = svc.delete_company(db_session, company.id, recruiter)
    assert "deleted" in result["message"]
    db_session.expire_all()
    assert db_session.query(Company).count() == 0
    assert db_session.get(Recruiter, recruiter.id).company_id is None


def test_add_member(seeded):
    newcomer = _free_recruiter(seeded.db, "new@acme.com")
    member = svc.add_company_member(seeded.db, seeded.acme.id, seeded.acme_main, newcomer.id)
    assert member.company_id == seeded.acme.id
    assert member.role == "member"

    with pytest.raises(InvalidInput):
        svc.add_company_member(seeded.db, seeded.acme.id, seeded.acme_main, seeded.globex_main.id)
    with pytest.raises(NotFound):
        svc.add_company_member(seeded.db, seeded.acme.id, seeded.acme_main, 4040)
    with pytest.raises(Forbidden):
        svc.add_company_member(seeded.db, seeded.acme.id, seeded.acme_member, newcomer.id)
