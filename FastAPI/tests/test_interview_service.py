from datetime import datetime, timezone

import pytest

from app.config import settings
from app.core.errors import Forbidden, NotFound
from app.core.security import MEETING_TOKEN_ALPHABET, TokenClaims
from app.models.application import Application
from app.models.interview import Interview
from app.repos import application_repo
from app.schemas.interview import InterviewCreate, InterviewUpdate
from app.services import interview_service as svc

WHEN = datetime(2026, 11, 2, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def application(seeded):
    app_row = application_repo.create(seeded.db, seeded.recruit.id, seeded.acme_offer.id)
    seeded.db.commit()
    return app_row


def _assert_link(url, kind):
    prefix = f"{settings.meeting_base_url}/{kind}/"
    assert url.startswith(prefix)
    token = url[len(prefix):]
    assert len(token) == 20
    assert set(token) <= set(MEETING_TOKEN_ALPHABET)


def test_build_meeting_links():
    join_url, start_url = svc.build_meeting_links()
    _assert_link(join_url, "j")
    _assert_link(start_url, "s")


def test_online_interview_gets_links_and_moves_application(seeded, application):
    interview = svc.create_interview(
        seeded.db, seeded.acme_member, InterviewCreate(application_id=application.id, scheduled_at=WHEN, online=True)
    )
    assert interview.status == "scheduled"
    assert interview.recruit_id == seeded.recruit.id
    assert interview.job_offer_id == seeded.acme_offer.id
    _assert_link(interview.join_meeting_url, "j")
    _assert_link(interview.start_meeting_url, "s")
    seeded.db.expire_all()
    assert seeded.db.get(Application, application.id).status == "interview"


def test_offline_interview_has_no_links(seeded, application):
    interview = svc.create_interview(seeded.db, seeded.acme_main, InterviewCreate(application_id=application.id))
    assert interview.online is False
    assert interview.join_meeting_url is None
    assert interview.start_meeting_url is None


def test_cannot_schedule_for_other_company(seeded, application):
    with pytest.raises(NotFound):
        svc.create_interview(seeded.db, seeded.globex_main, InterviewCreate(application_id=application.id))
    seeded.db.expire_all()
    assert seeded.db.get(Application, application.id).status == "pending"


def test_get_interview_full_view_flag(seeded, application):
    interview = svc.create_interview(
        seeded.db, seeded.acme_main, InterviewCreate(application_id=application.id, online=True)
    )
    recruit_claims = TokenClaims(user_id=seeded.recruit.user_id, role="RECRUIT")
    recruiter_claims = TokenClaims(user_id=seeded.acme_member.user_id, role="RECRUITER")

    _, full = svc.get_interview(seeded.db, interview.id, recruit_claims)
    assert full is False
    _, full = svc.get_interview(seeded.db, interview.id, recruiter_claims)
    assert full is True
    with pytest.raises(Forbidden):
        svc.get_interview(seeded.db, interview.id, TokenClaims(user_id=seeded.globex_main.user_id, role="RECRUITER"))
    with pytest.raises(NotFound):
        svc.get_interview(seeded.db, 777, recruit_claims)


def test_update_toggles_links(seeded, application):
    interview = svc.create_interview(seeded.db, seeded.acme_main, InterviewCreate(application_id=application.id))

    online = svc.update_interview(seeded.db, interview.id, seeded.acme_main, InterviewUpdate(online=True))
    _assert_link(online.join_meeting_url, "j")

    offline = svc.update_interview(
        seeded.db, interview.id, seeded.acme_main, InterviewUpdate(online=False, status="completed")
    )
    assert offline.join_meeting_url is None
    assert offline.start_meeting_url is None
    assert offline.status == "completed"


def test_listings(seeded, application):
    svc.create_interview(seeded.db, seeded.acme_main, InterviewCreate(application_id=application.id))
    assert len(svc.list_interviews_by_recruit(seeded.db, seeded.recruit.id)) == 1
    assert len(svc.list_interviews_by_job_offer(seeded.db, seeded.acme_offer.id, seeded.acme.id)) == 1
    assert svc.list_interviews_by_job_offer(seeded.db, seeded.acme_offer.id, seeded.globex.id) == []
    assert len(svc.list_all_interviews(seeded.db)) == 1


def test_delete_interview_scoped(seeded, application):
    interview = svc.create_interview(seeded.db, seeded.acme_main, InterviewCreate(application_id=application.id))
    with pytest.raises(NotFound):
        svc.delete_interview(seeded.db, interview.id, seeded.globex_main)
    svc.delete_interview(seeded.db, interview.id, seeded.acme_member)
    assert svc.list_all_interviews(seeded.db) == []


def test_failed_scheduling_leaves_no_interview(seeded, application, monkeypatch):
    application_id = application.id

    def _fail(*args, **kwargs):
        raise RuntimeError("audit store unavailable")

    monkeypatch.setattr(svc, "log_activity", _fail)
    with pytest.raises(RuntimeError):
        svc.create_interview(
            seeded.db, seeded.acme_main, InterviewCreate(application_id=application_id, online=True)
        )

    seeded.db.expire_all()
    assert seeded.db.query(Interview).count() == 0
    assert seeded.db.get(Application, application_id).status == "pending"
