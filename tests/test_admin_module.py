from datetime import datetime

import pytest
from fastapi import HTTPException

from mentora.api.admin import (
    clear_sessions,
    create_match,
    create_user,
    delete_user,
    get_all_sessions,
    get_all_users,
    get_matches,
    update_user_role,
)
from mentora.exceptions import ConflictError, InvalidRoleError, NotFoundError
from mentora.models.request import MentorshipRequest, RequestStatus
from mentora.models.session import Session as SessionModel
from mentora.models.user import AvailabilityBlock, User, UserRole
from mentora.schemas.request import MatchCreate
from mentora.schemas.user import AdminUserCreate, RoleUpdate
from mentora.services import availability_service, request_service, session_service


@pytest.fixture
def admin(make_user):
    return make_user(UserRole.ADMIN)


def test_create_match_then_conflict(db_session, admin, make_user):
    mentee = make_user(UserRole.MENTEE)
    mentor = make_user(UserRole.MENTOR)

    match = create_match(
        payload=MatchCreate(mentee_id=mentee.id, mentor_id=mentor.id),
        admin=admin,
        db=db_session,
    )
    assert match.status == RequestStatus.ACCEPTED
    assert match.message == "Admin assigned match."

    with pytest.raises(HTTPException) as exc_info:
        create_match(
            payload=MatchCreate(mentee_id=mentee.id, mentor_id=mentor.id),
            admin=admin,
            db=db_session,
        )
    assert exc_info.value.status_code == 409
    assert exc_info.value.headers["X-Error-Code"] == "conflict"

    matches = get_matches(admin=admin, db=db_session)
    assert [m.id for m in matches] == [match.id]


def test_create_match_ignores_pending_request(db_session, admin, make_user):
    mentee = make_user(UserRole.MENTEE)
    mentor = make_user(UserRole.MENTOR)
    request_service.send_request(db_session, mentee, mentor.id, "Let's talk")

    match = request_service.create_match(db_session, admin, mentee.id, mentor.id, "Fast-tracked")

    assert match.status == RequestStatus.ACCEPTED
    assert match.message == "Fast-tracked"
    assert db_session.query(MentorshipRequest).count() == 2


def test_accepted_request_may_follow_admin_match(db_session, admin, make_user):
    mentee = make_user(UserRole.MENTEE)
    mentor = make_user(UserRole.MENTOR)
    match = request_service.create_match(db_session, admin, mentee.id, mentor.id)

    request = request_service.send_request(db_session, mentee, mentor.id, "Follow-up topics")
    accepted = request_service.update_request_status(db_session, request.id, "ACCEPTED", mentor)
    assert accepted.status == RequestStatus.ACCEPTED

    matches = request_service.list_matches(db_session, admin)
    assert sorted(m.id for m in matches) == sorted([match.id, request.id])

    with pytest.raises(ConflictError):
        request_service.create_match(db_session, admin, mentee.id, mentor.id)


def test_create_match_requires_admin_and_valid_roles(db_session, admin, make_user):
    mentee = make_user(UserRole.MENTEE)
    mentor = make_user(UserRole.MENTOR)

    with pytest.raises(InvalidRoleError):
        request_service.create_match(db_session, mentee, mentee.id, mentor.id)
    with pytest.raises(NotFoundError):
        request_service.create_match(db_session, admin, mentor.id, mentor.id)
    with pytest.raises(NotFoundError):
        request_service.create_match(db_session, admin, mentee.id, mentee.id)


def test_admin_user_management(db_session, admin, make_user):
    created = create_user(
        payload=AdminUserCreate(
            name="New Mentor", email="New.Mentor@Test.org", password="Password123", role="mentor"
        ),
        admin=admin,
        db=db_session,
    )
    assert created.role == UserRole.MENTOR
    assert created.email == "new.mentor@test.org"

    with pytest.raises(HTTPException) as exc_info:
        create_user(
            payload=AdminUserCreate(
                name="Dup", email="new.mentor@test.org", password="Password123", role="mentee"
            ),
            admin=admin,
            db=db_session,
        )
    assert exc_info.value.status_code == 409

    mentors = get_all_users(role="mentor", admin=admin, db=db_session)
    assert [u.id for u in mentors] == [created.id]

    updated = update_user_role(
        user_id=created.id, payload=RoleUpdate(role="mentee"), admin=admin, db=db_session
    )
    assert updated.role == UserRole.MENTEE

    with pytest.raises(HTTPException) as exc_info:
        update_user_role(user_id=99999, payload=RoleUpdate(role="mentee"), admin=admin, db=db_session)
    assert exc_info.value.status_code == 404


def test_non_admin_blocked_everywhere(db_session, make_user):
    mentor = make_user(UserRole.MENTOR)
    for call in (
        lambda: get_all_users(role=None, admin=mentor, db=db_session),
        lambda: get_matches(admin=mentor, db=db_session),
        lambda: get_all_sessions(status=None, admin=mentor, db=db_session),
        lambda: clear_sessions(admin=mentor, db=db_session),
        lambda: delete_user(user_id=mentor.id, admin=mentor, db=db_session),
    ):
        with pytest.raises(HTTPException) as exc_info:
            call()
        assert exc_info.value.status_code == 403
        assert exc_info.value.headers["X-Error-Code"] == "invalid_role"


def test_delete_user_cascades(db_session, admin, make_user):
    mentee = make_user(UserRole.MENTEE)
    mentor = make_user(UserRole.MENTOR)
    bystander = make_user(UserRole.MENTEE)
    availability_service.replace_availability(
        db_session, mentor, [{"day": "Monday", "start_time": "09:00", "end_time": "10:00"}]
    )
    request_service.send_request(db_session, mentee, mentor.id, "Let's talk")
    request_service.send_request(db_session, bystander, mentor.id, "Me too")
    session_service.book_session(db_session, mentee, mentor.id, datetime(2026, 10, 26, 9, 0))
    mentor_id = mentor.id

    response = delete_user(user_id=mentor_id, admin=admin, db=db_session)

    assert response["user_id"] == mentor_id
    assert db_session.query(User).filter(User.id == mentor_id).first() is None
    assert db_session.query(MentorshipRequest).count() == 0
    assert db_session.query(SessionModel).count() == 0
    assert db_session.query(AvailabilityBlock).count() == 0
    assert db_session.query(User).filter(User.id == bystander.id).first() is not None

    with pytest.raises(HTTPException) as exc_info:
        delete_user(user_id=mentor_id, admin=admin, db=db_session)
    assert exc_info.value.status_code == 404


def test_admin_session_oversight(db_session, admin, make_user):
    mentee = make_user(UserRole.MENTEE)
    mentor = make_user(UserRole.MENTOR)
    session = session_service.book_session(db_session, mentee, mentor.id, datetime(2026, 10, 26, 9, 0))
    session_service.mark_completed(db_session, session.id, mentor)
    session_service.submit_feedback(db_session, session.id, mentee, rating=5, mentee_comment="Great")

    listed = get_all_sessions(status=None, admin=admin, db=db_session)
    assert len(listed) == 1
    assert listed[0].mentee.name == mentee.name
    assert listed[0].mentee_feedback == "Great"

    result = clear_sessions(admin=admin, db=db_session)
    assert result["deleted"] == 1
    assert get_all_sessions(status=None, admin=admin, db=db_session) == []


def test_admin_cannot_delete_or_demote_self(db_session, admin):
    with pytest.raises(HTTPException) as exc_info:
        delete_user(user_id=admin.id, admin=admin, db=db_session)
    assert exc_info.value.status_code == 400

    with pytest.raises(HTTPException) as exc_info:
        update_user_role(user_id=admin.id, payload=RoleUpdate(role="mentor"), admin=admin, db=db_session)
    assert exc_info.value.status_code == 400
