"""Full mentee/mentor journey through the router functions."""

from datetime import date, datetime

from mentora.api.mentor import update_my_availability
from mentora.api.request import send_request, update_request_status
from mentora.api.session import book_session, complete_session, submit_feedback
from mentora.models.request import RequestStatus
from mentora.models.session import SessionStatus
from mentora.models.user import UserRole
from mentora.schemas.availability import AvailabilityUpdate
from mentora.schemas.request import RequestCreate, RequestStatusUpdate
from mentora.schemas.session import FeedbackSubmit, SessionCreate, SessionResponse
from mentora.services import availability_service

TODAY = date(2026, 10, 21)  # a Wednesday


def test_request_accept_book_complete_feedback(db_session, make_user):
    mentee = make_user(UserRole.MENTEE)
    mentor = make_user(UserRole.MENTOR, name="Mentor X")

    update_my_availability(
        payload=AvailabilityUpdate(
            availability=[{"day": "Monday", "startTime": "09:00", "endTime": "10:00"}]
        ),
        current_user=mentor,
        db=db_session,
    )

    request = send_request(
        payload=RequestCreate(mentor_id=mentor.id, message="Let's talk"),
        current_user=mentee,
        db=db_session,
    )
    assert request.status == RequestStatus.PENDING

    request = update_request_status(
        request_id=request.id,
        payload=RequestStatusUpdate(status="ACCEPTED"),
        current_user=mentor,
        db=db_session,
    )
    assert request.status == RequestStatus.ACCEPTED

    slots = list(availability_service.get_mentor_slots(db_session, mentor.id, now=TODAY, horizon_days=30))
    assert [s.date for s in slots] == [
        date(2026, 10, 26),
        date(2026, 11, 2),
        date(2026, 11, 9),
        date(2026, 11, 16),
    ]

    session = book_session(
        payload=SessionCreate(mentor_id=mentor.id, date=slots[0].starts_at),
        current_user=mentee,
        db=db_session,
    )
    assert session.status == SessionStatus.SCHEDULED
    assert session.date == datetime(2026, 10, 26, 9, 0)

    session = complete_session(session_id=session.id, current_user=mentor, db=db_session)
    assert session.status == SessionStatus.COMPLETED

    session = submit_feedback(
        session_id=session.id,
        payload=FeedbackSubmit(mentee_rating=5, mentee_feedback="Great session"),
        current_user=mentee,
        db=db_session,
    )
    assert session.mentee_rating == 5

    session = submit_feedback(
        session_id=session.id,
        payload=FeedbackSubmit(mentor_feedback="Attentive mentee"),
        current_user=mentor,
        db=db_session,
    )

    body = SessionResponse.model_validate(session).model_dump(by_alias=True)
    assert body["status"] == SessionStatus.COMPLETED
    assert body["menteeRating"] == 5
    assert body["menteeFeedback"] == "Great session"
    assert body["mentorFeedback"] == "Attentive mentee"
