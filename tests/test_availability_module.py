from datetime import date

import pytest
from fastapi import HTTPException

from mentora.api.mentor import (
    get_mentor,
    get_mentor_slots,
    get_my_availability,
    list_mentors,
    update_my_availability,
)
from mentora.exceptions import InvalidInputError, InvalidRoleError, NotFoundError
from mentora.models.user import DayOfWeek, UserRole
from mentora.schemas.availability import AvailabilityUpdate
from mentora.services import availability_service

MONDAY = date(2026, 10, 19)


def _payload(*blocks):
    return AvailabilityUpdate(
        availability=[{"day": d, "startTime": s, "endTime": e} for d, s, e in blocks]
    )


def test_replace_availability_normalises_and_keeps_order(db_session, make_user):
    mentor = make_user(UserRole.MENTOR)

    response = update_my_availability(
        payload=_payload(("Wednesday", "14:00", "15:00"), ("Monday", "9:00", "10:00")),
        current_user=mentor,
        db=db_session,
    )

    assert [(b.day, b.start_time, b.end_time) for b in response.availability] == [
        (DayOfWeek.WEDNESDAY, "14:00", "15:00"),
        (DayOfWeek.MONDAY, "09:00", "10:00"),
    ]
    stored = get_my_availability(current_user=mentor, db=db_session)
    assert [b.day for b in stored.availability] == [DayOfWeek.WEDNESDAY, DayOfWeek.MONDAY]


def test_replace_availability_overwrites_whole_list(db_session, make_user):
    mentor = make_user(UserRole.MENTOR)
    availability_service.replace_availability(
        db_session, mentor, [{"day": "Monday", "start_time": "09:00", "end_time": "10:00"}]
    )
    availability_service.replace_availability(
        db_session, mentor, [{"day": "Friday", "start_time": "16:00", "end_time": "17:30"}]
    )

    blocks = availability_service.get_availability(db_session, mentor)
    assert [(b.day, b.start_time) for b in blocks] == [(DayOfWeek.FRIDAY, "16:00")]

    availability_service.replace_availability(db_session, mentor, [])
    assert availability_service.get_availability(db_session, mentor) == []


@pytest.mark.parametrize(
    "block",
    [
        {"day": "Funday", "start_time": "09:00", "end_time": "10:00"},
        {"day": "Monday", "start_time": "25:00", "end_time": "26:00"},
        {"day": "Monday", "start_time": "9am", "end_time": "10:00"},
        {"day": "Monday", "start_time": "10:00", "end_time": "10:00"},
        {"day": "Monday", "start_time": "11:00", "end_time": "10:00"},
    ],
)
def test_malformed_blocks_rejected(db_session, make_user, block):
    mentor = make_user(UserRole.MENTOR)
    with pytest.raises(InvalidInputError):
        availability_service.replace_availability(db_session, mentor, [block])
    assert availability_service.get_availability(db_session, mentor) == []


def test_only_mentors_manage_availability(db_session, make_user):
    mentee = make_user(UserRole.MENTEE)
    with pytest.raises(InvalidRoleError):
        availability_service.replace_availability(db_session, mentee, [])

    with pytest.raises(HTTPException) as exc_info:
        get_my_availability(current_user=mentee, db=db_session)
    assert exc_info.value.status_code == 403
    assert exc_info.value.headers["X-Error-Code"] == "invalid_role"


def test_mentor_slots_resolve_from_stored_blocks(db_session, make_user):
    mentor = make_user(UserRole.MENTOR)
    availability_service.replace_availability(
        db_session,
        mentor,
        [
            {"day": "Monday", "start_time": "13:00", "end_time": "14:00"},
            {"day": "Monday", "start_time": "09:00", "end_time": "10:00"},
        ],
    )

    slots = list(availability_service.get_mentor_slots(db_session, mentor.id, now=MONDAY, horizon_days=8))
    assert [(s.date, s.start_time) for s in slots] == [
        (MONDAY, "09:00"),
        (MONDAY, "13:00"),
        (date(2026, 10, 26), "09:00"),
        (date(2026, 10, 26), "13:00"),
    ]


def test_mentor_slots_validation(db_session, make_user):
    mentor = make_user(UserRole.MENTOR)
    mentee = make_user(UserRole.MENTEE)

    with pytest.raises(NotFoundError):
        availability_service.get_mentor_slots(db_session, mentee.id)
    with pytest.raises(InvalidInputError):
        availability_service.get_mentor_slots(db_session, mentor.id, horizon_days=0)
    with pytest.raises(InvalidInputError):
        availability_service.get_mentor_slots(db_session, mentor.id, horizon_days=91)


def test_slots_endpoint_returns_bookable_datetimes(db_session, make_user):
    mentor = make_user(UserRole.MENTOR)
    mentee = make_user(UserRole.MENTEE)
    availability_service.replace_availability(
        db_session,
        mentor,
        [{"day": day.value, "start_time": "18:00", "end_time": "19:00"} for day in DayOfWeek],
    )

    slots = get_mentor_slots(mentor_id=mentor.id, days=7, current_user=mentee, db=db_session)
    assert len(slots) == 7
    assert {s.day for s in slots} == set(DayOfWeek)
    for slot in slots:
        assert slot.starts_at.date() == slot.date
        assert (slot.starts_at.hour, slot.ends_at.hour) == (18, 19)
    assert "startsAt" in slots[0].model_dump(by_alias=True)

    with pytest.raises(HTTPException) as exc_info:
        get_mentor_slots(mentor_id=mentor.id, days=365, current_user=mentee, db=db_session)
    assert exc_info.value.status_code == 400


def test_mentor_directory_and_profile(db_session, make_user):
    python_mentor = make_user(UserRole.MENTOR, skills=["Python", "SQL"])
    make_user(UserRole.MENTOR, skills=["Design"])
    mentee = make_user(UserRole.MENTEE)
    availability_service.replace_availability(
        db_session, python_mentor, [{"day": "Tuesday", "start_time": "10:00", "end_time": "11:00"}]
    )

    assert len(list_mentors(skill=None, current_user=mentee, db=db_session)) == 2
    filtered = list_mentors(skill="python", current_user=mentee, db=db_session)
    assert [m.id for m in filtered] == [python_mentor.id]

    profile = get_mentor(mentor_id=python_mentor.id, current_user=mentee, db=db_session)
    assert [b.day for b in profile.availability] == [DayOfWeek.TUESDAY]

    with pytest.raises(HTTPException) as exc_info:
        get_mentor(mentor_id=mentee.id, current_user=mentee, db=db_session)
    assert exc_info.value.status_code == 404
