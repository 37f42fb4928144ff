# mentora/api/mentor.py
"""
Mentor Directory & Availability API

Endpoints:
- GET /mentors/ - List mentors (optionally by skill)
- GET /mentors/availability - The calling mentor's weekly availability
- PUT /mentors/availability - Replace the calling mentor's availability
- GET /mentors/{mentor_id} - Mentor profile with availability
- GET /mentors/{mentor_id}/slots - Dated bookable slots for the next N days
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from mentora.api.errors import http_error
from mentora.config import settings
from mentora.database import get_db
from mentora.exceptions import MentoraError
from mentora.models.user import User
from mentora.schemas.availability import AvailabilityResponse, AvailabilityUpdate, SessionSlotResponse
from mentora.schemas.user import MentorListItem, MentorProfile
from mentora.services import availability_service, user_service
from mentora.utils import get_current_user

router = APIRouter(prefix="/mentors", tags=["mentors"])


# ======================
# DIRECTORY
# ======================
@router.get("/", response_model=List[MentorListItem])
def list_mentors(
    skill: Optional[str] = Query(None, description="Only mentors listing this skill"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return user_service.list_mentors(db, skill=skill)


# ======================
# OWN AVAILABILITY
# ======================
# Declared before /{mentor_id} so "availability" is not parsed as an id.
@router.get("/availability", response_model=AvailabilityResponse)
def get_my_availability(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        blocks = availability_service.get_availability(db, current_user)
    except MentoraError as exc:
        raise http_error(exc)
    return AvailabilityResponse(availability=blocks)


@router.put("/availability", response_model=AvailabilityResponse)
def update_my_availability(
    payload: AvailabilityUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Replace the whole list; an empty list clears availability."""
    try:
        blocks = availability_service.replace_availability(db, current_user, payload.availability)
    except MentoraError as exc:
        raise http_error(exc)
    return AvailabilityResponse(availability=blocks)


# ======================
# PUBLIC MENTOR VIEWS
# ======================
@router.get("/{mentor_id}", response_model=MentorProfile)
def get_mentor(
    mentor_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return user_service.get_mentor_profile(db, mentor_id)
    except MentoraError as exc:
        raise http_error(exc)


@router.get("/{mentor_id}/slots", response_model=List[SessionSlotResponse])
def get_mentor_slots(
    mentor_id: int,
    days: int = Query(settings.BOOKING_HORIZON_DAYS, description="Horizon in days, today included"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        slots = availability_service.get_mentor_slots(db, mentor_id, horizon_days=days)
    except MentoraError as exc:
        raise http_error(exc)

    return [
        SessionSlotResponse(
            day=slot.day,
            start_time=slot.start_time,
            end_time=slot.end_time,
            date=slot.date,
            starts_at=slot.starts_at,
            ends_at=slot.ends_at,
        )
        for slot in slots
    ]
