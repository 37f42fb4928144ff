# mentora/api/session.py
"""
Session API

Endpoints:
- POST /sessions/ - Book a session (mentee for themselves, admin for a mentee)
- GET /sessions/ - Sessions where the caller is mentor or mentee
- PUT /sessions/{session_id}/complete - Mentor marks a session completed
- PUT /sessions/{session_id}/cancel - Either party cancels a scheduled session
- PUT /sessions/{session_id}/feedback - Submit rating and/or feedback
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from mentora.api.errors import http_error
from mentora.database import get_db
from mentora.exceptions import MentoraError
from mentora.models.user import User
from mentora.schemas.session import FeedbackSubmit, SessionCreate, SessionResponse
from mentora.services import session_service
from mentora.utils import get_current_user

router = APIRouter(prefix="/sessions", tags=["sessions"])


# ======================
# BOOKING
# ======================
@router.post("/", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
def book_session(
    payload: SessionCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return session_service.book_session(
            db,
            current_user,
            payload.mentor_id,
            payload.date,
            mentee_id=payload.mentee_id,
            notes=payload.notes,
        )
    except MentoraError as exc:
        raise http_error(exc)


# ======================
# SESSION LISTING
# ======================
@router.get("/", response_model=List[SessionResponse])
def get_sessions(
    status: Optional[str] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Sessions for the current user, optionally filtered by status."""
    try:
        return session_service.list_sessions(db, current_user, status)
    except MentoraError as exc:
        raise http_error(exc)


# ======================
# STATUS CHANGES
# ======================
@router.put("/{session_id}/complete", response_model=SessionResponse)
def complete_session(
    session_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return session_service.mark_completed(db, session_id, current_user)
    except MentoraError as exc:
        raise http_error(exc)


@router.put("/{session_id}/cancel", response_model=SessionResponse)
def cancel_session(
    session_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return session_service.cancel_session(db, session_id, current_user)
    except MentoraError as exc:
        raise http_error(exc)


# ======================
# FEEDBACK
# ======================
@router.put("/{session_id}/feedback", response_model=SessionResponse)
def submit_feedback(
    session_id: int,
    payload: FeedbackSubmit,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return session_service.submit_feedback(
            db,
            session_id,
            current_user,
            rating=payload.mentee_rating,
            mentee_comment=payload.mentee_feedback,
            mentor_comment=payload.mentor_feedback,
        )
    except MentoraError as exc:
        raise http_error(exc)
