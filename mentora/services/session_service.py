# mentora/services/session_service.py
"""
Session Service

Booking, completion, cancellation and feedback for mentorship sessions.

    SCHEDULED -> COMPLETED   (mentor of record)
    SCHEDULED -> CANCELLED   (either party)

PENDING_FEEDBACK exists in the status enum but no operation assigns it.
Feedback is independent of status and may be overwritten.
"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mentora.config import settings
from mentora.crud import request as request_crud
from mentora.crud import session as session_crud
from mentora.crud import user as user_crud
from mentora.database import commit
from mentora.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    InvalidStateError,
    NotFoundError,
)
from mentora.models.request import RequestStatus
from mentora.models.session import Session as SessionModel, SessionStatus
from mentora.models.user import User, UserRole
from mentora.services.authorization import ensure_party, ensure_role, has_role

logger = logging.getLogger(__name__)

MAX_FEEDBACK_LENGTH = 1000
COMPLETABLE_STATUSES = (SessionStatus.SCHEDULED, SessionStatus.PENDING_FEEDBACK)
CANCELLABLE_STATUSES = (SessionStatus.SCHEDULED,)


def to_wall_clock(value: datetime) -> datetime:
    """Keep the clock reading as given; drop any offset and sub-second part."""
    return value.replace(tzinfo=None, microsecond=0)


def _get_session_or_404(db: Session, session_id: int) -> SessionModel:
    session = session_crud.get_session(db, session_id)
    if not session:
        raise NotFoundError("Session not found.")
    return session


# ======================
# BOOK SESSION
# ======================

def book_session(
    db: Session,
    principal: User,
    mentor_id: int,
    date: Optional[datetime],
    *,
    mentee_id: Optional[int] = None,
    notes: Optional[str] = None,
) -> SessionModel:
    """
    Book a SCHEDULED session with a mentor.

    A mentee books for themselves; an admin books on behalf of the mentee
    named by mentee_id. The date is not checked against the mentor's
    resolved slots.

    Raises:
        InvalidRoleError: caller is neither mentee nor admin
        InvalidInputError: date missing, or admin without mentee_id
        ForbiddenError: mentee booking for someone else, or (when required
            by settings) no ACCEPTED request between the pair
        NotFoundError: mentor or mentee does not resolve
        ConflictError: mentor already has a live session at that time
    """
    ensure_role(principal, UserRole.MENTEE, UserRole.ADMIN, action="book sessions")

    if has_role(principal, UserRole.MENTEE):
        if mentee_id is not None and mentee_id != principal.id:
            raise ForbiddenError("Mentees can only book sessions for themselves.")
        mentee = principal
    else:
        if mentee_id is None:
            raise InvalidInputError("menteeId is required when an admin books a session.")
        mentee = user_crud.get_user_with_role(db, mentee_id, UserRole.MENTEE)
        if not mentee:
            raise NotFoundError("Mentee not found or is not a mentee.")

    if date is None:
        raise InvalidInputError("Mentor ID and session date are required to create a session.")
    scheduled_for = to_wall_clock(date)

    mentor = user_crud.get_user_with_role(db, mentor_id, UserRole.MENTOR)
    if not mentor:
        raise NotFoundError("Selected mentor not found or is not a mentor.")

    if settings.REQUIRE_ACCEPTED_REQUEST_FOR_BOOKING and not request_crud.find_request_for_pair(
        db, mentee.id, mentor.id, RequestStatus.ACCEPTED
    ):
        raise ForbiddenError("An accepted mentorship request is required before booking.")

    if session_crud.find_active_session_at(db, mentor.id, scheduled_for):
        logger.warning(
            "Double booking rejected (mentor_id=%s, date=%s)", mentor.id, scheduled_for.isoformat()
        )
        raise ConflictError("The mentor already has a session booked at this time.")

    try:
        session = session_crud.create_session(
            db,
            mentor_id=mentor.id,
            mentee_id=mentee.id,
            date=scheduled_for,
            notes=(notes or "").strip(),
        )
        commit(db, action="booking a session")
    except IntegrityError:
        # Another booking for the same slot committed after the check above.
        db.rollback()
        logger.warning(
            "Double booking rejected at commit (mentor_id=%s, date=%s)",
            mentor.id, scheduled_for.isoformat(),
        )
        raise ConflictError("The mentor already has a session booked at this time.")
    db.refresh(session)
    logger.info(
        "Session booked (session_id=%s, mentor_id=%s, mentee_id=%s, date=%s)",
        session.id, mentor.id, mentee.id, scheduled_for.isoformat(),
    )
    return session


# ======================
# COMPLETE / CANCEL
# ======================

def mark_completed(db: Session, session_id: int, acting_user: User) -> SessionModel:
    session = _get_session_or_404(db, session_id)
    ensure_party(acting_user, session.mentor_id, action="mark this session as completed")

    if not session_crud.transition_status(
        db, session.id, allowed_from=COMPLETABLE_STATUSES, new_status=SessionStatus.COMPLETED
    ):
        db.rollback()
        current = SessionStatus(session.status)
        if current == SessionStatus.COMPLETED:
            raise InvalidStateError("Session is already marked as completed.")
        raise InvalidStateError(f"Cannot mark a {current.value.lower()} session as completed.")

    commit(db, action="completing a session")
    db.refresh(session)
    logger.info("Session %s marked COMPLETED by mentor %s", session.id, acting_user.id)
    return session


def cancel_session(db: Session, session_id: int, acting_user: User) -> SessionModel:
    session = _get_session_or_404(db, session_id)
    ensure_party(acting_user, session.mentor_id, session.mentee_id, action="cancel this session")

    if not session_crud.transition_status(
        db, session.id, allowed_from=CANCELLABLE_STATUSES, new_status=SessionStatus.CANCELLED
    ):
        db.rollback()
        current = SessionStatus(session.status)
        raise InvalidStateError(f"Cannot cancel a session that is {current.value}.")

    commit(db, action="cancelling a session")
    db.refresh(session)
    logger.info("Session %s CANCELLED by user %s", session.id, acting_user.id)
    return session


# ======================
# FEEDBACK
# ======================

def _clean_feedback(value: Optional[str], field: str) -> Optional[str]:
    if value is None:
        return None
    cleaned = value.strip()
    if len(cleaned) > MAX_FEEDBACK_LENGTH:
        raise InvalidInputError(f"{field} cannot exceed {MAX_FEEDBACK_LENGTH} characters.")
    return cleaned or None


def submit_feedback(
    db: Session,
    session_id: int,
    acting_user: User,
    *,
    rating: Optional[int] = None,
    mentee_comment: Optional[str] = None,
    mentor_comment: Optional[str] = None,
) -> SessionModel:
    """
    Record feedback from one party of a session.

    The mentee of record may set rating and mentee comment; the mentor of
    record may set the mentor comment. Fields belonging to the other party
    are ignored. No status gate: feedback can be resubmitted at any time.
    """
    mentee_comment = _clean_feedback(mentee_comment, "Mentee feedback")
    mentor_comment = _clean_feedback(mentor_comment, "Mentor feedback")

    if rating is None and mentee_comment is None and mentor_comment is None:
        raise InvalidInputError("No feedback or rating provided.")
    if rating is not None:
        if isinstance(rating, bool) or not isinstance(rating, int) or not 1 <= rating <= 5:
            raise InvalidInputError("Mentee rating must be between 1 and 5.")

    session = _get_session_or_404(db, session_id)
    ensure_party(
        acting_user, session.mentee_id, session.mentor_id, action="submit feedback for this session"
    )

    fields = {}
    if acting_user.id == session.mentee_id:
        if rating is not None:
            fields["mentee_rating"] = rating
        if mentee_comment is not None:
            fields["mentee_feedback"] = mentee_comment
    if acting_user.id == session.mentor_id and mentor_comment is not None:
        fields["mentor_feedback"] = mentor_comment

    if not fields:
        raise InvalidInputError("No feedback fields apply to your role in this session.")

    session_crud.update_feedback(db, session, fields)
    commit(db, action="submitting feedback")
    db.refresh(session)
    logger.info(
        "Feedback recorded (session_id=%s, user_id=%s, fields=%s)",
        session.id, acting_user.id, sorted(fields),
    )
    return session


# ======================
# LISTING
# ======================

def _parse_status(status: Optional[str]) -> Optional[SessionStatus]:
    if not status:
        return None
    try:
        return SessionStatus(status.strip().upper())
    except ValueError:
        raise InvalidInputError(
            "status must be one of: " + ", ".join(s.value for s in SessionStatus)
        )


def list_sessions(db: Session, user: User, status: Optional[str] = None) -> List[SessionModel]:
    """Sessions where the user is mentor or mentee, latest date first."""
    return session_crud.list_sessions_for_user(db, user.id, _parse_status(status))


def list_all_sessions(db: Session, admin: User, status: Optional[str] = None) -> List[SessionModel]:
    ensure_role(admin, UserRole.ADMIN, action="view all sessions")
    return session_crud.list_all_sessions(db, _parse_status(status))


def clear_sessions(db: Session, admin: User) -> int:
    """Delete every session. Requests and users are untouched."""
    ensure_role(admin, UserRole.ADMIN, action="clear session history")
    deleted = session_crud.delete_all_sessions(db)
    commit(db, action="clearing sessions")
    logger.warning("Admin %s cleared %s sessions", admin.id, deleted)
    return deleted
