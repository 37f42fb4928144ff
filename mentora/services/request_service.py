# mentora/services/request_service.py
"""
Mentorship Request Service

Lifecycle of a request between a mentee and a mentor:

    PENDING -> ACCEPTED | REJECTED   (both terminal)

Admin matches are inserted directly as ACCEPTED. Status changes are
conditional updates on the expected previous status, so two concurrent
decisions cannot both succeed.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mentora.crud import request as request_crud
from mentora.crud import user as user_crud
from mentora.database import commit
from mentora.exceptions import ConflictError, InvalidInputError, InvalidStateError, NotFoundError
from mentora.models.request import MentorshipRequest, RequestStatus
from mentora.models.user import User, UserRole
from mentora.services.authorization import ensure_party, ensure_role

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 1000
DEFAULT_MATCH_MESSAGE = "Admin assigned match."
DECISION_STATUSES = (RequestStatus.ACCEPTED, RequestStatus.REJECTED)


def _clean_message(message: Optional[str], *, required: bool) -> str:
    cleaned = (message or "").strip()
    if required and not cleaned:
        raise InvalidInputError("Mentor ID and message are required to send a request.")
    if len(cleaned) > MAX_MESSAGE_LENGTH:
        raise InvalidInputError(f"Message cannot exceed {MAX_MESSAGE_LENGTH} characters.")
    return cleaned


def _parse_decision(new_status) -> RequestStatus:
    value = str(getattr(new_status, "value", new_status) or "").strip().upper()
    if value not in {status.value for status in DECISION_STATUSES}:
        raise InvalidInputError(
            "Invalid or missing status provided. Must be 'ACCEPTED' or 'REJECTED'."
        )
    return RequestStatus(value)


# ======================
# SEND REQUEST
# ======================

def send_request(
    db: Session,
    mentee: User,
    mentor_id: int,
    message: Optional[str],
) -> MentorshipRequest:
    """
    Create a PENDING request from a mentee to a mentor.

    Args:
        db: Database session
        mentee: Acting principal, must have the mentee role
        mentor_id: Target user ID, must have the mentor role
        message: Note to the mentor (required, max 1000 chars)

    Returns:
        The created MentorshipRequest

    Raises:
        InvalidRoleError: caller is not a mentee
        InvalidInputError: message missing or too long
        NotFoundError: mentor_id does not resolve to a mentor
        ConflictError: a PENDING request for this pair already exists
    """
    ensure_role(mentee, UserRole.MENTEE, action="send requests")
    cleaned = _clean_message(message, required=True)

    mentor = user_crud.get_user_with_role(db, mentor_id, UserRole.MENTOR)
    if not mentor:
        raise NotFoundError("Selected mentor not found or is not a mentor.")

    if request_crud.find_request_for_pair(db, mentee.id, mentor.id, RequestStatus.PENDING):
        logger.warning(
            "Duplicate pending request rejected (mentee_id=%s, mentor_id=%s)", mentee.id, mentor.id
        )
        raise ConflictError("A pending request to this mentor already exists.")

    try:
        request = request_crud.create_request(
            db,
            mentee_id=mentee.id,
            mentor_id=mentor.id,
            message=cleaned,
        )
        commit(db, action="sending a mentorship request")
    except IntegrityError:
        # Lost a race against a concurrent send for the same pair.
        db.rollback()
        raise ConflictError("A pending request to this mentor already exists.")

    db.refresh(request)
    logger.info(
        "Request created (request_id=%s, mentee_id=%s, mentor_id=%s)",
        request.id, mentee.id, mentor.id,
    )
    return request


# ======================
# DECIDE REQUEST
# ======================

def update_request_status(
    db: Session,
    request_id: int,
    new_status,
    acting_user: User,
) -> MentorshipRequest:
    """Accept or reject a PENDING request as its mentor of record."""
    decision = _parse_decision(new_status)

    request = request_crud.get_request(db, request_id)
    if not request:
        raise NotFoundError("Request not found.")
    ensure_party(acting_user, request.mentor_id, action="update this request")

    if not request_crud.transition_status(
        db, request.id, expected=RequestStatus.PENDING, new_status=decision
    ):
        db.rollback()
        current = RequestStatus(request.status).value
        logger.warning(
            "Request transition rejected (request_id=%s, current=%s, wanted=%s)",
            request.id, current, decision.value,
        )
        raise InvalidStateError(f"Request status is already {current} and cannot be changed.")

    commit(db, action="updating request status")
    db.refresh(request)
    logger.info("Request %s moved to %s", request.id, decision.value)
    return request


# ======================
# ADMIN MATCH
# ======================

def create_match(
    db: Session,
    admin: User,
    mentee_id: int,
    mentor_id: int,
    message: Optional[str] = None,
) -> MentorshipRequest:
    """Insert an ACCEPTED request directly, skipping PENDING."""
    ensure_role(admin, UserRole.ADMIN, action="create matches")

    mentee = user_crud.get_user_with_role(db, mentee_id, UserRole.MENTEE)
    if not mentee:
        raise NotFoundError("Mentee not found or is not a mentee role.")
    mentor = user_crud.get_user_with_role(db, mentor_id, UserRole.MENTOR)
    if not mentor:
        raise NotFoundError("Mentor not found or is not a mentor role.")

    # Checked here only. Accepting a sent request may still leave a pair with
    # several ACCEPTED rows, so no unique index backs this.
    if request_crud.find_request_for_pair(db, mentee.id, mentor.id, RequestStatus.ACCEPTED):
        raise ConflictError("An active mentorship match already exists between these users.")

    match = request_crud.create_request(
        db,
        mentee_id=mentee.id,
        mentor_id=mentor.id,
        message=_clean_message(message, required=False) or DEFAULT_MATCH_MESSAGE,
        status=RequestStatus.ACCEPTED,
    )
    commit(db, action="creating an admin match")
    db.refresh(match)
    logger.info(
        "Admin match created (request_id=%s, admin_id=%s, mentee_id=%s, mentor_id=%s)",
        match.id, admin.id, mentee.id, mentor.id,
    )
    return match


# ======================
# LISTING
# ======================

def list_requests(db: Session, user: User, role: str) -> List[MentorshipRequest]:
    """role='sent' lists a mentee's requests, role='received' a mentor's."""
    normalized = (role or "").strip().lower()
    if normalized == "sent":
        ensure_role(user, UserRole.MENTEE, action="view their sent requests")
        return request_crud.list_requests_for_mentee(db, user.id)
    if normalized == "received":
        ensure_role(user, UserRole.MENTOR, action="view their received requests")
        return request_crud.list_requests_for_mentor(db, user.id)
    raise InvalidInputError("role must be one of: sent, received")


def list_matches(db: Session, admin: User) -> List[MentorshipRequest]:
    ensure_role(admin, UserRole.ADMIN, action="view matches")
    return request_crud.list_requests_by_status(db, RequestStatus.ACCEPTED)
