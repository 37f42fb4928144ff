# mentora/crud/request.py
"""Database operations for mentorship requests."""

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from mentora.models.request import MentorshipRequest, RequestStatus


def create_request(
    db: Session,
    *,
    mentee_id: int,
    mentor_id: int,
    message: str,
    status: RequestStatus = RequestStatus.PENDING,
) -> MentorshipRequest:
    request = MentorshipRequest(
        mentee_id=mentee_id,
        mentor_id=mentor_id,
        message=message,
        status=status,
    )
    db.add(request)
    db.flush()
    return request


def get_request(db: Session, request_id: int) -> Optional[MentorshipRequest]:
    return db.query(MentorshipRequest).filter(MentorshipRequest.id == request_id).first()


def find_request_for_pair(
    db: Session,
    mentee_id: int,
    mentor_id: int,
    status: RequestStatus,
) -> Optional[MentorshipRequest]:
    return db.query(MentorshipRequest).filter(
        MentorshipRequest.mentee_id == mentee_id,
        MentorshipRequest.mentor_id == mentor_id,
        MentorshipRequest.status == status,
    ).first()


def transition_status(
    db: Session,
    request_id: int,
    *,
    expected: RequestStatus,
    new_status: RequestStatus,
) -> bool:
    """
    Conditionally move a request from ``expected`` to ``new_status``.

    Returns False when no row matched, i.e. the request was not in the
    expected state at write time.
    """
    updated = db.query(MentorshipRequest).filter(
        MentorshipRequest.id == request_id,
        MentorshipRequest.status == expected,
    ).update(
        {MentorshipRequest.status: new_status, MentorshipRequest.updated_at: func.now()},
        synchronize_session=False,
    )
    return updated == 1


def list_requests_for_mentee(db: Session, mentee_id: int) -> List[MentorshipRequest]:
    return (
        db.query(MentorshipRequest)
        .options(joinedload(MentorshipRequest.mentor))
        .filter(MentorshipRequest.mentee_id == mentee_id)
        .order_by(MentorshipRequest.created_at.desc(), MentorshipRequest.id.desc())
        .all()
    )


def list_requests_for_mentor(db: Session, mentor_id: int) -> List[MentorshipRequest]:
    return (
        db.query(MentorshipRequest)
        .options(joinedload(MentorshipRequest.mentee))
        .filter(MentorshipRequest.mentor_id == mentor_id)
        .order_by(MentorshipRequest.created_at.desc(), MentorshipRequest.id.desc())
        .all()
    )


def list_requests_by_status(db: Session, status: RequestStatus) -> List[MentorshipRequest]:
    return (
        db.query(MentorshipRequest)
        .options(joinedload(MentorshipRequest.mentor), joinedload(MentorshipRequest.mentee))
        .filter(MentorshipRequest.status == status)
        .order_by(MentorshipRequest.created_at.desc(), MentorshipRequest.id.desc())
        .all()
    )
