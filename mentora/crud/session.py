# mentora/crud/session.py
"""Database operations for booked sessions."""

from datetime import datetime
from typing import Dict, Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from mentora.models.session import Session as SessionModel, SessionStatus


def create_session(
    db: Session,
    *,
    mentor_id: int,
    mentee_id: int,
    date: datetime,
    notes: str = "",
) -> SessionModel:
    session = SessionModel(
        mentor_id=mentor_id,
        mentee_id=mentee_id,
        date=date,
        status=SessionStatus.SCHEDULED,
        notes=notes,
        mentee_feedback="",
        mentor_feedback="",
    )
    db.add(session)
    db.flush()
    return session


def get_session(db: Session, session_id: int) -> Optional[SessionModel]:
    return db.query(SessionModel).filter(SessionModel.id == session_id).first()


def find_active_session_at(db: Session, mentor_id: int, date: datetime) -> Optional[SessionModel]:
    return db.query(SessionModel).filter(
        SessionModel.mentor_id == mentor_id,
        SessionModel.date == date,
        SessionModel.status != SessionStatus.CANCELLED,
    ).first()


def transition_status(
    db: Session,
    session_id: int,
    *,
    allowed_from: Iterable[SessionStatus],
    new_status: SessionStatus,
) -> bool:
    """Conditional status update; False when the session was not in an allowed state."""
    updated = db.query(SessionModel).filter(
        SessionModel.id == session_id,
        SessionModel.status.in_(list(allowed_from)),
    ).update(
        {SessionModel.status: new_status, SessionModel.updated_at: func.now()},
        synchronize_session=False,
    )
    return updated == 1


def update_feedback(db: Session, session: SessionModel, fields: Dict[str, object]) -> SessionModel:
    for key, value in fields.items():
        setattr(session, key, value)
    db.flush()
    return session


def list_sessions_for_user(
    db: Session,
    user_id: int,
    status: Optional[SessionStatus] = None,
) -> List[SessionModel]:
    query = db.query(SessionModel).options(
        joinedload(SessionModel.mentor), joinedload(SessionModel.mentee)
    ).filter(
        (SessionModel.mentee_id == user_id) | (SessionModel.mentor_id == user_id)
    )
    if status is not None:
        query = query.filter(SessionModel.status == status)
    return query.order_by(SessionModel.date.desc(), SessionModel.id.desc()).all()


def list_all_sessions(db: Session, status: Optional[SessionStatus] = None) -> List[SessionModel]:
    query = db.query(SessionModel).options(
        joinedload(SessionModel.mentor), joinedload(SessionModel.mentee)
    )
    if status is not None:
        query = query.filter(SessionModel.status == status)
    return query.order_by(SessionModel.date.desc(), SessionModel.id.desc()).all()


def delete_all_sessions(db: Session) -> int:
    return db.query(SessionModel).delete(synchronize_session=False)
