from typing import List, Optional

from sqlalchemy.orm import Session

from mentora import models
from mentora.utils.security import get_password_hash


def create_user(db: Session, *, name: str, email: str, password: str, role: models.UserRole) -> models.User:
    db_user = models.User(
        name=name,
        email=email.lower(),
        password_hash=get_password_hash(password),
        role=role,
        is_active=True,
        skills=[],
        goals=[],
        interests=[],
    )
    db.add(db_user)
    db.flush()
    return db_user


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email.lower()).first()


def get_user(db: Session, user_id: int) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user_with_role(db: Session, user_id: int, role: models.UserRole) -> Optional[models.User]:
    return db.query(models.User).filter(
        models.User.id == user_id,
        models.User.role == role,
    ).first()


def get_users(db: Session, role: Optional[models.UserRole] = None) -> List[models.User]:
    query = db.query(models.User)
    if role is not None:
        query = query.filter(models.User.role == role)
    return query.order_by(models.User.created_at.desc(), models.User.id.desc()).all()


def update_user_profile(db: Session, user: models.User, update_data: dict) -> models.User:
    for key, value in update_data.items():
        setattr(user, key, value)
    db.flush()
    return user


def delete_user_cascade(db: Session, user_id: int) -> None:
    """Delete a user with every request, session and availability block they appear in."""
    db.query(models.Session).filter(
        (models.Session.mentee_id == user_id) | (models.Session.mentor_id == user_id)
    ).delete(synchronize_session=False)
    db.query(models.MentorshipRequest).filter(
        (models.MentorshipRequest.mentee_id == user_id) | (models.MentorshipRequest.mentor_id == user_id)
    ).delete(synchronize_session=False)
    db.query(models.AvailabilityBlock).filter(
        models.AvailabilityBlock.mentor_id == user_id
    ).delete(synchronize_session=False)
    db.query(models.User).filter(models.User.id == user_id).delete(synchronize_session=False)
